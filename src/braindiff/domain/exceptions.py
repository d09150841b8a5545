"""Domain layer exceptions.

All domain-specific exceptions inherit from DomainError. These are raised
directly by the layer that detects the problem; failures coming out of the
database are wrapped with ``braindiff.shared.result.wrap`` instead.
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: str, details: dict[str, Any] | None = None) -> None:
        message = f"{entity_type} not found: {entity_id}"
        super().__init__(message, details)
        self.entity_type = entity_type
        self.entity_id = entity_id


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, value: Any = None) -> None:
        full_message = f"Validation error for '{field}': {message}"
        details = {"field": field, "value": value}
        super().__init__(full_message, details)
        self.field = field
        self.value = value


class InvalidProficiencyRangeError(ValidationError):
    def __init__(self, lower: int, upper: int) -> None:
        super().__init__(
            field="lower_percent",
            message="Proficiency range must satisfy 0 <= lower <= upper <= 100",
            value=(lower, upper),
        )

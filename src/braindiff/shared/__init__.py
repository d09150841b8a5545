"""Shared module.

Cross-cutting concerns: configuration, logging, result pattern.
"""
from braindiff.shared.config import Settings, get_settings, settings
from braindiff.shared.result import (
    Errors,
    Failure,
    Result,
    Success,
    WrappedError,
    try_catch,
    try_sync,
    wrap,
)

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "Errors",
    "Failure",
    "Result",
    "Success",
    "WrappedError",
    "try_catch",
    "try_sync",
    "wrap",
]

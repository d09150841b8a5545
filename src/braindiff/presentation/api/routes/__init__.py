"""API Routes."""
from braindiff.presentation.api.routes import geography, metrics

__all__ = ["geography", "metrics"]

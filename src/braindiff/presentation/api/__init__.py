"""HTTP API."""
from braindiff.presentation.api.app import create_app

__all__ = ["create_app"]

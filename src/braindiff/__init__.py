"""Braindiff.

Analytics backend for the Braindiff education dashboard: state, district
and school proficiency, SAT performance and enrollment counts.
"""
from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]

"""Presentation Layer.

HTTP API for the analytics dashboard.
"""

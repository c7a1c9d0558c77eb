"""
FastAPI application module.

This module provides the FastAPI application factory and HTTP layer
for the SIREN incident service.
"""

from .app import create_app

__all__ = [
    "create_app",
]

"""
API Response Module

Custom API exceptions and the handlers that render every error as
``{"error": message}``.
"""

from .exceptions import APIException, TextValidationException, error_body
from .handlers import register_exception_handlers

__all__ = [
    "APIException",
    "TextValidationException",
    "error_body",
    "register_exception_handlers",
]

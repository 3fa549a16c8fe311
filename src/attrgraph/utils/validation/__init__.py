"""
Validation package for the attributed graph.

This package provides schema validation for attribute values and the result
container validators report through.
"""

from .base import ValidationResult
from .schema import SchemaValidator, check_schema

__all__ = [
    "ValidationResult",
    "SchemaValidator",
    "check_schema",
]

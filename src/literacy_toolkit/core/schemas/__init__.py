"""
Schemas Package

JSON schema definitions and validation utilities for game catalogs.
"""

from .validator import (
    validate_catalog,
    ValidationError,
    CATALOG_SCHEMA_VERSION,
)

__all__ = [
    "validate_catalog",
    "ValidationError",
    "CATALOG_SCHEMA_VERSION",
]

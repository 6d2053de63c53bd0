"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from crm_core.core.errors import DomainError, ValidationError, NotFoundError
"""

from crm_core.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    RequestValidationError,
    ValidationError,
)
from crm_core.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "RequestValidationError",
    "NotFoundError",
    "ConflictError",
]

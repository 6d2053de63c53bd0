"""Application layer errors."""

from crm_core.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = ["ApplicationError", "ApplicationErrorCode"]

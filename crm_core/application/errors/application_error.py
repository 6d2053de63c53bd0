"""Application layer error types.

Errors raised by the request pipeline itself rather than by a handler's
domain logic: a request nobody handles, or a handler that ran out of time.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from crm_core.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.REQUEST_TIMED_OUT,
        ...     message="GetEntityById did not complete within 2.0s",
        ... )
    """

    HANDLER_NOT_REGISTERED = "handler_not_registered"
    REQUEST_TIMED_OUT = "request_timed_out"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Returned by the dispatcher when a request never produces a handler
    outcome. Handler outcomes (DomainError subclasses) pass through unwrapped.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error, when one caused this failure
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every expected failure in the pipeline.
Errors flow through the system as data (Result types), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, DomainError]
"""

from dataclasses import dataclass

from crm_core.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

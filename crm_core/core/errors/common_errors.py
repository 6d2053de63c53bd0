"""Common error classes used across every entity family.

Error Types:
- ValidationError: One field failed one rule
- RequestValidationError: A request failed its rule set (all violations)
- NotFoundError: Entity (or family default) not found
- ConflictError: Stale version or duplicate label

Usage:
    from crm_core.core.errors import NotFoundError
    from crm_core.core.enums import ErrorCode
    from crm_core.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.ENTITY_NOT_FOUND,
        message="Entity not found",
        resource_type="account_type",
        resource_id=str(entity_id),
    ))
"""

from dataclasses import dataclass

from crm_core.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        rule: Name of the rule that failed (e.g. "page_size_range").
        details: Additional context.
    """

    field: str | None = None
    rule: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestValidationError(DomainError):
    """A request was rejected before reaching its handler.

    Attributes:
        code: ErrorCode enum (VALIDATION_FAILED).
        message: Summary message.
        request_type: Name of the rejected request class.
        violations: Every field-level failure, in rule order.
    """

    request_type: str
    violations: tuple[ValidationError, ...] = ()

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed, without duplicates."""
        seen: list[str] = []
        for violation in self.violations:
            if violation.field and violation.field not in seen:
                seen.append(violation.field)
        return seen


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Entity family name (account_type, company, ...).
        resource_id: Identifier that was looked up ("default" for defaults).
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (stale version, duplicate label).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Entity family in conflict.
        conflicting_field: Field that has conflict (version, label).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None

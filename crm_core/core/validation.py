"""Validation framework for request validation.

Validators are pure, synchronous predicate sets. A ``Rule`` checks one field
of a request; a ``RuleSet`` is an ordered, named collection of rules.
Rule sets compose by addition, never by inheritance, so each set can be
unit-tested on its own and reused inside larger sets.

Usage:
    from crm_core.core.validation import RuleSet, int_range, required_identifier

    GET_BY_ID_RULES = RuleSet(
        name="get_by_id",
        rules=(required_identifier("entity_id"),),
    )
    PAGED_RULES = RuleSet(name="paged", rules=(int_range("page_number", minimum=1),))

    rules = GET_BY_ID_RULES + PAGED_RULES
    match rules.check(request):
        case Success(value=request):
            ...
        case Failure(error=error):
            print(error.violations)
"""

from collections.abc import Callable, Collection
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any
from uuid import UUID

from crm_core.core.enums import ErrorCode
from crm_core.core.errors import RequestValidationError, ValidationError
from crm_core.core.result import Failure, Result, Success

NIL_UUID = UUID(int=0)


@dataclass(frozen=True, slots=True, kw_only=True)
class Rule:
    """A single named predicate over one request field.

    Attributes:
        name: Rule identifier reported in violations (e.g. "page_size_range").
        field: Request attribute the rule reports against.
        message: Human-readable failure message.
        check: Predicate receiving the whole request; True means valid.
        code: ErrorCode reported on failure.
    """

    name: str
    field: str
    message: str
    check: Callable[[Any], bool]
    code: ErrorCode = ErrorCode.VALIDATION_FAILED

    def evaluate(self, request: Any) -> ValidationError | None:
        """Run the rule against a request.

        Args:
            request: Query or command instance.

        Returns:
            ValidationError if the rule fails, None otherwise.
        """
        if self.check(request):
            return None
        return ValidationError(
            code=self.code,
            message=self.message,
            field=self.field,
            rule=self.name,
        )


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Ordered, named collection of rules.

    Attributes:
        name: Rule set identifier (used for logs and registry docs).
        rules: Rules, evaluated in order. Every rule runs; failures accumulate.
    """

    name: str
    rules: tuple[Rule, ...] = ()

    def __add__(self, other: "RuleSet") -> "RuleSet":
        """Combine two rule sets, keeping the first occurrence of each rule."""
        return RuleSet.combine(f"{self.name}+{other.name}", self, other)

    def __len__(self) -> int:
        return len(self.rules)

    @classmethod
    def combine(cls, name: str, *rule_sets: "RuleSet") -> "RuleSet":
        """Build a rule set applying every rule of the given sets.

        Rules shared by several sets (same name and field) are applied once.

        Args:
            name: Name of the combined set.
            *rule_sets: Sets to combine, in evaluation order.

        Returns:
            RuleSet: The combined set.
        """
        seen: set[tuple[str, str]] = set()
        rules: list[Rule] = []
        for rule_set in rule_sets:
            for rule in rule_set.rules:
                key = (rule.name, rule.field)
                if key in seen:
                    continue
                seen.add(key)
                rules.append(rule)
        return cls(name=name, rules=tuple(rules))

    def validate(self, request: Any) -> list[ValidationError]:
        """Evaluate every rule and collect the violations.

        Args:
            request: Query or command instance.

        Returns:
            List of violations, empty when the request is valid.
        """
        violations = []
        for rule in self.rules:
            violation = rule.evaluate(request)
            if violation is not None:
                violations.append(violation)
        return violations

    def check(self, request: Any) -> Result[Any, RequestValidationError]:
        """Validate a request and wrap the outcome in a Result.

        Args:
            request: Query or command instance.

        Returns:
            Success(request) when valid, Failure(RequestValidationError) otherwise.
        """
        violations = self.validate(request)
        if not violations:
            return Success(value=request)
        request_type = type(request).__name__
        return Failure(
            error=RequestValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{request_type} failed validation",
                request_type=request_type,
                violations=tuple(violations),
            )
        )


# =============================================================================
# Rule builders
# =============================================================================


def required_identifier(field: str) -> Rule:
    """Field must hold a UUID other than the nil UUID.

    Args:
        field: Request attribute holding the identifier.

    Returns:
        Rule: The identifier rule.
    """

    def check(request: Any) -> bool:
        value = getattr(request, field, None)
        return isinstance(value, UUID) and value != NIL_UUID

    return Rule(
        name="identifier_required",
        field=field,
        message=f"{field} must be a non-empty identifier",
        check=check,
        code=ErrorCode.INVALID_IDENTIFIER,
    )


def optional_identifier(field: str) -> Rule:
    """Field may be None; when set it must be a non-nil UUID.

    Args:
        field: Request attribute holding the identifier.

    Returns:
        Rule: The identifier rule.
    """

    def check(request: Any) -> bool:
        value = getattr(request, field, None)
        return value is None or (isinstance(value, UUID) and value != NIL_UUID)

    return Rule(
        name="identifier_optional",
        field=field,
        message=f"{field} must be empty or a non-empty identifier",
        check=check,
        code=ErrorCode.INVALID_IDENTIFIER,
    )


def int_range(
    field: str,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
    name: str | None = None,
    code: ErrorCode = ErrorCode.VALIDATION_FAILED,
) -> Rule:
    """Field must be an int within [minimum, maximum] (bounds optional).

    Args:
        field: Request attribute holding the integer.
        minimum: Inclusive lower bound.
        maximum: Inclusive upper bound.
        name: Rule name override (defaults to "<field>_range").
        code: ErrorCode reported on failure.

    Returns:
        Rule: The range rule.
    """

    def check(request: Any) -> bool:
        value = getattr(request, field, None)
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True

    if minimum is not None and maximum is not None:
        message = f"{field} must be between {minimum} and {maximum}"
    elif minimum is not None:
        message = f"{field} must be at least {minimum}"
    elif maximum is not None:
        message = f"{field} must be at most {maximum}"
    else:
        message = f"{field} must be an integer"

    return Rule(
        name=name or f"{field}_range",
        field=field,
        message=message,
        check=check,
        code=code,
    )


def not_blank(field: str) -> Rule:
    """Field must be a string with at least one non-whitespace character.

    Args:
        field: Request attribute holding the string.

    Returns:
        Rule: The not-blank rule.
    """

    def check(request: Any) -> bool:
        value = getattr(request, field, None)
        return isinstance(value, str) and bool(value.strip())

    return Rule(
        name="not_blank",
        field=field,
        message=f"{field} cannot be empty",
        check=check,
    )


def max_length(field: str, limit: int) -> Rule:
    """String field (when set) must not exceed ``limit`` characters.

    Args:
        field: Request attribute holding the string.
        limit: Maximum allowed length.

    Returns:
        Rule: The max-length rule.
    """

    def check(request: Any) -> bool:
        value = getattr(request, field, None)
        return value is None or (isinstance(value, str) and len(value) <= limit)

    return Rule(
        name="max_length",
        field=field,
        message=f"{field} must be at most {limit} characters",
        check=check,
    )


def one_of(
    field: str,
    choices: Callable[[], Collection[Any]],
    *,
    name: str | None = None,
    code: ErrorCode = ErrorCode.INVALID_FIELD,
) -> Rule:
    """Field value must belong to a collection computed at check time.

    Args:
        field: Request attribute holding the value.
        choices: Zero-argument callable returning the allowed values.
        name: Rule name override (defaults to "<field>_allowed").
        code: ErrorCode reported on failure.

    Returns:
        Rule: The membership rule.
    """

    def check(request: Any) -> bool:
        return getattr(request, field, None) in choices()

    return Rule(
        name=name or f"{field}_allowed",
        field=field,
        message=f"{field} is not an allowed value",
        check=check,
        code=code,
    )


def ordered_range(start_field: str, end_field: str) -> Rule:
    """Two date/datetime fields must both be set and ordered (start <= end).

    Both bounds must be dates, or datetimes that agree on carrying a
    timezone.

    Args:
        start_field: Request attribute holding the range start.
        end_field: Request attribute holding the range end.

    Returns:
        Rule: The range-order rule (reported against ``end_field``).
    """

    def check(request: Any) -> bool:
        start = getattr(request, start_field, None)
        end = getattr(request, end_field, None)
        if not isinstance(start, (date, datetime)) or not isinstance(
            end, (date, datetime)
        ):
            return False
        if isinstance(start, datetime) != isinstance(end, datetime):
            return False
        if isinstance(start, datetime) and (start.tzinfo is None) != (
            end.tzinfo is None
        ):
            return False
        return start <= end

    return Rule(
        name="date_range_order",
        field=end_field,
        message=f"{start_field} must be on or before {end_field}",
        check=check,
        code=ErrorCode.INVALID_DATE_RANGE,
    )

"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_CONFLICT, *_ALREADY_EXISTS)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_PAGINATION = "invalid_pagination"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_FIELD = "invalid_field"
    REFERENCE_NOT_FOUND = "reference_not_found"
    ENTITY_INVARIANT_VIOLATED = "entity_invariant_violated"

    # Resource errors
    ENTITY_NOT_FOUND = "entity_not_found"
    DEFAULT_NOT_FOUND = "default_not_found"
    ORDINAL_POSITION_NOT_FOUND = "ordinal_position_not_found"

    # Conflict errors
    ENTITY_VERSION_CONFLICT = "entity_version_conflict"
    LABEL_ALREADY_EXISTS = "label_already_exists"
    ENTITY_INACTIVE = "entity_inactive"

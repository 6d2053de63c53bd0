"""Entity base class.

Every record in the system (reference or business) carries identity,
a soft-delete flag, audit metadata and an optimistic-concurrency version.

Lifecycle:
    created (active=True, version=1)
      -> apply_changes() / touch()   audit refreshed, version + 1
      -> soft_delete()               active=False, audit refreshed, version + 1
    There is no transition back to active.
"""

from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields, replace
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar
from uuid import UUID

from uuid_extensions import uuid7


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(kw_only=True)
class Entity:
    """Base domain record.

    Attributes:
        id: Unique identifier, assigned at creation, immutable.
        active: False once soft-deleted.
        created_by: User who created the record.
        created_at: Creation timestamp (set once).
        modified_by: User who last mutated the record.
        modified_at: Timestamp of the last mutation (including soft delete).
        version: Optimistic concurrency token, incremented on every mutation.
    """

    AUDIT_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {
            "id",
            "active",
            "created_by",
            "created_at",
            "modified_by",
            "modified_at",
            "version",
        }
    )

    id: UUID = field(default_factory=uuid7)
    active: bool = True
    created_by: UUID | None = None
    created_at: datetime = field(default_factory=_utcnow)
    modified_by: UUID | None = None
    modified_at: datetime = field(default_factory=_utcnow)
    version: int = 1

    def __post_init__(self) -> None:
        """Validate entity invariants after initialization.

        Raises:
            ValueError: If any invariant does not hold.
        """
        if self.version < 1:
            raise ValueError("Entity version must be at least 1")
        if self.modified_by is None:
            self.modified_by = self.created_by
        self.validate()

    def validate(self) -> None:
        """Check invariants. Fields without a default must not be None.

        Subclasses extend this with family-specific checks.

        Raises:
            ValueError: If any invariant does not hold.
        """
        for f in fields(self):
            if f.default is MISSING and f.default_factory is MISSING:
                if getattr(self, f.name) is None:
                    raise ValueError(f"{f.name} is required")

    @staticmethod
    def _require_text(value: Any, name: str) -> None:
        """Raise ValueError unless ``value`` is a non-blank string."""
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{name} cannot be empty")

    @staticmethod
    def _as_decimal(value: Any, name: str) -> Decimal:
        """Convert an amount to Decimal, raising ValueError when malformed."""
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"{name} must be a decimal number") from None
        if not amount.is_finite():
            raise ValueError(f"{name} must be a decimal number")
        return amount

    @classmethod
    def writable_fields(cls) -> frozenset[str]:
        """Names of fields a create/update command may set."""
        return frozenset(
            f.name for f in fields(cls) if f.name not in cls.AUDIT_FIELDS
        )

    def touch(self, modified_by: UUID | None) -> None:
        """Record a mutation: refresh audit fields and bump the version.

        Args:
            modified_by: User performing the mutation.
        """
        self.modified_by = modified_by
        self.modified_at = _utcnow()
        self.version += 1

    def apply_changes(
        self, changes: Mapping[str, Any], modified_by: UUID | None
    ) -> None:
        """Apply field changes atomically, then record the mutation.

        The changes are validated on a copy first, so a rejected change
        leaves this entity untouched.

        Args:
            changes: Field name -> new value (writable fields only).
            modified_by: User performing the mutation.

        Raises:
            ValueError: Unknown/audit field, or an invariant fails.
        """
        unknown = set(changes) - self.writable_fields()
        if unknown:
            raise ValueError(f"Fields cannot be changed: {', '.join(sorted(unknown))}")

        candidate = replace(self, **changes)
        for name in changes:
            setattr(self, name, getattr(candidate, name))
        self.touch(modified_by)

    def soft_delete(self, modified_by: UUID | None) -> bool:
        """Mark the entity inactive.

        Args:
            modified_by: User performing the deletion.

        Returns:
            True if the entity was active and is now deleted,
            False if it was already inactive (nothing changes).
        """
        if not self.active:
            return False
        self.active = False
        self.touch(modified_by)
        return True

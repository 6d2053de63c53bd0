"""Activity business entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from crm_core.domain.entities.base import Entity


@dataclass(kw_only=True)
class Activity(Entity):
    """A call, meeting or task tracked against a company or person.

    Attributes:
        subject: Short summary.
        activity_type_id: ActivityType reference.
        activity_status_id: ActivityStatus reference.
        description: Optional details.
        company_id: Related company.
        person_id: Related person.
        due_at: When the activity is due.
        started_at: When work started.
        completed_at: When the activity was completed.
    """

    subject: str
    activity_type_id: UUID
    activity_status_id: UUID
    description: str | None = None
    company_id: UUID | None = None
    person_id: UUID | None = None
    due_at: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None

    def validate(self) -> None:
        """Validate subject and timeline.

        Raises:
            ValueError: If any invariant does not hold.
        """
        super().validate()
        self._require_text(self.subject, "Activity subject")
        if len(self.subject) > 200:
            raise ValueError("Activity subject cannot exceed 200 characters")
        if (
            self.started_at is not None
            and self.completed_at is not None
            and self.completed_at < self.started_at
        ):
            raise ValueError("Activity cannot complete before it starts")

    @property
    def is_completed(self) -> bool:
        """Whether a completion time has been recorded."""
        return self.completed_at is not None

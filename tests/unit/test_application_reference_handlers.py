"""Unit tests for the reference family query handlers.

Covers ordinal ordering, position lookup, default selection and label lookup.
"""

import pytest

from crm_core.application.dtos import ProjectionKind, ReferenceDetails, ReferenceSummary
from crm_core.application.queries import (
    FindReferencesByLabel,
    GetByOrdinalPosition,
    GetDefaultReference,
    GetReferenceAtPosition,
)
from crm_core.application.queries.handlers import (
    FindReferencesByLabelHandler,
    GetByOrdinalPositionHandler,
    GetDefaultReferenceHandler,
    GetReferenceAtPositionHandler,
)
from crm_core.core.enums import ErrorCode
from crm_core.core.errors import NotFoundError
from crm_core.core.result import Failure, Success
from crm_core.domain.entities import CallType
from tests.factories import make_reference


@pytest.fixture
def call_types(repositories):
    return repositories.reference("call_type")


async def seed(call_types, *members):
    entities = [
        make_reference(CallType, label, position, minutes=minutes)
        for label, position, minutes in members
    ]
    for entity in entities:
        await call_types.add(entity)
    return entities


@pytest.mark.unit
class TestGetByOrdinalPositionHandler:
    async def test_sorted_by_position_then_creation(self, make_handler, call_types):
        await seed(
            call_types,
            ("Late tie", 1, 10),
            ("Last", 2, 0),
            ("Early tie", 1, 5),
            ("First", 0, 20),
        )
        handler = make_handler(GetByOrdinalPositionHandler)

        result = await handler.handle(GetByOrdinalPosition(family="call_type"))

        assert isinstance(result, Success)
        assert [dto.label for dto in result.value] == [
            "First",
            "Early tie",
            "Late tie",
            "Last",
        ]

    async def test_inactive_members_on_request(self, make_handler, call_types):
        kept, removed = await seed(call_types, ("Kept", 1, 0), ("Removed", 2, 0))
        await call_types.delete(removed.id, modified_by=None)
        handler = make_handler(GetByOrdinalPositionHandler)

        active = await handler.handle(GetByOrdinalPosition(family="call_type"))
        everything = await handler.handle(
            GetByOrdinalPosition(family="call_type", active_only=False)
        )

        assert [dto.id for dto in active.value] == [kept.id]
        assert [dto.active for dto in everything.value] == [True, False]

    async def test_empty_family(self, make_handler):
        handler = make_handler(GetByOrdinalPositionHandler)

        result = await handler.handle(GetByOrdinalPosition(family="call_type"))

        assert result == Success(value=[])


@pytest.mark.unit
class TestGetReferenceAtPositionHandler:
    async def test_returns_member_at_position(self, make_handler, call_types):
        await seed(call_types, ("Sales", 1, 0), ("Support", 2, 0))
        handler = make_handler(GetReferenceAtPositionHandler)

        result = await handler.handle(
            GetReferenceAtPosition(family="call_type", ordinal_position=2)
        )

        assert isinstance(result.value, ReferenceDetails)
        assert result.value.label == "Support"

    async def test_earliest_created_wins_a_shared_position(self, make_handler, call_types):
        await seed(call_types, ("Newer", 1, 10), ("Older", 1, 0))
        handler = make_handler(GetReferenceAtPositionHandler)

        result = await handler.handle(
            GetReferenceAtPosition(family="call_type", ordinal_position=1)
        )

        assert result.value.label == "Older"

    async def test_soft_deleted_member_is_not_found(self, make_handler, call_types):
        [entity] = await seed(call_types, ("Sales", 1, 0))
        await call_types.delete(entity.id, modified_by=None)
        handler = make_handler(GetReferenceAtPositionHandler)

        result = await handler.handle(
            GetReferenceAtPosition(family="call_type", ordinal_position=1)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ORDINAL_POSITION_NOT_FOUND
        assert result.error.resource_id == "1"


@pytest.mark.unit
class TestGetDefaultReferenceHandler:
    async def test_lowest_position_is_default(self, make_handler, call_types):
        await seed(call_types, ("Three", 3, 0), ("One", 1, 0), ("Two", 2, 0))
        handler = make_handler(GetDefaultReferenceHandler)

        result = await handler.handle(GetDefaultReference(family="call_type"))

        assert result.value.label == "One"
        assert result.value.ordinal_position == 1

    async def test_soft_deleted_member_never_default(self, make_handler, call_types):
        first, _ = await seed(call_types, ("Zero", 0, 0), ("Five", 5, 0))
        await call_types.delete(first.id, modified_by=None)
        handler = make_handler(GetDefaultReferenceHandler)

        result = await handler.handle(GetDefaultReference(family="call_type"))

        assert result.value.label == "Five"

    async def test_no_active_members(self, make_handler):
        handler = make_handler(GetDefaultReferenceHandler)

        result = await handler.handle(GetDefaultReference(family="call_type"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.DEFAULT_NOT_FOUND
        assert result.error.resource_type == "call_type"

    async def test_summary_projection(self, make_handler, call_types):
        [entity] = await seed(call_types, ("Only", 4, 0))
        handler = make_handler(GetDefaultReferenceHandler)

        result = await handler.handle(
            GetDefaultReference(family="call_type", projection=ProjectionKind.SUMMARY)
        )

        assert result.value == ReferenceSummary(
            id=entity.id, label="Only", ordinal_position=4
        )


@pytest.mark.unit
class TestFindReferencesByLabelHandler:
    async def test_case_insensitive_exact_match(self, make_handler, call_types):
        await seed(call_types, ("Sales", 1, 0), ("Sales Support", 2, 0))
        handler = make_handler(FindReferencesByLabelHandler)

        result = await handler.handle(
            FindReferencesByLabel(family="call_type", label=" sales ")
        )

        assert [dto.label for dto in result.value] == ["Sales"]

    async def test_no_match_is_empty_success(self, make_handler):
        handler = make_handler(FindReferencesByLabelHandler)

        result = await handler.handle(
            FindReferencesByLabel(family="call_type", label="Missing")
        )

        assert result == Success(value=[])

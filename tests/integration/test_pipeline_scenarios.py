"""End-to-end pipeline tests: requests go through the Dispatcher.

State is built with CreateEntity/DeleteEntity commands so validation,
handlers, repositories and the mapper all run together.
"""

import pytest
from uuid_extensions import uuid7

from crm_core.application.commands import CreateEntity, DeleteEntity, UpdateEntity
from crm_core.application.dtos import PagedResult
from crm_core.application.queries import (
    GetByOrdinalPosition,
    GetDefaultReference,
    GetEntityById,
    ListEntities,
)
from crm_core.core.enums import ErrorCode
from crm_core.core.errors import NotFoundError, RequestValidationError
from crm_core.core.result import Failure, Success
from crm_core.domain.families import EntityKind, get_family_names

REFERENCE_FAMILIES = get_family_names(EntityKind.REFERENCE)


async def create(dispatcher, family: str, **fields):
    result = await dispatcher.dispatch(
        CreateEntity(family=family, fields=fields, created_by=uuid7())
    )
    assert isinstance(result, Success), result
    return result.value


async def create_references(dispatcher, family: str, positions: list[int]):
    return [
        await create(dispatcher, family, label=f"{family} {i}", ordinal_position=position)
        for i, position in enumerate(positions)
    ]


@pytest.mark.integration
class TestReferenceOrdering:
    async def test_default_and_order_follow_position(self, dispatcher):
        await create_references(dispatcher, "account_type", [3, 1, 2])

        default = await dispatcher.dispatch(GetDefaultReference(family="account_type"))
        ordered = await dispatcher.dispatch(GetByOrdinalPosition(family="account_type"))

        assert default.value.ordinal_position == 1
        assert [dto.ordinal_position for dto in ordered.value] == [1, 2, 3]

    @pytest.mark.parametrize("family", REFERENCE_FAMILIES)
    async def test_ordering_is_stable(self, dispatcher, family):
        await create_references(dispatcher, family, [2, 0, 2, 1, 0])
        query = GetByOrdinalPosition(family=family)

        first = await dispatcher.dispatch(query)
        second = await dispatcher.dispatch(query)

        positions = [dto.ordinal_position for dto in first.value]
        assert positions == sorted(positions)
        assert first == second

    @pytest.mark.parametrize("family", REFERENCE_FAMILIES)
    async def test_tied_default_is_deterministic(self, dispatcher, family):
        created = await create_references(dispatcher, family, [4, 1, 1])

        results = [
            await dispatcher.dispatch(GetDefaultReference(family=family)) for _ in range(3)
        ]

        assert {result.value.id for result in results} == {created[1].id}


@pytest.mark.integration
class TestSoftDelete:
    async def test_deleting_only_member_leaves_no_default(self, dispatcher):
        [only] = await create_references(dispatcher, "call_type", [0])

        deleted = await dispatcher.dispatch(
            DeleteEntity(family="call_type", entity_id=only.id)
        )
        result = await dispatcher.dispatch(GetDefaultReference(family="call_type"))

        assert deleted == Success(value=True)
        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.DEFAULT_NOT_FOUND

    async def test_deleted_entity_hidden_from_lists_but_fetchable(self, dispatcher):
        kept, removed = await create_references(dispatcher, "note_type", [0, 1])
        deleter = uuid7()

        await dispatcher.dispatch(
            DeleteEntity(family="note_type", entity_id=removed.id, modified_by=deleter)
        )
        listed = await dispatcher.dispatch(ListEntities(family="note_type", page_size=10))
        ordered = await dispatcher.dispatch(GetByOrdinalPosition(family="note_type"))
        fetched = await dispatcher.dispatch(
            GetEntityById(family="note_type", entity_id=removed.id)
        )

        assert [dto.id for dto in listed.value.items] == [kept.id]
        assert [dto.id for dto in ordered.value] == [kept.id]
        assert fetched.value.active is False
        assert fetched.value.modified_by == deleter
        assert fetched.value.modified_at >= removed.modified_at
        assert fetched.value.version == removed.version + 1

    async def test_deleted_reference_no_longer_usable(self, dispatcher):
        account_type = await create(dispatcher, "account_type", label="Customer")
        account_status = await create(dispatcher, "account_status", label="Open")
        await dispatcher.dispatch(
            DeleteEntity(family="account_type", entity_id=account_type.id)
        )

        result = await dispatcher.dispatch(
            CreateEntity(
                family="company",
                fields={
                    "name": "Acme",
                    "account_type_id": account_type.id,
                    "account_status_id": account_status.id,
                },
            )
        )

        assert result.error.code == ErrorCode.REFERENCE_NOT_FOUND


@pytest.mark.integration
class TestPaging:
    async def test_pages_over_25_entities(self, dispatcher):
        account_type = await create(dispatcher, "account_type", label="Customer")
        account_status = await create(dispatcher, "account_status", label="Open")
        for i in range(25):
            await create(
                dispatcher,
                "company",
                name=f"Company {i:02d}",
                account_type_id=account_type.id,
                account_status_id=account_status.id,
            )

        first = await dispatcher.dispatch(
            ListEntities(family="company", page_number=1, page_size=10)
        )
        third = await dispatcher.dispatch(
            ListEntities(family="company", page_number=3, page_size=10)
        )

        assert isinstance(first.value, PagedResult)
        assert len(first.value.items) == 10
        assert len(third.value.items) == 5
        assert third.value.total_count == 25
        assert first.value.items[0].account_type_name == "Customer"

    async def test_oversized_page_rejected(self, dispatcher):
        result = await dispatcher.dispatch(ListEntities(family="company", page_size=101))

        assert isinstance(result.error, RequestValidationError)
        assert result.error.fields == ["page_size"]


@pytest.mark.integration
class TestQueriesAreIdempotent:
    async def test_same_query_same_result(self, dispatcher):
        created = await create_references(dispatcher, "product_type", [1, 0])
        query = GetEntityById(family="product_type", entity_id=created[0].id)

        assert await dispatcher.dispatch(query) == await dispatcher.dispatch(query)

    async def test_update_then_read_back(self, dispatcher):
        [entity] = await create_references(dispatcher, "ship_method", [0])

        updated = await dispatcher.dispatch(
            UpdateEntity(
                family="ship_method",
                entity_id=entity.id,
                fields={"label": "Courier"},
                expected_version=entity.version,
            )
        )
        stale = await dispatcher.dispatch(
            UpdateEntity(
                family="ship_method",
                entity_id=entity.id,
                fields={"label": "Freight"},
                expected_version=entity.version,
            )
        )
        fetched = await dispatcher.dispatch(
            GetEntityById(family="ship_method", entity_id=entity.id)
        )

        assert updated.value.version == 2
        assert stale.error.code == ErrorCode.ENTITY_VERSION_CONFLICT
        assert fetched.value == updated.value

"""Unit tests for EntityMapper (entity -> projection DTO)."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from crm_core.application.dtos import (
    CompanyDetails,
    CompanyListItem,
    ProjectionKind,
    ReferenceDetails,
    ReferenceListItem,
    ReferenceSummary,
    SalesOrderDetails,
    SalesOrderLineItemSummary,
)
from crm_core.application.mapping import EntityMapper, MappingError
from crm_core.application.mapping.profiles import PROJECTION_PROFILES, get_projection
from crm_core.domain.entities import (
    AccountStatus,
    AccountType,
    SalesOrderLineItem,
    SalesOrderStatus,
    ShipMethod,
)
from tests.factories import make_company, make_reference, make_sales_order


@pytest.mark.unit
class TestProjectionProfiles:
    def test_reference_subclasses_share_reference_projections(self):
        assert get_projection(ShipMethod, ProjectionKind.SUMMARY) is ReferenceSummary
        assert get_projection(AccountType, ProjectionKind.DETAILS) is ReferenceDetails

    def test_line_items_only_have_summary(self):
        assert get_projection(SalesOrderLineItem, ProjectionKind.LIST) is None

    def test_every_business_family_has_three_tiers(self):
        for entity_class, profile in PROJECTION_PROFILES.items():
            if entity_class is SalesOrderLineItem:
                continue
            assert set(profile) == set(ProjectionKind), entity_class.__name__


@pytest.mark.unit
class TestReferenceMapping:
    async def test_summary(self, mapper):
        entity = make_reference(AccountType, "Customer", 2)

        dto = await mapper.map(entity, ProjectionKind.SUMMARY)

        assert dto == ReferenceSummary(id=entity.id, label="Customer", ordinal_position=2)

    async def test_list_item(self, mapper):
        entity = make_reference(AccountType, "Customer", 2, description="Paying")

        dto = await mapper.map(entity, ProjectionKind.LIST)

        assert isinstance(dto, ReferenceListItem)
        assert dto.description == "Paying"
        assert dto.active is True

    async def test_details_take_usage_count_from_extras(self, mapper):
        entity = make_reference(AccountType, "Customer")

        dto = await mapper.map(entity, ProjectionKind.DETAILS, extras={"usage_count": 4})

        assert isinstance(dto, ReferenceDetails)
        assert dto.usage_count == 4
        assert dto.version == 1
        assert dto.created_by == entity.created_by

    async def test_details_without_usage_count_is_misconfiguration(self, mapper):
        entity = make_reference(AccountType, "Customer")

        with pytest.raises(MappingError, match="usage_count"):
            await mapper.map(entity, ProjectionKind.DETAILS)


@pytest.mark.unit
class TestBusinessMapping:
    async def test_reference_names_resolved(self, mapper, repositories):
        account_type = make_reference(AccountType, "Customer")
        account_status = make_reference(AccountStatus, "Open")
        await repositories.get("account_type").add(account_type)
        await repositories.get("account_status").add(account_status)
        company = make_company(account_type.id, account_status.id)

        dto = await mapper.map(company, ProjectionKind.DETAILS)

        assert isinstance(dto, CompanyDetails)
        assert dto.account_type_id == account_type.id
        assert dto.account_type_name == "Customer"
        assert dto.account_status_name == "Open"

    async def test_missing_reference_maps_to_none(self, mapper):
        company = make_company(uuid7(), uuid7())

        dto = await mapper.map(company, ProjectionKind.LIST)

        assert isinstance(dto, CompanyListItem)
        assert dto.account_type_name is None

    async def test_map_many_looks_up_each_label_once(self, mapper, repositories):
        account_type = make_reference(AccountType, "Customer")
        repository = repositories.get("account_type")
        await repository.add(account_type)
        lookups: list[UUID] = []
        find_by_id = repository.find_by_id

        async def counting_find(entity_id):
            lookups.append(entity_id)
            return await find_by_id(entity_id)

        repository.find_by_id = counting_find
        companies = [
            make_company(account_type.id, uuid7(), name=f"Company {i}") for i in range(3)
        ]

        dtos = await mapper.map_many(companies, ProjectionKind.LIST)

        assert [dto.name for dto in dtos] == ["Company 0", "Company 1", "Company 2"]
        assert lookups.count(account_type.id) == 1

    async def test_sales_order_details_nest_active_line_items(self, mapper, repositories):
        status = make_reference(SalesOrderStatus, "Open")
        await repositories.get("sales_order_status").add(status)
        order = make_sales_order(status.id)
        order.line_items[1].soft_delete(None)

        dto = await mapper.map(
            order, ProjectionKind.DETAILS, extras={"line_item_count": 1}
        )

        assert isinstance(dto, SalesOrderDetails)
        assert dto.sales_order_status_name == "Open"
        assert dto.ship_method_name is None
        assert dto.total_amount == Decimal("20.00")
        assert dto.line_item_count == 1
        [line] = dto.active_line_items
        assert isinstance(line, SalesOrderLineItemSummary)
        assert line.description == "Widget"
        assert line.line_number == 1
        assert line.line_total == Decimal("20.00")


@pytest.mark.unit
class TestMappingErrors:
    async def test_unprofiled_entity_class(self, mapper):
        @dataclass
        class Unprofiled:
            id: UUID

        with pytest.raises(MappingError, match="No summary projection"):
            await mapper.map(Unprofiled(id=uuid7()), ProjectionKind.SUMMARY)

    async def test_projection_missing_for_line_item(self, mapper):
        item = SalesOrderLineItem(description="Widget")

        with pytest.raises(MappingError):
            await mapper.map(item, ProjectionKind.DETAILS)

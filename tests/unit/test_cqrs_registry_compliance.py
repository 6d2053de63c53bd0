"""CQRS Registry Compliance Tests.

Self-enforcing tests that fail if the registry is incomplete or inconsistent.

Test categories:
1. Completeness - Every command/query handler module is registered
2. Handler compliance - Handlers expose handle() and auto-wirable __init__
3. Naming conventions - <Request>Handler
4. Category consistency - Reference queries only accept reference families
5. Statistics - Registry counts match expectations
"""

import inspect

import pytest

from crm_core.application.commands import CreateEntity
from crm_core.application.commands import handlers as command_handlers
from crm_core.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
    ResultKind,
    get_all_commands,
    get_all_handler_classes,
    get_all_queries,
    get_command_metadata,
    get_handler_dependencies,
    get_paginated_queries,
    get_queries_by_category,
    get_query_metadata,
    get_statistics,
    validate_registry_consistency,
)
from crm_core.application.queries import GetDefaultReference, GetEntityById, ListEntities
from crm_core.application.queries import handlers as query_handlers
from crm_core.core.container import DEPENDENCY_FACTORIES
from crm_core.core.validation import RuleSet


@pytest.mark.unit
class TestRegistryCompleteness:
    """Verify all commands and queries are registered."""

    def test_registry_consistent(self) -> None:
        assert validate_registry_consistency() == []

    def test_every_exported_handler_registered(self) -> None:
        exported = {
            getattr(module, name)
            for module in (command_handlers, query_handlers)
            for name in module.__all__
        }

        assert exported == set(get_all_handler_classes())

    def test_lookup_by_request_class(self) -> None:
        assert get_command_metadata(CreateEntity).handler_class.__name__ == (
            "CreateEntityHandler"
        )
        assert get_query_metadata(GetEntityById).result_kind == ResultKind.DTO
        assert get_command_metadata(GetEntityById) is None
        assert get_query_metadata(CreateEntity) is None

    def test_request_lists(self) -> None:
        assert CreateEntity in get_all_commands()
        assert ListEntities in get_all_queries()


@pytest.mark.unit
class TestHandlerCompliance:
    @pytest.mark.parametrize(
        "handler_class", get_all_handler_classes(), ids=lambda h: h.__name__
    )
    def test_handle_is_async(self, handler_class) -> None:
        assert inspect.iscoroutinefunction(handler_class.handle)

    @pytest.mark.parametrize(
        "handler_class", get_all_handler_classes(), ids=lambda h: h.__name__
    )
    def test_dependencies_resolvable(self, handler_class) -> None:
        for name in get_handler_dependencies(handler_class):
            assert name in DEPENDENCY_FACTORIES, f"{handler_class.__name__}: {name}"

    @pytest.mark.parametrize(
        "meta",
        [*COMMAND_REGISTRY, *QUERY_REGISTRY],
        ids=lambda m: m.request_class.__name__,
    )
    def test_rule_factories_build_rule_sets(self, meta, test_settings) -> None:
        rules = meta.rules(test_settings)

        assert isinstance(rules, RuleSet)
        assert len(rules) > 0


@pytest.mark.unit
class TestCategoryConsistency:
    def test_reference_queries_restrict_family(self, test_settings) -> None:
        for meta in get_queries_by_category(CQRSCategory.REFERENCE):
            rule_names = {rule.name for rule in meta.rules(test_settings).rules}
            assert "reference_family_registered" in rule_names, meta.query_class

    def test_entity_requests_accept_any_family(self, test_settings) -> None:
        entries = [*COMMAND_REGISTRY, *get_queries_by_category(CQRSCategory.ENTITY)]
        for meta in entries:
            rule_names = {rule.name for rule in meta.rules(test_settings).rules}
            assert "family_registered" in rule_names, meta.request_class

    def test_paginated_queries_validate_paging(self, test_settings) -> None:
        for meta in get_paginated_queries():
            fields = {rule.field for rule in meta.rules(test_settings).rules}
            assert {"page_number", "page_size"} <= fields, meta.query_class

    def test_default_reference_is_reference_query(self) -> None:
        assert get_query_metadata(GetDefaultReference).category == CQRSCategory.REFERENCE

    def test_paginated_flag_must_match_result_kind(self) -> None:
        with pytest.raises(ValueError, match="is_paginated"):
            QueryMetadata(
                query_class=ListEntities,
                handler_class=object,
                category=CQRSCategory.ENTITY,
                rules=lambda settings: RuleSet(name="empty"),
                result_kind=ResultKind.DTO,
                is_paginated=True,
            )

    def test_command_metadata_request_class(self) -> None:
        meta = CommandMetadata(
            command_class=CreateEntity,
            handler_class=object,
            category=CQRSCategory.ENTITY,
            rules=lambda settings: RuleSet(name="empty"),
        )

        assert meta.request_class is CreateEntity


@pytest.mark.unit
class TestRegistryStatistics:
    def test_statistics(self) -> None:
        stats = get_statistics()

        assert stats["total_commands"] == 3
        assert stats["total_queries"] == 9
        assert stats["total_operations"] == 12
        assert stats["paginated_queries"] == 4
        assert stats["queries_by_category"] == {"entity": 5, "reference": 4}

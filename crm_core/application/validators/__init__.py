"""Request rule sets, one factory per request type."""

from crm_core.application.validators.request_rules import (
    create_entity_rules,
    delete_entity_rules,
    find_references_by_label_rules,
    get_by_ordinal_position_rules,
    get_default_reference_rules,
    get_entity_by_id_rules,
    get_reference_at_position_rules,
    list_entities_by_date_range_rules,
    list_entities_by_field_rules,
    list_entities_rules,
    search_entities_rules,
    update_entity_rules,
)

__all__ = [
    "create_entity_rules",
    "delete_entity_rules",
    "find_references_by_label_rules",
    "get_by_ordinal_position_rules",
    "get_default_reference_rules",
    "get_entity_by_id_rules",
    "get_reference_at_position_rules",
    "list_entities_by_date_range_rules",
    "list_entities_by_field_rules",
    "list_entities_rules",
    "search_entities_rules",
    "update_entity_rules",
]

"""Rule sets for every request type.

Each request's rule set is assembled from small independent sets (family,
paging, projection, identifiers, ...) with ``+``. Limits come from Settings,
so factories take the settings instance and the dispatcher builds the sets
once at construction.

Usage:
    from crm_core.application.validators import list_entities_rules
    from crm_core.core.config import get_settings

    rules = list_entities_rules(get_settings())
    violations = rules.validate(ListEntities(family="company", page_size=500))
"""

from collections.abc import Callable, Collection, Mapping
from typing import Any

from crm_core.application.dtos.common import ProjectionKind
from crm_core.core.config import Settings
from crm_core.core.enums import ErrorCode
from crm_core.core.validation import (
    Rule,
    RuleSet,
    int_range,
    max_length,
    not_blank,
    one_of,
    optional_identifier,
    ordered_range,
    required_identifier,
)
from crm_core.domain.families import (
    EntityFamily,
    EntityKind,
    get_family,
    get_family_names,
)

# =============================================================================
# Building blocks
# =============================================================================


def family_rules(kind: EntityKind | None = None) -> RuleSet:
    """``family`` must name a registered family (of ``kind`` when given)."""
    name = "family_registered" if kind is None else f"{kind.value}_family_registered"
    return RuleSet(
        name=name,
        rules=(
            one_of(
                "family",
                lambda: get_family_names(kind),
                name=name,
            ),
        ),
    )


def projection_rules() -> RuleSet:
    return RuleSet(
        name="projection",
        rules=(one_of("projection", lambda: tuple(ProjectionKind)),),
    )


def paging_rules(settings: Settings) -> RuleSet:
    """page_number >= 1 and 1 <= page_size <= max_page_size."""
    return RuleSet(
        name="paging",
        rules=(
            int_range("page_number", minimum=1, code=ErrorCode.INVALID_PAGINATION),
            int_range(
                "page_size",
                minimum=1,
                maximum=settings.max_page_size,
                code=ErrorCode.INVALID_PAGINATION,
            ),
        ),
    )


def _family_attribute(
    name: str,
    message: str,
    allowed: Callable[[EntityFamily], Collection[str]],
) -> Rule:
    """``field`` must be one of the attributes ``allowed`` lists for the family."""

    def check(request: Any) -> bool:
        family = get_family(request.family)
        return family is not None and request.field in allowed(family)

    return Rule(
        name=name,
        field="field",
        message=message,
        check=check,
        code=ErrorCode.INVALID_FIELD,
    )


def _filter_value_length(limit: int) -> Rule:
    def check(request: Any) -> bool:
        return not isinstance(request.value, str) or len(request.value) <= limit

    return Rule(
        name="max_length",
        field="value",
        message=f"value must be at most {limit} characters",
        check=check,
    )


def _writable_fields(request: Any) -> bool:
    family = get_family(request.family)
    if family is None or not isinstance(request.fields, Mapping):
        return False
    return set(request.fields) <= family.entity_class.writable_fields()


def fields_rules(*, require_changes: bool) -> RuleSet:
    """``fields`` must only name writable attributes of the family."""
    rules = [
        Rule(
            name="fields_writable",
            field="fields",
            message="fields may only contain writable attributes of the family",
            check=_writable_fields,
            code=ErrorCode.INVALID_FIELD,
        )
    ]
    if require_changes:
        rules.append(
            Rule(
                name="fields_not_empty",
                field="fields",
                message="fields must contain at least one change",
                check=lambda request: bool(request.fields),
            )
        )
    return RuleSet(name="fields", rules=tuple(rules))


def _optional_version(request: Any) -> bool:
    version = request.expected_version
    if version is None:
        return True
    return isinstance(version, int) and not isinstance(version, bool) and version >= 1


# =============================================================================
# Query rule sets
# =============================================================================


def get_entity_by_id_rules(settings: Settings) -> RuleSet:
    return (
        family_rules()
        + RuleSet(name="entity_id", rules=(required_identifier("entity_id"),))
        + projection_rules()
    )


def list_entities_rules(settings: Settings) -> RuleSet:
    return family_rules() + paging_rules(settings) + projection_rules()


def list_entities_by_field_rules(settings: Settings) -> RuleSet:
    field_rules = RuleSet(
        name="filter",
        rules=(
            _family_attribute(
                "field_filterable",
                "field is not filterable for this family",
                lambda family: family.filterable_fields,
            ),
            _filter_value_length(settings.max_filter_length),
        ),
    )
    return list_entities_rules(settings) + field_rules


def list_entities_by_date_range_rules(settings: Settings) -> RuleSet:
    range_rules = RuleSet(
        name="date_range",
        rules=(
            _family_attribute(
                "field_date_ranged",
                "field is not a date field of this family",
                lambda family: family.date_fields,
            ),
            ordered_range("start", "end"),
        ),
    )
    return list_entities_rules(settings) + range_rules


def search_entities_rules(settings: Settings) -> RuleSet:
    text_rules = RuleSet(
        name="search_text",
        rules=(not_blank("text"), max_length("text", settings.max_filter_length)),
    )
    return list_entities_rules(settings) + text_rules


def get_by_ordinal_position_rules(settings: Settings) -> RuleSet:
    return family_rules(EntityKind.REFERENCE) + projection_rules()


def get_reference_at_position_rules(settings: Settings) -> RuleSet:
    position = RuleSet(
        name="ordinal_position",
        rules=(int_range("ordinal_position", minimum=0),),
    )
    return family_rules(EntityKind.REFERENCE) + position + projection_rules()


def get_default_reference_rules(settings: Settings) -> RuleSet:
    return family_rules(EntityKind.REFERENCE) + projection_rules()


def find_references_by_label_rules(settings: Settings) -> RuleSet:
    label = RuleSet(
        name="label",
        rules=(not_blank("label"), max_length("label", settings.max_label_length)),
    )
    return family_rules(EntityKind.REFERENCE) + label + projection_rules()


# =============================================================================
# Command rule sets
# =============================================================================


def create_entity_rules(settings: Settings) -> RuleSet:
    author = RuleSet(name="author", rules=(optional_identifier("created_by"),))
    return family_rules() + fields_rules(require_changes=False) + author


def update_entity_rules(settings: Settings) -> RuleSet:
    target = RuleSet(
        name="update_target",
        rules=(
            required_identifier("entity_id"),
            int_range("expected_version", minimum=1),
            optional_identifier("modified_by"),
        ),
    )
    return family_rules() + target + fields_rules(require_changes=True)


def delete_entity_rules(settings: Settings) -> RuleSet:
    target = RuleSet(
        name="delete_target",
        rules=(
            required_identifier("entity_id"),
            optional_identifier("modified_by"),
            Rule(
                name="expected_version_range",
                field="expected_version",
                message="expected_version must be empty or at least 1",
                check=_optional_version,
            ),
        ),
    )
    return family_rules() + target

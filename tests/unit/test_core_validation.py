"""Unit tests for the rule / rule set validation framework."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from crm_core.core.enums import ErrorCode
from crm_core.core.errors import RequestValidationError
from crm_core.core.result import Failure, Success
from crm_core.core.validation import (
    NIL_UUID,
    RuleSet,
    int_range,
    max_length,
    not_blank,
    one_of,
    optional_identifier,
    ordered_range,
    required_identifier,
)


@dataclass(frozen=True, kw_only=True)
class SampleRequest:
    entity_id: UUID | None = None
    page_number: int = 1
    text: str | None = "abc"
    start: date | datetime | None = None
    end: date | datetime | None = None


@pytest.mark.unit
class TestRuleBuilders:
    """Each builder accepts good values and names its failures."""

    def test_required_identifier_rejects_nil_uuid(self):
        rule = required_identifier("entity_id")

        violation = rule.evaluate(SampleRequest(entity_id=NIL_UUID))

        assert violation is not None
        assert violation.field == "entity_id"
        assert violation.rule == "identifier_required"
        assert violation.code == ErrorCode.INVALID_IDENTIFIER

    def test_required_identifier_rejects_missing_value(self):
        assert required_identifier("entity_id").evaluate(SampleRequest()) is not None

    def test_required_identifier_accepts_uuid(self):
        request = SampleRequest(entity_id=uuid7())

        assert required_identifier("entity_id").evaluate(request) is None

    def test_optional_identifier_accepts_none_but_not_nil(self):
        rule = optional_identifier("entity_id")

        assert rule.evaluate(SampleRequest()) is None
        assert rule.evaluate(SampleRequest(entity_id=NIL_UUID)) is not None

    def test_int_range_bounds_are_inclusive(self):
        rule = int_range("page_number", minimum=1, maximum=3)

        assert rule.evaluate(SampleRequest(page_number=1)) is None
        assert rule.evaluate(SampleRequest(page_number=3)) is None
        assert rule.evaluate(SampleRequest(page_number=0)) is not None
        assert rule.evaluate(SampleRequest(page_number=4)) is not None

    def test_int_range_rejects_bool(self):
        rule = int_range("page_number", minimum=0)

        assert rule.evaluate(SampleRequest(page_number=True)) is not None

    def test_int_range_default_name(self):
        assert int_range("page_number", minimum=1).name == "page_number_range"

    def test_not_blank(self):
        rule = not_blank("text")

        assert rule.evaluate(SampleRequest(text="  ")) is not None
        assert rule.evaluate(SampleRequest(text=None)) is not None
        assert rule.evaluate(SampleRequest(text="x")) is None

    def test_max_length_allows_none(self):
        rule = max_length("text", 3)

        assert rule.evaluate(SampleRequest(text=None)) is None
        assert rule.evaluate(SampleRequest(text="abc")) is None
        assert rule.evaluate(SampleRequest(text="abcd")) is not None

    def test_one_of_reads_choices_at_check_time(self):
        choices = ["abc"]
        rule = one_of("text", lambda: choices)

        assert rule.evaluate(SampleRequest(text="abc")) is None
        choices.clear()
        assert rule.evaluate(SampleRequest(text="abc")) is not None

    def test_ordered_range(self):
        rule = ordered_range("start", "end")

        same_day = SampleRequest(start=date(2024, 1, 1), end=date(2024, 1, 1))
        assert rule.evaluate(same_day) is None
        violation = rule.evaluate(
            SampleRequest(start=date(2024, 2, 1), end=date(2024, 1, 1))
        )
        assert violation is not None
        assert violation.field == "end"
        assert violation.code == ErrorCode.INVALID_DATE_RANGE

    def test_ordered_range_rejects_mixed_kinds(self):
        rule = ordered_range("start", "end")

        request = SampleRequest(
            start=date(2024, 1, 1), end=datetime(2024, 1, 2, tzinfo=UTC)
        )

        assert rule.evaluate(request) is not None

    def test_ordered_range_rejects_naive_and_aware_mix(self):
        rule = ordered_range("start", "end")

        mixed = SampleRequest(
            start=datetime(2024, 1, 1), end=datetime(2024, 1, 2, tzinfo=UTC)
        )
        naive = SampleRequest(start=datetime(2024, 1, 1), end=datetime(2024, 1, 2))

        assert rule.evaluate(mixed) is not None
        assert rule.evaluate(naive) is None


@pytest.mark.unit
class TestRuleSet:
    """Rule sets accumulate violations and compose by addition."""

    def test_validate_collects_every_violation(self):
        rules = RuleSet(
            name="request",
            rules=(required_identifier("entity_id"), int_range("page_number", minimum=1)),
        )

        violations = rules.validate(SampleRequest(entity_id=NIL_UUID, page_number=0))

        assert [v.field for v in violations] == ["entity_id", "page_number"]

    def test_check_success_returns_request(self):
        request = SampleRequest(entity_id=uuid7())
        rules = RuleSet(name="id", rules=(required_identifier("entity_id"),))

        result = rules.check(request)

        assert isinstance(result, Success)
        assert result.value is request

    def test_check_failure_wraps_violations(self):
        rules = RuleSet(name="id", rules=(required_identifier("entity_id"),))

        result = rules.check(SampleRequest())

        assert isinstance(result, Failure)
        assert isinstance(result.error, RequestValidationError)
        assert result.error.request_type == "SampleRequest"
        assert result.error.fields == ["entity_id"]
        assert result.error.code == ErrorCode.VALIDATION_FAILED

    def test_addition_keeps_order_and_drops_duplicates(self):
        ids = RuleSet(name="ids", rules=(required_identifier("entity_id"),))
        paging = RuleSet(
            name="paging",
            rules=(required_identifier("entity_id"), int_range("page_number", minimum=1)),
        )

        combined = ids + paging

        assert combined.name == "ids+paging"
        assert len(combined) == 2
        assert [r.field for r in combined.rules] == ["entity_id", "page_number"]

    def test_combine_leaves_inputs_untouched(self):
        ids = RuleSet(name="ids", rules=(required_identifier("entity_id"),))
        text = RuleSet(name="text", rules=(not_blank("text"),))

        RuleSet.combine("both", ids, text)

        assert len(ids) == 1
        assert len(text) == 1

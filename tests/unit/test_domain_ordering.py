"""Unit tests for ordinal ordering and default selection."""

import pytest

from crm_core.domain.entities import AccountType
from crm_core.domain.ordering import position_key, select_default, sort_by_position
from tests.factories import make_reference


@pytest.mark.unit
class TestSortByPosition:
    def test_sorts_ascending(self):
        entities = [
            make_reference(AccountType, "C", 3),
            make_reference(AccountType, "A", 1),
            make_reference(AccountType, "B", 2),
        ]

        assert [e.ordinal_position for e in sort_by_position(entities)] == [1, 2, 3]

    def test_ties_break_by_creation_then_id(self):
        later = make_reference(AccountType, "Later", 1, minutes=5)
        earlier = make_reference(AccountType, "Earlier", 1, minutes=1)

        assert sort_by_position([later, earlier]) == [earlier, later]

    def test_same_input_any_order_gives_same_output(self):
        entities = [make_reference(AccountType, f"T{i}", i % 2) for i in range(6)]

        assert sort_by_position(entities) == sort_by_position(reversed(entities))

    def test_position_key(self):
        entity = make_reference(AccountType, "A", 4)

        assert position_key(entity) == (4, entity.created_at, entity.id)


@pytest.mark.unit
class TestSelectDefault:
    def test_lowest_active_position_wins(self):
        inactive_first = make_reference(AccountType, "Old", 0)
        inactive_first.soft_delete(None)
        expected = make_reference(AccountType, "New", 2)

        candidates = [make_reference(AccountType, "X", 5), expected, inactive_first]

        assert select_default(candidates) is expected

    def test_tie_is_deterministic(self):
        first = make_reference(AccountType, "First", 1, minutes=0)
        second = make_reference(AccountType, "Second", 1, minutes=0)
        expected = min([first, second], key=lambda e: e.id)

        assert select_default([first, second]) is expected
        assert select_default([second, first]) is expected

    def test_no_active_members(self):
        entity = make_reference(AccountType, "Gone", 0)
        entity.soft_delete(None)

        assert select_default([entity]) is None
        assert select_default([]) is None

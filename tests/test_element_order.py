"""Tests for ElementOrder and SortedKeyMap.

Test categories:
- TestElementOrder: factories, validation, equality, map creation
- TestSortedKeyMap: sorted iteration, key/reverse, removal, mapping API
"""

import pytest

from common_graph import ElementOrder, OrderType
from common_graph.element_order import SortedKeyMap


class TestElementOrder:
    """Factories and validation."""

    def test_factories(self):
        assert ElementOrder.unordered().type is OrderType.UNORDERED
        assert ElementOrder.insertion().type is OrderType.INSERTION
        assert ElementOrder.natural().type is OrderType.SORTED

    def test_stable_is_insertion(self):
        assert ElementOrder.stable() == ElementOrder.insertion()

    def test_sorted_with_key(self):
        order = ElementOrder.sorted(key=len, reverse=True)
        assert order.is_sorted
        assert order.key is len
        assert order.reverse is True

    def test_key_rejected_for_unsorted_orders(self):
        with pytest.raises(ValueError):
            ElementOrder(OrderType.INSERTION, key=len)

    def test_type_must_be_enum(self):
        with pytest.raises(TypeError):
            ElementOrder("sorted")

    def test_frozen(self):
        order = ElementOrder.insertion()
        with pytest.raises(AttributeError):
            order.type = OrderType.SORTED  # type: ignore[misc]

    def test_create_map_kinds(self):
        assert isinstance(ElementOrder.insertion().create_map(), dict)
        assert isinstance(ElementOrder.unordered().create_map(10), dict)
        assert isinstance(ElementOrder.natural().create_map(), SortedKeyMap)

    def test_repr(self):
        assert repr(ElementOrder.natural()) == "ElementOrder.natural()"
        assert repr(ElementOrder.insertion()) == "ElementOrder.insertion()"


class TestSortedKeyMap:
    """Mapping that iterates its keys in sorted order."""

    def test_iterates_sorted(self):
        m = SortedKeyMap()
        for k in (5, 1, 3):
            m[k] = str(k)
        assert list(m) == [1, 3, 5]
        assert list(m.items()) == [(1, "1"), (3, "3"), (5, "5")]

    def test_key_and_reverse(self):
        m = SortedKeyMap(key=len, reverse=True)
        for k in ("bb", "a", "ccc"):
            m[k] = True
        assert list(m) == ["ccc", "bb", "a"]

    def test_overwrite_keeps_single_key(self):
        m = SortedKeyMap()
        m[1] = "a"
        m[1] = "b"
        assert len(m) == 1
        assert m[1] == "b"

    def test_delete(self):
        m = SortedKeyMap()
        m[2] = 2
        m[1] = 1
        del m[2]
        assert list(m) == [1]
        assert 2 not in m
        with pytest.raises(KeyError):
            del m[2]

    def test_get_and_pop(self):
        m = SortedKeyMap()
        m[1] = "x"
        assert m.get(1) == "x"
        assert m.get(2) is None
        assert m.pop(1) == "x"
        assert m.pop(1, None) is None
        assert len(m) == 0

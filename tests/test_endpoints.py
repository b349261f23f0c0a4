"""Tests for EndpointPair."""

import pytest

from common_graph import EndpointPair, NullElementError


class TestEndpointPair:
    def test_ordered_accessors(self):
        pair = EndpointPair.ordered("a", "b")
        assert pair.is_ordered
        assert pair.source() == "a"
        assert pair.target() == "b"
        assert list(pair) == ["a", "b"]

    def test_unordered_has_no_source(self):
        pair = EndpointPair.unordered("a", "b")
        with pytest.raises(ValueError):
            pair.source()
        with pytest.raises(ValueError):
            pair.target()

    def test_ordered_equality_respects_direction(self):
        assert EndpointPair.ordered(1, 2) == EndpointPair.ordered(1, 2)
        assert EndpointPair.ordered(1, 2) != EndpointPair.ordered(2, 1)

    def test_unordered_equality_is_symmetric(self):
        assert EndpointPair.unordered(1, 2) == EndpointPair.unordered(2, 1)
        assert hash(EndpointPair.unordered(1, 2)) == hash(EndpointPair.unordered(2, 1))
        assert EndpointPair.unordered(1, 1) != EndpointPair.unordered(1, 2)

    def test_ordered_never_equals_unordered(self):
        assert EndpointPair.ordered(1, 2) != EndpointPair.unordered(1, 2)

    def test_adjacent_node(self):
        pair = EndpointPair.unordered("x", "y")
        assert pair.adjacent_node("x") == "y"
        assert pair.adjacent_node("y") == "x"
        assert EndpointPair.ordered("x", "x").adjacent_node("x") == "x"
        with pytest.raises(ValueError):
            pair.adjacent_node("z")

    def test_rejects_none(self):
        with pytest.raises(NullElementError):
            EndpointPair.ordered(None, 1)

    def test_usable_in_sets(self):
        pairs = {EndpointPair.unordered(1, 2), EndpointPair.unordered(2, 1)}
        assert len(pairs) == 1

    def test_repr(self):
        assert repr(EndpointPair.ordered(1, 2)) == "<1 -> 2>"
        assert repr(EndpointPair.unordered(1, 2)) == "[1, 2]"

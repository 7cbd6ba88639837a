"""Tests for Maybe type (Just and Nothing)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from monadic import Just, Nothing, NothingType, empty, just, of_nullable

from tests.strategies import int_functions, integers, maybes


def is_even(x: int) -> bool:
    return x % 2 == 0


class TestJustCreation:
    """Tests for Just instantiation and basic properties."""

    def test_just_creation(self):
        """Just wraps a value."""
        assert Just(42).value == 42

    def test_just_with_none(self):
        """Just can wrap None (Just(None) is not Nothing)."""
        some = Just(None)
        assert some.value is None
        assert some is not Nothing
        assert some.is_just()

    def test_just_is_frozen(self):
        """Just instances are immutable."""
        some = Just(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]

    def test_pattern_matching(self):
        """Just and Nothing can be matched structurally."""

        def describe(m):
            match m:
                case Just(value):
                    return f'just {value}'
                case NothingType():
                    return 'nothing'

        assert describe(Just(3)) == 'just 3'
        assert describe(Nothing) == 'nothing'


class TestNothing:
    """Tests for the Nothing singleton."""

    def test_nothing_is_singleton(self):
        """Nothing is a singleton instance of NothingType."""
        assert Nothing is Nothing
        assert isinstance(Nothing, NothingType)
        assert NothingType() == Nothing

    def test_nothing_value_is_zero(self):
        """Reading value on Nothing gives None rather than raising."""
        assert Nothing.value is None

    def test_nothing_predicates(self):
        """Nothing reports itself as absent."""
        assert Nothing.is_nothing()
        assert not Nothing.is_just()

    def test_nothing_or_else(self):
        """Nothing.or_else(10) == 10."""
        assert Nothing.or_else(10) == 10


class TestFilter:
    """Tests for filter."""

    def test_even_value_is_kept(self):
        """Just(6) with an is-even predicate stays Just(6)."""
        assert Just(6).filter(is_even) == Just(6)

    def test_odd_value_becomes_nothing(self):
        """Just(5) with an is-even predicate becomes Nothing."""
        assert Just(5).filter(is_even) is Nothing

    def test_nothing_stays_nothing(self):
        """Nothing.filter never calls the predicate."""
        calls: list[int] = []
        assert Nothing.filter(calls.append) is Nothing
        assert calls == []


class TestTransformations:
    """Tests for map, flat_map and bind."""

    def test_map(self):
        """map applies f to a present value."""
        assert Just(21).map(lambda x: x * 2) == Just(42)

    def test_map_on_nothing_skips_function(self):
        """map on Nothing never calls f."""
        calls: list[int] = []
        assert Nothing.map(calls.append) is Nothing
        assert calls == []

    def test_flat_map(self):
        """flat_map returns the Maybe produced by f."""
        assert Just(4).flat_map(lambda x: Just(x + 1)) == Just(5)
        assert Just(4).flat_map(lambda _: Nothing) is Nothing

    def test_bind_maps_none_to_nothing(self):
        """bind wraps a nilable transform's outcome with of_nullable."""
        assert Just(3).bind(lambda x: x + 1) == Just(4)
        assert Just(3).bind(lambda _: None) is Nothing
        assert Nothing.bind(lambda x: x) is Nothing

    @given(maybes, int_functions)
    def test_map_agrees_with_flat_map(self, m, f):
        """m.map(f) equals m.flat_map(lambda x: Just(f(x)))."""
        assert m.map(f) == m.flat_map(lambda x: Just(f(x)))

    @given(integers, integers)
    def test_or_else_on_just_returns_value(self, value, default):
        """or_else on Just ignores the default."""
        assert Just(value).or_else(default) == value


class TestConstructors:
    """Tests for just, empty and of_nullable."""

    def test_of_nullable_none(self):
        """None becomes Nothing."""
        assert of_nullable(None) is Nothing

    @given(st.one_of(integers, st.text(), st.just(0), st.just('')))
    def test_of_nullable_value(self, value):
        """Anything but None, zero values included, becomes Just."""
        assert of_nullable(value) == Just(value)

    def test_just_and_empty(self):
        """just() always builds Just; empty() is Nothing."""
        assert just(None) == Just(None)
        assert empty() is Nothing

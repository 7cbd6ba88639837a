"""Tests for typeclass decorator and the fmap/bind instances."""

import pytest
from monadic import (
    IO,
    Context,
    Continuation,
    Future,
    Identity,
    Just,
    Left,
    List,
    Nothing,
    Reader,
    Right,
    State,
    Success,
    Writer,
    bind,
    fmap,
    pure,
    typeclass,
)
from monadic.typeclass import CONTAINERS, NoInstanceError, TypeClass


class TestTypeclassBasic:
    """Tests for basic typeclass functionality."""

    def test_typeclass_decorator(self):
        """@typeclass creates a TypeClass instance."""

        @typeclass
        def show(value) -> str: ...

        assert isinstance(show, TypeClass)
        assert show.__name__ == 'show'

    def test_typeclass_preserves_doc(self):
        """@typeclass preserves docstring."""

        @typeclass
        def show(value) -> str:
            """Convert to string."""

        assert show.__doc__ == 'Convert to string.'

    def test_typeclass_repr(self):
        """TypeClass has readable repr."""

        @typeclass
        def show(value) -> str: ...

        assert repr(show) == '<typeclass show with 0 instances>'
        assert repr(fmap) == f'<typeclass fmap with {len(CONTAINERS)} instances>'


class TestTypeclassDispatch:
    """Tests for registering and dispatching instances."""

    def test_instance_registration(self):
        """instance() registers one implementation for several types."""

        @typeclass
        def show(value) -> str: ...

        @show.instance(Just, Right)
        def show_present(value) -> str:
            return f'has {value.value}'

        assert show(Just(1)) == 'has 1'
        assert show(Right(2)) == 'has 2'
        assert set(show.registered()) == {Just, Right}

    def test_stub_without_instance_raises(self):
        """A stub typeclass raises NoInstanceError for unknown types."""

        @typeclass
        def show(value) -> str:
            """Only a docstring."""

        with pytest.raises(NoInstanceError) as exc_info:
            show(1.5)
        assert exc_info.value.typeclass_name == 'show'
        assert exc_info.value.value_type is float

    def test_default_implementation(self):
        """A typeclass with a body uses it as the fallback."""

        @typeclass
        def show(value) -> str:
            return f'default {value}'

        assert show(3) == 'default 3'

    def test_subclass_dispatch(self):
        """Instances are found through the MRO."""

        class Tagged(Identity, frozen=True):
            pass

        assert fmap(Tagged(2), lambda x: x + 1) == Identity(3)

    def test_requires_argument(self):
        """Calling with no arguments is a TypeError."""
        with pytest.raises(TypeError, match='at least one argument'):
            fmap()


class TestFmapBind:
    """fmap and bind reach every container."""

    def test_every_container_registered(self):
        """Both typeclasses cover the same container classes."""
        assert set(fmap.registered()) == set(CONTAINERS)
        assert set(bind.registered()) == set(CONTAINERS)

    def test_no_instance_for_plain_values(self):
        """Plain values have no fmap or bind."""
        with pytest.raises(NoInstanceError):
            fmap(3, str)
        with pytest.raises(NoInstanceError):
            bind([1], str)

    def test_pure_containers(self):
        """fmap and bind delegate to map and flat_map."""
        assert fmap(Just(2), lambda x: x * 2) == Just(4)
        assert fmap(Nothing, lambda x: x * 2) is Nothing
        assert bind(Right(2), lambda x: Left(x)) == Left(2)
        assert bind(List.of(1, 2), lambda x: List.of(x, x)) == List.of(1, 1, 2, 2)

    def test_deferred_containers(self):
        """Deferred containers stay deferred until run."""
        assert fmap(State.pure(1), str).run(0) == ('1', 0)
        assert fmap(Reader.pure(1), str).run(None) == '1'
        assert bind(Writer(1, ()), lambda x: Writer(x + 1, ('w',))).run() == (2, ('w',))
        assert fmap(pure(1), str).run_free(lambda f: f) == '1'
        assert fmap(IO.of(1), str).perform() == Success('1')
        assert fmap(Future.of(1), str).wait(timeout=5) == Success('1')
        assert fmap(Continuation.of(1), str).run(Context.background()) == Success('1')

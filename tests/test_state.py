"""Tests for State."""

from hypothesis import given
from monadic import State, get_state, modify_state, put_state

from tests.strategies import integers


class TestStateRun:
    """Tests for running State computations."""

    def test_run_eval_exec(self):
        """run gives (value, state); eval and exec pick one side."""
        counter = State(lambda s: (s + 1, s * 2))
        assert counter.run(3) == (4, 6)
        assert counter.eval(3) == 4
        assert counter.exec(3) == 6

    def test_pure_keeps_state(self):
        """State.pure yields its value and leaves the state alone."""
        assert State.pure('x').run(7) == ('x', 7)


class TestStateComposition:
    """Tests for map and flat_map."""

    def test_flat_map_threads_updated_state(self):
        """flat_map runs the continuation against the updated state."""
        counter = State(lambda s: (s + 1, s * 2))
        chained = counter.flat_map(lambda x: State(lambda s: (x, s)))
        assert chained.run(3) == (4, 6)

    def test_flat_map_sees_new_state(self):
        """The continuation reads the state the first step produced."""
        program = put_state(10).flat_map(lambda _: get_state())
        assert program.run(0) == (10, 10)

    @given(integers)
    def test_map_leaves_state(self, start):
        """map transforms the value only."""
        assert get_state().map(lambda x: x * 3).run(start) == (start * 3, start)

    def test_modify_state(self):
        """modify_state applies f to the state."""
        program = modify_state(lambda s: s + 5).flat_map(lambda _: get_state())
        assert program.run(1) == (6, 6)

"""Tests for the safe decorator."""

import pytest
from monadic import Failure, Success, safe


class TestSafe:
    """Tests for @safe."""

    def test_safe_returns_success(self):
        """@safe wraps a return value in Success."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Success(5.0)

    def test_safe_returns_failure_on_exception(self):
        """@safe turns a raised exception into Failure."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        result = divide(10, 0)
        assert isinstance(result, Failure)
        assert isinstance(result.error, ZeroDivisionError)

    def test_safe_with_exceptions_param(self):
        """@safe(exceptions=...) only catches the listed types."""

        @safe(exceptions=(KeyError,))
        def lookup(key: str) -> int:
            if key == 'bad':
                raise ValueError(key)
            return {'a': 1}[key]

        assert lookup('a') == Success(1)
        assert isinstance(lookup('z').error, KeyError)
        with pytest.raises(ValueError, match='bad'):
            lookup('bad')

    def test_safe_preserves_function_name(self):
        """@safe keeps the wrapped function's metadata."""

        @safe
        def my_function() -> int:
            """My docstring."""
            return 1

        assert my_function.__name__ == 'my_function'
        assert my_function.__doc__ == 'My docstring.'

    def test_safe_with_kwargs(self):
        """@safe forwards keyword arguments."""

        @safe
        def greet(name: str, *, punctuation: str = '!') -> str:
            return f'hi {name}{punctuation}'

        assert greet('ada', punctuation='?') == Success('hi ada?')

    def test_safe_on_method(self):
        """@safe works on methods."""

        class Parser:
            @safe
            def parse(self, raw: str) -> int:
                return int(raw)

        assert Parser().parse('4') == Success(4)
        assert Parser().parse('x').failure()

"""Decorators bridging raise-based code and Result."""

from monadic.decorators.safe import safe

__all__ = ['safe']

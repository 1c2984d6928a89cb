"""Maybe type: Just[T] | Nothing for optional values.

Maybe is an explicit two-case union rather than ``T | None``, so a present
``None`` (``Just(None)``) never collapses into absence. ``None`` is only read
as absence at the two language-level boundaries, ``maybe()`` and
``from_maybe()``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from adtkit.errors import UnwrapError

if TYPE_CHECKING:
    from adtkit.types.result import Result

__all__ = [
    'Just',
    'Maybe',
    'Nothing',
    'NothingType',
    'from_maybe',
    'from_result',
    'just',
    'map_maybe',
    'maybe',
    'nothing',
]


class Just[T](msgspec.Struct, frozen=True, gc=False, tag='Just', tag_field='_t'):
    """Present variant of Maybe containing a value of type T.

    Examples:
        >>> Just(21).map(lambda x: x * 2)
        Just(value=42)
        >>> Just(None).is_just()
        True
    """

    value: T

    def is_just(self) -> TypeIs[Just[T]]:
        """Return True since this is Just."""
        return True

    def is_nothing(self) -> TypeIs[NothingType]:
        """Return False since this is Just."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Just[U]:
        """Apply a function to the contained value."""
        return Just(f(self.value))

    def and_then[U](self, f: Callable[[T], Just[U] | NothingType]) -> Just[U] | NothingType:
        """Apply a function that returns a Maybe to the contained value."""
        return f(self.value)

    def to_optional(self) -> T | None:
        """Return the contained value."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False, tag='Nothing', tag_field='_t'):
    """Absent variant of Maybe.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. All instances compare equal.
    """

    def is_just(self) -> TypeIs[Just[object]]:
        """Return False since this is Nothing."""
        return False

    def is_nothing(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Just[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def to_optional(self) -> None:
        """Return None since this is Nothing."""
        return None


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Just[T] | NothingType


def just[T](value: T) -> Just[T]:
    """Wrap a value as a present Maybe."""
    return Just(value)


def nothing() -> NothingType:
    """Return the absent Maybe."""
    return Nothing


def maybe[T](value: T | None) -> Maybe[T]:
    """Convert a possibly-None value into a Maybe.

    Examples:
        >>> maybe(0)
        Just(value=0)
        >>> maybe(None)
        NothingType()
    """
    return Nothing if value is None else Just(value)


def from_maybe[T](m: Maybe[T]) -> T | None:
    """Extract the value of a Maybe, or None when absent."""
    return m.to_optional()


def from_result[E, T](result: Result[E, T]) -> Maybe[T]:
    """Convert a Result into a Maybe, dropping the error."""
    return result.ok()


def map_maybe[T, U](m: Maybe[T], fn: Callable[[T], U]) -> Maybe[U]:
    """Apply fn to the value if present."""
    return m.map(fn)

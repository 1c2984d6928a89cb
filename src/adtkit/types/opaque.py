"""Opaque: nominal wrappers that hide a validated inner value.

Subclass `Opaque` once per domain concept. Two opaque types wrapping the same
inner type never compare equal, and the inner value is only reachable through
`unwrap()`:

    class Email(Opaque[str]):
        __slots__ = ()

        def __init__(self, value: str) -> None:
            if '@' not in value:
                raise ValueError('invalid email')
            super().__init__(value)

Opaque values serialize as their inner value through `adtkit.to_json` and
can be decoded back with `adtkit.decode(text, Email)`, which runs the same
validation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

__all__ = ['Opaque', 'json_value_create']


class Opaque[T]:
    """Base class for nominal, immutable wrappers around a value of type T."""

    __slots__ = ('_value',)

    def __init__(self, value: T) -> None:
        if type(self) is Opaque:
            msg = 'Opaque cannot be instantiated directly; subclass it'
            raise TypeError(msg)
        object.__setattr__(self, '_value', value)

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'


def json_value_create[T, O: Opaque[Any]](cls: type[O]) -> Callable[[T], O]:
    """Return a factory that wraps a JSON value in the opaque type `cls`."""

    def create(value: T) -> O:
        return cls(value)

    return create

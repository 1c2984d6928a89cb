"""Result type: Err[E] | Ok[T] for errors carried as values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NoReturn, TypeIs

import msgspec

from adtkit.errors import UnwrapError
from adtkit.types.maybe import Just, Maybe, Nothing

__all__ = [
    'Err',
    'Ok',
    'Result',
    'collect',
    'err',
    'from_err',
    'from_ok',
    'map_result',
    'map_result_err',
    'ok',
    'partition',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False, tag='Ok', tag_field='_t'):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok(42).ok()
        Just(value=42)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[E, U](self, f: Callable[[T], Err[E] | Ok[U]]) -> Err[E] | Ok[U]:
        """Apply a function that returns a Result to the contained value."""
        return f(self.value)

    def ok(self) -> Maybe[T]:
        """Convert to Maybe, returning Just(value)."""
        return Just(self.value)

    def err(self) -> Maybe[object]:
        """Convert to Maybe, returning Nothing since this is Ok."""
        return Nothing


class Err[E](msgspec.Struct, frozen=True, gc=False, tag='Err', tag_field='_t'):
    """Error variant of Result containing an error of type E.

    The error is ordinary data: any type can be carried, not only exceptions.

    Examples:
        >>> Err('boom').map(lambda x: x * 2)
        Err(error='boom')
        >>> Err('boom').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Err[E] | Ok[U]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def ok(self) -> Maybe[object]:
        """Convert to Maybe, returning Nothing since this is Err."""
        return Nothing

    def err(self) -> Maybe[E]:
        """Convert to Maybe, returning Just(error)."""
        return Just(self.error)


type Result[E, T] = Err[E] | Ok[T]


def ok[T](value: T) -> Ok[T]:
    """Construct a successful result."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Construct a failed result."""
    return Err(error)


def map_result[E, T, U](result: Result[E, T], fn: Callable[[T], U]) -> Result[E, U]:
    """Map the value of an Ok, returning an Err untouched.

    Examples:
        >>> map_result(ok(2), lambda x: x + 1)
        Ok(value=3)
        >>> map_result(err('e'), lambda x: x + 1)
        Err(error='e')
    """
    return result.map(fn)


def map_result_err[E, F, T](result: Result[E, T], fn: Callable[[E], F]) -> Result[F, T]:
    """Map the error of an Err, returning an Ok untouched."""
    return result.map_err(fn)


def from_ok[E, T](result: Result[E, T]) -> Maybe[T]:
    """Return Just(value) for Ok, Nothing for Err."""
    return result.ok()


def from_err[E, T](result: Result[E, T]) -> Maybe[E]:
    """Return Just(error) for Err, Nothing for Ok."""
    return result.err()


def partition[E, T](results: Iterable[Result[E, T]]) -> tuple[list[T], list[E]]:
    """Split results into their Ok values and Err errors.

    Each group keeps the order in which it was encountered.

    Examples:
        >>> partition([ok(1), err('a'), ok(2), err('b')])
        ([1, 2], ['a', 'b'])
    """
    oks: list[T] = []
    errs: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            oks.append(result.value)
        else:
            errs.append(result.error)
    return oks, errs


def collect[E, T](results: Iterable[Result[E, T]]) -> Result[E, list[T]]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)

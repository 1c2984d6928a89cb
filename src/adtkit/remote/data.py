"""RemoteData: the lifecycle of a single asynchronous request.

    NotAsked -> Loading -> Failure | Success

Failure and Success may go back to Loading on retry. The type only tags the
current state; moving between states is up to the caller. Transformations
never change a value's state.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

from adtkit.errors import DecodeFailure
from adtkit.types.json_value import decode
from adtkit.types.maybe import Just, Maybe, Nothing
from adtkit.types.result import Ok, Result

__all__ = [
    'Failure',
    'Loading',
    'NotAsked',
    'RemoteData',
    'Success',
    'decode_remote_data',
    'failure',
    'from_failure',
    'from_result',
    'from_success',
    'loading',
    'map_remote_data',
    'map_remote_data_error',
    'not_asked',
    'success',
]


class _State(msgspec.Struct, frozen=True, gc=False, tag_field='_t'):
    """Shared state predicates for the four RemoteData variants."""

    def is_not_asked(self) -> TypeIs[NotAsked]:
        return isinstance(self, NotAsked)

    def is_loading(self) -> TypeIs[Loading]:
        return isinstance(self, Loading)

    def is_failure(self) -> TypeIs[Failure[Any]]:
        return isinstance(self, Failure)

    def is_success(self) -> TypeIs[Success[Any]]:
        return isinstance(self, Success)


class NotAsked(_State, frozen=True, gc=False, tag='NotAsked'):
    """The request has not been initiated."""


class Loading(_State, frozen=True, gc=False, tag='Loading'):
    """The request is in progress."""


class Failure[E](_State, frozen=True, gc=False, tag='Failure'):
    """The request failed with `error`."""

    error: E


class Success[T](_State, frozen=True, gc=False, tag='Success'):
    """The request succeeded with `data`."""

    data: T


type RemoteData[E, T] = NotAsked | Loading | Failure[E] | Success[T]

_NOT_ASKED = NotAsked()
_LOADING = Loading()


def not_asked() -> NotAsked:
    """Construct a NotAsked state."""
    return _NOT_ASKED


def loading() -> Loading:
    """Construct a Loading state."""
    return _LOADING


def failure[E](error: E) -> Failure[E]:
    """Construct a Failure state with the given error."""
    return Failure(error)


def success[T](data: T) -> Success[T]:
    """Construct a Success state with the given data."""
    return Success(data)


def from_result[E, T](result: Result[E, T]) -> Failure[E] | Success[T]:
    """Lift a settled Result into RemoteData.

    Examples:
        >>> from_result(Ok(1))
        Success(data=1)
    """
    if isinstance(result, Ok):
        return Success(result.value)
    return Failure(result.error)


def map_remote_data[E, T, U](rd: RemoteData[E, T], fn: Callable[[T], U]) -> RemoteData[E, U]:
    """Transform the Success payload, leaving every other state unchanged.

    Examples:
        >>> map_remote_data(success(2), lambda x: x * 10)
        Success(data=20)
        >>> map_remote_data(loading(), lambda x: x * 10)
        Loading()
    """
    if isinstance(rd, Success):
        return Success(fn(rd.data))
    return rd


def map_remote_data_error[E, F, T](rd: RemoteData[E, T], fn: Callable[[E], F]) -> RemoteData[F, T]:
    """Transform the Failure error, leaving every other state unchanged."""
    if isinstance(rd, Failure):
        return Failure(fn(rd.error))
    return rd


def from_failure[E, T](rd: RemoteData[E, T]) -> Maybe[E]:
    """Return Just(error) for Failure, Nothing otherwise."""
    return Just(rd.error) if isinstance(rd, Failure) else Nothing


def from_success[E, T](rd: RemoteData[E, T]) -> Maybe[T]:
    """Return Just(data) for Success, Nothing otherwise."""
    return Just(rd.data) if isinstance(rd, Success) else Nothing


def decode_remote_data[E, T](
    text: str | bytes,
    error_type: type[E] | Any = Any,
    data_type: type[T] | Any = Any,
) -> Result[DecodeFailure, RemoteData[E, T]]:
    """Decode the tagged JSON form of a RemoteData.

    The wire shape is ``{"_t": "NotAsked" | "Loading" | "Failure" | "Success", ...}``,
    which is what `adtkit.to_json` produces.

    Examples:
        >>> decode_remote_data('{"_t": "Success", "data": 3}', data_type=int)
        Ok(value=Success(data=3))
    """
    return decode(text, NotAsked | Loading | Failure[error_type] | Success[data_type])

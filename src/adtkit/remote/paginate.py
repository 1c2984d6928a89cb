"""RemotePaginate: RemoteData wrapping a paginated list.

The outer RemoteData tracks the initial load. Once it has succeeded, the
inner `Paginate.status` tracks follow-up pages, so an error while loading
more items lives in the status (`PageError`) rather than turning the outer
state into Failure.

Every operation here is a no-op on NotAsked, Loading and Failure: it
returns its input unchanged, so callers never have to check the state first.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import msgspec

from adtkit.remote.data import RemoteData, Success

__all__ = [
    'Loaded',
    'LoadingMore',
    'NoMore',
    'PageError',
    'Paginate',
    'PaginateStatus',
    'RemotePaginate',
    'append_paginate',
    'create_paginate',
    'loaded',
    'loading_more',
    'map_paginate_meta',
    'map_paginate_status',
    'map_paginate_value',
    'no_more',
    'page_error',
    'prepend_paginate',
]


# --- Default status ---


class Loaded(msgspec.Struct, frozen=True, gc=False, tag='Loaded', tag_field='_t'):
    """Items are loaded and idle."""


class LoadingMore(msgspec.Struct, frozen=True, gc=False, tag='LoadingMore', tag_field='_t'):
    """More items are being loaded."""


class PageError[E](msgspec.Struct, frozen=True, gc=False, tag='Error', tag_field='_t'):
    """Loading a further page failed with `error`."""

    error: E


class NoMore(msgspec.Struct, frozen=True, gc=False, tag='NoMore', tag_field='_t'):
    """All available items have been loaded."""


type PaginateStatus[E] = Loaded | LoadingMore | PageError[E] | NoMore


def loaded() -> Loaded:
    return Loaded()


def loading_more() -> LoadingMore:
    return LoadingMore()


def page_error[E](error: E) -> PageError[E]:
    return PageError(error)


def no_more() -> NoMore:
    return NoMore()


# --- Paginate ---


class Paginate[E, T, M, S](msgspec.Struct, frozen=True, gc=False):
    """A page-ordered list of items with a status and optional metadata.

    `E` is the error type carried by the default status, matching
    RemotePaginate[E, T, M, S]. `status` is usually a PaginateStatus but may
    be any caller-defined type; it is never inspected here. `meta` is
    `msgspec.UNSET` when absent, which keeps "no metadata" apart
    from falsy metadata such as ``0`` or ``None``.

    Attributes:
        value: Items in page order.
        status: Pagination status.
        meta: Optional metadata, e.g. a cursor or total count.
    """

    value: tuple[T, ...]
    status: S
    meta: M | msgspec.UnsetType = msgspec.UNSET


type RemotePaginate[E, T, M = Any, S = PaginateStatus[E]] = RemoteData[E, Paginate[E, T, M, S]]


def create_paginate[E, T, M, S](
    value: Iterable[T],
    status: S,
    meta: M | msgspec.UnsetType = msgspec.UNSET,
) -> RemotePaginate[E, T, M, S]:
    """Create a RemotePaginate in the Success state.

    Examples:
        >>> create_paginate([1, 2], loaded(), meta=5)
        Success(data=Paginate(value=(1, 2), status=Loaded(), meta=5))
    """
    return Success(Paginate(tuple(value), status, meta))


def map_paginate_value[E, T, U, M, S](
    remote: RemotePaginate[E, T, M, S],
    fn: Callable[[T], U],
) -> RemotePaginate[E, U, M, S]:
    """Map fn over every item; status and meta are kept as they are."""
    if not isinstance(remote, Success):
        return remote
    page = remote.data
    return Success(Paginate(tuple(fn(x) for x in page.value), page.status, page.meta))


def map_paginate_meta[E, T, M, N, S](
    remote: RemotePaginate[E, T, M, S],
    fn: Callable[[M], N],
) -> RemotePaginate[E, T, N, S]:
    """Transform meta when it is present.

    Only a truly absent meta (UNSET) is skipped; falsy values such as ``0``,
    ``''`` or ``None`` are passed to fn.
    """
    if not isinstance(remote, Success) or remote.data.meta is msgspec.UNSET:
        return remote
    page = remote.data
    return Success(Paginate(page.value, page.status, fn(page.meta)))


def map_paginate_status[E, T, M, S, R](
    remote: RemotePaginate[E, T, M, S],
    fn: Callable[[S], R],
) -> RemotePaginate[E, T, M, R]:
    """Transform the status; value and meta are kept as they are."""
    if not isinstance(remote, Success):
        return remote
    page = remote.data
    return Success(Paginate(page.value, fn(page.status), page.meta))


def append_paginate[E, T, M, S](
    remote: RemotePaginate[E, T, M, S],
    items: Iterable[T],
) -> RemotePaginate[E, T, M, S]:
    """Add items after the existing ones."""
    if not isinstance(remote, Success):
        return remote
    page = remote.data
    return Success(Paginate((*page.value, *items), page.status, page.meta))


def prepend_paginate[E, T, M, S](
    remote: RemotePaginate[E, T, M, S],
    items: Iterable[T],
) -> RemotePaginate[E, T, M, S]:
    """Add items before the existing ones."""
    if not isinstance(remote, Success):
        return remote
    page = remote.data
    return Success(Paginate((*items, *page.value), page.status, page.meta))

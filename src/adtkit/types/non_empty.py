"""NonEmptyArray: a sequence guaranteed to hold at least one element."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import msgspec

from adtkit.types.maybe import Just, Maybe, Nothing

__all__ = [
    'NonEmptyArray',
    'append_nea',
    'from_iterable',
    'head_nea',
    'last_nea',
    'length_nea',
    'map_nea',
    'non_empty_array',
    'prepend_nea',
    'tail_nea',
    'to_list',
]


class NonEmptyArray[T](msgspec.Struct, frozen=True, gc=False):
    """A required `head` followed by a possibly empty `tail`.

    The length is always ``1 + len(tail)``. Every operation returns a new
    array; the tail is a tuple so instances are immutable all the way down.

    Examples:
        >>> nea = NonEmptyArray(1, (2, 3))
        >>> nea.prepend(0).to_list()
        [0, 1, 2, 3]
        >>> len(nea.append(4))
        4
    """

    head: T
    tail: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.tail, tuple):
            msgspec.structs.force_setattr(self, 'tail', tuple(self.tail))

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def to_list(self) -> list[T]:
        """Return all elements, head first."""
        return [self.head, *self.tail]

    def map[U](self, f: Callable[[T], U]) -> NonEmptyArray[U]:
        """Apply f to every element, preserving order."""
        return NonEmptyArray(f(self.head), tuple(f(x) for x in self.tail))

    def last(self) -> T:
        """Return the last element (the head when the tail is empty)."""
        return self.tail[-1] if self.tail else self.head

    def length(self) -> int:
        """Return the number of elements, always at least 1."""
        return len(self)

    def append(self, item: T) -> NonEmptyArray[T]:
        """Return a new array with item added at the end."""
        return NonEmptyArray(self.head, (*self.tail, item))

    def prepend(self, item: T) -> NonEmptyArray[T]:
        """Return a new array with item as head and the old head first in the tail."""
        return NonEmptyArray(item, (self.head, *self.tail))


def non_empty_array[T](head: T, tail: Iterable[T] = ()) -> NonEmptyArray[T]:
    """Construct a NonEmptyArray from a head element and optional tail."""
    return NonEmptyArray(head, tuple(tail))


def from_iterable[T](items: Iterable[T]) -> Maybe[NonEmptyArray[T]]:
    """Build a NonEmptyArray from any iterable, or Nothing if it is empty.

    Examples:
        >>> from_iterable([1, 2])
        Just(value=NonEmptyArray(head=1, tail=(2,)))
        >>> from_iterable([])
        NothingType()
    """
    it = iter(items)
    for head in it:
        return Just(NonEmptyArray(head, tuple(it)))
    return Nothing


def to_list[T](nea: NonEmptyArray[T]) -> list[T]:
    """Convert to a standard list."""
    return nea.to_list()


def map_nea[T, U](nea: NonEmptyArray[T], fn: Callable[[T], U]) -> NonEmptyArray[U]:
    """Transform every element."""
    return nea.map(fn)


def last_nea[T](nea: NonEmptyArray[T]) -> T:
    """Return the last element."""
    return nea.last()


def length_nea[T](nea: NonEmptyArray[T]) -> int:
    """Return the number of elements."""
    return len(nea)


def head_nea[T](nea: NonEmptyArray[T]) -> T:
    """Return the first element."""
    return nea.head


def tail_nea[T](nea: NonEmptyArray[T]) -> tuple[T, ...]:
    """Return every element but the first."""
    return nea.tail


def append_nea[T](nea: NonEmptyArray[T], item: T) -> NonEmptyArray[T]:
    """Append an item to the end."""
    return nea.append(item)


def prepend_nea[T](nea: NonEmptyArray[T], item: T) -> NonEmptyArray[T]:
    """Prepend an item to the start."""
    return nea.prepend(item)

"""Two-element tuple helpers."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['Tuple', 'fst', 'map_fst', 'map_snd', 'pair', 'snd']

type Tuple[A, B] = tuple[A, B]


def pair[A, B](a: A, b: B) -> Tuple[A, B]:
    """Construct a tuple from two values."""
    return (a, b)


def fst[A, B](t: Tuple[A, B]) -> A:
    """Return the first element of a tuple."""
    return t[0]


def snd[A, B](t: Tuple[A, B]) -> B:
    """Return the second element of a tuple."""
    return t[1]


def map_fst[A, B, C](t: Tuple[A, B], fn: Callable[[A], C]) -> Tuple[C, B]:
    """Transform the first element, keeping the second."""
    return (fn(t[0]), t[1])


def map_snd[A, B, C](t: Tuple[A, B], fn: Callable[[B], C]) -> Tuple[A, C]:
    """Transform the second element, keeping the first."""
    return (t[0], fn(t[1]))

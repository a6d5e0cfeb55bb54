"""Lazy sequence producers for lazytasks.

Every function here is a generator function: calling it does no work, and
each call returns an independent generator with its own state.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from .config import FIBONACCI_TERMS

logger = logging.getLogger(__name__)

# A numeric source: an iterable, or a generator function producing one
Source = Union[Iterable[Any], Callable[[], Iterable[Any]]]

# Marks an exhausted source; None is a legitimate sequence value
_EXHAUSTED = object()


def get_99_bottles_of_beer() -> Iterator[str]:
    """Yield the lines of the "99 Bottles of Beer" song.

    Two lines per verse from 99 bottles down to 1, then the closing pair:

        '99 bottles of beer on the wall, 99 bottles of beer.'
        'Take one down and pass it around, 98 bottles of beer on the wall.'
        ...
        'No more bottles of beer on the wall, no more bottles of beer.'
        'Go to the store and buy some more, 99 bottles of beer on the wall.'
    """
    def bottles(count: int) -> str:
        if count == 0:
            return "no more bottles"
        if count == 1:
            return "1 bottle"
        return f"{count} bottles"

    for count in range(99, 0, -1):
        yield f"{bottles(count)} of beer on the wall, {bottles(count)} of beer."
        yield f"Take one down and pass it around, {bottles(count - 1)} of beer on the wall."
    yield "No more bottles of beer on the wall, no more bottles of beer."
    yield "Go to the store and buy some more, 99 bottles of beer on the wall."


def get_fibonacci_sequence() -> Iterator[int]:
    """Yield the Fibonacci sequence 0, 1, 1, 2, 3, 5, 8, 13, ...

    Stops after FIBONACCI_TERMS terms. Each term costs one addition on a
    rolling pair held by this generator alone.
    """
    current, following = 0, 1
    for _ in range(FIBONACCI_TERMS):
        yield current
        current, following = following, current + following


def _open_source(source: Source) -> Iterator[Any]:
    """Turn a generator function or an iterable into a fresh iterator."""
    if callable(source):
        source = source()
    return iter(source)


def _pull(iterator: Optional[Iterator[Any]]) -> Any:
    """Pull the next value, or _EXHAUSTED if there is none."""
    if iterator is None:
        return _EXHAUSTED
    return next(iterator, _EXHAUSTED)


def merge_sorted_sequences(source1: Source, source2: Source) -> Iterator[Any]:
    """Merge two ascending sequences into one ascending sequence.

    Each round pulls one value from each live source and yields the pair
    smaller first. Once a source runs out it is never pulled again and the
    other source's values are forwarded unpaired. The merge ends when both
    sources are exhausted, and is infinite if either source is.

    The pairing is per round, not a comparison merge: ``[1, 2]`` merged
    with ``[10, 11]`` yields ``1, 10, 2, 11``. Inputs whose values
    interleave one to one, like odds and evens, come out fully sorted.

    Args:
        source1: Ascending iterable, or generator function producing one
        source2: Ascending iterable, or generator function producing one

    Yields:
        Values from both sources

    Example:
        >>> list(merge_sorted_sequences([1, 3, 5], [2, 4, 6]))
        [1, 2, 3, 4, 5, 6]
        >>> list(merge_sorted_sequences([0], [2, 4, 6]))
        [0, 2, 4, 6]
    """
    first = _open_source(source1)
    second = _open_source(source2)

    while True:
        left = _pull(first)
        right = _pull(second)

        if left is _EXHAUSTED and first is not None:
            logger.debug("First merge source exhausted")
            first = None
        if right is _EXHAUSTED and second is not None:
            logger.debug("Second merge source exhausted")
            second = None

        if left is _EXHAUSTED and right is _EXHAUSTED:
            return
        if left is _EXHAUSTED:
            yield right
        elif right is _EXHAUSTED:
            yield left
        elif right < left:
            yield right
            yield left
        else:
            yield left
            yield right

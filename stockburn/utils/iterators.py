"""Iterator helpers."""

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class PeekableIterator(Generic[T]):
    """
    Iterator with one element of lookahead.

    The batcher and the tick generator both need to look at the next element
    of a stream without consuming it. State is kept in plain attributes so
    the cursor survives copy.deepcopy when the wrapped iterator does.
    """

    def __init__(self, iterable: Iterable[T]):
        self._it: Iterator[T] = iter(iterable)
        self._head: Optional[T] = None
        self._has_head = False
        self._exhausted = False

    def __iter__(self) -> "PeekableIterator[T]":
        return self

    def __next__(self) -> T:
        if self._has_head:
            self._has_head = False
            head, self._head = self._head, None
            return head
        if self._exhausted:
            raise StopIteration
        try:
            return next(self._it)
        except StopIteration:
            self._exhausted = True
            raise

    def _fill(self) -> None:
        if self._has_head or self._exhausted:
            return
        try:
            self._head = next(self._it)
            self._has_head = True
        except StopIteration:
            self._exhausted = True

    def peek(self, default: Any = None) -> Any:
        """Return the next element without consuming it, or `default` if exhausted."""
        self._fill()
        return self._head if self._has_head else default

    def is_exhausted(self) -> bool:
        """Check whether no element remains."""
        self._fill()
        return not self._has_head

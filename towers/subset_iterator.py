from __future__ import annotations

from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


class SubsetIterator(Generic[T]):
    """Walks every subset of ``items`` in binary counting order.

    Bit ``i`` of the counter marks ``items[i]`` as a member, so counter 0 is the
    empty subset and counter ``2**n - 1`` is the full sequence. ``reset()``
    replays the same order from the start.
    """

    def __init__(self, items: Sequence[T]) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._total = 1 << len(self._items)
        self._counter = 0

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def total(self) -> int:
        return self._total

    def reset(self) -> None:
        self._counter = 0

    def has_next(self) -> bool:
        return self._counter < self._total

    def peek(self) -> list[T]:
        code = self._counter
        # only bits up to the highest set one can be members
        max_bits = max(1, code.bit_length())
        return [self._items[i] for i in range(max_bits) if (code >> i) & 1]

    def advance(self) -> list[T]:
        subset = self.peek()
        self._counter += 1
        return subset

    get = peek
    next = advance

    def __len__(self) -> int:
        return max(0, self._total - self._counter)

    def __iter__(self) -> Iterator[list[T]]:
        return self

    def __next__(self) -> list[T]:
        if not self.has_next():
            raise StopIteration
        return self.advance()


def subset_from_code(items: Sequence[T], code: int) -> list[T]:
    if code < 0 or code >= 1 << len(items):
        raise ValueError(f"subset code out of range: code={code}, n={len(items)}")
    return [item for i, item in enumerate(items) if (code >> i) & 1]

"""Append-only storage addressed by stable integer handles."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


class Arena(Generic[T]):
    """Growable container whose handles are the insertion positions.

    Items carrying an ``id`` attribute must be committed with ``id`` equal to
    the next free handle; handles are never reused or renumbered.
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, handle: int) -> T:
        if handle < 0 or handle >= len(self._items):
            raise KeyError(f"Unknown handle {handle}")
        return self._items[handle]

    @property
    def next_handle(self) -> int:
        return len(self._items)

    def push(self, item: T) -> int:
        handle = len(self._items)
        ident = getattr(item, "id", handle)
        if ident != handle:
            raise ValueError(f"Item id {ident} does not match next handle {handle}")
        self._items.append(item)
        return handle

    def extend(self, items: Iterable[T]) -> List[int]:
        return [self.push(item) for item in items]

    def snapshot(self) -> Tuple[T, ...]:
        return tuple(self._items)


__all__ = ["Arena"]

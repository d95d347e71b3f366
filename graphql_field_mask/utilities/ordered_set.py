from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar('T')


# Keeps the position of the first occurrence. Backed by dict keys rather than
# a set so iteration order is part of the contract.
class OrderedSet(Generic[T]):
    _items: dict[T, None]

    def __init__(self, iterable: Optional[Iterable[T]] = None):
        self._items = {}
        if iterable is not None:
            self.update(iterable)

    def add(self, item: T):
        self._items.setdefault(item, None)

    def update(self, iterable: Iterable[T]):
        for item in iterable:
            self.add(item)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f'OrderedSet({list(self._items)!r})'

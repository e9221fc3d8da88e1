"""Sparse set: O(1) insert, lookup and removal by integer index, dense iteration."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from cometa.assertion import warning

T = TypeVar("T")

_INITIAL_CAPACITY = 100
_EMPTY = -1


class SparseSet(Generic[T]):
    """Values keyed by non-negative integers and stored contiguously."""

    def __init__(self) -> None:
        self._dense: List[T] = []
        self._dense_index: List[int] = []
        self._capacity = _INITIAL_CAPACITY
        self._dense_capacity = _INITIAL_CAPACITY
        self._sparse: List[int] = [_EMPTY] * self._capacity

    def add(self, index: int, value: T) -> None:
        """Store value under index; an index already present is left untouched."""
        if index < 0:
            raise ValueError(f"sparse set index must be non-negative, got {index}")
        if index in self:
            warning("SparseSet: Tried to insert a currently existing item")
            return
        if len(self._dense) >= self._dense_capacity:
            self._dense_capacity *= 2
        while self._capacity <= index:
            self._capacity *= 2
        if len(self._sparse) < self._capacity:
            self._sparse.extend([_EMPTY] * (self._capacity - len(self._sparse)))
        self._sparse[index] = len(self._dense)
        self._dense.append(value)
        self._dense_index.append(index)

    def pop(self, index: int) -> None:
        """Remove the value under index, moving the last dense item into its slot."""
        if index not in self:
            return
        slot = self._sparse[index]
        last_value = self._dense.pop()
        last_index = self._dense_index.pop()
        if slot < len(self._dense):
            self._dense[slot] = last_value
            self._dense_index[slot] = last_index
            self._sparse[last_index] = slot
        self._sparse[index] = _EMPTY

    def get(self, index: int) -> Optional[T]:
        """Value stored under index, or None."""
        if index not in self:
            return None
        return self._dense[self._sparse[index]]

    def first(self) -> Optional[T]:
        """First dense value, or None when empty."""
        return self._dense[0] if self._dense else None

    def last(self) -> Optional[T]:
        """Last dense value, or None when empty."""
        return self._dense[-1] if self._dense else None

    def __contains__(self, index: object) -> bool:
        return (
            isinstance(index, int)
            and 0 <= index < self._capacity
            and self._sparse[index] != _EMPTY
        )

    def contains_value(self, data: T) -> bool:
        """True when some stored value equals data."""
        return any(item == data for item in self._dense)

    def clear(self) -> None:
        """Remove every value."""
        for index in self._dense_index:
            self._sparse[index] = _EMPTY
        self._dense.clear()
        self._dense_index.clear()

    def dense_index(self, i: int) -> int:
        """Sparse index of the value at dense position i."""
        return self._dense_index[i]

    def entries(self) -> Iterator[Tuple[int, T]]:
        """Yield (index, value) pairs in dense order."""
        yield from zip(self._dense_index, self._dense)

    def __getitem__(self, i: int) -> T:
        if not 0 <= i < len(self._dense):
            raise IndexError(f"dense position {i} out of range")
        return self._dense[i]

    def __len__(self) -> int:
        return len(self._dense)

    def __iter__(self) -> Iterator[T]:
        return iter(self._dense)

    @property
    def capacity(self) -> int:
        """Number of indices the sparse table can currently address."""
        return self._capacity

    @property
    def dense_capacity(self) -> int:
        """Reserved size of the dense storage."""
        return self._dense_capacity
from __future__ import annotations
import ctypes
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")


class CustomList(Generic[T]):
    """A typed dynamic array used as the ordered backing store of the map.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object`, grown x2 when full.
    • Capacity halves once the array drops to a quarter full.
    • Removal shifts trailing items left, so relative order never changes.
    • Negative indices are normalized like the built-in list.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    _INITIAL_CAPACITY = 4

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0
        if it is not None:
            self.extend(it)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array holding `capacity` py_object slots."""
        return (max(capacity, 1) * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move the live items into a buffer of `new_capacity` slots."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")
        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = new_capacity

    def _shrink_if_sparse(self) -> None:
        if self._capacity > self._INITIAL_CAPACITY and self._size <= self._capacity // 4:
            self._resize(max(self._INITIAL_CAPACITY, self._capacity // 2))

    @staticmethod
    def _normalize_index(idx: int, size: int) -> int:
        """Map a possibly negative index into [0, size) or raise IndexError."""
        if idx < 0:
            idx += size
        if idx < 0 or idx >= size:
            raise IndexError("list index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    def append(self, value: T) -> None:
        """Append `value` to the end. Amortized O(1)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._size] = value
        self._size += 1

    def extend(self, it: Iterable[T]) -> None:
        for v in it:
            self.append(v)

    def pop(self, idx: int = -1) -> T:
        """Remove and return the item at `idx` (default: last).

        Complexity: O(n - idx), trailing items shift left by one.

        Raises:
            IndexError: if the list is empty or idx is out of range.
        """
        if self._size == 0:
            raise IndexError("pop from empty list")
        i = self._normalize_index(idx, self._size)
        val = self._buf[i]
        for j in range(i, self._size - 1):
            self._buf[j] = self._buf[j + 1]
        # py_object slots cannot be deleted, overwrite with None instead
        self._buf[self._size - 1] = None
        self._size -= 1
        self._shrink_if_sparse()
        return val  # type: ignore[return-value]

    def find_index(self, pred: Callable[[T], bool]) -> int:
        """Return the index of the first item satisfying `pred`, or -1."""
        for i in range(self._size):
            if pred(self._buf[i]):
                return i
        return -1

    def index(self, value: T) -> int:
        """Return first index of `value`. O(n).

        Raises:
            ValueError: if the value is not present.
        """
        i = self.find_index(lambda v: v == value)
        if i < 0:
            raise ValueError(f"{value!r} is not in CustomList")
        return i

    def clear(self) -> None:
        """Drop every item and fall back to the initial capacity."""
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    @overload
    def __getitem__(self, idx: int) -> T: ...
    @overload
    def __getitem__(self, idx: slice) -> "CustomList[T]": ...

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            start, stop, step = idx.indices(self._size)
            return CustomList(self._buf[i] for i in range(start, stop, step))
        return self._buf[self._normalize_index(idx, self._size)]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._normalize_index(idx, self._size)] = value

    def __contains__(self, value: object) -> bool:
        return self.find_index(lambda v: v == value) >= 0

    def __eq__(self, other: Any) -> bool:
        # Compares equal to any sized iterable with the same items in order,
        # so callers can check results against plain lists.
        if not isinstance(other, (CustomList, list, tuple)):
            return NotImplemented
        if len(other) != self._size:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    @overload
    def get(self, idx: int) -> Optional[T]: ...
    @overload
    def get(self, idx: int, default: U) -> T | U: ...

    def get(self, idx: int, default: U | None = None) -> T | U | None:
        """Safe accessor: item at `idx` or `default`, never IndexError."""
        try:
            return self[idx]
        except IndexError:
            return default

    def to_py(self) -> list[Any]:
        """Convert to a plain Python list, calling `to_py()` on items that have it."""
        out: list[Any] = []
        for v in self:
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                out.append(v.to_py())
            else:
                out.append(v)
        return out

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"CustomList({self.to_py()!r})"

from __future__ import annotations
import logging
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from .custom_list import CustomList
from .errors import KeyNotFoundError

K = TypeVar("K")
V = TypeVar("V")

_logger = logging.getLogger(__name__)

_MISSING: Any = object()

# How the constructor treats a key that appears more than once in its input.
DUPLICATE_POLICIES = ("keep", "first", "last")


class Entry(Generic[K, V]):
    """A stored (key, value) pair. The value may be reassigned in place."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Entry):
            return self.key == other.key and self.value == other.value
        if isinstance(other, (tuple, list)):
            return (self.key, self.value) == tuple(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self.key!r}, {self.value!r})"


class Found(Generic[K, V]):
    """Successful :meth:`OrderedMap.find` result wrapping the stored entry."""

    __slots__ = ("entry",)

    def __init__(self, entry: Entry[K, V]) -> None:
        self.entry = entry

    @property
    def value(self) -> V:
        return self.entry.value

    def unwrap(self) -> V:
        return self.entry.value

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Found({self.entry!r})"


class NotFound(Generic[K]):
    """Failed :meth:`OrderedMap.find` result; `unwrap()` raises the lookup error."""

    __slots__ = ("key", "key_type", "value_type")

    def __init__(self, key: K, key_type: str, value_type: str) -> None:
        self.key = key
        self.key_type = key_type
        self.value_type = value_type

    def error(self) -> KeyNotFoundError:
        return KeyNotFoundError(self.key, self.key_type, self.value_type)

    def unwrap(self) -> Any:
        raise self.error()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"NotFound({self.key!r})"


LookupResult = Union[Found[K, V], NotFound[K]]


class OrderedMap(Generic[K, V]):
    """An insertion-ordered mapping backed by a :class:`CustomList` of entries.

    Every keyed operation is a linear scan comparing keys with ``==``, so keys
    need neither ``__hash__`` nor an ordering. Updating an existing key never
    moves it; only removal changes the relative order of the rest.

    Parameters
    ----------
    it:
        Optional initial content: an iterable of ``(key, value)`` pairs or an
        object exposing ``items()``.
    duplicates:
        What to do with keys repeated in ``it``. ``"keep"`` appends every pair
        as-is, so repeated keys yield repeated entries and keyed operations
        see the first one. ``"first"`` drops later occurrences. ``"last"``
        keeps the first position with the last value.
    default_factory:
        Zero-argument callable giving the value :meth:`upsert` stores when it
        is called without one. ``None`` stores ``None``.
    key_type, value_type:
        Type names shown in :class:`KeyNotFoundError` messages. Inferred from
        the data when omitted.
    """

    __slots__ = ("_entries", "_default_factory", "_key_type", "_value_type")

    def __init__(
        self,
        it: Optional[Iterable[Tuple[K, V]]] = None,
        *,
        duplicates: str = "keep",
        default_factory: Optional[Callable[[], V]] = None,
        key_type: Optional[str] = None,
        value_type: Optional[str] = None,
    ) -> None:
        if duplicates not in DUPLICATE_POLICIES:
            raise ValueError(f"duplicates must be one of {DUPLICATE_POLICIES}, got {duplicates!r}")
        self._entries: CustomList[Entry[K, V]] = CustomList()
        self._default_factory = default_factory
        self._key_type = key_type
        self._value_type = value_type
        if it is None:
            return

        pairs = it.items() if hasattr(it, "items") else it  # type: ignore[attr-defined]
        for k, v in pairs:
            if duplicates == "keep":
                self._entries.append(Entry(k, v))
                continue
            i = self._index_of(k)
            if i < 0:
                self._entries.append(Entry(k, v))
            elif duplicates == "last":
                _logger.debug("duplicate key %r in input, keeping last value", k)
                self._entries[i].value = v
            else:
                _logger.debug("duplicate key %r in input, keeping first value", k)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _index_of(self, key: K) -> int:
        return self._entries.find_index(lambda e: e.key == key)

    def _type_names(self, key: K) -> Tuple[str, str]:
        key_type = self._key_type or type(key).__name__
        if self._value_type:
            value_type = self._value_type
        elif self._entries:
            value_type = type(self._entries[0].value).__name__
        else:
            value_type = "object"
        return key_type, value_type

    def _not_found(self, key: K) -> NotFound[K]:
        return NotFound(key, *self._type_names(key))

    # -----------------------------
    # Queries
    # -----------------------------
    def size(self) -> int:
        """Number of stored entries."""
        return len(self._entries)

    def keys(self) -> CustomList[K]:
        """Keys in storage order, as a new list the caller may modify."""
        return CustomList(e.key for e in self._entries)

    def vals(self) -> CustomList[V]:
        """Values in storage order, index-aligned with :meth:`keys`."""
        return CustomList(e.value for e in self._entries)

    values = vals

    def items(self) -> CustomList[Tuple[K, V]]:
        return CustomList((e.key, e.value) for e in self._entries)

    def has_key(self, key: K) -> bool:
        return self._index_of(key) >= 0

    def find(self, key: K) -> LookupResult:
        """Look up `key` without raising.

        Returns :class:`Found` holding the stored entry, or :class:`NotFound`.
        Both offer ``unwrap()``, which returns the value or raises
        :class:`KeyNotFoundError`.
        """
        i = self._index_of(key)
        if i < 0:
            return self._not_found(key)
        return Found(self._entries[i])

    def lookup(self, key: K) -> V:
        """Return the value stored under `key`.

        Raises:
            KeyNotFoundError: if no entry has this key.
        """
        result = self.find(key)
        if not result:
            _logger.debug("lookup miss for key %r", key)
        return result.unwrap()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        result = self.find(key)
        return result.value if isinstance(result, Found) else default

    def get_mutable(self, key: K) -> Optional[Entry[K, V]]:
        """Return the stored entry for `key` so its value can be replaced in place."""
        result = self.find(key)
        return result.entry if isinstance(result, Found) else None

    # -----------------------------
    # Mutators
    # -----------------------------
    def upsert(self, key: K, value: V = _MISSING) -> V:
        """Get-or-insert `key` and return the stored value.

        An existing entry keeps its position; it is reassigned only when
        `value` is given. A new entry is appended at the end holding `value`,
        or the ``default_factory`` result when `value` is omitted.
        """
        entry = self.get_mutable(key)
        if entry is not None:
            if value is not _MISSING:
                entry.value = value
            return entry.value
        if value is _MISSING:
            value = self._default_factory() if self._default_factory is not None else None
        self._entries.append(Entry(key, value))
        return value

    def insert_or_assign(self, key: K, value: V) -> bool:
        """Assign `value` to `key`; return True if a new entry was appended."""
        entry = self.get_mutable(key)
        if entry is not None:
            entry.value = value
            return False
        self._entries.append(Entry(key, value))
        return True

    def pop(self, key: K, default: Any = _MISSING) -> V:
        """Remove the entry for `key` and return its value.

        Later entries shift left and keep their relative order. With no
        `default`, a missing key raises :class:`KeyNotFoundError` and the map
        is left untouched.
        """
        i = self._index_of(key)
        if i < 0:
            if default is not _MISSING:
                return default
            _logger.debug("pop miss for key %r", key)
            raise self._not_found(key).error()
        _logger.debug("removing key %r at position %d", key, i)
        return self._entries.pop(i).value

    def clear(self) -> None:
        self._entries.clear()

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: K) -> bool:
        return self.has_key(key)

    def __getitem__(self, key: K) -> V:
        return self.lookup(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.insert_or_assign(key, value)

    def __delitem__(self, key: K) -> None:
        self.pop(key)

    def __iter__(self) -> Iterator[K]:
        for e in self._entries:
            yield e.key

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, OrderedMap):
            return self._entries == other._entries
        if isinstance(other, dict):
            return self._equals_dict(other)
        return NotImplemented

    def _equals_dict(self, other: dict) -> bool:
        # Only the first entry per key is visible, matching lookup().
        visible = 0
        try:
            for i, e in enumerate(self._entries):
                if self._index_of(e.key) != i:
                    continue
                visible += 1
                if e.key not in other or not e.value == other[e.key]:
                    return False
        except TypeError:
            # unhashable key, so it cannot be in a dict
            return False
        return visible == len(other)

    __hash__ = None  # type: ignore[assignment]

    def to_py(self) -> dict[Any, Any]:
        """Convert to a native *dict*; recursively uses ``to_py`` when present.

        Repeated keys kept by ``duplicates="keep"`` collapse to the first
        entry, the one keyed operations see. Keys must be hashable.
        """
        d: dict[Any, Any] = {}
        for e in self._entries:
            if e.key in d:
                continue
            v = e.value
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                d[e.key] = v.to_py()
            else:
                d[e.key] = v
        return d

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"({e.key!r}, {e.value!r})" for e in self._entries)
        return f"OrderedMap([{pairs}])"

from __future__ import annotations
from typing import Any


class KeyNotFoundError(KeyError):
    """Raised when a keyed read or removal targets a key the map does not hold.

    Subclasses :class:`KeyError` so code written against ``dict`` keeps
    catching it. The type names are diagnostic only.
    """

    def __init__(self, key: Any, key_type: str, value_type: str) -> None:
        super().__init__(key)
        self.key = key
        self.key_type = key_type
        self.value_type = value_type

    @property
    def message(self) -> str:
        return f'key "{self.key}" not found in dict({self.key_type}, {self.value_type})'

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key instead
        return self.message

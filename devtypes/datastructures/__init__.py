from .custom_list import CustomList
from .errors import KeyNotFoundError
from .ordered_map import Entry, Found, NotFound, OrderedMap

__all__ = [
    "CustomList",
    "Entry",
    "Found",
    "KeyNotFoundError",
    "NotFound",
    "OrderedMap",
]

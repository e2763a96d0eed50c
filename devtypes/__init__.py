"""Small value types shared across the device-control stack."""

from .datastructures import KeyNotFoundError, OrderedMap

__version__ = "0.1.0"

__all__ = ["KeyNotFoundError", "OrderedMap"]

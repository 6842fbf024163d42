"""Storage backends for the extraction history"""

from .base import BaseStorage
from .local import LocalStorage
from .memory import InMemoryStorage
from .records import RecordStore

__all__ = [
    "BaseStorage",
    "LocalStorage",
    "InMemoryStorage",
    "RecordStore"
]

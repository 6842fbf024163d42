"""
In-memory storage backend for testing
"""

from typing import List, Dict, Optional
import logging

from .base import BaseStorage

logger = logging.getLogger(__name__)


class InMemoryStorage(BaseStorage):
    """In-memory key-value storage for testing and development"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})
        logger.info("Initialized in-memory storage")

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def keys(self) -> List[str]:
        return list(self._items)

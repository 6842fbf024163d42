"""
Base storage interface for the local key-value slot
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any
import logging

from ..exceptions import StorageError

logger = logging.getLogger(__name__)


class BaseStorage(ABC):
    """Base class for key-value storage backends holding string values"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key

        Args:
            key: Storage key

        Returns:
            Stored string or None if the key is absent
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value

        Args:
            key: Storage key
            value: String to store
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> bool:
        """
        Remove a key

        Returns:
            True if the key existed
        """
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """List all stored keys"""
        pass

    def get_storage_stats(self) -> Dict[str, Any]:
        """
        Get storage statistics
        Default implementation - subclasses can override
        """
        return {
            'backend': self.__class__.__name__,
            'keys': len(self.keys()),
        }


__all__ = ["BaseStorage", "StorageError"]

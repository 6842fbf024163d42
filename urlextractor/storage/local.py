"""
Local file system storage backend
Keeps every key in a single JSON object on disk
"""

import json
import os
from typing import Any, List, Dict, Optional
from pathlib import Path
import logging

from .base import BaseStorage, StorageError

logger = logging.getLogger(__name__)


class LocalStorage(BaseStorage):
    """JSON file backed key-value storage"""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Initialized local storage at: {self.file_path}")

    def _read_all(self) -> Dict[str, str]:
        """Load the whole key-value file; an unreadable file counts as empty"""
        if not self.file_path.exists():
            return {}

        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read storage file {self.file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.file_path} does not hold a JSON object, ignoring it")
            return {}

        return {key: value for key, value in data.items() if isinstance(value, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        """Write the key-value file atomically"""
        tmp_path = self.file_path.with_suffix(self.file_path.suffix + ".tmp")
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(items, f, indent=2)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            logger.error(f"Failed to write storage file {self.file_path}: {e}")
            raise StorageError(f"Failed to write storage: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)
        logger.debug(f"Stored key '{key}' ({len(value)} chars)")

    def remove_item(self, key: str) -> bool:
        items = self._read_all()
        if key not in items:
            return False
        del items[key]
        self._write_all(items)
        return True

    def keys(self) -> List[str]:
        return list(self._read_all())

    def get_storage_stats(self) -> Dict[str, Any]:
        """Get storage statistics including the file location and size"""
        stats = super().get_storage_stats()
        stats['file_path'] = str(self.file_path)
        stats['file_size'] = self.file_path.stat().st_size if self.file_path.exists() else 0
        return stats

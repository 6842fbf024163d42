"""
Extraction record store
Ordered history of extraction records, most recent first
"""

import json
import logging
from typing import Iterator, List, Optional

from .base import BaseStorage, StorageError
from ..core.config import DEFAULT_STORAGE_KEY
from ..exceptions import RecordValidationError
from ..models.record import ExtractionRecord, RecordStatus, count_by_status

logger = logging.getLogger(__name__)


class RecordStore:
    """In-memory record history backed by one key of a storage backend"""

    def __init__(self, storage: Optional[BaseStorage] = None, key: str = DEFAULT_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._records: List[ExtractionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExtractionRecord]:
        return iter(self._records)

    @property
    def records(self) -> List[ExtractionRecord]:
        """Snapshot of the history, most recent first"""
        return list(self._records)

    def prepend(self, record: ExtractionRecord) -> None:
        """Insert a record at the head of the history"""
        self._records.insert(0, record)

    def clear(self) -> None:
        self._records.clear()

    def success_count(self) -> int:
        return count_by_status(self._records)[RecordStatus.SUCCESS]

    def error_count(self) -> int:
        return count_by_status(self._records)[RecordStatus.ERROR]

    def restore(self) -> int:
        """
        Replace the history with the stored one.

        Missing, unparseable or non-list payloads give an empty history;
        malformed entries are skipped.

        Returns:
            Number of records restored
        """
        self._records = []
        if self.storage is None:
            return 0

        try:
            raw = self.storage.get_item(self.key)
        except StorageError as e:
            logger.warning(f"Could not read stored history: {e}")
            return 0

        if not raw:
            return 0

        try:
            payload = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Stored history under '{self.key}' is not valid JSON, starting empty: {e}")
            return 0

        if not isinstance(payload, list):
            logger.warning(f"Stored history under '{self.key}' is not a list, starting empty")
            return 0

        restored = []
        for index, entry in enumerate(payload):
            try:
                restored.append(ExtractionRecord.from_dict(entry))
            except (RecordValidationError, ValueError) as e:
                logger.warning(f"Skipping stored record #{index}: {e}")

        self._records = restored
        logger.info(f"Restored {len(restored)} record(s) from storage")
        return len(restored)

    def save(self) -> None:
        """
        Write the history to storage

        Raises:
            StorageError: If there is no backend or the write failed
        """
        if self.storage is None:
            raise StorageError("No storage backend configured")

        payload = json.dumps([record.to_dict() for record in self._records])
        self.storage.set_item(self.key, payload)
        logger.debug(f"Saved {len(self._records)} record(s) under '{self.key}'")

    def erase(self) -> None:
        """Clear the history in memory and in storage"""
        self.clear()
        if self.storage is not None:
            self.storage.remove_item(self.key)

"""
State management for URL Extractor CLI application
"""

import logging
from typing import Callable, List, Optional

from ..core.config import ExtractorConfig
from ..exceptions import StorageError
from ..extractors import BaseExtractor, create_extractor
from ..models.record import ExtractionRecord
from ..storage import BaseStorage, LocalStorage, RecordStore

logger = logging.getLogger(__name__)


class AppStateManager:
    """Owns the extraction history and the loading flag, and runs extractions"""

    def __init__(
        self,
        config: ExtractorConfig,
        extractor: Optional[BaseExtractor] = None,
        storage: Optional[BaseStorage] = None,
    ):
        self.config = config
        self.storage = storage if storage is not None else LocalStorage(config.storage_file)
        self.record_store = RecordStore(self.storage, config.storage_key)
        self.extractor = extractor if extractor is not None else create_extractor(config)
        self.loading = False
        self.last_save_error: Optional[str] = None
        # Called with the new value whenever the loading flag flips
        self.on_loading_change: Optional[Callable[[bool], None]] = None

    @property
    def records(self) -> List[ExtractionRecord]:
        return self.record_store.records

    def restore_history(self) -> int:
        """Load the stored history, replacing what is in memory"""
        logger.debug(f"Restoring history from {self.storage.get_storage_stats()}")
        return self.record_store.restore()

    async def extract(self, url: str) -> ExtractionRecord:
        """
        Run one extraction and prepend its record to the history.

        Any failure becomes an error record rather than an exception, so
        every attempt stays visible in the table.
        """
        self._set_loading(True)
        try:
            try:
                record = await self.extractor.extract(url)
            except Exception as e:
                logger.exception(f"Error extracting content from {url}: {e}")
                record = ExtractionRecord.failed(url, str(e) or "Unknown error occurred")

            self.record_store.prepend(record)

            if self.config.auto_save:
                self.save_history()

            return record
        finally:
            self._set_loading(False)

    def _set_loading(self, loading: bool) -> None:
        self.loading = loading
        if self.on_loading_change is not None:
            self.on_loading_change(loading)

    def save_history(self) -> bool:
        """Write the history to storage; failures are kept in last_save_error"""
        try:
            self.record_store.save()
        except StorageError as e:
            logger.error(f"Failed to save history: {e}")
            self.last_save_error = str(e)
            return False

        self.last_save_error = None
        return True

    def clear_history(self) -> None:
        """Forget every record, in memory and in storage"""
        try:
            self.record_store.erase()
        except StorageError as e:
            logger.error(f"Failed to clear stored history: {e}")
            self.last_save_error = str(e)

    def success_count(self) -> int:
        return self.record_store.success_count()

    def error_count(self) -> int:
        return self.record_store.error_count()

    def get_counts_text(self) -> str:
        """'N successful, M failed' over the whole history, empty when there is none"""
        if not len(self.record_store):
            return ""
        return f"{self.success_count()} successful, {self.error_count()} failed"

    def get_status_text(self) -> str:
        """Status bar text"""
        segments = [
            f"🌐: {self.config.base_url}",
            f"📄: {len(self.record_store)}",
            f"💾: {'auto' if self.config.auto_save else 'manual'}",
        ]
        if self.loading:
            segments.append("⏳ extracting")
        if self.last_save_error:
            segments.append(f"⚠️ save failed: {self.last_save_error}")
        return " | ".join(segments)

    async def close(self) -> None:
        await self.extractor.aclose()

"""
URL Extractor - terminal client for an AI page extraction service

Submit a URL, get back a title, summary and key points, and browse the
history in a searchable, sortable table.
"""

__version__ = "0.1.0"

from .models.record import ExtractionRecord, RecordStatus
from .core.config import ExtractorConfig
from .extractors import BaseExtractor, HttpExtractor, create_extractor
from .storage import RecordStore
from .exceptions import UrlExtractorError, ExtractionError, RecordValidationError, StorageError

__all__ = [
    "ExtractionRecord",
    "RecordStatus",
    "ExtractorConfig",
    "BaseExtractor",
    "HttpExtractor",
    "create_extractor",
    "RecordStore",
    "UrlExtractorError",
    "ExtractionError",
    "RecordValidationError",
    "StorageError"
]

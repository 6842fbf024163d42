"""Data models for URL Extractor"""

from .record import ExtractionRecord, RecordStatus, count_by_status, parse_timestamp

__all__ = ["ExtractionRecord", "RecordStatus", "count_by_status", "parse_timestamp"]

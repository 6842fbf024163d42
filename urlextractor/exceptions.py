"""
Custom exceptions for URL Extractor
"""

from typing import Optional


class UrlExtractorError(Exception):
    """Base exception for URL Extractor errors"""
    pass


class ExtractionError(UrlExtractorError):
    """Extraction request failed at the transport or HTTP level"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class RecordValidationError(UrlExtractorError):
    """Payload does not match the extraction record shape"""
    pass


class StorageError(UrlExtractorError):
    """Error occurred while reading or writing local storage"""
    pass

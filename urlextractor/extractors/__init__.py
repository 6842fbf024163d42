"""Extraction service clients"""

from .base import BaseExtractor
from .http import HttpExtractor
from .factory import create_extractor

__all__ = [
    "BaseExtractor",
    "HttpExtractor",
    "create_extractor"
]

"""
URL Extractor CLI Widgets
"""

from .url_input import UrlInput
from .content_table import ContentTable
from .details_dialog import DetailsDialog

__all__ = [
    "UrlInput",
    "ContentTable",
    "DetailsDialog"
]

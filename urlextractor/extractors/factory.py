"""
Extractor factory
"""

from .base import BaseExtractor
from .http import HttpExtractor
from ..core.config import ExtractorConfig


def create_extractor(config: ExtractorConfig) -> BaseExtractor:
    """
    Create the extractor for a configuration

    Args:
        config: URL Extractor configuration

    Returns:
        Extractor talking to the configured service
    """
    return HttpExtractor(config)

"""
Base extractor interface
"""

from abc import ABC, abstractmethod
import logging

from ..core.config import ExtractorConfig
from ..models.record import ExtractionRecord

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Turns a URL into an extraction record"""

    def __init__(self, config: ExtractorConfig):
        self.config = config

    @abstractmethod
    async def extract(self, url: str) -> ExtractionRecord:
        """
        Extract structured content from a URL

        Args:
            url: Page to summarize

        Returns:
            Record built from the service response

        Raises:
            ExtractionError: If the request failed or the service rejected it
            RecordValidationError: If the response does not have the record shape
        """
        pass

    async def aclose(self) -> None:
        """Release any resources held by the extractor"""
        pass

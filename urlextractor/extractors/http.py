"""
HTTP extractor for the remote extraction service
POSTs the URL to {base_url}/api/extract and validates the JSON reply
"""

import logging
from typing import Any, Optional

import httpx

from .base import BaseExtractor
from ..core.config import ExtractorConfig
from ..exceptions import ExtractionError, RecordValidationError
from ..models.record import ExtractionRecord, utcnow

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to extract content"


class HttpExtractor(BaseExtractor):
    """Extractor backed by the extraction service's HTTP API"""

    def __init__(self, config: ExtractorConfig, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(config.request_timeout))

    async def extract(self, url: str) -> ExtractionRecord:
        """POST the URL to the extraction endpoint and parse the record"""
        endpoint = self.config.extract_url
        logger.info(f"Requesting extraction of {url} from {endpoint}")

        try:
            response = await self.client.post(
                endpoint,
                json={"url": url},
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Extraction request for {url} failed: {e}")
            raise ExtractionError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            message = self._error_message(response)
            logger.error(f"Extraction service returned {response.status_code} for {url}: {message}")
            raise ExtractionError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise RecordValidationError(f"Extraction service returned invalid JSON: {e}") from e

        record = ExtractionRecord.from_dict(payload, default_url=url, timestamp=utcnow())
        logger.info(f"Extracted '{record.title}' from {url}")
        return record

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull the 'error' field out of a failure body"""
        try:
            body: Any = response.json()
        except ValueError:
            return DEFAULT_ERROR_MESSAGE

        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, str) and error:
                return error
        return DEFAULT_ERROR_MESSAGE

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

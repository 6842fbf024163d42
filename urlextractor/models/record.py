"""
Extraction record model
One completed (successful or failed) extraction attempt
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from ..exceptions import RecordValidationError

ERROR_TITLE = "Error"


class RecordStatus(str, Enum):
    """Outcome of an extraction attempt"""
    SUCCESS = "success"
    ERROR = "error"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> datetime:
    """
    Parse a stored timestamp into an aware datetime.

    Accepts datetime objects, ISO-8601 strings (including the trailing "Z"
    that JSON.stringify produces for dates) and epoch milliseconds.
    Naive values are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, bool):
        raise RecordValidationError(f"Invalid timestamp: {value!r}")
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise RecordValidationError(f"Invalid timestamp: {value!r}") from e
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise RecordValidationError(f"Invalid timestamp: {value!r}") from e
    else:
        raise RecordValidationError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise RecordValidationError(f"Field '{key}' must be a string")
    return value


@dataclass(frozen=True)
class ExtractionRecord:
    """Structured summary of a page, or the failure that replaced it"""
    title: str
    summary: str
    url: str
    key_points: Tuple[str, ...] = ()
    timestamp: datetime = field(default_factory=utcnow)
    status: RecordStatus = RecordStatus.SUCCESS
    error: Optional[str] = None

    def __post_init__(self):
        """Normalize and validate record data"""
        if not isinstance(self.key_points, tuple):
            object.__setattr__(self, "key_points", tuple(self.key_points))
        if not isinstance(self.status, RecordStatus):
            object.__setattr__(self, "status", RecordStatus(self.status))

        if self.status == RecordStatus.ERROR:
            if self.error is None:
                raise ValueError("Error records must carry an error message")
            if self.key_points:
                raise ValueError("Error records cannot have key points")
        elif self.error is not None:
            raise ValueError("Only error records can carry an error message")

    @property
    def is_success(self) -> bool:
        return self.status == RecordStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == RecordStatus.ERROR

    @classmethod
    def failed(cls, url: str, message: str) -> "ExtractionRecord":
        """Build the record shown in place of a failed extraction"""
        return cls(
            title=ERROR_TITLE,
            summary=message,
            url=url,
            key_points=(),
            timestamp=utcnow(),
            status=RecordStatus.ERROR,
            error=message,
        )

    @classmethod
    def from_dict(
        cls,
        data: Any,
        default_url: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> "ExtractionRecord":
        """
        Create a record from its JSON shape.

        Args:
            data: Parsed JSON object (server response or stored entry)
            default_url: URL to use when the payload has none
            timestamp: Overrides any timestamp carried by the payload

        Raises:
            RecordValidationError: If the payload does not have the expected shape
        """
        if not isinstance(data, dict):
            raise RecordValidationError("Record payload must be a JSON object")

        title = _require_str(data, "title")
        summary = _require_str(data, "summary")

        key_points = data.get("keyPoints", [])
        if key_points is None:
            key_points = []
        if not isinstance(key_points, list) or not all(isinstance(p, str) for p in key_points):
            raise RecordValidationError("Field 'keyPoints' must be a list of strings")

        url = data.get("url")
        if url is None:
            url = default_url
        if not isinstance(url, str):
            raise RecordValidationError("Field 'url' must be a string")

        raw_status = data.get("status") or RecordStatus.SUCCESS.value
        try:
            status = RecordStatus(raw_status)
        except ValueError as e:
            raise RecordValidationError(f"Unknown status: {raw_status!r}") from e

        error = data.get("error")
        if error is not None and not isinstance(error, str):
            raise RecordValidationError("Field 'error' must be a string")
        if status == RecordStatus.ERROR:
            # Error entries never carry key points, and always carry a message
            key_points = []
            if error is None:
                error = summary
        else:
            error = None

        if timestamp is None:
            raw_timestamp = data.get("timestamp")
            timestamp = parse_timestamp(raw_timestamp) if raw_timestamp is not None else utcnow()

        return cls(
            title=title,
            summary=summary,
            url=url,
            key_points=tuple(key_points),
            timestamp=timestamp,
            status=status,
            error=error,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to its JSON shape"""
        data: Dict[str, Any] = {
            "title": self.title,
            "summary": self.summary,
            "keyPoints": list(self.key_points),
            "url": self.url,
            "timestamp": self.timestamp.isoformat(),
            "status": self.status.value,
        }
        if self.error is not None:
            data["error"] = self.error
        return data


def count_by_status(records: Sequence[ExtractionRecord]) -> Dict[RecordStatus, int]:
    """Count records per status"""
    counts = {status: 0 for status in RecordStatus}
    for record in records:
        counts[record.status] += 1
    return counts

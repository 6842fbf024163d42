"""
Results table state
Search, status filter, sorting and cell formatting for the history table
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from ..core.utils import truncate_text, get_relative_time
from ..models.record import ExtractionRecord, RecordStatus

TITLE_LIMIT = 50
SUMMARY_LIMIT = 70
KEY_POINT_LIMIT = 40
URL_LIMIT = 25
VISIBLE_KEY_POINTS = 3

NO_CONTENT_MESSAGE = "No content extracted yet"
NO_CONTENT_HINT = "Start by entering a URL above to extract content"
NO_MATCHES_MESSAGE = "No results match your search criteria"
NO_KEY_POINTS = "No key points"


class SortField(str, Enum):
    TITLE = "title"
    TIMESTAMP = "timestamp"
    STATUS = "status"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class StatusFilter(str, Enum):
    ALL = "all"
    SUCCESS = "success"
    ERROR = "error"


class EmptyState(str, Enum):
    NONE = "none"
    NO_CONTENT = "no_content"
    NO_MATCHES = "no_matches"


def _sort_key(record: ExtractionRecord, sort_field: SortField):
    if sort_field == SortField.TITLE:
        return record.title.lower()
    if sort_field == SortField.TIMESTAMP:
        return record.timestamp.timestamp()
    return record.status.value


@dataclass
class RecordRow:
    """Display cells for one table row"""
    record: ExtractionRecord
    title: str
    summary: str
    key_points: List[str]
    url: str
    status: str
    relative_time: str

    @property
    def key_points_text(self) -> str:
        if not self.key_points:
            return NO_KEY_POINTS
        return "\n".join(self.key_points)


def format_key_points(key_points: Sequence[str]) -> List[str]:
    """First three key points, truncated, plus a '+N more' marker for the rest"""
    lines = [f"• {truncate_text(point, KEY_POINT_LIMIT)}" for point in key_points[:VISIBLE_KEY_POINTS]]
    hidden = len(key_points) - VISIBLE_KEY_POINTS
    if hidden > 0:
        lines.append(f"+{hidden} more")
    return lines


def build_row(record: ExtractionRecord) -> RecordRow:
    """Truncated cells for a record"""
    return RecordRow(
        record=record,
        title=truncate_text(record.title, TITLE_LIMIT),
        summary=truncate_text(record.summary, SUMMARY_LIMIT),
        key_points=format_key_points(record.key_points),
        url=truncate_text(record.url, URL_LIMIT),
        status=record.status.value,
        relative_time=get_relative_time(record.timestamp),
    )


@dataclass
class TableState:
    """
    View state of the results table.

    Holds the user's search term, status filter, sort settings and the
    record currently opened in the details view. The visible rows are
    always derived from the record sequence passed in, never cached.
    """
    search_term: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    sort_field: SortField = SortField.TIMESTAMP
    sort_direction: SortDirection = SortDirection.DESC
    selected: Optional[ExtractionRecord] = field(default=None, compare=False)

    def matches(self, record: ExtractionRecord) -> bool:
        """Whether a record passes the search term and status filter"""
        term = self.search_term.lower()
        if term and not (
            term in record.title.lower()
            or term in record.summary.lower()
            or term in record.url.lower()
        ):
            return False

        if self.status_filter != StatusFilter.ALL:
            return record.status == RecordStatus(self.status_filter.value)
        return True

    def apply(self, records: Sequence[ExtractionRecord]) -> List[ExtractionRecord]:
        """Filter and sort records for display"""
        filtered = [record for record in records if self.matches(record)]
        filtered.sort(
            key=lambda record: _sort_key(record, self.sort_field),
            reverse=self.sort_direction == SortDirection.DESC,
        )
        return filtered

    def rows(self, records: Sequence[ExtractionRecord]) -> List[RecordRow]:
        return [build_row(record) for record in self.apply(records)]

    def toggle_sort(self, sort_field: SortField) -> None:
        """Flip direction on the active column, otherwise switch column sorted descending"""
        sort_field = SortField(sort_field)
        if self.sort_field == sort_field:
            self.sort_direction = (
                SortDirection.ASC if self.sort_direction == SortDirection.DESC else SortDirection.DESC
            )
        else:
            self.sort_field = sort_field
            self.sort_direction = SortDirection.DESC

    def sort_indicator(self, sort_field: SortField) -> str:
        """Arrow shown next to the active sort column header"""
        if self.sort_field != sort_field:
            return ""
        return " ▲" if self.sort_direction == SortDirection.ASC else " ▼"

    def set_search(self, term: str) -> None:
        self.search_term = term

    def set_status_filter(self, status_filter: StatusFilter) -> None:
        self.status_filter = StatusFilter(status_filter)

    def open_details(self, record: ExtractionRecord) -> None:
        self.selected = record

    def close_details(self) -> None:
        self.selected = None

    def empty_state(self, records: Sequence[ExtractionRecord]) -> EmptyState:
        """Which empty message, if any, the table should show"""
        if not records:
            return EmptyState.NO_CONTENT
        if not self.apply(records):
            return EmptyState.NO_MATCHES
        return EmptyState.NONE

    def result_count_text(self, records: Sequence[ExtractionRecord]) -> str:
        return f"Showing {len(self.apply(records))} of {len(records)} results"

"""
Results table widget for URL Extractor CLI
Searchable, filterable, sortable history of extraction records
"""

from typing import Dict, List, Optional, Sequence

from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Input, Select, Static
from rich.text import Text

from ...models.record import ExtractionRecord
from ...views.table import (
    TableState, SortField, StatusFilter, EmptyState, build_row,
    NO_CONTENT_MESSAGE, NO_CONTENT_HINT, NO_MATCHES_MESSAGE,
)
from .details_dialog import DetailsDialog, status_badge

STATUS_OPTIONS = [
    ("All Status", StatusFilter.ALL.value),
    ("Success", StatusFilter.SUCCESS.value),
    ("Error", StatusFilter.ERROR.value),
]

# Column key -> (header label, sort field if the header sorts)
COLUMNS = [
    ("title", "Title", SortField.TITLE),
    ("summary", "Summary", None),
    ("key_points", "Key Points", None),
    ("url", "URL", None),
    ("status", "Status", SortField.STATUS),
    ("timestamp", "Extracted", SortField.TIMESTAMP),
]


class ContentTable(Vertical):
    """Table of extraction records with search, status filter and sorting"""

    DEFAULT_CSS = """
    ContentTable {
        height: 1fr;
    }

    #table-controls {
        height: auto;
    }

    #search-input {
        width: 1fr;
    }

    #status-filter {
        width: 20;
    }

    #result-count {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }

    #results-table {
        height: 1fr;
    }

    #empty-state {
        height: auto;
        color: $text-muted;
        text-align: center;
        padding: 1 0;
    }
    """

    def __init__(self, state: Optional[TableState] = None, **kwargs):
        super().__init__(**kwargs)
        self.state = state or TableState()
        self.records: List[ExtractionRecord] = []
        self.visible_records: List[ExtractionRecord] = []
        self.empty_state = EmptyState.NO_CONTENT

    def compose(self):
        with Horizontal(id="table-controls"):
            yield Input(placeholder="🔍 Search content...", id="search-input")
            yield Select(
                STATUS_OPTIONS,
                value=self.state.status_filter.value,
                allow_blank=False,
                id="status-filter",
            )
        yield Static("", id="result-count")
        yield DataTable(id="results-table", cursor_type="row", zebra_stripes=True)
        yield Static("", id="empty-state")

    def on_mount(self) -> None:
        self.render_records()

    def update_records(self, records: Sequence[ExtractionRecord]) -> None:
        """Replace the record sequence and re-derive the view"""
        self.records = list(records)
        if self.is_mounted:
            self.render_records()

    def render_records(self) -> None:
        """Rebuild the table from the record sequence and current view state"""
        table = self.query_one("#results-table", DataTable)
        controls = self.query_one("#table-controls", Horizontal)
        count = self.query_one("#result-count", Static)
        empty = self.query_one("#empty-state", Static)

        self.visible_records = self.state.apply(self.records)
        empty_state = self.state.empty_state(self.records)
        self.empty_state = empty_state

        if empty_state == EmptyState.NO_CONTENT:
            controls.display = False
            count.display = False
            table.display = False
            empty.display = True
            empty.update(f"[bold]{NO_CONTENT_MESSAGE}[/bold]\n{NO_CONTENT_HINT}")
            return

        controls.display = True
        count.display = True
        table.display = True
        count.update(self.state.result_count_text(self.records))

        if empty_state == EmptyState.NO_MATCHES:
            empty.display = True
            empty.update(NO_MATCHES_MESSAGE)
        else:
            empty.display = False
            empty.update("")

        table.clear(columns=True)
        for key, label, sort_field in COLUMNS:
            header = label + (self.state.sort_indicator(sort_field) if sort_field else "")
            table.add_column(header, key=key)

        for index, record in enumerate(self.visible_records):
            row = build_row(record)
            key_points = Text(row.key_points_text, style="dim" if not row.key_points else "")
            table.add_row(
                Text(row.title, style="bold"),
                Text(row.summary),
                key_points,
                Text(row.url, style="underline"),
                status_badge(record),
                Text(row.relative_time, style="dim"),
                height=None,
                key=str(index),
            )

    def toggle_sort(self, sort_field: SortField) -> None:
        self.state.toggle_sort(sort_field)
        self.render_records()

    def open_details(self, record: ExtractionRecord) -> None:
        """Show the full record in a modal dialog"""
        self.state.open_details(record)
        self.app.push_screen(DetailsDialog(record), lambda _: self.state.close_details())

    def open_selected(self) -> None:
        """Open the record under the table cursor"""
        table = self.query_one("#results-table", DataTable)
        if not self.visible_records or table.cursor_row is None:
            return
        if 0 <= table.cursor_row < len(self.visible_records):
            self.open_details(self.visible_records[table.cursor_row])

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search-input":
            return
        event.stop()
        self.state.set_search(event.value)
        self.render_records()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "status-filter":
            return
        event.stop()
        self.state.set_status_filter(StatusFilter(event.value))
        self.render_records()

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        event.stop()
        sort_fields: Dict[str, SortField] = {key: field for key, _, field in COLUMNS if field}
        sort_field = sort_fields.get(event.column_key.value)
        if sort_field is not None:
            self.toggle_sort(sort_field)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        event.stop()
        index = int(event.row_key.value)
        if 0 <= index < len(self.visible_records):
            self.open_details(self.visible_records[index])

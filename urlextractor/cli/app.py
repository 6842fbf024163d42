#!/usr/bin/env python3
"""
URL Extractor Textual CLI - terminal interface for extracting page summaries
"""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import Header, Footer, Label, Static

from ..core.config import ExtractorConfig
from ..models.record import ExtractionRecord
from ..views.table import SortField, TableState
from .config import get_config_manager
from .state_manager import AppStateManager
from .styles import MAIN_APP_CSS
from .widgets import ContentTable, UrlInput

logger = logging.getLogger(__name__)


class URLExtractorTUI(App):
    """Main URL Extractor Terminal UI Application"""

    TITLE = "AI URL Extractor"
    SUB_TITLE = "Extract and summarize content from any public URL using AI"

    CSS = MAIN_APP_CSS

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+s", "save_history", "Save History"),
        ("ctrl+l", "clear_history", "Clear History"),
        Binding("f2", "sort('title')", "Sort Title"),
        Binding("f3", "sort('timestamp')", "Sort Date"),
        Binding("f4", "sort('status')", "Sort Status"),
        Binding("ctrl+o", "view_selected", "View"),
    ]

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        state_manager: Optional[AppStateManager] = None,
    ):
        super().__init__()
        if state_manager is None:
            state_manager = AppStateManager(config or ExtractorConfig())
        self.state_manager = state_manager
        self.state_manager.on_loading_change = lambda _: self.update_status()
        self.table_state = TableState()

    def compose(self) -> ComposeResult:
        """Create the main UI layout"""
        yield Header(show_clock=True)

        with Container(id="main-container"):
            with Container(id="extract-section"):
                yield Static("Extract Content", id="section-title")
                yield UrlInput(on_extract=self.handle_extract, id="url-form")

            with Horizontal(id="results-header"):
                yield Label("Extracted Content", id="results-title")
                yield Label("", id="status-counts")

            yield ContentTable(self.table_state, id="content-table")

            yield Label(self.state_manager.get_status_text(), id="status-bar")

        yield Footer()

    def on_mount(self) -> None:
        """Restore the stored history when the app starts"""
        restored = self.state_manager.restore_history()
        logger.info(f"Started with {restored} stored record(s)")
        self.refresh_results()

    async def on_unmount(self) -> None:
        await self.state_manager.close()

    async def handle_extract(self, url: str) -> ExtractionRecord:
        """Extraction callback handed to the URL form"""
        try:
            record = await self.state_manager.extract(url)
        finally:
            self.refresh_results()

        if self.state_manager.last_save_error:
            self.notify(f"Could not save history: {self.state_manager.last_save_error}", severity="warning")
        return record

    def refresh_results(self) -> None:
        """Re-derive the table, counts and status bar from the history"""
        self.query_one("#content-table", ContentTable).update_records(self.state_manager.records)
        self.query_one("#status-counts", Label).update(self.state_manager.get_counts_text())
        self.update_status()

    def update_status(self) -> None:
        self.query_one("#status-bar", Label).update(self.state_manager.get_status_text())

    def action_save_history(self) -> None:
        """Write the history to local storage on demand"""
        if self.state_manager.save_history():
            self.notify(f"Saved {len(self.state_manager.records)} record(s)")
        else:
            self.notify(f"Could not save history: {self.state_manager.last_save_error}", severity="error")
        self.update_status()

    def action_clear_history(self) -> None:
        """Forget every record"""
        self.state_manager.clear_history()
        self.refresh_results()
        self.notify("History cleared")

    def action_sort(self, field: str) -> None:
        self.query_one("#content-table", ContentTable).toggle_sort(SortField(field))

    def action_view_selected(self) -> None:
        self.query_one("#content-table", ContentTable).open_selected()


def configure_logging(config: ExtractorConfig) -> None:
    """Send logs to a file so they never draw over the terminal UI"""
    log_file = Path(config.log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file),
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main():
    """Main entry point for Textual CLI"""
    config = get_config_manager().build_extractor_config()
    configure_logging(config)
    app = URLExtractorTUI(config)
    app.run()


if __name__ == "__main__":
    main()

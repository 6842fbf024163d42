"""
Details dialog for URL Extractor CLI
Shows one extraction record without truncation
"""

from textual import events
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Static
from rich.text import Text

from ...core.utils import format_date
from ...models.record import ExtractionRecord

NO_KEY_POINTS_AVAILABLE = "No key points available"


def status_badge(record: ExtractionRecord) -> Text:
    """Colored status label used in the table and the dialog"""
    style = "bold green" if record.is_success else "bold red"
    return Text(f" {record.status.value} ", style=f"{style} reverse")


class DetailsDialog(ModalScreen):
    """Modal view of a full record; closes only on explicit dismissal"""

    CSS = """
    DetailsDialog {
        align: center middle;
    }

    #details-container {
        width: 90%;
        max-width: 110;
        height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    #details-header {
        height: 3;
    }

    #details-heading {
        width: 1fr;
        padding: 1 0 0 0;
    }

    .details-section-title {
        margin: 1 0 0 0;
        text-style: bold;
    }

    .details-body {
        color: $text-muted;
    }

    #details-url {
        color: $accent;
    }
    """

    def __init__(self, record: ExtractionRecord):
        super().__init__()
        self.record = record

    def compose(self):
        record = self.record
        with Container(id="details-container"):
            with Horizontal(id="details-header"):
                yield Static("[bold]Content Details[/bold]", id="details-heading")
                yield Button("✕ Close", id="close-btn")

            with VerticalScroll(id="details-body"):
                yield Static(Text(record.title, style="bold"), id="details-title")

                meta = Text()
                meta.append(f"📅 {format_date(record.timestamp)}  ", style="dim")
                meta.append_text(status_badge(record))
                yield Static(meta, id="details-meta")

                yield Static("URL", classes="details-section-title")
                yield Static(Text(record.url), id="details-url")

                yield Static("Summary", classes="details-section-title")
                yield Static(Text(record.summary), id="details-summary", classes="details-body")

                yield Static("Key Points", classes="details-section-title")
                if record.key_points:
                    points = Text("\n".join(f"• {point}" for point in record.key_points))
                else:
                    points = Text(NO_KEY_POINTS_AVAILABLE)
                yield Static(points, id="details-key-points", classes="details-body")

                if record.error and record.error != record.summary:
                    yield Static("Error", classes="details-section-title")
                    yield Static(Text(record.error, style="red"), id="details-error")

    def on_mount(self) -> None:
        self.query_one("#close-btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-btn":
            event.stop()
            self.dismiss()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            event.stop()
            self.dismiss()

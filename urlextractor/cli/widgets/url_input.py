"""
URL submission form for URL Extractor CLI
Validates the URL locally and hands it to an injected extraction callback
"""

import logging
from typing import Any, Awaitable, Callable

from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Static

from ...core.utils import is_valid_url

logger = logging.getLogger(__name__)

EMPTY_URL_MESSAGE = "Please enter a URL"
INVALID_URL_MESSAGE = "Please enter a valid URL"
RETRY_MESSAGE = "Failed to extract content. Please try again."
EXAMPLE_URLS = "https://example.com, https://news.ycombinator.com, https://github.com"

ExtractCallback = Callable[[str], Awaitable[Any]]


class UrlInput(Vertical):
    """Single-field form that submits a URL for extraction"""

    DEFAULT_CSS = """
    UrlInput {
        height: auto;
        padding: 0 1;
    }

    #url-row {
        height: auto;
    }

    #url-input {
        width: 1fr;
    }

    #extract-btn {
        min-width: 14;
    }

    #url-error {
        height: auto;
        color: $error;
        text-align: center;
    }

    #url-busy {
        height: 1;
        color: $warning;
        display: none;
    }

    #url-hint {
        height: 1;
        color: $text-muted;
    }
    """

    def __init__(self, on_extract: ExtractCallback, **kwargs):
        super().__init__(**kwargs)
        self.on_extract = on_extract
        self.busy = False
        self.error = ""

    def compose(self):
        with Horizontal(id="url-row"):
            yield Input(
                placeholder="Enter any public URL to extract and summarize its content using AI",
                id="url-input",
            )
            yield Button("Extract ➜", variant="primary", id="extract-btn", disabled=True)
        yield Static("", id="url-error")
        yield Static("⏳ Extracting content… input disabled until response.", id="url-busy")
        yield Static(f"[dim]Try URLs like:[/dim] [blue]{EXAMPLE_URLS}[/blue]", id="url-hint")

    def on_mount(self) -> None:
        self.query_one("#url-input", Input).focus()

    @property
    def value(self) -> str:
        return self.query_one("#url-input", Input).value

    def set_error(self, message: str) -> None:
        self.error = message
        self.query_one("#url-error", Static).update(message)

    def set_busy(self, busy: bool) -> None:
        """Disable the form and show the busy line while a request is in flight"""
        self.busy = busy
        url_input = self.query_one("#url-input", Input)
        url_input.disabled = busy
        self.query_one("#url-busy", Static).display = busy
        self._update_button()

    def _update_button(self) -> None:
        button = self.query_one("#extract-btn", Button)
        button.disabled = self.busy or not self.value.strip()
        button.label = "⠋ Working" if self.busy else "Extract ➜"

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "url-input":
            return
        event.stop()
        self._update_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "url-input":
            return
        event.stop()
        self.run_worker(self.submit(), group="extract")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "extract-btn":
            return
        event.stop()
        self.run_worker(self.submit(), group="extract")

    async def submit(self) -> bool:
        """
        Validate the current input and run the extraction callback.

        Returns:
            True if the callback completed and the input was cleared
        """
        if self.busy:
            return False

        raw = self.value
        self.set_error("")

        if not raw.strip():
            self.set_error(EMPTY_URL_MESSAGE)
            return False

        if not is_valid_url(raw):
            self.set_error(INVALID_URL_MESSAGE)
            return False

        self.set_busy(True)
        try:
            await self.on_extract(raw.strip())
        except Exception as e:
            logger.exception(f"Extraction callback failed for {raw.strip()}: {e}")
            self.set_error(RETRY_MESSAGE)
            return False
        finally:
            self.set_busy(False)

        self.query_one("#url-input", Input).value = ""
        self._update_button()
        return True

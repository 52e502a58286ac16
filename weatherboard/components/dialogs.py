"""Modal screens for weather details and error notices."""

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from ..models.weather import WeatherRecord
from .render import escape_markup, render_detail


class DetailScreen(ModalScreen[None]):
    """Per-period weather breakdown for one area."""

    DEFAULT_CSS = """
    DetailScreen {
        align: center middle;
    }

    DetailScreen #detail-dialog {
        width: 50;
        max-height: 80%;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    DetailScreen #detail-body {
        height: auto;
    }

    DetailScreen #detail-close {
        margin: 1 0 0 0;
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=True),
    ]

    def __init__(self, record: WeatherRecord) -> None:
        super().__init__()
        self.record = record

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="detail-dialog"):
            yield Static(render_detail(self.record), id="detail-body")
            yield Button("Close", id="detail-close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss()

    def on_click(self, event: events.Click) -> None:
        # Clicking the backdrop closes the dialog
        if event.widget is self:
            self.dismiss()


class ErrorDialog(ModalScreen[None]):
    """Blocking notice that must be acknowledged."""

    DEFAULT_CSS = """
    ErrorDialog {
        align: center middle;
    }

    ErrorDialog #error-dialog {
        width: 50;
        height: auto;
        border: thick $error;
        background: $surface;
        padding: 1 2;
    }

    ErrorDialog #error-message {
        width: 100%;
        padding: 0 0 1 0;
    }

    ErrorDialog #error-ok {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss", "OK", show=False),
        Binding("enter", "dismiss", "OK", show=False),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()
        self.notice = message

    def compose(self) -> ComposeResult:
        with Vertical(id="error-dialog"):
            yield Label(f"[red]{escape_markup(self.notice)}[/red]", id="error-message")
            yield Button("OK", id="error-ok", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss()

"""Status bar component showing load status, counts and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


class StatusBar(Horizontal):
    """Bottom status bar with clock, last update, counts and key hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar Static {
        width: auto;
        padding-right: 2;
    }

    StatusBar #status-activity {
        color: $warning;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_refresh: datetime | None = None
        self._refresh_interval_minutes = 0

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-refresh")
        yield Static("", id="status-counts")
        yield Static("", id="status-activity")
        yield Static("", id="status-spacer")
        yield Static(
            "[dim]/[/dim] Search  [dim]f[/dim] Filter  [dim]r[/dim] Reload  [dim]q[/dim] Quit",
            id="status-hints",
        )

    def on_mount(self) -> None:
        self.set_interval(1, self._update_time)
        self._update_time()

    def _update_time(self) -> None:
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

        if self._last_refresh is None:
            return
        text = f"Updated {self._last_refresh.strftime('%H:%M')}"
        if self._refresh_interval_minutes:
            text += f" (every {self._refresh_interval_minutes} min)"
        self.query_one("#status-refresh", Static).update(f"[dim]{text}[/dim]")

    def set_last_refresh(self, time: datetime | None = None) -> None:
        """Record when weather was last loaded."""
        self._last_refresh = time or datetime.now()
        self._update_time()

    def set_refresh_interval(self, minutes: int) -> None:
        """Show the auto-refresh interval next to the last update."""
        self._refresh_interval_minutes = minutes
        self._update_time()

    def set_counts(self, shown: int, total: int, favorites: int) -> None:
        """Show how many areas match the filter and how many are favorites."""
        areas = f"{shown}/{total} areas" if shown != total else f"{total} areas"
        self.query_one("#status-counts", Static).update(f"{areas}  ❤️ {favorites}")

    def set_activity(self, activity: str) -> None:
        """Set current activity message (e.g., 'Loading weather...')."""
        self.query_one("#status-activity", Static).update(activity)

    def clear_activity(self) -> None:
        """Clear activity message."""
        self.set_activity("")

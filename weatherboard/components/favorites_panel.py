"""Favorites panel component listing bookmarked areas."""

from collections.abc import Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Label

from ..models.favorite import FavoriteRecord
from .render import EMPTY_FAVORITES_MESSAGE, render_favorite_row, render_favorites


class RemoveButton(Button):
    """Removal control for one favorite."""

    def __init__(self, favorite_id: str) -> None:
        super().__init__("Remove", classes="remove-favorite", variant="error")
        self.favorite_id = favorite_id


class FavoriteRow(Horizontal):
    """A single favorite with its removal control."""

    def __init__(self, favorite: FavoriteRecord) -> None:
        super().__init__(classes="favorite-item")
        self.favorite = favorite

    def compose(self) -> ComposeResult:
        yield Label(render_favorite_row(self.favorite), classes="favorite-name")
        yield RemoveButton(self.favorite.id)


class FavoritesPanel(VerticalScroll):
    """Panel listing favorite areas."""

    DEFAULT_CSS = """
    FavoritesPanel {
        width: 32;
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    FavoritesPanel #favorites-header {
        text-style: bold;
        padding: 0 0 1 0;
    }

    FavoritesPanel #favorites-empty {
        color: $text-muted;
    }

    FavoritesPanel #favorites-list {
        height: auto;
    }

    FavoritesPanel .favorite-item {
        height: 1;
        margin: 0 0 1 0;
    }

    FavoritesPanel .favorite-name {
        width: 1fr;
    }

    FavoritesPanel RemoveButton {
        min-width: 8;
        height: 1;
        border: none;
    }
    """

    class RemoveRequested(Message):
        """Message sent when a favorite's Remove button is pressed."""

        def __init__(self, favorite_id: str) -> None:
            super().__init__()
            self.favorite_id = favorite_id

    def compose(self) -> ComposeResult:
        yield Label("Favorites", id="favorites-header")
        yield Label(EMPTY_FAVORITES_MESSAGE, id="favorites-empty")
        yield Vertical(id="favorites-list")

    async def update_favorites(self, favorites: Sequence[FavoriteRecord]) -> None:
        """Replace the listed favorites."""
        rows = self.query_one("#favorites-list", Vertical)
        await rows.remove_children()
        empty = self.query_one("#favorites-empty", Label)
        if not favorites:
            empty.update(render_favorites(favorites))
            empty.display = True
            return

        empty.display = False
        await rows.mount_all(FavoriteRow(favorite) for favorite in favorites)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, RemoveButton):
            event.stop()
            self.post_message(self.RemoveRequested(event.button.favorite_id))

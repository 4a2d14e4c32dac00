from textual import events
from textual.containers import VerticalScroll
from textual.message import Message

from nasatui.models import ImageEntry
from nasatui.ui.constants import CARD_MIN_WIDTH, SCROLL_THRESHOLD_ROWS
from nasatui.ui.widgets.image_card import ImageCard

ROW_PITCH = 8  # ImageCard height (7) plus the grid row gutter (1) in app.tcss


class ImageGrid(VerticalScroll):
    """Scrollable grid of image cards that asks for more when scrolled near the end."""

    class LoadMore(Message):
        """Message sent when the grid is scrolled close to its bottom."""

    def on_resize(self, event: events.Resize) -> None:
        self.styles.grid_size_columns = max(1, event.size.width // CARD_MIN_WIDTH)

    def watch_scroll_y(self, old_value: float, new_value: float) -> None:
        super().watch_scroll_y(old_value, new_value)
        if self.max_scroll_y > 0 and self.max_scroll_y - new_value <= SCROLL_THRESHOLD_ROWS * ROW_PITCH:
            self.post_message(self.LoadMore())

    # Public methods
    async def set_entries(self, entries: list[ImageEntry]) -> None:
        """Replace all cards with the given entries and scroll back to the top."""
        await self.remove_children()
        await self.append_entries(entries)
        self.scroll_home(animate=False)

    async def append_entries(self, entries: list[ImageEntry]) -> None:
        """Add cards for the given entries after the existing ones."""
        if entries:
            await self.mount_all(ImageCard(entry) for entry in entries)

    async def sync_entries(self, entries: list[ImageEntry]) -> None:
        """Make the cards match ``entries``, appending when the shown cards are a prefix."""
        shown = [card.entry for card in self.query(ImageCard)]
        if shown == entries[: len(shown)]:
            await self.append_entries(entries[len(shown) :])
        else:
            await self.set_entries(entries)

    @property
    def card_count(self) -> int:
        return len(self.query(ImageCard))

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from nasatui.models import ImageEntry
from nasatui.ui.routes import format_image_name

IMAGE_ICON = "🖼"
LINK_TEXT = "View image →"


class ImageCard(Widget, can_focus=True):
    """Flip card for one gallery entry.

    The front face shows the image, the back face its title, date and a link
    to the detail view. Hovering flips the card; leaving flips it back.
    """

    BINDINGS = [
        Binding("f", "flip", "Flip"),
        Binding("enter", "open", "Open", show=False),
    ]

    flipped: bool = reactive(False)

    class Selected(Message):
        """Message sent when the card's link is activated."""

        def __init__(self, entry: ImageEntry) -> None:
            super().__init__()
            self.entry = entry

    def __init__(self, entry: ImageEntry, **kwargs):
        super().__init__(**kwargs)
        self.entry = entry

    def render(self) -> Text:
        if self.flipped:
            return self._render_back()
        return self._render_front()

    def _render_front(self) -> Text:
        text = Text(justify="center")
        text.append(f"{IMAGE_ICON}\n\n", style="bold")
        text.append(format_image_name(self.entry.url), style="dim")
        return text

    def _render_back(self) -> Text:
        text = Text(justify="center")
        text.append(f"{self.entry.title or 'Untitled'}\n", style="bold")
        text.append(f"{self.entry.date}\n\n")
        text.append(LINK_TEXT, style="underline")
        return text

    def watch_flipped(self, flipped: bool) -> None:
        self.set_class(flipped, "-flipped")

    # Event handlers
    def on_enter(self, event: events.Enter) -> None:
        self.flipped = True

    def on_leave(self, event: events.Leave) -> None:
        self.flipped = False

    def on_click(self, event: events.Click) -> None:
        self.action_open()

    # Action methods
    def action_flip(self) -> None:
        self.flipped = not self.flipped

    def action_open(self) -> None:
        self.post_message(self.Selected(self.entry))

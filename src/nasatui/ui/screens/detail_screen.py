from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Label, Static

from nasatui.ui.routes import GALLERY_ROUTE, format_image_name, parse_image_route
from nasatui.ui.widgets.image_card import IMAGE_ICON


# UI Element IDs
class DetailScreenIDs:
    """Constants for UI element IDs."""

    DETAIL_CONTAINER = "detail-container"
    IMAGE = "detail-image"
    IMAGE_URL = "detail-image-url"
    ACTIONS = "detail-actions"
    BACK_BUTTON = "back-btn"
    OPEN_BUTTON = "open-btn"


class DetailScreen(Screen):
    """Shows a single image whose URL is carried by the route."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("b", "back", "Back", show=False),
        Binding("o", "open_in_browser", "Open in Browser"),
    ]

    def __init__(self, route: str, **kwargs) -> None:
        """Initialize the detail screen.

        Args:
            route: Detail route in format '/image/<percent-encoded url>'
        """
        super().__init__(**kwargs)
        self.route = route
        self.image_source = parse_image_route(route)

    def compose(self) -> ComposeResult:
        with Vertical(id=DetailScreenIDs.DETAIL_CONTAINER):
            yield Static(
                f"{IMAGE_ICON}  {format_image_name(self.image_source)}",
                id=DetailScreenIDs.IMAGE,
                classes="detail-image",
            )
            yield Label(self.image_source, id=DetailScreenIDs.IMAGE_URL)
            with Horizontal(id=DetailScreenIDs.ACTIONS):
                yield Button("← Back to gallery", variant="primary", id=DetailScreenIDs.BACK_BUTTON)
                yield Button("Open in browser", variant="default", id=DetailScreenIDs.OPEN_BUTTON)
        yield Footer(show_command_palette=False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == DetailScreenIDs.BACK_BUTTON:
            self.action_back()
        elif event.button.id == DetailScreenIDs.OPEN_BUTTON:
            self.action_open_in_browser()

    def action_back(self) -> None:
        self.app.open_route(GALLERY_ROUTE)

    def action_open_in_browser(self) -> None:
        self.app.open_url(self.image_source)

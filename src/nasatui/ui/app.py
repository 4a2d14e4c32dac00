"""Main NASA TUI application."""

from loguru import logger
from textual.app import App
from textual.binding import Binding

from nasatui.config import GalleryConfig
from nasatui.gateways.nasa import NasaImages
from nasatui.services.image_search import ImageSearchService
from nasatui.ui.routes import GALLERY_ROUTE, is_image_route
from nasatui.ui.screens.detail_screen import DetailScreen
from nasatui.ui.screens.gallery_screen import GalleryScreen


class NasaTUI(App):
    """NASA image gallery terminal application."""

    TITLE = "NASA Image Gallery"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        config: GalleryConfig | None = None,
        search_service=None,
        initial_route: str = GALLERY_ROUTE,
        **kwargs,
    ):
        """Initialize the NASA TUI app.

        Args:
            config: Gallery settings, defaults when omitted.
            search_service: Object providing ``fetch_page(query, page)``, the NASA API service when omitted.
            initial_route: Route to show once the gallery is mounted.
        """
        super().__init__(**kwargs)
        self.config = config or GalleryConfig()
        self.search_service = search_service or ImageSearchService
        self.initial_route = initial_route

        # Point the gateway at the configured endpoint for every request
        NasaImages.set_api_url(self.config.api_url)
        NasaImages.set_timeout(self.config.request_timeout)

    def register_custom_themes(self) -> None:
        from nasatui.ui.themes import CUSTOM_THEMES

        for theme in CUSTOM_THEMES:
            self.register_theme(theme)

    def unregister_builtin_themes(self) -> None:
        """Unregister all built-in themes."""
        from textual.theme import BUILTIN_THEMES

        for theme in BUILTIN_THEMES.keys():
            self.unregister_theme(theme)

    def on_mount(self) -> None:
        """Called when app starts."""
        self.register_custom_themes()
        self.theme = self.config.theme
        self.unregister_builtin_themes()

        self.push_screen(
            GalleryScreen(
                self.search_service,
                default_query=self.config.default_query,
                page_size=self.config.page_size,
                debounce_ms=self.config.debounce_ms,
            )
        )
        if self.initial_route != GALLERY_ROUTE:
            self.open_route(self.initial_route)

    def open_route(self, route: str) -> None:
        """Navigate to the gallery ('/') or to a detail route ('/image/<url>')."""
        if route == GALLERY_ROUTE:
            if isinstance(self.screen, DetailScreen):
                self.pop_screen()
            return

        if not is_image_route(route):
            logger.warning(f"Unknown route '{route}'")
            self.notify(f"Unknown route: {route}", severity="error")
            return

        try:
            detail = DetailScreen(route)
        except ValueError as e:
            self.notify(str(e), severity="error")
            return

        logger.info(f"Opening image {detail.image_source}")
        self.push_screen(detail)

import asyncio

from loguru import logger
from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Footer, Input, Static

from nasatui.models import GalleryStatus, ImageEntry, PageRequest
from nasatui.services.gallery import FETCH_ERROR_MESSAGE, GallerySession
from nasatui.ui.constants import (
    END_OF_RESULTS_MESSAGE,
    LOADING_MESSAGE,
    LOADING_MORE_MESSAGE,
    SEARCH_DEBOUNCE_MS,
)
from nasatui.ui.routes import build_image_route
from nasatui.ui.widgets.image_card import ImageCard
from nasatui.ui.widgets.image_grid import ImageGrid
from nasatui.ui.widgets.title_bar import TitleBar


class GalleryScreen(Screen):
    """Searchable, infinitely scrolling grid of NASA images."""

    BINDINGS = [
        Binding("q", "app.quit", "Quit"),
        Binding("slash", "focus_search", "Search"),
        Binding("l", "load_more", "Load More"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(
        self,
        search_service,
        default_query: str = "galaxy",
        page_size: int = 100,
        debounce_ms: int = SEARCH_DEBOUNCE_MS,
        **kwargs,
    ):
        """Initialize the gallery screen.

        Args:
            search_service: Object providing ``fetch_page(query, page)``.
            default_query: Query used on mount and whenever the search box is blank.
            page_size: A page with fewer valid entries than this ends the results.
            debounce_ms: Quiet period after the last keystroke before searching.
        """
        super().__init__(**kwargs)
        self.search_service = search_service
        self.session = GallerySession(default_query=default_query, page_size=page_size)
        self.debounce_ms = debounce_ms
        self._debounce_timer: Timer | None = None
        self.status_message = ""
        self._grid_lock = asyncio.Lock()

    def compose(self) -> ComposeResult:
        with Container(id="gallery-container"):
            yield TitleBar(id="title-bar")
            yield Input(placeholder="Search space images...", id="search-input")
            yield Static("", id="gallery-status")
            yield ImageGrid(id="image-grid")
            yield Footer(id="gallery-footer", show_command_palette=False)

    def on_mount(self) -> None:
        """Load the first page of the default query."""
        self._start_fetch(self.session.start_query(self.session.default_query))

    # Event handlers
    def on_input_changed(self, event: Input.Changed) -> None:
        """Restart the debounce timer on every keystroke."""
        if event.input.id != "search-input":
            return

        if self._debounce_timer is not None:
            self._debounce_timer.stop()

        value = event.value
        self._debounce_timer = self.set_timer(self.debounce_ms / 1000, lambda: self._run_search(value))

    def on_image_grid_load_more(self, message: ImageGrid.LoadMore) -> None:
        self.action_load_more()

    def on_image_card_selected(self, message: ImageCard.Selected) -> None:
        self.app.open_route(build_image_route(message.entry.url))

    # Fetch cycle
    def _run_search(self, value: str) -> None:
        self._debounce_timer = None
        logger.debug(f"Debounced search fired for '{value}'")
        self._start_fetch(self.session.start_query(value))

    def _start_fetch(self, request: PageRequest) -> None:
        self._update_status()
        self._fetch_page(request)

    @work(thread=True, group="fetch", exit_on_error=False)
    def _fetch_page(self, request: PageRequest) -> None:
        """Fetch one page in a worker thread and hand the result back to the UI thread."""
        try:
            entries = self.search_service.fetch_page(request.query, request.page)
        except Exception as e:
            self.app.call_from_thread(self._on_page_error, request, e)
            return

        self.app.call_from_thread(self._on_page_loaded, request, entries)

    async def _on_page_loaded(self, request: PageRequest, entries: list[ImageEntry]) -> None:
        """Apply a fetched page unless a newer request superseded it."""
        if not self.session.complete(request, entries):
            return

        # Callbacks run as separate tasks; render the latest session entries one at a time
        async with self._grid_lock:
            await self.query_one("#image-grid", ImageGrid).sync_entries(self.session.entries)

        self.query_one(TitleBar).connection_error = False
        self._update_status()

    def _on_page_error(self, request: PageRequest, error: Exception) -> None:
        logger.error(f"Fetching '{request.query}' page {request.page} failed: {error}")
        if not self.session.fail(request, FETCH_ERROR_MESSAGE):
            return

        self.query_one(TitleBar).connection_error = True
        self.notify(FETCH_ERROR_MESSAGE, severity="error")
        self._update_status()

    def _update_status(self) -> None:
        """Refresh the status line and the title bar from the session state."""
        state = self.session.state
        status = self.session.status

        if status is GalleryStatus.LOADING:
            message = LOADING_MESSAGE
        elif status is GalleryStatus.LOADING_MORE:
            message = LOADING_MORE_MESSAGE
        elif status is GalleryStatus.ERROR:
            message = state.error
        elif not state.has_more:
            message = END_OF_RESULTS_MESSAGE
        else:
            message = ""

        self.status_message = message
        status_line = self.query_one("#gallery-status", Static)
        status_line.update(message)
        status_line.set_class(status is GalleryStatus.ERROR, "error")

        title_bar = self.query_one(TitleBar)
        title_bar.query_text = self.session.effective_query
        title_bar.result_count = len(state.entries)

    # Action methods
    def action_load_more(self) -> None:
        request = self.session.start_load_more()
        if request is not None:
            self._start_fetch(request)

    def action_refresh(self) -> None:
        """Search the current query again from page 1."""
        self._start_fetch(self.session.start_query(self.session.state.query))

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

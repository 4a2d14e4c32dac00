"""Paging state of the gallery, kept apart from the widgets that render it."""

from loguru import logger

from nasatui.models import GalleryStatus, ImageEntry, PageRequest, SearchState
from nasatui.services.image_search import resolve_query

FETCH_ERROR_MESSAGE = "Failed to fetch NASA images. Try again later."


class GallerySession:
    """Owns a SearchState and every transition applied to it.

    Each fetch is tagged with a generation number. Only the response to the
    most recent request is applied; older ones are dropped.
    """

    def __init__(self, default_query: str = "galaxy", page_size: int = 100):
        self.default_query = default_query
        self.page_size = page_size
        self.state = SearchState(query=default_query)
        self._loading_more = False
        # Set when a page-1 request failed and the shown entries belong to an older query
        self._entries_outdated = False

    @property
    def entries(self) -> list[ImageEntry]:
        return self.state.entries

    @property
    def effective_query(self) -> str:
        return resolve_query(self.state.query, self.default_query)

    @property
    def status(self) -> GalleryStatus:
        if self.state.loading:
            return GalleryStatus.LOADING_MORE if self._loading_more else GalleryStatus.LOADING
        if self.state.error:
            return GalleryStatus.ERROR
        return GalleryStatus.IDLE

    def _next_generation(self) -> int:
        self.state.generation += 1
        return self.state.generation

    def start_query(self, text: str | None) -> PageRequest:
        """Reset paging for a new query and return the page-1 request.

        Displayed entries stay in place until the response arrives.
        """
        self.state.query = text or ""
        self.state.page = 1
        self.state.has_more = True
        self.state.error = ""
        self.state.loading = True
        self._loading_more = False

        return PageRequest(query=self.effective_query, page=1, append=False, generation=self._next_generation())

    def start_load_more(self) -> PageRequest | None:
        """Return the request for the next page, or None when no fetch should start.

        After a failed search the list still shows the previous query, so the
        first page of the current query is requested again and replaces it.
        """
        if self.state.loading or not self.state.has_more:
            return None

        self.state.error = ""
        self.state.loading = True

        if self._entries_outdated:
            self._loading_more = False
            return PageRequest(query=self.effective_query, page=1, append=False, generation=self._next_generation())

        self._loading_more = True

        return PageRequest(
            query=self.effective_query,
            page=self.state.page + 1,
            append=True,
            generation=self._next_generation(),
        )

    def is_current(self, request: PageRequest) -> bool:
        return request.generation == self.state.generation

    def complete(self, request: PageRequest, entries: list[ImageEntry]) -> bool:
        """Apply a successful response. Returns False when it was stale."""
        if not self.is_current(request):
            logger.debug(f"Dropping stale results for '{request.query}' page {request.page}")
            return False

        if request.append:
            self.state.entries = [*self.state.entries, *self._drop_known(entries)]
        else:
            self.state.entries = list(entries)
            self._entries_outdated = False

        self.state.page = request.page
        self.state.has_more = len(entries) >= self.page_size
        self.state.loading = False
        self._loading_more = False
        return True

    def fail(self, request: PageRequest, message: str = FETCH_ERROR_MESSAGE) -> bool:
        """Record a failed fetch. Entries and page are left untouched."""
        if not self.is_current(request):
            logger.debug(f"Dropping stale failure for '{request.query}' page {request.page}")
            return False

        if not request.append:
            self._entries_outdated = True

        self.state.error = message
        self.state.loading = False
        self._loading_more = False
        return True

    def _drop_known(self, entries: list[ImageEntry]) -> list[ImageEntry]:
        """Skip entries whose upstream id is already listed; pages can overlap upstream."""
        known = {entry.nasa_id for entry in self.state.entries if entry.nasa_id}
        fresh = []
        for entry in entries:
            if entry.nasa_id and entry.nasa_id in known:
                continue
            if entry.nasa_id:
                known.add(entry.nasa_id)
            fresh.append(entry)
        return fresh

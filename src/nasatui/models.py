"""Data model shared by the gateway, the services and the UI."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

UNKNOWN_DATE = "Unknown Date"


@dataclass(frozen=True)
class ImageEntry:
    """One image as displayed in the gallery.

    ``id`` is built from query, page and position, so it only identifies the
    entry within the current query session. ``nasa_id`` is the upstream
    identifier when the API provides one; appended pages skip entries whose
    ``nasa_id`` is already listed.
    """

    id: str
    title: str
    date: str
    url: str
    nasa_id: Optional[str] = None


class GalleryStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADING_MORE = "loading_more"
    ERROR = "error"


@dataclass
class SearchState:
    """Mutable paging state of the gallery."""

    query: str = ""
    page: int = 1
    has_more: bool = True
    loading: bool = False
    error: str = ""
    entries: list[ImageEntry] = field(default_factory=list)
    generation: int = 0


@dataclass(frozen=True)
class PageRequest:
    """A fetch issued by the gallery, tagged with the generation it belongs to."""

    query: str
    page: int
    append: bool
    generation: int

from loguru import logger

from nasatui.gateways.nasa import NasaApiError, NasaImages
from nasatui.models import UNKNOWN_DATE, ImageEntry


def resolve_query(text: str | None, default_query: str) -> str:
    """Return the term to search for, falling back to the default for blank input."""
    if text and text.strip():
        return text
    return default_query


def _first_link_href(item: dict) -> str | None:
    links = item.get("links") or []
    if not links or not isinstance(links[0], dict):
        return None
    return links[0].get("href") or None


def _format_date(date_created: str | None) -> str:
    if not date_created:
        return UNKNOWN_DATE
    return date_created.split("T")[0]


def map_items(items: list[dict], query: str, page: int) -> list[ImageEntry]:
    """Transform raw collection items into gallery entries.

    Items without a usable first link are dropped; the position used in the
    entry id counts only the items that are kept.
    """
    entries = []
    for item in items:
        href = _first_link_href(item)
        if not href:
            continue

        data = (item.get("data") or [{}])[0]
        entries.append(
            ImageEntry(
                id=f"{query}-{page}-{len(entries)}",
                title=data.get("title") or "",
                date=_format_date(data.get("date_created")),
                url=href,
                nasa_id=data.get("nasa_id"),
            )
        )

    return entries


class ImageSearchService:
    @classmethod
    def fetch_page(cls, query: str, page: int = 1) -> list[ImageEntry]:
        """Fetch one page of results and map it to gallery entries."""
        body = NasaImages.search(query, page)

        try:
            items = body["collection"]["items"]
        except (KeyError, TypeError) as e:
            logger.error(f"Unexpected response shape for '{query}' page {page}: missing {e}")
            raise NasaApiError("Response has no collection items") from e

        entries = map_items(items, query, page)
        logger.info(f"Mapped {len(entries)} of {len(items)} items for '{query}' page {page}")
        return entries

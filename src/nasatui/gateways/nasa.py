from functools import wraps
from typing import Optional

import requests
from loguru import logger

from nasatui.config import DEFAULT_API_URL


class NasaApiError(RuntimeError):
    """Raised when a search request fails or its response cannot be used."""


class NasaImages:
    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    _session: Optional[requests.Session] = None

    @classmethod
    def set_api_url(cls, api_url: Optional[str]) -> None:
        cls.api_url = api_url or DEFAULT_API_URL

    @classmethod
    def set_timeout(cls, timeout: Optional[float]) -> None:
        if timeout:
            cls.timeout = timeout

    @classmethod
    def get_shared_session(cls) -> requests.Session:
        """Return the process-wide session, creating it on first use."""
        if cls._session is None:
            cls._session = requests.Session()
        return cls._session

    @staticmethod
    def get_session(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if not kwargs.get("session"):
                kwargs["session"] = NasaImages.get_shared_session()
            return func(*args, **kwargs)

        return wrapper

    # -------------------------Search------------------------- #

    @get_session
    @staticmethod
    def search(query: str, page: int = 1, *, session: requests.Session) -> dict:
        """Fetch one page of image results for a free-text query.

        Args:
            query: Search term sent as ``q``.
            page: 1-based page number.
            session: HTTP session, the shared one when omitted.

        Returns:
            The decoded JSON body of the response.

        Raises:
            NasaApiError: On transport errors, non-2xx statuses and non-JSON bodies.
        """
        params = {"q": query, "media_type": "image", "page": page}
        logger.info(f"Searching NASA images for '{query}' (page {page})")

        try:
            response = session.get(NasaImages.api_url, params=params, timeout=NasaImages.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"NASA API request for '{query}' page {page} failed: {e}")
            raise NasaApiError(str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"NASA API returned a non-JSON body for '{query}' page {page}")
            raise NasaApiError("Response body is not valid JSON") from e

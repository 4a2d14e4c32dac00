from urllib.parse import quote, unquote

GALLERY_ROUTE = "/"
IMAGE_ROUTE_PREFIX = "/image/"


def build_image_route(url: str) -> str:
    """Build the detail route for an image URL.

    Args:
        url: Raw image URL

    Returns:
        Route in format '/image/<percent-encoded url>'
    """
    return f"{IMAGE_ROUTE_PREFIX}{quote(url, safe='')}"


def parse_image_route(route: str) -> str:
    """Extract the image URL from a detail route.

    Args:
        route: Route in format '/image/<percent-encoded url>'

    Returns:
        The decoded image URL

    Raises:
        ValueError: If the route is not a detail route or carries no URL
    """
    if not route.startswith(IMAGE_ROUTE_PREFIX):
        raise ValueError(f"Not an image route: '{route}'")

    encoded = route[len(IMAGE_ROUTE_PREFIX) :]
    if not encoded:
        raise ValueError("Image route carries no URL")

    return unquote(encoded)


def is_image_route(route: str) -> bool:
    return route.startswith(IMAGE_ROUTE_PREFIX)


def format_image_name(url: str) -> str:
    """Return the last path segment of an image URL for display."""
    name = url.rstrip("/").split("/")[-1]
    return unquote(name) or url

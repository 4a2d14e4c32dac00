import pytest

from nasatui.ui.routes import build_image_route, format_image_name, is_image_route, parse_image_route

IMAGE_URL = "https://images-assets.nasa.gov/image/PIA 12235/PIA12235~thumb.jpg?size=large&x=1"


def test_build_image_route_encodes_url_as_single_segment():
    route = build_image_route(IMAGE_URL)

    assert route.startswith("/image/")
    assert "/" not in route[len("/image/") :]
    assert "?" not in route and "&" not in route and " " not in route


def test_parse_image_route_returns_exact_url():
    assert parse_image_route(build_image_route(IMAGE_URL)) == IMAGE_URL


def test_parse_image_route_decodes_externally_encoded_url():
    route = "/image/https%3A%2F%2Fimages-assets.nasa.gov%2Fimage%2FPIA1%2FPIA1~thumb.jpg"

    assert parse_image_route(route) == "https://images-assets.nasa.gov/image/PIA1/PIA1~thumb.jpg"


@pytest.mark.parametrize("route", ["/", "/images/abc", "image/abc", "/image/"])
def test_parse_image_route_rejects_other_routes(route):
    with pytest.raises(ValueError):
        parse_image_route(route)


def test_is_image_route():
    assert is_image_route(build_image_route(IMAGE_URL))
    assert not is_image_route("/")


def test_format_image_name_uses_last_path_segment():
    assert format_image_name("https://images-assets.nasa.gov/image/PIA1/PIA1~thumb.jpg") == "PIA1~thumb.jpg"

import pytest

from conftest import make_entries
from nasatui.models import GalleryStatus, ImageEntry
from nasatui.services.gallery import FETCH_ERROR_MESSAGE, GallerySession


@pytest.fixture
def session():
    return GallerySession(default_query="galaxy", page_size=100)


@pytest.fixture
def loaded_session(session):
    request = session.start_query("galaxy")
    session.complete(request, make_entries("galaxy", 1, 100))
    return session


class TestStartQuery:
    def test_initial_load_requests_page_one_without_append(self, session):
        request = session.start_query("galaxy")

        assert request.query == "galaxy"
        assert request.page == 1
        assert request.append is False
        assert session.status is GalleryStatus.LOADING

    def test_blank_query_uses_default(self, session):
        request = session.start_query("")

        assert request.query == "galaxy"
        assert session.state.query == ""

    def test_query_change_resets_paging_before_fetch(self, loaded_session):
        loaded_session.complete(loaded_session.start_load_more(), make_entries("galaxy", 2, 10))
        assert loaded_session.state.page == 2
        assert loaded_session.state.has_more is False

        request = loaded_session.start_query("mars")

        assert request.page == 1
        assert loaded_session.state.page == 1
        assert loaded_session.state.has_more is True

    def test_query_change_keeps_entries_until_response(self, loaded_session):
        request = loaded_session.start_query("mars")

        assert len(loaded_session.entries) == 100

        loaded_session.complete(request, make_entries("mars", 1, 5))

        assert [e.id for e in loaded_session.entries] == [f"mars-1-{i}" for i in range(5)]

    def test_new_query_clears_previous_error(self, session):
        request = session.start_query("galaxy")
        session.fail(request)

        session.start_query("mars")

        assert session.state.error == ""


class TestComplete:
    def test_initial_load_replaces_existing_entries(self, loaded_session):
        request = loaded_session.start_query("galaxy")
        loaded_session.complete(request, make_entries("galaxy", 1, 3))

        assert len(loaded_session.entries) == 3

    def test_load_more_appends_next_page(self, loaded_session):
        request = loaded_session.start_load_more()

        assert request.page == 2
        assert request.append is True

        loaded_session.complete(request, make_entries("galaxy", 2, 100))

        assert len(loaded_session.entries) == 200
        assert loaded_session.entries[100].id == "galaxy-2-0"
        assert loaded_session.state.page == 2
        assert loaded_session.status is GalleryStatus.IDLE

    @pytest.mark.parametrize("count, has_more", [(100, True), (99, False), (0, False)])
    def test_has_more_follows_page_size(self, session, count, has_more):
        request = session.start_query("galaxy")
        session.complete(request, make_entries("galaxy", 1, count))

        assert session.state.has_more is has_more

    def test_custom_page_size(self):
        session = GallerySession(page_size=4)
        session.complete(session.start_query("moon"), make_entries("moon", 1, 4))

        assert session.state.has_more is True

    def test_appended_page_skips_already_listed_nasa_ids(self, session):
        first = [ImageEntry(id="q-1-0", title="a", date="d", url="https://img/a", nasa_id="A")]
        second = [
            ImageEntry(id="q-2-0", title="a again", date="d", url="https://img/a2", nasa_id="A"),
            ImageEntry(id="q-2-1", title="b", date="d", url="https://img/b", nasa_id="B"),
            ImageEntry(id="q-2-2", title="no id", date="d", url="https://img/c"),
        ]
        session.page_size = 1
        session.complete(session.start_query("q"), first)

        session.complete(session.start_load_more(), second)

        assert [e.id for e in session.entries] == ["q-1-0", "q-2-1", "q-2-2"]
        assert session.state.has_more is True


class TestLoadMore:
    def test_no_load_more_while_loading(self, session):
        session.start_query("galaxy")

        assert session.start_load_more() is None

    def test_no_load_more_after_short_page(self, session):
        session.complete(session.start_query("galaxy"), make_entries("galaxy", 1, 20))

        assert session.start_load_more() is None
        assert session.state.page == 1

    def test_load_more_uses_default_for_blank_query(self):
        session = GallerySession(default_query="nebula")
        session.complete(session.start_query(""), make_entries("nebula", 1, 100))

        assert session.start_load_more().query == "nebula"

    def test_status_while_loading_more(self, loaded_session):
        loaded_session.start_load_more()

        assert loaded_session.status is GalleryStatus.LOADING_MORE


class TestFail:
    def test_failure_sets_error_and_keeps_entries_and_page(self, loaded_session):
        request = loaded_session.start_load_more()

        assert loaded_session.fail(request) is True

        assert loaded_session.state.error == FETCH_ERROR_MESSAGE
        assert len(loaded_session.entries) == 100
        assert loaded_session.state.page == 1
        assert loaded_session.state.loading is False
        assert loaded_session.status is GalleryStatus.ERROR

    def test_load_more_after_failure_retries_same_page(self, loaded_session):
        loaded_session.fail(loaded_session.start_load_more())

        assert loaded_session.start_load_more().page == 2

    def test_load_more_after_failed_search_refetches_first_page_of_new_query(self, loaded_session):
        loaded_session.complete(loaded_session.start_load_more(), make_entries("galaxy", 2, 100))
        loaded_session.fail(loaded_session.start_query("mars"))

        request = loaded_session.start_load_more()

        assert request.query == "mars"
        assert request.page == 1
        assert request.append is False
        assert loaded_session.status is GalleryStatus.LOADING

        loaded_session.complete(request, make_entries("mars", 1, 100))

        assert [e.id for e in loaded_session.entries] == [f"mars-1-{i}" for i in range(100)]
        assert loaded_session.start_load_more().page == 2


class TestStaleResponses:
    def test_slow_first_query_does_not_overwrite_newer_query(self, session):
        slow = session.start_query("mar")
        fresh = session.start_query("mars")

        assert session.complete(fresh, make_entries("mars", 1, 3)) is True
        assert session.complete(slow, make_entries("mar", 1, 100)) is False

        assert [e.id for e in session.entries] == [f"mars-1-{i}" for i in range(3)]
        assert session.state.has_more is False

    def test_load_more_in_flight_is_dropped_after_query_change(self, loaded_session):
        more = loaded_session.start_load_more()
        fresh = loaded_session.start_query("mars")

        assert loaded_session.complete(more, make_entries("galaxy", 2, 100)) is False
        assert loaded_session.state.loading is True

        loaded_session.complete(fresh, make_entries("mars", 1, 2))
        assert len(loaded_session.entries) == 2

    def test_stale_failure_is_ignored(self, session):
        old = session.start_query("a")
        session.start_query("ab")

        assert session.fail(old) is False
        assert session.state.error == ""
        assert session.state.loading is True

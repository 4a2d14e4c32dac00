from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Static


class TitleBar(Static):
    """Title bar showing the app name, the active query and the result count"""

    connection_error: bool = reactive(False)
    query_text: str = reactive("")
    result_count: int = reactive(0)

    def compose(self) -> ComposeResult:
        with Horizontal(id="title-bar-container"):
            yield Static("🚀 NASA Image Gallery", id="title")
            with Horizontal(id="status-container"):
                yield Static("●", id="connected-indicator")
                yield Static("", id="query-info")

    def watch_connection_error(self, connection_error: bool) -> None:
        try:
            indicator = self.query_one("#connected-indicator", Static)
            indicator.set_class(connection_error, "error")
        except Exception:
            # Not composed yet
            pass

    def watch_query_text(self, query_text: str) -> None:
        self._update_query_info()

    def watch_result_count(self, result_count: int) -> None:
        self._update_query_info()

    def _update_query_info(self) -> None:
        try:
            info = self.query_one("#query-info", Static)
            info.update(f"query: {self.query_text} · {self.result_count} images")
        except Exception:
            pass

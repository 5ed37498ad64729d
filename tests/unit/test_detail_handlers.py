"""Unit tests for detail view and navigation shell handlers."""

from unittest.mock import MagicMock, patch

from contentgen.api.client import APIStatusError
from contentgen.ui.handlers.detail import (
    begin_detail_load,
    load_detail,
    load_detail_from_url,
    render_detail,
    render_idle,
)
from contentgen.ui.handlers.shell import navigate_to, sidebar_classes, toggle_sidebar_handler
from contentgen.ui.models import PHASE_ERROR, PHASE_SUCCESS, DetailState, ShellState


def make_request(query: dict):
    """Create a gr.Request stand-in with the given query parameters."""
    request = MagicMock()
    request.query_params = query
    return request


class TestLoadDetail:
    """GET /content/history/{id} via the detail view."""

    def test_begin_shows_loading(self):
        html, state = begin_detail_load("7", DetailState(phase=PHASE_SUCCESS, loaded=True))
        assert "loading-indicator" in html
        assert state.is_loading
        assert state.generation_id == "7"

    def test_success(self, text_record):
        client = MagicMock()
        client.get_generation.return_value = text_record

        with patch("contentgen.ui.handlers.detail.get_api_client", return_value=client):
            html, state = load_detail("7", DetailState())

        client.get_generation.assert_called_once_with(7)
        assert state.phase == PHASE_SUCCESS
        assert "<h1>Solar power</h1>" in html
        assert "<p>First paragraph.</p>" in html

    def test_failure(self):
        client = MagicMock()
        client.get_generation.side_effect = APIStatusError(
            "Failed to fetch content (status 404)", 404
        )

        with patch("contentgen.ui.handlers.detail.get_api_client", return_value=client):
            html, state = load_detail("12345", DetailState())

        assert state.phase == PHASE_ERROR
        assert "Failed to fetch content (status 404)" in html
        assert state.record is None

    def test_invalid_id_never_calls_backend(self):
        with patch("contentgen.ui.handlers.detail.get_api_client") as mock_factory:
            html, state = load_detail("abc", DetailState())

        mock_factory.assert_not_called()
        assert "Invalid content ID: abc" in html

    def test_success_without_record_shows_not_found(self):
        state = DetailState(phase=PHASE_SUCCESS, loaded=True)
        assert "Content not found" in render_detail(state)

    def test_previous_record_cleared_on_new_load(self, text_record):
        state = DetailState(phase=PHASE_SUCCESS, loaded=True, record=text_record)
        _, state = begin_detail_load("8", state)
        assert state.record is None


class TestLoadDetailFromUrl:
    """``/?id=<n>`` deep links."""

    def test_no_id_stays_idle(self):
        tabs_update, id_update, html, _ = load_detail_from_url(DetailState(), make_request({}))
        assert "selected" not in tabs_update
        assert html == render_idle()

    def test_id_opens_detail_tab(self, text_record):
        client = MagicMock()
        client.get_generation.return_value = text_record

        with patch("contentgen.ui.handlers.detail.get_api_client", return_value=client):
            tabs_update, id_value, html, state = load_detail_from_url(
                DetailState(), make_request({"id": "7"})
            )

        assert tabs_update["selected"] == "detail_tab"
        assert id_value == "7"
        assert "Solar power" in html

    def test_missing_request(self):
        _, _, html, _ = load_detail_from_url(DetailState(), None)
        assert html == render_idle()


class TestShell:
    """Sidebar toggle and navigation."""

    def test_collapse(self):
        outputs = toggle_sidebar_handler(ShellState())
        column_update, toggle_update, *nav_updates, state = outputs

        assert state.sidebar_open is False
        assert column_update["elem_classes"] == ["sidebar", "sidebar-collapsed"]
        assert toggle_update["value"] == "→"
        assert [u["value"] for u in nav_updates] == ["✏️", "📜", "🖼️", "🎞️"]

    def test_expand_again(self):
        state = ShellState(sidebar_open=False)
        column_update, toggle_update, *nav_updates, state = toggle_sidebar_handler(state)

        assert state.sidebar_open is True
        assert column_update["elem_classes"] == sidebar_classes(True) == ["sidebar"]
        assert nav_updates[1]["value"] == "History"

    def test_navigate_to(self):
        assert navigate_to("history_tab")["selected"] == "history_tab"

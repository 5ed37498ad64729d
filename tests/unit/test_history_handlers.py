"""Unit tests for text and image history handlers."""

from html import escape
from unittest.mock import MagicMock, patch

import gradio as gr
import pytest

from contentgen.api.client import APIStatusError
from contentgen.ui.handlers.history import (
    begin_history_load,
    close_history_modal,
    load_history,
    open_selected_in_detail,
    refresh_history,
    select_history_item,
)
from contentgen.ui.handlers.image_history import (
    begin_image_history_load,
    close_image_modal,
    download_history_image,
    load_image_history,
    refresh_image_history,
    select_image_item,
)
from contentgen.ui.models import PHASE_ERROR, PHASE_SUCCESS, HistoryState, ImageHistoryState


def make_select_event(index):
    """Create a SelectData stand-in carrying ``index``."""
    evt = MagicMock(spec=gr.SelectData)
    evt.index = index
    return evt


class TestLoadHistory:
    """Fetch-on-mount for the text history list."""

    def test_first_mount_shows_loading(self):
        status_html, table_update, state = begin_history_load(HistoryState())
        assert "loading-indicator" in status_html
        assert table_update["visible"] is False
        assert state.is_loading

    def test_load_success(self, text_record):
        client = MagicMock()
        client.list_history.return_value = [text_record]

        with patch("contentgen.ui.handlers.history.get_api_client", return_value=client):
            status_html, table_update, state = load_history(HistoryState())

        assert state.phase == PHASE_SUCCESS
        assert state.items == [text_record]
        assert table_update["visible"] is True
        assert table_update["value"]["data"][0][0] == 7
        assert "1 generation." in status_html

    def test_load_empty(self):
        client = MagicMock()
        client.list_history.return_value = []

        with patch("contentgen.ui.handlers.history.get_api_client", return_value=client):
            status_html, table_update, state = load_history(HistoryState())

        assert state.phase == PHASE_SUCCESS
        assert "No generations yet." in status_html
        assert table_update["value"]["data"] == []

    def test_load_failure(self):
        client = MagicMock()
        client.list_history.side_effect = APIStatusError(
            "Failed to fetch history (status 500)", 500
        )

        with patch("contentgen.ui.handlers.history.get_api_client", return_value=client):
            status_html, table_update, state = load_history(HistoryState())

        assert state.phase == PHASE_ERROR
        assert "Failed to fetch history (status 500)" in status_html
        assert table_update["visible"] is False

    def test_loaded_view_does_not_refetch(self, history_state):
        with patch("contentgen.ui.handlers.history.get_api_client") as mock_factory:
            begin_history_load(history_state)
            _, table_update, state = load_history(history_state)

        mock_factory.assert_not_called()
        assert table_update["visible"] is True
        assert state.phase == PHASE_SUCCESS

    def test_refresh_refetches(self, history_state, text_record):
        client = MagicMock()
        client.list_history.return_value = []

        with patch("contentgen.ui.handlers.history.get_api_client", return_value=client):
            refresh_history(history_state)
            _, _, state = load_history(history_state)

        client.list_history.assert_called_once()
        assert state.items == []

    def test_error_is_terminal_until_refresh(self):
        client = MagicMock()
        client.list_history.side_effect = APIStatusError("down", 503)

        with patch("contentgen.ui.handlers.history.get_api_client", return_value=client):
            _, _, state = load_history(HistoryState())
            begin_history_load(state)
            load_history(state)

        client.list_history.assert_called_once()
        assert state.has_error


class TestHistoryModal:
    """Modal open/close for the text history list."""

    def test_select_opens_modal(self, history_state):
        modal_update, modal_html, state = select_history_item(
            make_select_event([0, 3]), history_state
        )
        assert modal_update["visible"] is True
        assert "Solar power" in modal_html
        assert "Second paragraph." in modal_html
        assert state.selected.id == 7

    def test_select_out_of_range(self, history_state):
        modal_update, modal_html, state = select_history_item(
            make_select_event([4, 0]), history_state
        )
        assert modal_update["visible"] is False
        assert modal_html == ""
        assert state.selected is None

    def test_close_leaves_list_unchanged(self, history_state):
        items_before = list(history_state.items)
        _, _, state = select_history_item(make_select_event([0, 0]), history_state)

        modal_update, state = close_history_modal(state)

        assert modal_update["visible"] is False
        assert state.selected is None
        assert state.items == items_before
        assert state.phase == PHASE_SUCCESS

    def test_read_more_opens_detail(self, history_state):
        _, _, state = select_history_item(make_select_event([0, 0]), history_state)

        tabs_update, generation_id, modal_update, state = open_selected_in_detail(state)

        assert tabs_update["selected"] == "detail_tab"
        assert generation_id == "7"
        assert modal_update["visible"] is False
        assert state.selected is None

    def test_read_more_without_selection(self, history_state):
        tabs_update, _, _, _ = open_selected_in_detail(history_state)
        assert "selected" not in tabs_update


class TestLoadImageHistory:
    """Fetch-on-mount for the image gallery."""

    def test_load_success(self, image_record):
        client = MagicMock()
        client.list_image_history.return_value = [image_record]

        with patch("contentgen.ui.handlers.image_history.get_api_client", return_value=client):
            status_html, gallery_update, state = load_image_history(ImageHistoryState())

        assert state.phase == PHASE_SUCCESS
        [(url, caption)] = gallery_update["value"]
        assert url == image_record.image_url
        assert "512x768" in caption

    def test_load_failure_shows_message(self):
        client = MagicMock()
        client.list_image_history.side_effect = APIStatusError("HTTP error! status: 500", 500)

        with patch("contentgen.ui.handlers.image_history.get_api_client", return_value=client):
            status_html, gallery_update, state = load_image_history(ImageHistoryState())

        assert "HTTP error! status: 500" in status_html
        assert gallery_update["visible"] is False

    def test_refresh_forces_loading(self, image_history_state):
        status_html, _, state = refresh_image_history(image_history_state)
        assert state.is_loading
        assert "loading-indicator" in status_html

    def test_begin_keeps_loaded_gallery(self, image_history_state):
        _, gallery_update, state = begin_image_history_load(image_history_state)
        assert state.phase == PHASE_SUCCESS
        assert gallery_update["visible"] is True


class TestImageModal:
    """Preview modal of the image gallery."""

    def test_select_opens_preview(self, image_history_state, image_record):
        modal_update, image_html, details, file_update, state = select_image_item(
            make_select_event(0), image_history_state
        )
        assert modal_update["visible"] is True
        assert f'src="{escape(image_record.image_url)}"' in image_html
        assert "**Model:** flux" in details
        assert file_update["visible"] is False

    def test_close(self, image_history_state):
        select_image_item(make_select_event(0), image_history_state)
        modal_update, state = close_image_modal(image_history_state)
        assert modal_update["visible"] is False
        assert state.selected is None
        assert len(state.items) == 1

    @pytest.mark.parametrize("index", [-1, 9, None])
    def test_select_invalid_index(self, image_history_state, index):
        modal_update, _, _, _, state = select_image_item(
            make_select_event(index), image_history_state
        )
        assert modal_update["visible"] is False
        assert state.selected is None


class TestDownloadHistoryImage:
    def test_filename_from_prompt(self, image_history_state, test_config, temp_dir):
        select_image_item(make_select_event(0), image_history_state)
        saved = temp_dir / "a_red_fox_in_snow-1.png"

        with (
            patch("contentgen.ui.handlers.image_history.config", test_config),
            patch(
                "contentgen.ui.handlers.image_history.download_image", return_value=saved
            ) as mock_dl,
        ):
            update = download_history_image(image_history_state)

        assert update["value"] == str(saved)
        _, filename, _ = mock_dl.call_args.args
        assert filename.startswith("a_red_fox_in_snow-")
        assert filename.endswith(".png")

    def test_no_selection_is_noop(self, image_history_state):
        with patch("contentgen.ui.handlers.image_history.download_image") as mock_dl:
            update = download_history_image(image_history_state)
        mock_dl.assert_not_called()
        assert "value" not in update

    def test_failure_does_not_raise(self, image_history_state, test_config):
        select_image_item(make_select_event(0), image_history_state)
        with (
            patch("contentgen.ui.handlers.image_history.config", test_config),
            patch(
                "contentgen.ui.handlers.image_history.download_image",
                side_effect=OSError("cannot identify image file"),
            ),
        ):
            update = download_history_image(image_history_state)
        assert "value" not in update

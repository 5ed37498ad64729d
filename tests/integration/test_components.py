"""Integration tests for UI components and app assembly."""

import asyncio
from pathlib import Path
from unittest.mock import MagicMock, patch

import gradio as gr
from gradio.state_holder import SessionState

from contentgen.core.config import ContentGenConfig
from contentgen.ui.app import create_ui
from contentgen.ui.components import (
    CUSTOM_CSS,
    MODAL_SCRIPT,
    ModalUI,
    SidebarUI,
    create_navbar,
)
from contentgen.ui.handlers import select_image_item, submit_image
from contentgen.ui.models import NAV_LINKS, ImageGeneratorState, ImageHistoryState


class TestModalUI:
    """Integration tests for ModalUI component."""

    def test_modal_starts_hidden(self):
        with gr.Blocks():
            with ModalUI("test-modal") as modal:
                gr.HTML("body")

        assert modal.overlay.visible is False
        assert modal.overlay.elem_id == "test-modal-overlay"
        assert "modal-content" in modal.content.elem_classes
        assert "modal-close" in modal.close_btn.elem_classes

    def test_overlay_dismiss_is_opt_in(self):
        assert ModalUI("a").overlay_classes() == ["modal-overlay"]
        assert ModalUI("b", close_on_overlay=True).overlay_classes() == [
            "modal-overlay",
            "modal-dismissable",
        ]


class TestSidebarUI:
    """Integration tests for SidebarUI component."""

    def test_one_button_per_link(self):
        with gr.Blocks():
            sidebar = SidebarUI()

        assert list(sidebar.nav_buttons) == [tab_id for tab_id, _, _ in NAV_LINKS]
        assert sidebar.nav_buttons["history_tab"].value == "History"
        assert sidebar.toggle_btn.value == "← Collapse"

    def test_toggle_outputs_order(self):
        with gr.Blocks():
            sidebar = SidebarUI()

        outputs = sidebar.get_toggle_outputs()
        assert outputs[0] is sidebar.column
        assert outputs[1] is sidebar.toggle_btn
        assert outputs[-1] is sidebar.state
        assert len(outputs) == 2 + len(NAV_LINKS) + 1


class TestNavbar:
    def test_title_escaped(self):
        with gr.Blocks():
            navbar = create_navbar("<Gen>")
        assert "&lt;Gen&gt;" in navbar.value
        assert 'href="/"' in navbar.value


class TestPageAssets:
    def test_modal_script_ignores_content_clicks(self):
        """Clicks inside the modal content must return before closing."""
        guard = MODAL_SCRIPT.index('closest(".modal-content")')
        close = MODAL_SCRIPT.index(".modal-close")
        assert guard < close
        assert ".modal-dismissable" in MODAL_SCRIPT

    def test_css_covers_shell(self):
        for selector in (".modal-overlay", ".error-banner", ".sidebar-collapsed"):
            assert selector in CUSTOM_CSS


class TestCreateUI:
    """Smoke test for app assembly (nothing is launched)."""

    def test_create_ui(self):
        app, css, script = create_ui()

        assert isinstance(app, gr.Blocks)
        assert css is CUSTOM_CSS
        assert script is MODAL_SCRIPT
        assert app.title == "Content Generator"


def _block_fn(app: gr.Blocks, fn):
    """The registered event whose handler is ``fn``."""
    return next(block_fn for block_fn in app.fns.values() if block_fn.fn is fn)


def _postprocess(app: gr.Blocks, fn, outputs):
    """Run handler outputs through Gradio's output processing."""
    return asyncio.run(app.postprocess_data(_block_fn(app, fn), list(outputs), SessionState(app)))


class TestImageDisplay:
    """Rendered images are handed to the browser, never fetched by the server."""

    def test_generated_image_from_unreachable_host(self, temp_dir: Path):
        unreachable = ContentGenConfig(
            image_service_url="https://images.invalid",
            downloads_dir=temp_dir,
            _env_file=None,
        )
        with patch("contentgen.ui.handlers.image.config", unreachable):
            app, _, _ = create_ui()
            outputs = submit_image("a red fox", 512, 512, "flux", ImageGeneratorState())

        _postprocess(app, submit_image, outputs)

        image_html = outputs[0]
        assert isinstance(image_html, str)
        assert 'src="https://images.invalid/prompt/a%20red%20fox?' in image_html
        assert list(temp_dir.iterdir()) == []

    def test_history_preview_with_stale_url(self, image_record):
        stale = image_record.model_copy(update={"image_url": "https://images.invalid/gone.png"})
        app, _, _ = create_ui()
        evt = MagicMock(spec=gr.SelectData)
        evt.index = 0

        outputs = select_image_item(evt, ImageHistoryState(items=[stale]))
        _postprocess(app, select_image_item, outputs)

        assert 'src="https://images.invalid/gone.png"' in outputs[1]

    def test_served_files_are_cleaned_up(self):
        app, _, _ = create_ui()
        assert app.delete_cache == (3600, 3600)

"""Reusable UI components for the Content Generator Gradio interface."""

from html import escape

import gradio as gr

from .formatting import sidebar_labels
from .models import NAV_LINKS, ShellState

CUSTOM_CSS = """
.navbar {
    background: linear-gradient(to right, #2563eb, #1e40af);
    padding: 14px 24px;
    border-radius: 6px;
}
.navbar a {
    color: #fff;
    font-size: 1.5rem;
    font-weight: 700;
    text-decoration: none;
}
.sidebar {
    min-width: 220px !important;
    max-width: 260px;
    transition: all 0.3s;
}
.sidebar-collapsed {
    min-width: 72px !important;
    max-width: 80px;
}
.error-banner {
    margin-top: 12px;
    padding: 12px 16px;
    background: #fee2e2;
    border: 1px solid #f87171;
    color: #b91c1c;
    border-radius: 6px;
}
.loading-indicator {
    display: flex;
    align-items: center;
    gap: 12px;
    padding: 24px;
}
.spinner {
    width: 32px;
    height: 32px;
    border-radius: 50%;
    border-bottom: 2px solid #3b82f6;
    animation: spin 1s linear infinite;
}
@keyframes spin { to { transform: rotate(360deg); } }
.badge {
    display: inline-block;
    padding: 2px 8px;
    margin-right: 6px;
    border-radius: 4px;
    font-size: 0.8rem;
}
.badge-type { background: #dbeafe; color: #1e40af; }
.badge-tone { background: #dcfce7; color: #166534; }
.badge-words { background: #f3e8ff; color: #6b21a8; }
.modal-overlay {
    position: fixed !important;
    inset: 0;
    z-index: 50;
    background: rgba(0, 0, 0, 0.5);
    display: flex;
    align-items: center;
    justify-content: center;
    padding: 16px;
}
.rendered-image {
    display: block;
    max-width: 100%;
    max-height: 70vh;
    margin: 0 auto;
    border-radius: 6px;
}
.modal-content {
    max-width: 56rem;
    width: 100%;
    max-height: 90vh;
    overflow-y: auto;
    border-radius: 8px;
    padding: 24px;
    background: var(--background-fill-primary);
}
"""

# Close a dismissable modal when a click lands on its overlay. Clicks inside
# .modal-content are ignored so they never reach the close action.
MODAL_SCRIPT = """
() => {
    document.addEventListener("click", (event) => {
        if (event.target.closest(".modal-content")) {
            return;
        }
        const overlay = event.target.closest(".modal-dismissable");
        if (overlay) {
            overlay.querySelector(".modal-close")?.click();
        }
    });
}
"""


class ModalUI:
    """Overlay dialog built from a hidden column.

    Use as a context manager; components created inside the ``with`` block
    land in the modal content area::

        with ModalUI("history-modal") as modal:
            body = gr.HTML()

    ``modal.overlay`` is the component to show/hide and ``modal.close_btn``
    the explicit close control. With ``close_on_overlay`` a click on the
    overlay outside the content also closes the modal (see MODAL_SCRIPT).
    """

    def __init__(self, name: str, close_on_overlay: bool = False):
        """Initialize a modal component.

        Args:
            name: Prefix for element ids (e.g., "image-modal")
            close_on_overlay: Close when the overlay outside the content is clicked
        """
        self.name = name
        self.close_on_overlay = close_on_overlay
        self.overlay = None
        self.content = None
        self.close_btn = None

    def overlay_classes(self) -> list[str]:
        """CSS classes for the overlay column."""
        classes = ["modal-overlay"]
        if self.close_on_overlay:
            classes.append("modal-dismissable")
        return classes

    def __enter__(self) -> "ModalUI":
        self.overlay = gr.Column(
            visible=False, elem_id=f"{self.name}-overlay", elem_classes=self.overlay_classes()
        )
        self.overlay.__enter__()
        self.content = gr.Column(elem_id=f"{self.name}-content", elem_classes=["modal-content"])
        self.content.__enter__()
        self.close_btn = gr.Button(
            "✕", elem_id=f"{self.name}-close", elem_classes=["modal-close"], size="sm"
        )
        return self

    def __exit__(self, exc_type, exc, tb):
        self.content.__exit__(exc_type, exc, tb)
        self.overlay.__exit__(exc_type, exc, tb)
        return False


class SidebarUI:
    """Collapsible link panel.

    Expanded, the links show their full labels; collapsed, they show
    glyphs. The toggle state lives in ``self.state`` and is not persisted.
    """

    def __init__(self):
        """Initialize the sidebar component (starts expanded)."""
        toggle_label, labels = sidebar_labels(True)

        self.state = gr.State(ShellState())
        with gr.Column(scale=0, min_width=72, elem_classes=["sidebar"]) as self.column:
            self.toggle_btn = gr.Button(toggle_label, size="sm", elem_id="sidebar-toggle")
            self.nav_buttons = {}
            for (tab_id, _, _), label in zip(NAV_LINKS, labels):
                self.nav_buttons[tab_id] = gr.Button(
                    label, variant="secondary", elem_id=f"nav-{tab_id}"
                )

    def get_toggle_outputs(self) -> list:
        """Components updated by the sidebar toggle handler.

        Returns:
            [column, toggle_btn, *nav_buttons (NAV_LINKS order), state]
        """
        return (
            [self.column, self.toggle_btn]
            + [self.nav_buttons[tab_id] for tab_id, _, _ in NAV_LINKS]
            + [self.state]
        )


def create_navbar(title: str) -> gr.HTML:
    """Static navbar with the brand title linking home."""
    return gr.HTML(f'<nav class="navbar"><a href="/">{escape(title)}</a></nav>')

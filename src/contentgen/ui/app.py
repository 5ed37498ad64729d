"""Gradio UI for the Content Generator."""

import logging

import gradio as gr

from contentgen.core.config import config

from .components import CUSTOM_CSS, MODAL_SCRIPT, ModalUI, SidebarUI, create_navbar
from .formatting import HISTORY_COLUMNS
from .handlers import (
    begin_detail_load,
    begin_history_load,
    begin_image_history_load,
    close_history_modal,
    close_image_modal,
    download_generated_image,
    download_history_image,
    finish_generation,
    finish_image_generation,
    load_detail,
    load_detail_from_url,
    load_history,
    load_image_history,
    navigate_to,
    notify_image_generation,
    open_selected_in_detail,
    refresh_history,
    refresh_image_history,
    render_idle,
    select_history_item,
    select_image_item,
    start_generation,
    start_image_generation,
    submit_content,
    submit_image,
    toggle_sidebar_handler,
)
from .handlers.generator import SUBMIT_LABEL as CONTENT_SUBMIT_LABEL
from .handlers.image import SUBMIT_LABEL as IMAGE_SUBMIT_LABEL
from .models import (
    CONTENT_TYPES,
    DETAIL_TAB_ID,
    DIMENSION_STEP,
    IMAGE_MODELS,
    MAX_DIMENSION,
    MAX_MAX_TOKENS,
    MAX_WORD_COUNT,
    MIN_DIMENSION,
    MIN_MAX_TOKENS,
    MIN_WORD_COUNT,
    TONES,
    DetailState,
    GeneratorState,
    HistoryState,
    ImageGeneratorState,
    ImageHistoryState,
    ImageRequest,
    TextRequest,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string, page script)
    """
    app = gr.Blocks(
        title=config.app_title,
        delete_cache=(config.cache_cleanup_seconds, config.cache_cleanup_seconds),
    )

    with app:
        create_navbar(config.app_title)

        with gr.Row():
            sidebar = SidebarUI()

            with gr.Column(scale=4):
                with gr.Tabs(selected="generate_tab", elem_id="main-tabs") as tabs:
                    with gr.Tab("Generate Content", id="generate_tab"):
                        create_generator_tab()

                    with gr.Tab("Generate Images", id="generate_image_tab"):
                        create_image_tab()

                    with gr.Tab("History", id="history_tab") as history_tab:
                        history = create_history_tab()

                    with gr.Tab("Image History", id="image_history_tab") as image_history_tab:
                        image_history = create_image_history_tab()

                    with gr.Tab("Content Detail", id=DETAIL_TAB_ID):
                        detail = create_detail_tab()

        # Fetch on mount: the list views load the first time they are shown
        history_load_outputs = [history["status"], history["table"], history["state"]]
        image_history_load_outputs = [
            image_history["status"],
            image_history["gallery"],
            image_history["state"],
        ]

        history_tab.select(
            fn=begin_history_load,
            inputs=[history["state"]],
            outputs=history_load_outputs,
        ).then(
            fn=load_history,
            inputs=[history["state"]],
            outputs=history_load_outputs,
        )

        image_history_tab.select(
            fn=begin_image_history_load,
            inputs=[image_history["state"]],
            outputs=image_history_load_outputs,
        ).then(
            fn=load_image_history,
            inputs=[image_history["state"]],
            outputs=image_history_load_outputs,
        )

        # Read More: history modal -> detail view
        history["read_more_btn"].click(
            fn=open_selected_in_detail,
            inputs=[history["state"]],
            outputs=[tabs, detail["id_input"], history["modal"], history["state"]],
        ).then(
            fn=begin_detail_load,
            inputs=[detail["id_input"], detail["state"]],
            outputs=[detail["body"], detail["state"]],
        ).then(
            fn=load_detail,
            inputs=[detail["id_input"], detail["state"]],
            outputs=[detail["body"], detail["state"]],
        )

        # Sidebar
        sidebar.toggle_btn.click(
            fn=toggle_sidebar_handler,
            inputs=[sidebar.state],
            outputs=sidebar.get_toggle_outputs(),
        )

        for tab_id, button in sidebar.nav_buttons.items():
            event = button.click(fn=_navigator(tab_id), inputs=None, outputs=[tabs])

            # Selecting a tab programmatically does not fire its select event
            if tab_id == "history_tab":
                event.then(
                    fn=begin_history_load,
                    inputs=[history["state"]],
                    outputs=history_load_outputs,
                ).then(
                    fn=load_history,
                    inputs=[history["state"]],
                    outputs=history_load_outputs,
                )
            elif tab_id == "image_history_tab":
                event.then(
                    fn=begin_image_history_load,
                    inputs=[image_history["state"]],
                    outputs=image_history_load_outputs,
                ).then(
                    fn=load_image_history,
                    inputs=[image_history["state"]],
                    outputs=image_history_load_outputs,
                )

        # Deep link: /?id=<n> opens the detail view
        app.load(
            fn=load_detail_from_url,
            inputs=[detail["state"]],
            outputs=[tabs, detail["id_input"], detail["body"], detail["state"]],
        )

    return app, CUSTOM_CSS, MODAL_SCRIPT


def _navigator(tab_id: str):
    """Click handler selecting ``tab_id``."""

    def navigate():
        return navigate_to(tab_id)

    return navigate


def create_generator_tab() -> dict:
    """Create the text generation tab UI.

    Returns:
        Dictionary of generator components
    """
    defaults = TextRequest()
    state = gr.State(GeneratorState())

    gr.Markdown("## Generate Content")

    with gr.Group():
        topic_input = gr.Textbox(
            label="Topic",
            placeholder="Enter your topic...",
            lines=1,
        )
        with gr.Row():
            content_type_dropdown = gr.Dropdown(
                label="Content Type",
                choices=CONTENT_TYPES,
                value=defaults.content_type,
            )
            tone_dropdown = gr.Dropdown(
                label="Tone",
                choices=TONES,
                value=defaults.tone,
            )
        with gr.Row():
            word_count_input = gr.Number(
                label="Word Count",
                value=defaults.word_count,
                minimum=MIN_WORD_COUNT,
                maximum=MAX_WORD_COUNT,
                precision=0,
            )
            max_tokens_input = gr.Number(
                label="Max Tokens",
                value=defaults.max_tokens,
                minimum=MIN_MAX_TOKENS,
                maximum=MAX_MAX_TOKENS,
                precision=0,
            )

    generate_btn = gr.Button(CONTENT_SUBMIT_LABEL, variant="primary")

    error_output = gr.HTML(value="")
    content_output = gr.HTML(value="")

    generate_btn.click(
        fn=start_generation,
        inputs=[state],
        outputs=[generate_btn, state],
    ).then(
        fn=submit_content,
        inputs=[
            topic_input,
            content_type_dropdown,
            tone_dropdown,
            word_count_input,
            max_tokens_input,
            state,
        ],
        outputs=[content_output, error_output, state],
    ).then(
        fn=finish_generation,
        inputs=[state],
        outputs=[generate_btn, state],
    )

    return {
        "state": state,
        "topic": topic_input,
        "generate_btn": generate_btn,
        "content": content_output,
        "error": error_output,
    }


def create_image_tab() -> dict:
    """Create the image generation tab UI.

    Returns:
        Dictionary of image generator components
    """
    defaults = ImageRequest()
    state = gr.State(ImageGeneratorState())

    gr.Markdown("## Generate Images")

    with gr.Group():
        prompt_input = gr.Textbox(
            label="Image Prompt",
            placeholder="Describe the image you want to generate...",
            lines=4,
        )
        with gr.Row():
            width_slider = gr.Slider(
                label="Width",
                minimum=MIN_DIMENSION,
                maximum=MAX_DIMENSION,
                step=DIMENSION_STEP,
                value=defaults.width,
            )
            height_slider = gr.Slider(
                label="Height",
                minimum=MIN_DIMENSION,
                maximum=MAX_DIMENSION,
                step=DIMENSION_STEP,
                value=defaults.height,
            )
        model_dropdown = gr.Dropdown(
            label="Model",
            choices=IMAGE_MODELS,
            value=defaults.model,
        )

    generate_btn = gr.Button(IMAGE_SUBMIT_LABEL, variant="primary")
    error_output = gr.HTML(value="")

    with gr.Column(visible=False) as result_group:
        gr.Markdown("### Generated Image")
        image_output = gr.HTML(value="", elem_id="generated-image")
        download_btn = gr.Button("Download Image", variant="secondary")
        download_file = gr.File(label="Download", visible=False, interactive=False)

    generate_btn.click(
        fn=start_image_generation,
        inputs=[state],
        outputs=[generate_btn, state],
    ).then(
        fn=submit_image,
        inputs=[prompt_input, width_slider, height_slider, model_dropdown, state],
        outputs=[image_output, error_output, result_group, state],
    ).then(
        fn=finish_image_generation,
        inputs=[state],
        outputs=[generate_btn, state],
    ).then(
        fn=notify_image_generation,
        inputs=[state],
        outputs=[state],
    )

    download_btn.click(
        fn=download_generated_image,
        inputs=[state],
        outputs=[download_file],
    )

    return {
        "state": state,
        "prompt": prompt_input,
        "generate_btn": generate_btn,
        "image": image_output,
        "error": error_output,
        "download_file": download_file,
    }


def create_history_tab() -> dict:
    """Create the text history tab UI.

    Returns:
        Dictionary of history components for event handling
    """
    state = gr.State(HistoryState())

    with gr.Row():
        gr.Markdown("## Content History")
        refresh_btn = gr.Button("Refresh", size="sm", scale=0)

    status_output = gr.HTML(value="")
    history_table = gr.Dataframe(
        headers=HISTORY_COLUMNS,
        interactive=False,
        wrap=True,
        visible=False,
    )

    with ModalUI("history-modal") as modal:
        modal_body = gr.HTML(value="")
        read_more_btn = gr.Button("Read More", variant="primary")

    refresh_btn.click(
        fn=refresh_history,
        inputs=[state],
        outputs=[status_output, history_table, state],
    ).then(
        fn=load_history,
        inputs=[state],
        outputs=[status_output, history_table, state],
    )

    history_table.select(
        fn=select_history_item,
        inputs=[state],
        outputs=[modal.overlay, modal_body, state],
    )

    modal.close_btn.click(
        fn=close_history_modal,
        inputs=[state],
        outputs=[modal.overlay, state],
    )

    return {
        "state": state,
        "status": status_output,
        "table": history_table,
        "modal": modal.overlay,
        "read_more_btn": read_more_btn,
    }


def create_image_history_tab() -> dict:
    """Create the image history tab UI.

    Returns:
        Dictionary of image history components for event handling
    """
    state = gr.State(ImageHistoryState())

    with gr.Row():
        gr.Markdown("## Image Generation History")
        refresh_btn = gr.Button("Refresh", size="sm", scale=0)

    status_output = gr.HTML(value="")
    gallery = gr.Gallery(
        label="Images",
        columns=3,
        height="auto",
        object_fit="cover",
        allow_preview=False,
        visible=False,
    )

    with ModalUI("image-modal", close_on_overlay=True) as modal:
        preview_image = gr.HTML(value="", elem_id="image-modal-preview")
        details_output = gr.Markdown(value="")
        download_btn = gr.Button("Download", variant="secondary")
        download_file = gr.File(label="Download", visible=False, interactive=False)

    refresh_btn.click(
        fn=refresh_image_history,
        inputs=[state],
        outputs=[status_output, gallery, state],
    ).then(
        fn=load_image_history,
        inputs=[state],
        outputs=[status_output, gallery, state],
    )

    # Image selection - uses gr.SelectData for event
    gallery.select(
        fn=select_image_item,
        inputs=[state],
        outputs=[modal.overlay, preview_image, details_output, download_file, state],
    )

    modal.close_btn.click(
        fn=close_image_modal,
        inputs=[state],
        outputs=[modal.overlay, state],
    )

    download_btn.click(
        fn=download_history_image,
        inputs=[state],
        outputs=[download_file],
    )

    return {
        "state": state,
        "status": status_output,
        "gallery": gallery,
        "modal": modal.overlay,
    }


def create_detail_tab() -> dict:
    """Create the single generation detail tab UI.

    Returns:
        Dictionary of detail components for event handling
    """
    state = gr.State(DetailState())

    with gr.Row():
        id_input = gr.Textbox(
            label="Content ID",
            placeholder="e.g. 42",
            scale=3,
        )
        load_btn = gr.Button("Load", variant="primary", scale=1)

    detail_body = gr.HTML(value=render_idle())

    for trigger in (load_btn.click, id_input.submit):
        trigger(
            fn=begin_detail_load,
            inputs=[id_input, state],
            outputs=[detail_body, state],
        ).then(
            fn=load_detail,
            inputs=[id_input, state],
            outputs=[detail_body, state],
        )

    return {
        "state": state,
        "id_input": id_input,
        "body": detail_body,
    }


def main():
    """Main entry point for the application."""
    logger.info("Starting Content Generator...")
    logger.info(f"Configuration: {config.model_dump()}")

    # Create and launch UI
    app, custom_css, page_script = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
        js=page_script,
    )


if __name__ == "__main__":
    main()

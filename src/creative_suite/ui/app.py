"""Gradio UI for Gemini Creative Suite."""

import logging

import gradio as gr

from creative_suite.core.config import config
from creative_suite.core.prompt_builder import (
    EDIT_STYLES,
    MEME_STYLES,
    POSTER_COLOR_THEMES,
    POSTER_STYLES,
    STORYBOOK_STYLES,
    default_choice,
)

from .components import ActionBar
from .handlers import (
    generate_edit,
    generate_meme,
    generate_poster,
    generate_storybook,
    make_image_editor_controller,
    make_meme_controller,
    make_poster_controller,
    make_storybook_controller,
    on_image_upload,
)
from .models import (
    APP_SUBTITLE,
    APP_TITLE,
    DEFAULT_PAGE_COUNT,
    TAB_IMAGE_EDITOR,
    TAB_MEME,
    TAB_POSTER,
    TAB_STORYBOOK,
)
from .state import initialize_generation_client

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> gr.Blocks:
    """Create the tabbed Gradio UI.

    Returns:
        Gradio Blocks app (not yet launched)
    """
    app = gr.Blocks(title=APP_TITLE)

    with app:
        gr.Markdown(f"# {APP_TITLE}\n### {APP_SUBTITLE}")

        with gr.Tabs():
            with gr.Tab(TAB_IMAGE_EDITOR, id="image_editor_tab"):
                create_image_editor_tab()

            with gr.Tab(TAB_STORYBOOK, id="storybook_tab"):
                create_storybook_tab()

            with gr.Tab(TAB_POSTER, id="poster_tab"):
                create_poster_tab()

            with gr.Tab(TAB_MEME, id="meme_tab"):
                create_meme_tab()

    return app


def create_image_editor_tab() -> None:
    """Upload an image, describe an edit, see original and result side by side."""
    controller_state = gr.State(make_image_editor_controller())

    with gr.Row():
        with gr.Column(scale=1):
            input_image = gr.Image(
                label="1. Upload Image",
                type="filepath",
                sources=["upload", "clipboard"],
                height=300,
            )
            prompt_input = gr.Textbox(
                label="2. Edit Prompt",
                placeholder="e.g., add a pirate hat to the person",
                lines=3,
            )
            style_dropdown = gr.Dropdown(
                label="3. Style / Mode",
                choices=EDIT_STYLES,
                value=default_choice(EDIT_STYLES),
            )
            actions = ActionBar("Generate Edited Image", "Save image")

        with gr.Column(scale=1):
            gr.Markdown("### Edited")
            edited_image = gr.Image(label="Result", type="pil", interactive=False, height=400)

    actions.wire(
        generate_edit,
        [input_image, prompt_input, style_dropdown],
        edited_image,
        controller_state,
    )

    input_image.change(
        fn=on_image_upload,
        inputs=[input_image, controller_state],
        outputs=[edited_image, actions.status, actions.download, controller_state],
    )


def create_storybook_tab() -> None:
    """Story text in, one illustrated panel per page out."""
    controller_state = gr.State(make_storybook_controller())

    with gr.Row():
        with gr.Column(scale=1):
            story_input = gr.Textbox(
                label="1. Story Text",
                placeholder="Write a short story here...",
                lines=10,
            )
            style_dropdown = gr.Dropdown(
                label="2. Illustration Style",
                choices=STORYBOOK_STYLES,
                value=default_choice(STORYBOOK_STYLES),
            )
            pages_dropdown = gr.Dropdown(
                label="3. Number of Pages",
                choices=list(range(1, config.max_story_pages + 1)),
                value=min(DEFAULT_PAGE_COUNT, config.max_story_pages),
            )
            actions = ActionBar("Generate Storybook", "Save pages")

        with gr.Column(scale=2):
            gr.Markdown("### Generated Pages")
            pages_gallery = gr.Gallery(
                label="Pages",
                columns=2,
                object_fit="cover",
                height=600,
            )

    actions.wire(
        generate_storybook,
        [story_input, style_dropdown, pages_dropdown],
        pages_gallery,
        controller_state,
    )


def create_poster_tab() -> None:
    """Poster text, style and colour theme in; background with text preview out."""
    controller_state = gr.State(make_poster_controller())

    with gr.Row():
        with gr.Column(scale=1):
            text_input = gr.Textbox(
                label="1. Poster Text",
                placeholder="e.g., Summer Music Festival",
                lines=3,
            )
            style_dropdown = gr.Dropdown(
                label="2. Style",
                choices=POSTER_STYLES,
                value=default_choice(POSTER_STYLES),
            )
            theme_dropdown = gr.Dropdown(
                label="3. Color Theme",
                choices=POSTER_COLOR_THEMES,
                value=default_choice(POSTER_COLOR_THEMES),
            )
            actions = ActionBar("Generate Poster", "Save background")

        with gr.Column(scale=1):
            gr.Markdown("### Result")
            poster_preview = gr.Image(label="Poster", type="pil", interactive=False, height=500)

    actions.wire(
        generate_poster,
        [text_input, style_dropdown, theme_dropdown],
        poster_preview,
        controller_state,
    )


def create_meme_tab() -> None:
    """Caption and style in; background with caption preview out."""
    controller_state = gr.State(make_meme_controller())

    with gr.Row():
        with gr.Column(scale=1):
            caption_input = gr.Textbox(
                label="1. Dialogue / Caption",
                placeholder="e.g., One does not simply...",
                lines=3,
            )
            style_dropdown = gr.Dropdown(
                label="2. Style",
                choices=MEME_STYLES,
                value=default_choice(MEME_STYLES),
            )
            actions = ActionBar("Generate Meme", "Save background")

        with gr.Column(scale=1):
            gr.Markdown("### Result")
            meme_preview = gr.Image(label="Meme", type="pil", interactive=False, height=400)

    actions.wire(
        generate_meme,
        [caption_input, style_dropdown],
        meme_preview,
        controller_state,
    )


def main():
    """Main entry point for the application.

    A missing API key raises MissingCredentialError here and aborts startup.
    """
    logger.info("Starting Gemini Creative Suite...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    initialize_generation_client(config)

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.queue().launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        allowed_paths=[str(config.outputs_dir.resolve())],
    )


if __name__ == "__main__":
    main()

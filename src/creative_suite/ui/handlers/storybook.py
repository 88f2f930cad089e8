"""Storybook: split a story into pages and illustrate each page.

All pages are generated concurrently. The batch is all-or-nothing: if any
page fails, the pages that did succeed are discarded and the whole batch is
reported as failed. Requests already sent are not cancelled.
"""

import asyncio
import logging
from typing import Any, Mapping

import gradio as gr
from PIL import Image

from creative_suite.core.chunker import chunk_story_or_raise
from creative_suite.core.export import storybook_page_filename
from creative_suite.core.generation_client import GenerationClient
from creative_suite.core.models import GenerationResult
from creative_suite.core.prompt_builder import build_storybook_prompt

from ..controller import UNEXPECTED_ERROR_MESSAGE, UseCase, UseCaseController
from ..state import get_generation_client
from .common import format_status

logger = logging.getLogger(__name__)


class StorybookUseCase(UseCase):
    """One text-to-image call per story chunk.

    Inputs: ``story_text``, ``style``, ``page_count``.
    """

    name = "Storybook"
    required_fields = ("story_text",)
    missing_input_message = "Please provide some story text."

    async def generate(
        self, client: GenerationClient, inputs: Mapping[str, Any]
    ) -> list[GenerationResult]:
        chunks = chunk_story_or_raise(inputs["story_text"], int(inputs["page_count"]))
        logger.info(f"Storybook: generating {len(chunks)} page(s)")

        prompts = [build_storybook_prompt(chunk, inputs["style"]) for chunk in chunks]
        pages = await asyncio.gather(
            *(
                client.generate_from_text(
                    prompt,
                    failure_message="Failed to generate storybook page. Check the logs for details.",
                    no_image_message="No storybook page was generated.",
                )
                for prompt in prompts
            )
        )
        return list(pages)

    def export_filenames(self, results: list[GenerationResult]) -> list[str]:
        return [storybook_page_filename(i) for i in range(len(results))]


def make_storybook_controller() -> UseCaseController:
    return UseCaseController(StorybookUseCase())


async def generate_storybook(
    story_text: str,
    style: str,
    page_count: int,
    controller: UseCaseController,
) -> tuple[list[tuple[Image.Image, str]], str, dict, UseCaseController]:
    """Illustrate the story from the UI inputs.

    Args:
        story_text: Free-form story
        style: Illustration style value
        page_count: Requested number of pages
        controller: Session controller for this tab

    Returns:
        Tuple of (gallery_items, status_markdown, download_update, controller)
    """
    try:
        client = get_generation_client()
        await controller.run(
            client, {"story_text": story_text, "style": style, "page_count": page_count}
        )
        gallery = [
            (result.to_pil(), f"Page {i + 1}")
            for i, result in enumerate(controller.state.results())
        ]
        status = format_status(
            controller, f"**{len(gallery)} page(s) generated!** Click *Save pages* to download them."
        )
        return gallery, status, gr.update(value=None, visible=False), controller

    except Exception as e:
        logger.error(f"Error in storybook handler: {e}", exc_info=True)
        return [], f"❌ **Error**\n\n{UNEXPECTED_ERROR_MESSAGE}", gr.update(visible=False), controller

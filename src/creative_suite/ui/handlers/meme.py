"""Meme: generate a text-free background and preview the caption on it."""

import logging
from typing import Any, Mapping

import gradio as gr
from PIL import Image

from creative_suite.core.export import MEME_FILENAME
from creative_suite.core.generation_client import GenerationClient
from creative_suite.core.models import GenerationResult
from creative_suite.core.overlay import render_overlay
from creative_suite.core.prompt_builder import build_meme_prompt

from ..controller import UNEXPECTED_ERROR_MESSAGE, UseCase, UseCaseController
from ..state import get_generation_client
from .common import format_status

logger = logging.getLogger(__name__)


class MemeUseCase(UseCase):
    """Inputs: ``caption``, ``style``."""

    name = "Meme"
    required_fields = ("caption",)
    missing_input_message = "Please provide a caption for the meme."

    async def generate(self, client: GenerationClient, inputs: Mapping[str, Any]) -> GenerationResult:
        return await client.generate_from_text(
            build_meme_prompt(inputs["caption"], inputs["style"]),
            failure_message="Failed to generate meme background. Check the logs for details.",
            no_image_message="No meme background was generated.",
        )

    def export_filenames(self, results: list[GenerationResult]) -> list[str]:
        return [MEME_FILENAME]


def make_meme_controller() -> UseCaseController:
    return UseCaseController(MemeUseCase())


async def generate_meme(
    caption: str, style: str, controller: UseCaseController
) -> tuple[Image.Image | None, str, dict, UseCaseController]:
    """Generate a meme background from the UI inputs.

    Returns:
        Tuple of (preview_with_caption, status_markdown, download_update, controller)
    """
    try:
        client = get_generation_client()
        await controller.run(client, {"caption": caption, "style": style})
        result = controller.result
        preview = None
        if isinstance(result, GenerationResult):
            preview = render_overlay(result.to_pil(), caption, "meme")
        status = format_status(
            controller,
            "**Meme ready!** Caption is overlaid for preview; *Save background* downloads the image without it.",
        )
        return preview, status, gr.update(value=None, visible=False), controller

    except Exception as e:
        logger.error(f"Error in meme handler: {e}", exc_info=True)
        return None, f"❌ **Error**\n\n{UNEXPECTED_ERROR_MESSAGE}", gr.update(visible=False), controller

"""Poster: generate a text-free background and preview the headline on it."""

import logging
from typing import Any, Mapping

import gradio as gr
from PIL import Image

from creative_suite.core.export import POSTER_FILENAME
from creative_suite.core.generation_client import GenerationClient
from creative_suite.core.models import GenerationResult
from creative_suite.core.overlay import render_overlay
from creative_suite.core.prompt_builder import build_poster_prompt

from ..controller import UNEXPECTED_ERROR_MESSAGE, UseCase, UseCaseController
from ..state import get_generation_client
from .common import format_status

logger = logging.getLogger(__name__)


class PosterUseCase(UseCase):
    """Inputs: ``poster_text``, ``style``, ``color_theme``."""

    name = "Poster"
    required_fields = ("poster_text",)
    missing_input_message = "Please provide text for the poster."

    async def generate(self, client: GenerationClient, inputs: Mapping[str, Any]) -> GenerationResult:
        prompt = build_poster_prompt(inputs["poster_text"], inputs["style"], inputs["color_theme"])
        return await client.generate_from_text(
            prompt,
            failure_message="Failed to generate poster. Check the logs for details.",
            no_image_message="No poster was generated.",
        )

    def export_filenames(self, results: list[GenerationResult]) -> list[str]:
        return [POSTER_FILENAME]


def make_poster_controller() -> UseCaseController:
    return UseCaseController(PosterUseCase())


async def generate_poster(
    poster_text: str,
    style: str,
    color_theme: str,
    controller: UseCaseController,
) -> tuple[Image.Image | None, str, dict, UseCaseController]:
    """Generate a poster background from the UI inputs.

    Returns:
        Tuple of (preview_with_text, status_markdown, download_update, controller)
    """
    try:
        client = get_generation_client()
        await controller.run(
            client, {"poster_text": poster_text, "style": style, "color_theme": color_theme}
        )
        result = controller.result
        preview = None
        if isinstance(result, GenerationResult):
            preview = render_overlay(result.to_pil(), poster_text, "poster")
        status = format_status(
            controller,
            "**Poster ready!** Text is overlaid for preview; *Save background* downloads the image without it.",
        )
        return preview, status, gr.update(value=None, visible=False), controller

    except Exception as e:
        logger.error(f"Error in poster handler: {e}", exc_info=True)
        return None, f"❌ **Error**\n\n{UNEXPECTED_ERROR_MESSAGE}", gr.update(visible=False), controller

"""Image editor: upload an image, describe a change, pick a style."""

import logging
from typing import Any, Mapping

import gradio as gr
from PIL import Image

from creative_suite.core.export import EDITED_IMAGE_FILENAME
from creative_suite.core.generation_client import GenerationClient
from creative_suite.core.models import GenerationResult
from creative_suite.core.prompt_builder import build_edit_prompt

from ..controller import UNEXPECTED_ERROR_MESSAGE, UseCase, UseCaseController
from ..state import get_generation_client
from ..validation import load_input_image
from .common import format_status

logger = logging.getLogger(__name__)


class ImageEditUseCase(UseCase):
    """Edit an uploaded image with the multimodal model.

    Inputs: ``image_path``, ``prompt``, ``style``.
    """

    name = "Image Editor"
    required_fields = ("image_path", "prompt")
    missing_input_message = "Please upload an image and provide an edit prompt."

    async def generate(self, client: GenerationClient, inputs: Mapping[str, Any]) -> GenerationResult:
        image = load_input_image(inputs["image_path"])
        prompt = build_edit_prompt(inputs["prompt"], inputs["style"])
        return await client.edit_image(
            image.data,
            image.mime_type,
            prompt,
            failure_message="Failed to edit image. Check the logs for details.",
            no_image_message="No image was generated in the response.",
        )

    def export_filenames(self, results: list[GenerationResult]) -> list[str]:
        return [EDITED_IMAGE_FILENAME]


def make_image_editor_controller() -> UseCaseController:
    return UseCaseController(ImageEditUseCase())


def on_image_upload(
    image_path: str | None, controller: UseCaseController
) -> tuple[None, str, dict, UseCaseController]:
    """Forget the previous edit when a new source image is chosen.

    Returns:
        Tuple of (edited_image, status, download_update, controller)
    """
    controller.clear()
    return None, "", gr.update(value=None, visible=False), controller


async def generate_edit(
    image_path: str | None,
    prompt: str,
    style: str,
    controller: UseCaseController,
) -> tuple[Image.Image | None, str, dict, UseCaseController]:
    """Edit the uploaded image from the UI inputs.

    Args:
        image_path: Uploaded file path (``gr.Image(type="filepath")``)
        prompt: Edit instruction
        style: Style value
        controller: Session controller for this tab

    Returns:
        Tuple of (edited_image, status_markdown, download_update, controller)
    """
    try:
        client = get_generation_client()
        await controller.run(
            client, {"image_path": image_path, "prompt": prompt, "style": style}
        )
        result = controller.result
        image = result.to_pil() if isinstance(result, GenerationResult) else None
        status = format_status(controller, "**Image edited!** Click *Save image* to download it.")
        return image, status, gr.update(value=None, visible=False), controller

    except Exception as e:
        logger.error(f"Error in image editor handler: {e}", exc_info=True)
        return None, f"❌ **Error**\n\n{UNEXPECTED_ERROR_MESSAGE}", gr.update(visible=False), controller

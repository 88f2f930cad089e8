"""Imagen text-to-image adapter.

Sends a prompt to an Imagen model and asks for exactly one image in a fixed
encoded format (PNG by default). Used by the storybook, poster and meme tools.

Model Parameters
----------------
- **prompt**: assembled instruction from the prompt builder
- **number_of_images**: always 1
- **output_mime_type**: ``config.output_mime_type``
"""

import logging
from typing import Any

from google.genai import types

from creative_suite.core.errors import NoImageProducedError
from creative_suite.core.model_adapters import ModelAdapterBase, model_registry
from creative_suite.core.models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


class ImagenTextToImageAdapter(ModelAdapterBase):
    """Text-to-image generation through ``generate_images``."""

    name = "Imagen"
    description = "Text-to-image generation with Imagen"
    model_type = "text-to-image"
    version = "1.0.0"
    failure_message = "Failed to generate image. Check the logs for details."

    @property
    def model_id(self) -> str:
        return self.config.image_model

    async def _call(self, request: GenerationRequest) -> Any:
        generation_config = types.GenerateImagesConfig(
            number_of_images=request.options.number_of_images,
            output_mime_type=request.options.output_mime_type,
        )
        return await self.client.aio.models.generate_images(
            model=self.model_id,
            prompt=request.prompt_text,
            config=generation_config,
        )

    def _extract(self, response: Any) -> GenerationResult:
        generated = getattr(response, "generated_images", None) or []
        for generated_image in generated:
            image = getattr(generated_image, "image", None)
            data = getattr(image, "image_bytes", None) if image is not None else None
            if data:
                mime_type = getattr(image, "mime_type", None) or self.config.output_mime_type
                return GenerationResult.from_bytes(data, mime_type)

        # Filtered prompts come back with an empty list, not an error.
        logger.warning(f"{self.name}: response held {len(generated)} image(s), none usable")
        raise NoImageProducedError()


model_registry.register(ImagenTextToImageAdapter)

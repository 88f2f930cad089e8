"""Gemini image-edit adapter.

Sends an uploaded image plus an instruction to a multimodal Gemini model and
asks for both IMAGE and TEXT response modalities. The reply is an ordered list
of content parts. The first part with inline image bytes is the result, and
any text parts (the model's commentary) are skipped.

Model Parameters
----------------
- **contents**: ``[Part.from_bytes(image, mime_type), prompt]``
- **response_modalities**: ``["IMAGE", "TEXT"]``

Usage Example
-------------
    >>> adapter = GeminiImageEditAdapter(client, config)
    >>> request = GenerationRequest.edit(image_bytes, "image/jpeg", prompt)
    >>> result = await adapter.generate(request)
"""

import logging
from typing import Any

from google.genai import types

from creative_suite.core.model_adapters import ModelAdapterBase, model_registry
from creative_suite.core.models import GenerationRequest, GenerationResult
from creative_suite.core.response_parts import find_first_image, parts_from_response

logger = logging.getLogger(__name__)


class GeminiImageEditAdapter(ModelAdapterBase):
    """Instruction-based image editing through ``generate_content``."""

    name = "Gemini-Image-Edit"
    description = "Instruction-based image editing with a multimodal Gemini model"
    model_type = "image-edit"
    version = "1.0.0"
    failure_message = "Failed to edit image. Check the logs for details."

    @property
    def model_id(self) -> str:
        return self.config.edit_model

    async def _call(self, request: GenerationRequest) -> Any:
        image = request.input_image
        contents = [
            types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
            request.prompt_text,
        ]
        generation_config = types.GenerateContentConfig(
            response_modalities=list(request.options.response_modalities),
        )
        return await self.client.aio.models.generate_content(
            model=self.model_id,
            contents=contents,
            config=generation_config,
        )

    def _extract(self, response: Any) -> GenerationResult:
        parts = parts_from_response(response)
        logger.debug(f"Edit response has {len(parts)} part(s)")
        return find_first_image(parts)


model_registry.register(GeminiImageEditAdapter)

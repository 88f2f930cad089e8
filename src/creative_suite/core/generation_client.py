"""Process-wide client for the remote image service.

:class:`GenerationClient` is built once at startup around a single
``google.genai.Client`` and shared by every session. It exposes the two
operations the use-case handlers need:

- :meth:`GenerationClient.edit_image`: image + instruction, multimodal model
- :meth:`GenerationClient.generate_from_text`: prompt only, text-to-image model

Each call builds a fresh :class:`GenerationRequest`, hands it to the adapter
registered for its model type and returns one :class:`GenerationResult`.
Both are single-shot, with no retry, no timeout override and no caching.

The underlying SDK client holds no per-request state, so concurrent calls
from the storybook fan-out are safe.
"""

import logging
from typing import Any

from google import genai
from pydantic import ValidationError

from . import adapters  # noqa: F401  (registers the built-in adapters)
from .config import CreativeSuiteConfig
from .errors import GenerationFailedError, MissingCredentialError
from .model_adapters import ModelAdapterBase, model_registry
from .models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


class GenerationClient:
    """Facade over the edit and text-to-image adapters.

    Attributes
    ----------
    client : Any
        Shared ``google.genai.Client`` (or a test double exposing ``aio.models``)
    config : CreativeSuiteConfig
        Configuration with model identifiers and output format
    edit_adapter : ModelAdapterBase
        Adapter serving ``image-edit`` requests
    text_to_image_adapter : ModelAdapterBase
        Adapter serving ``text-to-image`` requests
    """

    def __init__(self, client: Any, config: CreativeSuiteConfig) -> None:
        self.client = client
        self.config = config
        self.edit_adapter: ModelAdapterBase = model_registry.instantiate(
            model_registry.name_for_type("image-edit"), client, config
        )
        self.text_to_image_adapter: ModelAdapterBase = model_registry.instantiate(
            model_registry.name_for_type("text-to-image"), client, config
        )

    async def edit_image(
        self,
        image_bytes: bytes,
        mime_type: str,
        prompt_text: str,
        *,
        failure_message: str | None = None,
        no_image_message: str | None = None,
    ) -> GenerationResult:
        """Edit an image according to an assembled prompt.

        Args:
            image_bytes: Raw bytes of the source image
            mime_type: MIME type of ``image_bytes``
            prompt_text: Prompt from :func:`build_edit_prompt`
            failure_message: User-facing text for transport failures
            no_image_message: User-facing text when no image comes back

        Returns:
            The first image part of the response

        Raises:
            NoImageProducedError: No response part carried image data
            GenerationFailedError: Transport, service or response fault
        """
        try:
            request = GenerationRequest.edit(image_bytes, mime_type, prompt_text)
        except ValidationError as e:
            logger.error(f"Rejected edit request before sending: {e}")
            raise GenerationFailedError(failure_message or self.edit_adapter.failure_message) from e

        return await self.edit_adapter.generate(
            request, failure_message=failure_message, no_image_message=no_image_message
        )

    async def generate_from_text(
        self,
        prompt_text: str,
        *,
        failure_message: str | None = None,
        no_image_message: str | None = None,
    ) -> GenerationResult:
        """Generate exactly one image from an assembled prompt.

        Raises:
            NoImageProducedError: The generated image list was absent or empty
            GenerationFailedError: Transport or service fault
        """
        try:
            request = GenerationRequest.text_to_image(prompt_text, self.config.output_mime_type)
        except ValidationError as e:
            logger.error(f"Rejected text-to-image request before sending: {e}")
            raise GenerationFailedError(
                failure_message or self.text_to_image_adapter.failure_message
            ) from e

        return await self.text_to_image_adapter.generate(
            request, failure_message=failure_message, no_image_message=no_image_message
        )

    def describe(self) -> list[dict[str, Any]]:
        """Model info for both adapters, for startup logging."""
        return [
            self.edit_adapter.get_model_info(),
            self.text_to_image_adapter.get_model_info(),
        ]


def create_generation_client(config: CreativeSuiteConfig) -> GenerationClient:
    """Build the process-wide client from the configured API key.

    Raises:
        MissingCredentialError: If no API key is configured. Callers at
            startup must let this propagate.
    """
    if not config.has_api_key:
        logger.critical("No API key configured; cannot start")
        raise MissingCredentialError()

    sdk_client = genai.Client(api_key=config.api_key.get_secret_value())
    logger.info("Google GenAI client created")
    return GenerationClient(sdk_client, config)

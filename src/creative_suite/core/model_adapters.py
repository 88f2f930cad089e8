"""Base classes and registry for remote model adapters.

Each remote model (Gemini image editing, Imagen text-to-image) has an adapter
that turns a :class:`GenerationRequest` into exactly one SDK call and turns
the SDK response into a :class:`GenerationResult`.

Model Types
-----------
- **image-edit**: input image + instruction, multimodal response parts
- **text-to-image**: prompt only, list of generated images

Error Contract
--------------
Adapters never leak SDK exceptions. Anything raised by the call itself is
logged and re-raised as :class:`GenerationFailedError` (chained). A response
that arrives but holds no image raises :class:`NoImageProducedError`. There
is no retry: one request, one attempt.

Usage Example
-------------
    >>> from google import genai
    >>> from creative_suite.core.model_adapters import model_registry
    >>> from creative_suite.core.config import config
    >>>
    >>> client = genai.Client(api_key="...")
    >>> adapter = model_registry.instantiate("Imagen", client, config)
    >>> result = await adapter.generate(GenerationRequest.text_to_image("a red fox"))
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Literal

from .config import CreativeSuiteConfig
from .errors import CreativeSuiteError, GenerationFailedError, NoImageProducedError
from .models import GenerationKind, GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

ModelType = Literal["text-to-image", "image-edit"]

_KIND_TO_MODEL_TYPE: dict[GenerationKind, ModelType] = {
    GenerationKind.EDIT: "image-edit",
    GenerationKind.TEXT_TO_IMAGE: "text-to-image",
}


class ModelAdapterBase(ABC):
    """Abstract base class for remote model adapters.

    Subclasses implement :meth:`_call` (one SDK request) and
    :meth:`_extract` (response to result). :meth:`generate` wraps both with
    logging and the error contract described in the module docstring.

    Attributes
    ----------
    name : str
        Registry name of the adapter
    description : str
        Brief description of the model's capabilities
    model_type : str
        Type of generation this adapter supports
    client : Any
        Shared ``google.genai.Client`` handle
    config : CreativeSuiteConfig
        Configuration object containing model settings
    failure_message : str
        User-facing message for GenerationFailedError
    """

    name: str = "Base Model Adapter"
    description: str = "Base class for model adapters"
    model_type: ModelType = "text-to-image"
    version: str = "0.1.0"
    failure_message: str = GenerationFailedError.default_message

    def __init__(self, client: Any, config: CreativeSuiteConfig) -> None:
        self.client = client
        self.config = config
        logger.info(f"Initialized {self.name} adapter ({self.model_id})")

    @property
    @abstractmethod
    def model_id(self) -> str:
        """Remote model identifier sent with every request."""

    @abstractmethod
    async def _call(self, request: GenerationRequest) -> Any:
        """Issue exactly one SDK request and return the raw response."""

    @abstractmethod
    def _extract(self, response: Any) -> GenerationResult:
        """Pull the first usable image out of ``response``.

        Raises
        ------
        NoImageProducedError
            If the response holds no image
        GenerationFailedError
            If the response is malformed
        """

    async def generate(
        self,
        request: GenerationRequest,
        *,
        failure_message: str | None = None,
        no_image_message: str | None = None,
    ) -> GenerationResult:
        """Run one request through the remote model.

        Args:
            request: Request whose kind matches this adapter's model type
            failure_message: Override for the user-facing failure text
            no_image_message: Override for the user-facing "no image" text

        Returns
        -------
        GenerationResult
            The first image in the response

        Raises
        ------
        ValueError
            If the request kind does not match this adapter
        NoImageProducedError
            If the service answered without an image
        GenerationFailedError
            On any transport or service fault
        """
        if _KIND_TO_MODEL_TYPE[request.kind] != self.model_type:
            raise ValueError(
                f"{self.name} handles {self.model_type} requests, got {request.kind.value}"
            )

        message = failure_message or self.failure_message
        logger.info(f"{self.name}: sending request to {self.model_id}")
        start = time.perf_counter()

        try:
            response = await self._call(request)
        except Exception as e:
            logger.error(f"{self.name}: request to {self.model_id} failed: {e}", exc_info=True)
            raise GenerationFailedError(message) from e

        try:
            result = self._extract(response)
        except NoImageProducedError as e:
            logger.error(f"{self.name}: {e}")
            if no_image_message:
                raise NoImageProducedError(no_image_message) from e
            raise
        except CreativeSuiteError as e:
            logger.error(f"{self.name}: {e}")
            raise
        except Exception as e:
            logger.error(f"{self.name}: could not read response: {e}", exc_info=True)
            raise GenerationFailedError(message) from e

        elapsed = time.perf_counter() - start
        logger.info(f"{self.name}: received {result.mime_type} image in {elapsed:.1f}s")
        return result

    def get_model_info(self) -> dict[str, Any]:
        """Get information about this model adapter."""
        return {
            "name": self.name,
            "description": self.description,
            "model_type": self.model_type,
            "model_id": self.model_id,
            "version": self.version,
        }


class ModelRegistry:
    """Registry for managing available model adapters.

    Adapters register themselves at import time (see ``core.adapters``).
    The generation client asks the registry for the adapter serving each
    model type.
    """

    def __init__(self) -> None:
        self._adapters: dict[str, type[ModelAdapterBase]] = {}

    def register(self, adapter_class: type[ModelAdapterBase]) -> None:
        """Register a model adapter class, replacing any with the same name."""
        adapter_name = adapter_class.name

        if adapter_name in self._adapters:
            logger.warning(f"Model adapter '{adapter_name}' is already registered, overwriting")

        self._adapters[adapter_name] = adapter_class
        logger.debug(f"Registered model adapter: {adapter_name}")

    def instantiate(
        self, adapter_name: str, client: Any, config: CreativeSuiteConfig
    ) -> ModelAdapterBase:
        """Create an instance of a registered model adapter.

        Raises
        ------
        KeyError
            If adapter_name is not registered
        """
        adapter_class = self.get_adapter_class(adapter_name)
        if adapter_class is None:
            available = ", ".join(self.list_available())
            raise KeyError(
                f"Model adapter '{adapter_name}' not found. Available adapters: {available}"
            )

        return adapter_class(client=client, config=config)

    def get_adapter_class(self, adapter_name: str) -> type[ModelAdapterBase] | None:
        return self._adapters.get(adapter_name)

    def list_available(self) -> list[str]:
        return list(self._adapters.keys())

    def name_for_type(self, model_type: ModelType) -> str:
        """Return the first registered adapter name serving ``model_type``.

        Raises
        ------
        KeyError
            If no adapter supports the model type
        """
        for name, adapter_class in self._adapters.items():
            if adapter_class.model_type == model_type:
                return name
        raise KeyError(f"No model adapter registered for '{model_type}'")


# Global model registry instance
model_registry = ModelRegistry()

"""Unit tests for the model adapters, the registry and the generation client."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types
from pydantic import ValidationError

from creative_suite.core.adapters import GeminiImageEditAdapter, ImagenTextToImageAdapter
from creative_suite.core.errors import GenerationFailedError, NoImageProducedError
from creative_suite.core.generation_client import GenerationClient
from creative_suite.core.model_adapters import ModelAdapterBase, ModelRegistry, model_registry
from creative_suite.core.models import GenerationRequest, GenerationResult


class TestModelRegistry:
    """Tests for ModelRegistry class."""

    def test_builtin_adapters_registered(self):
        available = model_registry.list_available()

        assert "Gemini-Image-Edit" in available
        assert "Imagen" in available

    def test_name_for_type(self):
        assert model_registry.name_for_type("image-edit") == "Gemini-Image-Edit"
        assert model_registry.name_for_type("text-to-image") == "Imagen"

    def test_name_for_unknown_type(self):
        with pytest.raises(KeyError):
            ModelRegistry().name_for_type("image-edit")

    def test_instantiate_unknown(self, mock_sdk_client, test_config):
        with pytest.raises(KeyError, match="not found"):
            model_registry.instantiate("DALL-E", mock_sdk_client, test_config)

    def test_register_and_lookup(self):
        registry = ModelRegistry()
        registry.register(ImagenTextToImageAdapter)

        assert registry.get_adapter_class("Imagen") is ImagenTextToImageAdapter
        assert registry.get_adapter_class("missing") is None

    def test_base_is_abstract(self, mock_sdk_client, test_config):
        with pytest.raises(TypeError):
            ModelAdapterBase(mock_sdk_client, test_config)


class TestGeminiImageEditAdapter:
    """Tests for the image-edit adapter."""

    def test_sends_image_then_prompt(self, mock_sdk_client, test_config, png_bytes):
        adapter = GeminiImageEditAdapter(mock_sdk_client, test_config)
        request = GenerationRequest.edit(png_bytes, "image/png", "add a hat")

        result = asyncio.run(adapter.generate(request))

        assert result.image_bytes == png_bytes
        call = mock_sdk_client.aio.models.generate_content.await_args
        assert call.kwargs["model"] == test_config.edit_model
        image, prompt = call.kwargs["contents"]
        assert image.inline_data.data == png_bytes
        assert image.inline_data.mime_type == "image/png"
        assert prompt == "add a hat"
        assert call.kwargs["config"].response_modalities == ["IMAGE", "TEXT"]

    def test_text_only_response(self, mock_sdk_client, test_config, png_bytes, genai_responses):
        mock_sdk_client.aio.models.generate_content.return_value = genai_responses.content(
            genai_responses.text_part("I cannot do that")
        )
        adapter = GeminiImageEditAdapter(mock_sdk_client, test_config)

        with pytest.raises(NoImageProducedError, match="No image was generated"):
            asyncio.run(adapter.generate(GenerationRequest.edit(png_bytes, "image/png", "x")))

    def test_transport_error_is_wrapped(self, mock_sdk_client, test_config, png_bytes):
        boom = ConnectionError("socket closed")
        mock_sdk_client.aio.models.generate_content.side_effect = boom
        adapter = GeminiImageEditAdapter(mock_sdk_client, test_config)

        with pytest.raises(GenerationFailedError, match="Failed to edit image") as exc_info:
            asyncio.run(adapter.generate(GenerationRequest.edit(png_bytes, "image/png", "x")))

        assert exc_info.value.__cause__ is boom

    def test_rejects_text_to_image_request(self, mock_sdk_client, test_config):
        adapter = GeminiImageEditAdapter(mock_sdk_client, test_config)

        with pytest.raises(ValueError):
            asyncio.run(adapter.generate(GenerationRequest.text_to_image("a fox")))

        mock_sdk_client.aio.models.generate_content.assert_not_called()

    def test_model_info(self, mock_sdk_client, test_config):
        info = GeminiImageEditAdapter(mock_sdk_client, test_config).get_model_info()

        assert info["model_type"] == "image-edit"
        assert info["model_id"] == test_config.edit_model


class TestImagenTextToImageAdapter:
    """Tests for the text-to-image adapter."""

    def test_requests_one_image(self, mock_sdk_client, test_config, png_bytes):
        adapter = ImagenTextToImageAdapter(mock_sdk_client, test_config)

        result = asyncio.run(adapter.generate(GenerationRequest.text_to_image("a fox", "image/png")))

        assert result == GenerationResult.from_bytes(png_bytes, "image/png")
        call = mock_sdk_client.aio.models.generate_images.await_args
        assert call.kwargs["model"] == test_config.image_model
        assert call.kwargs["prompt"] == "a fox"
        assert call.kwargs["config"].number_of_images == 1
        assert call.kwargs["config"].output_mime_type == "image/png"

    def test_empty_image_list(self, mock_sdk_client, test_config, genai_responses):
        mock_sdk_client.aio.models.generate_images.return_value = genai_responses.images()
        adapter = ImagenTextToImageAdapter(mock_sdk_client, test_config)

        with pytest.raises(NoImageProducedError):
            asyncio.run(adapter.generate(GenerationRequest.text_to_image("a fox")))

    def test_missing_image_list(self, mock_sdk_client, test_config):
        mock_sdk_client.aio.models.generate_images.return_value = types.GenerateImagesResponse()
        adapter = ImagenTextToImageAdapter(mock_sdk_client, test_config)

        with pytest.raises(NoImageProducedError, match="No poster"):
            asyncio.run(
                adapter.generate(
                    GenerationRequest.text_to_image("a fox"), no_image_message="No poster was generated."
                )
            )

    def test_failure_message_override(self, mock_sdk_client, test_config):
        mock_sdk_client.aio.models.generate_images.side_effect = RuntimeError("quota")
        adapter = ImagenTextToImageAdapter(mock_sdk_client, test_config)

        with pytest.raises(GenerationFailedError, match="Failed to generate meme"):
            asyncio.run(
                adapter.generate(
                    GenerationRequest.text_to_image("a fox"),
                    failure_message="Failed to generate meme background.",
                )
            )


class TestGenerationClient:
    """Tests for GenerationClient facade."""

    def test_adapters_resolved_by_type(self, generation_client):
        assert isinstance(generation_client.edit_adapter, GeminiImageEditAdapter)
        assert isinstance(generation_client.text_to_image_adapter, ImagenTextToImageAdapter)

    def test_edit_image(self, generation_client, mock_sdk_client, png_bytes):
        result = asyncio.run(generation_client.edit_image(png_bytes, "image/png", "make it blue"))

        assert result.mime_type == "image/png"
        mock_sdk_client.aio.models.generate_content.assert_awaited_once()
        mock_sdk_client.aio.models.generate_images.assert_not_called()

    def test_generate_from_text_uses_configured_format(self, mock_sdk_client, test_config):
        jpeg_config = test_config.model_copy(update={"output_mime_type": "image/jpeg"})
        client = GenerationClient(mock_sdk_client, jpeg_config)
        asyncio.run(client.generate_from_text("a fox"))

        config_arg = mock_sdk_client.aio.models.generate_images.await_args.kwargs["config"]
        assert config_arg.output_mime_type == "image/jpeg"

    def test_concurrent_calls(self, generation_client, mock_sdk_client):
        async def fan_out():
            return await asyncio.gather(
                *(generation_client.generate_from_text(f"page {i}") for i in range(3))
            )

        results = asyncio.run(fan_out())

        assert len(results) == 3
        assert mock_sdk_client.aio.models.generate_images.await_count == 3

    def test_describe(self, generation_client):
        names = [info["name"] for info in generation_client.describe()]
        assert names == ["Gemini-Image-Edit", "Imagen"]

    def test_invalid_edit_request_is_a_generation_failure(
        self, generation_client, mock_sdk_client, png_bytes
    ):
        with pytest.raises(GenerationFailedError, match="Failed to edit image") as exc_info:
            asyncio.run(generation_client.edit_image(png_bytes, "application/octet-stream", "x"))

        assert isinstance(exc_info.value.__cause__, ValidationError)
        mock_sdk_client.aio.models.generate_content.assert_not_called()

    def test_empty_image_bytes(self, generation_client, mock_sdk_client):
        with pytest.raises(GenerationFailedError, match="Could not edit"):
            asyncio.run(
                generation_client.edit_image(b"", "image/png", "x", failure_message="Could not edit.")
            )

        mock_sdk_client.aio.models.generate_content.assert_not_called()

    def test_empty_prompt_is_a_generation_failure(self, generation_client, mock_sdk_client):
        with pytest.raises(GenerationFailedError, match="Failed to generate image"):
            asyncio.run(generation_client.generate_from_text(""))

        mock_sdk_client.aio.models.generate_images.assert_not_called()

    def test_no_retry_on_failure(self, test_config, png_bytes):
        sdk = MagicMock()
        sdk.aio.models.generate_content = AsyncMock(side_effect=TimeoutError())
        client = GenerationClient(sdk, test_config)
        with pytest.raises(GenerationFailedError):
            asyncio.run(client.edit_image(png_bytes, "image/png", "x"))

        assert sdk.aio.models.generate_content.await_count == 1

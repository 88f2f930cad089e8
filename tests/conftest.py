"""Shared pytest fixtures for Creative Suite tests."""

import io
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types
from PIL import Image

from creative_suite.core.config import CreativeSuiteConfig
from creative_suite.core.generation_client import GenerationClient
from creative_suite.ui.state import set_generation_client


def make_png_bytes(color: str = "red", size: tuple[int, int] = (64, 48)) -> bytes:
    """Encode a solid-colour PNG."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_content_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Build a generate_content response whose first candidate holds ``parts``."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


def make_images_response(*images: bytes) -> types.GenerateImagesResponse:
    """Build a generate_images response holding ``images``."""
    return types.GenerateImagesResponse(
        generated_images=[
            types.GeneratedImage(image=types.Image(image_bytes=data, mime_type="image/png"))
            for data in images
        ]
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> CreativeSuiteConfig:
    """Configuration with a dummy API key and a temporary outputs directory."""
    return CreativeSuiteConfig(
        _env_file=None,
        api_key="test-key",
        outputs_dir=str(temp_dir / "outputs"),
    )


@pytest.fixture
def genai_responses() -> SimpleNamespace:
    """Builders for SDK response objects, for tests that shape their own replies."""
    return SimpleNamespace(
        content=make_content_response,
        image_part=image_part,
        text_part=text_part,
        images=make_images_response,
        png=make_png_bytes,
    )


@pytest.fixture
def png_bytes() -> bytes:
    return make_png_bytes()


@pytest.fixture
def png_file(temp_dir: Path, png_bytes: bytes) -> Path:
    """A PNG file on disk, as Gradio hands over an upload."""
    path = temp_dir / "upload.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def mock_sdk_client(png_bytes: bytes) -> MagicMock:
    """Stand-in for ``google.genai.Client`` whose async calls succeed.

    ``aio.models.generate_content`` returns a text part followed by an image
    part; ``aio.models.generate_images`` returns one image.
    """
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=make_content_response(text_part("Here you go"), image_part(png_bytes))
    )
    client.aio.models.generate_images = AsyncMock(return_value=make_images_response(png_bytes))
    return client


@pytest.fixture
def generation_client(mock_sdk_client: MagicMock, test_config: CreativeSuiteConfig) -> GenerationClient:
    return GenerationClient(mock_sdk_client, test_config)


@pytest.fixture
def installed_client(
    generation_client: GenerationClient, test_config: CreativeSuiteConfig, monkeypatch
) -> Generator[GenerationClient, None, None]:
    """Install ``generation_client`` as the process-wide client for handler tests."""
    monkeypatch.setattr("creative_suite.ui.handlers.common.config", test_config)
    set_generation_client(generation_client)
    try:
        yield generation_client
    finally:
        set_generation_client(None)

"""Validation utilities for Creative Suite UI inputs."""

import logging
from pathlib import Path
from typing import Any, Mapping

from PIL import Image, UnidentifiedImageError

from creative_suite.core.errors import MissingInputError
from creative_suite.core.models import InputImage

logger = logging.getLogger(__name__)

# Pillow reports multi-picture camera JPEGs as MPO; the payload is still JPEG.
_FORMAT_MIME_OVERRIDES = {"MPO": "image/jpeg"}


def is_blank(value: Any) -> bool:
    """True for ``None``, empty/whitespace strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, bytes)):
        return len(value) == 0
    return False


def require_fields(inputs: Mapping[str, Any], required: tuple[str, ...], message: str) -> None:
    """Check that every required field has a value.

    Args:
        inputs: Field name to value, as collected from the UI
        required: Names that must be non-blank
        message: User-facing message raised on failure

    Raises:
        MissingInputError: If any required field is blank
    """
    missing = [name for name in required if is_blank(inputs.get(name))]
    if missing:
        logger.warning(f"Missing required input(s): {', '.join(missing)}")
        raise MissingInputError(message)


def load_input_image(path: str | Path) -> InputImage:
    """Read an uploaded image file into bytes plus MIME type.

    The MIME type is detected from the image content rather than the file
    extension.

    Args:
        path: Path of the uploaded file (as given by ``gr.Image(type="filepath")``)

    Returns:
        InputImage ready for an edit request

    Raises:
        MissingInputError: If the file is missing or is not a readable image
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise MissingInputError(f"Uploaded file not found: {file_path.name}")

    try:
        with Image.open(file_path) as image:
            image_format = image.format or ""
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not read uploaded image {file_path}: {e}")
        raise MissingInputError("The uploaded file is not a supported image.") from e

    mime_type = _FORMAT_MIME_OVERRIDES.get(image_format) or Image.MIME.get(image_format, "image/png")
    data = file_path.read_bytes()
    logger.debug(f"Loaded input image {file_path.name} ({mime_type}, {len(data)} bytes)")
    return InputImage(data=data, mime_type=mime_type)

"""Typed view over the content parts of a multimodal response.

The SDK returns parts that may carry inline image data, text, or something
else entirely (function calls, thoughts, ...). They are normalised into a
small union so that "find the first image" is an explicit operation with an
explicit failure:

    parts = parts_from_response(response)
    result = find_first_image(parts)  # raises NoImageProducedError

``parts_from_response`` raises :class:`GenerationFailedError` when the
response has no candidate content at all (blocked or malformed).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Union

from .errors import GenerationFailedError, NoImageProducedError
from .models import GenerationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImagePart:
    """A part carrying inline image bytes."""

    data: bytes
    mime_type: str


@dataclass(frozen=True)
class TextPart:
    """A part carrying text (usually the model's commentary)."""

    text: str


@dataclass(frozen=True)
class OtherPart:
    """Any part that is neither image nor text."""

    raw: Any = None


ResponsePart = Union[ImagePart, TextPart, OtherPart]


def classify_part(part: Any) -> ResponsePart:
    """Map one SDK ``Part`` onto the union.

    Inline data only counts as an image when it has bytes and an ``image/*``
    MIME type (a missing MIME type is accepted and treated as PNG).
    """
    inline_data = getattr(part, "inline_data", None)
    if inline_data is not None and getattr(inline_data, "data", None):
        mime_type = getattr(inline_data, "mime_type", None) or "image/png"
        if mime_type.startswith("image/"):
            return ImagePart(data=inline_data.data, mime_type=mime_type)

    text = getattr(part, "text", None)
    if text:
        return TextPart(text=text)

    return OtherPart(raw=part)


def parts_from_response(response: Any) -> list[ResponsePart]:
    """Flatten the first candidate of a ``GenerateContentResponse``.

    Raises:
        GenerationFailedError: If the response has no candidate content.
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise GenerationFailedError("The image service returned an empty response.")

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if parts is None:
        finish_reason = getattr(candidates[0], "finish_reason", None)
        logger.warning(f"Candidate has no content (finish_reason={finish_reason})")
        raise GenerationFailedError("The image service returned a response without content.")

    return [classify_part(part) for part in parts]


def find_first_image(parts: Iterable[ResponsePart]) -> GenerationResult:
    """Return the first :class:`ImagePart` as a result.

    Raises:
        NoImageProducedError: If no part carries image data.
    """
    for part in parts:
        if isinstance(part, ImagePart):
            return GenerationResult.from_bytes(part.data, part.mime_type)
        if isinstance(part, TextPart):
            logger.debug(f"Skipping text part: {part.text[:80]!r}")
    raise NoImageProducedError()

"""Pydantic models for generation requests and results.

These models describe what travels between the use-case handlers, the
generation client and the model adapters. They are built fresh for every
user action and never cached.

Models
------
GenerationKind
    ``edit`` (image + instruction) or ``text-to-image`` (prompt only).
InputImage
    Raw bytes and MIME type of an image to be edited.
GenerationOptions
    Image count, encoded output format and response modalities.
GenerationRequest
    One outbound call. ``input_image`` is present exactly when the kind is
    ``edit``.
GenerationResult
    One image, base64-encoded, with its MIME type.
"""

from __future__ import annotations

import base64
import io
from enum import Enum

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, model_validator


class GenerationKind(str, Enum):
    """Kind of remote call a request maps to."""

    EDIT = "edit"
    TEXT_TO_IMAGE = "text-to-image"


class InputImage(BaseModel):
    """Source image for an edit request.

    Attributes:
        data: Raw image bytes as read from the upload.
        mime_type: MIME type of ``data`` (e.g. ``"image/jpeg"``).
    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., min_length=1)
    mime_type: str = Field(..., pattern=r"^image/[\w.+-]+$")


class GenerationOptions(BaseModel):
    """Options sent alongside the prompt."""

    model_config = ConfigDict(frozen=True)

    number_of_images: int = Field(default=1, ge=1, le=1)
    output_mime_type: str = Field(default="image/png")
    response_modalities: tuple[str, ...] = Field(default=())


class GenerationRequest(BaseModel):
    """A single request to the image service.

    Attributes:
        kind: Edit or text-to-image.
        prompt_text: Fully assembled instruction from the prompt builder.
        input_image: Source image. Required for ``EDIT``, forbidden otherwise.
        options: Image count, output format and response modalities.
    """

    model_config = ConfigDict(frozen=True)

    kind: GenerationKind
    prompt_text: str = Field(..., min_length=1)
    input_image: InputImage | None = None
    options: GenerationOptions = Field(default_factory=GenerationOptions)

    @model_validator(mode="after")
    def _check_input_image(self) -> GenerationRequest:
        if self.kind is GenerationKind.EDIT and self.input_image is None:
            raise ValueError("Edit requests require an input image")
        if self.kind is not GenerationKind.EDIT and self.input_image is not None:
            raise ValueError("Only edit requests may carry an input image")
        return self

    @classmethod
    def edit(cls, image_bytes: bytes, mime_type: str, prompt_text: str) -> GenerationRequest:
        """Build an edit request asking for image and text modalities."""
        return cls(
            kind=GenerationKind.EDIT,
            prompt_text=prompt_text,
            input_image=InputImage(data=image_bytes, mime_type=mime_type),
            options=GenerationOptions(response_modalities=("IMAGE", "TEXT")),
        )

    @classmethod
    def text_to_image(cls, prompt_text: str, output_mime_type: str = "image/png") -> GenerationRequest:
        """Build a text-to-image request for exactly one image."""
        return cls(
            kind=GenerationKind.TEXT_TO_IMAGE,
            prompt_text=prompt_text,
            options=GenerationOptions(number_of_images=1, output_mime_type=output_mime_type),
        )


class GenerationResult(BaseModel):
    """One generated image.

    Attributes:
        image_base64: Base64-encoded image payload.
        mime_type: MIME type of the decoded payload.
    """

    model_config = ConfigDict(frozen=True)

    image_base64: str = Field(..., min_length=1)
    mime_type: str = Field(default="image/png")

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str | None = None) -> GenerationResult:
        """Wrap raw image bytes returned by the SDK."""
        return cls(
            image_base64=base64.b64encode(data).decode("ascii"),
            mime_type=mime_type or "image/png",
        )

    @property
    def image_bytes(self) -> bytes:
        return base64.b64decode(self.image_base64)

    def to_pil(self) -> Image.Image:
        """Decode the payload into a PIL image."""
        image = Image.open(io.BytesIO(self.image_bytes))
        image.load()
        return image

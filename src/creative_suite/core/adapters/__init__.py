"""Remote model adapters. Importing this package registers them."""

from .gemini_image_edit import GeminiImageEditAdapter
from .imagen_text_to_image import ImagenTextToImageAdapter

__all__ = [
    "GeminiImageEditAdapter",
    "ImagenTextToImageAdapter",
]

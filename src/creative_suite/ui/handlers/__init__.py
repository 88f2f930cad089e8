"""UI event handlers, one module per creative tool.

- image_editor: edit an uploaded image
- storybook: illustrate a story page by page
- poster: poster background with headline preview
- meme: meme background with caption preview
- common: status formatting, loading toggles and export
"""

from .common import export_handler, finish_loading, format_status, start_loading
from .image_editor import (
    ImageEditUseCase,
    generate_edit,
    make_image_editor_controller,
    on_image_upload,
)
from .meme import MemeUseCase, generate_meme, make_meme_controller
from .poster import PosterUseCase, generate_poster, make_poster_controller
from .storybook import StorybookUseCase, generate_storybook, make_storybook_controller

__all__ = [
    # Shared
    "export_handler",
    "finish_loading",
    "format_status",
    "start_loading",
    # Image editor
    "ImageEditUseCase",
    "generate_edit",
    "make_image_editor_controller",
    "on_image_upload",
    # Storybook
    "StorybookUseCase",
    "generate_storybook",
    "make_storybook_controller",
    # Poster
    "PosterUseCase",
    "generate_poster",
    "make_poster_controller",
    # Meme
    "MemeUseCase",
    "generate_meme",
    "make_meme_controller",
]

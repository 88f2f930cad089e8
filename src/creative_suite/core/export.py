"""Write generated images to disk so the browser can download them.

Exports go into a fresh subdirectory of ``outputs_dir`` per export so the
fixed file names (``edited-image.png``, ``storybook-page-1.png``, ...)
never collide between sessions or repeated clicks.
"""

import logging
import uuid
from datetime import datetime
from pathlib import Path

from .models import GenerationResult

logger = logging.getLogger(__name__)

EDITED_IMAGE_FILENAME = "edited-image.png"
POSTER_FILENAME = "poster-background.png"
MEME_FILENAME = "meme-background.png"


def storybook_page_filename(index: int) -> str:
    """File name for the zero-based page ``index``."""
    return f"storybook-page-{index + 1}.png"


def create_export_dir(outputs_dir: Path) -> Path:
    """Create and return a unique directory for one export."""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    export_dir = Path(outputs_dir) / f"{stamp}_{uuid.uuid4().hex[:8]}"
    export_dir.mkdir(parents=True, exist_ok=True)
    return export_dir


def save_image(result: GenerationResult, path: Path) -> Path:
    """Write the decoded payload of ``result`` to ``path``."""
    path.write_bytes(result.image_bytes)
    logger.info(f"Exported {result.mime_type} image to {path}")
    return path


def export_results(
    results: list[tuple[GenerationResult, str]], outputs_dir: Path
) -> list[Path]:
    """Save each ``(result, filename)`` pair into one new export directory.

    Returns:
        Paths of the written files, in input order.
    """
    export_dir = create_export_dir(outputs_dir)
    return [save_image(result, export_dir / filename) for result, filename in results]

"""Text-overlay previews for poster and meme backgrounds.

The generated backgrounds deliberately contain no text. For display the UI
draws the user's text on top with Pillow:

- poster: large white text, centred, with a soft drop shadow
- meme: upper-case white text with a thick black outline

Exports stay background-only; these previews are for display.
"""

import logging
from typing import Literal

from PIL import Image, ImageDraw, ImageFilter, ImageFont

logger = logging.getLogger(__name__)

OverlayStyle = Literal["poster", "meme"]

# Tried in order; the first one Pillow can open wins.
_FONT_CANDIDATES = {
    "poster": ["DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf"],
    "meme": ["Impact.ttf", "impact.ttf", "Anton-Regular.ttf", "DejaVuSans-Bold.ttf"],
}


def load_font(style: OverlayStyle, size: int) -> ImageFont.ImageFont:
    """Load a TrueType font for ``style``, falling back to Pillow's default."""
    for name in _FONT_CANDIDATES[style]:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug(f"No TrueType font found for {style} overlay; using default")
    return ImageFont.load_default(size=size)


def wrap_text(text: str, font: ImageFont.ImageFont, max_width: int, draw: ImageDraw.ImageDraw) -> list[str]:
    """Greedy word wrap so that no line exceeds ``max_width`` pixels."""
    lines: list[str] = []
    for paragraph in text.splitlines() or [""]:
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}".strip()
            if current and draw.textlength(candidate, font=font) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return [line for line in lines if line] or [""]


def render_overlay(background: Image.Image, text: str, style: OverlayStyle) -> Image.Image:
    """Return a copy of ``background`` with ``text`` drawn over it.

    Args:
        background: Generated background image
        text: Poster headline or meme caption
        style: ``"poster"`` or ``"meme"``

    Returns:
        New RGB image; ``background`` is left untouched.
    """
    canvas = background.convert("RGBA")
    width, height = canvas.size
    if style == "meme":
        text = text.upper()

    font_size = max(16, width // (10 if style == "poster" else 12))
    font = load_font(style, font_size)
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)

    lines = wrap_text(text, font, int(width * 0.9), draw)
    line_height = int(font_size * 1.2)
    block_height = line_height * len(lines)
    top = (height - block_height) // 2

    if style == "poster":
        shadow = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        shadow_draw = ImageDraw.Draw(shadow)
        offset = max(2, font_size // 25)
        for i, line in enumerate(lines):
            x = (width - draw.textlength(line, font=font)) / 2
            y = top + i * line_height
            shadow_draw.text((x + offset, y + offset), line, font=font, fill=(0, 0, 0, 180))
        layer = Image.alpha_composite(layer, shadow.filter(ImageFilter.GaussianBlur(offset)))
        draw = ImageDraw.Draw(layer)

    stroke_width = max(2, font_size // 20) if style == "meme" else 0
    for i, line in enumerate(lines):
        x = (width - draw.textlength(line, font=font)) / 2
        y = top + i * line_height
        draw.text(
            (x, y),
            line,
            font=font,
            fill=(255, 255, 255, 255),
            stroke_width=stroke_width,
            stroke_fill=(0, 0, 0, 255),
        )

    return Image.alpha_composite(canvas, layer).convert("RGB")

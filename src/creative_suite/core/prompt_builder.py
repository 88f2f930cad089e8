"""Prompt templates for the four creative tools.

Each builder embeds the user's text verbatim (in double quotes) together
with the selected style, then appends a fixed directive for its use-case.
Builders are pure: no I/O, no randomness, no mutation of their inputs. The
same arguments always produce the same string.

Template Structure::

    <lead sentence quoting the user text>. Style: <style>. [<theme>.] <directive>

Style and theme choices offered by the UI are kept here next to the
templates that consume them. Each is a list of ``(label, value)`` pairs,
the shape ``gr.Dropdown(choices=...)`` accepts.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Fixed directives per use-case.
# ---------------------------------------------------------------------------

_EDIT_DIRECTIVE = (
    "Preserve main objects unless instructed to change. "
    "Maintain realistic lighting and perspective."
)

_STORYBOOK_DIRECTIVE = (
    "The image should not contain any text. "
    "The image should be visually appealing for a children's storybook."
)

_POSTER_DIRECTIVE = (
    "The design must be high-impact, focusing on composition and readability, "
    "leaving appropriate space for the text to be overlaid later. "
    "Do NOT include the text in the image."
)

_MEME_DIRECTIVE = (
    "The image must leave ample clear space for text overlay. "
    "Do NOT include any text in the image itself. "
    "The image should be humorous and relatable."
)

# ---------------------------------------------------------------------------
# UI choices: (label, value). The first entry is the default.
# ---------------------------------------------------------------------------

EDIT_STYLES = [
    ("Realistic", "realistic"),
    ("Manga", "manga"),
    ("Minimalist", "minimalist"),
    ("Pixel Art", "pixel-art"),
]

STORYBOOK_STYLES = [
    ("Whimsical Cartoon", "whimsical-cartoon"),
    ("Watercolor", "watercolor"),
    ("Classic Storybook", "storybook-illustration"),
    ("Anime", "anime"),
]

POSTER_STYLES = [
    ("Minimalist", "minimalist"),
    ("Vintage", "vintage"),
    ("Futuristic", "futuristic"),
    ("Grunge", "grunge"),
]

POSTER_COLOR_THEMES = [
    ("Monochrome", "monochrome"),
    ("Vibrant Pastels", "vibrant-pastels"),
    ("Neon", "neon"),
    ("Earth Tones", "earth-tones"),
]

MEME_STYLES = [
    ("Photorealistic", "photorealistic"),
    ("Cartoon", "cartoon"),
    ("Surreal", "surreal"),
    ("Vintage Photo", "vintage-photo"),
]


def default_choice(choices: list[tuple[str, str]]) -> str:
    """Return the value of the first choice."""
    return choices[0][1]


def build_edit_prompt(instruction: str, style: str) -> str:
    """Compose the instruction sent with an uploaded image.

    Args:
        instruction: Free-text edit request (e.g. "add a pirate hat").
        style: Style value from :data:`EDIT_STYLES`.

    Returns:
        Prompt for the multimodal edit model.
    """
    return f'Modify the uploaded image according to: "{instruction}". Style: {style}. {_EDIT_DIRECTIVE}'


def build_storybook_prompt(page_text: str, style: str) -> str:
    """Compose the prompt for one storybook panel.

    Args:
        page_text: One chunk produced by the story chunker.
        style: Illustration style from :data:`STORYBOOK_STYLES`.

    Returns:
        Prompt for the text-to-image model.
    """
    return (
        f'Generate a comic panel from the following story page: "{page_text}". '
        f"Style: {style}. {_STORYBOOK_DIRECTIVE}"
    )


def build_poster_prompt(text: str, style: str, color_theme: str) -> str:
    """Compose the prompt for a poster background.

    The poster text is quoted for thematic context only; the directive asks
    the model to leave it out of the image.

    Args:
        text: Poster headline as typed by the user.
        style: Style value from :data:`POSTER_STYLES`.
        color_theme: Theme value from :data:`POSTER_COLOR_THEMES`.

    Returns:
        Prompt for the text-to-image model.
    """
    return (
        f'Generate a visually striking poster background. The poster text will be "{text}". '
        f"The style should be: {style}. The color theme should be: {color_theme}. "
        f"{_POSTER_DIRECTIVE}"
    )


def build_meme_prompt(caption: str, style: str) -> str:
    """Compose the prompt for a meme background."""
    return (
        "Generate a funny or expressive image that would work as a meme background "
        f'for the caption: "{caption}". Style: {style}. {_MEME_DIRECTIVE}'
    )

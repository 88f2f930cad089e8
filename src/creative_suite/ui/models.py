"""Data models for Creative Suite UI state."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from creative_suite.core.models import GenerationResult

ResultValue = Union[GenerationResult, list[GenerationResult]]


class ControllerPhase(str, Enum):
    """Where a use-case controller is in its generate lifecycle.

    ``IDLE`` is the resting state before the first action. After an action
    the controller rests in the outcome of that action (``SUCCEEDED``,
    ``FAILED`` or ``INVALID_INPUT``) with ``is_loading`` cleared.
    """

    IDLE = "idle"
    VALIDATING = "validating"
    INVALID_INPUT = "invalid_input"
    GENERATING = "generating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class ControllerState:
    """Per-session state of one creative tool.

    Attributes
    ----------
    phase : ControllerPhase
        Current lifecycle phase
    is_loading : bool
        True only while the remote call(s) are in flight
    result : GenerationResult | list[GenerationResult] | None
        Last successful result (a list for storybook pages)
    error : str | None
        Last user-facing error message
    """

    phase: ControllerPhase = ControllerPhase.IDLE
    is_loading: bool = False
    result: ResultValue | None = None
    error: str | None = None

    def reset(self) -> None:
        """Clear result and error ahead of a new action."""
        self.result = None
        self.error = None

    @property
    def has_result(self) -> bool:
        if isinstance(self.result, list):
            return len(self.result) > 0
        return self.result is not None

    def results(self) -> list[GenerationResult]:
        """The held result(s) as a list (empty when nothing is held)."""
        if self.result is None:
            return []
        if isinstance(self.result, list):
            return list(self.result)
        return [self.result]

    def __repr__(self) -> str:
        return (
            f"ControllerState(phase={self.phase.value}, loading={self.is_loading}, "
            f"results={len(self.results())}, error={self.error!r})"
        )


# UI Constants
APP_TITLE = "Gemini Creative Suite"
APP_SUBTITLE = "Your AI-powered toolkit for digital creation."

TAB_IMAGE_EDITOR = "Image Editor"
TAB_STORYBOOK = "Storybook"
TAB_POSTER = "Poster"
TAB_MEME = "Meme"

DEFAULT_PAGE_COUNT = 2

LOADING_MESSAGE = "⏳ Generating..."

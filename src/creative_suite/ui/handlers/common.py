"""Helpers shared by the per-tool handlers."""

import logging

import gradio as gr

from creative_suite.core.config import config

from ..controller import UseCaseController
from ..models import LOADING_MESSAGE, ControllerPhase

logger = logging.getLogger(__name__)


def format_status(controller: UseCaseController, success_message: str) -> str:
    """Markdown for the tool's single status/error line."""
    state = controller.state
    if state.error:
        if state.phase is ControllerPhase.INVALID_INPUT:
            return f"❌ **Missing Input**\n\n{state.error}"
        return f"❌ **Error**\n\n{state.error}"
    if state.phase is ControllerPhase.SUCCEEDED:
        return f"✅ {success_message}"
    return ""


def start_loading() -> tuple[dict, str]:
    """Disable the generate button and show the loading message."""
    return gr.update(interactive=False), LOADING_MESSAGE


def finish_loading() -> dict:
    """Re-enable the generate button."""
    return gr.update(interactive=True)


def export_handler(controller: UseCaseController) -> tuple[dict, UseCaseController]:
    """Write the held result(s) and offer them as downloads.

    Returns:
        Tuple of (file component update, controller)
    """
    try:
        paths = controller.export(config.outputs_dir)
    except OSError as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        return gr.update(value=None, visible=False), controller

    if not paths:
        return gr.update(value=None, visible=False), controller
    return gr.update(value=[str(path) for path in paths], visible=True), controller

"""Generic controller shared by the four creative tools.

Every tool follows the same lifecycle; only the generation step differs::

    Idle -> Validating -> InvalidInput
                       -> Generating -> Succeeded
                                     -> Failed

A :class:`UseCase` supplies the tool-specific parts (required fields,
generation step, export file names). :class:`UseCaseController` owns the
loading/result/error bookkeeping so the four tools share one copy of it.

Controllers live in ``gr.State`` (one per session, per tool). They hold no
reference to the generation client; it is passed into :meth:`run`.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping

from creative_suite.core.errors import CreativeSuiteError, MissingInputError
from creative_suite.core.export import export_results
from creative_suite.core.generation_client import GenerationClient
from creative_suite.core.models import GenerationResult

from .models import ControllerPhase, ControllerState, ResultValue
from .validation import require_fields

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Check logs for details."


class UseCase(ABC):
    """Tool-specific strategy plugged into :class:`UseCaseController`.

    Attributes
    ----------
    name : str
        Tool name used in logs
    required_fields : tuple[str, ...]
        Input names that must be non-blank before generating
    missing_input_message : str
        User-facing message when a required field is blank
    """

    name: str = "use case"
    required_fields: tuple[str, ...] = ()
    missing_input_message: str = MissingInputError.default_message

    def validate(self, inputs: Mapping[str, Any]) -> None:
        """Raise :class:`MissingInputError` if a required field is blank."""
        require_fields(inputs, self.required_fields, self.missing_input_message)

    @abstractmethod
    async def generate(self, client: GenerationClient, inputs: Mapping[str, Any]) -> ResultValue:
        """Produce the result for validated ``inputs``."""

    @abstractmethod
    def export_filenames(self, results: list[GenerationResult]) -> list[str]:
        """File names for ``results``, one per result, in order."""


class UseCaseController:
    """Runs a :class:`UseCase` and keeps its :class:`ControllerState`."""

    def __init__(self, use_case: UseCase) -> None:
        self.use_case = use_case
        self.state = ControllerState()

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def result(self) -> ResultValue | None:
        return self.state.result

    @property
    def error(self) -> str | None:
        return self.state.error

    def clear(self) -> None:
        """Drop any held result and error (e.g. when a new image is uploaded)."""
        self.state.reset()
        self.state.phase = ControllerPhase.IDLE

    async def run(self, client: GenerationClient, inputs: Mapping[str, Any]) -> ControllerState:
        """Validate ``inputs`` and run one generation.

        Never raises for user or service errors: the outcome is recorded in
        :attr:`state` (``SUCCEEDED`` with a result, or ``FAILED`` /
        ``INVALID_INPUT`` with an error message).

        Args:
            client: Process-wide generation client
            inputs: Field name to value, as collected from the UI

        Returns:
            The updated state
        """
        state = self.state
        state.phase = ControllerPhase.VALIDATING
        try:
            self.use_case.validate(inputs)
        except MissingInputError as e:
            state.error = str(e)
            state.phase = ControllerPhase.INVALID_INPUT
            return state

        state.reset()
        state.is_loading = True
        state.phase = ControllerPhase.GENERATING
        logger.info(f"{self.use_case.name}: generation started")

        try:
            result = await self.use_case.generate(client, inputs)
        except CreativeSuiteError as e:
            logger.warning(f"{self.use_case.name}: generation failed: {e}")
            self._fail(str(e))
        except Exception as e:
            logger.error(f"{self.use_case.name}: unexpected error: {e}", exc_info=True)
            self._fail(UNEXPECTED_ERROR_MESSAGE)
        else:
            state.result = result
            state.phase = ControllerPhase.SUCCEEDED
            logger.info(f"{self.use_case.name}: generation succeeded")
        finally:
            state.is_loading = False

        return state

    def _fail(self, message: str) -> None:
        self.state.result = None
        self.state.error = message
        self.state.phase = ControllerPhase.FAILED

    def export(self, outputs_dir: Path) -> list[Path]:
        """Write the held result(s) to disk under fixed file names.

        Returns:
            Written paths; empty when there is nothing to export.
        """
        if not self.state.has_result:
            logger.debug(f"{self.use_case.name}: nothing to export")
            return []

        results = self.state.results()
        filenames = self.use_case.export_filenames(results)
        return export_results(list(zip(results, filenames)), outputs_dir)

    def __repr__(self) -> str:
        return f"UseCaseController({self.use_case.name}, {self.state!r})"

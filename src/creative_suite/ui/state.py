"""State management utilities for Creative Suite UI.

Two kinds of state exist:

- the **generation client**, created once per process at startup and shared
  by every session (it is stateless and safe for concurrent use);
- one **controller per tool per session**, kept in ``gr.State``.
"""

import logging

from creative_suite.core.config import CreativeSuiteConfig, config
from creative_suite.core.generation_client import GenerationClient, create_generation_client

logger = logging.getLogger(__name__)

_generation_client: GenerationClient | None = None


def initialize_generation_client(app_config: CreativeSuiteConfig | None = None) -> GenerationClient:
    """Create the process-wide generation client.

    Must be called once before the UI starts serving. A missing credential
    raises :class:`MissingCredentialError`, which callers must not catch.

    Args:
        app_config: Configuration to use (default: global config)

    Returns:
        The shared client
    """
    global _generation_client

    if _generation_client is not None:
        logger.debug("Generation client already initialized")
        return _generation_client

    _generation_client = create_generation_client(app_config or config)
    for info in _generation_client.describe():
        logger.info(f"Model adapter ready: {info['name']} -> {info['model_id']}")
    return _generation_client


def set_generation_client(client: GenerationClient | None) -> None:
    """Install (or clear, with ``None``) the shared client."""
    global _generation_client
    _generation_client = client


def get_generation_client() -> GenerationClient:
    """Return the shared client.

    Raises:
        RuntimeError: If :func:`initialize_generation_client` was never called
    """
    if _generation_client is None:
        raise RuntimeError("Generation client not initialized; call initialize_generation_client()")
    return _generation_client


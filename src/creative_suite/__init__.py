"""Gemini Creative Suite - AI image editing, storybooks, posters and memes."""

__version__ = "0.1.0"

from creative_suite.core.config import CreativeSuiteConfig, config
from creative_suite.core.generation_client import GenerationClient, create_generation_client

__all__ = [
    "CreativeSuiteConfig",
    "GenerationClient",
    "config",
    "create_generation_client",
]

"""Core functionality for prompt assembly and remote image generation.

- **CreativeSuiteConfig / config**: settings loaded from CREATIVE_SUITE_* env vars
- **split_story**: sentence-based story chunking for storybook pages
- **prompt_builder**: one template function per creative tool
- **GenerationClient**: edit and text-to-image calls against Google GenAI
- **model_registry**: adapters behind the client (Gemini edit, Imagen)
- **export / overlay**: download files and text-overlay previews

Usage Example
-------------
    from creative_suite.core import config, create_generation_client
    from creative_suite.core.prompt_builder import build_meme_prompt

    client = create_generation_client(config)
    result = await client.generate_from_text(
        build_meme_prompt("One does not simply...", "photorealistic")
    )
"""

from creative_suite.core.chunker import chunk_story_or_raise, split_story
from creative_suite.core.config import CreativeSuiteConfig, config
from creative_suite.core.generation_client import GenerationClient, create_generation_client
from creative_suite.core.model_adapters import ModelAdapterBase, model_registry
from creative_suite.core.models import GenerationKind, GenerationRequest, GenerationResult

__all__ = [
    "CreativeSuiteConfig",
    "GenerationClient",
    "GenerationKind",
    "GenerationRequest",
    "GenerationResult",
    "ModelAdapterBase",
    "chunk_story_or_raise",
    "config",
    "create_generation_client",
    "model_registry",
    "split_story",
]

"""Configuration management for Gemini Creative Suite.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the CREATIVE_SUITE_
prefix, allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (CREATIVE_SUITE_* prefix)
2. .env file in the project root
3. Default values defined in CreativeSuiteConfig

The API key is the one exception to the prefix rule. It is read from
CREATIVE_SUITE_API_KEY, API_KEY or GEMINI_API_KEY (first match wins).

Example .env file:
    CREATIVE_SUITE_API_KEY=your-key-here
    CREATIVE_SUITE_EDIT_MODEL=gemini-2.5-flash-image-preview
    CREATIVE_SUITE_IMAGE_MODEL=imagen-4.0-generate-001
    CREATIVE_SUITE_OUTPUTS_DIR=outputs

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
A missing API key does not fail here; it is reported when the generation
client is created at startup (see generation_client.create_generation_client).

Usage Example
-------------
    from creative_suite.core.config import config

    print(config.edit_model)
    print(config.outputs_dir)

See Also
--------
- CreativeSuiteConfig: Full configuration class documentation
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class CreativeSuiteConfig(BaseSettings):
    """Main configuration for Gemini Creative Suite.

    Attributes
    ----------
    Credentials:
        api_key : SecretStr | None
            Google GenAI API key. Required to start the application.

    Model Settings:
        edit_model : str
            Multimodal model used for instruction-based image editing
        image_model : str
            Text-to-image model used for storybook, poster and meme images
        output_mime_type : str
            Encoded format requested from the text-to-image model

    Use-Case Settings:
        max_story_pages : int
            Upper bound offered by the storybook page selector

    Paths:
        outputs_dir : Path
            Directory where exported images are written for download

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)
        log_level : str
            Root logging level

    Examples
    --------
        >>> custom_config = CreativeSuiteConfig(
        ...     api_key="test-key",
        ...     outputs_dir="/tmp/exports",
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CREATIVE_SUITE_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Credentials
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "CREATIVE_SUITE_API_KEY", "API_KEY", "GEMINI_API_KEY"),
        description="Google GenAI API key",
    )

    # Model settings
    edit_model: str = Field(
        default="gemini-2.5-flash-image-preview",
        description="Multimodal model for image editing (image + text response)",
    )
    image_model: str = Field(
        default="imagen-4.0-generate-001",
        description="Text-to-image model for storybook, poster and meme images",
    )
    output_mime_type: Literal["image/png", "image/jpeg"] = Field(
        default="image/png",
        description="Encoded format requested from the text-to-image model",
    )

    # Use-case settings
    max_story_pages: int = Field(
        default=4,
        description="Largest page count offered by the storybook tab",
        ge=1,
        le=8,
    )

    # Paths
    outputs_dir: Path = Field(
        default=Path("outputs"),
        description="Directory for exported images",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the outputs directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.outputs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def has_api_key(self) -> bool:
        """Whether a non-blank API key was supplied."""
        return self.api_key is not None and bool(self.api_key.get_secret_value().strip())


# Global configuration instance
# Loads values from environment variables (CREATIVE_SUITE_* prefix) and .env file.
config = CreativeSuiteConfig()

"""Configuration management for the Ghostwriter Lyric Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the GHOSTWRITER_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (GHOSTWRITER_* prefix)
2. .env file in the project root
3. Default values defined in GhostwriterConfig

Example .env file:
    GHOSTWRITER_API_KEY=your-gemini-api-key
    GHOSTWRITER_MODEL_ID=gemini-3-pro-preview
    GHOSTWRITER_SERVER_PORT=7860

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
This ensures a single source of truth for all configuration values across
the application.

Usage Example
-------------
    from ghostwriter.core.config import config

    # Access configuration values
    print(config.model_id)
    print(config.has_api_key)

API Credential
--------------
The Gemini API key is the only required secret. It is deliberately optional
at the settings level so that importing the package never fails; the check
happens when a :class:`~ghostwriter.core.generator.LyricsGenerator` is
constructed, which raises :class:`~ghostwriter.core.exceptions.MissingCredentialError`
and stops the API or UI from starting.

See Also
--------
- GhostwriterConfig: Full configuration class documentation
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GhostwriterConfig(BaseSettings):
    """Main configuration for the Ghostwriter Lyric Generator.

    This class uses Pydantic Settings to manage all application configuration.
    Values are loaded from environment variables with the GHOSTWRITER_ prefix,
    with fallback to defaults defined here.

    Attributes
    ----------
    Generation Service Settings:
        api_key : SecretStr | None
            Gemini API key (required to construct a generator)
        model_id : str
            Gemini model identifier sent with every request
        api_base_url : str
            Base URL of the Gemini REST API
        request_timeout : float | None
            HTTP timeout in seconds (None = wait until the service answers)
        thinking_budget : int | None
            Optional thinking budget forwarded to models that support it

    Server Settings:
        server_host : str
            Bind address for the REST API
        server_port : int
            Port for the REST API (1024-65535)
        gradio_server_name : str
            Bind address for the Gradio form UI
        gradio_server_port : int
            Port for the Gradio form UI (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level applied by the entry points

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = GhostwriterConfig(
        ...     api_key="test-key",
        ...     model_id="gemini-2.5-flash",
        ... )

    Use the global configuration instance:

        >>> from ghostwriter.core.config import config
        >>> print(config.model_id)
        'gemini-3-pro-preview'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GHOSTWRITER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Generation service settings
    api_key: SecretStr | None = Field(
        default=None,
        description="Gemini API key (required at startup, never logged)",
    )
    model_id: str = Field(
        default="gemini-3-pro-preview",
        description="Gemini model identifier",
    )
    api_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini REST API",
    )
    request_timeout: float | None = Field(
        default=None,
        description="HTTP timeout in seconds (None disables the timeout)",
        gt=0,
    )
    thinking_budget: int | None = Field(
        default=None,
        description="Thinking budget for models that support it (None = model default)",
        ge=0,
    )

    # REST API settings
    server_host: str = Field(
        default="0.0.0.0",
        description="REST API bind address",
    )
    server_port: int = Field(
        default=7860,
        description="REST API port",
        ge=1024,
        le=65535,
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7861,
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
        description="Root log level for the entry points",
    )

    @property
    def has_api_key(self) -> bool:
        """Whether a non-blank API key is configured."""
        return self.api_key is not None and bool(self.api_key.get_secret_value().strip())


# Global configuration instance
# Loads values from environment variables (GHOSTWRITER_* prefix) and .env file.
config = GhostwriterConfig()

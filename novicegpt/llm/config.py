"""Gemini client configuration with environment variable loading.

Pydantic-based settings for the generateContent REST endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


def _timeout_from_env() -> str | None:
    # Left as a string; the timeout field coerces it
    return os.getenv("GEMINI_TIMEOUT", "").strip() or None


class GeminiConfig(BaseModel):
    """Configuration for the Gemini HTTP client.

    Attributes:
        api_key: Access credential, sent as the ``key`` query parameter.
        model_name: Model identifier used in the request path.
        base_url: API root, without trailing slash.
        timeout: Request timeout in seconds. None leaves the call unbounded.
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
        description="API base URL",
    )
    timeout: float | None = Field(
        default_factory=_timeout_from_env,
        gt=0,
        description="Request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("GEMINI_API_KEY is required. Set it in the environment or .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """generateContent URL for the configured model (without the key)."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_gemini_config() -> GeminiConfig:
    """Create Gemini configuration from environment.

    Returns:
        Configured GeminiConfig instance.

    Raises:
        ValidationError: If GEMINI_API_KEY is not set.
    """
    return GeminiConfig()

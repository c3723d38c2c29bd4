"""Configuration management using Pydantic BaseSettings.

The client itself never reads the environment. Applications that want
environment-driven setup load S2Settings (``S2_`` prefix or a .env file)
and pass it to ``S2Client.from_settings``.

Usage:
    from semscholar import S2Client
    from semscholar.config import get_settings

    client = S2Client.from_settings(get_settings())
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from semscholar.transport import DEFAULT_TIMEOUT_SECONDS

GRAPH_API_URL = "https://api.semanticscholar.org/graph/v1"
RECOMMENDATIONS_API_URL = "https://api.semanticscholar.org/recommendations/v1"
DATASETS_API_URL = "https://api.semanticscholar.org/datasets/v1"


class S2Settings(BaseSettings):
    """Client settings loaded from environment.

    Attributes:
        base_url: API root every operation path is appended to
        timeout_seconds: Request timeout for the default transport
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format (json or console)
    """

    model_config = SettingsConfigDict(
        env_prefix="S2_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default=GRAPH_API_URL,
        description="API base URL",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Request timeout in seconds",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="console",
        description="Log format: json or console",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = {"json", "console"}
        lower = v.lower()
        if lower not in valid_formats:
            raise ValueError(f"log_format must be one of {valid_formats}")
        return lower


@lru_cache()
def get_settings() -> S2Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload.
    """
    return S2Settings()

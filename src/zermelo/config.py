"""Configuration management using Pydantic Settings."""

import re

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from zermelo._version import __version__

# Hostname labels are limited to 63 characters
_SCHOOL_CODE_RE = re.compile(r"^[a-zA-Z0-9-]{1,63}$")


def validate_school_code(school: str | None) -> str:
    """Validate school code format to prevent SSRF/phishing.

    The school code becomes the first label of the portal hostname
    (``https://{school}.zportal.nl``), so it must be a valid DNS label.

    Args:
        school: School code to validate

    Returns:
        Normalized (lowercase) school code

    Raises:
        ValueError: If school code is invalid
    """
    if not school:
        raise ValueError("School code cannot be empty")

    if not _SCHOOL_CODE_RE.match(school):
        raise ValueError(f"Invalid school code format: {school}")

    if school.startswith("-") or school.endswith("-"):
        raise ValueError(f"Invalid school code format: {school}")

    return school.lower()


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ZERMELO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    portal_domain: str = Field(
        default="zportal.nl",
        description="Domain hosting the school portals",
    )
    api_version: str = Field(default="v3", description="Zermelo API version path segment")
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds (unset keeps the transport default)",
    )
    user_agent: str = Field(
        default=f"zermelo-client/{__version__}",
        description="User-Agent header sent with every request",
    )

    def portal_url(self, school: str) -> str:
        """Base URL of the API for a school."""
        return f"https://{school}.{self.portal_domain}/api/{self.api_version}"


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None

"""
Configuration management for the DUPR API client.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .auth import Credential, EmailPassword, RefreshToken

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://api.dupr.gg"


def default_token_path() -> Path:
    """Token cache location under the per-user cache directory."""
    cache_home = os.environ.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return Path(cache_home) / "dupr" / ".tokens"


class Settings(BaseSettings):
    """Configuration settings for the DUPR API client."""

    model_config = SettingsConfigDict(env_prefix="DUPR_", case_sensitive=False)

    email: Optional[str] = Field(default=None, description="Account email address")

    password: Optional[str] = Field(default=None, description="Account password")

    refresh_token: Optional[str] = Field(
        default=None, description="Refresh token used instead of email/password"
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API origin")

    cache_tokens: bool = Field(
        default=True, description="Persist the token pair between runs"
    )

    token_path: str = Field(
        default_factory=lambda: str(default_token_path()),
        description="Path of the cached token file",
    )

    timeout: float = Field(default=20.0, description="Request timeout in seconds")

    user_agent: str = Field(
        default="dupr-python/0.1", description="User agent string for API requests"
    )

    def credential(self) -> Optional[Credential]:
        """Build the login credential; email/password wins over a refresh token."""
        if self.email and self.password:
            return EmailPassword(email=self.email, password=self.password)
        if self.refresh_token:
            return RefreshToken(refresh_token=self.refresh_token)
        return None

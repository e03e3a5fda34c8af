"""
TokenChannel SDK Configuration

Settings read from ``TOKENCHANNEL_*`` environment variables or a ``.env`` file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


TOKENCHANNEL_BASE_URI = "https://api.tokenchannel.io"
DEFAULT_USER_AGENT = "TokenChannel/Python"
DEFAULT_TIMEOUT = 30.0


class TokenChannelSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOKENCHANNEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str = Field(..., min_length=1)
    test_mode: bool = False
    base_url: str = TOKENCHANNEL_BASE_URI
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

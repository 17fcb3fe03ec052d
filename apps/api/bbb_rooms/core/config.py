"""Application configuration for the room gateway."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


@dataclass(frozen=True, slots=True)
class Credentials:
    """Remote server location and shared secret used for checksums."""

    base_url: str
    secret: str = field(repr=False)


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_env: str = Field(default="development")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    bbb_url: str = Field(default="")
    bbb_secret: str = Field(default="", repr=False)

    admin_username: str = Field(default="")
    admin_display_name: str = Field(default="Admin")
    moderator_password: str = Field(default="mp")

    general_id: str = Field(default="general-room")
    beginner_id: str = Field(default="beginner-room")
    intermediate_id: str = Field(default="intermediate-room")
    elite_id: str = Field(default="elite-room")

    http_timeout_seconds: float = Field(default=10.0, gt=0)
    strict_return_codes: bool = Field(default=False)

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated env values for CORS origins."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def credentials(self) -> Credentials | None:
        """Return the remote credentials, or ``None`` when either part is blank."""

        base_url = self.bbb_url.strip().rstrip("/")
        secret = self.bbb_secret.strip()
        if not base_url or not secret:
            return None
        return Credentials(base_url=base_url, secret=secret)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


settings = get_settings()

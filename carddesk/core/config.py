"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in sample configs that must never sign real tokens.
PLACEHOLDER_SECRETS = frozenset(
    {
        "change-me-in-production",
        "changeme-changeme",
        "your-secret-key-here",
        "replace-with-a-real-secret",
    }
)


class ServerSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = "sqlite+aiosqlite:///./carddesk.db"
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SecuritySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    secret_key: str = Field(..., min_length=16)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(default=60, gt=0)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    @field_validator("secret_key")
    @classmethod
    def _reject_placeholder(cls, value: str) -> str:
        if value.strip().lower() in PLACEHOLDER_SECRETS:
            raise ValueError("secret_key must be set to a real secret")
        return value


class WithdrawalSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_balance_retries: int = Field(default=5, ge=1)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections.

    The security section has no default secret: constructing settings without
    ``SECURITY__SECRET_KEY`` fails, so the service refuses to start instead of
    signing tokens with a throwaway key.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Card Desk"
    api_prefix: str = "/api"
    cors_origins: tuple[str, ...] = ("*",)
    static_dir: Path = Path("public")

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings
    withdrawals: WithdrawalSettings = WithdrawalSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.yookassa.ru/v3"


class ConnectorSettings(BaseSettings):
    """Connector configuration, resolved once when a client is constructed.

    Values can be passed explicitly or loaded from ``YOOKASSA_*`` environment
    variables. Durations are in milliseconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="YOOKASSA_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    shop_id: str
    secret_key: str
    endpoint: str = DEFAULT_ENDPOINT
    debug: bool = False
    max_rps: int = Field(default=5, gt=0)
    timeout: int = Field(default=5000, gt=0)
    retries: int = Field(default=5, ge=0)
    proxy: str | None = None
    redirect_url: str | None = None
    retry_delay: int = Field(default=1000, ge=0)
    max_retry_delay: int | None = Field(default=None, ge=0)

    @field_validator("shop_id", "secret_key")
    @classmethod
    def _require_credentials(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slashes(cls, value: str) -> str:
        return (value or DEFAULT_ENDPOINT).rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay / 1000

    @property
    def max_retry_delay_seconds(self) -> float | None:
        if self.max_retry_delay is None:
            return None
        return self.max_retry_delay / 1000


@lru_cache
def get_settings() -> ConnectorSettings:
    """Get cached settings loaded from the environment."""
    return ConnectorSettings()

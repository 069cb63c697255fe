from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SMARTPAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Merchant credentials
    merchant_id: str = Field(
        default="",
        description="Merchant ID issued by SmartPay",
    )
    sign_key: str = Field(
        default="",
        description="Shared secret for request and notification signatures",
    )

    # Endpoint
    api_url: str = Field(
        default="https://www.kiwifast.com/api/v1/info/smartpay",
        min_length=1,
        description="SmartPay API endpoint",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    # Request signing
    nonce_length: int = Field(
        default=16,
        ge=1,
        description="Length of the nonce_str anti-replay token",
    )

    # Transport selection
    transport: Literal["aiohttp", "httpx", "mock"] = Field(
        default="aiohttp",
        description="HTTP transport to use",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "standard"] = Field(
        default="standard",
        description="Log format (json for production, standard for dev)",
    )


settings = Settings()

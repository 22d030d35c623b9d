"""Application settings using Pydantic settings management."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


INSECURE_SECRET_KEY = "sealer-insecure-dev-key"


class Settings(BaseSettings):
    """Process configuration for the sealing service.

    Only bootstrap settings live here. The secret key and the other
    deployment values are hydrated from SSM Parameter Store under
    ``config_path``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="SEALER_")

    app_name: str = Field(default="sealer")
    environment: str = Field(default="dev")

    config_path: str = Field(
        default="example-app",
        description="SSM parameter path holding this deployment's configuration.",
    )
    aws_region: str = Field(default="us-east-1")
    aws_profile: Optional[str] = Field(default=None)

    auth_context: str = Field(
        default="example-service-envelope",
        description="Associated data bound into every envelope's authentication tag.",
    )
    max_body_bytes: int = Field(default=1024 * 1024, ge=1)

    startup_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Deadline for reading all configuration pages at startup.",
    )
    ssm_connect_timeout: float = Field(default=5.0, gt=0)
    ssm_read_timeout: float = Field(default=10.0, gt=0)
    ssm_page_size: Optional[int] = Field(default=None, ge=1, le=10)

    django_secret_key: str = Field(default=INSECURE_SECRET_KEY)
    django_debug: bool = Field(
        default=False,
        description="Mirror Django's DEBUG flag so both settings derive from the same env var.",
    )
    allowed_hosts: str = Field(default="localhost,127.0.0.1")

    @field_validator("config_path", "auth_context")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        if self.django_debug:
            return self
        if not self.django_secret_key.strip() or self.django_secret_key == INSECURE_SECRET_KEY:
            raise ValueError("SEALER_DJANGO_SECRET_KEY must be set when SEALER_DJANGO_DEBUG is false.")
        return self

    def auth_context_bytes(self) -> bytes:
        return self.auth_context.encode("utf-8")

    def allowed_host_list(self) -> List[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

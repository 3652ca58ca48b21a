from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).parent


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class SendamaticSettings(BaseSettings):
    USER_ID: str = Field(
        ...,
        description="Sendamatic user id; first half of the x-api-key header.",
    )
    PASSWORD: str = Field(
        ...,
        description="Sendamatic password; second half of the x-api-key header.",
    )
    BASE_URL: str = Field(
        default="https://send.api.sendamatic.net",
        description="API endpoint. Override to target a sandbox or a local fake server.",
    )
    TIMEOUT: float | None = Field(
        default=30.0,
        gt=0,
        description=(
            "Transport timeout in seconds for each request. "
            "Set to '', 'none' or 'null' to disable the timeout entirely (use with caution)."
        ),
    )
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Level applied to the 'sendamatic' logger by configure_logging().",
    )

    # ---- Normalizers ----

    @field_validator("TIMEOUT", mode="before")
    @classmethod
    def _noneify_timeout(cls, v):
        # Allow '', 'none', 'null' (case-insensitive) to disable the timeout via env
        if v is None:
            return None
        if isinstance(v, str):
            s = v.strip().lower()
            if s in {"", "none", "null"}:
                return None
        return v

    @field_validator("BASE_URL", mode="after")
    @classmethod
    def _require_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"BASE_URL must start with http:// or https://, got: {v!r}")
        return v

    # ---- Configuration manager ----
    model_config = SettingsConfigDict(
        env_prefix="SENDAMATIC_",
        env_file=CONFIG_DIR.parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

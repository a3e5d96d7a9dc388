from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

# Fixed sources; not configurable.
UPTIME_PATH = "/proc/uptime"
MEMINFO_PATH = "/proc/meminfo"
LOADAVG_PATH = "/proc/loadavg"
HOSTNAME_PATH = "/etc/hostname"

DEFAULT_INTERVAL = 30.0

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    # --- sampling ---
    # bare INTERVAL is the key existing /etc/heartbeat.conf files use
    interval: float = Field(
        default=DEFAULT_INTERVAL,
        gt=0,
        validation_alias=AliasChoices("HEARTBEAT_INTERVAL", "INTERVAL"),
    )  # seconds between samples

    # --- logging ---
    log_level: LogLevel = "WARNING"

    model_config = {
        "env_file": ("/etc/heartbeat.conf", ".env"),
        "env_prefix": "HEARTBEAT_",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()

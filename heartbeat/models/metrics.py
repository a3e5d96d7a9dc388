from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOSTNAME = "unknown"
DEFAULT_LOAD = "0.00"


class MetricsRecord(BaseModel):
    """Point-in-time snapshot of local host health.

    Field order is the wire order of the emitted line. ``uptime_seconds``
    serializes under the key ``uptime``.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str = DEFAULT_HOSTNAME
    uptime_seconds: int = Field(default=0, ge=0, serialization_alias="uptime")
    mem_total_kb: int = Field(default=0, ge=0)
    mem_free_kb: int = Field(default=0, ge=0)
    load_1m: str = DEFAULT_LOAD

from __future__ import annotations

from heartbeat.collectors.base import BaseCollector, Sink
from heartbeat.collectors.procfs import (
    read_loadavg,
    read_meminfo,
    read_uptime,
    resolve_hostname,
)
from heartbeat.config import HOSTNAME_PATH, LOADAVG_PATH, MEMINFO_PATH, UPTIME_PATH
from heartbeat.models.metrics import MetricsRecord


class HostMetricsCollector(BaseCollector):
    """Samples uptime, memory and load average for the local host.

    The hostname is resolved once at construction and reused for every
    record; every other field is read fresh each cycle.
    """

    name = "host_collector"

    def __init__(
        self,
        sink: Sink,
        interval: float | None = None,
        uptime_path: str = UPTIME_PATH,
        meminfo_path: str = MEMINFO_PATH,
        loadavg_path: str = LOADAVG_PATH,
        hostname_path: str = HOSTNAME_PATH,
    ) -> None:
        super().__init__(sink, interval=interval)
        self.uptime_path = uptime_path
        self.meminfo_path = meminfo_path
        self.loadavg_path = loadavg_path
        self.hostname = resolve_hostname(hostname_path)

    async def collect(self) -> MetricsRecord:
        return MetricsRecord(
            hostname=self.hostname,
            uptime_seconds=read_uptime(self.uptime_path),
            mem_total_kb=read_meminfo("MemTotal:", self.meminfo_path),
            mem_free_kb=read_meminfo("MemFree:", self.meminfo_path),
            load_1m=read_loadavg(self.loadavg_path),
        )

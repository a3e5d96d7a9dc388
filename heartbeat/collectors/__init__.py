from .base import BaseCollector
from .host_collector import HostMetricsCollector
from .procfs import read_loadavg, read_meminfo, read_uptime, resolve_hostname

__all__ = [
    "BaseCollector",
    "HostMetricsCollector",
    "read_loadavg",
    "read_meminfo",
    "read_uptime",
    "resolve_hostname",
]

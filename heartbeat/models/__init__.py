from .metrics import MetricsRecord

__all__ = [
    "MetricsRecord",
]

"""Minimal host-metrics sampler emitting one JSON line per cycle."""

__version__ = "0.1.0"

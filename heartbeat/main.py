from __future__ import annotations

import asyncio
import logging
import signal
import sys

from heartbeat.collectors import HostMetricsCollector
from heartbeat.config import Settings, settings
from heartbeat.engine import StdoutEmitter

logger = logging.getLogger(__name__)

_STOP_SIGNALS = (signal.SIGTERM, signal.SIGINT)


def build_collector(cfg: Settings) -> HostMetricsCollector:
    return HostMetricsCollector(StdoutEmitter(), interval=cfg.interval)


async def run(
    cfg: Settings = settings,
    collector: HostMetricsCollector | None = None,
) -> None:
    """Sample until SIGTERM or SIGINT is received."""
    if collector is None:
        collector = build_collector(cfg)
    stopping = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in _STOP_SIGNALS:
        loop.add_signal_handler(sig, stopping.set)

    # ── startup ───────────────────────────────────────
    await collector.start()
    logger.info("heartbeat running on host %s", collector.hostname)

    try:
        await stopping.wait()
    finally:
        # ── shutdown ──────────────────────────────────
        await collector.stop()
        for sig in _STOP_SIGNALS:
            loop.remove_signal_handler(sig)
        logger.info("heartbeat shut down")


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    asyncio.run(run())


if __name__ == "__main__":
    main()

from __future__ import annotations

import sys
from typing import TextIO

from heartbeat.models.metrics import MetricsRecord


def format_record(record: MetricsRecord) -> str:
    """Compact single-line JSON with the fixed field order and no trailing data."""
    return record.model_dump_json(by_alias=True)


class StdoutEmitter:
    """Writes one line per record and flushes so log collectors see it immediately."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, record: MetricsRecord) -> None:
        # sys.stdout looked up per call so redirection after construction is honored
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(format_record(record) + "\n")
        stream.flush()

    __call__ = emit

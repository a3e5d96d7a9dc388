from .emitter import StdoutEmitter, format_record

__all__ = [
    "StdoutEmitter",
    "format_record",
]

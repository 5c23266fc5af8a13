"""Models for replaycache."""

from .core import Record, TERMINAL, SourceKind, SourceHandle, is_terminal

__all__ = [
    "Record",
    "TERMINAL",
    "SourceKind",
    "SourceHandle",
    "is_terminal",
]

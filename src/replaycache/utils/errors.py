"""Exception types raised by replaycache."""

from typing import Any


class InvalidSourceError(TypeError):
    """Raised when a cache is built over an object that cannot be iterated."""

    def __init__(self, source: Any):
        self.source = source
        super().__init__(
            f"Argument must implement the iteration protocol "
            f"(got {type(source).__name__})."
        )

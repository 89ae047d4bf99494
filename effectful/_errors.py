from __future__ import annotations

class BuilderFinishedError(Exception):
    """Builder received an item after `finish()` was called."""

    builder: str

    def __init__(self, builder: str) -> None:
        self.builder = builder
        super().__init__(f"{builder} is already finished")

__all__ = ("BuilderFinishedError",)

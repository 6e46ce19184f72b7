"""Programmer-error exceptions raised by the reveal order store and renderer."""

from __future__ import annotations


class PreconditionViolation(RuntimeError):
    """An operation was called in a state or with inputs it does not accept."""


class DimensionMismatch(PreconditionViolation):
    """Reveal orders do not have the shape of the grid being rendered."""

    def __init__(self, width: int, height: int, detail: str) -> None:
        super().__init__(f"orders do not match a {width}x{height} grid: {detail}")
        self.width = width
        self.height = height

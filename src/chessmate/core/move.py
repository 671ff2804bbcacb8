"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmate.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """A relocation from one square to another; no capture metadata."""

    from_pos: Position
    to_pos: Position

    def __str__(self) -> str:
        return f"{self.from_pos.name}{self.to_pos.name}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse a coordinate pair, e.g. ``'e2e4'``."""
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(Position.from_name(text[:2]), Position.from_name(text[2:]))

"""Positions and axis-aligned rectangle overlap tests."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Position", "overlaps"]


@dataclass
class Position:
    """Top-left corner of a game object, in screen pixels."""

    x: int = 0
    y: int = 0

    def __iter__(self):
        yield self.x
        yield self.y


def overlaps(
    a: Position,
    a_width: int,
    a_height: int,
    b: Position,
    b_width: int,
    b_height: int,
) -> bool:
    """Return True if the two rectangles share any interior area.

    Rectangles that only touch along an edge do not overlap.
    """
    return (
        a.x < b.x + b_width
        and a.x + a_width > b.x
        and a.y < b.y + b_height
        and a.y + a_height > b.y
    )
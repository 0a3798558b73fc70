"""
AABB Collision
==============

Overlap test and side-of-impact hint between two axis-aligned boxes.

The side flags come from comparing top-left corners, not centers or
penetration depth, so a single hit can report more than one side
(e.g. LEFT | BOTTOM). Treat the result as "likely side(s) of impact".
"""

from enum import Flag
from typing import NamedTuple


class BoundingBox(NamedTuple):
    """Axis-aligned box: top-left corner plus size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class Side(Flag):
    """Side(s) of impact reported by collide(). NONE means no collision."""
    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8


def overlaps(a: BoundingBox, b: BoundingBox) -> bool:
    """Standard AABB overlap test (touching edges do not overlap)."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def collide(a: BoundingBox, b: BoundingBox) -> Side:
    """
    Compute the collision flags of box `a` against box `b`.

    Args:
        a: The moving (or reference) box
        b: The box being hit

    Returns:
        Side.NONE when the boxes do not overlap, otherwise the union of:
            LEFT   if a.x < b.x
            RIGHT  if a.x > b.x
            BOTTOM if a.y < b.y
            TOP    if a.y > b.y
        Boxes sharing the same top-left corner get all four flags.

    Example:
        >>> collide(BoundingBox(0, 0, 10, 10), BoundingBox(5, 5, 10, 10)) == Side.LEFT | Side.BOTTOM
        True
    """
    if not overlaps(a, b):
        return Side.NONE

    if a.x == b.x and a.y == b.y:
        return Side.LEFT | Side.RIGHT | Side.TOP | Side.BOTTOM

    sides = Side.NONE
    if a.x < b.x:
        sides |= Side.LEFT
    if a.x > b.x:
        sides |= Side.RIGHT

    if a.y < b.y:
        sides |= Side.BOTTOM
    if a.y > b.y:
        sides |= Side.TOP

    return sides

"""Triangular cell coordinates.

The board is a hexagon cut into triangles. Each rhombus ``(x, y)`` of the
underlying grid holds two triangles: the upward one (``r=False``) and the
downward one (``r=True``). Barycentric components are used for bounds and
edge tests; see :meth:`TriCoord.bary`.
"""

from __future__ import annotations

import pydantic


class TriCoord(pydantic.BaseModel):
    """Address of one triangular cell. Neighbours are not bounds-checked."""

    model_config = pydantic.ConfigDict(frozen=True)

    x: int
    y: int
    r: bool = False

    @classmethod
    def from_bary(cls, bary: tuple[int, int, int], hex_size: int) -> TriCoord:
        """Build a coordinate from barycentric components (inverse of bary)."""
        bx, by, bz = bary
        return cls(x=bx, y=by, r=bx + by + bz == hex_size * 3 - 2)

    def neighbors(self) -> list[TriCoord]:
        """Return the 3 edge-adjacent cells, all of the opposite orientation."""
        offset = 1 if self.r else -1
        flipped = not self.r
        return [
            TriCoord(x=self.x, y=self.y, r=flipped),
            TriCoord(x=self.x + offset, y=self.y, r=flipped),
            TriCoord(x=self.x, y=self.y + offset, r=flipped),
        ]

    def bary(self, hex_size: int) -> tuple[int, int, int]:
        """Return the barycentric triple used for bounds and edge tests."""
        return (self.x, self.y, hex_size * 3 - 1 - self.x - self.y - int(self.r))

    def tri_center(self, hex_size: int) -> tuple[float, float, float]:
        """Return the normalised barycentric centroid of the triangle.

        Only renderers need this; the three components sum to 1.
        """
        third = (1 + int(self.r)) / 3
        a = (self.x + third) / (hex_size * 3)
        b = (self.y + third) / (hex_size * 3)
        return (a, b, 1 - a - b)

"""Move and move-result schemas."""

from __future__ import annotations

import pydantic

from .coords import TriCoord


class Move(pydantic.BaseModel):
    """One piece placed by one player, as chosen by a player or a script."""

    model_config = pydantic.ConfigDict(frozen=True)

    coord: TriCoord
    player: int


class MoveResult(pydantic.BaseModel):
    """Outcome of applying a move through the game coordinator."""

    success: bool
    error_message: str | None = None
    # True if the move set off an explosion that is still resolving.
    exploded: bool = False

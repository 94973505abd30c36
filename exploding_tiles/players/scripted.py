"""Player that replays a fixed list of cells."""

from __future__ import annotations

import collections
from collections.abc import Iterable

from ..models import board, coords, moves
from . import base


class ScriptedPlayer(base.Player):
    """Plays the given cells in order, one per turn.

    Once the script is exhausted :meth:`poll` returns None forever, which
    stalls the game; callers stop ticking at that point.
    """

    def __init__(self, cells: Iterable[coords.TriCoord]) -> None:
        self._queue: collections.deque[coords.TriCoord] = collections.deque(cells)
        self._player_index = 0
        self._ready: coords.TriCoord | None = None

    @property
    def remaining(self) -> int:
        """Number of cells not yet played."""
        return len(self._queue) + (1 if self._ready is not None else 0)

    def start_turn(self, state: board.Board, player_index: int) -> None:
        self._player_index = player_index
        if self._ready is None and self._queue:
            self._ready = self._queue.popleft()

    def selected(self) -> coords.TriCoord:
        if self._ready is not None:
            return self._ready
        return coords.TriCoord(x=0, y=0)

    def poll(self) -> moves.Move | None:
        if self._ready is None:
            return None
        move = moves.Move(coord=self._ready, player=self._player_index)
        self._ready = None
        return move

"""Pointer-driven human player.

Relays "pointer moved" and "pointer confirmed" events from whatever UI is
hosting the game. A confirmed cell is surfaced by :meth:`poll` once and
then cleared.
"""

from __future__ import annotations

from ..models import board, coords, moves
from . import base


class PointerPlayer(base.Player):
    """Human player fed by pointer events."""

    def __init__(self) -> None:
        self._player_index = 0
        self._hover = coords.TriCoord(x=0, y=0)
        self._confirmed: coords.TriCoord | None = None

    @property
    def is_pointer_controlled(self) -> bool:
        return True

    def start_turn(self, state: board.Board, player_index: int) -> None:
        """Remember whose turn it is and drop any stale confirmation."""
        self._player_index = player_index
        self._confirmed = None

    def selected(self) -> coords.TriCoord:
        return self._hover

    def poll(self) -> moves.Move | None:
        if self._confirmed is None:
            return None
        move = moves.Move(coord=self._confirmed, player=self._player_index)
        self._confirmed = None
        return move

    def on_pointer_move(self, coord: coords.TriCoord) -> None:
        self._hover = coord

    def on_pointer_confirm(self, coord: coords.TriCoord) -> None:
        self._hover = coord
        self._confirmed = coord

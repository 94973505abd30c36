"""Abstract base class for Exploding Tiles players."""

from __future__ import annotations

import abc

from ..models import board, coords, moves


class Player(abc.ABC):
    """A source of moves for one seat at the table.

    The game coordinator calls :meth:`start_turn` when the seat becomes
    active and then calls :meth:`poll` once per tick until it returns a
    move. Pointer events are forwarded to every player; only interactive
    players act on them.
    """

    @abc.abstractmethod
    def start_turn(self, state: board.Board, player_index: int) -> None:
        """Prepare a move for *player_index* on *state*.

        The board must be treated as read-only.
        """

    @abc.abstractmethod
    def selected(self) -> coords.TriCoord:
        """Return the currently highlighted cell, for UI feedback only."""

    @abc.abstractmethod
    def poll(self) -> moves.Move | None:
        """Return the committed move exactly once, or None if not ready."""

    @property
    def is_pointer_controlled(self) -> bool:
        """True for players driven by pointer events."""
        return False

    @property
    def is_waiting(self) -> bool:
        """True while a move has been chosen but is not yet handed over by :meth:`poll`."""
        return False

    def on_pointer_move(self, coord: coords.TriCoord) -> None:
        """Handle the pointer moving over *coord*. Ignored by default."""

    def on_pointer_confirm(self, coord: coords.TriCoord) -> None:
        """Handle the pointer confirming *coord*. Ignored by default."""

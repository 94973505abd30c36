"""Exploding Tiles rules helpers.

Legal-move enumeration and the per-cell predicates shared by players and
the AI filters.
"""

from __future__ import annotations

from ..models import board, coords


def can_place(state: board.Board, coord: coords.TriCoord, player: int) -> bool:
    """Return True if *player* may place a piece on *coord* as a normal move."""
    if not state.in_bounds(coord):
        return False
    owner = state[coord].player
    return owner is None or owner == player


def legal_moves(state: board.Board, player: int) -> list[coords.TriCoord]:
    """Return every cell *player* may play, in board iteration order.

    A cell is playable when it is empty or already owned by *player*.
    """
    return [c for c in state.iter_tiles() if can_place(state, c, player)]


def is_critical_for(
    state: board.Board, coord: coords.TriCoord, player: int
) -> bool:
    """Return True if *coord* is an opponent cell one piece from exploding.

    From *player*'s point of view such a cell threatens all its neighbours.
    """
    owner = state[coord].player
    return owner is not None and owner != player and state.is_at_capacity(coord)


def has_critical_neighbor(
    state: board.Board, coord: coords.TriCoord, player: int
) -> bool:
    """Return True if any in-bounds neighbour of *coord* is critical for *player*."""
    return any(is_critical_for(state, n, player) for n in coord.neighbors())

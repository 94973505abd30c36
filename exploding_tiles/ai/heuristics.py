"""Fitness functions scored on the board reached after a simulated move.

All take ``(board, player, steps)`` as described in
:data:`exploding_tiles.ai.base.Fitness`. The union-find chain heuristic
lives in :mod:`exploding_tiles.ai.chain`.
"""

from __future__ import annotations

from ..engine import rules
from ..models import board

# Score reported for a board that is already won by the player.
WIN_SCORE = 2**31 - 1

# Positional weights.
_OWNED_PIECE = 1
_THREATENED_PIECE = -3
_SAFE_FULL_CELL = 2


def ownership_fitness(state: board.Board, player: int, steps: int) -> int:
    """Pieces owned by *player* once the cascade has settled."""
    return state.total(player)


def cascade_length_fitness(state: board.Board, player: int, steps: int) -> int:
    """Number of cascade generations the move set off."""
    return steps


def positional_fitness(state: board.Board, player: int, steps: int) -> int:
    """Score owned cells by how safe and how loaded they are.

    Every owned piece counts for the player; pieces next to an opponent
    cell that is one piece from exploding count against them, and full
    cells with no such neighbour earn a bonus. A won board scores
    :data:`WIN_SCORE`.
    """
    if state.is_won() == player:
        return WIN_SCORE
    score = 0
    for coord in state.iter_tiles():
        tile = state[coord]
        if tile.player != player:
            continue
        score += _OWNED_PIECE * tile.num
        if rules.has_critical_neighbor(state, coord, player):
            score += _THREATENED_PIECE * tile.num
        elif tile.num == state.allowed_pieces(coord):
            score += _SAFE_FULL_CELL
    return score

"""Candidate filters built from per-cell predicates."""

from __future__ import annotations

from ..engine import rules
from ..models import board, coords
from . import base


def include(predicate: base.CellPredicate) -> base.Filter:
    """Lift a per-cell predicate into a filter that keeps matching cells."""

    def keep(
        state: board.Board, candidates: base.Candidates, player: int
    ) -> base.Candidates:
        return [c for c in candidates if predicate(state, c, player)]

    return keep


def is_at_capacity(state: board.Board, coord: coords.TriCoord, player: int) -> bool:
    """True if playing *coord* would make it explode."""
    return state.is_at_capacity(coord)


def is_not_next_to_exploding(
    state: board.Board, coord: coords.TriCoord, player: int
) -> bool:
    """True if no opponent cell next to *coord* is one piece from exploding."""
    return not rules.has_critical_neighbor(state, coord, player)


at_capacity = include(is_at_capacity)
not_next_to_exploding = include(is_not_next_to_exploding)

"""Contracts for the composable move-selection framework.

Strategies are plain callables composed with the helpers in
:mod:`exploding_tiles.ai.combinators`:

- A **Filter** narrows a candidate list (possibly to nothing).
- A **Fitness** scores the board reached after one simulated move and the
  cascade it set off.
- A **Strategy** picks one candidate, or None to let a fallback try.
"""

from __future__ import annotations

from collections.abc import Callable

from ..models import board, coords

Candidates = list[coords.TriCoord]

# (board, candidates, player) -> subset of candidates, in their original order.
Filter = Callable[[board.Board, Candidates, int], Candidates]

# (board after the simulated move, player, cascade steps consumed) -> score.
Fitness = Callable[[board.Board, int, int], int]

# (board, candidates, player) -> chosen candidate, or None.
Strategy = Callable[[board.Board, Candidates, int], coords.TriCoord | None]

# (board, cell, player) -> keep this cell?
CellPredicate = Callable[[board.Board, coords.TriCoord, int], bool]

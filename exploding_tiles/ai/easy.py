"""Easy (random) AI.

Plays a uniformly random legal move. Useful as a baseline opponent and
for stress-testing the game engine.
"""

from __future__ import annotations

import random

from . import combinators, player


class EasyAI(player.AIPlayer):
    """Random-move AI: picks uniformly among the legal moves."""

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        delay_ticks: int | None = None,
    ) -> None:
        """Use *rng* if given, otherwise a new generator seeded with *seed*."""
        self.rng = rng if rng is not None else random.Random(seed)
        super().__init__(combinators.random_ai(self.rng), delay_ticks)

"""Medium AIs built from cheap filters.

- **MediumAI**: set off an explosion if possible, otherwise stay away from
  opponent cells that are about to explode, otherwise play randomly.
- **ExplosiveAI**: play the move whose cascade runs the most generations,
  otherwise play randomly.
"""

from __future__ import annotations

import random

from . import base, combinators, filters, heuristics, player


def medium_strategy(rng: random.Random) -> base.Strategy:
    """Explode, else avoid critical neighbours, else random."""
    pick = combinators.random_ai(rng)
    return combinators.first_success(
        combinators.filtered(filters.at_capacity, pick),
        combinators.filtered(filters.not_next_to_exploding, pick),
        pick,
    )


def explosive_strategy(rng: random.Random) -> base.Strategy:
    """Longest cascade among exploding moves, else random."""
    pick = combinators.random_ai(rng)
    longest = combinators.max_fitness(heuristics.cascade_length_fitness)
    return combinators.first_success(
        combinators.filtered(filters.at_capacity, combinators.filtered(longest, pick)),
        pick,
    )


class MediumAI(player.AIPlayer):
    """Filter-based AI; see :func:`medium_strategy`."""

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        delay_ticks: int | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        super().__init__(medium_strategy(self.rng), delay_ticks)


class ExplosiveAI(player.AIPlayer):
    """Cascade-maximising AI; see :func:`explosive_strategy`."""

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        delay_ticks: int | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        super().__init__(explosive_strategy(self.rng), delay_ticks)

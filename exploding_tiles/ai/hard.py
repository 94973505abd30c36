"""Hard AIs that simulate every candidate move.

- **PositionalAI**: maximise the positional score of the settled board.
- **HardAI**: among exploding moves, take the one that leaves the most
  pieces owned; with no explosion available, maximise the union-find chain
  score; random as the last resort.
"""

from __future__ import annotations

import random

from . import base, chain, combinators, filters, heuristics, player


def positional_strategy(rng: random.Random) -> base.Strategy:
    """Best positional score, random among ties, random as fallback."""
    pick = combinators.random_ai(rng)
    best = combinators.max_fitness(heuristics.positional_fitness)
    return combinators.first_success(combinators.filtered(best, pick), pick)


def hard_strategy(rng: random.Random) -> base.Strategy:
    """Greedy capture, else best chain score, else random."""
    pick = combinators.random_ai(rng)
    most_owned = combinators.max_fitness(heuristics.ownership_fitness)
    best_chain = combinators.max_fitness(chain.chain_fitness)
    return combinators.first_success(
        combinators.filtered(
            filters.at_capacity, combinators.filtered(most_owned, pick)
        ),
        combinators.filtered(best_chain, pick),
        pick,
    )


class PositionalAI(player.AIPlayer):
    """Positional look-ahead AI; see :func:`positional_strategy`."""

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        delay_ticks: int | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        super().__init__(positional_strategy(self.rng), delay_ticks)


class HardAI(player.AIPlayer):
    """Capture-then-chain AI; see :func:`hard_strategy`."""

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        delay_ticks: int | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        super().__init__(hard_strategy(self.rng), delay_ticks)

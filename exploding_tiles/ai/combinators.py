"""Combinators that build AI strategies out of filters and fitness functions."""

from __future__ import annotations

import random

from .. import settings
from ..models import board, coords
from . import base


def random_ai(rng: random.Random) -> base.Strategy:
    """Return a strategy that picks uniformly among the candidates.

    The random source is supplied by the caller so several strategies (or
    players) can share one generator.
    """

    def choose(
        state: board.Board, candidates: base.Candidates, player: int
    ) -> coords.TriCoord | None:
        if not candidates:
            return None
        return rng.choice(candidates)

    return choose


def filtered(move_filter: base.Filter, then: base.Strategy) -> base.Strategy:
    """Apply *move_filter*, then let *then* choose among what is left.

    Yields no move if the filter leaves nothing, so a fallback can run.
    """

    def choose(
        state: board.Board, candidates: base.Candidates, player: int
    ) -> coords.TriCoord | None:
        kept = move_filter(state, candidates, player)
        if not kept:
            return None
        return then(state, kept, player)

    return choose


def first_success(*strategies: base.Strategy) -> base.Strategy:
    """Try *strategies* left to right and return the first move found.

    The last strategy should be total (e.g. :func:`random_ai`) so that a
    move is always found when one exists.
    """
    if not strategies:
        raise ValueError('first_success needs at least one strategy')

    def choose(
        state: board.Board, candidates: base.Candidates, player: int
    ) -> coords.TriCoord | None:
        for strategy in strategies:
            move = strategy(state, candidates, player)
            if move is not None:
                return move
        return None

    return choose


def play_out(
    state: board.Board,
    coord: coords.TriCoord,
    player: int,
    max_steps: int | None = None,
) -> tuple[board.Board, int]:
    """Simulate *coord* on a clone of *state* and run its cascade.

    The cascade runs until the board is quiet, the game is won, or
    *max_steps* generations have been resolved (default
    ``settings.MAX_CASCADE_STEPS``). Returns the resulting board and the
    number of generations resolved. *state* is never modified.
    """
    budget = settings.MAX_CASCADE_STEPS if max_steps is None else max_steps
    trial = state.clone()
    trial.place(coord, player)
    steps = 0
    while trial.needs_update() and trial.is_won() is None and steps < budget:
        trial.update_step()
        steps += 1
    return trial, steps


def max_fitness(fitness: base.Fitness, max_steps: int | None = None) -> base.Filter:
    """Return a filter keeping the candidates whose play-out scores highest.

    Ties are all kept, in their original order.
    """

    def keep_best(
        state: board.Board, candidates: base.Candidates, player: int
    ) -> base.Candidates:
        best: base.Candidates = []
        best_score: int | None = None
        for coord in candidates:
            trial, steps = play_out(state, coord, player, max_steps)
            score = fitness(trial, player, steps)
            if best_score is None or score > best_score:
                best_score = score
                best = [coord]
            elif score == best_score:
                best.append(coord)
        return best

    return keep_best

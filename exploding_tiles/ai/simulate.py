"""AI vs AI simulation runner.

Play full games between AI players and report:

- Win counts by seat
- Average game length (in ticks)
- Games that hit the tick cap without a winner

Usage::

    python -m exploding_tiles.ai.simulate --games 100 --ai medium hard

By default runs 50 games on a size-3 board, MediumAI against HardAI.
"""

from __future__ import annotations

import argparse
import enum
import logging
import random
import sys
import time

from .. import log, settings
from ..engine import game
from . import easy, hard, medium, player

logger = logging.getLogger(__name__)


class Difficulty(enum.StrEnum):
    """Names accepted by ``--ai``."""

    EASY = 'easy'
    MEDIUM = 'medium'
    EXPLOSIVE = 'explosive'
    POSITIONAL = 'positional'
    HARD = 'hard'


_AI_CLASSES: dict[Difficulty, type[player.AIPlayer]] = {
    Difficulty.EASY: easy.EasyAI,
    Difficulty.MEDIUM: medium.MediumAI,
    Difficulty.EXPLOSIVE: medium.ExplosiveAI,
    Difficulty.POSITIONAL: hard.PositionalAI,
    Difficulty.HARD: hard.HardAI,
}

_DEFAULT_NUM_GAMES = 50
_DEFAULT_AI_TYPES = [Difficulty.MEDIUM, Difficulty.HARD]


# ---------------------------------------------------------------------------
# Game runner
# ---------------------------------------------------------------------------


def make_ais(ai_types: list[str], seed: int | None = 0) -> list[player.AIPlayer]:
    """Create one AI per entry of *ai_types*, sharing one seeded generator.

    Raises:
        ValueError: If a name is not a known difficulty.
    """
    rng = random.Random(seed)
    result: list[player.AIPlayer] = []
    for name in ai_types:
        try:
            cls = _AI_CLASSES[Difficulty(name)]
        except ValueError:
            raise ValueError(f'Unknown AI type: {name!r}') from None
        result.append(cls(rng=rng, delay_ticks=0))
    return result


def run_one_game(
    ais: list[player.AIPlayer],
    size: int | None = None,
    max_ticks: int | None = None,
) -> tuple[int | None, int]:
    """Play a single game to completion and return (winner, tick_count).

    Ticks spent while an AI holds back its move for its presentation delay
    are counted. Returns ``(None, tick_count)`` if the game stalled or hit
    *max_ticks* (default ``settings.MAX_TICKS_PER_GAME``).
    """
    cap = settings.MAX_TICKS_PER_GAME if max_ticks is None else max_ticks
    g = game.Game(size=size, players=ais)
    ticks = 0
    while ticks < cap:
        winner = g.winner()
        if winner is not None:
            return winner, ticks
        if not g.tick() and not g.current_player.is_waiting:
            # Nobody could move.
            return None, ticks
        ticks += 1
    return g.winner(), ticks


# ---------------------------------------------------------------------------
# Statistics helper
# ---------------------------------------------------------------------------


def _print_report(
    ai_types: list[str],
    wins: list[int],
    tick_counts: list[int],
    timeouts: int,
    num_games: int,
    elapsed: float,
) -> None:
    """Print a summary report to stdout."""
    total_finished = num_games - timeouts
    print('=' * 50)
    print('Exploding Tiles AI Simulation Results')
    print('=' * 50)
    print(f'Games played:    {num_games}')
    print(f'Games finished:  {total_finished}')
    print(f'Timed out:       {timeouts}')
    print(f'Elapsed:         {elapsed:.1f}s')
    if tick_counts:
        avg_ticks = sum(tick_counts) / len(tick_counts)
        print(f'Avg ticks/game:  {avg_ticks:.1f}')
    print()
    print('Wins by seat:')
    for i, name in enumerate(ai_types):
        pct = (wins[i] / total_finished * 100) if total_finished > 0 else 0.0
        print(f'  Player {i} ({name}): {wins[i]:4d} wins  ({pct:.1f}%)')
    print('=' * 50)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def run_simulation(
    num_games: int = _DEFAULT_NUM_GAMES,
    ai_types: list[str] | None = None,
    size: int | None = None,
    seed: int = 0,
    verbose: bool = False,
) -> dict[str, object]:
    """Run *num_games* simulated games and return a results dict.

    The same AI instances play every game; the board is reset in between.

    Returns a dict with keys:
    - ``wins``: list of win counts per seat.
    - ``tick_counts``: list of ticks per completed game.
    - ``timeouts``: number of games without a winner.
    - ``elapsed``: total wall-clock time in seconds.
    """
    types = list(ai_types) if ai_types else [str(t) for t in _DEFAULT_AI_TYPES]
    ais = make_ais(types, seed=seed)
    wins = [0] * len(ais)
    tick_counts: list[int] = []
    timeouts = 0

    t0 = time.monotonic()
    for game_idx in range(num_games):
        winner, ticks = run_one_game(ais, size=size)
        if winner is None:
            timeouts += 1
        else:
            wins[winner] += 1
            tick_counts.append(ticks)
        if verbose:
            status = f'winner={winner}' if winner is not None else 'TIMEOUT'
            logger.info('game %4d: %s (%d ticks)', game_idx + 1, status, ticks)
    elapsed = time.monotonic() - t0

    _print_report(types, wins, tick_counts, timeouts, num_games, elapsed)
    return {
        'wins': wins,
        'tick_counts': tick_counts,
        'timeouts': timeouts,
        'elapsed': elapsed,
    }


def _parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description='Exploding Tiles AI simulation runner')
    parser.add_argument(
        '--games', type=int, default=_DEFAULT_NUM_GAMES, help='Number of games to run'
    )
    parser.add_argument(
        '--size', type=int, default=settings.BOARD_SIZE, help='Board edge length'
    )
    parser.add_argument(
        '--ai',
        nargs='+',
        choices=[str(d) for d in Difficulty],
        default=[str(d) for d in _DEFAULT_AI_TYPES],
        help='AI type for each seat, in turn order',
    )
    parser.add_argument('--seed', type=int, default=0, help='RNG seed')
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Log per-game results'
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    log.configure_logging(settings.LOG_LEVEL)
    run_simulation(
        num_games=args.games,
        ai_types=args.ai,
        size=args.size,
        seed=args.seed,
        verbose=args.verbose,
    )


if __name__ == '__main__':
    main()

"""Scripted move sequences used by the tutorials.

A sequence is a literal list of moves plus an optional setup applied before
play. Replaying it through :meth:`Board.place` and
:meth:`Board.update_step` always produces the same boards, independent of
any animation layer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pydantic

from .. import settings
from ..models import board, coords
from ..models import moves as moves_module
from ..players import scripted
from . import game

logger = logging.getLogger(__name__)


class ScriptedSequence(pydantic.BaseModel):
    """A named, replayable list of moves on a board of fixed size."""

    name: str
    board_size: int = pydantic.Field(ge=1)
    setup: list[moves_module.Move] = pydantic.Field(default_factory=list)
    moves: list[moves_module.Move]

    @pydantic.model_validator(mode='after')
    def _check_bounds(self) -> ScriptedSequence:
        probe = board.Board(self.board_size)
        for move in [*self.setup, *self.moves]:
            if not probe.in_bounds(move.coord):
                raise ValueError(
                    f'{self.name}: {move.coord} is outside a board of size {self.board_size}'
                )
        return self

    @property
    def player_count(self) -> int:
        """Number of seats the script needs."""
        return 1 + max((m.player for m in [*self.setup, *self.moves]), default=0)


def _settle(state: board.Board) -> int:
    """Run cascades until the board is quiet or decided; return the steps."""
    steps = 0
    while state.needs_update() and state.is_won() is None:
        if steps >= settings.MAX_CASCADE_STEPS:
            raise ValueError('Scripted cascade exceeded the step budget')
        state.update_step()
        steps += 1
    return steps


def _place(state: board.Board, move: moves_module.Move) -> None:
    if not state.place(move.coord, move.player):
        raise ValueError(f'Scripted move {move} is not playable')


def initial_board(sequence: ScriptedSequence) -> board.Board:
    """Return the board after the setup moves and their cascades."""
    state = board.Board(sequence.board_size)
    for move in sequence.setup:
        _place(state, move)
        _settle(state)
    return state


def replay(sequence: ScriptedSequence) -> Iterator[board.Board]:
    """Yield a snapshot of the board after every observable change.

    The first snapshot is the set-up board; then one follows each placement
    and each cascade generation.
    """
    state = initial_board(sequence)
    yield state.clone()
    for move in sequence.moves:
        logger.debug('%s: player %d plays %s', sequence.name, move.player, move.coord)
        _place(state, move)
        yield state.clone()
        steps = 0
        while state.needs_update() and state.is_won() is None:
            if steps >= settings.MAX_CASCADE_STEPS:
                raise ValueError('Scripted cascade exceeded the step budget')
            state.update_step()
            steps += 1
            yield state.clone()


def final_board(sequence: ScriptedSequence) -> board.Board:
    """Return the board once the whole sequence has been played."""
    last = None
    for last in replay(sequence):
        pass
    assert last is not None
    return last


def start_game(sequence: ScriptedSequence) -> game.Game:
    """Build a game whose seats replay the sequence's moves.

    The moves must alternate seats in turn order (a player whose move
    explodes keeps the turn until the cascade settles).
    """
    cells: list[list[coords.TriCoord]] = [[] for _ in range(sequence.player_count)]
    for move in sequence.moves:
        cells[move.player].append(move.coord)
    g = game.Game(
        size=sequence.board_size,
        players=[scripted.ScriptedPlayer(c) for c in cells],
    )
    g.setup(sequence.setup)
    return g


# ---------------------------------------------------------------------------
# Built-in tutorials
# ---------------------------------------------------------------------------


def _m(x: int, y: int, r: bool, player: int) -> moves_module.Move:
    return moves_module.Move(coord=coords.TriCoord(x=x, y=y, r=r), player=player)


TUTORIALS: dict[str, ScriptedSequence] = {
    'basics': ScriptedSequence(
        name='basics',
        board_size=2,
        moves=[_m(1, 1, False, 0), _m(2, 1, True, 1), _m(1, 1, False, 0)],
    ),
    'explosion': ScriptedSequence(
        name='explosion',
        board_size=2,
        moves=[_m(0, 2, False, 0), _m(2, 1, False, 1), _m(0, 2, False, 0)],
    ),
    'takeover': ScriptedSequence(
        name='takeover',
        board_size=2,
        setup=[_m(1, 1, True, 1), _m(1, 1, False, 0), _m(1, 1, False, 0)],
        moves=[_m(1, 1, False, 0)],
    ),
    'chain': ScriptedSequence(
        name='chain',
        board_size=2,
        setup=[
            _m(1, 1, True, 0),
            _m(1, 1, True, 0),
            _m(1, 1, False, 0),
            _m(1, 1, False, 0),
            _m(2, 1, False, 1),
        ],
        moves=[_m(1, 1, False, 0)],
    ),
}

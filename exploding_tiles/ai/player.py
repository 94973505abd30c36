"""Adapter turning a move-selection strategy into a seat at the table."""

from __future__ import annotations

import logging

from .. import settings
from ..engine import rules
from ..models import board, coords, moves
from ..players import base as player_base
from . import base

logger = logging.getLogger(__name__)


class AIPlayer(player_base.Player):
    """Player that runs *strategy* over the legal moves at the start of each turn.

    The chosen move is available from :meth:`selected` straight away and is
    handed to the game by :meth:`poll` after ``delay_ticks`` empty polls.
    """

    def __init__(self, strategy: base.Strategy, delay_ticks: int | None = None) -> None:
        self._strategy = strategy
        self._delay_ticks = settings.AI_DELAY_TICKS if delay_ticks is None else delay_ticks
        self._wait = 0
        self._chosen: moves.Move | None = None
        self._last = coords.TriCoord(x=0, y=0)

    def start_turn(self, state: board.Board, player_index: int) -> None:
        candidates = rules.legal_moves(state, player_index)
        coord = self._strategy(state, candidates, player_index)
        if coord is None:
            self._chosen = None
            if candidates:
                logger.warning(
                    'Strategy for player %d found no move among %d candidates',
                    player_index,
                    len(candidates),
                )
            return
        logger.debug(
            'Player %d picked %s from %d candidates', player_index, coord, len(candidates)
        )
        self._chosen = moves.Move(coord=coord, player=player_index)
        self._last = coord
        self._wait = self._delay_ticks

    @property
    def is_waiting(self) -> bool:
        return self._chosen is not None

    def selected(self) -> coords.TriCoord:
        return self._last

    def poll(self) -> moves.Move | None:
        if self._chosen is None:
            return None
        if self._wait > 0:
            self._wait -= 1
            return None
        move, self._chosen = self._chosen, None
        return move

"""Exploding Tiles game coordinator.

Sequences turns between players, applies their moves to the board and
drives explosions to quiescence one generation per tick.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .. import settings
from ..models import board, coords, moves
from ..players import base as player_base

logger = logging.getLogger(__name__)


class Game:
    """One board plus the players taking turns on it.

    Each call to :meth:`tick` does at most one thing: resolve one cascade
    generation if explosions are pending, otherwise ask the current player
    for a move and apply it. The turn passes only once the board is quiet.
    """

    def __init__(
        self,
        size: int | None = None,
        players: Iterable[player_base.Player] = (),
    ) -> None:
        self._board = board.Board(settings.BOARD_SIZE if size is None else size)
        self._current = 0
        self._players: list[player_base.Player] = []
        self._winner_logged = False
        for p in players:
            self.add_player(p)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def add_player(self, player: player_base.Player) -> None:
        """Seat *player*; the first seated player starts immediately."""
        self._players.append(player)
        if len(self._players) == 1:
            player.start_turn(self._board, 0)

    def setup(self, initial: Iterable[moves.Move]) -> None:
        """Apply *initial* moves before play, settling each one's cascade.

        Turn order is unchanged; the current player is asked to plan again
        against the new board.

        Raises:
            ValueError: If a setup move is not playable.
        """
        for move in initial:
            if not self._board.place(move.coord, move.player):
                raise ValueError(f'Setup move {move} is not playable')
            steps = 0
            while self._board.needs_update() and self._board.is_won() is None:
                if steps >= settings.MAX_CASCADE_STEPS:
                    raise ValueError('Setup cascade exceeded the step budget')
                self._board.update_step()
                steps += 1
        if self._players:
            self.current_player.start_turn(self._board, self._current)

    def reset(self) -> None:
        """Clear the board at the same size and restart from player 0."""
        if not self._players:
            raise ValueError('Cannot reset a game with no players')
        self._board = board.Board(self._board.size)
        self._current = 0
        self._winner_logged = False
        logger.info('Game reset (size=%d, players=%d)', self._board.size, len(self._players))
        self._players[0].start_turn(self._board, 0)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def board(self) -> board.Board:
        """The live board. Callers must not mutate it."""
        return self._board

    @property
    def current_player_index(self) -> int:
        return self._current

    @property
    def current_player(self) -> player_base.Player:
        return self._players[self._current]

    @property
    def player_count(self) -> int:
        return len(self._players)

    def winner(self) -> int | None:
        """Return the winning player id, if the game is decided."""
        return self._board.is_won()

    @property
    def is_over(self) -> bool:
        """True once a player has won.

        A winning cascade is not resolved further, so the board may still
        report pending explosions after the game is over.
        """
        return self._board.is_won() is not None

    # ------------------------------------------------------------------
    # Turn sequencing
    # ------------------------------------------------------------------

    def apply_move(self, coord: coords.TriCoord) -> moves.MoveResult:
        """Play *coord* for the current player.

        An invalid move leaves the board untouched and the same player to
        move; the player is asked for a fresh move.
        """
        if self._board.needs_update():
            return moves.MoveResult(
                success=False, error_message='Explosions are still resolving'
            )
        if not self._board.place(coord, self._current):
            logger.debug('Player %d move %s rejected', self._current, coord)
            self.current_player.start_turn(self._board, self._current)
            return moves.MoveResult(
                success=False,
                error_message=f'Cell ({coord.x}, {coord.y}, {coord.r}) is not playable',
            )

        logger.debug('Player %d played %s', self._current, coord)
        if self._board.needs_update():
            return moves.MoveResult(success=True, exploded=True)
        self._next_player()
        return moves.MoveResult(success=True)

    def tick(self) -> bool:
        """Advance the game by one step; return False if nothing happened.

        A decided game no longer advances, even if explosions are pending.
        """
        if not self._players:
            raise ValueError('Cannot tick a game with no players')
        if self.is_over:
            return False

        if self._board.needs_update():
            self._board.update_step()
            logger.debug('Cascade step, %d cells pending', len(self._board.pending()))
            if not self._board.needs_update():
                self._next_player()
            self._log_winner()
            return True

        move = self.current_player.poll()
        if move is None:
            return False
        self.apply_move(move.coord)
        self._log_winner()
        return True

    def pointer_moved(self, coord: coords.TriCoord) -> None:
        """Forward a pointer hover to the current player if it takes pointer input."""
        if not self._players or not self.current_player.is_pointer_controlled:
            return
        self.current_player.on_pointer_move(coord)

    def pointer_confirmed(self, coord: coords.TriCoord) -> None:
        """Forward a pointer click to an interactive current player while the board is quiet."""
        if not self._players or not self.current_player.is_pointer_controlled:
            return
        if self._board.needs_update():
            return
        self.current_player.on_pointer_confirm(coord)

    def _next_player(self) -> None:
        self._current = (self._current + 1) % len(self._players)
        logger.debug('Turn passes to player %d', self._current)
        self._players[self._current].start_turn(self._board, self._current)

    def _log_winner(self) -> None:
        winner = self._board.is_won()
        if winner is not None and not self._winner_logged:
            self._winner_logged = True
            logger.info('Player %d wins with %d pieces', winner, self._board.total(winner))

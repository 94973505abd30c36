"""Unit tests for the AI player adapter."""

from __future__ import annotations

import unittest

from exploding_tiles.ai import base, player
from exploding_tiles.engine import rules
from exploding_tiles.models import board, coords
from exploding_tiles.models.coords import TriCoord


def _first(
    state: board.Board, candidates: base.Candidates, player_index: int
) -> coords.TriCoord | None:
    return candidates[0] if candidates else None


def _never(
    state: board.Board, candidates: base.Candidates, player_index: int
) -> coords.TriCoord | None:
    return None


class TestAIPlayer(unittest.TestCase):
    """Move selection and delayed hand-off."""

    def setUp(self) -> None:
        self.board = board.Board(2)

    def test_strategy_sees_legal_moves(self) -> None:
        seen: list[base.Candidates] = []

        def spy(
            state: board.Board, candidates: base.Candidates, player_index: int
        ) -> coords.TriCoord | None:
            seen.append(candidates)
            return candidates[0]

        self.board.place(TriCoord(x=1, y=1, r=False), 1)
        ai = player.AIPlayer(spy, delay_ticks=0)
        ai.start_turn(self.board, 0)
        self.assertEqual(seen, [rules.legal_moves(self.board, 0)])

    def test_move_is_polled_once(self) -> None:
        ai = player.AIPlayer(_first, delay_ticks=0)
        ai.start_turn(self.board, 1)
        move = ai.poll()
        assert move is not None
        self.assertEqual(move.player, 1)
        self.assertEqual(move.coord, ai.selected())
        self.assertIsNone(ai.poll())

    def test_delay_withholds_move(self) -> None:
        ai = player.AIPlayer(_first, delay_ticks=2)
        ai.start_turn(self.board, 0)
        self.assertIsNone(ai.poll())
        self.assertIsNone(ai.poll())
        self.assertIsNotNone(ai.poll())

    def test_is_waiting_until_handed_over(self) -> None:
        ai = player.AIPlayer(_first, delay_ticks=1)
        self.assertFalse(ai.is_waiting)
        ai.start_turn(self.board, 0)
        self.assertTrue(ai.is_waiting)
        self.assertIsNone(ai.poll())
        self.assertTrue(ai.is_waiting)
        self.assertIsNotNone(ai.poll())
        self.assertFalse(ai.is_waiting)

    def test_not_waiting_without_a_pick(self) -> None:
        ai = player.AIPlayer(_never, delay_ticks=3)
        with self.assertLogs('exploding_tiles.ai.player', level='WARNING'):
            ai.start_turn(self.board, 0)
        self.assertFalse(ai.is_waiting)

    def test_selection_visible_before_poll(self) -> None:
        ai = player.AIPlayer(_first, delay_ticks=5)
        ai.start_turn(self.board, 0)
        self.assertEqual(ai.selected(), rules.legal_moves(self.board, 0)[0])

    def test_no_pick_logs_warning(self) -> None:
        ai = player.AIPlayer(_never, delay_ticks=0)
        with self.assertLogs('exploding_tiles.ai.player', level='WARNING'):
            ai.start_turn(self.board, 0)
        self.assertIsNone(ai.poll())

    def test_not_pointer_controlled(self) -> None:
        self.assertFalse(player.AIPlayer(_first).is_pointer_controlled)


if __name__ == '__main__':
    unittest.main()

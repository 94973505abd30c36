"""Unit tests for the rules helpers."""

from __future__ import annotations

import unittest

from exploding_tiles.engine import rules
from exploding_tiles.models import board
from exploding_tiles.models.coords import TriCoord

_INNER_UP = TriCoord(x=1, y=1, r=False)
_INNER_DOWN = TriCoord(x=1, y=1, r=True)


class TestLegalMoves(unittest.TestCase):
    """Tests for can_place and legal_moves."""

    def test_empty_board_all_cells_legal(self) -> None:
        """Every cell is playable on an empty board."""
        b = board.Board(2)
        self.assertEqual(rules.legal_moves(b, 0), list(b.iter_tiles()))

    def test_opponent_cells_excluded(self) -> None:
        """Cells owned by someone else are not playable."""
        b = board.Board(2)
        b.place(_INNER_UP, 1)
        self.assertNotIn(_INNER_UP, rules.legal_moves(b, 0))
        self.assertIn(_INNER_UP, rules.legal_moves(b, 1))
        self.assertEqual(len(rules.legal_moves(b, 0)), 23)

    def test_can_place_out_of_bounds(self) -> None:
        """Off-board cells are never playable."""
        b = board.Board(1)
        self.assertFalse(rules.can_place(b, TriCoord(x=0, y=0, r=False), 0))


class TestThreats(unittest.TestCase):
    """Tests for the critical-cell predicates."""

    def setUp(self) -> None:
        """Player 1 fills an interior cell to capacity."""
        self.board = board.Board(2)
        self.board.place(_INNER_DOWN, 1)
        self.board.place(_INNER_DOWN, 1)

    def test_loaded_opponent_cell_is_critical(self) -> None:
        """A full opponent cell is critical for the other player only."""
        self.assertTrue(rules.is_critical_for(self.board, _INNER_DOWN, 0))
        self.assertFalse(rules.is_critical_for(self.board, _INNER_DOWN, 1))

    def test_half_full_cell_is_not_critical(self) -> None:
        """An interior cell with one piece is not about to explode."""
        self.board.place(_INNER_UP, 1)
        self.assertFalse(rules.is_critical_for(self.board, _INNER_UP, 0))

    def test_neighbors_see_the_threat(self) -> None:
        """Cells next to the loaded cell have a critical neighbour."""
        self.assertTrue(rules.has_critical_neighbor(self.board, _INNER_UP, 0))
        self.assertFalse(rules.has_critical_neighbor(self.board, _INNER_UP, 1))
        far = TriCoord(x=3, y=2, r=False)
        self.assertFalse(rules.has_critical_neighbor(self.board, far, 0))


if __name__ == '__main__':
    unittest.main()

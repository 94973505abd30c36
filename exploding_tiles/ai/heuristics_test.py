"""Unit tests for fitness functions."""

from __future__ import annotations

import unittest

from exploding_tiles.ai import heuristics
from exploding_tiles.models import board
from exploding_tiles.models.coords import TriCoord

_INNER_UP = TriCoord(x=1, y=1, r=False)
_INNER_DOWN = TriCoord(x=1, y=1, r=True)
_CORNER = TriCoord(x=3, y=2, r=False)


class TestSimpleFitness(unittest.TestCase):
    def test_ownership_counts_pieces(self) -> None:
        state = board.Board(2)
        state.place(_INNER_UP, 0)
        state.place(_INNER_UP, 0)
        state.place(_CORNER, 1)
        self.assertEqual(heuristics.ownership_fitness(state, 0, 0), 2)
        self.assertEqual(heuristics.ownership_fitness(state, 1, 0), 1)
        self.assertEqual(heuristics.ownership_fitness(state, 2, 0), 0)

    def test_cascade_length_is_steps(self) -> None:
        self.assertEqual(heuristics.cascade_length_fitness(board.Board(1), 0, 4), 4)


class TestPositionalFitness(unittest.TestCase):
    def test_won_board(self) -> None:
        state = board.Board(2)
        state.place(_INNER_UP, 0)
        state.place(_INNER_UP, 0)
        self.assertEqual(heuristics.positional_fitness(state, 0, 0), heuristics.WIN_SCORE)

    def test_safe_full_cells_earn_bonus(self) -> None:
        state = board.Board(2)
        state.place(_INNER_UP, 0)
        state.place(_INNER_UP, 0)
        state.place(_CORNER, 1)
        self.assertEqual(heuristics.positional_fitness(state, 0, 0), 4)
        self.assertEqual(heuristics.positional_fitness(state, 1, 0), 3)

    def test_threatened_pieces_cost(self) -> None:
        state = board.Board(2)
        state.place(_INNER_UP, 0)
        state.place(_INNER_DOWN, 1)
        state.place(_INNER_DOWN, 1)
        self.assertEqual(heuristics.positional_fitness(state, 0, 0), -2)
        self.assertEqual(heuristics.positional_fitness(state, 1, 0), 4)


if __name__ == '__main__':
    unittest.main()

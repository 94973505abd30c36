"""Unit tests for scripted tutorial sequences."""

from __future__ import annotations

import unittest

import pydantic

from exploding_tiles.engine import tutorial
from exploding_tiles.models import moves
from exploding_tiles.models.coords import TriCoord


def _m(x: int, y: int, r: bool, player: int) -> moves.Move:
    return moves.Move(coord=TriCoord(x=x, y=y, r=r), player=player)


class TestScriptedSequence(unittest.TestCase):
    """Validation of sequence definitions."""

    def test_out_of_bounds_move_rejected(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            tutorial.ScriptedSequence(name='bad', board_size=1, moves=[_m(5, 5, False, 0)])

    def test_size_must_be_positive(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            tutorial.ScriptedSequence(name='bad', board_size=0, moves=[])

    def test_player_count(self) -> None:
        self.assertEqual(tutorial.TUTORIALS['basics'].player_count, 2)
        self.assertEqual(tutorial.TUTORIALS['takeover'].player_count, 2)
        empty = tutorial.ScriptedSequence(name='empty', board_size=1, moves=[])
        self.assertEqual(empty.player_count, 1)


class TestReplay(unittest.TestCase):
    """Replaying the built-in tutorials."""

    def test_replay_is_deterministic(self) -> None:
        """Two replays of the same sequence yield equal snapshots."""
        for name, seq in tutorial.TUTORIALS.items():
            with self.subTest(name=name):
                self.assertEqual(list(tutorial.replay(seq)), list(tutorial.replay(seq)))

    def test_snapshot_counts(self) -> None:
        """One snapshot for setup, one per placement and one per generation."""
        expected = {'basics': 4, 'explosion': 5, 'takeover': 3, 'chain': 4}
        for name, count in expected.items():
            with self.subTest(name=name):
                self.assertEqual(len(list(tutorial.replay(tutorial.TUTORIALS[name]))), count)

    def test_snapshots_are_independent(self) -> None:
        """Later steps do not leak into earlier snapshots."""
        snaps = list(tutorial.replay(tutorial.TUTORIALS['basics']))
        self.assertEqual(snaps[0].totals, ())
        self.assertEqual(snaps[-1].totals, (2, 1))

    def test_basics_final_board(self) -> None:
        final = tutorial.final_board(tutorial.TUTORIALS['basics'])
        self.assertEqual(final[TriCoord(x=1, y=1, r=False)].num, 2)
        self.assertEqual(final[TriCoord(x=2, y=1, r=True)].player, 1)
        self.assertFalse(final.needs_update())

    def test_explosion_final_board(self) -> None:
        """The edge cell overflows into its two in-bounds neighbours."""
        final = tutorial.final_board(tutorial.TUTORIALS['explosion'])
        self.assertEqual(final[TriCoord(x=0, y=2, r=False)].num, 0)
        self.assertIsNone(final[TriCoord(x=0, y=2, r=False)].player)
        self.assertEqual(final[TriCoord(x=0, y=2, r=True)].player, 0)
        self.assertEqual(final[TriCoord(x=0, y=1, r=True)].player, 0)
        self.assertEqual(final.totals, (2, 1))

    def test_takeover_and_chain_are_won(self) -> None:
        for name in ('takeover', 'chain'):
            with self.subTest(name=name):
                final = tutorial.final_board(tutorial.TUTORIALS[name])
                self.assertEqual(final.is_won(), 0)
                self.assertEqual(final.total(1), 0)

    def test_takeover_captures_cell(self) -> None:
        final = tutorial.final_board(tutorial.TUTORIALS['takeover'])
        captured = final[TriCoord(x=1, y=1, r=True)]
        self.assertEqual(captured.player, 0)
        self.assertEqual(captured.num, 2)
        self.assertEqual(final.totals, (4, 0))

    def test_unplayable_script_raises(self) -> None:
        seq = tutorial.ScriptedSequence(
            name='clash', board_size=2, moves=[_m(1, 1, False, 1), _m(1, 1, False, 0)]
        )
        with self.assertRaises(ValueError):
            tutorial.final_board(seq)


class TestStartGame(unittest.TestCase):
    """Driving a live game from a sequence."""

    def test_takeover_game_reaches_win(self) -> None:
        g = tutorial.start_game(tutorial.TUTORIALS['takeover'])
        self.assertEqual(g.player_count, 2)
        while g.tick():
            pass
        self.assertEqual(g.winner(), 0)
        self.assertEqual(g.board, tutorial.final_board(tutorial.TUTORIALS['takeover']))

    def test_basics_game_matches_replay(self) -> None:
        """Once the script is exhausted the game stalls on the replayed board."""
        g = tutorial.start_game(tutorial.TUTORIALS['basics'])
        while g.tick():
            pass
        self.assertIsNone(g.winner())
        self.assertEqual(g.board, tutorial.final_board(tutorial.TUTORIALS['basics']))


if __name__ == '__main__':
    unittest.main()

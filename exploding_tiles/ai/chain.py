"""Union-find chain heuristic.

Cells that are one piece from exploding form chains: setting off any of
them detonates the whole connected group. This heuristic groups such cells
with a disjoint-set forest and scores each group:

- a group containing an opponent's loaded cell is *threatened* (the
  opponent can detonate it first) and costs ``7`` per owned piece;
- otherwise it earns ``3`` per owned piece plus ``2`` per opponent piece
  sitting next to it, ready to be captured.

Owned pieces with no loaded cell next to them are safe and count ``1``
each.

Groups are merged in board iteration order, always toward the lower
storage index, so the same board always yields the same forest.
"""

from __future__ import annotations

import pydantic

from ..models import board

_THREATENED_PENALTY = 7
_OWNED_REWARD = 3
_CAPTURE_REWARD = 2


class ChainSet(pydantic.BaseModel):
    """Disjoint-set record for one cell, indexed like the board storage."""

    parent: int
    num_owned: int = 0
    threatened: bool = False
    num_threatened_by: int = 0


class ChainAnalysis(pydantic.BaseModel):
    """Forest of chain sets plus the safe pieces counted outside any chain."""

    sets: list[ChainSet]
    safe_pieces: int = 0

    def find(self, index: int) -> int:
        """Return the root of *index*'s set, compressing the path."""
        root = index
        while self.sets[root].parent != root:
            root = self.sets[root].parent
        while self.sets[index].parent != root:
            self.sets[index].parent, index = root, self.sets[index].parent
        return root

    def union(self, a: int, b: int) -> int:
        """Merge the sets of *a* and *b* into the lower root; return it."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return ra
        keep, gone = (ra, rb) if ra < rb else (rb, ra)
        kept, merged = self.sets[keep], self.sets[gone]
        merged.parent = keep
        kept.num_owned += merged.num_owned
        kept.threatened = kept.threatened or merged.threatened
        kept.num_threatened_by += merged.num_threatened_by
        return keep

    def roots(self) -> list[int]:
        """Indices of the canonical sets that hold a chain."""
        return [
            i
            for i, s in enumerate(self.sets)
            if self.find(i) == i and (s.num_owned or s.threatened or s.num_threatened_by)
        ]

    def score(self) -> int:
        """Total heuristic value of the analysed board."""
        total = self.safe_pieces
        for i in self.roots():
            s = self.sets[i]
            if s.threatened:
                total -= _THREATENED_PENALTY * s.num_owned
            else:
                total += _OWNED_REWARD * s.num_owned + _CAPTURE_REWARD * s.num_threatened_by
        return total


def analyze(state: board.Board, player: int) -> ChainAnalysis:
    """Build the chain forest of *state* from *player*'s point of view."""
    analysis = ChainAnalysis(sets=[ChainSet(parent=i) for i in range(state.cell_count)])
    for coord in state.iter_tiles():
        tile = state[coord]
        if tile.num == 0:
            continue
        index = state.index(coord)

        if state.is_at_capacity(coord):
            chain = analysis.sets[analysis.find(index)]
            if tile.player == player:
                chain.num_owned += tile.num
            else:
                chain.threatened = True
            for n in coord.neighbors():
                if state.is_at_capacity(n) and state.index(n) < index:
                    analysis.union(index, state.index(n))
            continue

        loaded = next((n for n in coord.neighbors() if state.is_at_capacity(n)), None)
        if loaded is not None:
            if tile.player != player:
                root = analysis.find(state.index(loaded))
                analysis.sets[root].num_threatened_by += tile.num
        elif tile.player == player:
            analysis.safe_pieces += tile.num
    return analysis


def chain_fitness(state: board.Board, player: int, steps: int) -> int:
    """Fitness wrapper around :func:`analyze`."""
    return analyze(state, player).score()

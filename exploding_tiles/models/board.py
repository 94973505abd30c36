"""Board state and the cell explosion state machine.

A cell holds up to ``allowed_pieces`` pieces of a single player: 1 on the
outer edge, 2 inside. Placing beyond that queues the cell to explode. Each
call to :meth:`Board.update_step` resolves one generation of explosions,
pushing one piece into every in-bounds neighbour and taking those cells
over for the exploding player.

Per-player piece totals are kept incrementally so that :meth:`Board.is_won`
never needs a board scan.
"""

from __future__ import annotations

from collections.abc import Iterator

import pydantic

from .coords import TriCoord


class TileState(pydantic.BaseModel):
    """Snapshot of one cell. ``player`` is None exactly when ``num`` is 0."""

    model_config = pydantic.ConfigDict(frozen=True)

    player: int | None = None
    num: int = 0


class Board:
    """Cell grid, pending explosions and per-player totals for one game.

    Boards have value semantics: :meth:`clone` returns a fully independent
    copy, which the AI uses to simulate candidate moves.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f'Board size must be at least 1, got {size}')
        self._size = size
        cell_count = size * size * 8
        self._owners: list[int | None] = [None] * cell_count
        self._nums: list[int] = [0] * cell_count
        self._pending: list[TriCoord] = []
        self._totals: list[int] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Hex edge length."""
        return self._size

    @property
    def cell_count(self) -> int:
        """Length of the flat storage, including out-of-bounds slots."""
        return len(self._nums)

    @property
    def totals(self) -> tuple[int, ...]:
        """Pieces owned by each player id seen so far."""
        return tuple(self._totals)

    def total(self, player: int) -> int:
        """Return the pieces owned by *player*; unseen players own none."""
        if 0 <= player < len(self._totals):
            return self._totals[player]
        return 0

    def index(self, coord: TriCoord) -> int:
        """Linear storage index of *coord* (meaningful only when in bounds)."""
        return coord.x * 2 + coord.y * self._size * 4 + int(coord.r)

    def in_bounds(self, coord: TriCoord) -> bool:
        """Return True if all barycentric components lie in [0, 2 * size)."""
        limit = self._size * 2
        return all(0 <= b < limit for b in coord.bary(self._size))

    def is_edge(self, coord: TriCoord) -> bool:
        """Return True if the cell touches the outer boundary of the hexagon."""
        bary = coord.bary(self._size)
        if coord.r:
            return max(bary) == self._size * 2 - 1
        return min(bary) == 0

    def allowed_pieces(self, coord: TriCoord) -> int:
        """Capacity of a cell: 1 on the edge, 2 in the interior."""
        return 2 - int(self.is_edge(coord))

    def __getitem__(self, coord: TriCoord) -> TileState:
        if not self.in_bounds(coord):
            return TileState()
        i = self.index(coord)
        return TileState(player=self._owners[i], num=self._nums[i])

    def is_at_capacity(self, coord: TriCoord) -> bool:
        """Return True if one more piece would make the cell explode."""
        return self.in_bounds(coord) and (
            self._nums[self.index(coord)] == self.allowed_pieces(coord)
        )

    def iter_tiles(self) -> Iterator[TriCoord]:
        """Yield every in-bounds cell in storage order (y, then x, then r)."""
        limit = self._size * 2
        for y in range(limit):
            for x in range(limit):
                for r in (False, True):
                    coord = TriCoord(x=x, y=y, r=r)
                    if self.in_bounds(coord):
                        yield coord

    def needs_update(self) -> bool:
        """Return True while explosions are waiting to be resolved."""
        return bool(self._pending)

    def pending(self) -> tuple[TriCoord, ...]:
        """Cells queued to explode on the next :meth:`update_step`."""
        return tuple(self._pending)

    def is_won(self) -> int | None:
        """Return the winning player, if exactly one player has pieces left.

        A lone surviving piece does not count, so the opening move of a game
        is never a win.
        """
        alive = [p for p, count in enumerate(self._totals) if count > 0]
        if len(alive) == 1 and self._totals[alive[0]] > 1:
            return alive[0]
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, coord: TriCoord, player: int, replace: bool = False) -> bool:
        """Add one piece of *player* to *coord*.

        Without *replace* this is a normal move: it fails on opponent cells
        and counts as a new piece. With *replace* it is a piece pushed by an
        explosion: it takes the cell over, moving the cell's existing pieces
        to *player*, and adds no new piece to the totals.

        Returns False (and changes nothing) if the move is not allowed.
        """
        if not self.in_bounds(coord):
            return False
        i = self.index(coord)
        owner = self._owners[i]
        if not replace and owner is not None and owner != player:
            return False

        if player >= len(self._totals):
            self._totals.extend([0] * (player + 1 - len(self._totals)))
        if not replace:
            self._totals[player] += 1
        if owner is not None and owner != player:
            self._totals[owner] -= self._nums[i]
            self._totals[player] += self._nums[i]

        self._owners[i] = player
        self._nums[i] += 1
        if self._nums[i] > self.allowed_pieces(coord) and coord not in self._pending:
            self._pending.append(coord)
        return True

    def update_step(self) -> None:
        """Resolve one generation of explosions.

        Explosions triggered while resolving this generation are queued for
        the next call. A neighbour push costs the exploding cell a piece only
        if the neighbour is in bounds.
        """
        batch, self._pending = self._pending, []
        for coord in batch:
            i = self.index(coord)
            if self._nums[i] <= self.allowed_pieces(coord):
                continue
            owner = self._owners[i]
            assert owner is not None
            for neighbor in coord.neighbors():
                if self.place(neighbor, owner, replace=True):
                    self._nums[i] -= 1
            if self._nums[i] == 0:
                self._owners[i] = None

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def clone(self) -> Board:
        """Return an independent copy of this board."""
        other = Board.__new__(Board)
        other._size = self._size
        other._owners = list(self._owners)
        other._nums = list(self._nums)
        other._pending = list(self._pending)
        other._totals = list(self._totals)
        return other

    __copy__ = clone

    def __deepcopy__(self, memo: dict[int, object]) -> Board:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._size == other._size
            and self._owners == other._owners
            and self._nums == other._nums
            and self._pending == other._pending
            and self._totals == other._totals
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Board(size={self._size}, totals={self._totals}, pending={len(self._pending)})'

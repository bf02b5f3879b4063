from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional

from HiveEngine.HexGrid import HexCoordinate, empty_neighbors, occupied_neighbors
from HiveEngine.Pieces import Piece, PieceArena


def rectangular_field(columns: int, rows: int) -> FrozenSet[HexCoordinate]:
    """
    The cells of a `columns` x `rows` field laid out in axial coordinates,
    each column shifted up by half its index so the field stays rectangular
    on screen.
    """
    return frozenset(
        HexCoordinate(i, j - i // 2)
        for i in range(columns)
        for j in range(rows)
    )


class Board:
    """
    Occupancy of the hex grid plus the frontier of empty cells touching the
    hive.

      _cells:     coord -> id of the visible piece
      _covered:   coord -> id of the piece beneath the Beetle at coord
      _positions: piece id -> coord (covered pieces included)

    The frontier is only ever updated incrementally by `place`, `move` and
    `lifted`; it is never rebuilt from the occupancy.
    """

    def __init__(self, arena: PieceArena, bounds: Optional[Iterable] = None,
                 seed: Optional[HexCoordinate] = None):
        self.arena = arena
        self.bounds = frozenset(HexCoordinate(*c) for c in bounds) if bounds is not None else None
        self.seed = HexCoordinate(*seed) if seed is not None else HexCoordinate(0, 0)
        assert self.in_bounds(self.seed), f"seed {self.seed} lies outside the board"
        self._cells: Dict[HexCoordinate, int] = {}
        self._covered: Dict[HexCoordinate, int] = {}
        self._positions: Dict[int, HexCoordinate] = {}
        self._frontier = {self.seed}

    @classmethod
    def bounded(cls, arena: PieceArena, columns: int, rows: int) -> "Board":
        center_q = columns // 2
        seed = HexCoordinate(center_q, (rows - 1) // 2 - center_q // 2)
        return cls(arena, bounds=rectangular_field(columns, rows), seed=seed)

    def copy(self) -> "Board":
        new_board = Board.__new__(Board)
        new_board.arena = self.arena
        new_board.bounds = self.bounds
        new_board.seed = self.seed
        new_board._cells = dict(self._cells)
        new_board._covered = dict(self._covered)
        new_board._positions = dict(self._positions)
        new_board._frontier = set(self._frontier)
        return new_board

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------
    def in_bounds(self, coord) -> bool:
        return self.bounds is None or coord in self.bounds

    def is_occupied(self, coord) -> bool:
        return coord in self._cells

    def is_empty(self) -> bool:
        return not self._cells

    def is_covering(self, coord) -> bool:
        """True if the piece at `coord` sits on top of another piece."""
        return coord in self._covered

    def piece_at(self, coord) -> Optional[Piece]:
        piece_id = self._cells.get(coord)
        return None if piece_id is None else self.arena[piece_id]

    def covered_at(self, coord) -> Optional[Piece]:
        piece_id = self._covered.get(coord)
        return None if piece_id is None else self.arena[piece_id]

    def position_of(self, piece_id: int) -> Optional[HexCoordinate]:
        return self._positions.get(piece_id)

    def occupied_cells(self) -> List[HexCoordinate]:
        return list(self._cells)

    @property
    def frontier(self) -> FrozenSet[HexCoordinate]:
        return frozenset(self._frontier)

    # ---------------------------------------------------------
    # Mutation
    # ---------------------------------------------------------
    def place(self, coord, piece_id: int) -> None:
        """Put a piece from the hand on the empty cell `coord`."""
        coord = HexCoordinate(*coord)
        assert coord not in self._cells, f"cannot place on occupied cell {coord}"
        assert self.in_bounds(coord), f"cannot place outside the board at {coord}"
        if not self._cells:
            # The seed only stands in for the frontier of an empty board.
            self._frontier.clear()
        self._cells[coord] = piece_id
        self._positions[piece_id] = coord
        self._arrive(coord)

    def move(self, origin, destination) -> None:
        """
        Relocate the visible piece at `origin`.

        A piece that was covering a tile uncovers it, so `origin` stays
        occupied. Landing on an occupied `destination` covers that piece.
        """
        origin = HexCoordinate(*origin)
        destination = HexCoordinate(*destination)
        assert origin in self._cells, f"no piece to move at {origin}"

        piece_id = self._cells.pop(origin)
        below = self._covered.pop(origin, None)
        if below is not None:
            self._cells[origin] = below

        target = self._cells.get(destination)
        if target is not None:
            self._covered[destination] = target
        self._cells[destination] = piece_id
        self._positions[piece_id] = destination

        self._arrive(destination)
        if below is None:
            self._vacate(origin)

    def lifted(self, coord) -> "Board":
        """
        A scratch copy with the visible piece at `coord` picked up, as it
        would be in the middle of a move. The frontier of the copy follows
        the same incremental rule as a move.
        """
        coord = HexCoordinate(*coord)
        assert coord in self._cells, f"no piece to lift at {coord}"
        scratch = self.copy()
        piece_id = scratch._cells.pop(coord)
        del scratch._positions[piece_id]
        below = scratch._covered.pop(coord, None)
        if below is not None:
            scratch._cells[coord] = below
        else:
            scratch._vacate(coord)
        return scratch

    def _arrive(self, coord):
        self._frontier.discard(coord)
        self._frontier |= empty_neighbors(self, coord)

    def _vacate(self, coord):
        if not self._cells:
            self._frontier = {self.seed}
            return
        if occupied_neighbors(self, coord):
            self._frontier.add(coord)
        for cell in empty_neighbors(self, coord):
            if not occupied_neighbors(self, cell):
                self._frontier.discard(cell)

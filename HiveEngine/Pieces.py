from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class BugType(Enum):
    QUEEN_BEE = "Queen"
    SPIDER = "Spider"
    BEETLE = "Beetle"
    GRASSHOPPER = "Grasshopper"
    SOLDIER_ANT = "Ant"

    @property
    def letter(self) -> str:
        return self.value[0]


# Inventory index order, also the order of the hand panel in the viewer.
INVENTORY_ORDER = (
    BugType.QUEEN_BEE,
    BugType.SPIDER,
    BugType.BEETLE,
    BugType.GRASSHOPPER,
    BugType.SOLDIER_ANT,
)

INITIAL_PIECES = {
    BugType.QUEEN_BEE: 1,
    BugType.SPIDER: 2,
    BugType.BEETLE: 2,
    BugType.GRASSHOPPER: 3,
    BugType.SOLDIER_ANT: 3,
}

BUG_COLORS = {
    BugType.QUEEN_BEE: (255, 161, 0),      # orange
    BugType.BEETLE: (200, 122, 255),       # purple
    BugType.GRASSHOPPER: (0, 117, 44),     # dark green
    BugType.SPIDER: (127, 106, 79),        # brown
    BugType.SOLDIER_ANT: (0, 121, 241),    # blue
}


@dataclass(frozen=True)
class Piece:
    bug_type: BugType
    owner_id: int
    display_color: Tuple[int, int, int]


class PieceArena:
    """
    Owns every piece that has entered play. Board cells and the Beetle
    carry-slot refer to pieces by the integer id handed out here.
    """

    def __init__(self):
        self._pieces: List[Piece] = []

    def create(self, bug_type: BugType, owner_id: int) -> int:
        self._pieces.append(Piece(bug_type, owner_id, BUG_COLORS[bug_type]))
        return len(self._pieces) - 1

    def __getitem__(self, piece_id: int) -> Piece:
        return self._pieces[piece_id]

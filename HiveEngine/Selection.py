from __future__ import annotations

import logging
from typing import Optional, Set

from HiveEngine.Errors import RuleViolation
from HiveEngine.HexGrid import HexCoordinate
from HiveEngine.HiveMatch import HiveMatch
from HiveEngine.Pieces import INVENTORY_ORDER, BugType


class SelectionController:
    """
    Turns opaque selection events from a front end into match actions.

    Two kinds of event exist: picking slot `index` of the active player's
    hand, and picking a board cell. Picking a highlighted cell while
    something is selected performs the placement or move; picking one of
    the active player's pieces selects it instead.
    """

    def __init__(self, match: HiveMatch):
        self.match = match
        self.selected_bug: Optional[BugType] = None
        self.selected_origin: Optional[HexCoordinate] = None
        self.destinations: Set[HexCoordinate] = set()

    @property
    def has_selection(self) -> bool:
        return self.selected_bug is not None or self.selected_origin is not None

    @property
    def highlights(self) -> Set[HexCoordinate]:
        """Cells to highlight: the current selection's targets, or the frontier."""
        if self.has_selection:
            return set(self.destinations)
        return set(self.match.board.frontier)

    def clear(self):
        self.selected_bug = None
        self.selected_origin = None
        self.destinations = set()

    def select_inventory(self, index: int) -> Set[HexCoordinate]:
        self.clear()
        if self.match.is_frozen or not 0 <= index < len(INVENTORY_ORDER):
            return set()

        bug_type = INVENTORY_ORDER[index]
        if self.match.current_player().remaining(bug_type) == 0:
            return set()
        self.selected_bug = bug_type
        self.destinations = self.match.legal_destinations(bug_type)
        return set(self.destinations)

    def select_cell(self, coord) -> bool:
        """
        Returns True when the event completed a placement or move.
        """
        if self.match.is_frozen:
            self.clear()
            return False

        coord = HexCoordinate(*coord)
        if self.has_selection and coord in self.destinations:
            try:
                if self.selected_bug is not None:
                    self.match.apply_placement(self.selected_bug, coord)
                else:
                    self.match.apply_move(self.selected_origin, coord)
            finally:
                self.clear()
            return True

        self.clear()
        piece = self.match.board.piece_at(coord)
        if piece is not None and piece.owner_id == self.match.active_player:
            self.selected_origin = coord
            self.destinations = self.match.legal_destinations(coord)
        return False

    def try_select_cell(self, coord) -> bool:
        """Like `select_cell`, but logs a rejected action instead of raising."""
        try:
            return self.select_cell(coord)
        except RuleViolation as e:
            logging.warning(f"Rejected action: {e.message}")
            return False

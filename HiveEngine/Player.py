from HiveEngine.Pieces import INITIAL_PIECES, INVENTORY_ORDER, BugType


class Player:
    def __init__(self, player_id, name="", initial_pieces=None):
        self.player_id = player_id
        self.name = name
        self.pieces_in_hand = dict(initial_pieces if initial_pieces is not None else INITIAL_PIECES)

    def remaining(self, bug_type):
        return self.pieces_in_hand.get(bug_type, 0)

    def take(self, bug_type):
        assert self.remaining(bug_type) > 0, f"{self.name} has no {bug_type.value} left"
        self.pieces_in_hand[bug_type] -= 1

    def has_placed_queen(self):
        return self.remaining(BugType.QUEEN_BEE) == 0

    def inventory(self):
        """Remaining counts in inventory index order."""
        return [(bug_type, self.remaining(bug_type)) for bug_type in INVENTORY_ORDER]

    def __repr__(self):
        return f"Player({self.player_id}, {self.name!r})"

class RuleViolation(ValueError):
    """
    An action the rules do not allow right now. Raised before anything is
    mutated, so the match can simply be asked again.
    """

    def __init__(self, message, action=None):
        self.message = message
        self.action = action
        super().__init__(message)


class IllegalDestination(RuleViolation):
    """The target cell is not among the legal destinations."""


class QueenNotYetPlaced(RuleViolation):
    """A non-queen action while the player's queen is still in hand and due."""


class WrongPlayerOrTurn(RuleViolation):
    """The action belongs to the player who is not on turn."""


class GameAlreadyTerminal(RuleViolation):
    """The match has ended and accepts no more actions."""


class PieceUnavailable(RuleViolation):
    """No piece of that type left in hand, or nothing to move at the origin."""


class PassNotAllowed(RuleViolation):
    """Passing while a placement or move is still available."""

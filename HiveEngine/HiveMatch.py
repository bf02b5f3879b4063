from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, NamedTuple, Optional, Set, Tuple

from HiveEngine.Board import Board
from HiveEngine.Config import MatchConfig
from HiveEngine.Errors import (
    GameAlreadyTerminal,
    IllegalDestination,
    PassNotAllowed,
    PieceUnavailable,
    QueenNotYetPlaced,
    WrongPlayerOrTurn,
)
from HiveEngine.HexGrid import HexCoordinate, occupied_neighbors
from HiveEngine.HiveRules import HiveRules
from HiveEngine.Pieces import INVENTORY_ORDER, BugType, PieceArena
from HiveEngine.Player import Player

QUEEN_MESSAGE = "!!! You must place Queen on this turn !!!"
DRAW_MESSAGE = "!!! Game ended in draw !!!"
WINNING_MESSAGE = "!!! Player {} has won !!!"


class GameStatus(Enum):
    NORMAL = "Normal"
    DRAW = "Draw"
    PLAYER1_WON = "Player1Won"
    PLAYER2_WON = "Player2Won"


class TileView(NamedTuple):
    bug_type: BugType
    owner_id: int
    display_color: Tuple[int, int, int]
    covered: Optional["TileView"] = None


class HiveMatch:
    """
    One game of Hive between players 0 and 1.

    Owns the board, the frontier and the turn state. Every ``apply_*`` call
    either raises a RuleViolation without touching anything, or completes
    the whole action and evaluates the match status before returning.
    """

    def __init__(self, config: Optional[MatchConfig] = None):
        self.config = config if config is not None else MatchConfig()
        self.arena = PieceArena()
        if self.config.is_bounded:
            self.board = Board.bounded(self.arena, self.config.columns, self.config.rows)
        else:
            self.board = Board(self.arena)
        self.players = [
            Player(player_id, name, self.config.initial_pieces)
            for player_id, name in enumerate(self.config.player_names)
        ]
        self.starting_player = self.config.starting_player
        self.active_player = self.starting_player
        self.turn = 0
        self.status = GameStatus.NORMAL
        self.is_frozen = False
        self._terminal_message = ""
        self._queen_ids: Dict[int, int] = {}

    # ---------------------------------------------------------
    # 1. State queries
    # ---------------------------------------------------------
    def current_status(self) -> GameStatus:
        return self.status

    def current_player(self) -> Player:
        return self.players[self.active_player]

    @staticmethod
    def opponent_of(player_id: int) -> int:
        return 1 - player_id

    def inventory(self, player_id: Optional[int] = None) -> Dict[BugType, int]:
        if player_id is None:
            player_id = self.active_player
        return dict(self.players[player_id].pieces_in_hand)

    @property
    def is_opening_move(self) -> bool:
        return self.turn == 0

    def queen_required(self) -> bool:
        """The active player must place their queen now and do nothing else."""
        return (self.turn == self.config.queen_deadline_turn
                and not self.current_player().has_placed_queen())

    @property
    def message(self) -> str:
        if self.is_frozen:
            return self._terminal_message
        if self.queen_required():
            return QUEEN_MESSAGE
        return ""

    def board_snapshot(self) -> Dict[HexCoordinate, TileView]:
        snapshot = {}
        for coord in self.board.occupied_cells():
            piece = self.board.piece_at(coord)
            below = self.board.covered_at(coord)
            covered = None
            if below is not None:
                covered = TileView(below.bug_type, below.owner_id, below.display_color)
            snapshot[coord] = TileView(piece.bug_type, piece.owner_id, piece.display_color, covered)
        return snapshot

    # ---------------------------------------------------------
    # 2. Legal destinations
    # ---------------------------------------------------------
    def legal_destinations(self, selection) -> Set[HexCoordinate]:
        """
        `selection` is either a BugType (a piece from the active player's
        hand) or a coordinate (the piece on the board to move).
        """
        if isinstance(selection, BugType):
            return self.legal_placements(selection)
        return self.legal_moves(selection)

    def legal_placements(self, bug_type: BugType) -> Set[HexCoordinate]:
        player = self.current_player()
        if self.is_frozen or player.remaining(bug_type) == 0:
            return set()
        if self.queen_required() and bug_type is not BugType.QUEEN_BEE:
            return set()
        return HiveRules.legal_placements(self.board, self.active_player, self.is_opening_move)

    def legal_moves(self, origin) -> Set[HexCoordinate]:
        origin = HexCoordinate(*origin)
        piece = self.board.piece_at(origin)
        if self.is_frozen or piece is None or piece.owner_id != self.active_player:
            return set()
        # No moving until the own queen is on the board.
        if not self.current_player().has_placed_queen():
            return set()
        return HiveRules.legal_moves(self.board, origin)

    def has_legal_action(self) -> bool:
        if self.is_frozen:
            return False
        if any(self.legal_placements(bug_type) for bug_type in INVENTORY_ORDER):
            return True
        return any(self.legal_moves(coord) for coord in self.board.occupied_cells())

    # ---------------------------------------------------------
    # 3. Actions
    # ---------------------------------------------------------
    def apply_placement(self, bug_type: BugType, destination, player_id: Optional[int] = None) -> None:
        self._check_actor(player_id)
        action = ("PLACE", bug_type, destination)
        player = self.current_player()
        if player.remaining(bug_type) == 0:
            raise PieceUnavailable(f"{player.name} has no {bug_type.value} left in hand", action)
        if self.queen_required() and bug_type is not BugType.QUEEN_BEE:
            raise QueenNotYetPlaced(QUEEN_MESSAGE, action)

        destination = HexCoordinate(*destination)
        if destination not in self.legal_placements(bug_type):
            raise IllegalDestination(f"{bug_type.value} cannot be placed at {destination}", action)

        piece_id = self.arena.create(bug_type, self.active_player)
        self.board.place(destination, piece_id)
        player.take(bug_type)
        if bug_type is BugType.QUEEN_BEE:
            self._queen_ids[self.active_player] = piece_id
        logging.debug(f"{player.name} placed {bug_type.value} at {destination} (turn {self.turn})")
        self._end_turn()

    def apply_move(self, origin, destination, player_id: Optional[int] = None) -> None:
        self._check_actor(player_id)
        origin = HexCoordinate(*origin)
        destination = HexCoordinate(*destination)
        action = ("MOVE", origin, destination)

        piece = self.board.piece_at(origin)
        if piece is None:
            raise PieceUnavailable(f"there is no piece to move at {origin}", action)
        if piece.owner_id != self.active_player:
            raise WrongPlayerOrTurn(f"the piece at {origin} belongs to the other player", action)
        if not self.current_player().has_placed_queen():
            raise QueenNotYetPlaced("the queen must be placed before any piece can move", action)
        if destination not in HiveRules.legal_moves(self.board, origin):
            raise IllegalDestination(f"{piece.bug_type.value} at {origin} cannot move to {destination}", action)

        self.board.move(origin, destination)
        assert HiveRules.is_board_connected(self.board), "move split the hive"
        logging.debug(f"{self.current_player().name} moved {piece.bug_type.value} "
                      f"{origin} -> {destination} (turn {self.turn})")
        self._end_turn()

    def apply_pass(self, player_id: Optional[int] = None) -> None:
        self._check_actor(player_id)
        if self.has_legal_action():
            raise PassNotAllowed("a placement or move is still available", ("PASS",))
        logging.debug(f"{self.current_player().name} passed (turn {self.turn})")
        self._end_turn()

    def _check_actor(self, player_id):
        if self.is_frozen:
            raise GameAlreadyTerminal(self._terminal_message)
        if player_id is not None and player_id != self.active_player:
            raise WrongPlayerOrTurn(f"it is {self.current_player().name}'s turn")

    # ---------------------------------------------------------
    # 4. Status
    # ---------------------------------------------------------
    def is_queen_surrounded(self, player_id: int) -> bool:
        queen_id = self._queen_ids.get(player_id)
        if queen_id is None:
            return False
        coord = self.board.position_of(queen_id)
        return len(occupied_neighbors(self.board, coord)) == 6

    def evaluate_status(self) -> GameStatus:
        player1_won = self.is_queen_surrounded(1)
        player2_won = self.is_queen_surrounded(0)
        if player1_won and player2_won:
            return GameStatus.DRAW
        if player1_won:
            return GameStatus.PLAYER1_WON
        if player2_won:
            return GameStatus.PLAYER2_WON
        return GameStatus.NORMAL

    def _end_turn(self):
        self.status = self.evaluate_status()
        if self.status is GameStatus.NORMAL:
            # One round is over once the second player has acted.
            if self.active_player != self.starting_player:
                self.turn += 1
            self.active_player = self.opponent_of(self.active_player)
            return

        if self.status is GameStatus.DRAW:
            self._terminal_message = DRAW_MESSAGE
        else:
            winner = 0 if self.status is GameStatus.PLAYER1_WON else 1
            self._terminal_message = WINNING_MESSAGE.format(self.players[winner].name)
        self.is_frozen = True
        logging.info(self._terminal_message)

    # ---------------------------------------------------------
    # 5. Print / Debug
    # ---------------------------------------------------------
    def print_state(self):
        print(f"Turn: {self.turn}, Current Player: {self.current_player().name}, Status: {self.status.value}")
        snapshot = self.board_snapshot()
        if not snapshot:
            print("Board is empty.")
        else:
            for coord, tile in sorted(snapshot.items()):
                label = f"{self.players[tile.owner_id].name}-{tile.bug_type.value}"
                if tile.covered is not None:
                    label += f" over {self.players[tile.covered.owner_id].name}-{tile.covered.bug_type.value}"
                print(f"Cell ({coord.q},{coord.r}): {label}")
        print("Pieces in hand:")
        for player in self.players:
            counts = {bug_type.value: count for bug_type, count in player.inventory()}
            print(f"  {player.name}: {counts}")
        if self.message:
            print(self.message)
        print("-" * 50)

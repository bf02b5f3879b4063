from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from HiveEngine.Pieces import INITIAL_PIECES, BugType

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
LOG_DATEFMT = '%H:%M:%S'

DEFAULT_PLAYER_NAMES = ("BLACK", "GRAY")
QUEEN_DEADLINE_TURN = 4


@dataclass
class MatchConfig:
    """Everything a match can be started with.

    ``columns``/``rows`` bound the board to a rectangular field; leave both
    unset for an unbounded board seeded at (0, 0).
    """

    player_names: Tuple[str, str] = DEFAULT_PLAYER_NAMES
    starting_player: int = 0
    columns: Optional[int] = None
    rows: Optional[int] = None
    queen_deadline_turn: int = QUEEN_DEADLINE_TURN
    initial_pieces: Dict[BugType, int] = field(default_factory=lambda: dict(INITIAL_PIECES))

    def __post_init__(self):
        self.player_names = tuple(self.player_names)
        if len(self.player_names) != 2:
            raise ValueError(f"exactly two player names are needed, got {self.player_names!r}")
        if self.starting_player not in (0, 1):
            raise ValueError(f"starting_player must be 0 or 1, got {self.starting_player!r}")
        if (self.columns is None) != (self.rows is None):
            raise ValueError("columns and rows must be given together")
        if self.columns is not None and (self.columns < 1 or self.rows < 1):
            raise ValueError(f"board of {self.columns}x{self.rows} cells is empty")
        if self.queen_deadline_turn < 1:
            raise ValueError(f"queen_deadline_turn must be positive, got {self.queen_deadline_turn!r}")
        if self.initial_pieces.get(BugType.QUEEN_BEE) != 1:
            raise ValueError("every player starts with exactly one queen")
        if any(count < 0 for count in self.initial_pieces.values()):
            raise ValueError(f"negative piece count in {self.initial_pieces!r}")

    @property
    def is_bounded(self) -> bool:
        return self.columns is not None


def _parse_pieces(raw: dict) -> Dict[BugType, int]:
    pieces = {}
    for name, count in raw.items():
        try:
            bug_type = BugType(name)
        except ValueError:
            raise ValueError(f"unknown bug type {name!r} in initial_pieces") from None
        pieces[bug_type] = int(count)
    return pieces


def config_from_dict(data: dict) -> MatchConfig:
    known = {"player_names", "starting_player", "columns", "rows",
             "queen_deadline_turn", "initial_pieces"}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown config keys: {sorted(unknown)}")

    kwargs = dict(data)
    if "initial_pieces" in kwargs:
        kwargs["initial_pieces"] = _parse_pieces(kwargs["initial_pieces"])
    return MatchConfig(**kwargs)


def load_config(path) -> MatchConfig:
    """Read a JSON match config, e.g.

        {"player_names": ["Ann", "Bob"], "starting_player": 1,
         "columns": 18, "rows": 12}
    """
    with Path(path).open() as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return config_from_dict(data)


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

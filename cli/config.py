"""Shell configuration loaded from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from engine.errors import InvalidBoardError
from engine.rules import BOARD_SIZE


class ShellConfig:
    """Container for console shell settings loaded from a config payload."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.board_size = int(payload.get("board_size", BOARD_SIZE))
        if self.board_size != BOARD_SIZE:
            raise InvalidBoardError(f"Only {BOARD_SIZE}x{BOARD_SIZE} boards are supported, got {self.board_size}")
        self.empty_symbol = str(payload.get("empty_symbol", "_"))
        self.log_level = str(payload.get("log_level", "INFO"))
        self.one_based_input = bool(payload.get("one_based_input", True))

        spectator = payload.get("spectator", {})
        self.spectator_games = int(spectator.get("games", 1))
        if self.spectator_games < 1:
            raise ValueError(f"spectator.games must be at least 1, got {self.spectator_games}")
        self.spectator_delay_seconds = float(spectator.get("delay_seconds", 0.5))

        selfplay = payload.get("self_play", {})
        self.log_every_games = int(selfplay.get("log_every", 1))

    @classmethod
    def from_json(cls, path: str | Path) -> "ShellConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)

    @classmethod
    def load(cls, path: Optional[str | Path]) -> "ShellConfig":
        """Load ``path`` if given and present, otherwise use defaults."""
        if path is None or not Path(path).exists():
            return cls()
        return cls.from_json(path)

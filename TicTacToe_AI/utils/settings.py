"""YAML settings loading and validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

try:
    from Board import Mark
    from engine.errors import InvalidConfiguration
except ImportError:
    from TicTacToe_AI.Board import Mark
    from TicTacToe_AI.engine.errors import InvalidConfiguration


PROJECT_DIR = Path(__file__).resolve().parent.parent


def _is_positive_int(value):
    # bool is an int subclass; `games: true` must not pass as 1
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass(frozen=True)
class GameSettings:
    board_size: int = 3
    player_mark: str = "X"
    first_move: str = "random"
    alternate_first_move: bool = True
    games: int = 1
    log_level: str = "INFO"
    seed: int | None = None

    def __post_init__(self):
        if not _is_positive_int(self.board_size):
            raise InvalidConfiguration(f"board_size must be a positive integer, got {self.board_size!r}")
        if str(self.player_mark).upper() not in ("X", "O"):
            raise InvalidConfiguration(f"player_mark must be 'X' or 'O', got {self.player_mark!r}")
        if self.first_move not in ("player", "ai", "random"):
            raise InvalidConfiguration(f"first_move must be player, ai or random, got {self.first_move!r}")
        if not isinstance(self.alternate_first_move, bool):
            raise InvalidConfiguration(
                f"alternate_first_move must be true or false, got {self.alternate_first_move!r}"
            )
        if not _is_positive_int(self.games):
            raise InvalidConfiguration(f"games must be a positive integer, got {self.games!r}")
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise InvalidConfiguration(f"log_level must be a logging level name, got {self.log_level!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfiguration(f"seed must be an integer or null, got {self.seed!r}")

    @property
    def player(self) -> Mark:
        return Mark.from_symbol(self.player_mark)

    @property
    def ai(self) -> Mark:
        return self.player.opposite()

    @classmethod
    def from_mapping(cls, data) -> "GameSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfiguration(f"unknown settings keys: {', '.join(unknown)}")
        return cls(**data)

    def with_overrides(self, **overrides) -> "GameSettings":
        """Copy with every non-None override applied (CLI flags left unset are None)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `TicTacToe_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path) -> GameSettings:
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"settings file {path} must contain a mapping")
    return GameSettings.from_mapping(data)

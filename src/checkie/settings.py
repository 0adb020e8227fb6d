"""User-configurable settings and the player factory."""

from __future__ import annotations

import os
import random
from collections.abc import Mapping
from dataclasses import dataclass, fields

from checkie.core.enums import Color
from checkie.engine.evaluation import make_evaluator
from checkie.engine.search import AlphaBetaPlayer, MinimaxPlayer, SearchLimits
from checkie.game.controller import IDLE_MOVE_LIMIT
from checkie.game.interfaces import IPlayer
from checkie.game.player import HumanPlayer, RandomPlayer

PLAYER_KINDS = ("random", "human", "minimax", "alphabeta")

_ENV_PREFIX = "CHECKIE_"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Seats
    light_player: str = "alphabeta"
    dark_player: str = "random"

    # Engine
    depth: int = 4
    evaluator: str = "material"
    man_weight: float = 1.0
    king_weight: float = 3.0
    workers: int = 1
    seed: int | None = None

    # Rules
    idle_limit: int = IDLE_MOVE_LIMIT
    max_turns: int | None = 400

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``CHECKIE_<FIELD>`` variables, e.g. ``CHECKIE_DEPTH``."""
        environ = os.environ if environ is None else environ
        settings = cls()
        for f in fields(cls):
            raw = environ.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            current = getattr(settings, f.name)
            setattr(settings, f.name, _coerce(f.name, raw, current))
        return settings

    def player_kind(self, color: Color) -> str:
        return self.light_player if color is Color.LIGHT else self.dark_player


def _coerce(name: str, raw: str, current: object) -> object:
    if name in ("seed", "max_turns"):
        return None if raw.strip().lower() in ("", "none") else int(raw)
    if isinstance(current, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, float):
        return float(raw)
    return raw.strip()


def make_player(
    kind: str,
    color: Color,
    settings: AppSettings,
    rng: random.Random | None = None,
) -> IPlayer:
    """Build a player of *kind* (one of :data:`PLAYER_KINDS`) for *color*."""
    rng = rng or random.Random(settings.seed)
    if kind == "random":
        return RandomPlayer(color, rng=rng)
    if kind == "human":
        return HumanPlayer(color)
    if kind not in ("minimax", "alphabeta"):
        raise ValueError(f"Unknown player kind {kind!r}; expected one of {PLAYER_KINDS}")

    evaluator = make_evaluator(
        settings.evaluator,
        color,
        man_weight=settings.man_weight,
        king_weight=settings.king_weight,
    )
    limits = SearchLimits(max_depth=settings.depth, workers=settings.workers)
    cls = MinimaxPlayer if kind == "minimax" else AlphaBetaPlayer
    return cls(color, evaluator, limits, rng=rng, idle_limit=settings.idle_limit)

"""CheckersGame — the turn loop between two players.

Coordinates: Players, TurnController, promotion and the end-of-game check.
Emits events via simple callbacks so the console front end / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import Color, GamePhase, GameResult
from checkie.core.errors import IllegalAction
from checkie.core.move import JumpChain, Move
from checkie.core.types import Square
from checkie.game.controller import TurnController
from checkie.game.interfaces import IPlayer

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """A single entry in the turn history."""

    color: Color
    action: Move | JumpChain
    promoted: tuple[Square, ...] = ()

    @property
    def was_capture(self) -> bool:
        return isinstance(self.action, JumpChain)


# ── Event definitions ────────────────────────────────────────────────────────

TurnCallback = Callable[[TurnRecord, TurnController], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


class CheckersGame:
    """Runs a full game: asks players for options, executes, promotes, flips.

    A side to move with no legal options, or whose idle counter exceeds the
    controller's limit, loses; the other side is credited with the win.
    """

    __slots__ = (
        "_controller",
        "_players",
        "_side_to_move",
        "_phase",
        "_result",
        "_history",
        "events",
    )

    def __init__(
        self,
        light: IPlayer,
        dark: IPlayer,
        controller: TurnController | None = None,
        *,
        first: Color = Color.LIGHT,
    ) -> None:
        light.color = Color.LIGHT
        dark.color = Color.DARK
        self._players: dict[Color, IPlayer] = {Color.LIGHT: light, Color.DARK: dark}
        self._controller = controller or TurnController()
        self._side_to_move = first
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._history: list[TurnRecord] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> TurnController:
        return self._controller

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def history(self) -> list[TurnRecord]:
        return list(self._history)

    @property
    def turns(self) -> int:
        return len(self._history)

    def player(self, color: Color) -> IPlayer:
        return self._players[color]

    # ── Loop ─────────────────────────────────────────────────────────────

    def step(self) -> bool:
        """Play one turn. Returns ``False`` once the game is decided."""
        if self.is_over:
            return False
        if self._phase == GamePhase.NOT_STARTED:
            self._phase = GamePhase.IN_PROGRESS
            _LOGGER.info(
                "game started: %s (light) vs %s (dark)",
                self._players[Color.LIGHT].name,
                self._players[Color.DARK].name,
            )

        ctrl = self._controller
        color = self._side_to_move
        options = ctrl.legal_options(color)
        if options.is_empty or ctrl.is_stalled(color):
            reason = "stalled" if ctrl.is_stalled(color) else "has no legal options"
            _LOGGER.info("%s %s", color, reason)
            self._finish(GameResult.win_for(color.opposite))
            return False

        player = self._players[color]
        action = player.choose(options, ctrl.board, ctrl)
        offered: list[Move] | list[JumpChain] = options.captures or options.moves
        if action not in offered:
            raise IllegalAction(f"{player.name} chose an option that was not offered: {action}")

        ctrl.execute(action)
        promoted = tuple(ctrl.promote())
        record = TurnRecord(color, action, promoted)
        self._history.append(record)
        self._side_to_move = color.opposite

        for cb in self.events.on_turn:
            cb(record, ctrl)
        return True

    def run(self, max_turns: int | None = None) -> GameResult:
        """Play until decided; hitting *max_turns* ends the game as a draw."""
        while not self.is_over:
            if max_turns is not None and self.turns >= max_turns:
                _LOGGER.info("turn limit %d reached", max_turns)
                self._finish(GameResult.DRAW)
                break
            self.step()
        return self._result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, result: GameResult) -> None:
        self._result = result
        self._phase = GamePhase.GAME_OVER
        _LOGGER.info("game over after %d turns: %s", self.turns, result.name)
        for cb in self.events.on_game_over:
            cb(result)

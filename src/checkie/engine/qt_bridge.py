"""Qt bridge to run an agent's choice in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.board import Board
from checkie.core.move_generator import LegalOptions
from checkie.game.interfaces import IPlayer


class AgentWorker(QObject):
    """Thread-affine worker that asks a player for its choice on demand.

    Move it to a ``QThread`` and connect ``request_choice`` to a queued
    signal; results come back through the signals below, tagged with the
    caller's request id.
    """

    choice_ready = pyqtSignal(int, object)
    no_choice = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_player",)

    def __init__(self, player: IPlayer | None = None) -> None:
        super().__init__()
        self._player = player

    @property
    def player(self) -> IPlayer | None:
        return self._player

    @pyqtSlot(object)
    def set_player(self, player: IPlayer) -> None:
        """Replace the agent (takes effect on the next request)."""
        self._player = player

    @pyqtSlot(object, object, int)
    def request_choice(
        self, options_obj: object, board_obj: object, request_id: int
    ) -> None:
        """Ask the player to pick from *options_obj* and emit the result."""
        if self._player is None:
            self.search_error.emit(request_id, "No player assigned to worker")
            return
        if not isinstance(options_obj, LegalOptions) or not isinstance(
            board_obj, Board
        ):
            self.search_error.emit(request_id, "Worker received invalid options")
            return
        if options_obj.is_empty:
            self.no_choice.emit(request_id)
            return

        try:
            choice = self._player.choose(options_obj, board_obj.copy())
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        self.choice_ready.emit(request_id, choice)

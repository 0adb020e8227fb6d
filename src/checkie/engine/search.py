"""Game-tree search agents: depth-limited minimax and alpha-beta.

Every root candidate is applied to its own copy of a
:class:`~checkie.game.controller.TurnController` and searched
independently, so root branches can run concurrently on a thread pool.
Nothing mutable is shared between branches: each task owns its controller
copies and its node counter.  Ties among the best root candidates are
broken by a single draw from the player's random source once all tasks
have finished.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, TypeVar

from checkie.core.enums import Color
from checkie.core.move import JumpChain, Move
from checkie.game.controller import IDLE_MOVE_LIMIT, TurnController
from checkie.game.player import PlayerBase, require_candidates

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move_generator import LegalOptions
    from checkie.engine.evaluation import IEvaluator

_LOGGER = logging.getLogger(__name__)

_INF = math.inf

Option: TypeAlias = Move | JumpChain
T = TypeVar("T", Move, JumpChain)


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single choice.

    ``workers`` sizes the thread pool that scores root candidates.  The
    search is pure Python and CPU-bound, so the GIL serialises most of the
    work: extra workers change neither the scores nor the tie-break, and
    rarely the wall-clock time.
    """

    max_depth: int = 4
    workers: int = 1

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("Search depth must be >= 1")
        if self.workers < 1:
            raise ValueError("Worker count must be >= 1")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Outcome of the latest root search."""

    choice: Option
    score: float
    depth: int
    nodes: int
    scores: tuple[tuple[Option, float], ...]


def _children(ctrl: TurnController, options: LegalOptions) -> Iterator[TurnController]:
    """Positions reached by each legal option, promotion applied."""
    for option in options.captures or options.moves:
        child = ctrl.copy()
        child.execute(option)
        child.promote()
        yield child


class _MinimaxSearch:
    """Plain minimax below one root candidate."""

    __slots__ = ("_color", "_evaluator", "nodes")

    def __init__(self, color: Color, evaluator: IEvaluator) -> None:
        self._color = color
        self._evaluator = evaluator
        self.nodes = 0

    def run(self, ctrl: TurnController, depth: int, side: Color) -> float:
        return self._minimax(ctrl, depth, side)

    def _minimax(self, ctrl: TurnController, depth: int, side: Color) -> float:
        self.nodes += 1
        if ctrl.is_stalled(side):
            return self._loss_for(side)
        if depth <= 0:
            return self._evaluator.score(ctrl.board)
        options = ctrl.legal_options(side)
        if options.is_empty:
            return self._loss_for(side)

        if side is self._color:
            best = -_INF
            for child in _children(ctrl, options):
                best = max(best, self._minimax(child, depth - 1, side.opposite))
        else:
            best = _INF
            for child in _children(ctrl, options):
                best = min(best, self._minimax(child, depth - 1, side.opposite))
        return best

    def _loss_for(self, side: Color) -> float:
        """Extreme score when *side* cannot continue."""
        return -_INF if side is self._color else _INF


class _AlphaBetaSearch(_MinimaxSearch):
    """Minimax with an (alpha, beta) cutoff window."""

    __slots__ = ()

    def run(self, ctrl: TurnController, depth: int, side: Color) -> float:
        return self._alphabeta(ctrl, depth, side, -_INF, _INF)

    def _alphabeta(
        self,
        ctrl: TurnController,
        depth: int,
        side: Color,
        alpha: float,
        beta: float,
    ) -> float:
        self.nodes += 1
        if ctrl.is_stalled(side):
            return self._loss_for(side)
        if depth <= 0:
            return self._evaluator.score(ctrl.board)
        options = ctrl.legal_options(side)
        if options.is_empty:
            return self._loss_for(side)

        if side is self._color:
            value = -_INF
            for child in _children(ctrl, options):
                value = max(
                    value, self._alphabeta(child, depth - 1, side.opposite, alpha, beta)
                )
                alpha = max(alpha, value)
                if alpha >= beta:
                    break
            return value

        value = _INF
        for child in _children(ctrl, options):
            value = min(
                value, self._alphabeta(child, depth - 1, side.opposite, alpha, beta)
            )
            beta = min(beta, value)
            if alpha >= beta:
                break
        return value


class SearchPlayer(PlayerBase):
    """Base for agents that pick by searching the game tree.

    Args:
        color: Side the agent plays; the evaluator is re-targeted to it.
        evaluator: Static evaluator used at the depth horizon.
        limits: Depth and worker-pool size.
        rng: Random source for tie-breaking.
        idle_limit: Idle-move limit of the hypothetical controllers when
            no live controller is handed to :meth:`choose`.
    """

    _search_cls: type[_MinimaxSearch] = _MinimaxSearch

    __slots__ = ("_evaluator", "_limits", "_rng", "_idle_limit", "last_result")

    def __init__(
        self,
        color: Color,
        evaluator: IEvaluator,
        limits: SearchLimits | None = None,
        rng: random.Random | None = None,
        name: str = "",
        *,
        idle_limit: int = IDLE_MOVE_LIMIT,
    ) -> None:
        super().__init__(color, name)
        self._evaluator = evaluator.for_color(color)
        self._limits = limits or SearchLimits()
        self._rng = rng or random.Random()
        self._idle_limit = idle_limit
        self.last_result: SearchResult | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @PlayerBase.color.setter
    def color(self, value: Color) -> None:
        self._color = value
        self._evaluator = self._evaluator.for_color(value)

    @property
    def evaluator(self) -> IEvaluator:
        return self._evaluator

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    # ── IPlayer impl ─────────────────────────────────────────────────────

    def choose_move(self, moves: Sequence[Move], board: Board) -> Move:
        return self._search(require_candidates(moves), board)

    def choose_capture(self, chains: Sequence[JumpChain], board: Board) -> JumpChain:
        return self._search(require_candidates(chains), board)

    def choose(
        self,
        options: LegalOptions,
        board: Board,
        controller: TurnController | None = None,
    ) -> Option:
        """Search from *controller* when given, so its idle counters count."""
        candidates = options.captures or options.moves
        return self._search(require_candidates(candidates), board, controller)

    # ── Root search ──────────────────────────────────────────────────────

    def _search(
        self,
        candidates: Sequence[T],
        board: Board,
        controller: TurnController | None = None,
    ) -> T:
        if controller is not None:
            root = controller.copy()
        else:
            root = TurnController(board.copy(), idle_limit=self._idle_limit)
        root.board.clear_captured_flags()
        depth = self._limits.max_depth
        color = self._color
        evaluator = self._evaluator

        def score_candidate(candidate: T) -> tuple[float, int]:
            child = root.copy()
            child.execute(candidate)
            child.promote()
            search = self._search_cls(color, evaluator)
            return search.run(child, depth - 1, color.opposite), search.nodes

        workers = min(self._limits.workers, len(candidates))
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                outcomes = list(executor.map(score_candidate, candidates))
        else:
            outcomes = [score_candidate(c) for c in candidates]

        scores = [score for score, _ in outcomes]
        best_score = max(scores)
        best = [c for c, score in zip(candidates, scores) if score == best_score]
        choice = self._rng.choice(best)

        self.last_result = SearchResult(
            choice=choice,
            score=best_score,
            depth=depth,
            nodes=sum(nodes for _, nodes in outcomes) + 1,
            scores=tuple(zip(candidates, scores)),
        )
        _LOGGER.debug(
            "%s chose %s score=%s (%d of %d tied best, %d nodes)",
            self._name,
            choice,
            best_score,
            len(best),
            len(candidates),
            self.last_result.nodes,
        )
        return choice


class MinimaxPlayer(SearchPlayer):
    """Depth-limited minimax agent."""

    _search_cls = _MinimaxSearch
    __slots__ = ()


class AlphaBetaPlayer(SearchPlayer):
    """Minimax with alpha-beta pruning.

    Each root candidate starts from the full window; root branches do not
    share tightened bounds, which keeps them independent for the pool.
    """

    _search_cls = _AlphaBetaSearch
    __slots__ = ()

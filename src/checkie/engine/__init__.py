"""Search agents and evaluators.

The Qt worker bridge lives in :mod:`checkie.engine.qt_bridge` and is
imported on demand so that the search itself does not pull in Qt.
"""

from checkie.engine.evaluation import (
    DEFAULT_SQUARE_WEIGHTS,
    IEvaluator,
    MaterialEvaluator,
    PositionalEvaluator,
    make_evaluator,
)
from checkie.engine.search import (
    AlphaBetaPlayer,
    MinimaxPlayer,
    SearchLimits,
    SearchPlayer,
    SearchResult,
)

__all__ = [
    "DEFAULT_SQUARE_WEIGHTS",
    "AlphaBetaPlayer",
    "IEvaluator",
    "MaterialEvaluator",
    "MinimaxPlayer",
    "PositionalEvaluator",
    "SearchLimits",
    "SearchPlayer",
    "SearchResult",
    "make_evaluator",
]

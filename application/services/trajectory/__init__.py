"""Rank-trajectory reconstruction: scale, deltas, walk, boundaries, chart rows."""
from .anchor import build_anchor, validate_anchor
from .boundary_detector import BoundaryDetector
from .chart_series import build_chart_rows, estimate_from_outcomes, has_exact
from .delta_inferencer import DeltaInferencer, InferredDelta
from .rank_scale import RankScale
from .reconstructor import TrajectoryReconstructor

__all__ = [
    "build_anchor",
    "validate_anchor",
    "BoundaryDetector",
    "build_chart_rows",
    "estimate_from_outcomes",
    "has_exact",
    "DeltaInferencer",
    "InferredDelta",
    "RankScale",
    "TrajectoryReconstructor",
]

"""Application services root exports."""
from .progress_cache import ProgressCache
from .purge import CachePurger, CachePurgeError, PurgeNotConfirmedError
from .trajectory import (
    BoundaryDetector,
    DeltaInferencer,
    RankScale,
    TrajectoryReconstructor,
)

__all__ = [
    "ProgressCache",
    "CachePurger",
    "CachePurgeError",
    "PurgeNotConfirmedError",
    "BoundaryDetector",
    "DeltaInferencer",
    "RankScale",
    "TrajectoryReconstructor",
]

"""Rows for the LP chart.

The chart plots the continuous scalar from :class:`RankScale` and drops a
marker wherever :class:`BoundaryDetector` sees a rank change. When no
trajectory is available the series can be re-derived from raw win/loss
results with the same inferencer, which keeps both paths on the same LP
constant.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from domain.entities import MatchOutcome, PlayerRankAnchor, TrajectoryPoint

from .boundary_detector import BoundaryDetector
from .delta_inferencer import DeltaInferencer
from .rank_scale import RankScale


def build_chart_rows(points: Sequence[TrajectoryPoint]) -> List[Dict[str, Any]]:
    ordered = sorted(points, key=lambda p: p.label_index)
    rows: List[Dict[str, Any]] = []
    for i, point in enumerate(ordered):
        changed = i > 0 and BoundaryDetector.rank_changed(ordered[i - 1], point)
        rows.append({
            'label': point.label_index,
            'scalar': RankScale.point_to_scalar(point.after),
            'lp': point.after.points,
            'delta': point.delta,
            'result': point.result.value,
            'changed': changed,
            'marker': BoundaryDetector.marker_label(point) if changed else None,
        })
    return rows


def has_exact(points: Sequence[TrajectoryPoint]) -> bool:
    """Badge state: "Exact" if any point came from a verified delta."""
    return any(p.exact for p in points)


def estimate_from_outcomes(
    anchor: PlayerRankAnchor,
    window: Sequence[MatchOutcome],
    inferencer: Optional[DeltaInferencer] = None,
) -> List[Dict[str, Any]]:
    """Degraded LP series straight from newest-first win/loss results."""
    inferencer = inferencer or DeltaInferencer()
    lp = anchor.current.points
    series: List[Dict[str, Any]] = []
    for outcome in window:
        delta = inferencer.infer(outcome).delta
        series.append({'match_id': outcome.match_id, 'lp': lp, 'delta': delta})
        lp -= delta
    series.reverse()
    for label, row in enumerate(series, start=1):
        row['label'] = label
    return series

"""Promotion / demotion detection between consecutive trajectory points."""
from __future__ import annotations

from typing import List, Sequence

from domain.entities import TrajectoryPoint


class BoundaryDetector:

    @staticmethod
    def rank_changed(previous: TrajectoryPoint, current: TrajectoryPoint) -> bool:
        """True when the pair's resulting ranks differ in tier or division."""
        return (
            previous.after.tier is not current.after.tier
            or previous.after.division is not current.after.division
        )

    @classmethod
    def boundaries(cls, points: Sequence[TrajectoryPoint]) -> List[int]:
        """Label indices whose point lands in a different rank than the one before."""
        ordered = sorted(points, key=lambda p: p.label_index)
        return [
            cur.label_index
            for prev, cur in zip(ordered, ordered[1:])
            if cls.rank_changed(prev, cur)
        ]

    @staticmethod
    def marker_label(point: TrajectoryPoint) -> str:
        return point.after.label

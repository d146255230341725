"""Backward reconstruction of an LP trajectory from the current rank."""
from __future__ import annotations

from typing import List, Optional, Sequence

from config import settings
from core.logging.logger import get_logger, traceable
from domain.entities import MatchOutcome, PlayerRankAnchor, RankPoint, TrajectoryPoint
from domain.exceptions import WindowValidationError

from .anchor import validate_anchor
from .delta_inferencer import DeltaInferencer


class TrajectoryReconstructor:
    """Walks a newest-first match window back from the anchor.

    The newest match ends at the anchor's current rank; each match starts
    ``delta`` LP lower than it ended, and the next-older match ends where
    this one started. Tier and division are carried over unchanged and LP is
    not clamped, so a point near a promotion or demotion may sit outside
    [0, 100). That approximation is intentional.
    """

    def __init__(
        self,
        inferencer: Optional[DeltaInferencer] = None,
        window_size: Optional[int] = None,
    ) -> None:
        self.inferencer = inferencer or DeltaInferencer()
        self.window_size = settings.MATCH_WINDOW_SIZE if window_size is None else window_size
        self._log = get_logger(__name__, service="trajectory")

    @traceable
    def reconstruct(
        self,
        anchor: PlayerRankAnchor,
        window: Sequence[MatchOutcome],
    ) -> List[TrajectoryPoint]:
        """Return one point per match, oldest first, labelled 1..K."""
        validate_anchor(anchor)
        if len(window) > self.window_size:
            raise WindowValidationError(
                f"Match window has {len(window)} entries, limit is {self.window_size}"
            )
        if not window:
            return []

        newest_first: list[tuple[MatchOutcome, RankPoint, RankPoint, int, bool]] = []
        after = anchor.current
        for outcome in window:
            inferred = self.inferencer.infer(outcome)
            before = after.with_points(after.points - inferred.delta)
            newest_first.append((outcome, before, after, inferred.delta, inferred.exact))
            after = before

        points = [
            TrajectoryPoint(
                label_index=label,
                before=before,
                after=after,
                delta=delta,
                result=self.inferencer.result_for(outcome),
                match_id=outcome.match_id,
                exact=exact,
                played_at=outcome.played_at,
            )
            for label, (outcome, before, after, delta, exact) in enumerate(reversed(newest_first), start=1)
        ]
        self._log.debug(
            lambda: f"reconstructed {len(points)} points ending at {anchor.current}",
        )
        return points

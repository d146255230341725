"""LP delta for one match when Riot does not report the real gain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from config import settings
from domain.entities import MatchOutcome
from domain.enums import MatchResult


@dataclass(frozen=True, slots=True)
class InferredDelta:
    delta: int
    exact: bool


class DeltaInferencer:
    """Signed LP change per match.

    ``exact_deltas`` maps match ids to verified gains from a precise source;
    those win over the heuristic. Everything else gets ``+heuristic_delta``
    for a win and ``-heuristic_delta`` otherwise, including outcomes whose
    result is unknown.
    """

    def __init__(
        self,
        heuristic_delta: Optional[int] = None,
        exact_deltas: Optional[Mapping[str, int]] = None,
    ) -> None:
        self.heuristic_delta = abs(settings.LP_HEURISTIC_DELTA if heuristic_delta is None else heuristic_delta)
        self._exact = dict(exact_deltas or {})

    def infer(self, outcome: MatchOutcome) -> InferredDelta:
        exact = self._exact.get(outcome.match_id)
        if exact is not None:
            return InferredDelta(int(exact), True)
        if outcome.win is True:
            return InferredDelta(self.heuristic_delta, False)
        return InferredDelta(-self.heuristic_delta, False)

    @staticmethod
    def result_for(outcome: MatchOutcome) -> MatchResult:
        return MatchResult.from_win(outcome.win)

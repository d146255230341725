"""Console rendering of a reconstructed trajectory."""
from __future__ import annotations

from typing import List

from application.services.trajectory import build_chart_rows, has_exact
from application.use_cases import RankProgressResult

_GREEN = "\033[92m"
_RED = "\033[91m"
_CYAN = "\033[96m"
_RESET = "\033[0m"


def render_result(result: RankProgressResult) -> List[str]:
    """Lines for a trajectory table, oldest game first."""
    if not result.points:
        return ["No recent Ranked Solo games found."]

    badge = "Exact" if has_exact(result.points) else "Estimated"
    lines = [
        f"LP trend (last {len(result.points)} games) [{badge}]",
        f"{'#':>3}  {'match':<18} {'res':<4} {'delta':>5}  {'before':<22} {'after':<22} {'scalar':>6}",
    ]
    by_label = {p.label_index: p for p in result.points}
    for row in build_chart_rows(result.points):
        point = by_label[row['label']]
        color = _GREEN if row['result'] == "Win" else _RED
        marker = f"  {_CYAN}◆ {row['marker']}{_RESET}" if row['changed'] else ""
        lines.append(
            f"{row['label']:>3}  {point.match_id:<18} {color}{row['result']:<4}{_RESET} "
            f"{row['delta']:>+5}  {str(point.before):<22} {str(point.after):<22} {row['scalar']:>6}{marker}"
        )
    lines.append(f"cached: {result.stored} new, {result.cache_failures} failed")
    return lines

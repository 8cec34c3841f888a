"""
Ranker

Orders recommendations by priority and keeps the top entries.
"""

from typing import List

from .contracts import Recommendation
from .constants import PRIORITY_ORDER, MAX_RECOMMENDATIONS


def rank_recommendations(
    recommendations: List[Recommendation],
    limit: int = MAX_RECOMMENDATIONS
) -> List[Recommendation]:
    """
    Rank recommendations by priority (high first) and truncate.

    The sort is stable, so entries with equal priority keep the order in
    which the rules produced them.

    Args:
        recommendations: Recommendations in rule order
        limit: Maximum number of entries to return

    Returns:
        Ranked and truncated list
    """
    ranked = sorted(
        recommendations,
        key=lambda rec: PRIORITY_ORDER[rec.priority]
    )
    return ranked[:limit]

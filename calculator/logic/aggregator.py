"""
Score Aggregator

Combines the category scores into the final ScoringResult.
Applies clamping and classification.
"""

from typing import Dict, List

from .contracts import AnswerRecord, CategoryScore, CategoryScores, ScoringResult
from .category_scorers import (
    score_personal,
    score_education,
    score_qualifications,
    score_financial,
)
from .classifier import classify_probability
from .constants import Category, MAX_TOTAL_SCORE


# Evaluation order also fixes the order of strengths and weaknesses
CATEGORY_SCORERS = [
    score_personal,
    score_education,
    score_qualifications,
    score_financial,
]


def score_categories(answer: AnswerRecord) -> Dict[Category, CategoryScore]:
    """Run every category scorer, keyed by category in evaluation order."""
    category_scores: Dict[Category, CategoryScore] = {}
    for scorer in CATEGORY_SCORERS:
        score = scorer(answer)
        category_scores[score.category] = score
    return category_scores


def aggregate_scores(answer: AnswerRecord) -> ScoringResult:
    """
    Compute all category scores and aggregate them into a ScoringResult.

    The total uses the raw qualifications points, which may be negative;
    only the reported qualifications subscore is floored at 0.

    Args:
        answer: Completed questionnaire

    Returns:
        ScoringResult with total, tier, subscores, strengths and weaknesses
    """
    category_scores = score_categories(answer)
    strengths: List[str] = []
    weaknesses: List[str] = []

    for score in category_scores.values():
        strengths.extend(score.strengths)
        weaknesses.extend(score.weaknesses)

    raw_total = sum(score.points for score in category_scores.values())
    total_score = min(raw_total, MAX_TOTAL_SCORE)

    return ScoringResult(
        total_score=total_score,
        probability=classify_probability(total_score),
        category_scores=CategoryScores(
            personal=category_scores[Category.PERSONAL].points,
            education=category_scores[Category.EDUCATION].points,
            qualifications=max(category_scores[Category.QUALIFICATIONS].points, 0),
            financial=category_scores[Category.FINANCIAL].points,
        ),
        strengths=strengths,
        weaknesses=weaknesses,
    )

"""
Visa Calculator Engine

Main orchestrator that combines scoring and recommendations into a single
pipeline. This is the primary entry point for the visa probability calculator.
"""

import logging
import time
import uuid
from typing import List

from .contracts import AnswerRecord, CalculatorOutput, Recommendation, ScoringResult
from .aggregator import aggregate_scores
from .recommendation_rules import generate_recommendations
from .ranker import rank_recommendations
from .constants import ENGINE_VERSION

logger = logging.getLogger(__name__)


def score(answer: AnswerRecord) -> ScoringResult:
    """Score a completed questionnaire. Pure and deterministic."""
    return aggregate_scores(answer)


def recommend(answer: AnswerRecord, result: ScoringResult) -> List[Recommendation]:
    """Build the ranked recommendation list (at most five entries)."""
    return rank_recommendations(generate_recommendations(answer, result))


class VisaCalculatorEngine:
    """
    Visa probability calculator.

    Pipeline flow:
    1. Category Scoring - personal, education, qualifications, financial
    2. Aggregation - Sum, clamp and classify into a probability tier
    3. Recommendation Rules - Collect every rule that fires
    4. Ranking - Sort by priority and keep the top five
    """

    def __init__(self):
        self.version = ENGINE_VERSION

    def calculate(self, answer: AnswerRecord) -> CalculatorOutput:
        """
        Score the answers and build recommendations.

        Args:
            answer: Completed questionnaire

        Returns:
            CalculatorOutput with result, recommendations and metadata
        """
        start_time = time.perf_counter()

        result = score(answer)
        recommendations = recommend(answer, result)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "Calculated visa probability: score=%s tier=%s recommendations=%s",
            result.total_score, result.probability, len(recommendations)
        )

        return CalculatorOutput(
            request_id=str(uuid.uuid4()),
            result=result,
            recommendations=recommendations,
            engine_version=self.version,
            processing_time_ms=round(processing_time, 2),
        )

    def calculate_from_dict(self, answer_data: dict) -> CalculatorOutput:
        """
        Validate a raw answer dict and calculate.

        Convenience method for API integration. Raises pydantic's
        ValidationError when the answers are incomplete or invalid.
        """
        answer = AnswerRecord(**answer_data)
        return self.calculate(answer)

    def score_breakdown(self, answer: AnswerRecord) -> dict:
        """
        Detailed per-category scoring for one questionnaire.

        Useful for advisors checking where points came from. Category
        points are raw, so qualifications may be negative here.

        Args:
            answer: Completed questionnaire

        Returns:
            Dict with total, tier and per-category points and explanations
        """
        from .aggregator import score_categories

        result = score(answer)
        categories = score_categories(answer)

        return {
            "total_score": result.total_score,
            "probability": result.probability,
            "categories": {
                category.value: {
                    "points": category_score.points,
                    "explanation": category_score.explanation,
                    "strengths": category_score.strengths,
                    "weaknesses": category_score.weaknesses,
                }
                for category, category_score in categories.items()
            },
        }


# Convenience function for simple usage
def get_assessment(answer: AnswerRecord) -> CalculatorOutput:
    engine = VisaCalculatorEngine()
    return engine.calculate(answer)

"""
Classifier

Maps a total score onto a probability tier:
- High (>= HIGH_PROBABILITY_THRESHOLD)
- Medium (>= MEDIUM_PROBABILITY_THRESHOLD)
- Low (everything else)
"""

from .constants import (
    Probability,
    HIGH_PROBABILITY_THRESHOLD,
    MEDIUM_PROBABILITY_THRESHOLD,
)


def classify_probability(total_score: int) -> Probability:
    """
    Classify a total score into a probability tier.

    Args:
        total_score: Clamped total score (0-100)

    Returns:
        Probability enum value
    """
    if total_score >= HIGH_PROBABILITY_THRESHOLD:
        return Probability.HIGH
    if total_score >= MEDIUM_PROBABILITY_THRESHOLD:
        return Probability.MEDIUM
    return Probability.LOW

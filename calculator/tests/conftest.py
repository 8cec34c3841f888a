"""
Shared fixtures for the calculator tests.

Tests build variations of the profiles in ``profiles.py`` with ``make_answer``.
"""

import pytest

from calculator.logic import AnswerRecord

from .profiles import STRONG_PROFILE, WEAK_PROFILE


def build_answer(base: dict, **overrides) -> AnswerRecord:
    data = dict(base)
    data.update(overrides)
    return AnswerRecord(**data)


@pytest.fixture
def make_answer():
    """Factory: make_answer(**overrides) on top of STRONG_PROFILE."""
    def _make(base: dict = STRONG_PROFILE, **overrides) -> AnswerRecord:
        return build_answer(base, **overrides)
    return _make


@pytest.fixture
def strong_answer() -> AnswerRecord:
    return build_answer(STRONG_PROFILE)


@pytest.fixture
def weak_answer() -> AnswerRecord:
    return build_answer(WEAK_PROFILE)

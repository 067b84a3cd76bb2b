"""
Advisory signals that never block a submission: technical feasibility,
market awareness and low-effort or business-blind wording.
"""

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .data_models import Submission
from .patterns import (
    BUSINESS_KEYWORDS,
    COMPLEXITY_INDICATORS,
    MARKET_KEYWORDS,
    MINIMAL_EFFORT_PHRASES,
    SIMPLICITY_INDICATORS,
)
from .text import extract_text


@dataclass
class FeasibilityReport:
    complexity: int
    simplicity: int
    feasibility_score: int


@dataclass
class MarketReport:
    market_awareness: bool
    market_score: int


def _count_phrases(text: str, phrases: Sequence[str]) -> int:
    # Whole-word matching; short indicators like "ai" would otherwise hit "said".
    lowered = text.lower()
    return sum(
        1 for phrase in phrases
        if re.search(rf"\b{re.escape(phrase)}\b", lowered)
    )


def check_technical_feasibility(submission: Union[Submission, str]) -> FeasibilityReport:
    text = extract_text(submission)
    complexity = _count_phrases(text, COMPLEXITY_INDICATORS)
    simplicity = _count_phrases(text, SIMPLICITY_INDICATORS)
    return FeasibilityReport(
        complexity=complexity,
        simplicity=simplicity,
        feasibility_score=max(0, 10 - complexity + simplicity),
    )


def check_market_understanding(submission: Union[Submission, str]) -> MarketReport:
    hits = _count_phrases(extract_text(submission), MARKET_KEYWORDS)
    return MarketReport(market_awareness=hits > 0, market_score=min(hits * 2, 10))


def content_advisories(submission: Union[Submission, str]) -> List[Tuple[str, str]]:
    """(tag, message) warnings about vague or business-blind wording."""
    text = extract_text(submission)
    advisories = []

    if _count_phrases(text, MINIMAL_EFFORT_PHRASES) > 0:
        advisories.append((
            "CONTENT_VAGUE",
            "Consider providing more specific details and concrete plans",
        ))

    if _count_phrases(text, BUSINESS_KEYWORDS) == 0:
        advisories.append((
            "BUSINESS_MODEL",
            "Consider addressing business model and monetization strategy",
        ))

    return advisories

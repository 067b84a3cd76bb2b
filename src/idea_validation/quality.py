import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .data_models import ScoreBreakdown, Submission
from .patterns import (
    AUDIENCE_KEYWORDS,
    COMPETITIVE_KEYWORDS,
    PROBLEM_KEYWORDS,
    RESEARCH_KEYWORDS,
    SOLUTION_KEYWORDS,
    VAGUE_KEYWORDS,
)
from .text import count_keyword_hits, extract_text

# Stage fields count as substantial once they pass this many characters.
SUBSTANTIAL_TEXT_CHARS = 50


@dataclass(frozen=True)
class SectionRule:
    """How one free-text field earns points."""
    field_name: str
    min_length: int
    base_points: int
    keywords: Tuple[str, ...]
    points_per_keyword: int
    keyword_cap: int
    length_bonuses: Tuple[Tuple[int, int], ...]  # (length above, points)

    def score(self, text: str) -> int:
        if len(text) <= self.min_length:
            return 0
        points = self.base_points
        hits = count_keyword_hits(text, self.keywords)
        points += min(hits * self.points_per_keyword, self.keyword_cap)
        for length, bonus in self.length_bonuses:
            if len(text) > length:
                points += bonus
        return points


PROBLEM_RULE = SectionRule("pain_points", 30, 8, PROBLEM_KEYWORDS, 2, 8, ((100, 4), (180, 5)))
AUDIENCE_RULE = SectionRule("ideal_customer_profile", 25, 6, AUDIENCE_KEYWORDS, 2, 8, ((80, 3), (150, 3)))
SOLUTION_RULE = SectionRule("product_idea", 30, 8, SOLUTION_KEYWORDS, 2, 8, ((120, 4), (200, 5)))
DIFFERENTIATION_RULE = SectionRule("alternatives", 15, 5, COMPETITIVE_KEYWORDS, 2, 7, ((60, 3),))

CATEGORY_POINTS = 2
CATEGORY_CAP = 8
CATEGORY_FOCUS_LIMIT = 3
CATEGORY_PENALTY = 2

RESEARCH_CAP = 5
VAGUE_PENALTY = 2
VAGUE_CAP = 10


class QualityScorer:
    """
    Scores a submission from 0 to 100 with an additive point model.

    Each section only earns points once its field passes a minimum length,
    so keyword stuffing a one-liner does not pay. Stage bonuses are only
    added when the caller passes the draft number being validated.
    """

    def __init__(self, substantial_chars: int = SUBSTANTIAL_TEXT_CHARS):
        self.substantial_chars = substantial_chars
        self.logger = logging.getLogger(__name__)

    def score(self, submission: Submission, draft_number: Optional[int] = None) -> int:
        return self.breakdown(submission, draft_number).total

    def breakdown(self, submission: Submission, draft_number: Optional[int] = None) -> ScoreBreakdown:
        submission = Submission.from_dict(submission)
        result = ScoreBreakdown(
            problem_statement=self._section_points(submission, PROBLEM_RULE),
            target_audience=self._section_points(submission, AUDIENCE_RULE),
            solution_description=self._section_points(submission, SOLUTION_RULE),
            differentiation=self._section_points(submission, DIFFERENTIATION_RULE),
            categories=self._category_points(submission.category),
            quality_indicators=self._indicator_points(extract_text(submission)),
        )
        if draft_number is not None:
            result.stage_bonus = self._stage_bonus(submission, draft_number)

        self.logger.debug(f"Quality score {result.total}: {result}")
        return result

    def _section_points(self, submission: Submission, rule: SectionRule) -> int:
        return rule.score(submission.text_of(rule.field_name))

    def _category_points(self, categories: Sequence[str]) -> int:
        if not categories:
            return 0
        points = min(len(categories) * CATEGORY_POINTS, CATEGORY_CAP)
        if len(categories) > CATEGORY_FOCUS_LIMIT:
            points -= CATEGORY_PENALTY
        return points

    def _indicator_points(self, text: str) -> int:
        bonus = min(count_keyword_hits(text, RESEARCH_KEYWORDS), RESEARCH_CAP)
        penalty = min(count_keyword_hits(text, VAGUE_KEYWORDS) * VAGUE_PENALTY, VAGUE_CAP)
        return bonus - penalty

    def _is_substantial(self, text: str) -> bool:
        return len(text.strip()) > self.substantial_chars

    def _stage_bonus(self, submission: Submission, draft_number: int) -> int:
        bonus = 0
        if draft_number >= 2:
            if self._is_substantial(submission.text_of("market_validation")):
                bonus += 5
            if self._is_substantial(submission.text_of("competitor_research")):
                bonus += 5
        if draft_number >= 3:
            if self._is_substantial(submission.text_of("investor_pitch")):
                bonus += 10
            if submission.has_content("mvp_link"):
                bonus += 5
        return bonus


def calculate_quality_score(submission: Submission, draft_number: Optional[int] = None) -> int:
    return QualityScorer().score(submission, draft_number)

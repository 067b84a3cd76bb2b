"""
Draft progression for a (user, project) pair.

A project accepts up to three real drafts; the third is final. Placeholder
drafts (auto-created, still without content) do not count towards the limit.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from .data_models import CORE_FIELDS, FINAL_DRAFT, Submission
from .errors import InvalidSubmissionError, MaxDraftsReachedError

PLACEHOLDER_MARKER = "Not specified"
SCORE_DIVERGENCE_LIMIT = 15

DraftLike = Union[Submission, Mapping[str, Any]]


def _field(draft: DraftLike, name: str) -> Any:
    if isinstance(draft, Mapping):
        return draft.get(name)
    return getattr(draft, name, None)


def is_placeholder_draft(draft: Optional[DraftLike]) -> bool:
    """True when none of the core fields holds real content."""
    if draft is None:
        return True
    for name in CORE_FIELDS:
        value = _field(draft, name)
        if isinstance(value, str) and value.strip() and PLACEHOLDER_MARKER not in value:
            return False
    return True


def count_real_drafts(drafts: Iterable[DraftLike]) -> int:
    count = 0
    for index, draft in enumerate(drafts):
        version = _field(draft, "version") or 0
        try:
            version = int(version)
        except (TypeError, ValueError):
            raise InvalidSubmissionError(
                f"Draft version must be a whole number, got {version!r}",
                context={"field": "version", "draft": index},
            )
        if version > 0 and not is_placeholder_draft(draft):
            count += 1
    return count


def next_draft_number(drafts: Iterable[DraftLike]) -> int:
    """Draft number the next submission for this project should carry.

    A value above FINAL_DRAFT means the project is already closed.
    """
    return count_real_drafts(drafts) + 1


def require_next_draft_number(drafts: Iterable[DraftLike]) -> int:
    number = next_draft_number(drafts)
    if number > FINAL_DRAFT:
        raise MaxDraftsReachedError(
            "Maximum submissions reached for this project",
            context={"drafts": number - 1},
        )
    return number


@dataclass
class ScoreDivergence:
    """Local quality score next to an AI-generated score for the same draft.

    Neither score overrides the other; callers decide how to present a
    divergence.
    """
    local_score: int
    ai_score: Optional[int]
    difference: Optional[int]
    diverged: bool


def score_divergence(local_score: int, ai_score: Optional[Union[int, float]]) -> ScoreDivergence:
    if ai_score is None:
        return ScoreDivergence(local_score=local_score, ai_score=None, difference=None, diverged=False)
    ai = int(round(ai_score))
    difference = abs(ai - local_score)
    return ScoreDivergence(
        local_score=local_score,
        ai_score=ai,
        difference=difference,
        diverged=difference > SCORE_DIVERGENCE_LIMIT,
    )

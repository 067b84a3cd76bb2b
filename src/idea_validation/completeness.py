from typing import Dict, List, Optional, Tuple

from .config import ValidationPolicy
from .data_models import CompletenessReport, Submission, WordCountCheck
from .text import count_words

REQUIRED_PENALTY = 25
OPTIONAL_PENALTY = 5


def check_completeness(
    submission: Submission,
    draft_number: int = 1,
    policy: Optional[ValidationPolicy] = None,
) -> CompletenessReport:
    """Lists required and optional fields the submission leaves empty."""
    policy = policy or ValidationPolicy()

    missing_required = [
        name for name in policy.required_for(draft_number)
        if not submission.has_content(name)
    ]
    missing_optional = [
        name for name in policy.optional_for(draft_number)
        if not submission.has_content(name)
    ]
    score = 100 - len(missing_required) * REQUIRED_PENALTY - len(missing_optional) * OPTIONAL_PENALTY

    return CompletenessReport(
        missing_required=missing_required,
        missing_optional=missing_optional,
        completion_score=max(0, score),
    )


def check_word_count(field_name: str, text: str, minimum: int, maximum: int) -> WordCountCheck:
    return WordCountCheck(
        field_name=field_name,
        count=count_words(text),
        minimum=minimum,
        maximum=maximum,
    )


def check_word_counts(
    submission: Submission,
    draft_number: int = 1,
    limits: Optional[Dict[str, Tuple[int, int]]] = None,
) -> List[WordCountCheck]:
    """Word counts for every populated field with bounds at this draft stage.

    Empty fields are skipped; they are reported by check_completeness instead.
    """
    if limits is None:
        limits = ValidationPolicy().word_limits_for(draft_number)

    checks = []
    for name, (minimum, maximum) in limits.items():
        if not submission.has_content(name):
            continue
        checks.append(check_word_count(name, submission.text_of(name), minimum, maximum))
    return checks

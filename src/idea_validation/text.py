import re
from typing import List, Union

from .data_models import Submission

# Order in which fields are flattened into a single text blob.
TEXT_FIELDS = (
    "ideal_customer_profile",
    "product_idea",
    "pain_points",
    "alternatives",
    "market_validation",
    "competitor_research",
    "additional_research",
    "mvp_development",
    "investor_pitch",
)

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def extract_text(submission: Union[Submission, str]) -> str:
    """Flatten all populated text fields of a submission into one string."""
    if isinstance(submission, str):
        return submission

    parts = [submission.text_of(name) for name in TEXT_FIELDS]
    if submission.category:
        parts.append(" ".join(submission.category))
    parts.append(submission.text_of("heard_about"))
    return " ".join(part for part in parts if part)


def normalize_text(text: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    text = _NON_WORD.sub("", (text or "").lower())
    return _WHITESPACE.sub(" ", text).strip()


def split_words(text: str) -> List[str]:
    """Whitespace tokens, empty tokens dropped."""
    return (text or "").split()


def count_words(text: str) -> int:
    return len(split_words(text))


def count_keyword_hits(text: str, keywords) -> int:
    """Number of distinct keywords that occur anywhere in the text."""
    lowered = (text or "").lower()
    return sum(1 for keyword in keywords if keyword in lowered)

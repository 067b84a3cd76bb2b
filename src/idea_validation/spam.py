import logging
from collections import Counter
from typing import Sequence, Union

from .data_models import SpamCheck, Submission, coerce_submission
from .patterns import LOW_DENSITY_REASON, REPETITION_REASON, SPAM_PATTERNS, PatternRule
from .text import extract_text

# Gibberish guard: few distinct words across a long text.
MIN_LEXICAL_DENSITY = 0.25
DENSITY_WORD_FLOOR = 20

# Filler guard: a single word dominating a long text.
MAX_WORD_SHARE = 0.15
REPETITION_WORD_FLOOR = 30


class SpamDetector:
    """
    Flags promotional, gibberish or padded submissions.
    """

    def __init__(self, patterns: Sequence[PatternRule] = SPAM_PATTERNS):
        self.patterns = tuple(patterns)
        self.logger = logging.getLogger(__name__)

    def check(self, submission: Union[Submission, str]) -> SpamCheck:
        text = extract_text(coerce_submission(submission))

        for rule in self.patterns:
            if rule.matches(text):
                self.logger.debug(f"Spam pattern '{rule.name}' matched")
                return SpamCheck(is_spam=True, reason=rule.reason)

        words = [word for word in text.lower().split() if len(word) > 2]
        if not words:
            return SpamCheck(is_spam=False)

        density = len(set(words)) / len(words)
        if density < MIN_LEXICAL_DENSITY and len(words) > DENSITY_WORD_FLOOR:
            self.logger.debug(f"Low lexical density {density:.2f} over {len(words)} words")
            return SpamCheck(is_spam=True, reason=LOW_DENSITY_REASON)

        top_count = Counter(words).most_common(1)[0][1]
        if top_count > len(words) * MAX_WORD_SHARE and len(words) > REPETITION_WORD_FLOOR:
            self.logger.debug(f"Word repeated {top_count} times over {len(words)} words")
            return SpamCheck(is_spam=True, reason=REPETITION_REASON)

        return SpamCheck(is_spam=False)


def check_spam(submission: Union[Submission, str]) -> SpamCheck:
    return SpamDetector().check(submission)

import logging
from typing import Sequence, Union

from .data_models import PrivacyCheck, Submission, coerce_submission
from .patterns import PRIVACY_PATTERNS, PatternRule
from .text import extract_text


class PrivacyDetector:
    """
    Looks for personal details (emails, phone numbers, ID numbers, addresses)
    that should never be published with an idea. Best effort only; both
    false positives and false negatives are expected.
    """

    def __init__(self, patterns: Sequence[PatternRule] = PRIVACY_PATTERNS):
        self.patterns = tuple(patterns)
        self.logger = logging.getLogger(__name__)

    def check(self, submission: Union[Submission, str]) -> PrivacyCheck:
        text = extract_text(coerce_submission(submission))
        for rule in self.patterns:
            if rule.matches(text):
                self.logger.debug(f"Privacy pattern '{rule.name}' matched")
                return PrivacyCheck(has_private_info=True, reason=rule.reason)
        return PrivacyCheck(has_private_info=False)


def check_privacy(submission: Union[Submission, str]) -> PrivacyCheck:
    return PrivacyDetector().check(submission)

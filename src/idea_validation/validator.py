import logging
from typing import Any, Iterable, Mapping, Optional, Union

from .completeness import check_completeness, check_word_counts
from .config import ValidationPolicy, clamp_draft_number
from .data_models import FINAL_DRAFT, ExistingIdea, Submission, ValidationResult
from .duplicates import DuplicateDetector
from .insights import content_advisories
from .privacy import PrivacyDetector
from .quality import QualityScorer
from .spam import SpamDetector

SubmissionInput = Union[Submission, Mapping[str, Any]]


class SubmissionValidator:
    """
    Validates an idea submission for one draft stage.

    Every check runs in a single pass and reports into the same
    ValidationResult; a submission passes only when no check recorded an
    error. Warnings never block.
    """

    def __init__(self, policy: Optional[ValidationPolicy] = None):
        self.policy = policy or ValidationPolicy()
        self.spam_detector = SpamDetector()
        self.privacy_detector = PrivacyDetector()
        self.duplicate_detector = DuplicateDetector(threshold=self.policy.duplicate_threshold)
        self.quality_scorer = QualityScorer()
        self.logger = logging.getLogger(__name__)

    def validate(
        self,
        submission: SubmissionInput,
        existing_ideas: Optional[Iterable[Union[ExistingIdea, Mapping[str, Any]]]] = None,
        draft_number: int = 1,
    ) -> ValidationResult:
        """
        Performs a full validation of a submission.
        """
        submission = Submission.from_dict(submission)
        draft_number = clamp_draft_number(draft_number)
        result = ValidationResult()

        self._check_completeness(submission, draft_number, result)
        self._check_spam(submission, result)
        self._check_privacy(submission, result)
        if draft_number == FINAL_DRAFT:
            self._check_duplicates(submission, existing_ideas, result)
        self._check_quality(submission, draft_number, result)
        self._check_word_counts(submission, draft_number, result)
        self._check_categories(submission, result)
        for tag, message in content_advisories(submission):
            result.add_warning(tag, message)

        self.logger.info(
            f"Draft {draft_number} validation {'passed' if result.passed else 'failed'}: "
            f"score={result.quality_score}, errors={len(result.errors)}, warnings={len(result.warnings)}"
        )
        return result

    def _check_completeness(self, submission: Submission, draft_number: int, result: ValidationResult):
        report = check_completeness(submission, draft_number, self.policy)
        for name in report.missing_required:
            result.add_error("REQUIRED_FIELD_MISSING", name)
        for name in report.missing_optional:
            # Categories have their own count policy below.
            if name != "category":
                result.add_warning("OPTIONAL_FIELD_MISSING", name)

    def _check_spam(self, submission: Submission, result: ValidationResult):
        check = self.spam_detector.check(submission)
        if check.is_spam:
            result.add_error("SPAM", check.reason)

    def _check_privacy(self, submission: Submission, result: ValidationResult):
        check = self.privacy_detector.check(submission)
        if check.has_private_info:
            result.add_error("PRIVACY", check.reason)

    def _check_duplicates(self, submission: Submission, existing_ideas, result: ValidationResult):
        check = self.duplicate_detector.check(submission, existing_ideas)
        if check.is_duplicate:
            result.add_error("DUPLICATE", check.reason)

    def _check_quality(self, submission: Submission, draft_number: int, result: ValidationResult):
        score = self.quality_scorer.score(submission, draft_number)
        result.quality_score = score

        minimum = self.policy.min_score_for(draft_number)
        if score < minimum:
            result.add_error(
                "QUALITY_LOW",
                f"Quality score {score}/100 is below minimum threshold ({minimum})",
            )
        elif score < minimum + self.policy.borderline_margin:
            result.add_warning(
                "QUALITY_BORDERLINE",
                f"Quality score {score}/100 is close to the minimum ({minimum}). Consider adding more detail.",
            )

    def _check_word_counts(self, submission: Submission, draft_number: int, result: ValidationResult):
        limits = self.policy.word_limits_for(draft_number)
        for check in check_word_counts(submission, draft_number, limits):
            if check.too_short:
                result.add_error(
                    "WORD_COUNT_LOW",
                    f"{check.field_name} too short ({check.count} words, minimum {check.minimum})",
                )
            elif check.too_long:
                result.add_warning(
                    "WORD_COUNT_HIGH",
                    f"{check.field_name} very long ({check.count} words, maximum {check.maximum})",
                )

    def _check_categories(self, submission: Submission, result: ValidationResult):
        count = len(submission.category)
        if count == 0:
            result.add_warning("CATEGORY_NONE", "No categories selected - this helps with categorization")
        elif count > self.policy.max_categories:
            result.add_warning(
                "CATEGORY_EXCESS",
                f"Too many categories selected (max {self.policy.max_categories}) - focus on the most relevant",
            )


def validate_submission(
    submission: SubmissionInput,
    existing_ideas: Optional[Iterable[Union[ExistingIdea, Mapping[str, Any]]]] = None,
    draft_number: int = 1,
    policy: Optional[ValidationPolicy] = None,
) -> ValidationResult:
    return SubmissionValidator(policy).validate(submission, existing_ideas, draft_number)

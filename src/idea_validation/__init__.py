"""Idea submission validation and scoring

Checks a startup-idea submission for:
- Missing required fields for its draft stage
- Spam and promotional content
- Personal information
- Near-duplicates of published ideas (final draft only)
- Quality score against a stage-dependent minimum
- Word counts
"""

from .config import ValidationPolicy
from .data_models import ExistingIdea, Submission, ValidationResult
from .duplicates import DuplicateDetector, calculate_similarity, check_duplicates
from .errors import (
    IdeaValidationError,
    InvalidSubmissionError,
    MaxDraftsReachedError,
    PolicyConfigurationError,
)
from .privacy import PrivacyDetector, check_privacy
from .quality import QualityScorer, calculate_quality_score
from .spam import SpamDetector, check_spam
from .validator import SubmissionValidator, validate_submission

__all__ = [
    'ValidationPolicy',
    'Submission',
    'ExistingIdea',
    'ValidationResult',
    'SubmissionValidator',
    'validate_submission',
    'SpamDetector',
    'check_spam',
    'PrivacyDetector',
    'check_privacy',
    'DuplicateDetector',
    'check_duplicates',
    'calculate_similarity',
    'QualityScorer',
    'calculate_quality_score',
    'IdeaValidationError',
    'InvalidSubmissionError',
    'MaxDraftsReachedError',
    'PolicyConfigurationError',
]

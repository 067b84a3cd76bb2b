"""
Exception types for the idea validation package.

Validation outcomes (spam, privacy, duplicates, low quality) are reported as
data on ValidationResult. The exceptions here cover input the validator
cannot work with at all and broken policy configuration.
"""

from typing import Any, Dict, Optional


class IdeaValidationError(Exception):
    """Base class for idea validation errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "context": self.context,
        }


class InvalidSubmissionError(IdeaValidationError, ValueError):
    """Raised when a submission is missing or cannot be read as text fields."""


class PolicyConfigurationError(IdeaValidationError, ValueError):
    """Raised when a validation policy cannot be built from its source."""


class MaxDraftsReachedError(IdeaValidationError):
    """Raised when a project already holds its final draft."""

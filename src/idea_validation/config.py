"""
Validation policy: the tunable thresholds and field sets behind each draft stage.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

from .data_models import FINAL_DRAFT
from .errors import PolicyConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORES: Dict[int, int] = {1: 25, 2: 35, 3: 45}

DEFAULT_WORD_LIMITS: Dict[str, Tuple[int, int]] = {
    "product_idea": (15, 300),
    "ideal_customer_profile": (10, 200),
    "pain_points": (15, 250),
    "alternatives": (5, 200),
    "market_validation": (20, 300),
    "competitor_research": (20, 300),
    "investor_pitch": (20, 300),
}

DEFAULT_REQUIRED_FIELDS: Dict[int, Tuple[str, ...]] = {
    1: ("ideal_customer_profile", "product_idea", "pain_points", "alternatives"),
    2: ("market_validation", "competitor_research"),
    3: ("investor_pitch",),
}

DEFAULT_OPTIONAL_FIELDS: Dict[int, Tuple[str, ...]] = {
    1: ("category", "heard_about"),
    2: ("additional_research",),
    3: ("mvp_development", "mvp_link"),
}


def clamp_draft_number(draft_number: Any) -> int:
    """Coerces a draft number into the supported 1..FINAL_DRAFT range."""
    try:
        number = int(draft_number)
    except (TypeError, ValueError):
        return 1
    return max(1, min(number, FINAL_DRAFT))


@dataclass
class ValidationPolicy:
    """Thresholds applied by the submission validator."""
    min_scores: Dict[int, int] = field(default_factory=lambda: dict(DEFAULT_MIN_SCORES))
    borderline_margin: int = 15
    duplicate_threshold: float = 0.70
    max_categories: int = 5
    word_limits: Dict[str, Tuple[int, int]] = field(default_factory=lambda: dict(DEFAULT_WORD_LIMITS))
    required_fields: Dict[int, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_REQUIRED_FIELDS))
    optional_fields: Dict[int, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_OPTIONAL_FIELDS))

    def min_score_for(self, draft_number: int) -> int:
        return self.min_scores[clamp_draft_number(draft_number)]

    def required_for(self, draft_number: int) -> Tuple[str, ...]:
        """Required fields accumulate: a later draft needs everything an earlier one did."""
        stage = clamp_draft_number(draft_number)
        result: Tuple[str, ...] = ()
        for number in range(1, stage + 1):
            result += self.required_fields.get(number, ())
        return result

    def optional_for(self, draft_number: int) -> Tuple[str, ...]:
        stage = clamp_draft_number(draft_number)
        result: Tuple[str, ...] = ()
        for number in range(1, stage + 1):
            result += self.optional_fields.get(number, ())
        return result

    def word_limits_for(self, draft_number: int) -> Dict[str, Tuple[int, int]]:
        """Word-count bounds for the text fields that are required at this stage."""
        stage_fields = self.required_for(draft_number)
        return {
            name: limits
            for name, limits in self.word_limits.items()
            if name in stage_fields
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ValidationPolicy':
        policy = cls()
        try:
            if "min_scores" in data:
                scores = {int(k): int(v) for k, v in data["min_scores"].items()}
                policy.min_scores.update(scores)
            if "borderline_margin" in data:
                policy.borderline_margin = int(data["borderline_margin"])
            if "duplicate_threshold" in data:
                policy.duplicate_threshold = float(data["duplicate_threshold"])
            if "max_categories" in data:
                policy.max_categories = int(data["max_categories"])
            if "word_limits" in data:
                for name, bounds in data["word_limits"].items():
                    minimum, maximum = bounds
                    policy.word_limits[name] = (int(minimum), int(maximum))
        except (TypeError, ValueError, AttributeError) as e:
            raise PolicyConfigurationError(f"Invalid validation policy: {e}", context={"data": dict(data)})

        policy._check()
        return policy

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'ValidationPolicy':
        """Load policy overrides from a JSON file."""
        policy_file = Path(path)
        try:
            with open(policy_file, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PolicyConfigurationError(
                f"Could not load validation policy from {policy_file}: {e}",
                context={"path": str(policy_file)},
            )
        if not isinstance(data, dict):
            raise PolicyConfigurationError(
                f"Validation policy in {policy_file} must be a JSON object",
                context={"path": str(policy_file)},
            )
        logger.info(f"Loaded validation policy from {policy_file}")
        return cls.from_mapping(data)

    @classmethod
    def from_env(cls) -> 'ValidationPolicy':
        """Build a policy from IDEA_VALIDATION_* environment variables."""
        data: Dict[str, Any] = {}

        policy_file = os.getenv("IDEA_VALIDATION_POLICY_FILE")
        if policy_file:
            return cls.from_file(policy_file)

        raw_scores = os.getenv("IDEA_VALIDATION_MIN_SCORES")
        if raw_scores:
            parts = [part.strip() for part in raw_scores.split(",") if part.strip()]
            if len(parts) != FINAL_DRAFT:
                raise PolicyConfigurationError(
                    f"IDEA_VALIDATION_MIN_SCORES needs {FINAL_DRAFT} values, got {len(parts)}",
                    context={"value": raw_scores},
                )
            data["min_scores"] = {str(i + 1): part for i, part in enumerate(parts)}

        threshold = os.getenv("IDEA_VALIDATION_DUPLICATE_THRESHOLD")
        if threshold:
            data["duplicate_threshold"] = threshold

        margin = os.getenv("IDEA_VALIDATION_BORDERLINE_MARGIN")
        if margin:
            data["borderline_margin"] = margin

        return cls.from_mapping(data)

    def _check(self):
        for number in range(1, FINAL_DRAFT + 1):
            if number not in self.min_scores:
                raise PolicyConfigurationError(f"Missing minimum score for draft {number}")
            if not 0 <= self.min_scores[number] <= 100:
                raise PolicyConfigurationError(
                    f"Minimum score for draft {number} must be within 0-100"
                )
        if not 0.0 < self.duplicate_threshold <= 1.0:
            raise PolicyConfigurationError("Duplicate threshold must be within (0, 1]")
        for name, (minimum, maximum) in self.word_limits.items():
            if minimum > maximum:
                raise PolicyConfigurationError(
                    f"Word limits for '{name}' have minimum above maximum"
                )

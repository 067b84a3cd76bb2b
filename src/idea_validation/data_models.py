from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import InvalidSubmissionError

FINAL_DRAFT = 3
_INT_FIELDS = ("version", "quality_score")

CORE_FIELDS = (
    "ideal_customer_profile",
    "product_idea",
    "pain_points",
    "alternatives",
)


def _coerce_text(name: str, value: Any) -> Optional[str]:
    """Turns a raw field value into text, treating None as absent."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidSubmissionError(
        f"Field '{name}' must be text, got {type(value).__name__}",
        context={"field": name},
    )


def _coerce_int(name: str, value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidSubmissionError(
            f"Field '{name}' must be a whole number, got {value!r}",
            context={"field": name},
        )


def normalize_categories(value: Any) -> List[str]:
    """Wraps a scalar category in a list and drops empty tags."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple, set, frozenset)):
        tags = []
        for tag in value:
            text = _coerce_text("category", tag)
            if text and text.strip():
                tags.append(text)
        return tags
    raise InvalidSubmissionError(
        f"Field 'category' must be a string or a list of strings, got {type(value).__name__}",
        context={"field": "category"},
    )


@dataclass
class Submission:
    """A candidate idea submission for one draft of a user's project."""
    full_name: Optional[str] = None
    project_name: Optional[str] = None
    version: Optional[int] = None

    # Draft 1
    ideal_customer_profile: Optional[str] = None
    product_idea: Optional[str] = None
    pain_points: Optional[str] = None
    alternatives: Optional[str] = None
    category: List[str] = field(default_factory=list)
    heard_about: Optional[str] = None

    # Draft 2
    market_validation: Optional[str] = None
    competitor_research: Optional[str] = None
    additional_research: Optional[str] = None

    # Draft 3
    investor_pitch: Optional[str] = None
    mvp_development: Optional[str] = None
    mvp_link: Optional[str] = None

    quality_score: Optional[int] = None
    is_final: bool = False

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "category":
                value = normalize_categories(value)
            elif f.name in _INT_FIELDS:
                value = _coerce_int(f.name, value)
            elif f.name == "is_final":
                value = bool(value)
            else:
                value = _coerce_text(f.name, value)
            setattr(self, f.name, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Submission':
        """Builds a Submission from a form-style mapping, ignoring unknown keys."""
        if data is None:
            raise InvalidSubmissionError("Submission is required")
        if isinstance(data, Submission):
            return data
        if not isinstance(data, Mapping):
            raise InvalidSubmissionError(
                f"Submission must be a mapping, got {type(data).__name__}"
            )

        kwargs = {f.name: data[f.name] for f in fields(cls) if f.name in data}
        return cls(**kwargs)

    def text_of(self, field_name: str) -> str:
        """Returns the field's text, or an empty string when it is absent."""
        return getattr(self, field_name, None) or ""

    def has_content(self, field_name: str) -> bool:
        value = getattr(self, field_name, None)
        if isinstance(value, list):
            return len(value) > 0
        return bool(value and value.strip())


@dataclass(frozen=True)
class ExistingIdea:
    """A previously published idea used as the duplicate comparison corpus."""
    ideal_customer_profile: str = ""
    product_idea: str = ""
    pain_points: str = ""
    alternatives: str = ""
    category: Tuple[str, ...] = ()
    preview: str = ""
    idea_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ExistingIdea':
        if isinstance(data, ExistingIdea):
            return data
        if not isinstance(data, Mapping):
            raise InvalidSubmissionError(
                f"Existing idea must be a mapping, got {type(data).__name__}"
            )
        idea_id = data.get("id", data.get("idea_id"))
        return cls(
            ideal_customer_profile=_coerce_text("ideal_customer_profile", data.get("ideal_customer_profile")) or "",
            product_idea=_coerce_text("product_idea", data.get("product_idea")) or "",
            pain_points=_coerce_text("pain_points", data.get("pain_points")) or "",
            alternatives=_coerce_text("alternatives", data.get("alternatives")) or "",
            category=tuple(normalize_categories(data.get("category"))),
            preview=_coerce_text("preview", data.get("preview")) or "",
            idea_id=str(idea_id) if idea_id is not None else None,
        )


@dataclass
class SpamCheck:
    is_spam: bool
    reason: Optional[str] = None


@dataclass
class PrivacyCheck:
    has_private_info: bool
    reason: Optional[str] = None


@dataclass
class DuplicateCheck:
    is_duplicate: bool
    reason: Optional[str] = None
    similarity: Optional[float] = None
    matched_index: Optional[int] = None


@dataclass
class CompletenessReport:
    """Which required and optional fields are missing for a draft stage."""
    missing_required: List[str] = field(default_factory=list)
    missing_optional: List[str] = field(default_factory=list)
    completion_score: int = 100

    @property
    def complete(self) -> bool:
        return not self.missing_required


@dataclass
class WordCountCheck:
    field_name: str
    count: int
    minimum: int
    maximum: int

    @property
    def too_short(self) -> bool:
        return self.count < self.minimum

    @property
    def too_long(self) -> bool:
        return self.count > self.maximum

    @property
    def valid(self) -> bool:
        return not self.too_short and not self.too_long


@dataclass
class ScoreBreakdown:
    """Points earned by each section of the quality score."""
    problem_statement: int = 0
    target_audience: int = 0
    solution_description: int = 0
    differentiation: int = 0
    categories: int = 0
    quality_indicators: int = 0
    stage_bonus: int = 0

    @property
    def total(self) -> int:
        raw = (
            self.problem_statement
            + self.target_audience
            + self.solution_description
            + self.differentiation
            + self.categories
            + self.quality_indicators
            + self.stage_bonus
        )
        return max(0, min(raw, 100))


@dataclass
class ValidationResult:
    """The verdict for one submission: pass/fail, tagged messages and a score."""
    passed: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    quality_score: int = 0

    def add_error(self, tag: str, message: str):
        self.errors.append(f"{tag}: {message}")
        self.passed = False

    def add_warning(self, tag: str, message: str):
        self.warnings.append(f"{tag}: {message}")

    def has_error(self, tag: str) -> bool:
        prefix = f"{tag}:"
        return any(error.startswith(prefix) for error in self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "qualityScore": self.quality_score,
        }


def coerce_ideas(ideas: Optional[Iterable[Any]]) -> List[ExistingIdea]:
    """Reads a comparison corpus given as ExistingIdea objects or mappings."""
    if not ideas:
        return []
    return [ExistingIdea.from_dict(idea) for idea in ideas]


def coerce_submission(submission: Any) -> Any:
    """Reads a mapping as a Submission; strings and Submissions pass through."""
    if isinstance(submission, (Submission, str)):
        return submission
    return Submission.from_dict(submission)

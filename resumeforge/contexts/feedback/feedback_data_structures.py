"""
Feedback Data Structures

Defines the records of the feedback loop:
- FeedbackEvent: one user edit of an applied suggestion (append-only log entry)
- FeedbackPattern: a recurring edit behavior mined from the log
- ImprovementProfile: boolean flags derived from the patterns
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

EDIT_TYPES = ("summary", "skill", "achievement", "experience")


def _require_text(data: Mapping[str, Any], key: str, optional: bool = False) -> Optional[str]:
    value = data.get(key) if optional else data[key]
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _require_timestamp(value: Any) -> int:
    # bool is an int subclass; NaN and infinity are accepted by json.loads
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"'timestamp' must be a finite number, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class FeedbackEvent:
    """
    A user's edit of a previously applied suggestion.

    Attributes:
        original_suggestion: Suggestion text as it was applied
        user_edit: Text after the user's edit
        type: What was edited ("summary", "skill", "achievement" or "experience")
        timestamp: Epoch milliseconds when the edit was recorded
        industry: Industry selected when the suggestion was generated
        role: Seniority/role selected when the suggestion was generated
    """

    original_suggestion: str
    user_edit: str
    type: str
    timestamp: int
    industry: Optional[str] = None
    role: Optional[str] = None

    def __post_init__(self):
        if self.type not in EDIT_TYPES:
            raise ValueError(f"Unknown edit type '{self.type}'. Expected one of {list(EDIT_TYPES)}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeedbackEvent":
        """
        Build an event from its persisted form (camelCase keys).

        Raises:
            KeyError: If a required key is missing
            TypeError: If a text field is not a string
            ValueError: If the edit type is unknown or timestamp is not a finite number
        """
        return cls(
            original_suggestion=_require_text(data, "originalSuggestion"),
            user_edit=_require_text(data, "userEdit"),
            type=_require_text(data, "type"),
            timestamp=_require_timestamp(data["timestamp"]),
            industry=_require_text(data, "industry", optional=True),
            role=_require_text(data, "role", optional=True),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "originalSuggestion": self.original_suggestion,
            "userEdit": self.user_edit,
            "type": self.type,
            "timestamp": self.timestamp,
        }
        if self.industry is not None:
            data["industry"] = self.industry
        if self.role is not None:
            data["role"] = self.role
        return data


@dataclass(frozen=True)
class FeedbackPattern:
    """
    A recurring edit behavior.

    Attributes:
        pattern: Display name (e.g., "Summary Leadership")
        frequency: Number of events showing the behavior (at least 2)
        improvement: Advice for future suggestion generation
        examples: User edits that showed the behavior, in order of occurrence
    """

    pattern: str
    frequency: int
    improvement: str
    examples: Tuple[str, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class ImprovementProfile:
    """Flags that bias suggestion generation, derived from the current patterns."""

    include_metrics: bool = False
    expand_details: bool = False
    emphasize_leadership: bool = False
    industry_specific: bool = False

    @property
    def active(self) -> bool:
        """True if any flag is set."""
        return any(
            (
                self.include_metrics,
                self.expand_details,
                self.emphasize_leadership,
                self.industry_specific,
            )
        )

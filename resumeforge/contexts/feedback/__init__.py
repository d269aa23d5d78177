"""
Feedback Context

Responsibilities:
- Records edits users make to applied suggestions (append-only event log)
- Persists the log and recovers from a corrupted one
- Mines recurring edit behaviors into weighted patterns
- Derives the improvement profile consumed by suggestion generation

Owns: Feedback event log, pattern mining, improvement profile
Never: Generates suggestion text
"""

from resumeforge.contexts.feedback.exceptions import InvalidPersistedState
from resumeforge.contexts.feedback.feedback_data_structures import (
    EDIT_TYPES,
    FeedbackEvent,
    FeedbackPattern,
    ImprovementProfile,
)
from resumeforge.contexts.feedback.feedback_repository import (
    FeedbackRepository,
    InMemoryFeedbackRepository,
    JsonLinesFeedbackRepository,
)
from resumeforge.contexts.feedback.pattern_analyzer import (
    analyze_edit_patterns,
    derive_improvement_profile,
    mine_edit_patterns,
)
from resumeforge.contexts.feedback.report import format_pattern_report
from resumeforge.contexts.feedback.tracker import AnalysisResult, AnalysisStatus, FeedbackTracker

__all__ = [
    # Data structure classes
    "FeedbackEvent",
    "FeedbackPattern",
    "ImprovementProfile",
    "EDIT_TYPES",
    # Analysis
    "analyze_edit_patterns",
    "mine_edit_patterns",
    "derive_improvement_profile",
    "format_pattern_report",
    # Stateful tracking
    "FeedbackTracker",
    "AnalysisResult",
    "AnalysisStatus",
    # Persistence
    "FeedbackRepository",
    "InMemoryFeedbackRepository",
    "JsonLinesFeedbackRepository",
    # Errors
    "InvalidPersistedState",
]

"""
Feedback Pattern Analyzer

Mines the feedback event log for recurring edit behaviors. Runs over the full
log every time; patterns are never patched incrementally.

Each event is tested against three non-exclusive categories:
- expansion: the user made the suggestion longer
- quantification: the edit mentions "quantified" or contains a number
- leadership: the edit mentions "led" or "managed" (case-insensitive)

Matches are counted per "{type}_{category}" key and keys seen at least twice
become patterns, most frequent first.
"""

from collections import OrderedDict
from typing import Dict, List, Sequence

from resumeforge.contexts.feedback.feedback_data_structures import (
    FeedbackEvent,
    FeedbackPattern,
    ImprovementProfile,
)
from resumeforge.utils.text_processing import contains_digits, title_case_key

MIN_EVENTS_FOR_ANALYSIS = 3
MIN_PATTERN_FREQUENCY = 2
MAX_PATTERNS_BEFORE_INDUSTRY_FOCUS = 3

LEADERSHIP_TERMS = ("led", "managed")

# Checked in order; first substring found in the pattern key wins
IMPROVEMENT_ADVICE = (
    ("quantification", "Include specific numbers and metrics in suggestions"),
    ("expansion", "Provide more detailed and comprehensive suggestions"),
    ("leadership", "Emphasize leadership and management experiences"),
)
DEFAULT_ADVICE = "Adjust suggestion style based on user preferences"


def is_expansion(event: FeedbackEvent) -> bool:
    return len(event.user_edit) > len(event.original_suggestion)


def is_quantification(event: FeedbackEvent) -> bool:
    return "quantified" in event.user_edit or contains_digits(event.user_edit)


def is_leadership(event: FeedbackEvent) -> bool:
    edit = event.user_edit.lower()
    return any(term in edit for term in LEADERSHIP_TERMS)


EDIT_CATEGORIES = (
    ("expansion", is_expansion),
    ("quantification", is_quantification),
    ("leadership", is_leadership),
)


def classify_event(event: FeedbackEvent) -> List[str]:
    """
    Pattern keys an event contributes to.

    Example:
        >>> classify_event(FeedbackEvent("Ran a team", "Led a team of 5", "summary", 0))
        ['summary_expansion', 'summary_quantification', 'summary_leadership']
    """
    return [f"{event.type}_{name}" for name, matches in EDIT_CATEGORIES if matches(event)]


def improvement_for(pattern_key: str) -> str:
    """Advice string for a pattern key such as "summary_quantification"."""
    for keyword, advice in IMPROVEMENT_ADVICE:
        if keyword in pattern_key:
            return advice
    return DEFAULT_ADVICE


def mine_edit_patterns(events: Sequence[FeedbackEvent]) -> List[FeedbackPattern]:
    """
    Mine recurring edit behaviors from feedback events.

    No minimum log size is applied here; see analyze_edit_patterns().

    Args:
        events: Event log, oldest first

    Returns:
        Patterns with frequency >= 2, sorted by frequency (descending). Ties keep
        the order in which each key was first seen.
    """
    # key -> {"count": int, "examples": [user edits in order of occurrence]}
    tallies: Dict[str, Dict] = OrderedDict()
    for event in events:
        for key in classify_event(event):
            tally = tallies.setdefault(key, {"count": 0, "examples": []})
            tally["count"] += 1
            tally["examples"].append(event.user_edit)

    patterns = [
        FeedbackPattern(
            pattern=title_case_key(key),
            frequency=tally["count"],
            improvement=improvement_for(key),
            examples=tuple(tally["examples"]),
        )
        for key, tally in tallies.items()
        if tally["count"] >= MIN_PATTERN_FREQUENCY
    ]

    # sorted() is stable, so ties keep first-seen order
    return sorted(patterns, key=lambda p: p.frequency, reverse=True)


def analyze_edit_patterns(events: Sequence[FeedbackEvent]) -> List[FeedbackPattern]:
    """
    Analyze a full feedback log.

    Same as mine_edit_patterns(), but a log with fewer than 3 events is too
    small to learn from and yields no patterns.
    """
    if len(events) < MIN_EVENTS_FOR_ANALYSIS:
        return []
    return mine_edit_patterns(events)


def derive_improvement_profile(patterns: Sequence[FeedbackPattern]) -> ImprovementProfile:
    """
    Summarize patterns as flags for the suggestion generator.

    Args:
        patterns: Current pattern set

    Returns:
        ImprovementProfile where each flag depends only on the pattern names/count
    """

    def any_named(keyword: str) -> bool:
        return any(keyword in p.pattern.lower() for p in patterns)

    return ImprovementProfile(
        include_metrics=any_named("quantification"),
        expand_details=any_named("expansion"),
        emphasize_leadership=any_named("leadership"),
        industry_specific=len(patterns) > MAX_PATTERNS_BEFORE_INDUSTRY_FOCUS,
    )

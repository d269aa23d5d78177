"""
Feedback Tracker

Owns the feedback event log for a session: records each edit of an applied
suggestion, persists it through a FeedbackRepository, and re-runs pattern
analysis when the log is large enough and the last analysis is old enough.

States: Idle -> Analyzing -> Idle. Only one analysis pass runs at a time; events
recorded during a pass are kept and picked up by the next eligible pass.

Usage:
    from resumeforge.contexts.feedback import FeedbackTracker, JsonLinesFeedbackRepository

    tracker = FeedbackTracker(JsonLinesFeedbackRepository())
    tracker.load()
    result = tracker.record("Managed projects", "Led 4 projects end to end", "experience")
    if not result.skipped:
        print(tracker.improvement_profile)
"""

import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from resumeforge.contexts.feedback.exceptions import InvalidPersistedState
from resumeforge.contexts.feedback.feedback_data_structures import (
    FeedbackEvent,
    FeedbackPattern,
    ImprovementProfile,
)
from resumeforge.contexts.feedback.feedback_repository import (
    FeedbackRepository,
    InMemoryFeedbackRepository,
)
from resumeforge.contexts.feedback.logger import (
    _log_info,
    _log_success,
    _log_warning,
    log_analysis_result,
)
from resumeforge.contexts.feedback.pattern_analyzer import (
    MIN_EVENTS_FOR_ANALYSIS,
    analyze_edit_patterns,
    derive_improvement_profile,
)
from resumeforge.utils.timestamp import now_ms

ANALYSIS_COOLDOWN_S = 30.0

PatternListener = Callable[[List[FeedbackPattern]], None]


class AnalysisStatus(Enum):
    """Outcome of an analysis attempt. Every status except COMPLETED is a skip."""

    COMPLETED = "completed"
    SKIPPED_TOO_FEW_EVENTS = "skipped_too_few_events"
    SKIPPED_COOLDOWN = "skipped_cooldown"
    SKIPPED_IN_PROGRESS = "skipped_in_progress"
    SKIPPED_CLEARED = "skipped_cleared"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Result of an analysis attempt.

    A skipped analysis is a normal outcome, not an error.

    Attributes:
        status: What happened
        patterns: Patterns computed by this pass (empty when skipped)
    """

    status: AnalysisStatus
    patterns: Tuple[FeedbackPattern, ...] = ()

    @property
    def skipped(self) -> bool:
        return self.status is not AnalysisStatus.COMPLETED


class FeedbackTracker:
    """
    Records feedback events and keeps pattern statistics current.

    Attributes:
        repository: Where the event log is persisted
        cooldown_s: Minimum seconds between the end of one analysis and the next
    """

    def __init__(
        self,
        repository: FeedbackRepository = None,
        clock: Callable[[], float] = time.time,
        cooldown_s: float = ANALYSIS_COOLDOWN_S,
        listeners: Sequence[PatternListener] = (),
    ):
        """
        Args:
            repository: Event log storage (default: in-memory)
            clock: Wall-clock source in epoch seconds; inject a fake clock in tests
            cooldown_s: Minimum seconds between analyses
            listeners: Callables notified with the new pattern list after each pass
        """
        self.repository = repository if repository is not None else InMemoryFeedbackRepository()
        self.cooldown_s = cooldown_s
        self._clock = clock
        self._listeners: List[PatternListener] = list(listeners)

        self._events: List[FeedbackEvent] = []
        self._patterns: List[FeedbackPattern] = []
        self._last_analysis_at: Optional[float] = None
        # Bumped by clear(); a pass only publishes if it is unchanged
        self._generation = 0

        # Guards the event list and pattern set; held only briefly
        self._state_lock = threading.Lock()
        # Single-flight guard for analysis passes; never blocks appends
        self._analysis_guard = threading.Lock()

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def events(self) -> Tuple[FeedbackEvent, ...]:
        with self._state_lock:
            return tuple(self._events)

    @property
    def event_count(self) -> int:
        with self._state_lock:
            return len(self._events)

    @property
    def patterns(self) -> List[FeedbackPattern]:
        with self._state_lock:
            return list(self._patterns)

    @property
    def improvement_profile(self) -> ImprovementProfile:
        return derive_improvement_profile(self.patterns)

    @property
    def is_analyzing(self) -> bool:
        return self._analysis_guard.locked()

    def add_listener(self, listener: PatternListener) -> None:
        self._listeners.append(listener)

    # ========================================================================
    # Log management
    # ========================================================================

    def load(self) -> AnalysisResult:
        """
        Load the persisted log and analyze it once.

        A corrupted log is discarded (and cleared from storage) so the session
        starts empty instead of failing.

        Returns:
            AnalysisResult of the initial pass. The cooldown neither applies to
            this pass nor starts from it, so the next record() may analyze.
        """
        try:
            events = self.repository.load()
        except InvalidPersistedState as e:
            _log_warning(f"Discarding corrupted feedback log: {e}")
            self.repository.clear()
            events = []

        with self._state_lock:
            self._events = list(events)
            self._patterns = []
            self._generation += 1
        _log_info(f"Loaded {len(events)} feedback events")

        return self.analyze(force=True, start_cooldown=False)

    def record(
        self,
        original_suggestion: str,
        user_edit: str,
        type: str,
        industry: Optional[str] = None,
        role: Optional[str] = None,
    ) -> AnalysisResult:
        """
        Record an edit of an applied suggestion and analyze if eligible.

        Args:
            original_suggestion: Suggestion text as applied
            user_edit: Text after the user's edit
            type: "summary", "skill", "achievement" or "experience"
            industry: Industry the suggestion was generated for
            role: Role the suggestion was generated for

        Returns:
            AnalysisResult; skipped unless the log has 3+ events, no pass is
            running, and the cooldown since the last pass has elapsed

        Raises:
            ValueError: If ``type`` is not a known edit type
        """
        event = FeedbackEvent(
            original_suggestion=original_suggestion,
            user_edit=user_edit,
            type=type,
            timestamp=now_ms(self._clock),
            industry=industry,
            role=role,
        )
        with self._state_lock:
            self.repository.append(event)
            self._events.append(event)

        return self.analyze()

    def clear(self) -> None:
        """Remove every event and pattern, in memory and in storage."""
        with self._state_lock:
            self._events = []
            self._patterns = []
            self._generation += 1
            self.repository.clear()
        _log_success("Feedback data cleared")
        self._notify([])

    # ========================================================================
    # Analysis
    # ========================================================================

    def _cooling_down(self) -> bool:
        if self._last_analysis_at is None:
            return False
        return self._clock() - self._last_analysis_at < self.cooldown_s

    def analyze(self, force: bool = False, start_cooldown: bool = True) -> AnalysisResult:
        """
        Run one analysis pass over the full log if eligible.

        Args:
            force: Ignore the cooldown (the minimum log size and the
                   single-flight rule still apply)
            start_cooldown: Start the cooldown window when the pass completes

        Returns:
            AnalysisResult describing whether the pass ran
        """
        if not self._analysis_guard.acquire(blocking=False):
            result = AnalysisResult(AnalysisStatus.SKIPPED_IN_PROGRESS)
            log_analysis_result(result, self.event_count)
            return result

        try:
            with self._state_lock:
                snapshot = tuple(self._events)
                generation = self._generation
            if len(snapshot) < MIN_EVENTS_FOR_ANALYSIS:
                result = AnalysisResult(AnalysisStatus.SKIPPED_TOO_FEW_EVENTS)
            elif not force and self._cooling_down():
                result = AnalysisResult(AnalysisStatus.SKIPPED_COOLDOWN)
            else:
                patterns = analyze_edit_patterns(snapshot)
                with self._state_lock:
                    published = generation == self._generation
                    if published:
                        self._patterns = list(patterns)
                if published:
                    if start_cooldown:
                        self._last_analysis_at = self._clock()
                    result = AnalysisResult(AnalysisStatus.COMPLETED, tuple(patterns))
                else:
                    result = AnalysisResult(AnalysisStatus.SKIPPED_CLEARED)
        finally:
            self._analysis_guard.release()

        log_analysis_result(result, len(snapshot))
        if not result.skipped:
            self._notify(list(result.patterns))
        return result

    def _notify(self, patterns: List[FeedbackPattern]) -> None:
        for listener in list(self._listeners):
            listener(patterns)

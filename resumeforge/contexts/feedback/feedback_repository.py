"""
Feedback event log persistence.

The log is append-only: events are added one at a time and only ever removed
all together by clear(). The file-backed store writes JSON Lines (one event
object per line, camelCase keys) so appends never rewrite the file.

Usage:
    from resumeforge.contexts.feedback.feedback_repository import JsonLinesFeedbackRepository

    repo = JsonLinesFeedbackRepository()
    events = repo.load()
    repo.append(event)
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

from resumeforge.contexts.feedback.exceptions import InvalidPersistedState
from resumeforge.contexts.feedback.feedback_data_structures import FeedbackEvent

load_dotenv()
FEEDBACK_LOG_FILE = Path(os.getenv("FEEDBACK_LOG_FILE", "outs/feedback/resume_feedback.jsonl"))


class FeedbackRepository(ABC):
    """Storage for the feedback event log."""

    @abstractmethod
    def load(self) -> List[FeedbackEvent]:
        """
        Read the whole log, oldest first.

        Raises:
            InvalidPersistedState: If the stored log is corrupted
        """

    @abstractmethod
    def append(self, event: FeedbackEvent) -> None:
        """Add one event to the end of the log."""

    @abstractmethod
    def save(self, events: Iterable[FeedbackEvent]) -> None:
        """Replace the stored log with ``events``."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored event."""


class InMemoryFeedbackRepository(FeedbackRepository):
    """Keeps the log in a list. Nothing survives the process."""

    def __init__(self, events: Iterable[FeedbackEvent] = ()):
        self._events: List[FeedbackEvent] = list(events)

    def load(self) -> List[FeedbackEvent]:
        return list(self._events)

    def append(self, event: FeedbackEvent) -> None:
        self._events.append(event)

    def save(self, events: Iterable[FeedbackEvent]) -> None:
        self._events = list(events)

    def clear(self) -> None:
        self._events = []


class JsonLinesFeedbackRepository(FeedbackRepository):
    """
    Stores the log as JSON Lines.

    Attributes:
        path: Log file location (defaults to FEEDBACK_LOG_FILE env variable)
    """

    def __init__(self, path: Path = None):
        self.path = Path(path) if path is not None else FEEDBACK_LOG_FILE

    def load(self) -> List[FeedbackEvent]:
        """
        Read all events. A missing file is an empty log.

        Unlike pipeline logs, a malformed line is not skipped: the log feeds the
        pattern statistics, so any unreadable record invalidates the whole file.

        Raises:
            InvalidPersistedState: On invalid UTF-8, undecodable JSON or an invalid event record
        """
        if not self.path.exists():
            return []

        events = []
        with open(self.path, "rb") as f:
            for line_number, raw_line in enumerate(f, start=1):
                try:
                    line = raw_line.decode("utf-8").strip()
                    if not line:
                        continue
                    record = json.loads(line)
                    if not isinstance(record, dict):
                        raise ValueError(f"expected a JSON object, got {type(record).__name__}")
                    events.append(FeedbackEvent.from_dict(record))
                except (KeyError, TypeError, ValueError, OverflowError) as e:
                    raise InvalidPersistedState(
                        f"Corrupted feedback record: {e}",
                        source=str(self.path),
                        line_number=line_number,
                    ) from e
        return events

    def append(self, event: FeedbackEvent) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps(event.to_dict()) + "\n")

    def save(self, events: Iterable[FeedbackEvent]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            for event in events:
                f.write(json.dumps(event.to_dict()) + "\n")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()

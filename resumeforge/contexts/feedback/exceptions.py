"""Custom exceptions for the feedback context."""

from typing import Optional


class InvalidPersistedState(ValueError):
    """
    Exception raised when the persisted feedback log cannot be read back.

    Recoverable: FeedbackTracker discards the corrupted log and starts empty.

    Attributes:
        message: Error description
        source: Where the log was read from (e.g., file path)
        line_number: 1-indexed line of the offending record, if known
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.message = message
        self.source = source
        self.line_number = line_number

        parts = [message]
        if source:
            location = f"{source}:{line_number}" if line_number else source
            parts.append(f"In: {location}")

        super().__init__("\n".join(parts))

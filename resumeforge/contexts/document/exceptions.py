"""Custom exceptions for the document context."""

from typing import Optional


class MalformedDocument(ValueError):
    """
    Exception raised when resume data is missing required nested structure.

    Leaf fields default to empty values; this is only raised for structural
    problems (e.g., missing personalInfo, experience that is not a list).

    Attributes:
        message: Error description
        path: Location of the offending value (e.g., "personalInfo", "experience[2]")
        source: File the data was read from, if any
    """

    def __init__(self, message: str, path: Optional[str] = None, source: Optional[str] = None):
        self.message = message
        self.path = path
        self.source = source

        parts = [message]
        if path:
            parts.append(f"At: {path}")
        if source:
            parts.append(f"Source: {source}")

        super().__init__("\n".join(parts))

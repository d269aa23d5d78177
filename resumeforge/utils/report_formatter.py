"""
Utility functions for formatting text-based reports and tables.

Used by the command-line scripts to print score diagnostics and feedback patterns.
"""

from typing import Any, Iterable, List

CHECK_MARK = "✓"
WARNING_MARK = "!"
ERROR_MARK = "✗"


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text reports with aligned columns."""

    def __init__(self, columns: List[Column] = None, total_width: int = 80):
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header framed by separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        self.lines.append("-" * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_marked_items(self, title: str, items: Iterable[str], mark: str) -> "TableFormatter":
        """
        Add a titled list of diagnostics, one per line, prefixed with a mark.

        Nothing is added when ``items`` is empty.
        """
        items = list(items)
        if not items:
            return self
        self.lines.append(f"{title}:")
        for item in items:
            self.lines.append(f"  {mark} {item}")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_progress_bar(value: int, width: int = 40) -> str:
    """
    Render a 0-100 value as a text progress bar.

    Example:
        >>> format_progress_bar(50, width=10)
        '[#####.....] 50%'
    """
    value = max(0, min(100, value))
    filled = round(width * value / 100)
    return f"[{'#' * filled}{'.' * (width - filled)}] {value}%"

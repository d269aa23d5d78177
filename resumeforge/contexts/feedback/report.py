"""Plain-text feedback pattern report for the command line."""

from typing import Sequence

from resumeforge.contexts.feedback.feedback_data_structures import FeedbackPattern
from resumeforge.utils.report_formatter import Column, TableFormatter

PATTERN_COLUMNS = [
    Column("Pattern", 28),
    Column("Frequency", 10, align=">"),
    Column("Improvement", 50),
]


def format_pattern_report(
    patterns: Sequence[FeedbackPattern], event_count: int, show_examples: bool = False
) -> str:
    """
    Render detected patterns as a table.

    Args:
        patterns: Patterns from analyze_edit_patterns() or FeedbackTracker.patterns
        event_count: Number of tracked edits
        show_examples: List each pattern's example edits under its row

    Returns:
        Multi-line report
    """
    report = TableFormatter(PATTERN_COLUMNS, total_width=90)
    report.add_section_header(f"Learning Patterns ({event_count} edits tracked)")

    if not patterns:
        report.add_text("No patterns detected yet.")
        return report.render()

    report.add_table_header()
    for pattern in patterns:
        report.add_row([pattern.pattern, f"{pattern.frequency}x", pattern.improvement])
        if show_examples:
            for example in pattern.examples:
                report.add_text(f"    - {example}")
    return report.render()

"""Plain-text score report for the command line."""

from resumeforge.utils.report_formatter import (
    CHECK_MARK,
    ERROR_MARK,
    WARNING_MARK,
    TableFormatter,
    format_progress_bar,
)


def format_score_report(result, completeness: int, title: str = "Resume Score") -> str:
    """
    Render a ScoreResult and completeness percentage as text.

    Args:
        result: ScoreResult from score_resume()
        completeness: Value from completeness_score()
        title: Report heading (e.g., the resume file name)

    Returns:
        Multi-line report: scores, then passed checks, improvements and issues
    """
    report = TableFormatter()
    report.add_section_header(title)
    report.add_text(f"ATS score:     {format_progress_bar(result.score)} ({result.band})")
    report.add_text(f"Completeness:  {format_progress_bar(completeness)}")
    report.add_text(f"Total words:   {result.total_words}")
    report.add_blank_line()
    report.add_marked_items("Passed checks", result.checks, CHECK_MARK)
    report.add_marked_items("Improvements", result.warnings, WARNING_MARK)
    report.add_marked_items("Issues", result.errors, ERROR_MARK)
    return report.render()

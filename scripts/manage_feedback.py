#!/usr/bin/env python3
"""
Command-line interface for the suggestion feedback log.

The feedback log (FEEDBACK_LOG_FILE, JSON Lines) records how users edit applied
suggestions. This script records edits by hand, shows the learned patterns and
improvement profile, and resets the log.

Commands:
    record   - Record an edit of an applied suggestion
    patterns - Show detected edit patterns
    profile  - Show the derived improvement profile
    stats    - Show event counts by type
    clear    - Delete all feedback data
"""

from collections import Counter
from pathlib import Path
from typing import Optional

import typer

from resumeforge.contexts.feedback import (
    EDIT_TYPES,
    FeedbackTracker,
    JsonLinesFeedbackRepository,
    format_pattern_report,
)
from resumeforge.contexts.feedback.feedback_repository import FEEDBACK_LOG_FILE
from resumeforge.contexts.feedback.logger import setup_feedback_logger
from resumeforge.utils.timestamp import format_epoch_ms

app = typer.Typer(
    add_completion=False,
    help="Manage the suggestion feedback log",
    invoke_without_command=True,
)

LogFileOption = typer.Option(
    None, "--log-file", "-f", help="Feedback log (defaults to FEEDBACK_LOG_FILE)", dir_okay=False
)


@app.callback()
def main(
    ctx: typer.Context,
    log: bool = typer.Option(False, "--log", help="Write a session log under LOGS_PATH"),
):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    if log:
        setup_feedback_logger(log_file=FEEDBACK_LOG_FILE)


def _load_tracker(log_file: Optional[Path]) -> FeedbackTracker:
    tracker = FeedbackTracker(JsonLinesFeedbackRepository(log_file))
    tracker.load()
    return tracker


@app.command("record")
def record_command(
    edit_type: str = typer.Argument(..., help=f"What was edited: {', '.join(EDIT_TYPES)}"),
    original: str = typer.Argument(..., help="Suggestion text as applied"),
    edited: str = typer.Argument(..., help="Text after the edit"),
    industry: Optional[str] = typer.Option(None, "--industry", "-i", help="Target industry"),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="Target role"),
    log_file: Optional[Path] = LogFileOption,
):
    """
    Record an edit of an applied suggestion.

    Examples:\n

        $ manage_feedback.py record summary "Managed a team" "Led a team of 8 engineers"

        $ manage_feedback.py record achievement "Cut costs" "Cut costs by 15%" -i finance -r mid
    """
    if edit_type not in EDIT_TYPES:
        typer.secho(
            f"Error: edit type must be one of {', '.join(EDIT_TYPES)}, got '{edit_type}'",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    if original == edited:
        typer.secho("⊘ Edit is identical to the suggestion, nothing recorded", fg=typer.colors.YELLOW)
        return

    tracker = _load_tracker(log_file)
    result = tracker.record(original, edited, edit_type, industry=industry, role=role)

    typer.secho(f"✓ Recorded {edit_type} edit ({tracker.event_count} edits tracked)", fg=typer.colors.GREEN)
    if result.skipped:
        typer.echo(f"  Analysis: {result.status.value}")
    else:
        typer.echo(f"  Analysis: {len(result.patterns)} patterns")


@app.command("patterns")
def patterns_command(
    examples: bool = typer.Option(False, "--examples", "-e", help="Show example edits"),
    log_file: Optional[Path] = LogFileOption,
):
    """Show detected edit patterns, most frequent first."""
    tracker = _load_tracker(log_file)
    typer.echo(format_pattern_report(tracker.patterns, tracker.event_count, show_examples=examples))


@app.command("profile")
def profile_command(log_file: Optional[Path] = LogFileOption):
    """Show the improvement profile derived from the current patterns."""
    profile = _load_tracker(log_file).improvement_profile

    for name in ("include_metrics", "expand_details", "emphasize_leadership", "industry_specific"):
        enabled = getattr(profile, name)
        typer.secho(
            f"{'✓' if enabled else '·'} {name}",
            fg=typer.colors.GREEN if enabled else None,
        )


@app.command("stats")
def stats_command(log_file: Optional[Path] = LogFileOption):
    """Show number of tracked edits by type."""
    events = _load_tracker(log_file).events
    typer.echo(f"Total edits tracked: {len(events)}")
    if not events:
        return

    for edit_type, count in Counter(event.type for event in events).most_common():
        typer.echo(f"  {edit_type:<12} {count}")
    typer.echo(f"First edit: {format_epoch_ms(events[0].timestamp)}")
    typer.echo(f"Last edit:  {format_epoch_ms(events[-1].timestamp, relative=True)}")


@app.command("clear")
def clear_command(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    log_file: Optional[Path] = LogFileOption,
):
    """Delete all feedback data."""
    if not yes:
        typer.confirm("Delete all tracked edits and patterns?", abort=True)

    _load_tracker(log_file).clear()
    typer.secho("✓ Feedback data cleared", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()

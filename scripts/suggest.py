#!/usr/bin/env python3
"""
Print content suggestions for an industry and role.

Suggestions are biased by the improvement profile learned from the feedback log.

Usage:
    python suggest.py finance mid
    python suggest.py "software engineering" senior --prompt "Write a resume summary."
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumeforge.contexts.feedback import FeedbackTracker, JsonLinesFeedbackRepository
from resumeforge.contexts.suggestions import SuggestionGenerator, improve_prompt

app = typer.Typer(add_completion=False)


def _echo_list(title: str, items) -> None:
    if not items:
        return
    typer.secho(f"\n{title}", bold=True)
    for item in items:
        typer.echo(f"  • {item}")


@app.command()
def main(
    industry: Annotated[str, typer.Argument(help="Industry (e.g., finance, nursing)")] = "",
    role: Annotated[str, typer.Argument(help="Role: entry, mid, senior or executive")] = "",
    prompt: Annotated[
        Optional[str],
        typer.Option("--prompt", "-p", help="Also print this AI prompt with learned guidance"),
    ] = None,
    log_file: Annotated[
        Optional[Path],
        typer.Option("--log-file", "-f", help="Feedback log (defaults to FEEDBACK_LOG_FILE)"),
    ] = None,
):
    """Print profile-biased suggestions for an industry and role."""
    tracker = FeedbackTracker(JsonLinesFeedbackRepository(log_file))
    tracker.load()
    profile = tracker.improvement_profile

    suggestions = SuggestionGenerator(feedback_sink=tracker.record).suggest(industry, role, profile)

    if profile.active:
        typer.secho("Learning from your edits: suggestions adjusted", fg=typer.colors.BLUE)

    _echo_list("Summaries", suggestions.summaries)
    _echo_list("Skills", suggestions.skills)
    _echo_list("Achievements", suggestions.achievements)
    _echo_list("Certifications", suggestions.certifications)
    _echo_list("Job titles", suggestions.job_titles)

    if prompt:
        typer.secho("\nPrompt", bold=True)
        typer.echo(improve_prompt(prompt, profile, industry=industry or None))


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
Score a resume for ATS compatibility and completeness.

Reads a resume YAML or JSON file (bare resume or a file written by the resume
repository) and prints the ATS score, completeness and diagnostics.

Usage:
    # Print report to stdout
    python score_resume.py path/to/resume.yaml

    # Machine-readable output
    python score_resume.py path/to/resume.yaml --json

    # Score the most recently saved resume in the store
    python score_resume.py --latest
"""

import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumeforge.contexts.document import MalformedDocument, ResumeRepository, load_resume_file
from resumeforge.contexts.scoring import completeness_score, format_score_report, score_resume
from resumeforge.contexts.scoring.logger import setup_scoring_logger

app = typer.Typer(add_completion=False)


@app.command()
def main(
    resume_path: Annotated[
        Optional[Path],
        typer.Argument(help="Resume YAML/JSON file", exists=True, dir_okay=False),
    ] = None,
    latest: Annotated[
        bool, typer.Option("--latest", "-l", help="Score the most recently saved resume")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    log: Annotated[bool, typer.Option("--log", help="Write a session log under LOGS_PATH")] = False,
):
    """
    Score a resume and print diagnostics.

    Examples:

        python score_resume.py data/resume.yaml

        python score_resume.py data/resume.json --json

        python score_resume.py --latest
    """
    if resume_path is None and not latest:
        typer.secho("Provide a resume file or --latest", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if log:
        setup_scoring_logger(resume_path=resume_path, console=sys.stderr if as_json else sys.stdout)

    try:
        if latest:
            document_id, document = ResumeRepository().load_latest()
            title = f"Resume {document_id}"
        else:
            document = load_resume_file(resume_path)
            title = resume_path.name
    except MalformedDocument as e:
        typer.secho(f"✗ Could not read resume:\n{e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = score_resume(document)
    completeness = completeness_score(document)

    if as_json:
        payload = {**asdict(result), "band": result.band, "completeness": completeness}
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(format_score_report(result, completeness, title=title))


if __name__ == "__main__":
    app()

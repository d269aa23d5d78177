"""
Scoring context logger.

Provides logging interface for the scoring context with automatic [score] prefix.
All scoring modules should import from this module, not from utils.logger directly.
"""

import sys
from pathlib import Path
from typing import TextIO

from loguru import logger

from resumeforge.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[score]"


def setup_scoring_logger(
    log_dir: Path = None, resume_path: Path = None, console: TextIO = sys.stdout
) -> Path:
    """
    Setup logger for a scoring session.

    Args:
        log_dir: Directory for this scoring session (default: new directory under LOGS_PATH)
        resume_path: Resume file being scored, recorded in the provenance header
        console: Console stream (sys.stderr keeps stdout clean for JSON output)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="score",
        log_dir=log_dir,
        extra_provenance={"Resume": resume_path} if resume_path else None,
        console=console,
    )


def _log_debug(message: str) -> None:
    """Log debug message with [score] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_score_result(result) -> None:
    """
    Log a ScoreResult at debug level.

    Args:
        result: ScoreResult from score_resume()
    """
    _log_debug(
        f"ATS score {result.score} "
        f"({len(result.checks)} checks, {len(result.warnings)} warnings, "
        f"{len(result.errors)} errors, {result.total_words} words)"
    )
    for error in result.errors:
        _log_debug(f"  error: {error}")

"""
Feedback context logger.

Provides logging interface for the feedback context with automatic [feedback] prefix.
All feedback modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumeforge.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[feedback]"


def setup_feedback_logger(log_dir: Path = None, log_file: Path = None) -> Path:
    """
    Setup logger for a feedback session.

    Args:
        log_dir: Directory for this session (default: new directory under LOGS_PATH)
        log_file: Feedback event log in use, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="feedback",
        log_dir=log_dir,
        extra_provenance={"Feedback log": log_file} if log_file else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [feedback] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [feedback] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [feedback] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [feedback] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_analysis_result(result, event_count: int) -> None:
    """
    Log the outcome of an analysis attempt.

    Args:
        result: AnalysisResult from FeedbackTracker
        event_count: Size of the event log at the time of the attempt
    """
    if result.skipped:
        _log_debug(f"Analysis skipped ({result.status.value}) with {event_count} events")
        return

    _log_info(f"Analyzed {event_count} events: {len(result.patterns)} patterns")
    for pattern in result.patterns:
        _log_debug(f"  {pattern.pattern}: {pattern.frequency}x")

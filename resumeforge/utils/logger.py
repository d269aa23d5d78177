"""
Session logging for RESUMEFORGE scripts.

Library modules never add sinks; they log through the prefixed helpers in
contexts/{context}/logger.py. A script that wants a session log calls
setup_logger() once: every record goes to a per-run file and INFO and above is
echoed to the console.

Environment:
    LOGS_PATH           Parent directory of per-run log directories (default: outs/logs)
    CONSOLE_LOG_LEVEL   Minimum level echoed to the console (default: INFO)
"""

import os
import sys
from pathlib import Path
from typing import Any, Mapping, TextIO

from dotenv import load_dotenv
from loguru import logger

from resumeforge import __version__
from resumeforge.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(context_name: str, logs_path: Path = None) -> Path:
    """
    Directory for one script run.

    Example:
        >>> session_log_dir("score")
        PosixPath('outs/logs/score_20261019T101500_123456')
    """
    stamp = now_exact().replace("-", "").replace(":", "").replace(".", "_")
    return (logs_path or LOGS_PATH) / f"{context_name}_{stamp}"


def setup_logger(
    context_name: str,
    log_dir: Path = None,
    extra_provenance: Mapping[str, Any] = None,
    console: TextIO = sys.stdout,
) -> Path:
    """
    Route loguru output to a session file and the console, then log provenance.

    Args:
        context_name: Context identifier, used for the log file name (e.g., "score")
        log_dir: Directory for this session (default: a new session_log_dir())
        extra_provenance: Additional key-value pairs for the provenance header
        console: Stream for console output; pass sys.stderr when stdout carries
                 machine-readable output

    Returns:
        Path to log file
    """
    if log_dir is None:
        log_dir = session_log_dir(context_name)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(console, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Mapping[str, Any] = None) -> None:
    """Log which command produced this session, plus any extra key-value pairs."""
    logger.info("=" * 80)
    logger.info(f"RESUMEFORGE {__version__}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)

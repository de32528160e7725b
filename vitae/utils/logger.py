"""
Shared loguru setup.

vitae is quiet by default (the package disables its logger on import). The
context loggers in contexts/{context}/logger.py call setup_logger to turn
output on for a session: a DEBUG file per context plus a console stream.
"""

import os
import platform
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))
CONSOLE_LOG_LEVEL = os.getenv("VITAE_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors for the levels vitae emits above INFO
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}


def setup_logger(context_name: str, log_dir: Path = None) -> Path:
    """
    Route vitae's log output to <log_dir>/<context_name>.log and stdout.

    Replaces any existing sinks, so calling it again starts a fresh session.

    Args:
        context_name: Context identifier, used as the log file name ("render", "template")
        log_dir: Directory for the log file (defaults to VITAE_LOGS_PATH)

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir) if log_dir is not None else LOGS_PATH
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.enable("vitae")

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_session_header(context_name, log_file)
    return log_file


def log_session_header(context_name: str, log_file: Path) -> None:
    """Record where a logging session came from at the top of its output."""
    header = {
        "Context": context_name,
        "Log file": log_file,
        "Working directory": Path.cwd(),
        "Python": platform.python_version(),
        "Command": " ".join(sys.argv),
    }

    logger.info("-" * 60)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("-" * 60)

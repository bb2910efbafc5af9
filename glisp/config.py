from __future__ import annotations
import logging
import os
import sys
from typing import Optional

_TRUTHY = ("1", "true", "yes", "on")


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_save_eval_default() -> bool:
    """Whether the Interpreter annotates nodes when not told explicitly."""
    return flag_from_env('GLISP_SAVE_EVAL', False)


def get_log_level() -> str:
    return os.environ.get('GLISP_LOG_LEVEL', 'WARNING').strip().upper() or 'WARNING'


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the interpreter.

    Args:
        level: Logging level name (DEBUG, INFO, ...). Falls back to GLISP_LOG_LEVEL.
        log_file: Optional path to a log file. If None, logs go to stdout.
    """
    level = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level, logging.WARNING)

    config = {
        'level': numeric_level,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['filename'] = log_file
    else:
        config['stream'] = sys.stdout

    logging.basicConfig(**config)
    logging.getLogger('glisp').setLevel(numeric_level)
    logging.getLogger(__name__).info("Logging initialized at %s level", level)

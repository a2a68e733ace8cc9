from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_HISTORY_FILE = Path.home() / '.quill_history'
_DEFAULT_HISTORY_LENGTH = 1000
_DEFAULT_PROMPT = '>> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_history_file() -> Optional[Path]:
    # An explicitly empty value disables history persistence
    raw = os.environ.get('QUILL_HISTORY_FILE')
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_history_length() -> int:
    raw = os.environ.get('QUILL_HISTORY_LENGTH', '')
    try:
        n = int(raw)
    except ValueError:
        return _DEFAULT_HISTORY_LENGTH
    return n if n > 0 else _DEFAULT_HISTORY_LENGTH


def get_prompt() -> str:
    return os.environ.get('QUILL_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('QUILL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.getLevelName(_DEFAULT_LOG_LEVEL)


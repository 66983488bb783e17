from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_MAX_CALL_DEPTH = 1000
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_max_call_depth() -> int:
    return int_from_env('MINILISP_MAX_CALL_DEPTH', _DEFAULT_MAX_CALL_DEPTH)


def get_log_level() -> int:
    name = os.environ.get('MINILISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('MINILISP_REPL_HOST') or _DEFAULT_REPL_HOST
    return host, int_from_env('MINILISP_REPL_PORT', _DEFAULT_REPL_PORT)


def configure_logging() -> None:
    """Install a root handler at the configured level (entry points only)."""
    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

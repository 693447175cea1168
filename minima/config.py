from __future__ import annotations
import logging
import os

from minima.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = str_from_env('MINIMA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_repl_host() -> str:
    return str_from_env('MINIMA_REPL_HOST', _DEFAULT_REPL_HOST)


def get_repl_port() -> int:
    raw = str_from_env('MINIMA_REPL_PORT', str(_DEFAULT_REPL_PORT))
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_REPL_PORT


def use_sugar() -> bool:
    # The REPL desugars its input unless told otherwise
    return str_from_env('MINIMA_SUGAR', '1').lower() in _TRUE_VALUES


def get_pprint_options() -> dict:
    raw = os.environ.get('MINIMA_PPRINT_OPTIONS')
    if not raw:
        return DEFAULT_OPTIONS
    return load_options_from_json(raw)

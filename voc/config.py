import codecs
import logging
import os

from voc.errors import ConfigError


def env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


def env_color():
    return env_flag("VOC_COLOR", True) and "NO_COLOR" not in os.environ


def env_seed():
    """VOC_SEED as an int when numeric, so it seeds like make_rng(7)."""
    value = os.environ.get("VOC_SEED")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return value


# Text encoding of vocabulary files, undecodable bytes are kept as surrogates
ENCODING = os.environ.get("VOC_ENCODING", "utf-8")

CLEAR_SCREEN = env_flag("VOC_CLEAR_SCREEN", True)
USE_COLOR = env_color()

# Fixed seed for reproducible random mode, otherwise seeded from the clock
SEED = env_seed()

LOG_LEVEL = os.environ.get("VOC_LOG_LEVEL", "WARNING").upper()

# termcolor colors per role
COLORS = {
    'banner': 'green',
    'prompt': 'cyan',
    'hint': 'yellow',
    'error': 'red',
    'retry': 'blue',
}

EXIT_FAILURE = 1


def validate():
    """Reject environment overrides the program cannot use."""
    try:
        codecs.lookup(ENCODING)
    except LookupError:
        raise ConfigError(f"VOC_ENCODING: unknown encoding {ENCODING!r}")
    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise ConfigError(f"VOC_LOG_LEVEL: unknown level {LOG_LEVEL!r}")

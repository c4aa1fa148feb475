import sys

import emoji
from termcolor import colored

from voc import config

# full terminal reset
CLEAR_SEQUENCE = "\033c"


class Screen:
    """Clear-screen capability; does nothing when disabled or off a terminal."""

    def __init__(self, stream=None, enabled=None):
        self.stream = stream if stream is not None else sys.stdout
        self.enabled = config.CLEAR_SCREEN if enabled is None else enabled

    def can_clear(self):
        isatty = getattr(self.stream, "isatty", None)
        return self.enabled and isatty is not None and isatty()

    def clear(self):
        if self.can_clear():
            self.stream.write(CLEAR_SEQUENCE)
            self.stream.flush()


def paint(text, role, attrs=None):
    if not config.USE_COLOR:
        return text
    return colored(text, config.COLORS.get(role), attrs=attrs)


def banner(text):
    return paint(emoji.emojize(text, language='alias'), 'banner', attrs=['bold'])

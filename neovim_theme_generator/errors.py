"""Exceptions and logging setup."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ThemeGeneratorError(Exception):
    """Base exception for the theme generator."""


class UnknownThemeError(ThemeGeneratorError, KeyError):
    """No theme is registered under the requested name."""

    def __init__(self, name, known):
        self.name = name
        self.known = tuple(known)
        super().__init__(f"Unknown theme {name!r} (available: {', '.join(self.known)})")

    def __str__(self):
        return self.args[0]


def setup_logging(debug=False):
    """Configure package logging on stderr.

    stdout is reserved for the generated Lua module.
    """
    logger = logging.getLogger("neovim_theme_generator")
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    # Repeated calls adjust the level but must not stack handlers
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(console)
    return logger

from ..errors import UnknownThemeError
from .base import Theme
from .syntark import SyntarkTheme
from .thematic import DarkThematicTheme, LightThematicTheme, Provider, ThematicTheme

DEFAULT_THEME = "syntark"

# Registered themes, by the name the command line selects them with
THEMES = {
    "syntark": SyntarkTheme,
    "thematic-dark": ThematicTheme.dark,
    "thematic-light": ThematicTheme.light,
}


def theme_names():
    return list(THEMES)


def get_theme(name):
    """Instantiate a registered theme by name.

    Raises:
        UnknownThemeError: if no theme is registered under ``name``
    """
    try:
        factory = THEMES[name]
    except KeyError:
        raise UnknownThemeError(name, THEMES) from None
    return factory()


__all__ = [
    "DEFAULT_THEME",
    "THEMES",
    "DarkThematicTheme",
    "LightThematicTheme",
    "Provider",
    "SyntarkTheme",
    "Theme",
    "ThematicTheme",
    "get_theme",
    "theme_names",
]

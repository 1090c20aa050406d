"""Shared pytest fixtures for the theme generator tests."""

import pytest

from neovim_theme_generator.categories import Category, DiagnosticLevel, Token
from neovim_theme_generator.color import color_from_hex
from neovim_theme_generator.themes import THEMES, Theme, get_theme


class StubTheme(Theme):
    """Theme with one fallback color and explicit per-role overrides."""

    def __init__(self, categories=None, tokens=None, levels=None, default="#808080"):
        self.categories = categories or {}
        self.tokens = tokens or {}
        self.levels = levels or {}
        self.default = default

    def category_color(self, category):
        return color_from_hex(self.categories.get(category, self.default))

    def token_color(self, token):
        return color_from_hex(self.tokens.get(token, self.default))

    def diagnostic_level_color(self, level):
        return color_from_hex(self.levels.get(level, self.default))


@pytest.fixture
def stub_theme() -> StubTheme:
    """Stub with the Normal colors and an error color set explicitly."""
    return StubTheme(
        categories={
            Category.NORMAL: "#d8d8d8",
            Category.NORMAL_BACKGROUND: "#181818",
        },
        tokens={Token.FUNCTION: "#00bfff"},
        levels={DiagnosticLevel.ERROR: "#bf616a"},
    )


@pytest.fixture(params=sorted(THEMES))
def theme_name(request) -> str:
    """Every registered theme name."""
    return request.param


@pytest.fixture
def theme(theme_name) -> Theme:
    """Every registered theme."""
    return get_theme(theme_name)

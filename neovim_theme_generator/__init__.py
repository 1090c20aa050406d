"""Generate Neovim colorschemes from a small set of semantic colors."""

from .categories import Category, DiagnosticLevel, Token
from .color import Color, create_color, darken, lighten
from .neovim import NeovimTheme, generate_neovim_theme
from .style import Style, UnderlineStyle
from .themes import SyntarkTheme, Theme, ThematicTheme, get_theme

__version__ = "0.1.0"

__all__ = [
    "Category",
    "Color",
    "DiagnosticLevel",
    "NeovimTheme",
    "Style",
    "SyntarkTheme",
    "Theme",
    "ThematicTheme",
    "Token",
    "UnderlineStyle",
    "create_color",
    "darken",
    "generate_neovim_theme",
    "get_theme",
    "lighten",
]

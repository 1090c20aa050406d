from .highlights import Link, Value, build_highlights, iter_highlights
from .lua import load_support_code, to_lua_module, write_lua_module
from .theme import NeovimTheme, generate_neovim_theme

__all__ = [
    "Link",
    "NeovimTheme",
    "Value",
    "build_highlights",
    "generate_neovim_theme",
    "iter_highlights",
    "load_support_code",
    "to_lua_module",
    "write_lua_module",
]

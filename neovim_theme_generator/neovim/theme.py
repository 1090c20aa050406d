from .highlights import build_highlights
from .lua import to_lua_module, write_lua_module


class NeovimTheme:
    """Highlight table resolved from a Theme, ready to be serialized.

    The table is built once in the constructor and never changes.
    """

    def __init__(self, base):
        self.base = base
        self.highlights = build_highlights(base)

    def __eq__(self, other):
        if not isinstance(other, NeovimTheme):
            return NotImplemented
        return dict(self.highlights) == dict(other.highlights)

    def __len__(self):
        return len(self.highlights)

    def __repr__(self):
        return f"NeovimTheme({self.base!r}, {len(self.highlights)} highlights)"

    def to_lua_module(self, support_code=None):
        return to_lua_module(self.highlights, support_code=support_code)

    def write(self, writer, support_code=None):
        write_lua_module(self.highlights, writer, support_code=support_code)


def generate_neovim_theme(base, support_code=None):
    """Generate the Lua colorscheme module for a theme.

    Args:
        base: The Theme to resolve highlight colors from
        support_code: Optional Lua appended after the table (defaults to the
                      packaged support code)

    Returns:
        Lua source of the colorscheme module
    """
    return NeovimTheme(base).to_lua_module(support_code=support_code)

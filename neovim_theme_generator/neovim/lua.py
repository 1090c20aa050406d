"""Lua serialization of a resolved highlight table."""

import io
from importlib import resources

from ..style import UnderlineStyle
from .highlights import Link

LUA_INDENT = "    "
SUPPORT_CODE_RESOURCE = "theme.lua"

# Neovim's nvim_set_hl key for each underline variant
UNDERLINE_KEYS = {
    UnderlineStyle.SINGLE: "underline",
    UnderlineStyle.DOUBLE: "underdouble",
    UnderlineStyle.CURLY: "undercurl",
    UnderlineStyle.DOTTED: "underdotted",
    UnderlineStyle.DASHED: "underdashed",
}


def load_support_code():
    """Read the Lua code appended after the highlight table."""
    return (
        resources.files(__package__)
        .joinpath(SUPPORT_CODE_RESOURCE)
        .read_text(encoding="utf-8")
    )


def _lua_bool(value):
    return "true" if value else "false"


def _style_fields(style):
    """Yield (key, lua literal) for every attribute that is set, in output order."""
    if style.foreground is not None:
        yield "fg", f'"{style.foreground.hex}"'
    if style.background is not None:
        yield "bg", f'"{style.background.hex}"'
    if style.special is not None:
        yield "sp", f'"{style.special.hex}"'
    if style.bold is not None:
        yield "bold", _lua_bool(style.bold)
    if style.underline is not None:
        yield UNDERLINE_KEYS[style.underline], "true"
    if style.strikethrough is not None:
        yield "strikethrough", _lua_bool(style.strikethrough)
    if style.italic is not None:
        yield "italic", _lua_bool(style.italic)
    yield "reverse", _lua_bool(style.reverse)


def sorted_highlights(highlights):
    """Return (rendered name, highlight) pairs sorted by rendered name."""
    return sorted(
        ((str(name), highlight) for name, highlight in highlights.items()),
        key=lambda item: item[0],
    )


def write_lua_module(highlights, writer, support_code=None):
    """Write the highlight table and the support code to a text stream.

    Args:
        highlights: Mapping of highlight name to Value or Link
        writer: Text stream to write to
        support_code: Lua appended verbatim after the table. Defaults to the
                      packaged theme.lua.
    """
    if support_code is None:
        support_code = load_support_code()

    writer.write("local highlights = {\n")
    for name, highlight in sorted_highlights(highlights):
        writer.write(f'  ["{name}"] = {{\n')
        if isinstance(highlight, Link):
            writer.write(f'{LUA_INDENT}link = "{highlight.target}",\n')
        else:
            for key, value in _style_fields(highlight.style):
                writer.write(f"{LUA_INDENT}{key} = {value},\n")
        writer.write("  },\n")
    writer.write("}\n")
    writer.write("\n")
    writer.write(support_code)


def to_lua_module(highlights, support_code=None):
    """Serialize a highlight table to a Lua module string."""
    buffer = io.StringIO()
    write_lua_module(highlights, buffer, support_code=support_code)
    return buffer.getvalue()

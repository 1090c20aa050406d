"""Tests for Lua serialization."""

import io
import re

from neovim_theme_generator.color import color_from_hex
from neovim_theme_generator.neovim import NeovimTheme, generate_neovim_theme
from neovim_theme_generator.neovim.highlights import Link, Value, build_highlights
from neovim_theme_generator.neovim.lua import (
    load_support_code,
    to_lua_module,
    write_lua_module,
)
from neovim_theme_generator.neovim.names import CompletionKind, EditorGroup, LspType, lsp
from neovim_theme_generator.style import Style

ENTRY_RE = re.compile(r'^  \["([^"]+)"\] = \{$', re.MULTILINE)
RED = color_from_hex("#ff0000")
BLUE = color_from_hex("#0000FF")


def _render(table):
    return to_lua_module(table, support_code="-- support\n")


class TestEntryFormat:
    def test_value_emits_only_set_attributes(self) -> None:
        out = _render({EditorGroup.NORMAL: Value(Style(foreground=RED))})
        assert out == (
            "local highlights = {\n"
            '  ["Normal"] = {\n'
            '    fg = "#ff0000",\n'
            "    reverse = false,\n"
            "  },\n"
            "}\n"
            "\n"
            "-- support\n"
        )

    def test_link_emits_only_target(self) -> None:
        out = _render({CompletionKind(LspType.FUNCTION): Link(lsp(LspType.FUNCTION))})
        assert '  ["CmpItemKindFunction"] = {\n    link = "@lsp.type.function",\n  },\n' in out
        assert "reverse" not in out

    def test_field_order(self) -> None:
        style = (
            Style()
            .with_italic(True)
            .with_strikethrough(False)
            .curly_underline()
            .with_bold(True)
            .with_special(RED)
            .with_background(BLUE)
            .with_foreground(RED)
            .with_reverse()
        )
        out = _render({EditorGroup.TITLE: Value(style)})
        body = out.split("\n")[2:10]
        assert body == [
            '    fg = "#ff0000",',
            '    bg = "#0000ff",',
            '    sp = "#ff0000",',
            "    bold = true,",
            "    undercurl = true,",
            "    strikethrough = false,",
            "    italic = true,",
            "    reverse = true,",
        ]

    def test_underline_keywords(self) -> None:
        table = {
            EditorGroup.SPELL_BAD: Value(Style().underlined()),
            EditorGroup.SPELL_CAP: Value(Style().double_underline()),
            EditorGroup.SPELL_LOCAL: Value(Style().dotted_underline()),
            EditorGroup.SPELL_RARE: Value(Style().dashed_underline()),
        }
        out = _render(table)
        for keyword in ("underline", "underdouble", "underdotted", "underdashed"):
            assert f"    {keyword} = true,\n" in out

    def test_empty_style_still_emits_reverse(self) -> None:
        out = _render({EditorGroup.CONCEAL: Value(Style())})
        assert '  ["Conceal"] = {\n    reverse = false,\n  },\n' in out


class TestOrdering:
    def test_sorted_by_rendered_name(self, theme) -> None:
        names = ENTRY_RE.findall(to_lua_module(build_highlights(theme)))
        assert names == sorted(names)
        assert len(names) == len(build_highlights(theme))

    def test_sort_is_by_string_not_family(self) -> None:
        table = {
            lsp(LspType.TYPE): Value(Style()),
            EditorGroup.NORMAL: Value(Style()),
            EditorGroup.COMMENT: Value(Style()),
        }
        assert ENTRY_RE.findall(_render(table)) == ["@lsp.type.type", "Comment", "Normal"]

    def test_output_is_deterministic(self, theme) -> None:
        assert generate_neovim_theme(theme) == generate_neovim_theme(theme)

    def test_insertion_order_is_irrelevant(self, theme) -> None:
        highlights = build_highlights(theme)
        reversed_table = dict(reversed(list(highlights.items())))
        assert to_lua_module(reversed_table) == to_lua_module(highlights)


class TestSupportCode:
    def test_packaged_support_code_is_appended_verbatim(self, theme) -> None:
        support = load_support_code()
        out = generate_neovim_theme(theme)
        assert out.endswith("}\n\n" + support)
        assert "nvim_set_hl" in support

    def test_custom_support_code(self, stub_theme) -> None:
        out = generate_neovim_theme(stub_theme, support_code="return highlights\n")
        assert out.endswith("}\n\nreturn highlights\n")

    def test_write_matches_string(self, stub_theme) -> None:
        neovim_theme = NeovimTheme(stub_theme)
        buffer = io.StringIO()
        neovim_theme.write(buffer)
        assert buffer.getvalue() == neovim_theme.to_lua_module()

    def test_write_lua_module_to_stream(self) -> None:
        buffer = io.StringIO()
        write_lua_module({EditorGroup.NORMAL: Value(Style())}, buffer, support_code="")
        assert buffer.getvalue().startswith("local highlights = {\n")

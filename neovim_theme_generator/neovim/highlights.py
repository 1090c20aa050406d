"""The Neovim highlight catalogue and the resolver that evaluates it."""

import itertools
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from ..categories import Category, DiagnosticLevel, Token
from ..color import darken, lighten
from ..style import Style
from .names import (
    CompletionGroup,
    CompletionKind,
    DiagnosticGroup,
    DiagnosticUiKind,
    EditorGroup as E,
    FinderGroup,
    LspType,
    MarkdownGroup,
    lsp,
)

logger = logging.getLogger(__name__)

# Background of diagnostic virtual text, relative to the severity color
VIRTUAL_TEXT_DARKEN = 0.95


@dataclass(frozen=True)
class Value:
    """A concrete style."""

    style: Style


@dataclass(frozen=True)
class Link:
    """An alias, resolved by Neovim when the colorscheme loads."""

    target: object


Highlight = Union[Value, Link]

# Token color of each LSP semantic token type
LSP_TYPE_TOKENS = {
    LspType.CLASS: Token.TYPE,
    LspType.DECORATOR: Token.ATTRIBUTE,
    LspType.DERIVE: Token.INTERFACE,
    LspType.ENUM: Token.ENUM,
    LspType.ENUM_MEMBER: Token.VARIANT,
    LspType.FUNCTION: Token.FUNCTION,
    LspType.INTERFACE: Token.INTERFACE,
    LspType.KEYWORD: Token.KEYWORD,
    LspType.MACRO: Token.MACRO,
    LspType.METHOD: Token.FUNCTION,
    LspType.NAMESPACE: Token.MODULE,
    LspType.PARAMETER: Token.PARAMETER,
    LspType.PROPERTY: Token.FIELD,
    LspType.STRUCT: Token.TYPE,
    LspType.TYPE: Token.TYPE,
    LspType.TYPE_ALIAS: Token.TYPE,
    LspType.TYPE_PARAMETER: Token.TYPE_PARAMETER,
    LspType.VARIABLE: Token.VARIABLE,
}


def _fg(color):
    return Value(Style().with_foreground(color))


def _bg(color):
    return Value(Style().with_background(color))


def _editor_highlights(theme):
    category = theme.category_color
    token = theme.token_color
    level = theme.diagnostic_level_color
    empty = Value(Style())

    yield E.COLOR_COLUMN, _bg(category(Category.COLUMN_GUIDE))
    yield E.CONCEAL, empty
    yield E.CUR_SEARCH, Value(
        Style()
        .with_foreground(category(Category.SEARCH))
        .with_background(category(Category.ACTIVE_SEARCH_MATCH))
    )
    yield E.CURSOR, Value(Style.reversed())
    yield E.CURSOR_IM, Link(E.CURSOR)
    yield E.CURSOR_COLUMN, empty
    yield E.CURSOR_LINE, _bg(category(Category.CURSOR_LINE))
    yield E.DIRECTORY, empty
    yield E.DIFF_ADD, _bg(category(Category.DIFF_ADD))
    yield E.DIFF_CHANGE, _bg(category(Category.DIFF_CHANGE))
    yield E.DIFF_DELETE, _bg(category(Category.DIFF_DELETE))
    yield E.DIFF_TEXT, _bg(category(Category.DIFF_TEXT))
    yield E.END_OF_BUFFER, Link(E.NON_TEXT)
    yield E.TERM_CURSOR, _bg(category(Category.TERM_CURSOR))
    yield E.TERM_CURSOR_NC, _bg(category(Category.UNFOCUSED_TERM_CURSOR))
    yield E.ERROR_MSG, _fg(level(DiagnosticLevel.ERROR))
    yield E.WIN_SEPARATOR, _fg(darken(category(Category.NORMAL), 0.95))
    yield E.FOLDED, _bg(category(Category.FOLDED))
    yield E.FOLD_COLUMN, empty
    yield E.SIGN_COLUMN, empty
    yield E.INC_SEARCH, Link(E.CUR_SEARCH)
    yield E.SUBSTITUTE, Link(E.INC_SEARCH)
    yield E.LINE_NR, _fg(category(Category.LINE_NUMBER))
    yield E.LINE_NR_ABOVE, Link(E.LINE_NR)
    yield E.LINE_NR_BELOW, Link(E.LINE_NR)
    yield E.CURSOR_LINE_NR, _fg(category(Category.CURSOR_LINE_NUMBER))
    yield E.CURSOR_LINE_FOLD, Link(E.FOLD_COLUMN)
    yield E.CURSOR_LINE_SIGN, Link(E.SIGN_COLUMN)
    yield E.MATCH_PAREN, _fg(category(Category.MATCHED_BRACKET))
    yield E.MODE_MSG, _fg(category(Category.MODE_MESSAGE))
    yield E.MSG_AREA, empty
    yield E.MSG_SEPARATOR, _fg(category(Category.MESSAGE_SEPARATOR))
    yield E.MORE_MSG, Link(E.MODE_MSG)
    yield E.NON_TEXT, _fg(category(Category.NON_TEXT))
    yield E.NORMAL, Value(
        Style()
        .with_foreground(category(Category.NORMAL))
        .with_background(category(Category.NORMAL_BACKGROUND))
    )
    yield E.NORMAL_FLOAT, empty
    yield E.FLOAT_BORDER, Link(E.WIN_SEPARATOR)
    yield E.FLOAT_TITLE, Link(E.TITLE)
    yield E.NORMAL_NC, empty
    yield E.PMENU, empty
    yield E.PMENU_SEL, Link(E.VISUAL)
    yield E.PMENU_KIND, empty
    yield E.PMENU_KIND_SEL, Link(E.VISUAL)
    yield E.PMENU_EXTRA, empty
    yield E.PMENU_EXTRA_SEL, Link(E.VISUAL)
    yield E.PMENU_SBAR, _fg(lighten(category(Category.NORMAL_BACKGROUND), 0.1))
    yield E.PMENU_THUMB, Link(E.PMENU)
    yield E.QUESTION, _fg(category(Category.QUESTION))
    yield E.QUICK_FIX_LINE, empty
    yield E.SEARCH, Value(
        Style()
        .with_foreground(category(Category.SEARCH))
        .with_background(category(Category.SEARCH_MATCH))
    )
    yield E.SPECIAL_KEY, _fg(category(Category.SPECIAL))
    yield E.SPELL_BAD, _fg(category(Category.BAD_SPELLING))
    yield E.SPELL_CAP, Link(E.SPELL_BAD)
    yield E.SPELL_LOCAL, Link(E.SPELL_BAD)
    yield E.SPELL_RARE, Link(E.SPELL_BAD)
    yield E.STATUS_LINE, _bg(category(Category.STATUS_LINE))
    yield E.STATUS_LINE_NC, _bg(darken(category(Category.STATUS_LINE), 0.5))
    yield E.TAB_LINE, Value(
        Style()
        .with_foreground(category(Category.INACTIVE_TAB))
        .with_background(category(Category.INACTIVE_TAB_BACKGROUND))
    )
    yield E.TAB_LINE_FILL, empty
    yield E.TAB_LINE_SEL, Value(
        Style()
        .with_foreground(category(Category.ACTIVE_TAB))
        .with_background(category(Category.ACTIVE_TAB_BACKGROUND))
    )
    yield E.TITLE, Link(E.TAB_LINE_SEL)
    yield E.VISUAL, _bg(category(Category.SELECTION))
    yield E.VISUAL_NOS, Link(E.VISUAL)
    yield E.WARNING_MSG, _fg(level(DiagnosticLevel.WARNING))
    yield E.WHITESPACE, _fg(category(Category.WHITESPACE))
    yield E.WILD_MENU, Link(E.PMENU_SEL)
    yield E.WIN_BAR, Link(E.TAB_LINE_SEL)
    yield E.WIN_BAR_NC, Link(E.TAB_LINE)

    # Legacy syntax groups
    yield E.BOOLEAN, _fg(token(Token.BOOLEAN))
    yield E.CHARACTER, _fg(token(Token.CHARACTER))
    yield E.COMMENT, _fg(token(Token.COMMENT))
    yield E.CONDITIONAL, Link(E.KEYWORD)
    yield E.CONSTANT, _fg(token(Token.CONSTANT))
    yield E.DEBUG, empty
    yield E.DEFINE, Link(E.MACRO)
    yield E.DELIMITER, _fg(token(Token.DELIMITER))
    yield E.ERROR, _fg(level(DiagnosticLevel.ERROR))
    yield E.EXCEPTION, Link(E.KEYWORD)
    yield E.FLOAT, _fg(token(Token.FLOAT))
    yield E.FUNCTION, _fg(token(Token.FUNCTION))
    yield E.IDENTIFIER, _fg(token(Token.IDENTIFIER))
    yield E.INCLUDE, _fg(token(Token.MODULE))
    yield E.KEYWORD, _fg(token(Token.KEYWORD))
    yield E.LABEL, Link(E.KEYWORD)
    yield E.MACRO, _fg(token(Token.MACRO))
    yield E.NUMBER, _fg(token(Token.INTEGER))
    yield E.OPERATOR, _fg(token(Token.OPERATOR))
    yield E.PRE_CONDIT, Link(E.MACRO)
    yield E.PRE_PROC, Link(E.MACRO)
    yield E.REPEAT, Link(E.KEYWORD)
    yield E.SPECIAL, Link(E.SPECIAL_CHAR)
    yield E.SPECIAL_CHAR, _fg(category(Category.SPECIAL))
    yield E.SPECIAL_COMMENT, Link(E.COMMENT)
    yield E.STATEMENT, Link(E.KEYWORD)
    yield E.STORAGE_CLASS, Link(E.KEYWORD)
    yield E.STRING, _fg(token(Token.STRING))
    yield E.STRUCTURE, Link(E.TYPE)
    yield E.TAG, _fg(token(Token.TAG))
    yield E.TODO, _fg(token(Token.TODO))
    yield E.TYPE, _fg(token(Token.TYPE))
    yield E.TYPEDEF, Link(E.TYPE)
    yield E.UNDERLINED, _fg(token(Token.LINK))

    yield E.DIAGNOSTIC_DEPRECATED, empty
    yield E.DIAGNOSTIC_UNNECESSARY, empty


def _lsp_highlights(theme):
    for lsp_type in LspType:
        yield lsp(lsp_type), _fg(theme.token_color(LSP_TYPE_TOKENS[lsp_type]))


def diagnostic_style(color, kind):
    """Style of one diagnostic group for a severity color."""
    if kind is None:
        return Style().with_foreground(color)
    if kind is DiagnosticUiKind.UNDERLINE:
        return Style().with_special(color).curly_underline()
    if kind is DiagnosticUiKind.VIRTUAL_TEXT:
        return (
            Style()
            .with_foreground(color)
            .with_background(darken(color, VIRTUAL_TEXT_DARKEN))
        )
    raise ValueError(f"Unknown diagnostic UI kind: {kind!r}")


def _diagnostic_highlights(theme):
    kinds = [None, *DiagnosticUiKind]
    for level, kind in itertools.product(DiagnosticLevel, kinds):
        color = theme.diagnostic_level_color(level)
        yield DiagnosticGroup(level, kind), Value(diagnostic_style(color, kind))


def _plugin_highlights(theme):
    token = theme.token_color

    yield MarkdownGroup.CODE, _fg(token(Token.IDENTIFIER))
    yield MarkdownGroup.CODE_BLOCK, _fg(token(Token.STRING))
    yield MarkdownGroup.H1, _fg(token(Token.MODULE))
    yield MarkdownGroup.H2, Link(MarkdownGroup.H1)
    yield MarkdownGroup.HEADING_DELIMITER, Link(E.DELIMITER)
    yield MarkdownGroup.LINK_TEXT, _fg(token(Token.LINK))

    yield CompletionGroup.ABBR_MATCH, Link(E.SPECIAL)
    yield CompletionGroup.ABBR_MATCH_FUZZY, Link(E.SPECIAL)
    for lsp_type in LspType:
        yield CompletionKind(lsp_type), Link(lsp(lsp_type))

    yield FinderGroup.BORDER, Link(E.FLOAT_BORDER)
    yield FinderGroup.TITLE, Link(E.TITLE)


def iter_highlights(theme):
    """Yield every (name, highlight) pair of the catalogue for a theme.

    Each name is yielded exactly once; every Link target is itself a name in
    the catalogue.
    """
    yield from _editor_highlights(theme)
    yield from _lsp_highlights(theme)
    yield from _diagnostic_highlights(theme)
    yield from _plugin_highlights(theme)


def build_highlights(theme):
    """Resolve the catalogue against a theme.

    Args:
        theme: A Theme providing category, token and diagnostic colors

    Returns:
        Read-only mapping of highlight name to Value or Link
    """
    highlights = dict(iter_highlights(theme))
    links = sum(1 for h in highlights.values() if isinstance(h, Link))
    logger.debug(
        "Resolved %d highlights (%d links) for %r", len(highlights), links, theme
    )
    return MappingProxyType(highlights)


def resolve_link(highlights, name):
    """Follow links from ``name`` until a Value is reached.

    Mirrors what Neovim does when it loads the table.

    Raises:
        KeyError: if a link target is missing from the table
        ValueError: if the links form a cycle
    """
    seen = []
    highlight = highlights[name]
    while isinstance(highlight, Link):
        seen.append(name)
        name = highlight.target
        if name in seen:
            chain = " -> ".join(str(n) for n in [*seen, name])
            raise ValueError(f"Highlight link cycle: {chain}")
        highlight = highlights[name]
    return highlight.style

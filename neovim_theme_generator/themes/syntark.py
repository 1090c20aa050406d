"""Syntark: a single dark palette where every role is a literal or a
function of another role of the same theme."""

from ..categories import Category, DiagnosticLevel, Token
from ..color import color_from_hex, darken, lighten, named_color, with_hsv
from .base import Theme

_CATEGORY_RULES = {
    Category.ACTIVE_SEARCH_MATCH: lambda t: named_color("chocolate"),
    Category.ACTIVE_TAB: lambda t: named_color("white"),
    Category.ACTIVE_TAB_BACKGROUND: lambda t: t.category_color(
        Category.NORMAL_BACKGROUND
    ),
    Category.BAD_SPELLING: lambda t: named_color("brown"),
    Category.COLUMN_GUIDE: lambda t: darken(
        t.category_color(Category.NORMAL_BACKGROUND), 0.1
    ),
    Category.CURSOR_LINE: lambda t: lighten(
        t.category_color(Category.NORMAL_BACKGROUND), 0.01
    ),
    Category.CURSOR_LINE_NUMBER: lambda t: named_color("white"),
    Category.DIFF_ADD: lambda t: with_hsv(
        named_color("green"), saturation=0.3, value=0.3
    ),
    Category.DIFF_CHANGE: lambda t: with_hsv(
        named_color("green"), saturation=0.6, value=0.15
    ),
    Category.DIFF_DELETE: lambda t: with_hsv(
        named_color("red"), saturation=0.4, value=0.3
    ),
    Category.DIFF_TEXT: lambda t: t.category_color(Category.DIFF_ADD),
    Category.FOLDED: lambda t: darken(
        t.category_color(Category.NORMAL_BACKGROUND), 0.2
    ),
    Category.INACTIVE_TAB: lambda t: darken(t.category_color(Category.NORMAL), 0.75),
    Category.INACTIVE_TAB_BACKGROUND: lambda t: darken(
        t.category_color(Category.NORMAL_BACKGROUND), 0.3
    ),
    Category.LINE_NUMBER: lambda t: darken(t.category_color(Category.NORMAL), 0.75),
    Category.MATCHED_BRACKET: lambda t: named_color("yellow"),
    Category.MESSAGE_SEPARATOR: lambda t: t.category_color(Category.NORMAL),
    Category.MODE_MESSAGE: lambda t: t.category_color(Category.NORMAL),
    Category.NON_TEXT: lambda t: named_color("dimgray"),
    Category.NORMAL: lambda t: color_from_hex("#d8d8d8"),
    Category.NORMAL_BACKGROUND: lambda t: color_from_hex("#181818"),
    Category.QUESTION: lambda t: t.category_color(Category.SELECTION),
    Category.SEARCH: lambda t: t.category_color(Category.NORMAL),
    Category.SEARCH_MATCH: lambda t: named_color("blue"),
    Category.SELECTION: lambda t: named_color("darkslategray"),
    Category.SPECIAL: lambda t: named_color("dodgerblue"),
    Category.STATUS_LINE: lambda t: lighten(
        t.category_color(Category.NORMAL_BACKGROUND), 0.005
    ),
    Category.TERM_CURSOR: lambda t: color_from_hex("#aeafad"),
    Category.UNFOCUSED_TERM_CURSOR: lambda t: t.category_color(Category.TERM_CURSOR),
    Category.WHITESPACE: lambda t: darken(t.category_color(Category.NORMAL), 0.9),
}

_TOKEN_RULES = {
    Token.ATTRIBUTE: lambda t: named_color("lightpink"),
    Token.BOOLEAN: lambda t: t.token_color(Token.INTEGER),
    Token.CHARACTER: lambda t: named_color("seagreen"),
    Token.COMMENT: lambda t: named_color("slategray"),
    Token.CONSTANT: lambda t: named_color("lightsalmon"),
    Token.CONST_GENERIC_PARAMETER: lambda t: t.token_color(Token.CONSTANT),
    Token.DELIMITER: lambda t: named_color("lightcoral"),
    Token.DOC_COMMENT: lambda t: t.token_color(Token.COMMENT),
    Token.ENUM: lambda t: t.token_color(Token.TYPE),
    Token.FIELD: lambda t: named_color("tan"),
    Token.FLOAT: lambda t: t.token_color(Token.INTEGER),
    Token.FUNCTION: lambda t: named_color("deepskyblue"),
    Token.IDENTIFIER: lambda t: named_color("steelblue"),
    Token.INTEGER: lambda t: named_color("goldenrod"),
    Token.INTERFACE: lambda t: named_color("teal"),
    Token.KEYWORD: lambda t: named_color("orchid"),
    Token.LINK: lambda t: named_color("darkcyan"),
    Token.MACRO: lambda t: named_color("pink"),
    Token.MODULE: lambda t: named_color("aquamarine"),
    Token.OPERATOR: lambda t: named_color("dodgerblue"),
    Token.PARAMETER: lambda t: t.token_color(Token.VARIABLE),
    Token.STATIC: lambda t: t.token_color(Token.VARIABLE),
    Token.STRING: lambda t: named_color("forestgreen"),
    Token.STRUCT: lambda t: t.token_color(Token.TYPE),
    Token.TAG: lambda t: named_color("cadetblue"),
    Token.TODO: lambda t: named_color("darkorange"),
    Token.TYPE: lambda t: named_color("lightgreen"),
    Token.TYPE_PARAMETER: lambda t: t.token_color(Token.TYPE),
    Token.VARIABLE: lambda t: t.token_color(Token.IDENTIFIER),
    Token.VARIANT: lambda t: named_color("lightskyblue"),
}

_DIAGNOSTIC_COLORS = {
    DiagnosticLevel.ERROR: "crimson",
    DiagnosticLevel.WARNING: "orange",
    DiagnosticLevel.INFO: "steelblue",
    DiagnosticLevel.HINT: "aqua",
}


class SyntarkTheme(Theme):
    def category_color(self, category):
        return _CATEGORY_RULES[category](self)

    def token_color(self, token):
        return _TOKEN_RULES[token](self)

    def diagnostic_level_color(self, level):
        return named_color(_DIAGNOSTIC_COLORS[level])

    def __repr__(self):
        return "SyntarkTheme()"

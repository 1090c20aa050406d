"""Thematic: paired dark/light themes built from a small set of primitives.

Category and token colors are derived once, generically, from a Provider.
A variant only has to supply the fourteen primitive colors; it may also
borrow primitives from another variant.
"""

from abc import abstractmethod

from ..categories import Category, DiagnosticLevel, Token
from ..color import color_from_hex, named_color
from .base import Theme

DARK = "dark"
LIGHT = "light"


class Provider(Theme):
    """Primitive palette from which every category and token is derived."""

    @abstractmethod
    def active_search_match(self):
        pass

    @abstractmethod
    def error(self):
        pass

    @abstractmethod
    def diff_add(self):
        pass

    @abstractmethod
    def diff_change(self):
        pass

    @abstractmethod
    def diff_delete(self):
        pass

    @abstractmethod
    def guide(self):
        pass

    @abstractmethod
    def foreground(self):
        pass

    @abstractmethod
    def background(self):
        pass

    @abstractmethod
    def secondary_background(self):
        pass

    @abstractmethod
    def secondary_foreground(self):
        pass

    @abstractmethod
    def search_match(self):
        pass

    @abstractmethod
    def selection(self):
        pass

    @abstractmethod
    def matched_bracket(self):
        pass

    @abstractmethod
    def cursor(self):
        pass

    def category_color(self, category):
        return category_color(self, category)

    def token_color(self, token):
        return token_color(self, token)


_CATEGORY_RULES = {
    Category.ACTIVE_SEARCH_MATCH: lambda p: p.active_search_match(),
    Category.ACTIVE_TAB: lambda p: category_color(p, Category.NORMAL),
    Category.ACTIVE_TAB_BACKGROUND: lambda p: category_color(
        p, Category.NORMAL_BACKGROUND
    ),
    Category.BAD_SPELLING: lambda p: p.error(),
    Category.COLUMN_GUIDE: lambda p: p.guide(),
    Category.CURSOR_LINE: lambda p: p.selection(),
    Category.CURSOR_LINE_NUMBER: lambda p: p.foreground(),
    Category.DIFF_ADD: lambda p: p.diff_add(),
    Category.DIFF_CHANGE: lambda p: p.diff_change(),
    Category.DIFF_DELETE: lambda p: p.diff_delete(),
    Category.DIFF_TEXT: lambda p: category_color(p, Category.DIFF_ADD),
    Category.FOLDED: lambda p: p.secondary_background(),
    Category.INACTIVE_TAB: lambda p: p.secondary_foreground(),
    Category.INACTIVE_TAB_BACKGROUND: lambda p: p.secondary_background(),
    Category.LINE_NUMBER: lambda p: p.secondary_foreground(),
    Category.MATCHED_BRACKET: lambda p: p.matched_bracket(),
    Category.MESSAGE_SEPARATOR: lambda p: category_color(p, Category.NORMAL),
    Category.MODE_MESSAGE: lambda p: category_color(p, Category.NORMAL),
    Category.NON_TEXT: lambda p: p.secondary_foreground(),
    Category.NORMAL: lambda p: p.foreground(),
    Category.NORMAL_BACKGROUND: lambda p: p.background(),
    Category.QUESTION: lambda p: category_color(p, Category.SELECTION),
    Category.SEARCH: lambda p: category_color(p, Category.NORMAL),
    Category.SEARCH_MATCH: lambda p: p.search_match(),
    Category.SELECTION: lambda p: p.selection(),
    Category.SPECIAL: lambda p: named_color("dodgerblue"),
    Category.STATUS_LINE: lambda p: p.secondary_background(),
    Category.TERM_CURSOR: lambda p: p.cursor(),
    Category.UNFOCUSED_TERM_CURSOR: lambda p: category_color(p, Category.TERM_CURSOR),
    Category.WHITESPACE: lambda p: p.secondary_foreground(),
}

_TOKEN_RULES = {
    Token.ATTRIBUTE: lambda p: named_color("lightpink"),
    Token.BOOLEAN: lambda p: token_color(p, Token.VARIANT),
    Token.CHARACTER: lambda p: token_color(p, Token.STRING),
    Token.COMMENT: lambda p: p.secondary_foreground(),
    Token.CONSTANT: lambda p: named_color("cadetblue"),
    Token.CONST_GENERIC_PARAMETER: lambda p: token_color(p, Token.CONSTANT),
    Token.DELIMITER: lambda p: p.foreground(),
    Token.DOC_COMMENT: lambda p: token_color(p, Token.COMMENT),
    Token.ENUM: lambda p: token_color(p, Token.TYPE),
    Token.FIELD: lambda p: token_color(p, Token.VARIABLE),
    Token.FLOAT: lambda p: token_color(p, Token.INTEGER),
    Token.FUNCTION: lambda p: named_color("deepskyblue"),
    Token.IDENTIFIER: lambda p: named_color("steelblue"),
    Token.INTEGER: lambda p: named_color("lightsalmon"),
    Token.INTERFACE: lambda p: named_color("seagreen"),
    Token.KEYWORD: lambda p: color_from_hex("#bb9af7"),
    Token.LINK: lambda p: named_color("darkcyan"),
    Token.MACRO: lambda p: token_color(p, Token.ATTRIBUTE),
    Token.MODULE: lambda p: named_color("teal"),
    Token.OPERATOR: lambda p: token_color(p, Token.KEYWORD),
    Token.PARAMETER: lambda p: token_color(p, Token.VARIABLE),
    Token.STATIC: lambda p: token_color(p, Token.VARIABLE),
    Token.STRING: lambda p: named_color("darkkhaki"),
    Token.STRUCT: lambda p: token_color(p, Token.TYPE),
    Token.TAG: lambda p: p.foreground(),
    Token.TODO: lambda p: named_color("darkorange"),
    Token.TYPE: lambda p: named_color("darkseagreen"),
    Token.TYPE_PARAMETER: lambda p: token_color(p, Token.TYPE),
    Token.VARIABLE: lambda p: token_color(p, Token.IDENTIFIER),
    Token.VARIANT: lambda p: named_color("cornflowerblue"),
}


def category_color(provider, category):
    """Resolve a Category against a provider's primitives."""
    return _CATEGORY_RULES[category](provider)


def token_color(provider, token):
    """Resolve a Token against a provider's primitives."""
    return _TOKEN_RULES[token](provider)


class DarkThematicTheme(Provider):
    def diagnostic_level_color(self, level):
        return named_color(
            {
                DiagnosticLevel.ERROR: "crimson",
                DiagnosticLevel.WARNING: "orange",
                DiagnosticLevel.INFO: "steelblue",
                DiagnosticLevel.HINT: "aqua",
            }[level]
        )

    def active_search_match(self):
        return named_color("coral")

    def error(self):
        return color_from_hex("#bf616a")

    def diff_add(self):
        return color_from_hex("#a3be8c")

    def diff_change(self):
        return self.secondary_background()

    def diff_delete(self):
        return color_from_hex("#bf616a")

    def guide(self):
        return self.secondary_background()

    def foreground(self):
        return color_from_hex("#d8d8d8")

    def background(self):
        return color_from_hex("#181818")

    def secondary_background(self):
        return color_from_hex("#202020")

    def secondary_foreground(self):
        return named_color("slategray")

    def search_match(self):
        return named_color("royalblue")

    def selection(self):
        return color_from_hex("#282828")

    def matched_bracket(self):
        return self.search_match()

    def cursor(self):
        return color_from_hex("#d8dee9")


class LightThematicTheme(Provider):
    """Light variant; accents and diagnostics are shared with the dark one."""

    _dark = DarkThematicTheme()

    def diagnostic_level_color(self, level):
        return self._dark.diagnostic_level_color(level)

    def active_search_match(self):
        return self._dark.active_search_match()

    def error(self):
        return self._dark.error()

    def diff_add(self):
        return self._dark.diff_add()

    def diff_change(self):
        return self._dark.diff_change()

    def diff_delete(self):
        return self._dark.diff_delete()

    def guide(self):
        return self.secondary_background()

    def foreground(self):
        return named_color("black")

    def background(self):
        return named_color("beige")

    def secondary_background(self):
        return named_color("ivory")

    def secondary_foreground(self):
        return named_color("lightgray")

    def search_match(self):
        return self._dark.search_match()

    def selection(self):
        return named_color("azure")

    def matched_bracket(self):
        return self._dark.matched_bracket()

    def cursor(self):
        return named_color("slategray")


_VARIANTS = {
    DARK: DarkThematicTheme,
    LIGHT: LightThematicTheme,
}


class ThematicTheme(Theme):
    """Selects one variant of the thematic palette."""

    def __init__(self, variant=DARK):
        if variant not in _VARIANTS:
            raise ValueError(
                f"Unknown thematic variant {variant!r} (expected one of: {', '.join(_VARIANTS)})"
            )
        self.variant = variant
        self._provider = _VARIANTS[variant]()

    @classmethod
    def dark(cls):
        return cls(DARK)

    @classmethod
    def light(cls):
        return cls(LIGHT)

    def category_color(self, category):
        return self._provider.category_color(category)

    def token_color(self, token):
        return self._provider.token_color(token)

    def diagnostic_level_color(self, level):
        return self._provider.diagnostic_level_color(level)

    def __repr__(self):
        return f"ThematicTheme({self.variant!r})"

"""Highlight group names.

A name is a structured key drawn from one of several families. Keys compare
and hash structurally; ``str(name)`` gives the group name Neovim sees and is
only used when serializing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..categories import DiagnosticLevel


class _RenderedEnum(Enum):
    def __str__(self):
        return self.value


class EditorGroup(_RenderedEnum):
    """Highlight groups built into Neovim."""

    # UI
    COLOR_COLUMN = "ColorColumn"
    CONCEAL = "Conceal"
    CUR_SEARCH = "CurSearch"
    CURSOR = "Cursor"
    CURSOR_IM = "CursorIM"
    CURSOR_COLUMN = "CursorColumn"
    CURSOR_LINE = "CursorLine"
    DIRECTORY = "Directory"
    DIFF_ADD = "DiffAdd"
    DIFF_CHANGE = "DiffChange"
    DIFF_DELETE = "DiffDelete"
    DIFF_TEXT = "DiffText"
    END_OF_BUFFER = "EndOfBuffer"
    TERM_CURSOR = "TermCursor"
    TERM_CURSOR_NC = "TermCursorNC"
    ERROR_MSG = "ErrorMsg"
    WIN_SEPARATOR = "WinSeparator"
    FOLDED = "Folded"
    FOLD_COLUMN = "FoldColumn"
    SIGN_COLUMN = "SignColumn"
    INC_SEARCH = "IncSearch"
    SUBSTITUTE = "Substitute"
    LINE_NR = "LineNr"
    LINE_NR_ABOVE = "LineNrAbove"
    LINE_NR_BELOW = "LineNrBelow"
    CURSOR_LINE_NR = "CursorLineNr"
    CURSOR_LINE_FOLD = "CursorLineFold"
    CURSOR_LINE_SIGN = "CursorLineSign"
    MATCH_PAREN = "MatchParen"
    MODE_MSG = "ModeMsg"
    MSG_AREA = "MsgArea"
    MSG_SEPARATOR = "MsgSeparator"
    MORE_MSG = "MoreMsg"
    NON_TEXT = "NonText"
    NORMAL = "Normal"
    NORMAL_FLOAT = "NormalFloat"
    FLOAT_BORDER = "FloatBorder"
    FLOAT_TITLE = "FloatTitle"
    NORMAL_NC = "NormalNC"
    PMENU = "Pmenu"
    PMENU_SEL = "PmenuSel"
    PMENU_KIND = "PmenuKind"
    PMENU_KIND_SEL = "PmenuKindSel"
    PMENU_EXTRA = "PmenuExtra"
    PMENU_EXTRA_SEL = "PmenuExtraSel"
    PMENU_SBAR = "PmenuSbar"
    PMENU_THUMB = "PmenuThumb"
    QUESTION = "Question"
    QUICK_FIX_LINE = "QuickFixLine"
    SEARCH = "Search"
    SPECIAL_KEY = "SpecialKey"
    SPELL_BAD = "SpellBad"
    SPELL_CAP = "SpellCap"
    SPELL_LOCAL = "SpellLocal"
    SPELL_RARE = "SpellRare"
    STATUS_LINE = "StatusLine"
    STATUS_LINE_NC = "StatusLineNC"
    TAB_LINE = "TabLine"
    TAB_LINE_FILL = "TabLineFill"
    TAB_LINE_SEL = "TabLineSel"
    TITLE = "Title"
    VISUAL = "Visual"
    VISUAL_NOS = "VisualNOS"
    WARNING_MSG = "WarningMsg"
    WHITESPACE = "WhiteSpace"
    WILD_MENU = "WildMenu"
    WIN_BAR = "WinBar"
    WIN_BAR_NC = "WinBarNC"
    # Syntax
    BOOLEAN = "Boolean"
    CHARACTER = "Character"
    COMMENT = "Comment"
    CONDITIONAL = "Conditional"
    CONSTANT = "Constant"
    DEBUG = "Debug"
    DEFINE = "Define"
    DELIMITER = "Delimiter"
    ERROR = "Error"
    EXCEPTION = "Exception"
    FLOAT = "Float"
    FUNCTION = "Function"
    IDENTIFIER = "Identifier"
    INCLUDE = "Include"
    KEYWORD = "Keyword"
    LABEL = "Label"
    MACRO = "Macro"
    NUMBER = "Number"
    OPERATOR = "Operator"
    PRE_CONDIT = "PreCondit"
    PRE_PROC = "PreProc"
    REPEAT = "Repeat"
    SPECIAL = "Special"
    SPECIAL_CHAR = "SpecialChar"
    SPECIAL_COMMENT = "SpecialComment"
    STATEMENT = "Statement"
    STORAGE_CLASS = "StorageClass"
    STRING = "String"
    STRUCTURE = "Structure"
    TAG = "Tag"
    TODO = "Todo"
    TYPE = "Type"
    TYPEDEF = "Typedef"
    UNDERLINED = "Underlined"
    # Diagnostics that are not tied to a severity
    DIAGNOSTIC_DEPRECATED = "DiagnosticDeprecated"
    DIAGNOSTIC_UNNECESSARY = "DiagnosticUnnecessary"


class LspType(_RenderedEnum):
    """LSP semantic token types."""

    CLASS = "class"
    DECORATOR = "decorator"
    DERIVE = "derive"
    ENUM = "enum"
    ENUM_MEMBER = "enumMember"
    FUNCTION = "function"
    INTERFACE = "interface"
    KEYWORD = "keyword"
    MACRO = "macro"
    METHOD = "method"
    NAMESPACE = "namespace"
    PARAMETER = "parameter"
    PROPERTY = "property"
    STRUCT = "struct"
    TYPE = "type"
    TYPE_ALIAS = "typeAlias"
    TYPE_PARAMETER = "typeParameter"
    VARIABLE = "variable"


class LspModifier(_RenderedEnum):
    DEPRECATED = "deprecated"


class Language(_RenderedEnum):
    RUST = "rust"


@dataclass(frozen=True)
class LspHighlight:
    """``@lsp.*`` semantic token group.

    Selects a token type, a modifier, or both, optionally narrowed to one
    language.
    """

    lsp_type: Optional[LspType] = None
    modifier: Optional[LspModifier] = None
    language: Optional[Language] = None

    def __post_init__(self):
        if self.lsp_type is None and self.modifier is None:
            raise ValueError("LspHighlight needs a token type, a modifier, or both")

    def __str__(self):
        if self.modifier is None:
            selector = f"type.{self.lsp_type}"
        elif self.lsp_type is None:
            selector = f"mod.{self.modifier}"
        else:
            selector = f"typemod.{self.lsp_type}.{self.modifier}"
        suffix = f".{self.language}" if self.language is not None else ""
        return f"@lsp.{selector}{suffix}"


class DiagnosticUiKind(_RenderedEnum):
    VIRTUAL_TEXT = "VirtualText"
    UNDERLINE = "Underline"


_LEVEL_NAMES = {
    DiagnosticLevel.ERROR: "Error",
    DiagnosticLevel.WARNING: "Warn",
    DiagnosticLevel.INFO: "Info",
    DiagnosticLevel.HINT: "Hint",
}


@dataclass(frozen=True)
class DiagnosticGroup:
    """``Diagnostic{Kind}{Level}``; a plain severity group when kind is None."""

    level: DiagnosticLevel
    kind: Optional[DiagnosticUiKind] = None

    def __str__(self):
        kind = self.kind.value if self.kind is not None else ""
        return f"Diagnostic{kind}{_LEVEL_NAMES[self.level]}"


class MarkdownGroup(_RenderedEnum):
    CODE = "markdownCode"
    CODE_BLOCK = "markdownCodeBlock"
    H1 = "markdownH1"
    H2 = "markdownH2"
    HEADING_DELIMITER = "markdownHeadingDelimiter"
    LINK_TEXT = "markdownLinkText"


class CompletionGroup(_RenderedEnum):
    """nvim-cmp groups."""

    ABBR_MATCH = "CmpItemAbbrMatch"
    ABBR_MATCH_FUZZY = "CmpItemAbbrMatchFuzzy"


@dataclass(frozen=True)
class CompletionKind:
    """nvim-cmp item kind group, one per LSP type."""

    lsp_type: LspType

    def __str__(self):
        name = self.lsp_type.value
        return f"CmpItemKind{name[:1].upper()}{name[1:]}"


class FinderGroup(_RenderedEnum):
    """Telescope groups."""

    BORDER = "TelescopeBorder"
    TITLE = "TelescopeTitle"


def lsp(lsp_type):
    """Shorthand for the language-independent ``@lsp.type.*`` group."""
    return LspHighlight(lsp_type=lsp_type)

"""Semantic roles a theme assigns colors to."""

from enum import Enum


class Category(Enum):
    """Editor UI roles."""

    ACTIVE_SEARCH_MATCH = "ActiveSearchMatch"
    ACTIVE_TAB = "ActiveTab"
    ACTIVE_TAB_BACKGROUND = "ActiveTabBackground"
    BAD_SPELLING = "BadSpelling"
    COLUMN_GUIDE = "ColumnGuide"
    CURSOR_LINE = "CursorLine"
    CURSOR_LINE_NUMBER = "CursorLineNumber"
    DIFF_ADD = "DiffAdd"
    DIFF_CHANGE = "DiffChange"
    DIFF_DELETE = "DiffDelete"
    DIFF_TEXT = "DiffText"
    FOLDED = "Folded"
    INACTIVE_TAB = "InactiveTab"
    INACTIVE_TAB_BACKGROUND = "InactiveTabBackground"
    LINE_NUMBER = "LineNumber"
    MATCHED_BRACKET = "MatchedBracket"
    MESSAGE_SEPARATOR = "MessageSeparator"
    MODE_MESSAGE = "ModeMessage"
    NON_TEXT = "NonText"
    NORMAL = "Normal"
    NORMAL_BACKGROUND = "NormalBackground"
    QUESTION = "Question"
    SEARCH = "Search"
    SEARCH_MATCH = "SearchMatch"
    SELECTION = "Selection"
    SPECIAL = "Special"
    STATUS_LINE = "StatusLine"
    TERM_CURSOR = "TermCursor"
    UNFOCUSED_TERM_CURSOR = "UnfocusedTermCursor"
    WHITESPACE = "Whitespace"


class Token(Enum):
    """Syntax roles."""

    ATTRIBUTE = "Attribute"
    BOOLEAN = "Boolean"
    CHARACTER = "Character"
    COMMENT = "Comment"
    CONSTANT = "Constant"
    CONST_GENERIC_PARAMETER = "ConstGenericParameter"
    DELIMITER = "Delimiter"
    DOC_COMMENT = "DocComment"
    ENUM = "Enum"
    FIELD = "Field"
    FLOAT = "Float"
    FUNCTION = "Function"
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    INTERFACE = "Interface"
    KEYWORD = "Keyword"
    LINK = "Link"
    MACRO = "Macro"
    MODULE = "Module"
    OPERATOR = "Operator"
    PARAMETER = "Parameter"
    STATIC = "Static"
    STRING = "String"
    STRUCT = "Struct"
    TAG = "Tag"
    TODO = "Todo"
    TYPE = "Type"
    TYPE_PARAMETER = "TypeParameter"
    VARIABLE = "Variable"
    VARIANT = "Variant"


class DiagnosticLevel(Enum):
    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    HINT = "Hint"

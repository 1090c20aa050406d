"""Sparse visual attributes of a highlight group.

An attribute left as None is not emitted at all, so the editor's own
default applies. ``reverse`` has no unset state.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .color import Color


class UnderlineStyle(Enum):
    SINGLE = "single"
    DOUBLE = "double"
    CURLY = "curly"
    DOTTED = "dotted"
    DASHED = "dashed"


@dataclass(frozen=True)
class Style:
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    special: Optional[Color] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    strikethrough: Optional[bool] = None
    underline: Optional[UnderlineStyle] = None
    reverse: bool = False

    @classmethod
    def reversed(cls):
        return cls(reverse=True)

    def with_foreground(self, color):
        return replace(self, foreground=color)

    def no_foreground(self):
        return replace(self, foreground=None)

    def with_background(self, color):
        return replace(self, background=color)

    def no_background(self):
        return replace(self, background=None)

    def with_special(self, color):
        return replace(self, special=color)

    def no_special(self):
        return replace(self, special=None)

    def with_bold(self, bold=True):
        return replace(self, bold=bold)

    def with_italic(self, italic=True):
        return replace(self, italic=italic)

    def with_strikethrough(self, strikethrough=True):
        return replace(self, strikethrough=strikethrough)

    def with_reverse(self, reverse=True):
        return replace(self, reverse=reverse)

    def with_underline(self, kind):
        return replace(self, underline=kind)

    def no_underline(self):
        return replace(self, underline=None)

    def underlined(self):
        return self.with_underline(UnderlineStyle.SINGLE)

    def double_underline(self):
        return self.with_underline(UnderlineStyle.DOUBLE)

    def curly_underline(self):
        return self.with_underline(UnderlineStyle.CURLY)

    def dotted_underline(self):
        return self.with_underline(UnderlineStyle.DOTTED)

    def dashed_underline(self):
        return self.with_underline(UnderlineStyle.DASHED)

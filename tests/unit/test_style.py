"""Tests for the Style value type."""

import dataclasses

import pytest

from neovim_theme_generator.color import color_from_hex
from neovim_theme_generator.style import Style, UnderlineStyle

RED = color_from_hex("#ff0000")
BLUE = color_from_hex("#0000ff")


class TestStyle:
    def test_default_sets_nothing(self) -> None:
        style = Style()
        assert style.foreground is None
        assert style.background is None
        assert style.special is None
        assert style.bold is None
        assert style.italic is None
        assert style.strikethrough is None
        assert style.underline is None
        assert style.reverse is False

    def test_reversed_constructor(self) -> None:
        assert Style.reversed() == Style(reverse=True)

    def test_updates_return_new_values(self) -> None:
        base = Style()
        updated = base.with_foreground(RED)
        assert base.foreground is None
        assert updated.foreground == RED

    def test_update_order_does_not_matter(self) -> None:
        a = Style().with_foreground(RED).with_background(BLUE).with_bold()
        b = Style().with_bold().with_background(BLUE).with_foreground(RED)
        assert a == b
        assert hash(a) == hash(b)

    def test_clearing_restores_default(self) -> None:
        style = (
            Style()
            .with_foreground(RED)
            .with_background(BLUE)
            .with_special(RED)
            .curly_underline()
        )
        cleared = style.no_foreground().no_background().no_special().no_underline()
        assert cleared == Style()

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("underlined", UnderlineStyle.SINGLE),
            ("double_underline", UnderlineStyle.DOUBLE),
            ("curly_underline", UnderlineStyle.CURLY),
            ("dotted_underline", UnderlineStyle.DOTTED),
            ("dashed_underline", UnderlineStyle.DASHED),
        ],
    )
    def test_underline_shorthands(self, method: str, expected: UnderlineStyle) -> None:
        assert getattr(Style(), method)().underline is expected

    def test_last_underline_wins(self) -> None:
        assert Style().curly_underline().dotted_underline().underline is UnderlineStyle.DOTTED

    def test_false_is_distinct_from_unset(self) -> None:
        assert Style().with_italic(False) != Style()
        assert Style().with_italic(False).italic is False

    def test_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Style().bold = True

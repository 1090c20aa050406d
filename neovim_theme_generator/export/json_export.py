import json

from ..categories import Category, DiagnosticLevel, Token
from ..output import write_atomic


def palette_to_dict(theme, theme_name=None):
    """Resolve every semantic role of a theme to a hex string.

    Args:
        theme: The Theme to resolve
        theme_name: Registered theme name for metadata

    Returns:
        dict with "categories", "tokens" and "diagnostics" sections, keyed by
        role name in definition order
    """
    data = {}
    if theme_name:
        data["_theme"] = theme_name

    data["categories"] = {c.value: theme.category_color(c).hex for c in Category}
    data["tokens"] = {t.value: theme.token_color(t).hex for t in Token}
    data["diagnostics"] = {
        level.value: theme.diagnostic_level_color(level).hex
        for level in DiagnosticLevel
    }
    return data


def export_json(theme, filepath, theme_name=None):
    """Export the resolved semantic palette of a theme as JSON.

    Args:
        theme: The Theme to resolve
        filepath: Output file path
        theme_name: Registered theme name for metadata
    """
    data = palette_to_dict(theme, theme_name=theme_name)
    write_atomic(filepath, json.dumps(data, indent=2) + "\n")

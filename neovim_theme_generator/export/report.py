import sys

from ..categories import Category, DiagnosticLevel, Token
from ..color import contrast_ratio

# Contrast requirements
MIN_TEXT_CONTRAST = 4.5  # Normal text and syntax tokens against the background
MIN_DIM_CONTRAST = 3.0  # Comments, line numbers and other secondary text

# Roles that are meant to be low contrast
DIM_CATEGORIES = {
    Category.INACTIVE_TAB,
    Category.LINE_NUMBER,
    Category.NON_TEXT,
    Category.WHITESPACE,
}
DIM_TOKENS = {Token.COMMENT, Token.DOC_COMMENT}

# Categories used as backgrounds; contrast against the editor background
# is meaningless for them
BACKGROUND_CATEGORIES = {
    Category.ACTIVE_TAB_BACKGROUND,
    Category.COLUMN_GUIDE,
    Category.CURSOR_LINE,
    Category.DIFF_ADD,
    Category.DIFF_CHANGE,
    Category.DIFF_DELETE,
    Category.DIFF_TEXT,
    Category.FOLDED,
    Category.INACTIVE_TAB_BACKGROUND,
    Category.NORMAL_BACKGROUND,
    Category.SEARCH_MATCH,
    Category.ACTIVE_SEARCH_MATCH,
    Category.SELECTION,
    Category.STATUS_LINE,
    Category.TERM_CURSOR,
    Category.UNFOCUSED_TERM_CURSOR,
}


def print_palette(theme, theme_name, file=None):
    """Print every resolved role with its contrast against the background."""
    file = file or sys.stdout
    bg = theme.category_color(Category.NORMAL_BACKGROUND)

    def line(name, color):
        contrast = contrast_ratio(color.luminance, bg.luminance)
        print(f"  {name:22} {color.hex}  (contrast: {contrast:.1f}:1)", file=file)

    print("\n" + "=" * 60, file=file)
    print(f"RESOLVED PALETTE ({theme_name})", file=file)
    print("=" * 60, file=file)

    print("\nCATEGORIES:", file=file)
    for category in Category:
        line(category.value, theme.category_color(category))

    print("\nTOKENS:", file=file)
    for token in Token:
        line(token.value, theme.token_color(token))

    print("\nDIAGNOSTICS:", file=file)
    for level in DiagnosticLevel:
        line(level.value, theme.diagnostic_level_color(level))


def generate_readability_report(theme):
    """Check foreground roles against the editor background.

    Returns:
        tuple: (report text, list of (role name, contrast, required) failures)
    """
    bg = theme.category_color(Category.NORMAL_BACKGROUND)
    issues = []
    report = ["READABILITY REPORT", "=" * 60]

    checks = []
    for category in Category:
        if category in BACKGROUND_CATEGORIES:
            continue
        required = MIN_DIM_CONTRAST if category in DIM_CATEGORIES else MIN_TEXT_CONTRAST
        checks.append((f"category.{category.value}", theme.category_color(category), required))
    for token in Token:
        required = MIN_DIM_CONTRAST if token in DIM_TOKENS else MIN_TEXT_CONTRAST
        checks.append((f"token.{token.value}", theme.token_color(token), required))
    for level in DiagnosticLevel:
        checks.append(
            (f"diagnostic.{level.value}", theme.diagnostic_level_color(level), MIN_DIM_CONTRAST)
        )

    for name, color, required in checks:
        contrast = contrast_ratio(color.luminance, bg.luminance)
        status = "OK" if contrast >= required else "LOW"
        report.append(f"  {status:4} {name:34} {contrast:5.2f}:1 (min {required}:1)")
        if contrast < required:
            issues.append((name, contrast, required))

    report.append("")
    if issues:
        report.append(f"{len(issues)} role(s) below the minimum contrast")
    else:
        report.append("All roles meet the minimum contrast")

    return "\n".join(report), issues

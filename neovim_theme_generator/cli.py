import argparse
import logging
import sys

from .errors import setup_logging
from .export import export_json, generate_readability_report, print_palette
from .neovim import NeovimTheme
from .output import write_atomic
from .themes import DEFAULT_THEME, get_theme, theme_names

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="neovim-theme-generator",
        description="Generate a Neovim colorscheme Lua module from a built-in palette",
    )
    parser.add_argument(
        "--theme",
        choices=theme_names(),
        default=DEFAULT_THEME,
        help=f"Theme to generate (default: {DEFAULT_THEME})",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Write the Lua module to FILE instead of standard output",
    )
    parser.add_argument(
        "--palette-json",
        metavar="FILE",
        default=None,
        help="Also export the resolved category/token/diagnostic colors as JSON",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print the resolved palette and a readability report",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available themes and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.verbose)

    if args.list:
        for name in theme_names():
            print(name)
        return 0

    _run(args)
    return 0


def _run(args):
    """Resolve the selected theme and write every requested artifact."""
    theme = get_theme(args.theme)
    logger.debug("Selected theme %s: %r", args.theme, theme)

    # Status output goes to stderr whenever stdout carries the Lua module
    status = sys.stdout if args.output else sys.stderr

    neovim_theme = NeovimTheme(theme)
    lua = neovim_theme.to_lua_module()

    if args.report:
        print_palette(theme, args.theme, file=status)
        report, _issues = generate_readability_report(theme)
        print("\n" + report, file=status)

    if args.output:
        write_atomic(args.output, lua)
    else:
        sys.stdout.write(lua)
        sys.stdout.flush()

    if args.palette_json:
        export_json(theme, args.palette_json, theme_name=args.theme)

    if args.output or args.palette_json:
        print("\n" + "=" * 60, file=status)
        print("Exported:", file=status)
        if args.output:
            print(f"  - {args.output} ({len(neovim_theme)} highlight groups)", file=status)
        if args.palette_json:
            print(f"  - {args.palette_json}", file=status)
        print("=" * 60, file=status)


if __name__ == "__main__":
    sys.exit(main())

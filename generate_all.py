#!/usr/bin/env python3
"""
Generate every registered theme.
Writes <theme>.lua and <theme>.json into out/themes/ (or --output).
"""

import argparse
from pathlib import Path

from neovim_theme_generator.output import write_atomic
from neovim_theme_generator.errors import setup_logging
from neovim_theme_generator.export import export_json
from neovim_theme_generator.neovim import generate_neovim_theme
from neovim_theme_generator.themes import get_theme, theme_names


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate all registered Neovim themes"
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: out/themes next to this script)",
    )
    args = parser.parse_args(argv)

    setup_logging()

    root = Path(__file__).parent
    themes_dir = Path(args.output) if args.output else root / "out" / "themes"
    themes_dir.mkdir(parents=True, exist_ok=True)

    names = theme_names()
    print(f"Found {len(names)} themes to generate\n")

    for name in names:
        print(f"{'=' * 60}")
        print(f"Generating: {name}")
        print(f"{'=' * 60}")

        theme = get_theme(name)
        lua_path = themes_dir / f"{name}.lua"
        json_path = themes_dir / f"{name}.json"

        write_atomic(lua_path, generate_neovim_theme(theme))
        export_json(theme, json_path, theme_name=name)

        print(f"Wrote {lua_path.name} and {json_path.name} to {themes_dir}")
        print()

    print(f"{'=' * 60}")
    print("Done! All themes written to:")
    print(f"  {themes_dir}")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
🎨 PNGN Palette 256 - Swatch Browser Example
============================================
Copyright (c) 2025 PNGN-Tec LLC
"""

import argparse
import logging
import sys
from typing import List, Optional

from pngn_config import get_config
from pngn_palette import Reset, TextStyle, strip_sequences
from pngn_families import Family, PaletteView, fg, bg
from pngn_color import Color
from pngn_match import match_rgb, get_default_stats
from pngn_image import image_to_ansi

SWATCH = '  '
BLOCK = '██'
NAME_WIDTH = 24


def family_rows(family: Family, width: int = NAME_WIDTH) -> List[str]:
    rows = []
    header = f"{TextStyle.BOLD}{family.group}.{family.name}{Reset.BOLD} ({len(family)} colors)"
    rows.append(header)

    cell = SWATCH if family.background else BLOCK
    strip = ''.join(color.sequence() + cell for color in family) + Reset.ALL
    rows.append(strip)

    for alias, index in family.aliases.items():
        swatch = Color(index, background=True).sequence() + SWATCH + Reset.ALL
        label = alias.ljust(width)
        rows.append(f"  {swatch} {label}{index:>3}")
    return rows


def print_view(view: PaletteView, only: Optional[str] = None):
    families = [view.family(only)] if only else list(view.families())
    for family in families:
        for row in family_rows(family):
            print(row)
        print()


def print_match(r: int, g: int, b: int):
    index = match_rgb(r, g, b)
    color = Color(index, background=True)
    line = f"rgb({r}, {g}, {b}) -> {index:>3} {color.sequence()}{SWATCH * 3}{Reset.ALL} reference {color.rgb}"
    print(line)
    print(f"  printable width: {len(strip_sequences(line))}")


def main():
    parser = argparse.ArgumentParser(description='PNGN 256-color palette swatches')
    parser.add_argument('--family', type=str, default=None,
                        help='Only show one family (e.g. Red, Shades)')
    parser.add_argument('--rgb', type=int, nargs=3, metavar=('R', 'G', 'B'),
                        action='append', help='Match an RGB triple (repeatable)')
    parser.add_argument('--image', type=str, default=None,
                        help='Render an image file with the palette')
    parser.add_argument('--width', type=int, default=60)
    parser.add_argument('--background', action='store_true',
                        help='Use background swatches for family strips')
    args = parser.parse_args()

    config = get_config()
    logging.basicConfig(level=logging.DEBUG if config.debug_mode else config.log_level)

    print("🎨 PNGN Palette 256")
    print("=" * 60)

    if args.image:
        try:
            print(image_to_ansi(args.image, max_width_chars=args.width))
        except FileNotFoundError:
            print(f"Image not found: {args.image}", file=sys.stderr)
            return 1
    elif args.rgb:
        for r, g, b in args.rgb:
            try:
                print_match(r, g, b)
            except ValueError as e:
                print(f"Invalid color: {e}", file=sys.stderr)
                return 1
        stats = get_default_stats()
        print(f"\nMatcher: {stats['matches']} matches, "
              f"hit rate {stats['cache_hit_rate']:.0%}")
    else:
        try:
            print_view(bg if args.background else fg, args.family)
        except KeyError as e:
            print(e.args[0], file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
🐧 PNGN Palette 256 - Palette Table Module
==========================================
Copyright (c) 2025 PNGN-Tec LLC

Palette Data
============
Precomputed escape sequences and reference colors for the 256-entry
terminal palette:
- Standard colors (indices 0-15): the classic 16-color table
- Color cube (indices 16-231): 6x6x6 quantized RGB
- Grayscale ramp (indices 232-255): 24 evenly spaced grays

Each entry carries its foreground sequence (ESC[38;5;<n>m), background
sequence (ESC[48;5;<n>m) and the RGB triple the matcher compares against.
All tables are built once at import and never mutated.

Text Attributes
===============
TextStyle and Reset hold the fixed SGR attribute sequences (bold, italic,
underline, ...) and their "off" counterparts.

Example Usage
=============
```python
from pngn_palette import sequence, Reset, TextStyle

print(sequence(196) + TextStyle.BOLD + "alert" + Reset.ALL)
print(sequence(21, background=True) + "  " + Reset.BG_COLOR)
```
"""

import re
from dataclasses import dataclass
from typing import Tuple

# Type alias for RGB colors
RGBColor = Tuple[int, int, int]

ESC = "\033"

PALETTE_SIZE = 256
STANDARD_COLOR_COUNT = 16
CUBE_START = 16
GRAYSCALE_START = 232

# ============================================================================
# REFERENCE COLOR TABLES
# ============================================================================

# Classic low-color palette, indices 0-15
STANDARD_16_RGB: Tuple[RGBColor, ...] = (
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
)

# Channel values of the 6 cube levels
CUBE_LEVELS: Tuple[int, ...] = (0, 95, 135, 175, 215, 255)

GRAYSCALE_BASE = 8
GRAYSCALE_STEP = 10
GRAYSCALE_STEPS = 24


# ============================================================================
# PALETTE ENTRIES
# ============================================================================

@dataclass(frozen=True)
class PaletteEntry:
    """
    One of the 256 palette slots.

    Attributes:
        index: Palette index (0-255)
        rgb: Reference RGB triple used for distance comparisons
        foreground: Foreground escape sequence
        background: Background escape sequence
        region: 'standard', 'cube' or 'grayscale'
    """

    index: int
    rgb: RGBColor
    foreground: str
    background: str
    region: str


def palette_region(index: int) -> str:
    """Name the palette partition an index belongs to"""
    if index < CUBE_START:
        return 'standard'
    if index < GRAYSCALE_START:
        return 'cube'
    return 'grayscale'


def _reference_rgb(index: int) -> RGBColor:
    if index < CUBE_START:
        return STANDARD_16_RGB[index]
    if index < GRAYSCALE_START:
        offset = index - CUBE_START
        return (CUBE_LEVELS[offset // 36],
                CUBE_LEVELS[(offset // 6) % 6],
                CUBE_LEVELS[offset % 6])
    gray = GRAYSCALE_BASE + (index - GRAYSCALE_START) * GRAYSCALE_STEP
    return (gray, gray, gray)


FG_SEQUENCES: Tuple[str, ...] = tuple(f"{ESC}[38;5;{i}m" for i in range(PALETTE_SIZE))
BG_SEQUENCES: Tuple[str, ...] = tuple(f"{ESC}[48;5;{i}m" for i in range(PALETTE_SIZE))

PALETTE_256: Tuple[PaletteEntry, ...] = tuple(
    PaletteEntry(
        index=i,
        rgb=_reference_rgb(i),
        foreground=FG_SEQUENCES[i],
        background=BG_SEQUENCES[i],
        region=palette_region(i),
    )
    for i in range(PALETTE_SIZE)
)


def sequence(index: int, background: bool = False) -> str:
    """
    Look up the escape sequence for a palette index.

    The index is not re-validated here; Color guarantees the range.

    Args:
        index: Palette index (0-255)
        background: Return the background sequence instead of foreground

    Returns:
        ESC[48;5;<n>m when background, otherwise ESC[38;5;<n>m
    """
    return BG_SEQUENCES[index] if background else FG_SEQUENCES[index]


def palette_rgb(index: int) -> RGBColor:
    """Reference RGB triple for a palette index"""
    return PALETTE_256[index].rgb


# ============================================================================
# TEXT ATTRIBUTES
# ============================================================================

class TextStyle:
    """SGR sequences that switch a text attribute on"""

    BOLD = f"{ESC}[1m"
    FAINT = f"{ESC}[2m"
    ITALIC = f"{ESC}[3m"
    UNDERLINE = f"{ESC}[4m"
    BLINK = f"{ESC}[5m"
    INVERSE = f"{ESC}[7m"
    HIDDEN = f"{ESC}[8m"
    STRIKETHROUGH = f"{ESC}[9m"


class Reset:
    """SGR sequences that restore default attributes"""

    ALL = f"{ESC}[0m"
    FG_COLOR = f"{ESC}[39m"
    BG_COLOR = f"{ESC}[49m"

    # Bold and faint share the same "normal intensity" code
    BOLD = f"{ESC}[22m"
    FAINT = f"{ESC}[22m"
    ITALIC = f"{ESC}[23m"
    UNDERLINE = f"{ESC}[24m"
    BLINK = f"{ESC}[25m"
    INVERSE = f"{ESC}[27m"
    HIDDEN = f"{ESC}[28m"
    STRIKETHROUGH = f"{ESC}[29m"


BACK_TO_DEFAULT = Reset.ALL

SGR_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def strip_sequences(text: str) -> str:
    """Remove SGR escape sequences, leaving only printable text"""
    return SGR_PATTERN.sub('', text)

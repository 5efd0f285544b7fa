#!/usr/bin/env python3
"""
🐧 PNGN Palette 256 - Color Handle Module
=========================================
Copyright (c) 2025 PNGN-Tec LLC

Color Handles
=============
A Color pairs a palette index with a display mode (foreground or
background) and produces its escape sequence by table lookup. Handles
are immutable, hashable and compare equal when index and mode match.

Construction from a raw integer validates the 0-255 range and raises
IndexOutOfRange otherwise. Handles produced by the family accessors in
pngn_families are valid by construction.

Example Usage
=============
```python
from pngn_color import Color

warn = Color(208)
print(warn.paint("disk almost full"))
print(Color(236, background=True).sequence() + " panel ")
Color.from_rgb(255, 128, 0).index    # 208
```
"""

import operator
from dataclasses import dataclass
from typing import Optional, Tuple

from pngn_palette import sequence, palette_rgb, Reset, RGBColor, PALETTE_SIZE
from pngn_config import get_output_config
from pngn_match import rgb_to_ansi256


class IndexOutOfRange(IndexError):
    """
    Raised for a palette index or family position outside its valid range.

    Attributes:
        family: Name of the family (or 'Color' for raw palette indices)
        position: The rejected index or position
        valid_range: Inclusive (low, high) bounds
        accessor: Expression that was evaluated, e.g. 'PrimaryColors.Red[12]'
    """

    def __init__(self, family: str, position: int, valid_range: Tuple[int, int],
                 accessor: Optional[str] = None):
        self.family = family
        self.position = position
        self.valid_range = valid_range
        self.accessor = accessor or f"{family}({position})"
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        low, high = self.valid_range
        if self.position < low and low == 1:
            detail = ("indexing starts at 1 (corresponding to the first color "
                      "of the family)")
        elif self.position < low:
            detail = f"index is below the valid range ({low} - {high})"
        else:
            detail = f"index exceeds the available color range ({low} - {high})"
        return f"Illegal index in '{self.accessor}': {detail}"


@dataclass(frozen=True)
class Color:
    """
    A palette index bound to foreground or background use.

    Attributes:
        index: Palette index (0-255)
        background: True for background use, False for foreground
    """

    index: int
    background: bool = False

    def __post_init__(self):
        if isinstance(self.index, bool):
            raise TypeError("Palette index must be an integer, got bool")
        try:
            index = operator.index(self.index)
        except TypeError:
            raise TypeError(f"Palette index must be an integer, got "
                            f"{type(self.index).__name__}") from None
        if not 0 <= index < PALETTE_SIZE:
            raise IndexOutOfRange('Color', index, (0, PALETTE_SIZE - 1))
        object.__setattr__(self, 'index', index)
        object.__setattr__(self, 'background', bool(self.background))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, background: bool = False) -> "Color":
        """Handle for the palette entry nearest to an RGB triple"""
        return cls(rgb_to_ansi256(r, g, b), background)

    def sequence(self) -> str:
        """Escape sequence selecting this color"""
        return sequence(self.index, self.background)

    def is_background(self) -> bool:
        return self.background

    @property
    def rgb(self) -> RGBColor:
        """Reference RGB triple of the palette entry"""
        return palette_rgb(self.index)

    def as_background(self) -> "Color":
        return Color(self.index, True)

    def as_foreground(self) -> "Color":
        return Color(self.index, False)

    def escape(self, reset_first: Optional[bool] = None) -> str:
        """
        Escape sequence as written to a stream.

        Args:
            reset_first: Prefix the matching ESC[39m / ESC[49m reset
                (uses OutputConfig.reset_before_color if None)
        """
        if reset_first is None:
            reset_first = get_output_config().reset_before_color
        if not reset_first:
            return self.sequence()
        reset = Reset.BG_COLOR if self.background else Reset.FG_COLOR
        return reset + self.sequence()

    def paint(self, text: str) -> str:
        """
        Wrap text in this color followed by a full reset.

        Returns the text unchanged when color output is disabled.
        """
        if not get_output_config().enable_color:
            return text
        return f"{self.escape()}{text}{Reset.ALL}"

    def __str__(self) -> str:
        return self.sequence()

    def __int__(self) -> int:
        return self.index

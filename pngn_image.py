#!/usr/bin/env python3
"""
🐧 PNGN Palette 256 - Image Rendering Module
============================================
Copyright (c) 2025 PNGN-Tec LLC

Half-Block Image Rendering
==========================
Renders a Pillow image as 256-color terminal art. Each character cell
shows two vertically stacked pixels using the upper half block glyph:
the upper pixel becomes the foreground color, the lower pixel the
background color. Pixels are mapped to palette indices in one pass with
the vectorized matcher.

- Scales to at most max_width_chars columns (LANCZOS)
- Compensates for tall terminal cells via char_aspect_ratio
- Pads to an even pixel height by repeating the last row
- Emits escape sequences only when a cell's colors change
- Ends every line with a full reset

Example Usage
=============
```python
from pngn_image import image_to_ansi

print(image_to_ansi("logo.png", max_width_chars=60))
```
"""

import logging
from typing import List, Optional, Union
from pathlib import Path

import numpy as np
from PIL import Image

from pngn_palette import FG_SEQUENCES, BG_SEQUENCES, Reset
from pngn_match import PaletteMatcher, get_matcher

# Configure logging
logger = logging.getLogger('pngn_image')

HALF_BLOCK = '▀'

ImageSource = Union[str, Path, Image.Image]


def _load_rgb(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source.convert("RGB")
    with Image.open(source) as img:
        return img.convert("RGB")


def _target_size(width: int, height: int, max_width_chars: int,
                 char_aspect_ratio: float) -> tuple:
    target_width = min(width, max_width_chars)
    scale = target_width / width
    # Two pixel rows per cell; cells are 1/char_aspect_ratio times taller than wide
    target_height = max(2, round(height * scale * char_aspect_ratio * 2))
    return target_width, target_height


def image_to_ansi_lines(source: ImageSource,
                        max_width_chars: int = 80,
                        char_aspect_ratio: float = 0.5,
                        matcher: Optional[PaletteMatcher] = None) -> List[str]:
    """
    Render an image as lines of 256-color half-block art.

    Args:
        source: Image path or PIL image
        max_width_chars: Maximum output width in columns
        char_aspect_ratio: Width / height ratio of a terminal cell
        matcher: Matcher used for pixel conversion (default matcher if None)

    Returns:
        One string per terminal row, each ending with a reset

    Raises:
        FileNotFoundError: If the image path does not exist
        ValueError: If max_width_chars or char_aspect_ratio is not positive
    """
    if max_width_chars <= 0:
        raise ValueError("max_width_chars must be positive")
    if char_aspect_ratio <= 0:
        raise ValueError("char_aspect_ratio must be positive")

    img = _load_rgb(source)
    size = _target_size(img.width, img.height, max_width_chars, char_aspect_ratio)
    if size != img.size:
        img = img.resize(size, Image.Resampling.LANCZOS)

    pixels = np.asarray(img, dtype=np.uint8)
    if pixels.shape[0] % 2:
        pixels = np.concatenate([pixels, pixels[-1:]], axis=0)

    logger.debug(f"Rendering {pixels.shape[1]}x{pixels.shape[0]} pixels "
                 f"as {pixels.shape[1]}x{pixels.shape[0] // 2} cells")

    indices = (matcher or get_matcher()).match_array(pixels)
    top_rows = indices[0::2].tolist()
    bottom_rows = indices[1::2].tolist()

    lines = []
    for top_row, bottom_row in zip(top_rows, bottom_rows):
        parts = []
        last = None
        for top, bottom in zip(top_row, bottom_row):
            if (top, bottom) != last:
                parts.append(FG_SEQUENCES[top] + BG_SEQUENCES[bottom])
                last = (top, bottom)
            parts.append(HALF_BLOCK)
        parts.append(Reset.ALL)
        lines.append(''.join(parts))

    return lines


def image_to_ansi(source: ImageSource,
                  max_width_chars: int = 80,
                  char_aspect_ratio: float = 0.5,
                  matcher: Optional[PaletteMatcher] = None) -> str:
    """Render an image as a single newline-joined block of terminal art"""
    return '\n'.join(image_to_ansi_lines(source, max_width_chars,
                                         char_aspect_ratio, matcher))

#!/usr/bin/env python3
"""
🐧 PNGN Palette 256 - Nearest Color Matching Module
===================================================
Copyright (c) 2025 PNGN-Tec LLC

RGB to Palette Index Conversion
===============================
Maps any 8-bit RGB triple to a single index of the 256-color palette by
squared Euclidean distance over three candidate generators:

1. Standard colors (0-15): linear scan, first minimum wins
2. Color cube (16-231): per-channel quantization, 255 -> level 5,
   otherwise value // 51
3. Grayscale ramp (232-255): channel mean quantized in steps of 10,
   clamped to the 24 available steps

Candidates are compared with <= in fixed priority order: standard colors
win ties against the cube and the ramp, the cube wins ties against the
ramp. The result is deterministic, not a strict global minimum.

Technical Implementation
========================
- rgb_to_ansi256(): pure scalar function
- rgb_array_to_ansi256(): numpy-vectorized variant for pixel buffers
- PaletteMatcher: thread-safe LRU cache with statistics in front of the
  scalar function, sized by pngn_config and updated on config reloads

Example Usage
=============
```python
from pngn_match import rgb_to_ansi256, match_rgb

rgb_to_ansi256(255, 0, 0)      # 9, standard red wins the tie with 196
match_rgb(95, 0, 0)            # 52, cached lookup

import numpy as np
from pngn_match import rgb_array_to_ansi256
rgb_array_to_ansi256(np.zeros((2, 2, 3), dtype=np.uint8))
```
"""

import operator
import threading
import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union
from collections import OrderedDict

import numpy as np

from pngn_palette import (
    STANDARD_16_RGB, CUBE_LEVELS,
    CUBE_START, GRAYSCALE_START,
    GRAYSCALE_BASE, GRAYSCALE_STEP, GRAYSCALE_STEPS,
)
from pngn_config import (
    get_matcher_config, register_config_callback, unregister_config_callback,
)

# Configure logging
logger = logging.getLogger('pngn_match')

_LAST_STEP = GRAYSCALE_STEPS - 1

_STANDARD_16 = np.array(STANDARD_16_RGB, dtype=np.int32)
_CUBE_LEVELS = np.array(CUBE_LEVELS, dtype=np.int32)


# ============================================================================
# SCALAR MATCHER
# ============================================================================

def _channel(name: str, value) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} channel must be an integer, got {type(value).__name__}") from None
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be in 0-255, got {value}")
    return value


def _dist2(r1: int, g1: int, b1: int, r2: int, g2: int, b2: int) -> int:
    dr = r1 - r2
    dg = g1 - g2
    db = b1 - b2
    return dr * dr + dg * dg + db * db


def cube_level(value: int) -> int:
    """Quantize one channel to a cube level (0-5)"""
    return 5 if value == 255 else value // 51


def grayscale_step(mean: int) -> int:
    """
    Quantize a channel mean to a grayscale ramp step (0-23).

    Means below 8 use step 0, means above 248 use step 23. A mean of
    exactly 248 would give step 24 and is clamped to 23.
    """
    if mean < GRAYSCALE_BASE:
        return 0
    if mean > 248:
        return _LAST_STEP
    return min((mean - GRAYSCALE_BASE) // GRAYSCALE_STEP, _LAST_STEP)


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """
    Convert an RGB triple to the nearest 256-color palette index.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)

    Returns:
        Palette index (0-255)

    Raises:
        TypeError: If a channel is not an integer
        ValueError: If a channel is outside 0-255

    Examples:
        >>> rgb_to_ansi256(0, 0, 0)
        0
        >>> rgb_to_ansi256(95, 0, 0)
        52
        >>> rgb_to_ansi256(7, 7, 7)
        232
    """
    r = _channel('red', r)
    g = _channel('green', g)
    b = _channel('blue', b)

    best16 = 0
    best16d = None
    for i, (sr, sg, sb) in enumerate(STANDARD_16_RGB):
        d = _dist2(r, g, b, sr, sg, sb)
        if best16d is None or d < best16d:
            best16d = d
            best16 = i

    lr, lg, lb = cube_level(r), cube_level(g), cube_level(b)
    cube_index = CUBE_START + 36 * lr + 6 * lg + lb
    dc = _dist2(r, g, b, CUBE_LEVELS[lr], CUBE_LEVELS[lg], CUBE_LEVELS[lb])

    step = grayscale_step((r + g + b) // 3)
    gray = GRAYSCALE_BASE + step * GRAYSCALE_STEP
    dg = _dist2(r, g, b, gray, gray, gray)

    if best16d <= dc and best16d <= dg:
        return best16
    if dc <= dg:
        return cube_index
    return GRAYSCALE_START + step


# ============================================================================
# VECTORIZED MATCHER
# ============================================================================

def rgb_array_to_ansi256(pixels) -> np.ndarray:
    """
    Vectorized rgb_to_ansi256 over an integer array of shape (..., 3).

    Tie-breaking is identical to the scalar function: argmin keeps the
    first minimum of the standard scan, then standard, cube and grayscale
    candidates are compared with <= in that order.

    Args:
        pixels: Integer array-like whose last axis holds (r, g, b)

    Returns:
        uint8 array of palette indices with the leading shape of pixels
    """
    rgb = np.asarray(pixels)
    if rgb.ndim == 0 or rgb.shape[-1] != 3:
        raise ValueError(f"Expected an array of shape (..., 3), got {rgb.shape}")
    if rgb.size and not np.issubdtype(rgb.dtype, np.integer):
        raise TypeError(f"Pixel array must hold integers, got {rgb.dtype}")
    # Range check on the input dtype, before narrowing
    if rgb.size and (rgb.min() < 0 or rgb.max() > 255):
        raise ValueError("Pixel channels must be in 0-255")
    rgb = rgb.astype(np.int32)

    # Standard colors
    diff16 = rgb[..., np.newaxis, :] - _STANDARD_16
    d16 = (diff16 * diff16).sum(axis=-1)
    best16 = d16.argmin(axis=-1)
    best16d = d16.min(axis=-1)

    # Color cube
    levels = np.where(rgb == 255, 5, rgb // 51)
    cube_index = CUBE_START + 36 * levels[..., 0] + 6 * levels[..., 1] + levels[..., 2]
    diffc = rgb - _CUBE_LEVELS[levels]
    dc = (diffc * diffc).sum(axis=-1)

    # Grayscale ramp
    mean = rgb.sum(axis=-1) // 3
    step = np.minimum((mean - GRAYSCALE_BASE) // GRAYSCALE_STEP, _LAST_STEP)
    step = np.where(mean < GRAYSCALE_BASE, 0, step)
    step = np.where(mean > 248, _LAST_STEP, step)
    gray = GRAYSCALE_BASE + step * GRAYSCALE_STEP
    diffg = rgb - gray[..., np.newaxis]
    dg = (diffg * diffg).sum(axis=-1)

    result = np.where(
        (best16d <= dc) & (best16d <= dg),
        best16,
        np.where(dc <= dg, cube_index, GRAYSCALE_START + step),
    )
    return result.astype(np.uint8)


# ============================================================================
# CACHED MATCHER
# ============================================================================

class PaletteMatcher:
    """
    Thread-safe RGB matcher with caching.

    Wraps rgb_to_ansi256() with an LRU cache keyed by (r, g, b). Cache
    size and the caching switch come from pngn_config unless given, and
    follow configuration reloads.

    Attributes:
        stats: Dictionary containing match statistics
    """

    def __init__(self,
                 cache_size: Optional[int] = None,
                 enable_cache: Optional[bool] = None,
                 follow_config: bool = True):
        """
        Initialize matcher.

        Args:
            cache_size: Maximum number of cached triples (uses config if None)
            enable_cache: Whether to cache lookups (uses config if None)
            follow_config: Update cache settings when the configuration reloads
        """
        matcher_config = get_matcher_config()
        if cache_size is None:
            cache_size = matcher_config.cache_size
        if enable_cache is None:
            enable_cache = matcher_config.enable_caching
        if cache_size <= 0:
            raise ValueError("Matcher cache size must be positive")

        self._cache: "OrderedDict[Tuple[int, int, int], int]" = OrderedDict()
        self._cache_size = cache_size
        self._cache_enabled = enable_cache
        self._lock = threading.Lock()

        self.stats = {
            'cache_hits': 0,
            'cache_misses': 0,
            'matches': 0,
            'cache_evictions': 0,
            'vectorized_pixels': 0,
        }

        self._follows_config = follow_config
        if follow_config:
            register_config_callback(self._on_config_change)

        logger.info(f"PaletteMatcher initialized with cache_size={cache_size}, "
                    f"cache_enabled={enable_cache}")

    def _on_config_change(self, old_config, new_config):
        """Handle configuration changes"""
        matcher_config = new_config.matcher
        with self._lock:
            self._cache_size = matcher_config.cache_size
            self._cache_enabled = matcher_config.enable_caching
            if not self._cache_enabled:
                self._cache.clear()
            self._enforce_cache_limits()

        logger.info(f"Matcher configuration updated: size={self._cache_size}, "
                    f"cache_enabled={self._cache_enabled}")

    def match(self, r: int, g: int, b: int) -> int:
        """
        Nearest palette index for one RGB triple.

        Args:
            r: Red channel (0-255)
            g: Green channel (0-255)
            b: Blue channel (0-255)

        Returns:
            Palette index (0-255)
        """
        key = (_channel('red', r), _channel('green', g), _channel('blue', b))

        if self._cache_enabled:
            with self._lock:
                cached = self._cache.get(key)
                if cached is not None:
                    self._cache.move_to_end(key)
                    self.stats['cache_hits'] += 1
                    return cached
                self.stats['cache_misses'] += 1

        index = rgb_to_ansi256(*key)

        with self._lock:
            self.stats['matches'] += 1
            if self._cache_enabled:
                self._cache[key] = index
                self._enforce_cache_limits()

        return index

    def match_many(self, colors: Iterable[Tuple[int, int, int]]) -> List[int]:
        """
        Match several RGB triples.

        Args:
            colors: Iterable of (r, g, b) tuples

        Returns:
            List of palette indices
        """
        return [self.match(r, g, b) for r, g, b in colors]

    def match_array(self, pixels) -> np.ndarray:
        """
        Match a pixel buffer with the vectorized matcher (no caching).

        Args:
            pixels: Integer array of shape (..., 3)

        Returns:
            uint8 array of palette indices
        """
        result = rgb_array_to_ansi256(pixels)
        with self._lock:
            self.stats['vectorized_pixels'] += int(result.size)
        return result

    def _enforce_cache_limits(self):
        """Evict least recently used entries beyond the size limit"""
        while len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)
            self.stats['cache_evictions'] += 1

    def clear_cache(self):
        """Clear all cached lookups."""
        with self._lock:
            self._cache.clear()
        logger.info("Matcher cache cleared")

    def get_stats(self) -> Dict[str, Union[int, float, bool]]:
        """
        Get matcher statistics.

        Returns:
            Dictionary of statistics including:
            - cache_hits / cache_misses: Cache lookups
            - cache_hit_rate: Hit rate as a fraction
            - matches: Scalar distance computations performed
            - cache_evictions: Number of LRU evictions
            - vectorized_pixels: Pixels matched through match_array()
            - cache_entries: Current cache size
            - cache_enabled: Whether caching is enabled
        """
        with self._lock:
            stats = self.stats.copy()
            stats['cache_entries'] = len(self._cache)
            stats['cache_enabled'] = self._cache_enabled

        total_requests = stats['cache_hits'] + stats['cache_misses']
        if total_requests > 0:
            stats['cache_hit_rate'] = stats['cache_hits'] / total_requests
        else:
            stats['cache_hit_rate'] = 0.0

        return stats

    def set_cache_enabled(self, enabled: bool):
        """
        Enable or disable caching at runtime.

        Args:
            enabled: Whether caching should be enabled
        """
        with self._lock:
            self._cache_enabled = enabled
            if not enabled:
                self._cache.clear()
        logger.info("Matcher cache %s", "enabled" if enabled else "disabled and cleared")

    def close(self):
        """Stop following configuration reloads and drop the cache"""
        if self._follows_config:
            unregister_config_callback(self._on_config_change)
            self._follows_config = False
        self.clear_cache()


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_matcher = None
_matcher_lock = threading.Lock()

def get_matcher() -> PaletteMatcher:
    """Get or create the default matcher"""
    global _default_matcher

    if _default_matcher is None:
        with _matcher_lock:
            if _default_matcher is None:
                _default_matcher = PaletteMatcher()

    return _default_matcher


def match_rgb(r: int, g: int, b: int) -> int:
    """
    Nearest palette index using the default cached matcher.

    Example:
        >>> match_rgb(255, 255, 255)
        15
    """
    return get_matcher().match(r, g, b)


def match_array(pixels) -> np.ndarray:
    """Vectorized match using the default matcher"""
    return get_matcher().match_array(pixels)


def clear_default_cache():
    """Clear the default matcher's cache."""
    if _default_matcher is not None:
        _default_matcher.clear_cache()


def get_default_stats() -> Dict[str, Union[int, float, bool]]:
    """
    Get statistics from the default matcher.

    Returns:
        Dictionary of statistics or empty dict if the matcher is not initialized
    """
    if _default_matcher is not None:
        return _default_matcher.get_stats()
    return {}

#!/usr/bin/env python3
"""
🐧 PNGN Palette 256 - Color Families Module
===========================================
Copyright (c) 2025 PNGN-Tec LLC

Named Color Families
====================
Groups palette indices into 14 semantic families across four groups:
- PrimaryColors: Red, Green, Blue
- SecondaryColors: Cyan, Yellow, Purple
- TertiaryColors: Orange, Brown, Violet, Pink
- GrayScaleColors: Black, Gray, White, Shades

Each family has:
- An ordered range, dark to light, indexed from 1
- Human-friendly aliases (e.g. Pure_Red, Pastel_Blue)
- A one-letter shortcut inside its group (R, G, B, C, Y, P, ...)
- A representative default color (Shades has none)

Access Patterns
===============
- fg.primary.Red.Pure_Red: alias lookup
- fg.primary.Red[3] / .at(3): bounds-checked 1-based position
- fg.primary.R[3]: same palette through the shortcut letter
- fg.primary.Red.Red3: named position
- for color in bg.grayscale.Shades: iterate in display order

Positions outside 1..N raise IndexOutOfRange with the family name, the
requested position and the valid range.

Example Usage
=============
```python
from pngn_families import fg, bg, color_at

print(fg.primary.Red.Pure_Red.paint("error"))
print(bg.grayscale.Shades[4].sequence() + "  ")
color_at("Blue", 5).index   # 4
```
"""

import operator
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from pngn_color import Color, IndexOutOfRange


@dataclass(frozen=True)
class FamilySpec:
    """
    Static definition of one color family.

    Attributes:
        name: Family name, e.g. 'Red'
        group: Owning group name, e.g. 'PrimaryColors'
        shortcut: One-letter alias within the group
        indices: Palette indices in position order (position 1 first)
        aliases: (label, palette index) pairs in declaration order
        default: Alias used as the family's representative color
    """

    name: str
    group: str
    shortcut: str
    indices: Tuple[int, ...]
    aliases: Tuple[Tuple[str, int], ...]
    default: Optional[str] = None


# ============================================================================
# FAMILY TABLE
# ============================================================================

_FAMILY_TABLE: Tuple[FamilySpec, ...] = (
    # PRIMARY COLORS
    FamilySpec(
        name='Red', group='PrimaryColors', shortcut='R',
        indices=(52, 88, 124, 1, 160, 196, 9, 167, 203, 210, 217),
        aliases=(
            ('std_Red', 1), ('std_Bright_Red', 9), ('Dark_Blood_Red', 52),
            ('Deep_Red', 88), ('Dark_Red', 124), ('Bright_Red', 160),
            ('Rust_Red', 167), ('Pure_Red', 196), ('Blush_Red', 203),
            ('Rosy_Red', 210), ('Pastel_Red', 217),
        ),
        default='Pure_Red',
    ),
    FamilySpec(
        name='Green', group='PrimaryColors', shortcut='G',
        indices=(22, 58, 28, 29, 64, 65, 2, 34, 35, 101, 70, 71, 10, 40, 106, 72,
                 41, 107, 42, 108, 76, 77, 46, 112, 78, 47, 113, 148, 48, 114, 49, 149,
                 150, 82, 151, 83, 118, 84, 85, 119, 154, 120, 121, 155, 156, 157, 193, 194),
        aliases=(
            ('std_Green', 2), ('std_Bright_Green', 10), ('Dark_Green', 22),
            ('Medium_Green', 28), ('Deep_Sea_Green', 29), ('Spring_Green', 34),
            ('Jade_Green', 35), ('Lime_Green', 40), ('Light_Spring_Green', 41),
            ('Caribbean_Green', 42), ('Pure_Green', 46), ('Vibrant_Spring_Green', 47),
            ('Soft_Spring_Green', 48), ('Brilliant_Spring_Green', 49),
            ('Dark_Olive_Green', 58), ('Olive_Green', 64), ('Glade_Green', 65),
            ('Kelly_Green', 70), ('Dark_Sea_Green', 71), ('Cadet_Green', 72),
            ('Strong_Green', 76), ('Moderate_Lime_Green', 77), ('Sea_Green', 78),
            ('Chartreuse', 82), ('Light_Lime_Green', 83), ('Light_Sea_Green', 84),
            ('Luminous_Spring_Green', 85), ('Clay_Creek_Green', 101),
            ('Apple_Green', 106), ('Asparagus_Green', 107), ('Pistachio_Green', 112),
            ('Mantis_Green', 113), ('Pale_Green', 114), ('Bright_Chartreuse', 118),
            ('Light_Green', 119), ('Soft_Green', 120), ('Mint_Green', 121),
            ('Green_Yellow', 148), ('June_Bud_Green', 149), ('Pastel_Lime', 150),
            ('Grayish_Lime_Green', 151), ('Spring_Bud_Green', 154),
            ('Pastel_Sea_Green', 155), ('Seafoam_Green', 156), ('Caladon_Green', 157),
            ('Tea_Green', 193), ('Pastel_Green', 194),
        ),
        default='Pure_Green',
    ),
    FamilySpec(
        name='Blue', group='PrimaryColors', shortcut='B',
        indices=(17, 18, 19, 20, 4, 21, 25, 26, 27, 60, 61, 62, 63, 32, 12, 33, 67,
                 68, 69, 103, 38, 104, 39, 105, 74, 75, 110, 45, 111, 146, 147, 81, 153, 189),
        aliases=(
            ('std_Blue', 4), ('std_Bright_Blue', 12), ('Dark_Navy_Blue', 17),
            ('Deep_Navy_Blue', 18), ('Navy_Blue', 19), ('Dark_Blue', 20),
            ('Deep_Blue', 21), ('Deep_Sky_Blue', 25), ('Science_Blue', 26),
            ('Pure_Blue', 27), ('Ocean_Blue', 32), ('Vivid_Blue', 33),
            ('Cerulean_Blue', 38), ('Azure_Blue', 39), ('Vivid_Sky_Blue', 45),
            ('Misty_Slate_Blue', 60), ('Comet_Blue', 61), ('Slate_Blue', 62),
            ('Bright_Blue', 63), ('Lochmara_Blue', 67), ('Steel_Blue', 68),
            ('Light_Slate_Blue', 69), ('Aegean_Blue', 74), ('Iceberg_Blue', 75),
            ('Dusky_Sky_Blue', 81), ('Dusky_Cobalt_Blue', 103), ('Soft_Indigo_Blue', 104),
            ('Misty_Cornflower_Blue', 105), ('Horizon_Blue', 110), ('Soft_Sky_Blue', 111),
            ('Light_Pearl_Blue', 146), ('Light_Steel_Blue', 147), ('Pastel_Blue', 153),
            ('Pale_Blue', 189),
        ),
        default='Pure_Blue',
    ),

    # SECONDARY COLORS
    FamilySpec(
        name='Cyan', group='SecondaryColors', shortcut='C',
        indices=(23, 24, 6, 30, 31, 66, 36, 37, 73, 43, 109, 44, 79, 14, 80, 115,
                 50, 116, 51, 117, 152, 86, 87, 122, 123, 158, 159, 195),
        aliases=(
            ('std_Cyan', 6), ('std_Bright_Cyan', 14), ('Dark_Cyan', 23),
            ('Deep_Cyan', 24), ('Dark_Turquoise', 30), ('Medium_Turquoise', 31),
            ('Rich_Cyan', 36), ('Tiffany_Cyan', 37), ('Lagoon_Cyan', 43),
            ('Vibrant_Turquoise', 44), ('Pure_Cyan', 50), ('Aqua_Cyan', 51),
            ('Juniper_Cyan', 66), ('Harbor_Cyan', 73), ('Myrtle_Cyan', 79),
            ('Tidewater_Cyan', 80), ('Reef_Cyan', 86), ('Frost_Cyan', 87),
            ('Pewter_Cyan', 109), ('Sage_Cyan', 115), ('Bermuda_Cyan', 116),
            ('Morning_Mist_Cyan', 117), ('Aquamarine_Cyan', 122), ('Opal_Cyan', 123),
            ('Shallows_Cyan', 152), ('Algae_Cyan', 158), ('Glacier_Cyan', 159),
            ('Ebb_Tide_Cyan', 195),
        ),
        default='Pure_Cyan',
    ),
    FamilySpec(
        name='Yellow', group='SecondaryColors', shortcut='Y',
        indices=(100, 3, 142, 143, 178, 144, 184, 185, 220, 186, 187, 221, 222,
                 190, 191, 11, 226, 192, 227, 228, 229, 230),
        aliases=(
            ('std_Yellow', 3), ('std_Bright_Yellow', 11), ('Mustard_Yellow', 100),
            ('Light_Gold', 142), ('Dark_Khaki', 143), ('Light_Khaki', 144),
            ('Deep_Yellow', 178), ('Strong_Yellow', 184), ('Mellow_Yellow', 185),
            ('Muted_Yellow', 186), ('Soft_Yellow', 187), ('Neon_Yellow', 190),
            ('Bright_Lemon', 191), ('Lemon_Lime', 192), ('Amber', 220),
            ('Honey_Yellow', 221), ('Marigold_Yellow', 222), ('Pure_Yellow', 226),
            ('Golden_Yellow', 227), ('Pastel_Yellow', 228), ('Light_Yellow', 229),
            ('Pale_Yellow', 230),
        ),
        default='Pure_Yellow',
    ),
    FamilySpec(
        name='Purple', group='SecondaryColors', shortcut='P',
        indices=(53, 90, 5, 91, 126, 127, 128, 129, 164, 165, 201, 96, 133, 134,
                 170, 171, 207, 139, 176, 213, 219, 225),
        aliases=(
            ('std_Purple', 5), ('Imperial_Purple', 53), ('Velvet_Plum_Purple', 90),
            ('Mystic_Amethyst_Purple', 91), ('Smokey_Orchid_Purple', 96),
            ('Velvet_Magenta_Purple', 126), ('Heliotrope_Purple', 127),
            ('Orchid_Purple', 128), ('Fuchsia_Purple', 129), ('Lilac_Purple', 133),
            ('Heather_Purple', 134), ('Mauve_Purple', 139),
            ('Electric_Fuchsia_Purple', 164), ('Orchid_Magenta_Purple', 165),
            ('Light_Magenta_Purple', 170), ('Haze_Purple', 171),
            ('Pastel_Orchid_Purple', 176), ('Radiant_Amethyst_Purple', 201),
            ('Pastel_Fuchsia_Purple', 207), ('Cotton_Candy_Purple', 213),
            ('Pastel_Plum_Purple', 219),
        ),
        default='Fuchsia_Purple',
    ),

    # TERTIARY COLORS
    FamilySpec(
        name='Orange', group='TertiaryColors', shortcut='O',
        indices=(130, 166, 202, 172, 208, 209, 214, 215, 216),
        aliases=(
            ('Dark_Orange', 130), ('Strong_Orange', 166), ('Burnt_Orange', 172),
            ('Pure_Orange', 202), ('Amber', 208), ('Coral_Orange', 209),
            ('Golden_Orange', 214), ('Sandy_Orange', 215),
        ),
        default='Pure_Orange',
    ),
    FamilySpec(
        name='Brown', group='TertiaryColors', shortcut='B',
        indices=(94, 95, 131, 136, 137, 138, 173, 179, 180, 181, 223),
        aliases=(
            ('Russet_Brown', 94), ('Brick_Rose_Brown', 95), ('Chestnut_Brown', 131),
            ('Dark_Goldenrod_Brown', 136), ('Desert_Sand_Brown', 137),
            ('Dusty_Taupe_Brown', 138), ('Copperfield_Brown', 173),
            ('Sandstone_Brown', 179), ('Light_Sandstone_Brown', 180),
            ('Pale_Chestnut_Brown', 181), ('Pastel_Moccasin_Brown', 223),
        ),
        default='Russet_Brown',
    ),
    FamilySpec(
        name='Violet', group='TertiaryColors', shortcut='V',
        indices=(54, 55, 56, 57, 92, 93, 97, 98, 99, 135, 140, 141, 177, 182, 183),
        aliases=(
            ('Deep_Orchid_Violet', 54), ('Amethyst_Violet', 55), ('Orchid_Violet', 56),
            ('Blue_Violet', 57), ('Strong_Violet', 92), ('Electric_Violet', 93),
            ('Smokey_Amethyst_Violet', 97), ('Dusty_Lavender_Violet', 98),
            ('Munstead_Violet', 99), ('Light_Violet', 135), ('Hazy_Lilac_Violet', 140),
            ('Lavender_Violet', 141), ('Misty_Lavender_Violet', 177),
            ('Frosted_Lavender_Violet', 182), ('Pearl_Violet', 183),
        ),
        default='Blue_Violet',
    ),
    FamilySpec(
        name='Pink', group='TertiaryColors', shortcut='P',
        indices=(89, 125, 13, 161, 162, 163, 197, 198, 199, 200, 132, 168, 169,
                 204, 205, 206, 174, 175, 211, 212, 218, 224),
        aliases=(
            ('std_Pink', 13), ('Dark_Pink', 89), ('Raspberry_Rose_Pink', 125),
            ('Peony_Pink', 132), ('Vivid_Pink', 161), ('Deep_Fuchsia_Pink', 162),
            ('Fuchsia_Pink', 163), ('Rosebud_Pink', 168), ('Dreamy_Raspberry_Pink', 169),
            ('Blush_Rose_Pink', 174), ('Rose_Quartz_Pink', 175),
            ('Vivid_Raspberry_Pink', 197), ('Neon_Rose_Pink', 198),
            ('Dragonfruit_Pink', 199), ('Electric_Magenta_Pink', 200),
            ('Watermelon_Candy_Pink', 204), ('Cherry_Blossom_Pink', 205),
            ('Silk_Rose_Pink', 206), ('Tickle_Me_Pink', 211),
            ('Princess_Perfume_Pink', 212), ('Rosewater_Pink', 218), ('Powder_Pink', 224),
        ),
        default='Neon_Rose_Pink',
    ),

    # GRAYSCALE COLORS
    FamilySpec(
        name='Black', group='GrayScaleColors', shortcut='B',
        indices=(16, 232, 0, 233),
        aliases=(
            ('std_Black', 0), ('Extended_Black', 16), ('Vampire_Black', 232),
            ('Nightshade_Black', 233),
        ),
        default='Extended_Black',
    ),
    FamilySpec(
        name='Gray', group='GrayScaleColors', shortcut='G',
        indices=(234, 235, 236, 237, 238, 239, 240, 59, 241, 242, 243, 8, 244,
                 102, 245, 246, 247, 248, 145, 249, 250, 251, 252, 188, 253, 254),
        aliases=(
            ('std_Gray', 8), ('Granite_Gray', 59), ('Smoke_Gray', 102),
            ('Fog_Gray', 145), ('Frosted_Gray', 188), ('Soot_Gray', 234),
            ('Graphite_Gray', 235), ('Charcoal_Gray', 236), ('Dusty_Charcoal_Gray', 237),
            ('Slate_Gray', 238), ('Gravel_Gray', 239), ('Shadow_Gray', 240),
            ('Nickel_Gray', 241), ('Mercury_Gray', 242), ('Dove_Gray', 243),
            ('Flint_Gray', 244), ('Driftwood_Gray', 245), ('Stone_Gray', 246),
            ('Silver_Gray', 247), ('Concrete_Gray', 248), ('Aluminum_Gray', 249),
            ('Silver_Foil_Gray', 250), ('Chalk_Gray', 251), ('Marble_Gray', 252),
            ('Porcelain_Gray', 253), ('Snow_Gray', 254),
        ),
        default='Mercury_Gray',
    ),
    FamilySpec(
        name='White', group='GrayScaleColors', shortcut='W',
        indices=(7, 255, 15, 231),
        aliases=(
            ('std_White', 7), ('Snowflake_White', 15), ('Pure_White', 231),
            ('Pearl_White', 255),
        ),
        default='Pure_White',
    ),
    FamilySpec(
        name='Shades', group='GrayScaleColors', shortcut='S',
        indices=tuple(range(232, 256)),
        aliases=tuple((f'Shade{n}', 231 + n) for n in range(1, 25)),
    ),
)

GROUP_NAMES = ('PrimaryColors', 'SecondaryColors', 'TertiaryColors', 'GrayScaleColors')
FAMILY_NAMES = tuple(spec.name for spec in _FAMILY_TABLE)

_SPECS_BY_NAME: Dict[str, FamilySpec] = {spec.name: spec for spec in _FAMILY_TABLE}


def get_family_spec(name: str) -> FamilySpec:
    """
    Look up a family definition by name (case-insensitive).

    Raises:
        KeyError: If no family has that name
    """
    spec = _SPECS_BY_NAME.get(name)
    if spec is None:
        for candidate in _FAMILY_TABLE:
            if candidate.name.lower() == str(name).lower():
                return candidate
        raise KeyError(f"Unknown color family: {name!r}")
    return spec


# ============================================================================
# FAMILY ACCESSOR
# ============================================================================

class Family:
    """
    Colors of one family bound to a display mode.

    Positions are 1-based and bounds-checked; aliases are available as
    attributes and through named().
    """

    def __init__(self, spec: FamilySpec, background: bool = False, label: Optional[str] = None):
        self.spec = spec
        self.background = background
        self.label = label or spec.name
        self._colors = tuple(Color(index, background) for index in spec.indices)
        self._aliases = {alias: Color(index, background) for alias, index in spec.aliases}

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def group(self) -> str:
        return self.spec.group

    @property
    def indices(self) -> Tuple[int, ...]:
        return self.spec.indices

    @property
    def aliases(self) -> Dict[str, int]:
        return dict(self.spec.aliases)

    @property
    def default(self) -> Optional[Color]:
        """Representative color of the family (None for Shades)"""
        if self.spec.default is None:
            return None
        return self._aliases[self.spec.default]

    def _check_position(self, position, method: bool = False) -> int:
        if isinstance(position, bool):
            raise TypeError("Family position must be an integer, got bool")
        try:
            position = operator.index(position)
        except TypeError:
            raise TypeError(f"Family position must be an integer, got "
                            f"{type(position).__name__}") from None

        size = len(self._colors)
        if 1 <= position <= size:
            return position

        if method:
            accessor = f"{self.group}.{self.label}.at({position})"
        else:
            accessor = f"{self.group}.{self.label}[{position}]"
        raise IndexOutOfRange(self.name, position, (1, size), accessor)

    def __getitem__(self, position: int) -> Color:
        position = self._check_position(position)
        return self._colors[position - 1]

    def at(self, position: int) -> Color:
        """Color at a 1-based position, with bounds checking"""
        position = self._check_position(position, method=True)
        return self._colors[position - 1]

    def named(self, alias: str) -> Color:
        """
        Color for a human-friendly alias, e.g. 'Pure_Red'.

        Raises:
            KeyError: If the family has no such alias
        """
        try:
            return self._aliases[alias]
        except KeyError:
            raise KeyError(f"{self.name} has no color named {alias!r}") from None

    def __getattr__(self, attr: str) -> Color:
        if attr.startswith('_'):
            raise AttributeError(attr)
        aliases = self.__dict__.get('_aliases', {})
        if attr in aliases:
            return aliases[attr]
        spec = self.__dict__.get('spec')
        if spec is not None:
            suffix = attr[len(spec.name):]
            # Canonical decimals only: Red3, not Red03
            if (attr.startswith(spec.name) and suffix.isdecimal()
                    and str(int(suffix)) == suffix):
                try:
                    return self[int(suffix)]
                except IndexOutOfRange as e:
                    raise AttributeError(str(e)) from e
        raise AttributeError(f"{type(self).__name__} {attr!r} not found")

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, item) -> bool:
        if isinstance(item, Color):
            return item in self._colors
        return item in self.spec.indices

    def __str__(self) -> str:
        default = self.default
        if default is None:
            return repr(self)
        return default.escape()

    def __repr__(self) -> str:
        mode = 'bg' if self.background else 'fg'
        return f"<Family {self.group}.{self.label} ({mode}, {len(self)} colors)>"


# ============================================================================
# GROUPS AND VIEWS
# ============================================================================

class ColorGroup:
    """Families of one group, by full name and by shortcut letter"""

    def __init__(self, name: str, background: bool = False):
        self.name = name
        self.background = background
        specs = [spec for spec in _FAMILY_TABLE if spec.group == name]
        if not specs:
            raise KeyError(f"Unknown color group: {name!r}")
        self._families = {spec.name: Family(spec, background) for spec in specs}
        self._shortcuts = {spec.shortcut: Family(spec, background, label=spec.shortcut)
                           for spec in specs}

    @property
    def families(self) -> Tuple[Family, ...]:
        return tuple(self._families.values())

    @property
    def shortcuts(self) -> Dict[str, str]:
        """Shortcut letter -> family name"""
        return {letter: family.name for letter, family in self._shortcuts.items()}

    def __getitem__(self, name: str) -> Family:
        family = self._families.get(name)
        if family is None:
            family = self._shortcuts.get(name)
        if family is None:
            raise KeyError(f"{self.name} has no family {name!r}")
        return family

    def __getattr__(self, attr: str) -> Family:
        if attr.startswith('_'):
            raise AttributeError(attr)
        try:
            return self[attr]
        except KeyError:
            raise AttributeError(f"{self.name} has no family {attr!r}") from None

    def __iter__(self) -> Iterator[Family]:
        return iter(self._families.values())

    def __len__(self) -> int:
        return len(self._families)

    def __repr__(self) -> str:
        mode = 'bg' if self.background else 'fg'
        return f"<ColorGroup {self.name} ({mode}): {', '.join(self._families)}>"


class PaletteView:
    """All four groups for one display mode"""

    def __init__(self, background: bool = False):
        self.background = background
        self.primary = ColorGroup('PrimaryColors', background)
        self.secondary = ColorGroup('SecondaryColors', background)
        self.tertiary = ColorGroup('TertiaryColors', background)
        self.grayscale = ColorGroup('GrayScaleColors', background)

    @property
    def groups(self) -> Tuple[ColorGroup, ...]:
        return (self.primary, self.secondary, self.tertiary, self.grayscale)

    def families(self) -> Iterator[Family]:
        for group in self.groups:
            yield from group

    def family(self, name: str) -> Family:
        """
        Family by full name (case-insensitive).

        Raises:
            KeyError: If no family has that name
        """
        spec = get_family_spec(name)
        for group in self.groups:
            if group.name == spec.group:
                return group[spec.name]
        raise KeyError(f"Unknown color family: {name!r}")


fg = PaletteView(background=False)
bg = PaletteView(background=True)


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def get_family(name: str, background: bool = False) -> Family:
    """Family accessor for foreground or background use"""
    return (bg if background else fg).family(name)


def color_at(family: str, position: int, background: bool = False) -> Color:
    """
    Color at a 1-based position within a family.

    Example:
        >>> color_at("Red", 3).index
        124
    """
    return get_family(family, background)[position]


def named_color(family: str, alias: str, background: bool = False) -> Color:
    """
    Color for a family alias.

    Example:
        >>> named_color("Red", "Pure_Red").index
        196
    """
    return get_family(family, background).named(alias)

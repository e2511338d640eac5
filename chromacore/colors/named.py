"""Named colors, installed as class attributes on every variant (``Color3F.RED``)."""

from .color_base import ColorBase
from .rgb import rgb_tuple_to_class

NAMED_COLORS = {
    "BLACK": (0.0, 0.0, 0.0),
    "WHITE": (1.0, 1.0, 1.0),
    "RED": (1.0, 0.0, 0.0),
    "GREEN": (0.0, 1.0, 0.0),
    "BLUE": (0.0, 0.0, 1.0),
    "CYAN": (0.0, 1.0, 1.0),
    "MAGENTA": (1.0, 0.0, 1.0),
    "YELLOW": (1.0, 1.0, 0.0),
    "ORANGE": (1.0, 0.5, 0.0),
}

# Material tints and gray levels used by scene presets
NAMED_COLORS_RGB_ONLY = {
    "GRAY_0_01": (0.01, 0.01, 0.01),
    "GRAY_0_10": (0.1, 0.1, 0.1),
    "GRAY_0_20": (0.2, 0.2, 0.2),
    "GRAY_0_25": (0.25, 0.25, 0.25),
    "GRAY_0_30": (0.3, 0.3, 0.3),
    "GRAY_0_50": (0.5, 0.5, 0.5),
    "GRAY_1_50": (1.5, 1.5, 1.5),
    "GRAY_1_55": (1.55, 1.55, 1.55),
    "GRAY_2_00": (2.0, 2.0, 2.0),
    "CU": (0.72, 0.45, 0.2),
    "AU_AZTEK": (0.76, 0.6, 0.33),
    "AU_METALLIC": (0.83, 0.69, 0.22),
}

NAMED_COLORS_RGBA_ONLY = {
    "TRANSPARENT": (0.0, 0.0, 0.0, 0.0),
}


def install_named_colors(cls: type[ColorBase]) -> None:
    named = dict(NAMED_COLORS)
    named.update(NAMED_COLORS_RGBA_ONLY if cls.num_channels == 4 else NAMED_COLORS_RGB_ONLY)
    for name, channels in named.items():
        setattr(cls, name, cls(channels))


for _cls in rgb_tuple_to_class.values():
    install_named_colors(_cls)

"""Drawing primitives shared by backends: transforms, alignment flags and fonts."""

from __future__ import annotations

import math
import os
import sys
from dataclasses import dataclass
from enum import IntFlag
from pathlib import Path
from typing import Iterable, Optional, Sequence

PI = math.pi

_DEFAULT_FONT_DIR = Path(__file__).resolve().parent / "font"


@dataclass
class TransformMatrix:
    """An affine transform in the form

    [a c e]
    [b d f]
    [0 0 1]
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def is_identity(self) -> bool:
        return (
            self.a == 1.0
            and self.b == 0.0
            and self.c == 0.0
            and self.d == 1.0
            and self.e == 0.0
            and self.f == 0.0
        )

    def clear(self) -> None:
        """Reset to the identity transform."""
        self.a = self.d = 1.0
        self.b = self.c = self.e = self.f = 0.0

    def translate(self, t: Sequence[float]) -> None:
        """Post-multiply by a translation of ``t``."""
        tx, ty = t[0], t[1]
        self.e += self.a * tx + self.c * ty
        self.f += self.b * tx + self.d * ty

    def rotate(self, angle: float) -> None:
        """Post-multiply by a rotation of ``angle`` radians."""
        cos_t = math.cos(angle)
        sin_t = math.sin(angle)
        a, b, c, d = self.a, self.b, self.c, self.d
        self.a = a * cos_t + c * sin_t
        self.c = -a * sin_t + c * cos_t
        self.b = b * cos_t + d * sin_t
        self.d = -b * sin_t + d * cos_t

    def to_string(self) -> str:
        """Return the matrix as an SVG ``transform`` attribute."""
        values = " ".join(
            f"{v:g}" for v in (self.a, self.b, self.c, self.d, self.e, self.f)
        )
        return f'transform="matrix({values})"'


class Align(IntFlag):
    """Text alignment flags; one horizontal and one vertical may be combined."""

    LEFT = 1 << 0
    CENTER = 1 << 1
    RIGHT = 1 << 2
    TOP = 1 << 3
    MIDDLE = 1 << 4
    BOTTOM = 1 << 5
    BASELINE = 1 << 6


class ArcDirection(IntFlag):
    CLOCKWISE = 1 << 0
    COUNTER_CLOCKWISE = 1 << 1


def _system_font_dir() -> str:
    if sys.platform.startswith("win"):
        return "c:\\Windows\\Fonts"
    if sys.platform == "darwin":
        return "/Library/Fonts/"
    return "/usr/share/fonts/"


class FontManager:
    """Keeps a list of TrueType font files found under a set of directories."""

    def __init__(self, font_dirs: Optional[Iterable[os.PathLike | str]] = None):
        self.font_dirs: list[str] = []
        self.available_fonts: list[str] = []
        if font_dirs is None:
            font_dirs = [_DEFAULT_FONT_DIR]
        for path in font_dirs:
            self.add_font_dir(path)

    def clear_font_dirs(self) -> None:
        self.font_dirs.clear()
        self.available_fonts.clear()

    def add_system_fonts(self) -> None:
        self.add_font_dir(_system_font_dir())

    def add_font_dir(self, path: os.PathLike | str) -> None:
        path = os.fspath(path)
        self.font_dirs.append(path)
        self._list_fonts(path)

    def _list_fonts(self, path: str) -> None:
        try:
            entries = sorted(os.scandir(path), key=lambda entry: entry.name)
        except OSError:
            return
        for entry in entries:
            if not entry.name or entry.name.startswith("."):
                continue
            full = path + os.sep + entry.name
            if entry.is_dir(follow_symlinks=False):
                self._list_fonts(full)
            elif entry.is_file(follow_symlinks=False) and entry.name.endswith("ttf"):
                self.available_fonts.append(full)

    def find_font(self, name1: str, name2: str = "") -> Optional[str]:
        """Return the first font whose path contains ``name1`` (case sensitive)
        and, if given, ``name2`` (matched against the lower-cased path).

        Returns None when no font matches.
        """
        for font in self.available_fonts:
            if name1 not in font:
                continue
            if not name2 or name2 in font.lower():
                return font
        return None
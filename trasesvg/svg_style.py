"""Attribute formatting and drawing style state for the SVG backend."""

from __future__ import annotations

from typing import Optional, Sequence

from trasesvg.backend import Align

Color = Sequence[int]


def fixed(value: float) -> str:
    """Format a number with six digits after the decimal point."""
    return f"{float(value):.6f}"


def general(value: float, precision: int = 6) -> str:
    """Format a number with ``precision`` significant digits, as ``%g`` does."""
    return f"{float(value):.{precision}g}"


def attribute(name: str, value: object) -> str:
    """Return ``name="value" `` with floats given four significant digits."""
    if isinstance(value, float):
        text = general(value, 4)
    else:
        text = str(value)
    return f'{name}="{text}" '


def _rgb_string(color: Color) -> str:
    if len(color) not in (3, 4):
        raise ValueError(f"a color needs 3 or 4 components, got {len(color)}")
    r, g, b = (int(c) for c in color[:3])
    return f"rgb({r},{g},{b})"


def _opacity(color: Color) -> str:
    if len(color) not in (3, 4):
        raise ValueError(f"a color needs 3 or 4 components, got {len(color)}")
    alpha = color[3] if len(color) == 4 else 255
    return fixed(alpha / 255.0)


def _set_attribute_script(name: str, color: Color) -> str:
    return (
        f"evt.target.setAttribute('{name}', '{_rgb_string(color)}'); "
        f"evt.target.setAttribute('{name}-opacity','{_opacity(color)}');"
    )


class SvgStyle:
    """Current stroke, fill, font and mouseover settings as SVG attribute text.

    Colors are sequences ``(r, g, b)`` or ``(r, g, b, a)`` of 0-255 integers.
    """

    BLACK: tuple[int, int, int, int] = (0, 0, 0, 255)

    def __init__(self) -> None:
        self.line_width = ""
        self.line_color = ""
        self.fill = ""
        self.font_face_attr = ""
        self.font_size_attr = ""
        self.font_align = ""
        self.font_size_base = ""
        self.font_face_base = ""
        self.onmouseover_stroke = ""
        self.onmouseout_stroke = ""
        self.onmouseover_fill = ""
        self.onmouseout_fill = ""
        self.onmouseover_tooltip = ""
        self.onmouseout_tooltip = ""
        self.stroke_color(self.BLACK)
        self.fill_color(self.BLACK)
        self.stroke_width(1)

    def stroke_color(self, color: Color, color_mouseover: Optional[Color] = None) -> None:
        """Set the stroke color, optionally with another color shown on mouseover."""
        self.line_color = (
            f'stroke="{_rgb_string(color)}" stroke-opacity="{_opacity(color)}"'
        )
        if color_mouseover is None:
            self.onmouseover_stroke = ""
            self.onmouseout_stroke = ""
        else:
            self.onmouseover_stroke = _set_attribute_script("stroke", color_mouseover)
            self.onmouseout_stroke = _set_attribute_script("stroke", color)

    def fill_color(self, color: Color, color_mouseover: Optional[Color] = None) -> None:
        """Set the fill color, optionally with another color shown on mouseover."""
        self.fill = f'fill="{_rgb_string(color)}" fill-opacity="{_opacity(color)}"'
        if color_mouseover is not None:
            self.onmouseover_fill = _set_attribute_script("fill", color_mouseover)
            self.onmouseout_fill = _set_attribute_script("fill", color)

    def stroke_width(self, lw: float) -> None:
        self.line_width = f'stroke-width="{fixed(lw)}"'

    def font_size(self, size: float) -> None:
        self.font_size_base = fixed(size)
        self.font_size_attr = f'font-size="{self.font_size_base}"'

    def font_face(self, face: str) -> None:
        self.font_face_base = face
        self.font_face_attr = f'font-family="{face}"'

    def text_align(self, align: int) -> None:
        """Set horizontal and vertical text alignment from ``Align`` flags."""
        align = int(align)
        if align & Align.LEFT:
            horizontal = "start"
        elif align & Align.CENTER:
            horizontal = "middle"
        elif align & Align.RIGHT:
            horizontal = "end"
        else:
            horizontal = ""
        if align & Align.TOP:
            vertical = "hanging"
        elif align & Align.MIDDLE:
            vertical = "middle"
        elif align & Align.BOTTOM:
            vertical = "baseline"
        else:
            vertical = ""
        self.font_align = (
            f'text-anchor="{horizontal}" alignment-baseline="{vertical}"'
        )

    def tooltip(self, x: Sequence[float], string: str) -> None:
        """Show ``string`` at position ``x`` when the next shape is hovered."""
        self.onmouseover_tooltip = (
            f"tooltip({fixed(x[0])},{fixed(x[1])},'{string}',"
            f"{self.font_size_base},'{self.font_face_base}');"
        )
        self.onmouseout_tooltip = "remove_tooltip();"

    def clear_tooltip(self) -> None:
        self.onmouseover_tooltip = ""
        self.onmouseout_tooltip = ""

    def mouseover(self) -> bool:
        """True if any mouseover behaviour is set."""
        return bool(
            self.onmouseover_fill or self.onmouseover_stroke or self.onmouseout_tooltip
        )

    def clear_fill_mouseover(self) -> None:
        self.onmouseover_fill = ""
        self.onmouseout_fill = ""

    def shape_attributes(self) -> str:
        """Fill, stroke and mouseover attributes for a shape element."""
        text = f"{self.fill} {self.line_color} {self.line_width}"
        if self.mouseover():
            text += (
                f' onmouseover="{self.onmouseover_fill}{self.onmouseover_stroke}'
                f'{self.onmouseover_tooltip}"'
            )
            text += (
                f' onmouseout="{self.onmouseout_fill}{self.onmouseout_stroke}'
                f'{self.onmouseout_tooltip}"'
            )
        return text
"""A drawing backend that writes a (possibly animated) SVG image to a text stream."""

from __future__ import annotations

import math
from typing import Optional, Sequence, TextIO

from trasesvg.backend import TransformMatrix
from trasesvg.svg_style import (
    Color,
    SvgStyle,
    _opacity,
    _rgb_string,
    attribute,
    fixed,
    general,
)

Point = Sequence[float]
Box = Sequence[Sequence[float]]

_XML_HEADER = """<?xml version="1.0" encoding="utf-8" standalone="no"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"
  "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
"""

_TOOLTIP_SCRIPT = """<script>
function tooltip(x,y,string,size,face) {
    var txtElem = document.createElementNS("http://www.w3.org/2000/svg", "text");
    txtElem.setAttributeNS(null,"id","tooltip");
    txtElem.setAttributeNS(null,"x",x);
    txtElem.setAttributeNS(null,"y",y);
    txtElem.setAttributeNS(null,"font-size",size);
    txtElem.setAttributeNS(null,"font-family",face);

    txtElem.appendChild(document.createTextNode(string))
    document.documentElement.appendChild(txtElem);
}
function remove_tooltip() {
    var txtElem = document.getElementById("tooltip");
    document.documentElement.removeChild(txtElem);
}
</script>
"""


def _min_and_delta(box: Box) -> tuple[tuple[float, float], tuple[float, float]]:
    """Split a box ``((xmin, ymin), (xmax, ymax))`` into its corner and size."""
    (xmin, ymin), (xmax, ymax) = box
    return (float(xmin), float(ymin)), (float(xmax) - float(xmin), float(ymax) - float(ymin))


def _ratio(time: float, span: float) -> float:
    """``time / span`` with floating point semantics for a zero span."""
    if span != 0:
        return time / span
    if time == 0 or math.isnan(time):
        return math.nan
    return math.copysign(math.inf, time)


class BackendSVG:
    """Writes drawing calls as SVG elements to the text stream ``out``.

    Points are ``(x, y)`` pairs, boxes are ``((xmin, ymin), (xmax, ymax))`` and
    colors are ``(r, g, b)`` or ``(r, g, b, a)`` tuples of 0-255 integers.
    """

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._style = SvgStyle()
        self._transform = TransformMatrix()
        self._path = ""
        self._web_font = ""
        self._time_span = 0.0
        self._key_times: list[str] = []
        self._animate_values: list[list[str]] = []
        self._animate_stroke: list[str] = []
        self._animate_stroke_opacity: list[str] = []
        self._animate_fill: list[str] = []
        self._animate_fill_opacity: list[str] = []
        self._scissor_box: Optional[Box] = None
        self._font_blur = 0.0
        self._mouse_down_pos: Optional[tuple[float, float]] = None

    @property
    def style(self) -> SvgStyle:
        return self._style

    # -- document -----------------------------------------------------------

    def init(self, pixels: Point, name: str, time_span: float = 0.0) -> None:
        """Write the document header; call before any drawing."""
        self._time_span = float(time_span)
        out = self._out
        out.write(_XML_HEADER)
        out.write(
            f'<svg width="{general(pixels[0])}px" height="{general(pixels[1])}px" '
            'version="1.1" xmlns="http://www.w3.org/2000/svg">\n'
        )
        out.write(f"<desc>{name}</desc>\n")
        if self._web_font:
            out.write(f"<style type=\"text/css\">@import url('{self._web_font}');</style>\n")
        out.write(_TOOLTIP_SCRIPT)

    def finalise(self) -> None:
        """Close the document; call after all drawing."""
        self._out.write("</svg>\n")
        self._out.flush()

    # -- interaction (this backend has none) --------------------------------

    def is_interactive(self) -> bool:
        return False

    def should_close(self) -> bool:
        return True

    def begin_frame(self) -> tuple[float, float]:
        return (0.0, 0.0)

    def end_frame(self) -> None:
        """Flush what has been written so far."""
        self._out.flush()

    def get_mouse_pos(self) -> tuple[float, float]:
        return (0.0, 0.0)

    def get_time(self) -> float:
        return 0.0

    def set_mouse_down(self, mouse_pos: Point) -> None:
        """Record a press position; this backend never reports dragging."""
        self._mouse_down_pos = (float(mouse_pos[0]), float(mouse_pos[1]))

    def set_mouse_up(self) -> None:
        self._mouse_down_pos = None

    def mouse_dragging(self) -> bool:
        return False

    def mouse_drag_delta(self) -> tuple[float, float]:
        return (0.0, 0.0)

    def mouse_drag_reset_delta(self) -> None:
        if self._mouse_down_pos is not None:
            self._mouse_down_pos = self.get_mouse_pos()

    def scissor(self, x: Box) -> None:
        """Record a clip box; SVG output is not clipped by it."""
        self._scissor_box = x

    def reset_scissor(self) -> None:
        self._scissor_box = None

    # -- transform ----------------------------------------------------------

    def rotate(self, angle: float) -> None:
        self._transform.rotate(angle)

    def reset_transform(self) -> None:
        self._transform.clear()

    def translate(self, v: Point) -> None:
        self._transform.translate(v)

    def _transform_suffix(self) -> str:
        if self._transform.is_identity():
            return ""
        return " " + self._transform.to_string()

    # -- paths --------------------------------------------------------------

    def begin_path(self) -> None:
        self._path = ""

    def move_to(self, x: Point) -> None:
        self._path += f" M {fixed(x[0])} {fixed(x[1])}"

    def line_to(self, x: Point) -> None:
        self._path += f" L {fixed(x[0])} {fixed(x[1])}"

    def close_path(self) -> None:
        self._path += " Z"

    def arc(self, centre: Point, radius: float, angle0: float, angle1: float) -> None:
        """Add a clockwise arc around ``centre`` from ``angle0`` to ``angle1``."""
        p0 = (centre[0] + radius * math.cos(angle0), centre[1] + radius * math.sin(angle0))
        p1 = (centre[0] + radius * math.cos(angle1), centre[1] + radius * math.sin(angle1))
        self.move_to(p0)
        self._path += (
            f" A {fixed(radius)} {fixed(radius)} 0 0 1 {fixed(p1[0])} {fixed(p1[1])}"
        )

    def stroke(self) -> None:
        """Draw the current path as a line."""
        s = self._style
        self._out.write(
            f'<path d="{self._path}" {s.line_color} {s.line_width} fill-opacity="0"'
            f"{self._transform_suffix()}/>\n"
        )

    def fill(self) -> None:
        """Draw the current path filled."""
        s = self._style
        self._out.write(
            f'<path d="{self._path}" {s.fill} {s.line_color} {s.line_width}'
            f"{self._transform_suffix()}/>\n"
        )
        s.clear_fill_mouseover()

    def begin_animated_path(self) -> None:
        """Start a path whose shape changes over time."""
        self._key_times = []
        self._animate_values = [[]]
        self.begin_path()

    def add_animated_path(self, time: float) -> None:
        """Store the current path as the keyframe at ``time`` and start a new one."""
        if not self._key_times:
            s = self._style
            self._out.write(
                f'<path {s.line_color} {s.line_width} fill-opacity="0" d="{self._path}">\n '
            )
        if not self._animate_values:
            self._animate_values = [[]]
        self._key_times.append(fixed(_ratio(time, self._time_span)))
        self._animate_values[0].append(self._path)
        self._path = ""

    def end_animated_path(self, time: float) -> None:
        """Store the last keyframe at ``time`` and close the animated path."""
        self.add_animated_path(time)
        self._end_animate(self._animate_values[0], "d")
        self._end_animate_fill()
        self._end_animate_stroke()
        self._out.write("</path>\n")
        self._key_times = []

    # -- rectangles ---------------------------------------------------------

    def _rect_begin(self, x: Box, r: float) -> None:
        (mx, my), (dx, dy) = _min_and_delta(x)
        text = "<rect " + attribute("x", mx) + attribute("y", my)
        text += attribute("width", dx) + attribute("height", dy)
        if r > 0:
            text += attribute("rx", float(r)) + attribute("ry", float(r))
        text += self._style.shape_attributes()
        self._out.write(text + ">\n")

    def _rect_end(self) -> None:
        self._out.write("</rect>\n")

    def rect(self, x: Box, r: float = 0.0) -> None:
        """Draw a rectangle, with corners rounded by ``r`` when positive."""
        self._rect_begin(x, r)
        self._rect_end()

    def rounded_rect(self, x: Box, r: float) -> None:
        self.rect(x, r)

    def add_animated_rect(self, x: Box, time: float) -> None:
        """Add a keyframe at ``time`` to the current animated rectangle."""
        (mx, my), (dx, dy) = _min_and_delta(x)
        if not self._key_times:
            self._rect_begin(x, 0.0)
            self._animate_values = [[], [], [], []]
        self._key_times.append(fixed(_ratio(time, self._time_span)))
        for values, v in zip(self._animate_values, (mx, my, dx, dy)):
            values.append(fixed(v))

    def end_animated_rect(self) -> None:
        for values, name in zip(self._animate_values, ("x", "y", "width", "height")):
            self._end_animate(values, name)
        self._end_animate_fill()
        self._end_animate_stroke()
        self._rect_end()
        self._key_times = []

    # -- circles ------------------------------------------------------------

    def _circle_begin(self, centre: Point, r: float) -> None:
        text = "<circle " + attribute("cx", float(centre[0]))
        text += attribute("cy", float(centre[1])) + attribute("r", float(r))
        text += self._style.shape_attributes()
        self._out.write(text + ">\n")

    def _circle_end(self) -> None:
        self._out.write("</circle>\n")

    def circle(self, centre: Point, r: float) -> None:
        self._circle_begin(centre, r)
        self._circle_end()

    def add_animated_circle(self, centre: Point, radius: float, time: float) -> None:
        """Add a keyframe at ``time`` to the current animated circle."""
        if not self._key_times:
            self._circle_begin(centre, radius)
            self._animate_values = [[], [], []]
        self._key_times.append(fixed(_ratio(time, self._time_span)))
        for values, v in zip(self._animate_values, (centre[0], centre[1], radius)):
            values.append(fixed(v))

    def end_animated_circle(self) -> None:
        for values, name in zip(self._animate_values, ("cx", "cy", "r")):
            self._end_animate(values, name)
        self._end_animate_fill()
        self._end_animate_stroke()
        self._circle_end()
        self._key_times = []

    def circle_with_text(self, centre: Point, radius: float, string: str) -> None:
        """Draw a circle with a text label beside it."""
        s = self._style
        self._out.write(
            f'<circle cx="{general(centre[0])}" cy="{general(centre[1])}" '
            f'r="{general(radius)}" {s.fill} {s.line_color} {s.line_width}'
            " onmouseover=\"evt.target.setAttribute('stroke-opacity','1.0');\""
            " onmouseout=\"bob.setAttribute('stroke-opacity', '0.0');\"/>\n"
        )
        tx = centre[0] + 2.0 * radius
        ty = centre[1] - 2.0 * radius
        self._out.write(
            f'<text id="bob" x="{general(tx)}" y="{general(ty)}" '
            f"{s.font_face_attr} {s.font_size_attr} {s.font_align} {s.fill}>"
            f"{string}</text>\n"
        )

    # -- animation of colors ------------------------------------------------

    def add_animated_stroke(self, color: Color) -> None:
        """Stroke color of the current keyframe."""
        self._animate_stroke.append(_rgb_string(color))
        self._animate_stroke_opacity.append(_opacity(color))

    def add_animated_fill(self, color: Color) -> None:
        """Fill color of the current keyframe."""
        self._animate_fill.append(_rgb_string(color))
        self._animate_fill_opacity.append(_opacity(color))

    def _end_animate(self, values: list[str], name: str) -> None:
        if not self._key_times or not values:
            raise RuntimeError(f"no keyframes to animate {name!r}")
        self._out.write(
            f'<animate attributeName="{name}" repeatCount="indefinite" begin ="0s" '
            f'dur="{general(self._time_span)}s" values="{";".join(values)}" '
            f'keyTimes="{";".join(self._key_times)}"/>\n'
        )
        values.clear()

    def _end_animate_stroke(self) -> None:
        if not self._animate_stroke:
            return
        self._end_animate(self._animate_stroke, "stroke")
        self._end_animate(self._animate_stroke_opacity, "stroke-opacity")

    def _end_animate_fill(self) -> None:
        if not self._animate_fill:
            return
        self._end_animate(self._animate_fill, "fill")
        self._end_animate(self._animate_fill_opacity, "fill-opacity")

    # -- style --------------------------------------------------------------

    def stroke_color(self, color: Color, color_mouseover: Optional[Color] = None) -> None:
        self._style.stroke_color(color, color_mouseover)

    def fill_color(self, color: Color, color_mouseover: Optional[Color] = None) -> None:
        self._style.fill_color(color, color_mouseover)

    def stroke_width(self, lw: float) -> None:
        self._style.stroke_width(lw)

    def tooltip(self, x: Point, string: str) -> None:
        """Show ``string`` at ``x`` when the next rectangle or circle is hovered."""
        self._style.tooltip(x, string)

    def clear_tooltip(self) -> None:
        self._style.clear_tooltip()

    def font_size(self, size: float) -> None:
        self._style.font_size(size)

    def font_face(self, face: str) -> None:
        self._style.font_face(face)

    def import_web_font(self, url: str) -> None:
        """Import a web font; must be called before ``init``."""
        self._web_font = url

    def font_blur(self, blur: float) -> None:
        """Record the text blur; SVG text is written without it."""
        self._font_blur = float(blur)

    def text_align(self, align: int) -> None:
        self._style.text_align(align)

    def text(self, x: Point, string: str, end: Optional[int] = None) -> None:
        """Draw ``string`` (up to index ``end`` if given) at position ``x``."""
        if end is not None:
            string = string[:end]
        s = self._style
        self._out.write(
            f'<text x="{general(x[0])}" y="{general(x[1])}" {s.font_face_attr} '
            f"{s.font_size_attr} {s.font_align} {s.fill}{self._transform_suffix()}>"
            f"{string}</text>\n"
        )
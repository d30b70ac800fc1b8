import io
import math

import pytest

from trasesvg.backend import Align, TransformMatrix
from trasesvg.svg import BackendSVG
from trasesvg.svg_style import attribute, fixed


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def svg(out):
    return BackendSVG(out)


def test_init_and_finalise_frame_document(svg, out):
    svg.init((800, 600), "figure", 2.0)
    svg.finalise()
    text = out.getvalue()
    assert text.startswith('<?xml version="1.0"')
    assert '<svg width="800px" height="600px"' in text
    assert attribute("version", "1.1") in text
    assert "<desc>figure</desc>" in text
    assert "function tooltip(" in text
    assert text.endswith("</svg>\n")
    assert "@import" not in text


def test_web_font_is_imported(svg, out):
    svg.import_web_font("fonts.example.com/roboto.css")
    svg.init((10, 10), "f")
    text = out.getvalue()
    assert "@import url('fonts.example.com/roboto.css');" in text
    assert attribute("version", "1.1") in text


def test_not_interactive(svg):
    assert svg.is_interactive() is False
    assert svg.should_close() is True
    assert svg.get_time() == 0.0
    assert svg.mouse_dragging() is False
    assert svg.get_mouse_pos() == (0.0, 0.0)


def test_stroked_path(svg, out):
    svg.begin_path()
    svg.move_to((0, 0))
    svg.line_to((1, 2))
    svg.close_path()
    svg.stroke()
    text = out.getvalue()
    expected_d = f" M {fixed(0)} {fixed(0)} L {fixed(1)} {fixed(2)} Z"
    assert f'<path d="{expected_d}"' in text
    assert 'fill-opacity="0"' in text
    assert "transform" not in text


def test_transform_written_until_reset(svg, out):
    svg.rotate(math.pi / 2)
    svg.begin_path()
    svg.move_to((0, 0))
    svg.stroke()
    expected = TransformMatrix()
    expected.rotate(math.pi / 2)
    assert expected.to_string() in out.getvalue()
    out.truncate(0)
    out.seek(0)
    svg.reset_transform()
    svg.stroke()
    text = out.getvalue()
    assert f' M {fixed(0)} {fixed(0)}"' in text
    assert "transform" not in text


def test_fill_mouseover_cleared_by_fill(svg, out):
    svg.fill_color((255, 0, 0), (0, 255, 0))
    svg.rect(((0, 0), (1, 1)))
    first = out.getvalue()
    assert "onmouseover=" in first
    assert attribute("width", 1) in first
    svg.begin_path()
    svg.fill()
    out.truncate(0)
    out.seek(0)
    svg.rect(((0, 0), (1, 1)))
    second = out.getvalue()
    assert attribute("width", 1) in second
    assert "onmouseover=" not in second


def test_rect_rounded_corners(svg, out):
    svg.rect(((1.0, 2.0), (4.0, 6.0)))
    plain = out.getvalue()
    assert plain.startswith("<rect ")
    assert attribute("width", 3.0) in plain
    assert attribute("height", 4.0) in plain
    assert "rx=" not in plain
    assert plain.endswith("</rect>\n")
    out.truncate(0)
    out.seek(0)
    svg.rounded_rect(((1.0, 2.0), (4.0, 6.0)), 0.5)
    assert attribute("rx", 0.5) in out.getvalue()


def test_tooltip_on_circle(svg, out):
    svg.tooltip((1, 2), "hello")
    svg.circle((0.5, 0.5), 2.0)
    text = out.getvalue()
    assert "'hello'" in text
    assert "remove_tooltip();" in text
    assert attribute("r", 2.0) in text
    svg.clear_tooltip()
    out.truncate(0)
    out.seek(0)
    svg.circle((0.5, 0.5), 2.0)
    assert "tooltip" not in out.getvalue()


def test_animated_circle(svg, out):
    svg.init((10, 10), "a", 2.0)
    out.truncate(0)
    out.seek(0)
    svg.add_animated_circle((0, 0), 1, 0.0)
    svg.add_animated_fill((255, 0, 0))
    svg.add_animated_circle((1, 1), 2, 2.0)
    svg.add_animated_fill((0, 0, 255))
    svg.end_animated_circle()
    text = out.getvalue()
    assert text.count("<animate ") == 5
    assert text.count("<circle ") == 1
    assert f'keyTimes="{fixed(0)};{fixed(1)}"' in text
    assert f'attributeName="r" repeatCount="indefinite" begin ="0s" dur="2s" values="{fixed(1)};{fixed(2)}"' in text
    assert text.endswith("</circle>\n")


def test_animated_rect(svg, out):
    svg.init((10, 10), "a", 1.0)
    svg.add_animated_rect(((0, 0), (1, 1)), 0.0)
    svg.add_animated_rect(((0, 0), (2, 3)), 1.0)
    svg.add_animated_stroke((0, 0, 0))
    svg.end_animated_rect()
    text = out.getvalue()
    for name in ("x", "y", "width", "height"):
        assert f'attributeName="{name}"' in text
    assert 'attributeName="stroke"' in text
    assert 'attributeName="stroke-opacity"' in text
    assert f'values="{fixed(1)};{fixed(3)}"' in text


def test_animated_path(svg, out):
    svg.init((10, 10), "a", 1.0)
    out.truncate(0)
    out.seek(0)
    svg.begin_animated_path()
    svg.move_to((0, 0))
    svg.add_animated_path(0.0)
    svg.move_to((1, 1))
    svg.end_animated_path(1.0)
    text = out.getvalue()
    assert text.count("<path ") == 1
    first = f" M {fixed(0)} {fixed(0)}"
    second = f" M {fixed(1)} {fixed(1)}"
    assert f'values="{first};{second}"' in text
    assert text.endswith("</path>\n")


def test_text_alignment_and_end(svg, out):
    svg.font_face("Roboto")
    svg.text_align(Align.CENTER | Align.MIDDLE)
    svg.text((1, 2), "abcdef", 3)
    text = out.getvalue()
    assert 'text-anchor="middle" alignment-baseline="middle"' in text
    assert attribute("alignment-baseline", "middle") in text
    assert attribute("font-family", "Roboto") in text
    assert ">abc</text>" in text


def test_arc_ends_at_second_angle(svg, out):
    svg.begin_path()
    svg.arc((0, 0), 1.0, 0.0, math.pi / 2)
    svg.stroke()
    text = out.getvalue()
    assert f" M {fixed(1)} {fixed(0)} A {fixed(1)} {fixed(1)} 0 0 1" in text
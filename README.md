# trasesvg

A small drawing backend that writes static and animated SVG documents to
any writable text stream. It offers the low-level primitives a plotting
library draws with: paths, rectangles, circles, arcs and text, with
stroke and fill styling, mouseover colour changes, tooltips and keyframe
animation through `<animate>` elements.

There are no third-party dependencies.

## Conventions

- Points are `(x, y)` pairs.
- Boxes are `((xmin, ymin), (xmax, ymax))`.
- Colours are `(r, g, b)` or `(r, g, b, a)` tuples of 0–255 integers;
  a missing alpha means fully opaque. Any other length raises
  `ValueError`.

## A static picture

```python
import io
from trasesvg.svg import BackendSVG

out = io.StringIO()
svg = BackendSVG(out)
svg.init((200, 100), "example", 0.0)

svg.stroke_color((255, 0, 0))
svg.stroke_width(2)
svg.begin_path()
svg.move_to((10, 10))
svg.line_to((190, 90))
svg.stroke()

svg.fill_color((0, 0, 255, 128))
svg.circle((100, 50), 20)
svg.rect(((20, 20), (60, 40)), 4)

svg.font_face("Roboto")
svg.font_size(12)
svg.text((10, 95), "hello", None)

svg.finalise()
print(out.getvalue())
```

`init` writes the XML header, the `<svg>` element, a `<desc>` holding
the name and a small script used by tooltips; `finalise` closes the
document and flushes the stream. Call `import_web_font(url)` before
`init` to add a CSS `@import` of a web font.

Paths are built with `begin_path`, `move_to`, `line_to`, `arc` and
`close_path`, then written with `stroke` (outline only) or `fill`.
`rotate`, `translate` and `reset_transform` change the transform that
is attached to paths and text. `text_align` takes flags from
`trasesvg.backend.Align`, e.g. `Align.CENTER | Align.MIDDLE`.

## Mouseover and tooltips

`fill_color(color, color_mouseover)` and
`stroke_color(color, color_mouseover)` make the next rectangles and
circles change colour while the pointer is over them.
`tooltip(position, text)` shows a text at `position` on hover, using the
current font size and face; `clear_tooltip()` removes it again.

## Animation

The `time_span` passed to `init` is the length of the animation in
seconds; keyframe times are divided by it.

```python
svg.init((200, 100), "moving circle", 2.0)
svg.add_animated_circle((20, 50), 5, 0.0)
svg.add_animated_fill((255, 0, 0))
svg.add_animated_circle((180, 50), 10, 2.0)
svg.add_animated_fill((0, 0, 255))
svg.end_animated_circle()
svg.finalise()
```

Animated rectangles (`add_animated_rect` / `end_animated_rect`) work the
same way. Animated paths are begun with `begin_animated_path`; each
keyframe's path is drawn with `move_to`/`line_to` and stored with
`add_animated_path(time)`, and `end_animated_path(time)` stores the last
one and closes the element. `add_animated_fill` and
`add_animated_stroke` give a colour per keyframe. Ending an animation
that has no keyframes raises `RuntimeError`.

## Other pieces

- `trasesvg.backend.TransformMatrix` — a 2D affine transform with
  `translate`, `rotate`, `clear`, `is_identity` and `to_string` (an SVG
  `transform` attribute).
- `trasesvg.backend.Align` and `trasesvg.backend.ArcDirection` — flag
  enumerations.
- `trasesvg.backend.FontManager` — collects font files whose names end
  in `ttf` from a list of directories (searched recursively, hidden
  entries skipped). `find_font(name1, name2)` returns the first path
  containing `name1` and, if `name2` is not empty, containing `name2`
  in its lower-cased form; it returns `None` when nothing matches.
  `add_font_dir`, `add_system_fonts` and `clear_font_dirs` manage the
  directories.
- `trasesvg.svg_style.SvgStyle` — the stroke, fill, font and mouseover
  state turned into SVG attribute text, with the number formatters
  `fixed`, `general` and `attribute`.

## What it does not do

This package only writes SVG. It has no figures, axes, data sets or plot
types, and no on-screen window. The interactive methods of `BackendSVG`
(`get_mouse_pos`, `mouse_dragging`, `mouse_drag_delta`, `get_time`,
`begin_frame` and the like) return fixed values, `is_interactive`
returns `False`, and `scissor` and `font_blur` are recorded but have no
effect on the output.
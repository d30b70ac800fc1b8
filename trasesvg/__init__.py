"""SVG drawing backend for plotting: transforms, fonts, styles and animated SVG output."""

__version__ = "0.1.0"
__all__ = ["backend", "svg_style", "svg"]
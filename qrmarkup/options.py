# -*- coding: utf-8 -*-
"""
Render Options Module

All settings consumed by the markup renderers, with their defaults. The
options object is read-only during a render; use ``replace`` to derive a
modified copy.
"""

from dataclasses import dataclass, field, replace as _replace
from typing import Any, Mapping, Optional, Sequence

from .module_types import TypeLike

OUTPUT_MARKUP_HTML = 'html'
OUTPUT_MARKUP_SVG = 'svg'
OUTPUT_TYPES = (OUTPUT_MARKUP_HTML, OUTPUT_MARKUP_SVG)


@dataclass(frozen=True)
class RenderOptions:
    """
    Options for HTML and SVG markup output.

    Attributes:
        output_type (str): 'svg' or 'html'
        eol (str): Line separator between markup lines
        css_class (str): CSS class added to the outer element and every path
        module_values (Mapping): Per-type value overrides (non-strings are ignored)
        markup_dark (str): Default value for dark modules
        markup_light (str): Default value for light modules
        image_transparent (bool): Skip light modules in SVG output
        image_base64 (bool): Return SVG as a data URI when not writing a file
        svg_draw_circular_modules (bool): Draw circles instead of squares
        svg_keep_as_square (Sequence): Types drawn as squares even with circles on
        svg_circle_radius (float): Circle radius in modules
        svg_connect_paths (bool): Merge modules into the data paths
        svg_exclude_from_connect (Sequence): Types kept in their own paths
        svg_view_box_size (Optional[int]): viewBox size, defaults to the matrix size
        svg_preserve_aspect_ratio (str): preserveAspectRatio attribute
        svg_width / svg_height (Optional[str]): Explicit width/height attributes
        svg_opacity (float): fill-opacity for paths with a resolved value
        svg_defs (str): Content of a <defs> element, omitted when empty
    """
    output_type: str = OUTPUT_MARKUP_SVG
    eol: str = '\n'
    css_class: str = ''
    module_values: Mapping[TypeLike, Any] = field(default_factory=dict)
    markup_dark: str = '#000'
    markup_light: str = '#fff'
    image_transparent: bool = False
    image_base64: bool = False
    svg_draw_circular_modules: bool = False
    svg_keep_as_square: Sequence[TypeLike] = ()
    svg_circle_radius: float = 0.45
    svg_connect_paths: bool = False
    svg_exclude_from_connect: Sequence[TypeLike] = ()
    svg_view_box_size: Optional[int] = None
    svg_preserve_aspect_ratio: str = 'xMidYMid'
    svg_width: Optional[str] = None
    svg_height: Optional[str] = None
    svg_opacity: float = 1.0
    svg_defs: str = ''

    def replace(self, **changes) -> 'RenderOptions':
        return _replace(self, **changes)

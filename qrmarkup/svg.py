# -*- coding: utf-8 -*-
"""
SVG Path Output Module

Renders a QR matrix as an SVG document with one <path> element per module
type. Every module contributes a closed sub-path (a unit square or a circle)
to the path of its type, so a symbol needs only a handful of elements no
matter how large it is. With path connection enabled, modules of different
categories but equal darkness are drawn into the same data path.

Functions:
    svg_header: Opening <svg> tag with the viewBox and size attributes
    svg_module: Path segment for a single module
    collect_paths: Group module segments by effective type
    svg_paths: The <path> elements
    render_svg: Complete SVG document (or data URI)

See:
    https://developer.mozilla.org/en-US/docs/Web/SVG/Element/path
    https://developer.mozilla.org/en-US/docs/Web/SVG/Attribute/d
"""

import base64
import logging
from typing import Dict, List, Mapping, Optional

from .matrix import QRMatrix
from .module_types import effective_type, is_dark_type
from .options import RenderOptions

logger = logging.getLogger(__name__)

SVG_MIME_TYPE = 'image/svg+xml'


def _num(value: float) -> str:
    """Format a coordinate: integral values without '.0', 14 significant digits."""
    return f'{value:.14g}'


def base64encode(data: str, mime: str) -> str:
    """Encode text as a ``data:`` URI."""
    return f"data:{mime};base64,{base64.b64encode(data.encode('utf-8')).decode('ascii')}"


def svg_header(size: int, options: RenderOptions) -> str:
    """
    Return the XML declaration and the opening <svg> tag.

    Args:
        size (int): Matrix size in modules, used when no viewBox size is set
        options (RenderOptions): Render options

    Returns:
        str: Header markup ending with the end-of-line separator
    """
    eol = options.eol
    width = f' width="{options.svg_width}"' if options.svg_width is not None else ''
    height = f' height="{options.svg_height}"' if options.svg_height is not None else ''
    view_box = options.svg_view_box_size if options.svg_view_box_size is not None else size

    return (
        f'<?xml version="1.0" encoding="UTF-8"?>{eol}'
        f'<svg xmlns="http://www.w3.org/2000/svg" class="qr-svg {options.css_class}" '
        f'viewBox="0 0 {view_box} {view_box}" '
        f'preserveAspectRatio="{options.svg_preserve_aspect_ratio}"{width}{height}>{eol}'
    )


def svg_module(matrix: QRMatrix, x: int, y: int, options: RenderOptions) -> str:
    """
    Return the path segment of the module at (x, y).

    Light modules are empty when transparency is on. Circles are drawn as
    two half arcs around the module center.
    """
    if options.image_transparent and not matrix.check(x, y):
        return ''

    if options.svg_draw_circular_modules and not matrix.check_types(x, y, options.svg_keep_as_square):
        r = options.svg_circle_radius

        return (
            f'M{_num(x + 0.5 - r)} {_num(y + 0.5)} '
            f'a{_num(r)} {_num(r)} 0 1 0 {_num(r * 2)} 0 '
            f'a{_num(r)},{_num(r)} 0 1 0 -{_num(r * 2)} 0Z'
        )

    return f'M{x} {y} h1 v1 h-1Z'


def collect_paths(matrix: QRMatrix, options: RenderOptions) -> Dict[int, List[str]]:
    """
    Collect the module segments per effective type in row-major order.

    Args:
        matrix (QRMatrix): Matrix to render
        options (RenderOptions): Render options

    Returns:
        Dict[int, List[str]]: effective type -> segments (empty strings included)
    """
    paths: Dict[int, List[str]] = {}

    for x, y, module_type in matrix.iter_modules():
        if options.svg_connect_paths:
            module_type = effective_type(module_type, matrix.check(x, y), options.svg_exclude_from_connect)

        paths.setdefault(module_type, []).append(svg_module(matrix, x, y, options))

    return paths


def svg_paths(matrix: QRMatrix, values: Mapping[int, str], options: RenderOptions) -> str:
    """
    Return one <path> element per effective type, in ascending type order.

    Paths whose type resolves to an empty value carry no fill attributes so
    they can be styled from CSS through their classes.
    """
    paths = collect_paths(matrix, options)
    elements = []

    for module_type in sorted(paths):
        path = ' '.join(paths[module_type]).strip()

        if not path:
            continue

        css_class = ' '.join([
            f'qr-{module_type}',
            'dark' if is_dark_type(module_type) else 'light',
            options.css_class,
        ])
        value = values.get(module_type, '')

        if not value:
            elements.append(f'<path class="{css_class}" d="{path}"/>')
        else:
            elements.append(
                f'<path class="{css_class}" fill="{value}" fill-opacity="{_num(options.svg_opacity)}" d="{path}"/>'
            )

    logger.debug("svg: %d module types, %d path elements", len(paths), len(elements))
    return options.eol.join(elements)


def render_svg(
    matrix: QRMatrix,
    values: Mapping[int, str],
    options: RenderOptions,
    file: Optional[str] = None
) -> str:
    """
    Render the complete SVG document.

    Args:
        matrix (QRMatrix): Matrix to render
        values (Mapping[int, str]): Resolved module values
        options (RenderOptions): Render options
        file (Optional[str]): Target file; disables the data URI transform

    Returns:
        str: SVG markup, or a ``data:image/svg+xml;base64,`` URI
    """
    eol = options.eol
    svg = svg_header(matrix.size, options)

    if options.svg_defs:
        svg += f'<defs>{options.svg_defs}{eol}</defs>{eol}'

    svg += svg_paths(matrix, values, options)
    svg += f'{eol}</svg>{eol}'

    # data URI only when not saving to a file
    if file is None and options.image_base64:
        svg = base64encode(svg, SVG_MIME_TYPE)

    return svg

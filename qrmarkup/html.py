# -*- coding: utf-8 -*-
"""HTML grid output: one <span> per module, one <div> per row."""

from typing import Mapping, Optional

from .matrix import QRMatrix
from .options import RenderOptions


def render_html(
    matrix: QRMatrix,
    values: Mapping[int, str],
    options: RenderOptions,
    file: Optional[str] = None
) -> str:
    """
    Render the matrix as nested <div>/<span> elements.

    Args:
        matrix (QRMatrix): Matrix to render
        values (Mapping[int, str]): Resolved module values
        options (RenderOptions): Render options (eol, css_class)
        file (Optional[str]): Target file; wraps the grid in a full document

    Returns:
        str: HTML fragment or document
    """
    eol = options.eol
    out = ['<div>' if not options.css_class else f'<div class="{options.css_class}">', eol]

    for row in matrix.matrix():
        out.append('<div>')
        for module_type in row:
            out.append(f'<span style="background: {values.get(module_type, "")};"></span>')
        out.append('</div>' + eol)

    out.append('</div>' + eol)
    html = ''.join(out)

    if file is not None:
        return (
            '<!DOCTYPE html>'
            '<head><meta charset="UTF-8"><title>QR Code</title></head>'
            f'<body>{eol}{html}</body>'
        )

    return html

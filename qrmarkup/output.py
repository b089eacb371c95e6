# -*- coding: utf-8 -*-
"""
Markup Output Module

Ties the value table and the HTML/SVG renderers together. ``QRMarkup``
resolves the module values once per instance and renders the matrix in the
configured output type; ``dump`` additionally writes the result to a file.

Functions:
    render_markup: One-shot render of a matrix with the given options
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import QRMarkupError
from .html import render_html
from .matrix import QRMatrix
from .module_values import resolve_module_values
from .options import OUTPUT_MARKUP_HTML, OUTPUT_MARKUP_SVG, OUTPUT_TYPES, RenderOptions
from .svg import render_svg

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class QRMarkup:
    """
    Converts a typed QR matrix into HTML or SVG markup.

    Example:
        >>> from qrmarkup import QRMatrix, RenderOptions
        >>> from qrmarkup.module_types import M_DATA, IS_DARK
        >>> m = QRMatrix([[M_DATA | IS_DARK, M_DATA], [M_DATA, M_DATA | IS_DARK]])
        >>> svg = QRMarkup(m, RenderOptions()).dump()
        >>> svg.startswith('<?xml')
        True
    """

    def __init__(self, matrix: QRMatrix, options: Optional[RenderOptions] = None):
        self.matrix = matrix
        self.options = options if options is not None else RenderOptions()
        self.module_values: Dict[int, str] = resolve_module_values(self.options)

    def html(self, file: Optional[PathLike] = None) -> str:
        return render_html(self.matrix, self.module_values, self.options, file=file)

    def svg(self, file: Optional[PathLike] = None) -> str:
        return render_svg(self.matrix, self.module_values, self.options, file=file)

    def dump(self, file: Optional[PathLike] = None) -> str:
        """
        Render in the configured output type.

        Args:
            file (Optional[PathLike]): When given, the output is written there
                (HTML is wrapped in a full document, SVG is never base64-encoded)

        Returns:
            str: The rendered markup

        Raises:
            QRMarkupError: If ``options.output_type`` is not 'html' or 'svg'
        """
        output_type = self.options.output_type

        if output_type not in OUTPUT_TYPES:
            raise QRMarkupError(f"invalid output type: {output_type!r}")

        logger.debug("rendering %s for a %dx%d matrix", output_type, self.matrix.size, self.matrix.size)

        if output_type == OUTPUT_MARKUP_HTML:
            data = self.html(file)
        else:
            data = self.svg(file)

        if file is not None:
            Path(file).write_text(data, encoding='utf-8')
            logger.info("markup written to %s", file)

        return data


def render_markup(
    matrix: QRMatrix,
    options: Optional[RenderOptions] = None,
    file: Optional[PathLike] = None
) -> str:
    """Render ``matrix`` with ``options`` (SVG by default)."""
    return QRMarkup(matrix, options).dump(file)


__all__ = ['QRMarkup', 'render_markup', 'OUTPUT_MARKUP_HTML', 'OUTPUT_MARKUP_SVG']

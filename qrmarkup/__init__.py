# -*- coding: utf-8 -*-
"""
QR Markup - Core Module

Renders typed QR code matrices as HTML grids or SVG documents.

Modules:
    module_types: Module categories, the dark flag and default values
    matrix: Read-only typed module matrix
    functional_areas: Classification of QR modules into categories
    qr_generator: segno-backed symbol and matrix generation
    options: Render options with defaults
    module_values: Module value resolution
    html: HTML grid output
    svg: SVG path output
    output: Markup output dispatch and file dump
"""

__version__ = "1.0.0"
__author__ = "QR Generator Advanced Team"

from .errors import QRMarkupError
from .matrix import QRMatrix
from .module_types import IS_DARK, Category, ModuleType, effective_type
from .options import RenderOptions, OUTPUT_MARKUP_HTML, OUTPUT_MARKUP_SVG
from .module_values import resolve_module_values
from .output import QRMarkup, render_markup
from .qr_generator import make_qr, make_matrix

__all__ = [
    'QRMarkupError',
    'QRMatrix',
    'IS_DARK',
    'Category',
    'ModuleType',
    'effective_type',
    'RenderOptions',
    'OUTPUT_MARKUP_HTML',
    'OUTPUT_MARKUP_SVG',
    'resolve_module_values',
    'QRMarkup',
    'render_markup',
    'make_qr',
    'make_matrix'
]

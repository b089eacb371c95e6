#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Markup - Flask Web Application
"""

import logging
from io import BytesIO
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, render_template_string, request, send_file
from markupsafe import escape

from qrmarkup import QRMarkup, QRMatrix, RenderOptions, make_qr
from qrmarkup.module_types import Category, IS_DARK
from qrmarkup.module_values import sanitize_value

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

_CATEGORY_NAMES = {c.name.lower(): int(c) for c in Category}

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>QR Markup</title>
<style>
.qr-html > div { display: flex; }
.qr-html span { display: inline-block; width: 6px; height: 6px; }
.qr-preview svg { width: 300px; height: 300px; }
</style>
</head>
<body>
<form method="get" action="/">
  <input type="text" name="text" value="{{ text }}" placeholder="Texto a codificar">
  <select name="ecc">
    {% for level in ['L', 'M', 'Q', 'H'] %}
    <option value="{{ level }}" {% if level == ecc %}selected{% endif %}>{{ level }}</option>
    {% endfor %}
  </select>
  <label><input type="checkbox" name="circular" value="true" {% if options.svg_draw_circular_modules %}checked{% endif %}> círculos</label>
  <label><input type="checkbox" name="connect" value="true" {% if options.svg_connect_paths %}checked{% endif %}> conectar</label>
  <button type="submit">Generar</button>
</form>
{% if error %}<p class="error">{{ error }}</p>{% endif %}
{% if svg %}
<div class="qr-preview">{{ svg|safe }}</div>
{{ html|safe }}
<p>versión {{ version }}, {{ size }}x{{ size }} módulos</p>
{% endif %}
</body>
</html>
"""


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'on', 'yes')


def _as_float(value: Optional[str], default: Optional[float]) -> Optional[float]:
    try:
        return float(value) if value not in (None, '') else default
    except (ValueError, TypeError):
        return default


def _as_int(value: Optional[str], default: Optional[int]) -> Optional[int]:
    try:
        return int(value) if value not in (None, '') else default
    except (ValueError, TypeError):
        return default


def _as_text(value: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """Trim and HTML-escape a free-text value that ends up inside markup attributes."""
    if value is None or not value.strip():
        return default
    return str(escape(sanitize_value(value)))


def _as_types(value: Optional[str]) -> Tuple[int, ...]:
    """Parse 'finder,timing,alignment-dark' into module types."""
    types: List[int] = []
    for token in (value or '').split(','):
        token = token.strip().lower()
        dark = token.endswith('-dark')
        name = token[:-len('-dark')] if dark else token
        if name in _CATEGORY_NAMES:
            types.append(_CATEGORY_NAMES[name] | (IS_DARK if dark else 0))
        elif token:
            logger.warning(f"Unknown module type ignored: {token}")
    return tuple(types)


def _read_params(req) -> Tuple[str, str, str, str, int]:
    """Extract QR generation parameters from Flask request."""
    text = (req.values.get('text') or "").strip()
    ecc = (req.values.get('ecc') or "M").strip().upper()
    version = req.values.get('version') or "auto"
    mask = req.values.get('mask') or "auto"

    border = _as_int(req.values.get('border'), 4)
    if border < 0 or border > 20:
        border = 4

    return text, ecc, version, mask, border


def _read_render_options(req, output_type: str = 'svg') -> RenderOptions:
    """Build render options from request values, keeping defaults for bad input."""
    defaults = RenderOptions()
    module_values: Dict[Any, Any] = {}

    for name, value in _CATEGORY_NAMES.items():
        light = req.values.get(f'color_{name}')
        dark = req.values.get(f'color_{name}_dark')
        if light is not None:
            module_values[value] = _as_text(light, '')
        if dark is not None:
            module_values[value | IS_DARK] = _as_text(dark, '')

    return RenderOptions(
        output_type=output_type,
        css_class=_as_text(req.values.get('css_class'), ''),
        module_values=module_values,
        markup_dark=_as_text(req.values.get('dark'), defaults.markup_dark),
        markup_light=_as_text(req.values.get('light'), defaults.markup_light),
        image_transparent=_as_bool(req.values.get('transparent')),
        image_base64=_as_bool(req.values.get('base64')),
        svg_draw_circular_modules=_as_bool(req.values.get('circular')),
        svg_keep_as_square=_as_types(req.values.get('keep_as_square')),
        svg_circle_radius=_as_float(req.values.get('radius'), defaults.svg_circle_radius),
        svg_connect_paths=_as_bool(req.values.get('connect')),
        svg_exclude_from_connect=_as_types(req.values.get('exclude_from_connect')),
        svg_view_box_size=_as_int(req.values.get('viewbox'), None),
        svg_preserve_aspect_ratio=_as_text(req.values.get('aspect'), defaults.svg_preserve_aspect_ratio),
        svg_width=_as_text(req.values.get('width')),
        svg_height=_as_text(req.values.get('height')),
        svg_opacity=_as_float(req.values.get('opacity'), defaults.svg_opacity),
    )


def _build_matrix(req) -> Tuple[Optional[QRMatrix], Optional[int], Optional[str]]:
    """Generate the symbol for a request. Returns (matrix, version, error)."""
    text, ecc, version, mask, border = _read_params(req)
    if not text:
        return None, None, "Falta texto"

    try:
        logger.info(f"Generating QR code with parameters: ecc={ecc}, version={version}, mask={mask}")
        symbol = make_qr(text, ecc=ecc, version=version, mask=mask)
    except Exception as ex:
        logger.error(f"QR generation failed: {ex}")
        return None, None, f"No se pudo generar el QR con los parámetros elegidos: {ex}"

    return QRMatrix.from_segno(symbol, border=border), symbol.version, None


app = Flask(__name__)


@app.route('/', methods=['GET'])
def index():
    text, ecc, _, _, _ = _read_params(request)
    options = _read_render_options(request)
    view: Dict[str, Any] = {'svg': None, 'html': None, 'version': None, 'size': None, 'error': None}

    if text:
        matrix, version, error = _build_matrix(request)
        if error:
            view['error'] = error
        else:
            # inline preview: never a data URI, no XML declaration
            svg = QRMarkup(matrix, options.replace(image_base64=False)).svg()
            view.update(
                svg=svg[svg.index('<svg'):],
                html=QRMarkup(matrix, options.replace(output_type='html', css_class='qr-html')).html(),
                version=version,
                size=matrix.size,
            )

    return render_template_string(INDEX_TEMPLATE, text=text, ecc=ecc, options=options, **view)


@app.route('/markup/svg', methods=['GET'])
def export_svg():
    matrix, _, error = _build_matrix(request)
    if error:
        return error, 400

    options = _read_render_options(request, 'svg')
    data = QRMarkup(matrix, options).dump()

    if options.image_base64:
        return data, 200, {'Content-Type': 'text/plain; charset=utf-8'}

    return send_file(BytesIO(data.encode('utf-8')), as_attachment=True,
                     download_name='qr.svg',
                     mimetype='image/svg+xml')


@app.route('/markup/html', methods=['GET'])
def export_html():
    matrix, _, error = _build_matrix(request)
    if error:
        return error, 400

    options = _read_render_options(request, 'html')
    # a downloaded file gets the standalone document wrapper
    data = QRMarkup(matrix, options).html(file='qr.html')
    return send_file(BytesIO(data.encode('utf-8')), as_attachment=True,
                     download_name='qr.html',
                     mimetype='text/html')


if __name__ == "__main__":
    app.run(debug=True)

# -*- coding: utf-8 -*-
"""
Module Value Resolution

Maps every known module type to the value used when drawing it (a CSS
color in practice). User overrides are cleaned of markup and quoting;
anything that is not a string falls back to the dark/light default.
"""

import re
from typing import Any, Dict, Mapping

from .module_types import DEFAULT_MODULE_VALUES, to_value
from .options import RenderOptions

_TAG_RE = re.compile(r'<(?!\s)[^>]*>')
_TRIM_CHARS = " '\"\r\n\t"


def sanitize_value(value: str) -> str:
    """
    Strip markup tags, then surrounding quotes and whitespace.

    Example:
        >>> sanitize_value("  'red' \\n")
        'red'
        >>> sanitize_value('<b>blue</b>')
        'blue'
    """
    return _TAG_RE.sub('', value).strip(_TRIM_CHARS)


def _normalize_overrides(overrides: Mapping[Any, Any]) -> Dict[int, Any]:
    normalized = {}
    for key, value in overrides.items():
        try:
            normalized[to_value(key)] = value
        except (TypeError, ValueError):
            # unknown keys can never match a module type
            continue
    return normalized


def resolve_module_values(options: RenderOptions) -> Dict[int, str]:
    """
    Build the type -> value table for one render.

    Args:
        options (RenderOptions): Render options carrying overrides and defaults

    Returns:
        Dict[int, str]: Value for every type in ``DEFAULT_MODULE_VALUES``
    """
    overrides = _normalize_overrides(options.module_values or {})
    values = {}

    for module_type, dark_by_default in DEFAULT_MODULE_VALUES.items():
        value = overrides.get(module_type)

        if not isinstance(value, str):
            values[module_type] = options.markup_dark if dark_by_default else options.markup_light
        else:
            values[module_type] = sanitize_value(value)

    return values

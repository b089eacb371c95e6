"""Unit tests for qrmarkup.module_values."""

import pytest

from qrmarkup import RenderOptions, resolve_module_values
from qrmarkup.module_types import (
    DEFAULT_MODULE_VALUES,
    IS_DARK,
    M_DATA,
    M_FINDER,
    M_TIMING,
    Category,
    ModuleType,
)
from qrmarkup.module_values import sanitize_value


@pytest.mark.unit
class TestSanitizeValue:
    def test_trims_quotes_and_whitespace(self):
        assert sanitize_value("  'red' \n") == 'red'

    def test_strips_tags(self):
        assert sanitize_value('<b>blue</b>') == 'blue'

    def test_strips_tags_then_trims(self):
        assert sanitize_value('"<i> #abc </i>"') == '#abc'

    def test_keeps_lone_angle_bracket(self):
        assert sanitize_value('a < b') == 'a < b'

    def test_keeps_inner_text(self):
        assert sanitize_value('rgb(0, 0, 0)') == 'rgb(0, 0, 0)'


@pytest.mark.unit
class TestResolveModuleValues:
    def test_defaults_cover_every_type(self, options):
        values = resolve_module_values(options)
        assert set(values) == set(DEFAULT_MODULE_VALUES)
        assert values[M_DATA] == '#fff'
        assert values[M_DATA | IS_DARK] == '#000'

    def test_configured_defaults(self):
        values = resolve_module_values(RenderOptions(markup_dark='navy', markup_light='ivory'))
        assert values[M_FINDER | IS_DARK] == 'navy'
        assert values[M_FINDER] == 'ivory'

    def test_string_overrides_are_sanitized(self):
        values = resolve_module_values(RenderOptions(module_values={
            M_DATA | IS_DARK: "  'red' \n",
            M_DATA: '<b>blue</b>',
        }))
        assert values[M_DATA | IS_DARK] == 'red'
        assert values[M_DATA] == 'blue'

    @pytest.mark.parametrize("override", [None, 42, 1.5, ['red'], True])
    def test_non_string_override_falls_back(self, override):
        values = resolve_module_values(RenderOptions(module_values={
            M_TIMING: override,
            M_TIMING | IS_DARK: override,
        }))
        assert values[M_TIMING] == '#fff'
        assert values[M_TIMING | IS_DARK] == '#000'

    def test_module_type_keys(self):
        values = resolve_module_values(RenderOptions(module_values={
            ModuleType(Category.FINDER, True): 'purple',
        }))
        assert values[M_FINDER | IS_DARK] == 'purple'
        assert values[M_FINDER] == '#fff'

    def test_unknown_keys_are_ignored(self):
        values = resolve_module_values(RenderOptions(module_values={'finder': 'red'}))
        assert values == resolve_module_values(RenderOptions())

    def test_empty_string_is_kept(self):
        values = resolve_module_values(RenderOptions(module_values={M_DATA: "''"}))
        assert values[M_DATA] == ''

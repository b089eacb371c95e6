"""Unit tests for qrmarkup.module_types.

Tests cover:
- ModuleType integer projection and parsing
- DEFAULT_MODULE_VALUES coverage of light and dark variants
- effective_type collapse and exclusion
"""

import pytest

from qrmarkup.module_types import (
    DEFAULT_MODULE_VALUES,
    IS_DARK,
    M_ALIGNMENT,
    M_DARKMODULE,
    M_DATA,
    M_FINDER,
    M_NULL,
    M_TIMING,
    Category,
    ModuleType,
    effective_type,
    is_dark_type,
    to_value,
)


@pytest.mark.unit
class TestModuleType:
    def test_value_light(self):
        assert ModuleType(Category.FINDER).value == M_FINDER

    def test_value_dark(self):
        assert ModuleType(Category.FINDER, True).value == M_FINDER | IS_DARK

    def test_from_value(self):
        assert ModuleType.from_value(M_TIMING | IS_DARK) == ModuleType(Category.TIMING, True)
        assert ModuleType.from_value(M_DATA) == ModuleType(Category.DATA, False)

    def test_to_value_accepts_both(self):
        assert to_value(ModuleType(Category.ALIGNMENT, True)) == M_ALIGNMENT | IS_DARK
        assert to_value(M_ALIGNMENT) == M_ALIGNMENT

    def test_categories_do_not_overlap_dark_flag(self):
        for category in Category:
            assert (int(category) & IS_DARK) == 0

    def test_is_dark_type(self):
        assert is_dark_type(M_DATA | IS_DARK)
        assert not is_dark_type(M_DATA)


@pytest.mark.unit
class TestDefaultModuleValues:
    def test_every_category_has_dark_variant(self):
        for category in Category:
            if category is Category.NULL:
                continue
            assert DEFAULT_MODULE_VALUES[int(category) | IS_DARK] is True

    def test_light_variants_are_light(self):
        assert DEFAULT_MODULE_VALUES[M_DATA] is False
        assert DEFAULT_MODULE_VALUES[M_NULL] is False

    def test_dark_module_has_both_variants(self):
        assert DEFAULT_MODULE_VALUES[M_DARKMODULE] is False
        assert DEFAULT_MODULE_VALUES[M_DARKMODULE | IS_DARK] is True


@pytest.mark.unit
class TestEffectiveType:
    def test_collapses_dark_to_dark_data(self):
        assert effective_type(M_FINDER | IS_DARK, True) == M_DATA | IS_DARK

    def test_collapses_light_to_light_data(self):
        assert effective_type(M_TIMING, False) == M_DATA

    def test_excluded_category_keeps_native_type(self):
        assert effective_type(M_FINDER | IS_DARK, True, [M_FINDER]) == M_FINDER | IS_DARK
        assert effective_type(M_FINDER, False, [M_FINDER]) == M_FINDER

    def test_dark_only_exclusion(self):
        exclude = [M_FINDER | IS_DARK]
        assert effective_type(M_FINDER | IS_DARK, True, exclude) == M_FINDER | IS_DARK
        assert effective_type(M_FINDER, False, exclude) == M_DATA

    def test_module_type_in_exclusion(self):
        exclude = [ModuleType(Category.TIMING)]
        assert effective_type(M_TIMING | IS_DARK, True, exclude) == M_TIMING | IS_DARK

# -*- coding: utf-8 -*-
"""
QR Module Types Module

Every module of a QR matrix carries a type: one structural category (data,
finder, timing, ...) plus an independent dark flag. The integer projection
``category | IS_DARK`` is what the matrix stores and what the renderers sort
and key on; ``ModuleType`` is the tagged view of the same value.

Functions:
    effective_type: Collapse a module type into the data bucket for path connection
    is_dark_type: Test the dark flag of an integer module type
"""

from enum import IntEnum
from typing import Dict, Iterable, NamedTuple, Union


# Dark flag, orthogonal to the category bits
IS_DARK = 0b100000000000


class Category(IntEnum):
    """Structural category of a module (mutually exclusive bit values)."""
    NULL = 0b000000000000
    DARKMODULE = 0b000000000001
    DATA = 0b000000000010
    FINDER = 0b000000000100
    SEPARATOR = 0b000000001000
    ALIGNMENT = 0b000000010000
    TIMING = 0b000000100000
    FORMAT = 0b000001000000
    VERSION = 0b000010000000
    QUIETZONE = 0b000100000000
    LOGO = 0b001000000000
    FINDER_DOT = 0b010000000000


M_NULL = int(Category.NULL)
M_DARKMODULE = int(Category.DARKMODULE)
M_DATA = int(Category.DATA)
M_FINDER = int(Category.FINDER)
M_SEPARATOR = int(Category.SEPARATOR)
M_ALIGNMENT = int(Category.ALIGNMENT)
M_TIMING = int(Category.TIMING)
M_FORMAT = int(Category.FORMAT)
M_VERSION = int(Category.VERSION)
M_QUIETZONE = int(Category.QUIETZONE)
M_LOGO = int(Category.LOGO)
M_FINDER_DOT = int(Category.FINDER_DOT)


class ModuleType(NamedTuple):
    """
    Tagged module type: a category and a dark flag.

    Example:
        >>> ModuleType(Category.FINDER, True).value == M_FINDER | IS_DARK
        True
        >>> ModuleType.from_value(M_DATA)
        ModuleType(category=<Category.DATA: 2>, dark=False)
    """
    category: Category
    dark: bool = False

    @property
    def value(self) -> int:
        return int(self.category) | (IS_DARK if self.dark else 0)

    @classmethod
    def from_value(cls, value: int) -> 'ModuleType':
        return cls(Category(value & ~IS_DARK), is_dark_type(value))

    def __int__(self) -> int:
        return self.value


TypeLike = Union[int, ModuleType]


def to_value(module_type: TypeLike) -> int:
    """Integer projection of an int or ``ModuleType``."""
    if isinstance(module_type, ModuleType):
        return module_type.value
    return int(module_type)


def is_dark_type(value: int) -> bool:
    return (value & IS_DARK) == IS_DARK


# Whether each known type renders dark when the caller supplies no value
DEFAULT_MODULE_VALUES: Dict[int, bool] = {}
for _category in Category:
    DEFAULT_MODULE_VALUES[int(_category)] = False
for _category in Category:
    if _category is not Category.NULL:
        DEFAULT_MODULE_VALUES[int(_category) | IS_DARK] = True
del _category


def effective_type(native: int, dark: bool, exclude: Iterable[TypeLike] = ()) -> int:
    """
    Resolve the type a module is grouped under when connecting paths.

    Modules whose native type matches none of ``exclude`` (bitwise, the same
    test as ``QRMatrix.check_types``) are redeclared as plain data modules of
    the same darkness, so neighbouring finder/timing/data modules end up in a
    single outline. Excluded modules keep their native type.

    Args:
        native (int): Native integer module type
        dark (bool): Whether the module is dark
        exclude (Iterable[TypeLike]): Types kept out of the merge

    Returns:
        int: Effective integer module type

    Example:
        >>> effective_type(M_FINDER | IS_DARK, True) == M_DATA | IS_DARK
        True
        >>> effective_type(M_FINDER | IS_DARK, True, [M_FINDER]) == M_FINDER | IS_DARK
        True
    """
    for module_type in exclude:
        mask = to_value(module_type)
        if (native & mask) == mask:
            return native

    return M_DATA | IS_DARK if dark else M_DATA

# -*- coding: utf-8 -*-
"""
QR Matrix Module

Read-only grid of integer module types consumed by the markup renderers.
A matrix is usually built from a ``segno`` symbol (see ``QRMatrix.from_segno``)
but any square grid of module types can be wrapped directly.
"""

from typing import Iterable, Iterator, Sequence, Tuple

from .errors import QRMarkupError
from .functional_areas import build_module_types
from .module_types import IS_DARK, TypeLike, to_value


class QRMatrix:
    """
    Immutable square matrix of module types, addressed as (x, y).

    Example:
        >>> from qrmarkup.module_types import M_DATA, IS_DARK
        >>> m = QRMatrix([[M_DATA | IS_DARK, M_DATA], [M_DATA, M_DATA]])
        >>> m.check(0, 0), m.check(1, 0)
        (True, False)
    """

    def __init__(self, rows: Iterable[Iterable[TypeLike]]):
        self._rows: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(to_value(t) for t in row) for row in rows
        )
        size = len(self._rows)
        for y, row in enumerate(self._rows):
            if len(row) != size:
                raise ValueError(f"matrix must be square: row {y} has {len(row)} modules, expected {size}")

    @classmethod
    def from_segno(cls, symbol, border: int = 0) -> 'QRMatrix':
        """
        Classify the modules of a ``segno.QRCode`` into typed modules.

        Args:
            symbol: ``segno.QRCode`` instance
            border (int): Quiet zone width in modules added around the symbol

        Raises:
            QRMarkupError: for Micro QR symbols (no functional layout tables)
        """
        if getattr(symbol, 'is_micro', False):
            raise QRMarkupError(f"Micro QR symbols are not supported (version {symbol.version})")

        return cls(build_module_types(symbol.matrix, int(symbol.version), border=border))

    @property
    def size(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def matrix(self) -> Tuple[Tuple[int, ...], ...]:
        """Rows from top to bottom."""
        return self._rows

    def iter_modules(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (x, y, type) in row-major order."""
        for y, row in enumerate(self._rows):
            for x, module_type in enumerate(row):
                yield x, y, module_type

    def get(self, x: int, y: int) -> int:
        return self._rows[y][x]

    def check(self, x: int, y: int) -> bool:
        """True if the module at (x, y) is dark."""
        return (self._rows[y][x] & IS_DARK) == IS_DARK

    def check_type(self, x: int, y: int, module_type: TypeLike) -> bool:
        mask = to_value(module_type)
        return (self._rows[y][x] & mask) == mask

    def check_types(self, x: int, y: int, module_types: Sequence[TypeLike]) -> bool:
        """True if the module at (x, y) matches any of the given types."""
        return any(self.check_type(x, y, t) for t in module_types)

    def __eq__(self, other) -> bool:
        if not isinstance(other, QRMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"QRMatrix(size={self.size})"

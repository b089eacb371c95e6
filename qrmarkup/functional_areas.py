# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module classifies the modules of a QR code according to the ISO/IEC
18004 layout: finder patterns, separators, timing patterns, alignment
patterns, format and version information, the dark module and the data
region. The result is a grid of integer module types (category bits plus
the dark flag) as consumed by ``QRMatrix``.

Functions:
    compute_alignment_centers: Calculate alignment pattern center positions
    classify_module: Category of a single module position
    build_module_types: Build the typed module grid for a boolean matrix
"""

from typing import List, Sequence

from .module_types import (
    IS_DARK, M_ALIGNMENT, M_DARKMODULE, M_DATA, M_FINDER, M_FORMAT,
    M_QUIETZONE, M_SEPARATOR, M_TIMING, M_VERSION,
)


def compute_alignment_centers(version: int) -> List[int]:
    """
    Calculate the center positions of alignment patterns for a given QR version.

    Alignment patterns are 5x5 modules used to correct for perspective distortion
    in QR codes. Version 1 has no alignment patterns; the same coordinate list
    applies to rows and columns.

    Args:
        version (int): QR code version (1-40)

    Returns:
        List[int]: List of center coordinates for alignment patterns

    Example:
        >>> compute_alignment_centers(7)
        [6, 22, 38]
        >>> compute_alignment_centers(32)
        [6, 34, 60, 86, 112, 138]
    """
    if version == 1:
        return []

    size = 17 + version * 4
    num = version // 7 + 2
    last = size - 7

    # Version 32 is the one irregular spacing in the standard table
    if version == 32:
        step = 26
    else:
        step = ((version * 4 + num * 2 + 1) // (2 * num - 2)) * 2

    return [6] + [last - i * step for i in reversed(range(num - 1))]


def classify_module(r: int, c: int, size: int, version: int, centers: Sequence[int]) -> int:
    """
    Return the category of the module at row ``r``, column ``c``.

    Precedence follows the order patterns are placed in a symbol: finders and
    separators first, then the dark module, format and version information,
    alignment patterns (which may sit on the timing lines) and finally timing.
    Everything else is data.
    """
    # 1. FINDER PATTERNS and SEPARATORS (8x8 corner blocks)
    for (r0, c0) in ((0, 0), (0, size - 7), (size - 7, 0)):
        if r0 <= r < r0 + 7 and c0 <= c < c0 + 7:
            return M_FINDER
        if r0 - 1 <= r <= r0 + 7 and c0 - 1 <= c <= c0 + 7:
            return M_SEPARATOR

    # 2. DARK MODULE (always dark, next to the bottom-left finder)
    if r == 4 * version + 9 and c == 8:
        return M_DARKMODULE

    # 3. FORMAT INFORMATION (15 bits, twice)
    if r == 8 and (c <= 8 or c >= size - 8) and c != 6:
        return M_FORMAT
    if c == 8 and (r <= 8 or r >= size - 7) and r != 6:
        return M_FORMAT

    # 4. VERSION INFORMATION (two 6x3 blocks, v7+)
    if version >= 7:
        if r < 6 and size - 11 <= c < size - 8:
            return M_VERSION
        if c < 6 and size - 11 <= r < size - 8:
            return M_VERSION

    # 5. ALIGNMENT PATTERNS (5x5, v2+, never over a finder)
    for cy in centers:
        if abs(r - cy) > 2:
            continue
        for cx in centers:
            if (cy == 6 and cx == 6) or (cy == 6 and cx == size - 7) or (cy == size - 7 and cx == 6):
                continue
            if abs(c - cx) <= 2:
                return M_ALIGNMENT

    # 6. TIMING PATTERNS (row 6 and column 6)
    if r == 6 or c == 6:
        return M_TIMING

    return M_DATA


def build_module_types(rows: Sequence[Sequence[int]], version: int, border: int = 0) -> List[List[int]]:
    """
    Build the typed module grid of a QR code.

    Args:
        rows (Sequence[Sequence[int]]): QR matrix without quiet zone (truthy=dark)
        version (int): QR code version (1-40)
        border (int): Quiet zone width in modules to add on every side

    Returns:
        List[List[int]]: Grid of integer module types, ``size + 2 * border`` wide

    Example:
        >>> import segno
        >>> qr = segno.make('hello', micro=False)
        >>> grid = build_module_types(qr.matrix, qr.version, border=2)
        >>> len(grid)
        25
    """
    rows = [list(row) for row in rows]
    size = len(rows)
    centers = compute_alignment_centers(version)
    total = size + 2 * border

    grid = [[M_QUIETZONE] * total for _ in range(total)]

    for r in range(size):
        for c in range(size):
            category = classify_module(r, c, size, version, centers)
            dark = bool(rows[r][c]) or category == M_DARKMODULE
            grid[r + border][c + border] = category | IS_DARK if dark else category

    return grid

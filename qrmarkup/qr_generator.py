# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Thin layer over ``segno`` that produces the typed matrices the markup
renderers consume. Encoding and error correction are entirely segno's job.

Functions:
    make_qr: Generate a QR code symbol with specified parameters
    make_matrix: Generate a symbol and classify its modules
"""

import segno
from typing import Optional, Union

from .matrix import QRMatrix


def make_qr(
    text: str,
    ecc: str = 'M',
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = None,
    encoding: Optional[str] = None,
    eci: bool = False,
    mask: Union[str, int] = 'auto',
    boost_error: bool = True
) -> segno.QRCode:
    """
    Generate a QR code symbol with specified parameters.

    Args:
        text (str): The data to encode in the QR code
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): QR code version (1-40) or 'auto'
        mode (Optional[str]): 'numeric', 'alphanumeric', 'byte', 'kanji' or None (auto)
        encoding (Optional[str]): Character encoding for byte mode
        eci (bool): Add an ECI header with the encoding
        mask (Union[str, int]): 'auto' or a mask pattern 0-7
        boost_error (bool): Increase the ECC level if the version allows it

    Returns:
        segno.QRCode: Generated QR code object (never Micro QR)

    Raises:
        ValueError: If parameters are invalid
        segno.DataOverflowError: If data doesn't fit in specified version

    Example:
        >>> qr = make_qr("https://example.com", ecc='M', version='auto')
    """
    mask_arg = None if mask in (None, 'auto') else int(mask)
    ver_arg = None if (version in (None, 'auto')) else int(version)

    return segno.make(
        text,
        error=ecc,
        version=ver_arg,
        mode=mode,
        encoding=encoding,
        eci=bool(eci),
        mask=mask_arg,
        boost_error=bool(boost_error),
        micro=False
    )


def make_matrix(text: str, border: int = 0, **kwargs) -> QRMatrix:
    """
    Generate a QR code and return its typed module matrix.

    Args:
        text (str): The data to encode
        border (int): Quiet zone width in modules
        **kwargs: Passed on to ``make_qr``

    Returns:
        QRMatrix: Typed matrix, ``symbol size + 2 * border`` modules wide
    """
    return QRMatrix.from_segno(make_qr(text, **kwargs), border=border)

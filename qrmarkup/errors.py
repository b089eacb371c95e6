# -*- coding: utf-8 -*-
"""Exceptions raised by the qrmarkup collaborators (the renderers never raise)."""


class QRMarkupError(Exception):
    """Raised for unsupported symbols or output types."""

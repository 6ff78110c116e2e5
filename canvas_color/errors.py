# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Hard errors raised by the color engine.

All errors derive from ``ValueError`` so existing ``except ValueError``
handlers keep working. Soft problems (low contrast, lossy terminal tiers)
are never raised; they are reported as ``ValidationIssue`` values.
"""


class CanvasColorError(ValueError):
    """Base class for color engine failures."""


class InvalidColorFormat(CanvasColorError):
    """The input matches no recognized color shape."""


class OutOfRangeComponent(CanvasColorError):
    """A recognized shape carries a channel outside its valid range."""


class UnsupportedOutputFormat(CanvasColorError):
    """Unknown output format tag (only raised in strict mode)."""

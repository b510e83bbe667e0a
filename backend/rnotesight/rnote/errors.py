"""Render error taxonomy.

Document-level problems are fatal and surface as a single ``RenderError``.
Element-level gaps are not errors: ``UnsupportedElement`` only tells the
geometry builder to drop the element, and never leaves it.
"""

from __future__ import annotations


class RenderError(Exception):
    """Base class for every failure that aborts a render pass."""

    def describe(self) -> str:
        return f"Error rendering Rnote file: {self}"


class DecompressionError(RenderError):
    """The input bytes do not inflate to UTF-8 text."""


class MalformedDocument(RenderError):
    """The inflated text is not JSON, or lacks the stroke component path."""


class UnsupportedElement(Exception):
    """An element cannot produce a primitive and must be skipped."""


class DocumentNotFound(LookupError):
    """No readable ``.rnote`` file exists for the requested name."""

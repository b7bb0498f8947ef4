# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Shared value types (spans, diagnostics) used across the linter."""

from .diagnostics import Diagnostic
from .span import Span

__all__ = ["Diagnostic", "Span"]

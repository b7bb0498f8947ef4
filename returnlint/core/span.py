# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source positions for diagnostics.

A Span is the linter's view of "where": the file name when known plus the
1-based line/column of the node that triggered a report. Parser locations are
converted with `Span.from_loc` so the checker never depends on lark types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Best-effort file/line/column position (`Span()` means unknown)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None

	@classmethod
	def from_loc(cls, loc: Any, file: Optional[str] = None) -> "Span":
		"""
		Build a Span from a parser location object.

		Spans pass through unchanged unless `file` fills in a missing name.
		Anything else is read duck-typed (`line`/`column` attributes) so hand-built
		trees without locations still produce a structured Span.
		"""
		if loc is None:
			return cls(file=file)
		if isinstance(loc, cls):
			if loc.file is None and file is not None:
				return cls(file=file, line=loc.line, column=loc.column)
			return loc
		return cls(
			file=file or getattr(loc, "file", None),
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
		)

	def format(self) -> str:
		"""Render as `file:line:col`, dropping the parts that are unknown."""
		parts = []
		if self.file:
			parts.append(self.file)
		if self.line is not None:
			parts.append(str(self.line))
			parts.append(str(self.column if self.column is not None else 0))
		return ":".join(parts) if parts else "<unknown location>"


__all__ = ["Span"]

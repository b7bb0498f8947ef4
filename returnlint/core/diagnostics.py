# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic record emitted by the analyzer and the driver.

A diagnostic is created once and never mutated: the checker builds it, the
reporter hands it to the host, the host renders it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass(frozen=True)
class Diagnostic:
	"""A single finding (position plus message)."""

	message: str
	span: Span = field(default_factory=Span)
	code: str | None = None
	# Which stage produced it: "analysis" for rule findings, "parser"/"driver"
	# for problems reading the input.
	phase: str | None = None
	severity: str = "error"
	notes: tuple[str, ...] = ()

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			object.__setattr__(self, "span", Span())

	def to_json(self, default_file: str | None = None) -> dict:
		"""Render to the JSON shape used by `--json` output."""
		return {
			"phase": self.phase,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file or default_file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}

	def __str__(self) -> str:
		return f"{self.span.format()}: {self.message}"


__all__ = ["Diagnostic"]

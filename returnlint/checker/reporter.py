# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Diagnostic sink owned by one analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from returnlint.core.diagnostics import Diagnostic


@dataclass
class Reporter:
	"""
	Collects diagnostics in emission order.

	No filtering and no deduplication: two reports of the same finding are two
	entries. The host merges reporters from separate runs.
	"""

	diagnostics: List[Diagnostic] = field(default_factory=list)

	def report(self, diagnostic: Diagnostic) -> None:
		self.diagnostics.append(diagnostic)


__all__ = ["Reporter"]

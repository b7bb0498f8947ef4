# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Plugin registration for host lint drivers."""

from __future__ import annotations

from typing import Any, List

from returnlint.analyzer import ANALYZER, Analyzer


def get_analyzers() -> List[Analyzer]:
	return [ANALYZER]


def new(conf: Any = None) -> List[Analyzer]:
	"""Plugin constructor. `conf` is accepted for driver compatibility and ignored."""
	return [ANALYZER]


__all__ = ["get_analyzers", "new"]

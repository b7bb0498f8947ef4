# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
returnlint: flags `w.WriteHeader(...)` calls in Go HTTP middleware closures
that are not immediately followed by a `return` statement.
"""

from returnlint.analyzer import ANALYZER, Analyzer, Pass, analyze_source, run
from returnlint.core.diagnostics import Diagnostic

__version__ = "0.1.0"

__all__ = ["ANALYZER", "Analyzer", "Diagnostic", "Pass", "analyze_source", "run"]

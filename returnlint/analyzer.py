# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Analysis entry points.

`run` is the whole rule over one parsed file:

  for each function declaration shaped like middleware
    for each closure handed to http.HandlerFunc
      check the closure body for WriteHeader calls not followed by return

`Analyzer` and `Pass` give host drivers (the CLI, plugins, the test harness)
the same shape a Go analysis framework would: a named analyzer whose `run`
receives a pass object carrying the file and a reporter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from returnlint.checker.adjacency import check_block
from returnlint.checker.closure import find_closure_bodies
from returnlint.checker.names import qualifiers_for
from returnlint.checker.reporter import Reporter
from returnlint.checker.signature import matches_signature
from returnlint.core.diagnostics import Diagnostic
from returnlint.parser import parse_file
from returnlint.parser.ast import File, FuncDecl

logger = logging.getLogger(__name__)

DOC = "checks that WriteHeader calls in HTTP middleware are immediately followed by a return statement"


@dataclass
class Pass:
	"""One analysis run over one file. Owns its reporter."""

	file: File
	filename: Optional[str] = None
	reporter: Reporter = field(default_factory=Reporter)

	def report(self, diagnostic: Diagnostic) -> None:
		self.reporter.report(diagnostic)

	@property
	def diagnostics(self) -> List[Diagnostic]:
		return self.reporter.diagnostics


def _check_function(fn: FuncDecl, pass_: Pass) -> None:
	names = qualifiers_for(pass_.file)
	if not matches_signature(fn, names):
		return
	logger.debug("%s: middleware signature matched", fn.name)
	for body in find_closure_bodies(fn, names):
		for diag in check_block(body, filename=pass_.filename):
			pass_.report(diag)


def _run_pass(pass_: Pass) -> None:
	for decl in pass_.file.decls:
		if isinstance(decl, FuncDecl):
			_check_function(decl, pass_)


@dataclass(frozen=True)
class Analyzer:
	name: str
	doc: str
	run: Callable[[Pass], None]


ANALYZER = Analyzer(name="returnlint", doc=DOC, run=_run_pass)


def run(file: File, filename: str | None = None) -> List[Diagnostic]:
	"""Run the rule over a parsed file and return its diagnostics in order."""
	pass_ = Pass(file=file, filename=filename or file.filename)
	ANALYZER.run(pass_)
	return pass_.diagnostics


def analyze_source(source: str, filename: str | None = None) -> List[Diagnostic]:
	"""Parse Go source text and run the rule. Raises `GoSyntaxError` on bad input."""
	return run(parse_file(source, filename=filename), filename=filename)


__all__ = ["ANALYZER", "Analyzer", "DOC", "Pass", "analyze_source", "run"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line driver.

Lints Go files (or directories of them) and reports every WriteHeader call in
middleware closures that is not followed by `return`. Files that cannot be read
or parsed are reported as diagnostics of their own; the remaining files are
still analyzed.

With --json, prints `{"exit_code", "diagnostics": [...]}` on stdout; otherwise
prints `file:line:col: message` lines to stderr. Exit code is 1 when anything
was reported.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List

from returnlint.analyzer import analyze_source
from returnlint.core.diagnostics import Diagnostic
from returnlint.core.span import Span
from returnlint.parser import GoSyntaxError

logger = logging.getLogger(__name__)

SKIP_DIRS = {"vendor", "testdata"}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
	ap = argparse.ArgumentParser(
		prog="returnlint",
		description="Check that WriteHeader calls in HTTP middleware are followed by return",
	)
	ap.add_argument("paths", nargs="*", default=["."], help="Go files or directories to lint")
	ap.add_argument("--json", action="store_true", help="Emit diagnostics as JSON on stdout")
	ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	return ap.parse_args(argv)


def _setup_logging(verbose: bool) -> None:
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(levelname)s: %(message)s",
		stream=sys.stderr,
	)


def _collect_files(targets: Iterable[str]) -> Iterator[Path]:
	seen = set()
	for target in targets:
		base = Path(target)
		if base.is_dir():
			candidates = sorted(
				p for p in base.rglob("*.go") if not SKIP_DIRS.intersection(p.relative_to(base).parts[:-1])
			)
		else:
			# Explicit paths are linted even when they sit under a skipped directory.
			candidates = [base]
		for path in candidates:
			if path not in seen:
				seen.add(path)
				yield path


def lint_path(path: Path) -> List[Diagnostic]:
	"""Lint one file; read and parse failures come back as diagnostics."""
	filename = str(path)
	try:
		source = path.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as exc:
		return [Diagnostic(message=f"cannot read file: {exc}", span=Span(file=filename), phase="driver")]
	try:
		diagnostics = analyze_source(source, filename=filename)
	except GoSyntaxError as exc:
		return [Diagnostic(message=str(exc), span=Span.from_loc(exc.loc, file=filename), phase="parser")]
	logger.info("%s: %d diagnostic(s)", filename, len(diagnostics))
	return diagnostics


def main(argv: list[str] | None = None) -> int:
	args = _parse_args(argv)
	_setup_logging(args.verbose)

	files = list(_collect_files(args.paths))
	if not files:
		logger.warning("no .go files found")

	diagnostics: List[Diagnostic] = []
	for path in files:
		diagnostics.extend(lint_path(path))

	exit_code = 1 if diagnostics else 0
	if args.json:
		payload = {
			"exit_code": exit_code,
			"diagnostics": [d.to_json() for d in diagnostics],
		}
		print(json.dumps(payload))
	else:
		for diag in diagnostics:
			print(str(diag), file=sys.stderr)
	return exit_code


if __name__ == "__main__":
	sys.exit(main())

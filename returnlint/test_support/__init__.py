# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Expectation harness for Go fixtures.

Fixtures live under `<testdata>/src/<package>/*.go`. A line that should produce
a diagnostic carries a trailing comment:

	w.WriteHeader(http.StatusOK) // want "not immediately followed"

Each quoted string is a regular expression (`re.search`) that must match the
message of one diagnostic reported on that line. Diagnostics without a
matching expectation, and expectations without a matching diagnostic, are
both failures.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from returnlint.analyzer import analyze_source
from returnlint.core.diagnostics import Diagnostic

_WANT_RE = re.compile(r"//\s*want\s+(.*)$")
_PATTERN_RE = re.compile(r'"((?:\\.|[^"\\])*)"|`([^`]*)`')
_ESCAPE_RE = re.compile(r'\\(["\\])')


@dataclass
class Expectation:
	file: str
	line: int
	pattern: str
	matched: bool = False


@dataclass
class Result:
	"""Outcome of checking one fixture package."""

	diagnostics: List[Diagnostic] = field(default_factory=list)
	problems: List[str] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not self.problems


def parse_expectations(source: str, filename: str) -> List[Expectation]:
	"""Extract `// want` expectations from Go source text."""
	out: List[Expectation] = []
	for lineno, text in enumerate(source.splitlines(), 1):
		m = _WANT_RE.search(text)
		if not m:
			continue
		for dq, bq in _PATTERN_RE.findall(m.group(1)):
			pattern = _ESCAPE_RE.sub(r"\1", dq) if dq else bq
			out.append(Expectation(file=filename, line=lineno, pattern=pattern))
	return out


def check_file(path: Path) -> Result:
	source = path.read_text(encoding="utf-8")
	filename = str(path)
	diagnostics = analyze_source(source, filename=filename)
	expectations = parse_expectations(source, filename)

	by_line: Dict[Tuple[str, int], List[Expectation]] = {}
	for exp in expectations:
		by_line.setdefault((exp.file, exp.line), []).append(exp)

	result = Result(diagnostics=list(diagnostics))
	for diag in diagnostics:
		candidates = by_line.get((filename, diag.span.line or 0), [])
		hit = next((e for e in candidates if not e.matched and re.search(e.pattern, diag.message)), None)
		if hit is None:
			result.problems.append(f"{diag.span.format()}: unexpected diagnostic: {diag.message}")
			continue
		hit.matched = True
	for exp in expectations:
		if not exp.matched:
			result.problems.append(f"{exp.file}:{exp.line}: no diagnostic was reported matching {exp.pattern!r}")
	return result


def run(testdata: Path | str, *packages: str) -> Result:
	"""
	Analyze every `.go` file of the given fixture packages and compare against
	their `// want` comments. Returns the merged result; see `Result.ok`.
	"""
	merged = Result()
	root = Path(testdata) / "src"
	for pkg in packages:
		files = sorted((root / pkg).glob("*.go"))
		if not files:
			merged.problems.append(f"{root / pkg}: no Go files")
			continue
		for path in files:
			res = check_file(path)
			merged.diagnostics.extend(res.diagnostics)
			merged.problems.extend(res.problems)
	return merged


def fixture_root() -> Path:
	"""Fixture root shipped with the package tests."""
	return Path(__file__).resolve().parents[1] / "tests" / "testdata"


__all__ = ["Expectation", "Result", "check_file", "parse_expectations", "run", "fixture_root"]

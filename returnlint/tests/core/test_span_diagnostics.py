# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from returnlint.core.diagnostics import Diagnostic
from returnlint.core.span import Span
from returnlint.parser.ast import Located


def test_span_from_parser_location() -> None:
	span = Span.from_loc(Located(line=3, column=5), file="a.go")
	assert span == Span(file="a.go", line=3, column=5)
	assert span.format() == "a.go:3:5"


def test_span_from_none_keeps_file() -> None:
	span = Span.from_loc(None, file="a.go")
	assert span.line is None
	assert span.format() == "a.go"


def test_unknown_span_formats_placeholder() -> None:
	assert Span().format() == "<unknown location>"


def test_span_passthrough_fills_missing_file() -> None:
	assert Span.from_loc(Span(line=1, column=2), file="b.go") == Span(file="b.go", line=1, column=2)
	original = Span(file="x.go", line=1, column=2)
	assert Span.from_loc(original, file="b.go") is original


def test_diagnostic_json_shape() -> None:
	diag = Diagnostic(message="boom", span=Span(line=2, column=3), phase="analysis", notes=("n",))
	assert diag.to_json(default_file="f.go") == {
		"phase": "analysis",
		"message": "boom",
		"severity": "error",
		"file": "f.go",
		"line": 2,
		"column": 3,
		"notes": ["n"],
	}
	assert str(diag) == "2:3: boom"


def test_diagnostic_none_span_normalized() -> None:
	diag = Diagnostic(message="m", span=None)  # type: ignore[arg-type]
	assert diag.span == Span()

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from returnlint.test_support import fixture_root, parse_expectations, run


def test_example_package() -> None:
	result = run(fixture_root(), "example")
	assert result.ok, "\n".join(result.problems)
	assert len(result.diagnostics) == 8


def test_aliased_package() -> None:
	result = run(fixture_root(), "aliased")
	assert result.ok, "\n".join(result.problems)
	assert len(result.diagnostics) == 1


def test_missing_package_is_a_problem() -> None:
	result = run(fixture_root(), "does-not-exist")
	assert not result.ok


def test_parse_expectations() -> None:
	src = 'a()\nw.WriteHeader(1) // want "status-setting" `call`\nb() // wanted\nc() // want "quote \\" inside"\n'
	exps = parse_expectations(src, "f.go")
	assert [(e.line, e.pattern) for e in exps] == [(2, "status-setting"), (2, "call"), (4, 'quote " inside')]

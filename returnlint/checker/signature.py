# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Middleware signature matching.

A middleware returns exactly one `http.Handler`. Parameters are not inspected:
`func M(h http.Handler) http.Handler`, `func M() http.Handler` and
`func (s *S) Wrap(h http.Handler, opts ...Opt) http.Handler` all qualify.
"""

from __future__ import annotations

from typing import AbstractSet, List

from returnlint.checker.names import http_qualifiers
from returnlint.parser.ast import Field, FuncDecl, TypeName

HANDLER_TYPE = "Handler"


def _result_count(results: List[Field]) -> int:
	return sum(len(f.names) or 1 for f in results)


def is_handler_type(type_expr: object, names: AbstractSet[str]) -> bool:
	"""True when `type_expr` is the qualified type `<http>.Handler`."""
	if not isinstance(type_expr, TypeName):
		return False
	if type_expr.args:
		return False
	return type_expr.package in names and type_expr.name == HANDLER_TYPE


def matches_signature(fn: FuncDecl, names: AbstractSet[str] | None = None) -> bool:
	"""
	Return True when `fn` declares a single result of type `http.Handler`.

	`names` is the set of qualifiers bound to `net/http`; it defaults to the
	bare `http` qualifier.
	"""
	if names is None:
		names = http_qualifiers()
	results = getattr(fn, "results", None) or []
	if _result_count(results) != 1:
		return False
	return is_handler_type(results[0].type_expr, names)


__all__ = ["HANDLER_TYPE", "is_handler_type", "matches_signature"]

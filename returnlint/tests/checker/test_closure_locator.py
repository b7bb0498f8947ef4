# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from returnlint.checker.closure import find_closure_bodies
from returnlint.parser import ast, parse_file


def _fn(src: str) -> ast.FuncDecl:
	return parse_file("package p\n\nimport \"net/http\"\n\n" + src).funcs[0]


def test_returned_adapter_closure() -> None:
	fn = _fn(
		"""func M(h http.Handler) http.Handler {
	return http.HandlerFunc(func(w http.ResponseWriter, r *http.Request) {
		h.ServeHTTP(w, r)
	})
}
"""
	)
	bodies = list(find_closure_bodies(fn))
	assert len(bodies) == 1
	assert isinstance(bodies[0].statements[0], ast.ExprStmt)


def test_every_adapter_call_is_found_in_preorder() -> None:
	fn = _fn(
		"""func M(h http.Handler) http.Handler {
	a := http.HandlerFunc(func(w http.ResponseWriter, r *http.Request) {
		first()
		inner := http.HandlerFunc(func(w http.ResponseWriter, r *http.Request) {
			nested()
		})
		_ = inner
	})
	_ = a
	return http.HandlerFunc(func(w http.ResponseWriter, r *http.Request) {
		last()
	})
}
"""
	)
	bodies = list(find_closure_bodies(fn))
	firsts = [b.statements[0].value.func.ident for b in bodies]
	assert firsts == ["first", "nested", "last"]


def test_non_literal_argument_is_ignored() -> None:
	fn = _fn(
		"""func M(h http.Handler) http.Handler {
	return http.HandlerFunc(serve)
}
"""
	)
	assert list(find_closure_bodies(fn)) == []


def test_other_adapters_are_ignored() -> None:
	fn = _fn(
		"""func M(h http.Handler) http.Handler {
	x := other.HandlerFunc(func() {})
	y := http.Handle(func() {})
	z := HandlerFunc(func() {})
	return nil
}
"""
	)
	assert list(find_closure_bodies(fn)) == []


def test_missing_body_yields_nothing() -> None:
	fn = parse_file("package p\nfunc M(h http.Handler) http.Handler\n").funcs[0]
	assert fn.body is None
	assert list(find_closure_bodies(fn)) == []


def test_aliased_qualifier() -> None:
	src = """package p

import web "net/http"

func M(h web.Handler) web.Handler {
	return web.HandlerFunc(func(w web.ResponseWriter, r *web.Request) {})
}
"""
	fn = parse_file(src).funcs[0]
	assert list(find_closure_bodies(fn)) == []
	assert len(list(find_closure_bodies(fn, {"http", "web"}))) == 1

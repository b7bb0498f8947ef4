# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from returnlint.checker.adjacency import MESSAGE, check_block
from returnlint.core.span import Span
from returnlint.parser import ast, parse_file


def _closure(body: str) -> ast.Block:
	src = "package p\n\nfunc f() {\n" + body + "\n}\n"
	return parse_file(src).funcs[0].body


def _lines(diags) -> list[int]:
	return [d.span.line for d in diags]


def test_immediate_return_passes() -> None:
	block = _closure("\tw.WriteHeader(200)\n\treturn")
	assert check_block(block) == []


def test_write_after_status_is_flagged() -> None:
	block = _closure("\tw.WriteHeader(401)\n\tw.Write(msg)")
	diags = check_block(block, filename="m.go")
	assert len(diags) == 1
	diag = diags[0]
	assert diag.message == MESSAGE
	assert diag.span == Span(file="m.go", line=4, column=2)
	assert diag.code == "returnlint"
	assert diag.severity == "error"


def test_status_call_as_last_statement_is_flagged() -> None:
	diags = check_block(_closure("\tsetup()\n\tw.WriteHeader(204)"))
	assert _lines(diags) == [5]


def test_switch_arms_checked_independently() -> None:
	block = _closure(
		"""	switch r.Method {
	case "GET":
		w.WriteHeader(200)
		w.Write(ok)
	case "POST":
		w.WriteHeader(201)
		w.Write(created)
	default:
		w.WriteHeader(405)
		return
	}"""
	)
	assert _lines(check_block(block)) == [6, 9]


def test_nested_if_violation() -> None:
	block = _closure(
		"""	if a {
		if b {
			w.WriteHeader(415)
			w.Write(msg)
		}
	}
	next()"""
	)
	assert _lines(check_block(block)) == [6]


def test_comments_and_blank_lines_are_not_statements() -> None:
	block = _closure(
		"""	w.WriteHeader(401)
	// explain


	/* more
	explanation */
	return"""
	)
	assert check_block(block) == []


def test_statements_after_return_are_irrelevant() -> None:
	block = _closure("\tw.WriteHeader(401)\n\treturn\n\tw.Write(msg)")
	assert check_block(block) == []


def test_two_candidates_in_sequence() -> None:
	block = _closure("\tw.WriteHeader(401)\n\tw.WriteHeader(402)\n\treturn")
	assert _lines(check_block(block)) == [4]


def test_any_receiver_counts() -> None:
	block = _closure("\trec.WriteHeader(500)\n\tlog(x)")
	assert len(check_block(block)) == 1


@pytest.mark.parametrize(
	"stmt",
	[
		"\tWriteHeader(200)",
		"\tx := w.WriteHeader(200)",
		"\tdefer w.WriteHeader(200)",
		"\tgo w.WriteHeader(200)",
		"\tw.Header().Set(k, v)",
		"\tw.WriteHeader",
	],
)
def test_non_candidates(stmt) -> None:
	assert check_block(_closure(stmt + "\n\tnext()")) == []


def test_else_chain_and_plain_blocks() -> None:
	block = _closure(
		"""	if a {
		ok()
	} else if b {
		w.WriteHeader(1)
	} else {
		w.WriteHeader(2)
		return
	}
	{
		w.WriteHeader(3)
	}"""
	)
	assert _lines(check_block(block)) == [7, 13]


def test_loops_type_switch_and_select() -> None:
	block = _closure(
		"""	for i := 0; i < n; i++ {
		w.WriteHeader(1)
		break
	}
	for range xs {
		w.WriteHeader(2)
	}
	switch v := x.(type) {
	case int:
		w.WriteHeader(3)
	}
	select {
	case <-done:
		w.WriteHeader(4)
	case <-quit:
		w.WriteHeader(5)
		return
	}"""
	)
	assert _lines(check_block(block)) == [5, 9, 13, 17]


def test_labeled_status_call_is_not_a_candidate() -> None:
	block = _closure(
		"""L:
	w.WriteHeader(400)
	foo()
	goto L"""
	)
	assert check_block(block) == []


def test_labeled_compound_statements_are_descended() -> None:
	block = _closure(
		"""outer:
	for _, x := range xs {
		w.WriteHeader(1)
		continue outer
	}"""
	)
	assert _lines(check_block(block)) == [6]


def test_function_literals_are_not_entered() -> None:
	block = _closure("\tfn := func() {\n\t\tw.WriteHeader(1)\n\t}\n\tfn()")
	assert check_block(block) == []


def test_idempotent() -> None:
	block = _closure("\tif a {\n\t\tw.WriteHeader(1)\n\t\tnext()\n\t}")
	first = check_block(block)
	second = check_block(block)
	assert first == second
	assert len(first) == 1


def test_none_and_empty_blocks() -> None:
	assert check_block(None) == []
	assert check_block(ast.Block()) == []


def _status_stmt() -> ast.ExprStmt:
	call = ast.Call(func=ast.Attr(value=ast.Name(ident="w"), attr="WriteHeader"), args=[ast.Literal("INT", "200")])
	return ast.ExprStmt(value=call)


def test_hand_built_tree_without_locations() -> None:
	block = ast.Block(statements=[_status_stmt(), ast.ExprStmt(value=ast.Name(ident="x"))])
	diags = check_block(block)
	assert len(diags) == 1
	assert diags[0].span == Span()


def test_deep_nesting_does_not_recurse() -> None:
	depth = 5000
	inner = ast.Block(statements=[_status_stmt()])
	for _ in range(depth):
		inner = ast.Block(statements=[ast.IfStmt(cond=ast.Name(ident="c"), then_block=inner)])
	diags = check_block(inner)
	assert len(diags) == 1


def test_preorder_across_nesting() -> None:
	nested = _status_stmt()
	nested.loc = ast.Located(2, 1)
	outer = _status_stmt()
	outer.loc = ast.Located(3, 1)
	block = ast.Block(
		statements=[
			ast.BlockStmt(block=ast.Block(statements=[nested]), loc=ast.Located(1, 1)),
			outer,
			ast.ExprStmt(value=ast.Name(ident="x")),
		]
	)
	assert _lines(check_block(block)) == [2, 3]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from lark import Token

from returnlint.parser.parser import GoSemicolonInserter, parse_file
from returnlint.parser import ast


def _tok(kind: str, value: str, line: int = 1) -> Token:
	return Token(kind, value, line=line, column=1)


def _types(tokens):
	return [t.type for t in GoSemicolonInserter().process(iter(tokens))]


def test_newline_after_identifier_becomes_semicolon() -> None:
	assert _types([_tok("NAME", "x"), _tok("NEWLINE", "\n"), _tok("NAME", "y")]) == ["NAME", "SEMI", "NAME", "SEMI"]


def test_newline_after_operator_is_dropped() -> None:
	assert _types([_tok("NAME", "x"), _tok("PLUS", "+"), _tok("NEWLINE", "\n"), _tok("NAME", "y")]) == [
		"NAME",
		"PLUS",
		"NAME",
		"SEMI",
	]


def test_blank_lines_collapse_to_one_semicolon() -> None:
	toks = [_tok("NAME", "x"), _tok("NEWLINE", "\n"), _tok("NEWLINE", "\n"), _tok("NEWLINE", "\n")]
	assert _types(toks) == ["NAME", "SEMI"]


def test_block_comment_across_lines_acts_as_newline() -> None:
	toks = [_tok("NAME", "x"), _tok("BLOCK_COMMENT", "/* a\nb */"), _tok("NAME", "y")]
	assert _types(toks) == ["NAME", "SEMI", "NAME", "SEMI"]


def test_inline_block_comment_is_dropped() -> None:
	toks = [_tok("NAME", "x"), _tok("BLOCK_COMMENT", "/* a */"), _tok("NAME", "y")]
	assert _types(toks) == ["NAME", "NAME", "SEMI"]


def test_keywords_that_end_statements() -> None:
	toks = [_tok("RETURN", "return"), _tok("NEWLINE", "\n"), _tok("LBRACE", "{"), _tok("NEWLINE", "\n")]
	assert _types(toks) == ["RETURN", "SEMI", "LBRACE"]


def test_comments_and_blank_lines_do_not_become_statements() -> None:
	src = """package p

func f() {
	a()
	// comment

	/* block
	comment */
	b()
}
"""
	fn = parse_file(src).funcs[0]
	assert [type(s) for s in fn.body.statements] == [ast.ExprStmt, ast.ExprStmt]


def test_explicit_semicolons_and_empty_statements() -> None:
	src = "package p\nfunc f() { a(); ; b() }\n"
	fn = parse_file(src).funcs[0]
	assert len(fn.body.statements) == 2


def test_file_without_trailing_newline() -> None:
	fn = parse_file("package p\nfunc f() { return }").funcs[0]
	assert isinstance(fn.body.statements[0], ast.ReturnStmt)


def test_multiline_call_arguments() -> None:
	src = """package p

func f() {
	g(a,
		b,
	)
}
"""
	stmt = parse_file(src).funcs[0].body.statements[0]
	assert isinstance(stmt, ast.ExprStmt)
	assert len(stmt.value.args) == 2

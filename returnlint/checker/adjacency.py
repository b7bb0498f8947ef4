# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Adjacency check: a status-setting call must be followed by `return`.

Within one statement list, an expression statement calling `<x>.WriteHeader(...)`
at index i is accepted only when index i+1 exists and is a return statement.
Only the syntactic neighbour counts: comments and blank lines never reach the
tree, and statements after a return are not special.

Nested statement lists are reached by shape, not by a generic walk:

* `if` then-blocks and their `else` block or `else if` chain
* `switch` and type-switch `case`/`default` bodies
* `select` arms
* `for` and `range` bodies
* bare `{ ... }` blocks
* the compound statement wrapped by a label

A labeled statement is never itself a candidate: `L: w.WriteHeader(x)` is a
labeled statement, not an expression statement.

Expressions are never entered, so a function literal inside the closure is
only checked if it is itself passed to the handler adapter.

The descent keeps an explicit work-list of (statements, index) frames, so
nesting depth is limited by memory rather than Python's recursion limit.
Diagnostics come out in statement preorder.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from returnlint.core.diagnostics import Diagnostic
from returnlint.core.span import Span
from returnlint.parser.ast import (
	Attr,
	Block,
	BlockStmt,
	Call,
	CaseClause,
	CommClause,
	ExprStmt,
	ForStmt,
	IfStmt,
	LabeledStmt,
	RangeStmt,
	ReturnStmt,
	SelectStmt,
	Stmt,
	SwitchStmt,
	TypeSwitchStmt,
)

MESSAGE = "status-setting call not immediately followed by a return statement"
CODE = "returnlint"
STATUS_METHOD = "WriteHeader"

_Frame = Tuple[Sequence[Stmt], int]


def _unlabel(stmt: Stmt) -> Optional[Stmt]:
	while isinstance(stmt, LabeledStmt):
		stmt = stmt.stmt
	return stmt


def is_status_call(stmt: object) -> bool:
	"""True for an expression statement `<recv>.WriteHeader(...)`."""
	if not isinstance(stmt, ExprStmt):
		return False
	call = stmt.value
	if not isinstance(call, Call):
		return False
	callee = call.func
	return isinstance(callee, Attr) and callee.attr == STATUS_METHOD


def is_followed_by_return(stmts: Sequence[Stmt], index: int) -> bool:
	nxt = index + 1
	return nxt < len(stmts) and isinstance(stmts[nxt], ReturnStmt)


def _block_stmts(block: Optional[Block]) -> Sequence[Stmt]:
	if block is None:
		return ()
	return block.statements or ()


def _nested(stmt: Optional[Stmt]) -> List[Sequence[Stmt]]:
	"""Statement lists directly nested in `stmt`, in source order."""
	if isinstance(stmt, IfStmt):
		lists = [_block_stmts(stmt.then_block)]
		if stmt.else_stmt is not None:
			lists.append([stmt.else_stmt])
		return lists
	if isinstance(stmt, BlockStmt):
		return [_block_stmts(stmt.block)]
	if isinstance(stmt, (SwitchStmt, TypeSwitchStmt, SelectStmt)):
		return [_block_stmts(stmt.body)]
	if isinstance(stmt, (CaseClause, CommClause)):
		return [_block_stmts(stmt.body)]
	if isinstance(stmt, (ForStmt, RangeStmt)):
		return [_block_stmts(stmt.body)]
	return []


def check_block(block: Optional[Block], filename: str | None = None) -> List[Diagnostic]:
	"""Check one closure body and return its violations in preorder."""
	diagnostics: List[Diagnostic] = []
	stack: List[_Frame] = [(_block_stmts(block), 0)]
	while stack:
		stmts, index = stack.pop()
		if index >= len(stmts):
			continue
		stack.append((stmts, index + 1))
		stmt = stmts[index]
		if is_status_call(stmt) and not is_followed_by_return(stmts, index):
			_report(diagnostics, stmt, filename)
		for nested in reversed(_nested(_unlabel(stmt))):
			stack.append((nested, 0))
	return diagnostics


def _report(diagnostics: List[Diagnostic], stmt: Stmt, filename: str | None) -> None:
	diagnostics.append(
		Diagnostic(
			message=MESSAGE,
			span=Span.from_loc(getattr(stmt, "loc", None), file=filename),
			code=CODE,
			phase="analysis",
		)
	)


__all__ = ["CODE", "MESSAGE", "STATUS_METHOD", "check_block", "is_followed_by_return", "is_status_call"]

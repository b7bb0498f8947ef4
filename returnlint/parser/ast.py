# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Go syntax tree consumed by the checker.

The node set is closed: every statement the parser can produce is one of the
`Stmt` subclasses listed in `STMT_NODES`, every expression one of `EXPR_NODES`.
Checker code dispatches with `isinstance` over these fixed shapes rather than
relying on an open visitor hierarchy.

Comments, blank lines and empty statements never appear in a statement list.

Pipeline placement:
  Go source -> (lark parser + semicolon post-lexer) -> this AST -> checker
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class Located:
	line: int
	column: int


class Node:
	"""Base class for all syntax nodes."""

	loc: Optional[Located]


class Expr(Node):
	"""Base class for expressions (type expressions included)."""


class TypeExpr(Expr):
	"""Base class for type expressions."""


class Stmt(Node):
	"""Base class for statements."""


# Types

@dataclass
class TypeName(TypeExpr):
	"""Named type, optionally package-qualified: `Handler`, `http.Handler`."""
	name: str
	package: Optional[str] = None
	args: List[Expr] = field(default_factory=list)
	loc: Optional[Located] = None

	@property
	def qualified(self) -> tuple[Optional[str], str]:
		return (self.package, self.name)


@dataclass
class PointerType(TypeExpr):
	elem: Expr
	loc: Optional[Located] = None


@dataclass
class ArrayType(TypeExpr):
	"""`[N]T`, or a slice `[]T` when `length` is None."""
	elem: Expr
	length: Optional[Expr] = None
	loc: Optional[Located] = None


@dataclass
class MapType(TypeExpr):
	key: Expr
	value: Expr
	loc: Optional[Located] = None


@dataclass
class ChanType(TypeExpr):
	elem: Expr
	dir: str = "both"  # "both" | "send" | "recv"
	loc: Optional[Located] = None


@dataclass
class Field(Node):
	"""
	Parameter, result, struct field or interface element.

	`names` is empty for unnamed entries; a field with N names declares N
	values of the same type.
	"""
	names: List[str]
	type_expr: Expr
	variadic: bool = False
	tag: Optional[str] = None
	loc: Optional[Located] = None


@dataclass
class FuncType(TypeExpr):
	params: List[Field] = field(default_factory=list)
	results: List[Field] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class StructType(TypeExpr):
	fields: List[Field] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class InterfaceType(TypeExpr):
	methods: List[Field] = field(default_factory=list)
	loc: Optional[Located] = None


# Expressions

@dataclass
class Name(Expr):
	ident: str
	loc: Optional[Located] = None


@dataclass
class Literal(Expr):
	"""Basic literal; `kind` is the token kind (INT, FLOAT, IMAG, CHAR, STRING)."""
	kind: str
	value: str
	loc: Optional[Located] = None


@dataclass
class KeyValue(Expr):
	key: Expr
	value: Expr
	loc: Optional[Located] = None


@dataclass
class CompositeLit(Expr):
	type_expr: Optional[Expr]
	elts: List[Expr] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class FuncLit(Expr):
	type_expr: FuncType
	body: "Block"
	loc: Optional[Located] = None


@dataclass
class Paren(Expr):
	value: Expr
	loc: Optional[Located] = None


@dataclass
class Attr(Expr):
	"""Selector expression `value.attr` (also package-qualified names)."""
	value: Expr
	attr: str
	loc: Optional[Located] = None


@dataclass
class Index(Expr):
	value: Expr
	indices: List[Expr]
	loc: Optional[Located] = None


@dataclass
class SliceExpr(Expr):
	value: Expr
	low: Optional[Expr] = None
	high: Optional[Expr] = None
	max: Optional[Expr] = None
	loc: Optional[Located] = None


@dataclass
class TypeAssert(Expr):
	"""`value.(T)`; `type_expr` is None for the `value.(type)` switch guard."""
	value: Expr
	type_expr: Optional[Expr] = None
	loc: Optional[Located] = None


@dataclass
class Call(Expr):
	func: Expr
	args: List[Expr] = field(default_factory=list)
	ellipsis: bool = False
	loc: Optional[Located] = None


@dataclass
class Star(Expr):
	"""`*x`: pointer dereference, or a pointer type in expression position."""
	value: Expr
	loc: Optional[Located] = None


@dataclass
class Unary(Expr):
	op: str
	operand: Expr
	loc: Optional[Located] = None


@dataclass
class Binary(Expr):
	op: str
	left: Expr
	right: Expr
	loc: Optional[Located] = None


# Statements

@dataclass
class Block(Node):
	statements: List[Stmt] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class ExprStmt(Stmt):
	value: Expr
	loc: Optional[Located] = None


@dataclass
class SendStmt(Stmt):
	chan: Expr
	value: Expr
	loc: Optional[Located] = None


@dataclass
class IncDecStmt(Stmt):
	target: Expr
	op: str
	loc: Optional[Located] = None


@dataclass
class AssignStmt(Stmt):
	"""Assignment; `op` is `=`, `:=` or a compound operator such as `+=`."""
	targets: List[Expr]
	op: str
	values: List[Expr]
	loc: Optional[Located] = None


@dataclass
class GoStmt(Stmt):
	call: Expr
	loc: Optional[Located] = None


@dataclass
class DeferStmt(Stmt):
	call: Expr
	loc: Optional[Located] = None


@dataclass
class ReturnStmt(Stmt):
	values: List[Expr] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class BranchStmt(Stmt):
	"""`break`, `continue`, `goto` or `fallthrough`, with optional label."""
	keyword: str
	label: Optional[str] = None
	loc: Optional[Located] = None


@dataclass
class BlockStmt(Stmt):
	block: Block
	loc: Optional[Located] = None


@dataclass
class IfStmt(Stmt):
	cond: Expr
	then_block: Block
	init: Optional[Stmt] = None
	# Either a plain `else { ... }` (BlockStmt) or an `else if` chain (IfStmt).
	else_stmt: Optional[Union["IfStmt", BlockStmt]] = None
	loc: Optional[Located] = None


@dataclass
class CaseClause(Stmt):
	"""`case a, b:` arm of a switch; `values` is None for `default:`."""
	values: Optional[List[Expr]]
	body: Block
	loc: Optional[Located] = None


@dataclass
class CommClause(Stmt):
	"""`case <comm>:` arm of a select; `comm` is None for `default:`."""
	comm: Optional[Stmt]
	body: Block
	loc: Optional[Located] = None


@dataclass
class SwitchStmt(Stmt):
	"""Expression switch; `body.statements` holds only CaseClause nodes."""
	body: Block
	init: Optional[Stmt] = None
	tag: Optional[Expr] = None
	loc: Optional[Located] = None


@dataclass
class TypeSwitchStmt(Stmt):
	"""Type switch; `body.statements` holds only CaseClause nodes."""
	assign: Stmt
	body: Block
	init: Optional[Stmt] = None
	loc: Optional[Located] = None


@dataclass
class SelectStmt(Stmt):
	"""Select; `body.statements` holds only CommClause nodes."""
	body: Block
	loc: Optional[Located] = None


@dataclass
class ForStmt(Stmt):
	body: Block
	init: Optional[Stmt] = None
	cond: Optional[Expr] = None
	post: Optional[Stmt] = None
	loc: Optional[Located] = None


@dataclass
class RangeStmt(Stmt):
	iterable: Expr
	body: Block
	key: Optional[Expr] = None
	value: Optional[Expr] = None
	define: bool = False
	loc: Optional[Located] = None


@dataclass
class LabeledStmt(Stmt):
	label: str
	stmt: Optional[Stmt] = None
	loc: Optional[Located] = None


# Declarations

@dataclass
class ImportSpec(Node):
	path: str
	alias: Optional[str] = None
	loc: Optional[Located] = None


@dataclass
class ValueSpec(Node):
	"""One `var`/`const` line: names, optional type, optional values."""
	names: List[str]
	type_expr: Optional[Expr] = None
	values: List[Expr] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class TypeSpec(Node):
	name: str
	type_expr: Expr
	type_params: List[Field] = field(default_factory=list)
	alias: bool = False
	loc: Optional[Located] = None


@dataclass
class GenDecl(Node):
	"""`var`, `const` or `type` declaration (single or grouped)."""
	keyword: str
	specs: List[Union[ValueSpec, TypeSpec]] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class DeclStmt(Stmt):
	decl: GenDecl
	loc: Optional[Located] = None


@dataclass
class FuncDecl(Node):
	name: str
	params: List[Field] = field(default_factory=list)
	results: List[Field] = field(default_factory=list)
	body: Optional[Block] = None
	recv: Optional[Field] = None
	type_params: List[Field] = field(default_factory=list)
	loc: Optional[Located] = None


@dataclass
class File(Node):
	package: str
	imports: List[ImportSpec] = field(default_factory=list)
	decls: List[Union[FuncDecl, GenDecl]] = field(default_factory=list)
	filename: Optional[str] = None
	loc: Optional[Located] = None

	@property
	def funcs(self) -> List[FuncDecl]:
		return [d for d in self.decls if isinstance(d, FuncDecl)]


STMT_NODES = (
	ExprStmt,
	SendStmt,
	IncDecStmt,
	AssignStmt,
	GoStmt,
	DeferStmt,
	ReturnStmt,
	BranchStmt,
	BlockStmt,
	IfStmt,
	CaseClause,
	CommClause,
	SwitchStmt,
	TypeSwitchStmt,
	SelectStmt,
	ForStmt,
	RangeStmt,
	LabeledStmt,
	DeclStmt,
)

EXPR_NODES = (
	Name,
	Literal,
	KeyValue,
	CompositeLit,
	FuncLit,
	Paren,
	Attr,
	Index,
	SliceExpr,
	TypeAssert,
	Call,
	Star,
	Unary,
	Binary,
	TypeName,
	PointerType,
	ArrayType,
	MapType,
	ChanType,
	FuncType,
	StructType,
	InterfaceType,
)


__all__ = [
	"Located",
	"Node",
	"Expr",
	"TypeExpr",
	"Stmt",
	"TypeName",
	"PointerType",
	"ArrayType",
	"MapType",
	"ChanType",
	"Field",
	"FuncType",
	"StructType",
	"InterfaceType",
	"Name",
	"Literal",
	"KeyValue",
	"CompositeLit",
	"FuncLit",
	"Paren",
	"Attr",
	"Index",
	"SliceExpr",
	"TypeAssert",
	"Call",
	"Star",
	"Unary",
	"Binary",
	"Block",
	"ExprStmt",
	"SendStmt",
	"IncDecStmt",
	"AssignStmt",
	"GoStmt",
	"DeferStmt",
	"ReturnStmt",
	"BranchStmt",
	"BlockStmt",
	"IfStmt",
	"CaseClause",
	"CommClause",
	"SwitchStmt",
	"TypeSwitchStmt",
	"SelectStmt",
	"ForStmt",
	"RangeStmt",
	"LabeledStmt",
	"ImportSpec",
	"ValueSpec",
	"TypeSpec",
	"GenDecl",
	"DeclStmt",
	"FuncDecl",
	"File",
	"STMT_NODES",
	"EXPR_NODES",
]

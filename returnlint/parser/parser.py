# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Go front-end: lark grammar plus a builder that turns parse trees into the
dataclass AST in `returnlint.parser.ast`.

Go terminates statements with semicolons that the lexer inserts at line ends.
`GoSemicolonInserter` reproduces that rule as a lark post-lexer, so comments and
blank lines never surface as statements: they disappear before the grammar
sees the token stream.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from .ast import (
	ArrayType,
	AssignStmt,
	Attr,
	Binary,
	Block,
	BlockStmt,
	BranchStmt,
	Call,
	CaseClause,
	ChanType,
	CommClause,
	CompositeLit,
	DeclStmt,
	DeferStmt,
	Expr,
	ExprStmt,
	Field,
	File,
	ForStmt,
	FuncDecl,
	FuncLit,
	FuncType,
	GenDecl,
	GoStmt,
	IfStmt,
	ImportSpec,
	IncDecStmt,
	Index,
	InterfaceType,
	KeyValue,
	LabeledStmt,
	Literal,
	Located,
	MapType,
	Name,
	Paren,
	PointerType,
	RangeStmt,
	ReturnStmt,
	SelectStmt,
	SendStmt,
	SliceExpr,
	Star,
	Stmt,
	StructType,
	SwitchStmt,
	TypeAssert,
	TypeName,
	TypeSpec,
	TypeSwitchStmt,
	Unary,
	ValueSpec,
)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()


class GoSyntaxError(ValueError):
	"""
	Source text the front-end cannot turn into a syntax tree.

	Carries a best-effort `loc` so the driver can report a parser-phase
	diagnostic for the file instead of crashing.
	"""

	def __init__(self, message: str, *, loc: Optional[Located] = None) -> None:
		super().__init__(message)
		self.loc = loc


class GoSemicolonInserter:
	"""
	Post-lexer implementing Go's automatic semicolon insertion.

	A newline becomes a `SEMI` token when the last emitted token is an
	identifier, a basic literal, one of the keywords `break`, `continue`,
	`fallthrough`, `return`, or one of `++ -- ) ] }`; otherwise it is dropped.
	A block comment spanning lines counts as a newline. End of input behaves
	like a final newline.
	"""

	always_accept = ("NEWLINE", "BLOCK_COMMENT")

	TERMINABLE_TYPES = {
		"NAME",
		"INT",
		"FLOAT",
		"IMAG",
		"CHAR",
		"STRING",
		"RAW_STRING",
	}

	TERMINABLE_VALUES = {
		")",
		"]",
		"}",
		"++",
		"--",
		"break",
		"continue",
		"fallthrough",
		"return",
	}

	def process(self, stream):
		last: Token | None = None
		for token in stream:
			if token.type == "BLOCK_COMMENT" and "\n" not in token.value:
				continue
			if token.type in ("NEWLINE", "BLOCK_COMMENT"):
				if last is not None and self._ends_statement(last):
					last = Token.new_borrow_pos("SEMI", "\n", token)
					yield last
				continue
			yield token
			last = token
		if last is not None and self._ends_statement(last):
			yield Token.new_borrow_pos("SEMI", "", last)

	def _ends_statement(self, token: Token) -> bool:
		if token.type == "SEMI":
			return False
		if token.type in self.TERMINABLE_TYPES:
			return True
		return token.value in self.TERMINABLE_VALUES


_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="earley",
	lexer="basic",
	start=["start", "expr_fragment"],
	propagate_positions=True,
	maybe_placeholders=False,
	postlex=GoSemicolonInserter(),
)


def parse_file(source: str, filename: str | None = None) -> File:
	"""Parse one Go compilation unit."""
	tree = _parse(source, "start")
	file = _build_file(tree)
	file.filename = filename
	return file


def parse_expr(source: str) -> Expr:
	"""Parse a single Go expression (e.g. `w.WriteHeader(200)`)."""
	tree = _parse(source, "expr_fragment")
	expr_node = next(c for c in tree.children if isinstance(c, Tree))
	return _build_expr(expr_node)


def _parse(source: str, start: str) -> Tree:
	try:
		return _PARSER.parse(source, start=start)
	except UnexpectedInput as exc:
		line = getattr(exc, "line", None)
		column = getattr(exc, "column", None)
		loc = Located(line=line, column=column) if isinstance(line, int) and line > 0 else None
		raise GoSyntaxError(f"syntax error: {_describe(exc)}", loc=loc) from exc


def _describe(exc: UnexpectedInput) -> str:
	token = getattr(exc, "token", None)
	if token is not None:
		if token.type in ("$END", "<EOF>"):
			return "unexpected end of input"
		if token.type == "SEMI":
			return "unexpected newline"
		return f"unexpected {token.value!r}"
	char = getattr(exc, "char", None)
	if char is not None:
		return f"unexpected character {char!r}"
	return "unexpected end of input"


# File level

def _build_file(tree: Tree) -> File:
	package = ""
	imports: List[ImportSpec] = []
	decls: list = []
	for child in _trees(tree):
		kind = _name(child)
		if kind == "package_clause":
			package = _tokens(child, "NAME")[0].value
		elif kind == "import_decl":
			imports.extend(_build_import_spec(spec) for spec in _trees(child))
		elif kind == "func_decl":
			decls.append(_build_func_decl(child))
		elif kind in _GEN_DECLS:
			decls.append(_build_gen_decl(child))
	return File(package=package, imports=imports, decls=decls, loc=_loc(tree))


def _build_import_spec(tree: Tree) -> ImportSpec:
	alias: str | None = None
	path = ""
	for child in _trees(tree):
		if _name(child) == "import_alias":
			alias = child.children[0].value
		elif _name(child) == "import_path":
			path = child.children[0].value[1:-1]
	return ImportSpec(path=path, alias=alias, loc=_loc(tree))


def _build_func_decl(tree: Tree) -> FuncDecl:
	recv: Field | None = None
	type_params: List[Field] = []
	params: List[Field] = []
	results: List[Field] = []
	body: Block | None = None
	for child in _trees(tree):
		kind = _name(child)
		if kind == "receiver":
			fields = _build_parameters(child.children[0])
			recv = fields[0] if fields else None
		elif kind == "type_params":
			type_params = _build_type_params(child)
		elif kind == "signature":
			params, results = _build_signature(child)
		elif kind == "block":
			body = _build_block(child)
	name = _tokens(tree, "NAME")[0].value
	return FuncDecl(
		name=name,
		params=params,
		results=results,
		body=body,
		recv=recv,
		type_params=type_params,
		loc=_loc(tree),
	)


# Signatures

def _build_signature(tree: Tree) -> tuple[List[Field], List[Field]]:
	params: List[Field] = []
	results: List[Field] = []
	for child in _trees(tree):
		if _name(child) == "parameters":
			params = _build_parameters(child)
		elif _name(child) == "results":
			inner = child.children[0]
			if isinstance(inner, Tree) and _name(inner) == "parameters":
				results = _build_parameters(inner)
			else:
				results = [Field(names=[], type_expr=_build_expr(inner), loc=_loc(child))]
	return params, results


def _build_parameters(tree: Tree) -> List[Field]:
	"""
	Build a parameter list, resolving Go's grouping rule.

	`(a, b int)` arrives as an unnamed `a` followed by a named `b int`. When any
	entry in the list is named, every unnamed entry must be a bare identifier
	that shares the type of the next named entry.
	"""
	entries = []
	for child in _trees(tree):
		kind = _name(child)
		types = _trees(child)
		type_expr = _build_expr(types[-1])
		names = _tokens(child, "NAME")
		if kind == "param_named":
			entries.append((names[0].value, type_expr, False, _loc(child)))
		elif kind == "param_named_variadic":
			entries.append((names[0].value, type_expr, True, _loc(child)))
		elif kind == "param_type":
			entries.append((None, type_expr, False, _loc(child)))
		elif kind == "param_variadic":
			entries.append((None, type_expr, True, _loc(child)))

	if not any(name is not None for name, _, _, _ in entries):
		return [Field(names=[], type_expr=t, variadic=v, loc=loc) for _, t, v, loc in entries]

	fields: List[Field] = []
	pending: List[str] = []
	pending_loc: Located | None = None
	for name, type_expr, variadic, loc in entries:
		if name is None:
			if isinstance(type_expr, TypeName) and type_expr.package is None and not type_expr.args:
				pending.append(type_expr.name)
				pending_loc = pending_loc or loc
				continue
			raise GoSyntaxError("mixed named and unnamed parameters", loc=loc)
		fields.append(Field(names=pending + [name], type_expr=type_expr, variadic=variadic, loc=pending_loc or loc))
		pending = []
		pending_loc = None
	if pending:
		raise GoSyntaxError("mixed named and unnamed parameters", loc=pending_loc)
	return fields


def _build_type_params(tree: Tree) -> List[Field]:
	fields: List[Field] = []
	for param in _trees(tree):
		names_node, constraint_node = _trees(param)
		names = [tok.value for tok in _tokens(names_node, "NAME")]
		fields.append(Field(names=names, type_expr=_build_constraint(constraint_node), loc=_loc(param)))
	return fields


def _build_constraint(tree: Tree) -> Expr:
	terms: List[Expr] = []
	for term in _trees(tree):
		type_expr = _build_expr(_trees(term)[0])
		if any(isinstance(c, Token) and c.value == "~" for c in term.children):
			type_expr = Unary(op="~", operand=type_expr, loc=_loc(term))
		terms.append(type_expr)
	result = terms[0]
	for term in terms[1:]:
		result = Binary(op="|", left=result, right=term, loc=result.loc)
	return result


# Expressions and types

_BINARY_RULES = {"lor", "land", "rel", "add", "mul"}


def _build_expr(node) -> Expr:
	if not isinstance(node, Tree):
		raise TypeError(f"Unexpected node type: {type(node)}")
	name = _name(node)
	loc = _loc(node)
	kids = _trees(node)

	if name in _BINARY_RULES:
		left, op, right = node.children
		return Binary(op=op.value, left=_build_expr(left), right=_build_expr(right), loc=loc)
	if name == "unary":
		op, operand = node.children
		if op.value == "*":
			return Star(value=_build_expr(operand), loc=loc)
		return Unary(op=op.value, operand=_build_expr(operand), loc=loc)
	if name == "name":
		return Name(ident=node.children[0].value, loc=loc)
	if name == "literal":
		tok = node.children[0]
		kind = "STRING" if tok.type == "RAW_STRING" else tok.type
		return Literal(kind=kind, value=tok.value, loc=loc)
	if name == "paren":
		return Paren(value=_build_expr(kids[0]), loc=loc)
	if name == "selector":
		return Attr(value=_build_expr(kids[0]), attr=_tokens(node, "NAME")[-1].value, loc=loc)
	if name == "type_assert":
		return TypeAssert(value=_build_expr(kids[0]), type_expr=_build_expr(kids[1]), loc=loc)
	if name == "index":
		return Index(value=_build_expr(kids[0]), indices=[_build_expr(k) for k in kids[1:]], loc=loc)
	if name == "slice":
		bounds = {_name(k): _build_expr(k.children[0]) for k in kids[1:]}
		return SliceExpr(
			value=_build_expr(kids[0]),
			low=bounds.get("slice_low"),
			high=bounds.get("slice_high"),
			max=bounds.get("slice_max"),
			loc=loc,
		)
	if name == "call":
		args: List[Expr] = []
		ellipsis = False
		if len(kids) > 1:
			args = [_build_expr(a) for a in _trees(kids[1])]
			ellipsis = bool(_tokens(kids[1], "ELLIPSIS"))
		return Call(func=_build_expr(kids[0]), args=args, ellipsis=ellipsis, loc=loc)
	if name == "func_lit":
		params, results = _build_signature(kids[0])
		return FuncLit(
			type_expr=FuncType(params=params, results=results, loc=loc),
			body=_build_block(kids[1]),
			loc=loc,
		)
	if name == "composite_lit":
		return CompositeLit(type_expr=_build_expr(kids[0]), elts=_build_lit_elements(kids[1]), loc=loc)
	if name == "lit_value":
		return CompositeLit(type_expr=None, elts=_build_lit_elements(node), loc=loc)
	if name == "key_value":
		return KeyValue(key=_build_expr(kids[0]), value=_build_expr(kids[1]), loc=loc)

	# Types
	if name == "type_name":
		names = _tokens(node, "NAME")
		args = []
		if kids:
			args = [_build_expr(t) for t in _trees(kids[0])]
		if len(names) == 2:
			return TypeName(name=names[1].value, package=names[0].value, args=args, loc=loc)
		return TypeName(name=names[0].value, args=args, loc=loc)
	if name == "pointer_type":
		return PointerType(elem=_build_expr(kids[0]), loc=loc)
	if name == "slice_type":
		return ArrayType(elem=_build_expr(kids[0]), loc=loc)
	if name == "array_type":
		return ArrayType(elem=_build_expr(kids[1]), length=_build_expr(kids[0]), loc=loc)
	if name == "array_type_auto":
		return ArrayType(elem=_build_expr(kids[0]), length=Literal(kind="ELLIPSIS", value="...", loc=loc), loc=loc)
	if name == "map_type":
		return MapType(key=_build_expr(kids[0]), value=_build_expr(kids[1]), loc=loc)
	if name == "chan_both":
		return ChanType(elem=_build_expr(kids[0]), dir="both", loc=loc)
	if name == "chan_send":
		return ChanType(elem=_build_expr(kids[0]), dir="send", loc=loc)
	if name == "chan_recv":
		return ChanType(elem=_build_expr(kids[0]), dir="recv", loc=loc)
	if name == "func_type":
		params, results = _build_signature(kids[0])
		return FuncType(params=params, results=results, loc=loc)
	if name == "struct_type":
		return StructType(fields=[_build_struct_field(k) for k in kids], loc=loc)
	if name == "interface_type":
		return InterfaceType(methods=[_build_interface_elem(k) for k in kids], loc=loc)
	raise TypeError(f"Unexpected expression node: {name}")


def _build_lit_elements(tree: Tree) -> List[Expr]:
	return [_build_expr(k) for k in _trees(tree)]


def _build_struct_field(tree: Tree) -> Field:
	kind = _name(tree)
	kids = _trees(tree)
	tag = next((_tag_value(k) for k in kids if _name(k) == "tag"), None)
	if kind == "field_decl":
		names = [tok.value for tok in _tokens(kids[0], "NAME")]
		return Field(names=names, type_expr=_build_expr(kids[1]), tag=tag, loc=_loc(tree))
	type_expr = _build_expr(kids[0])
	if kind == "embedded_pointer_field":
		type_expr = PointerType(elem=type_expr, loc=_loc(tree))
	return Field(names=[], type_expr=type_expr, tag=tag, loc=_loc(tree))


def _tag_value(tree: Tree) -> str:
	return tree.children[0].value[1:-1]


def _build_interface_elem(tree: Tree) -> Field:
	kids = _trees(tree)
	if _name(tree) == "method_spec":
		params, results = _build_signature(kids[0])
		method = _tokens(tree, "NAME")[0].value
		return Field(names=[method], type_expr=FuncType(params=params, results=results, loc=_loc(tree)), loc=_loc(tree))
	return Field(names=[], type_expr=_build_constraint(kids[0]), loc=_loc(tree))


def _build_expr_list(tree: Tree) -> List[Expr]:
	return [_build_expr(k) for k in _trees(tree)]


# Statements

def _build_block(tree: Tree) -> Block:
	stmt_list = _trees(tree)[0]
	return Block(statements=_build_stmt_list(stmt_list), loc=_loc(tree))


def _build_stmt_list(tree: Tree) -> List[Stmt]:
	statements: List[Stmt] = []
	for child in _trees(tree):
		stmt = _build_stmt(child)
		if stmt is not None:
			statements.append(stmt)
	return statements


def _build_stmt(tree: Tree) -> Optional[Stmt]:
	kind = _name(tree)
	loc = _loc(tree)
	kids = _trees(tree)

	if kind == "expr_stmt":
		return ExprStmt(value=_build_expr(kids[0]), loc=loc)
	if kind == "send_stmt":
		return SendStmt(chan=_build_expr(kids[0]), value=_build_expr(kids[1]), loc=loc)
	if kind == "inc_dec_stmt":
		return IncDecStmt(target=_build_expr(kids[0]), op=kids[1].children[0].value, loc=loc)
	if kind == "assign_stmt":
		return AssignStmt(
			targets=_build_expr_list(kids[0]),
			op=kids[1].children[0].value,
			values=_build_expr_list(kids[2]),
			loc=loc,
		)
	if kind == "return_stmt":
		values = _build_expr_list(kids[0]) if kids else []
		return ReturnStmt(values=values, loc=loc)
	if kind in _BRANCH_KEYWORDS:
		labels = _tokens(tree, "NAME")
		return BranchStmt(keyword=_BRANCH_KEYWORDS[kind], label=labels[0].value if labels else None, loc=loc)
	if kind == "go_stmt":
		return GoStmt(call=_build_expr(kids[0]), loc=loc)
	if kind == "defer_stmt":
		return DeferStmt(call=_build_expr(kids[0]), loc=loc)
	if kind == "block_stmt":
		return BlockStmt(block=_build_block(kids[0]), loc=loc)
	if kind == "if_stmt":
		return _build_if_stmt(tree)
	if kind == "switch_stmt":
		return _build_switch_stmt(tree)
	if kind == "type_switch_stmt":
		return _build_type_switch_stmt(tree)
	if kind == "select_stmt":
		clauses: List[Stmt] = [_build_comm_clause(k) for k in kids]
		return SelectStmt(body=Block(statements=clauses, loc=loc), loc=loc)
	if kind in _FOR_FORMS:
		return _build_for_stmt(tree)
	if kind == "labeled_stmt":
		label = _tokens(tree, "NAME")[0].value
		inner = _build_stmt(kids[0]) if kids else None
		return LabeledStmt(label=label, stmt=inner, loc=loc)
	if kind in _GEN_DECLS:
		return DeclStmt(decl=_build_gen_decl(tree), loc=loc)
	return None


_BRANCH_KEYWORDS = {
	"break_stmt": "break",
	"continue_stmt": "continue",
	"goto_stmt": "goto",
	"fallthrough_stmt": "fallthrough",
}

_FOR_FORMS = {"for_forever", "for_while", "for_clause", "for_range"}

_GEN_DECLS = {"var_decl": "var", "const_decl": "const", "type_decl": "type"}


def _build_if_stmt(tree: Tree) -> IfStmt:
	init: Stmt | None = None
	cond: Expr | None = None
	then_block: Block | None = None
	else_stmt = None
	for child in _trees(tree):
		kind = _name(child)
		if kind == "if_init":
			init = _build_stmt(_trees(child)[0])
		elif kind == "block" and then_block is None:
			then_block = _build_block(child)
		elif kind == "else_clause":
			inner = _trees(child)[0]
			if _name(inner) == "if_stmt":
				else_stmt = _build_if_stmt(inner)
			else:
				else_stmt = BlockStmt(block=_build_block(inner), loc=_loc(inner))
		elif cond is None:
			cond = _build_expr(child)
	if cond is None or then_block is None:
		raise GoSyntaxError("malformed if statement", loc=_loc(tree))
	return IfStmt(cond=cond, then_block=then_block, init=init, else_stmt=else_stmt, loc=_loc(tree))


def _build_switch_stmt(tree: Tree) -> SwitchStmt:
	init: Stmt | None = None
	tag: Expr | None = None
	clauses: List[Stmt] = []
	for child in _trees(tree):
		kind = _name(child)
		if kind == "switch_init":
			init = _build_stmt(_trees(child)[0])
		elif kind == "switch_tag":
			tag = _build_expr(_trees(child)[0])
		else:
			clauses.append(_build_case_clause(child))
	loc = _loc(tree)
	return SwitchStmt(body=Block(statements=clauses, loc=loc), init=init, tag=tag, loc=loc)


def _build_type_switch_stmt(tree: Tree) -> TypeSwitchStmt:
	init: Stmt | None = None
	assign: Stmt | None = None
	clauses: List[Stmt] = []
	for child in _trees(tree):
		kind = _name(child)
		if kind == "switch_init":
			init = _build_stmt(_trees(child)[0])
		elif kind == "type_switch_guard":
			assign = _build_type_switch_guard(child)
		else:
			clauses.append(_build_case_clause(child))
	loc = _loc(tree)
	if assign is None:
		raise GoSyntaxError("malformed type switch", loc=loc)
	return TypeSwitchStmt(assign=assign, body=Block(statements=clauses, loc=loc), init=init, loc=loc)


def _build_type_switch_guard(tree: Tree) -> Stmt:
	loc = _loc(tree)
	guard = TypeAssert(value=_build_expr(_trees(tree)[0]), type_expr=None, loc=loc)
	binding = [c for c in tree.children if isinstance(c, Token) and c.type == "NAME"]
	if binding:
		target = Name(ident=binding[0].value, loc=_loc_from_token(binding[0]))
		return AssignStmt(targets=[target], op=":=", values=[guard], loc=loc)
	return ExprStmt(value=guard, loc=loc)


def _build_case_clause(tree: Tree) -> CaseClause:
	loc = _loc(tree)
	kids = _trees(tree)
	if _name(tree) == "default_clause":
		return CaseClause(values=None, body=Block(statements=_build_stmt_list(kids[0]), loc=loc), loc=loc)
	values = _build_expr_list(kids[0])
	return CaseClause(values=values, body=Block(statements=_build_stmt_list(kids[1]), loc=loc), loc=loc)


def _build_comm_clause(tree: Tree) -> CommClause:
	loc = _loc(tree)
	kids = _trees(tree)
	if _name(tree) == "default_comm_clause":
		return CommClause(comm=None, body=Block(statements=_build_stmt_list(kids[0]), loc=loc), loc=loc)
	comm = _build_stmt(kids[0])
	return CommClause(comm=comm, body=Block(statements=_build_stmt_list(kids[1]), loc=loc), loc=loc)


def _build_for_stmt(tree: Tree) -> Stmt:
	loc = _loc(tree)
	parts = {_name(k): k for k in _trees(tree)}
	body = _build_block(parts["block"])
	if "range_clause" in parts:
		return _build_range_stmt(parts["range_clause"], body, loc)
	init = _build_stmt(_trees(parts["for_init"])[0]) if "for_init" in parts else None
	cond = _build_expr(_trees(parts["for_cond"])[0]) if "for_cond" in parts else None
	post = _build_stmt(_trees(parts["for_post"])[0]) if "for_post" in parts else None
	return ForStmt(body=body, init=init, cond=cond, post=post, loc=loc)


def _build_range_stmt(tree: Tree, body: Block, loc: Located | None) -> RangeStmt:
	key: Expr | None = None
	value: Expr | None = None
	define = False
	kids = _trees(tree)
	if _name(kids[0]) == "range_lhs":
		lhs = kids[0]
		targets = _build_expr_list(_trees(lhs)[0])
		define = any(isinstance(c, Token) and c.value == ":=" for c in lhs.children)
		key = targets[0]
		value = targets[1] if len(targets) > 1 else None
	return RangeStmt(iterable=_build_expr(kids[-1]), body=body, key=key, value=value, define=define, loc=loc)


# Declarations

def _build_gen_decl(tree: Tree) -> GenDecl:
	keyword = _GEN_DECLS[_name(tree)]
	specs = []
	for spec in _trees(tree):
		if _name(spec) in ("type_spec", "type_alias_spec"):
			specs.append(_build_type_spec(spec))
		else:
			specs.append(_build_value_spec(spec))
	return GenDecl(keyword=keyword, specs=specs, loc=_loc(tree))


def _build_value_spec(tree: Tree) -> ValueSpec:
	names: List[str] = []
	type_expr: Expr | None = None
	values: List[Expr] = []
	for child in _trees(tree):
		kind = _name(child)
		if kind == "name_list":
			names = [tok.value for tok in _tokens(child, "NAME")]
		elif kind == "expr_list":
			values = _build_expr_list(child)
		else:
			type_expr = _build_expr(child)
	return ValueSpec(names=names, type_expr=type_expr, values=values, loc=_loc(tree))


def _build_type_spec(tree: Tree) -> TypeSpec:
	type_params: List[Field] = []
	type_expr: Expr | None = None
	for child in _trees(tree):
		if _name(child) == "type_params":
			type_params = _build_type_params(child)
		else:
			type_expr = _build_expr(child)
	name = _tokens(tree, "NAME")[0].value
	return TypeSpec(
		name=name,
		type_expr=type_expr,
		type_params=type_params,
		alias=_name(tree) == "type_alias_spec",
		loc=_loc(tree),
	)


# Tree helpers

def _trees(tree: Tree) -> List[Tree]:
	return [c for c in tree.children if isinstance(c, Tree)]


def _tokens(tree: Tree, ttype: str) -> List[Token]:
	return [c for c in tree.children if isinstance(c, Token) and c.type == ttype]


def _loc(tree: Tree) -> Optional[Located]:
	meta = tree.meta
	if getattr(meta, "empty", True):
		return None
	return Located(line=meta.line, column=meta.column)


def _loc_from_token(token: Token) -> Located:
	return Located(line=token.line, column=token.column)


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


__all__ = ["GoSyntaxError", "GoSemicolonInserter", "parse_expr", "parse_file"]

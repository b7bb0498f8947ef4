# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Go front-end: grammar, AST and tree walking."""

from . import ast
from .parser import GoSemicolonInserter, GoSyntaxError, parse_expr, parse_file
from .walk import iter_children, iter_nodes

__all__ = [
	"ast",
	"GoSemicolonInserter",
	"GoSyntaxError",
	"iter_children",
	"iter_nodes",
	"parse_expr",
	"parse_file",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Locate handler closures built inside a middleware body.

The adapter call is `http.HandlerFunc(func(w, r) { ... })`. The walk is an
unrestricted preorder over the whole body, so adapter calls nested in other
closures, composite literals or deferred calls are found too.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterator

from returnlint.checker.names import http_qualifiers
from returnlint.parser.ast import Attr, Block, Call, FuncDecl, FuncLit, Name
from returnlint.parser.walk import iter_nodes

logger = logging.getLogger(__name__)

ADAPTER_NAME = "HandlerFunc"


def is_adapter_call(node: object, names: AbstractSet[str]) -> bool:
	"""True for `<http>.HandlerFunc(<func literal>, ...)`."""
	if not isinstance(node, Call):
		return False
	callee = node.func
	if not isinstance(callee, Attr) or callee.attr != ADAPTER_NAME:
		return False
	if not isinstance(callee.value, Name) or callee.value.ident not in names:
		return False
	return bool(node.args) and isinstance(node.args[0], FuncLit)


def find_closure_bodies(fn: FuncDecl, names: AbstractSet[str] | None = None) -> Iterator[Block]:
	"""Yield the body of every closure passed to the handler-function adapter."""
	if names is None:
		names = http_qualifiers()
	body = getattr(fn, "body", None)
	if body is None:
		return
	for node in iter_nodes(body):
		if is_adapter_call(node, names):
			lit = node.args[0]
			logger.debug("%s: handler closure at %s", fn.name, lit.loc)
			yield lit.body


__all__ = ["ADAPTER_NAME", "find_closure_bodies", "is_adapter_call"]

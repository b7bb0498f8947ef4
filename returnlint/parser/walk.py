# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generic preorder traversal over the syntax tree.

Children are discovered from dataclass fields, so new node kinds are walked
without touching this module. The walk keeps its own stack; nesting depth is
bounded by memory, not by the interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Iterator

from .ast import Node


def iter_children(node: Node) -> Iterator[Node]:
	"""Yield direct child nodes in field (source) order."""
	for f in fields(node):  # type: ignore[arg-type]
		if f.name == "loc":
			continue
		value = getattr(node, f.name)
		if isinstance(value, Node):
			yield value
		elif isinstance(value, (list, tuple)):
			for item in value:
				if isinstance(item, Node):
					yield item


def iter_nodes(root: Node) -> Iterator[Node]:
	"""Yield `root` and every descendant in preorder."""
	stack = [root]
	while stack:
		node = stack.pop()
		yield node
		if is_dataclass(node):
			stack.extend(reversed(list(iter_children(node))))


__all__ = ["iter_children", "iter_nodes"]

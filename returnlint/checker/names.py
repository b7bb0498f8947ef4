# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Syntactic name resolution for the `net/http` package.

There is no type information: a selector `q.Handler` refers to the standard
library only when `q` is a name the file could have bound to `net/http`. The
bare `http` qualifier is always accepted so trees without an import list
(hand-built fixtures, fragments) still match.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional

from returnlint.parser.ast import File, ImportSpec

HTTP_PACKAGE = "net/http"
DEFAULT_QUALIFIER = "http"


def http_qualifiers(imports: Iterable[ImportSpec] = ()) -> FrozenSet[str]:
	"""Return every qualifier that names `net/http` in this file."""
	names = {DEFAULT_QUALIFIER}
	for spec in imports:
		if spec.path != HTTP_PACKAGE:
			continue
		# `_` binds nothing and `.` imports into file scope; neither yields a qualifier.
		if spec.alias and spec.alias not in ("_", "."):
			names.add(spec.alias)
	return frozenset(names)


def qualifiers_for(file: Optional[File]) -> FrozenSet[str]:
	if file is None:
		return http_qualifiers()
	return http_qualifiers(file.imports)


__all__ = ["DEFAULT_QUALIFIER", "HTTP_PACKAGE", "http_qualifiers", "qualifiers_for"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Rule implementation: signature matching, closure location and the
WriteHeader/return adjacency check.
"""

from returnlint.checker.adjacency import MESSAGE, check_block, is_status_call
from returnlint.checker.closure import find_closure_bodies, is_adapter_call
from returnlint.checker.names import http_qualifiers, qualifiers_for
from returnlint.checker.reporter import Reporter
from returnlint.checker.signature import matches_signature

__all__ = [
	"MESSAGE",
	"Reporter",
	"check_block",
	"find_closure_bodies",
	"http_qualifiers",
	"is_adapter_call",
	"is_status_call",
	"matches_signature",
	"qualifiers_for",
]

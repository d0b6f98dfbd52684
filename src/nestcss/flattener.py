# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 18-Oct-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

from typing import List
from .model import NodeKind, Node, Style, ImplementationError

__doc__ = """
Converts a rule with nested rules into the flat list of sibling rules
that CSS requires.
"""

def flatten( node:Node, hasParentRule:bool, style:Style=Style.NESTED ) -> List[Node]:
	"""Flattens the given rule node, whose children must already be
	flattened. The declarations (and directives) stay in a copy of the node,
	which is followed by the nested rules. The node is dropped when it
	has no declarations. When the node has no parent rule, the last rule
	of the result ends the group."""
	decls:List[Node] = []
	rules:List[Node] = []
	for child in node.children:
		kind = child.kind
		if kind is NodeKind.RULE:
			rules.append(child)
		elif kind is NodeKind.DECLARATION or kind is NodeKind.DIRECTIVE:
			if not child.invisible:
				decls.append(child)
		else:
			raise ImplementationError("Cannot flatten node of kind {0}: {1}".format(kind, child))
	if decls:
		if style is Style.NESTED:
			rules = [_.copy(depth=_.depth + 1) for _ in rules]
		rules.insert(0, node.copy(children=decls))
	if not hasParentRule and rules:
		last  = len(rules) - 1
		rules = [_.copy(groupEnd=i == last) for i, _ in enumerate(rules)]
	return rules

# EOF

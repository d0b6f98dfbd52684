# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 18-Oct-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

import logging
from .model     import NodeKind, Options, SemanticError, ImplementationError
from .selector  import parseSelector, resolveParentRefs
from .flattener import flatten
from .processor import Environment, interpolate
from .writer    import CSSWriter

log = logging.getLogger("nestcss")

__doc__ = """
Compiles a stylesheet tree into CSS. The compilation is made of distinct
passes, each returning a new tree:

- `perform` interpolates and parses the selectors of every rule,
- `resolve` resolves the parent references, top-down,
- `cssize` flattens the nested rules, bottom-up,

after which the tree can be written by the `CSSWriter`.
"""

class Compiler(object):

	def __init__( self, options=None ):
		self.options = options or Options()

	def compile( self, stylesheet ):
		"""Returns the CSS text for the given stylesheet."""
		return CSSWriter(self.options).render(self.process(stylesheet))

	def process( self, stylesheet ):
		"""Returns the flattened and resolved stylesheet, ready to
		be written."""
		environment = Environment(self.options.variables)
		children    = [self.perform(_, environment) for _ in stylesheet.children]
		children    = [self.resolve(_, None) for _ in children]
		result      = []
		for _ in children:
			result += self.cssize(_, False)
		log.debug("Compiled {0}: {1} top-level nodes into {2}".format(stylesheet.path or "<string>", len(children), len(result)))
		return stylesheet.copy(children=result)

	# =========================================================================
	# PERFORM
	# =========================================================================

	def perform( self, node, environment ):
		"""Interpolates the variables in the rules and values, and parses
		the selectors of the rules."""
		kind = node.kind
		if kind is NodeKind.RULE:
			parsed = tuple(parseSelector(interpolate(_, environment, node.line, node.filename)) for _ in node.rules)
			return node.copy(
				parsedRules = parsed,
				children    = [self.perform(_, environment) for _ in node.children],
			)
		elif kind is NodeKind.DECLARATION:
			return node.copy(value=interpolate(node.value, environment, node.line, node.filename))
		elif kind is NodeKind.DIRECTIVE:
			if not node.hasBlock:
				return node
			return node.copy(children=[self.perform(_, environment) for _ in node.children])
		else:
			raise ImplementationError("Compiler.perform: {0} not supported".format(node))

	# =========================================================================
	# RESOLVE
	# =========================================================================

	def resolve( self, node, parent ):
		"""Resolves the parent references of the given node against the
		resolved rules of its `parent`, which is `None` when the node is
		not directly within a rule."""
		kind = node.kind
		if kind is NodeKind.RULE:
			try:
				resolved = resolveParentRefs(node.parsedRules, parent)
			except SemanticError as e:
				e.locate(node.line, node.filename)
				raise
			return node.copy(
				resolvedRules = resolved,
				children      = [self.resolve(_, resolved) for _ in node.children],
			)
		elif kind is NodeKind.DECLARATION:
			return node
		elif kind is NodeKind.DIRECTIVE:
			if not node.hasBlock:
				return node
			return node.copy(children=[self.resolve(_, None) for _ in node.children])
		else:
			raise ImplementationError("Compiler.resolve: {0} not supported".format(node))

	# =========================================================================
	# CSSIZE
	# =========================================================================

	def cssize( self, node, hasParentRule ):
		"""Returns the list of nodes that replace the given node once
		flattened. Children are flattened first, and their results spliced
		in place of them."""
		kind = node.kind
		if kind is NodeKind.RULE:
			children = []
			for _ in node.children:
				children += self.cssize(_, True)
			return flatten(node.copy(children=children), hasParentRule, self.options.style)
		elif kind is NodeKind.DECLARATION:
			return [node]
		elif kind is NodeKind.DIRECTIVE:
			if not node.hasBlock:
				return [node]
			children = []
			for _ in node.children:
				children += self.cssize(_, False)
			return [node.copy(children=children)]
		else:
			raise ImplementationError("Compiler.cssize: {0} not supported".format(node))

def compileStylesheet( stylesheet, options=None ):
	return Compiler(options).compile(stylesheet)

# EOF

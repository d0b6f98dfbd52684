# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 18-Oct-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

from collections import namedtuple
from enum        import Enum

__doc__ = """
Defines the model for nested stylesheets: selector tokens, the rule,
declaration and directive nodes, the compilation options and the errors
raised while compiling.
"""

# The character used to include the parent selector
PARENT  = "&"

class SyntaxError(Exception):

	def __init__( self, message, line=None ):
		Exception.__init__(self, message)
		self.line = line

class SemanticError(Exception):

	def __init__( self, message, line=None, filename=None ):
		Exception.__init__(self, message)
		self.line     = line
		self.filename = filename

	def locate( self, line, filename ):
		"""Sets the location of the error unless it is already known."""
		if self.line is None:     self.line     = line
		if self.filename is None: self.filename = filename
		return self

	def __str__( self ):
		message = Exception.__str__(self)
		if self.line is None:
			return message
		return "{0}:{1}: {2}".format(self.filename or "<string>", self.line, message)

class UnboundParentReference(SemanticError):
	pass

class ImplementationError(Exception):
	pass

# -----------------------------------------------------------------------------
#
# OPTIONS
#
# -----------------------------------------------------------------------------

class Style(Enum):
	NESTED     = "nested"
	EXPANDED   = "expanded"
	COMPACT    = "compact"
	COMPRESSED = "compressed"

class DebugMode(Enum):
	NONE       = "none"
	COMMENT    = "comment"
	STRUCTURED = "structured"

class Options(object):
	"""The options that drive the compilation of a stylesheet."""

	def __init__( self, style=Style.NESTED, debug=DebugMode.NONE, basePath=None, variables=None ):
		self.style     = Style(style)
		self.debug     = DebugMode(debug)
		self.basePath  = basePath
		self.variables = dict(variables or {})

	def copy( self, **changes ):
		values = dict(
			style     = self.style,
			debug     = self.debug,
			basePath  = self.basePath,
			variables = self.variables,
		)
		values.update(changes)
		return Options(**values)

	def __repr__( self ):
		return "<Options style={0} debug={1} basePath={2}>".format(self.style.value, self.debug.value, self.basePath)

# -----------------------------------------------------------------------------
#
# SELECTOR TOKENS
#
# -----------------------------------------------------------------------------

class TokenKind(Enum):
	LITERAL = "literal"
	PARENT  = "parent"
	QUOTED  = "quoted"

class Literal(namedtuple("Literal", "text")):
	"""A run of plain selector text."""

	kind = TokenKind.LITERAL

	def expr( self ):
		return self.text

class ParentMarker(namedtuple("ParentMarker", "")):
	"""Stands for the resolved selector of the enclosing rule."""

	kind = TokenKind.PARENT

	def expr( self ):
		return PARENT

class QuotedSpan(namedtuple("QuotedSpan", "delimiter content closing")):
	"""A quoted literal, kept verbatim. The `closing` part is empty when
	the span is not terminated."""

	kind = TokenKind.QUOTED

	def expr( self ):
		return self.delimiter + self.content + self.closing

# -----------------------------------------------------------------------------
#
# NODES
#
# -----------------------------------------------------------------------------

class NodeKind(Enum):
	RULE        = "rule"
	DECLARATION = "declaration"
	DIRECTIVE   = "directive"

class Node(object):
	"""Base class for the nodes of a stylesheet. Nodes are not modified
	by the compilation passes: each pass creates copies with `copy`."""

	kind   = None
	FIELDS = ()

	def __init__( self, children=None, line=None, filename=None ):
		self.children = children
		self.line     = line
		self.filename = filename

	@property
	def invisible( self ):
		return False

	def copy( self, **changes ):
		c = self.__class__.__new__(self.__class__)
		c.__dict__.update(self.__dict__)
		for k, v in changes.items():
			if k not in c.__dict__:
				raise ImplementationError("{0} has no field `{1}`".format(self.__class__.__name__, k))
			setattr(c, k, v)
		if c.children is not None:
			c.children = list(c.children)
		return c

	def __eq__( self, other ):
		return self.__class__ is other.__class__ and all(getattr(self, _) == getattr(other, _) for _ in self.FIELDS + ("children",))

	def __ne__( self, other ):
		return not self.__eq__(other)

	__hash__ = None

class RuleNode(Node):
	"""A rule block. Its `rules` are the raw selector lines as written in the
	source, which are meant to be joined by commas. For instance

	```
	foo, bar, baz,
	bip, bop, bup
	```

	gives `["foo, bar, baz,", "bip, bop, bup"]`. The `parsedRules` are set
	once the rule has been performed and the `resolvedRules` once its parent
	has been resolved. The `depth` is only greater than 0 in the nested style,
	for rules nested in a parent that has declarations. The `groupEnd` flag
	marks the last rule of a top-level group."""

	kind   = NodeKind.RULE
	FIELDS = ("rules",)

	def __init__( self, rule=None, children=None, line=None, filename=None ):
		Node.__init__(self, [] if children is None else children, line, filename)
		self.rules         = [] if rule is None else [rule]
		self.parsedRules   = None
		self.resolvedRules = None
		self.depth         = 0
		self.groupEnd      = False

	def addRules( self, node ):
		"""Adds the rules of the given node to this one's."""
		self.rules = self.rules + node.rules
		return self

	@property
	def continued( self ):
		"""Tells if the last selector line ends with a comma, in which case
		the rule is continued on the next line."""
		return bool(self.rules) and self.rules[-1].rstrip().endswith(",")

	def __repr__( self ):
		return "<RuleNode {0!r} depth={1} groupEnd={2}>".format(self.resolvedRules or self.rules, self.depth, self.groupEnd)

class PropNode(Node):
	"""A declaration leaf (`name: value`)."""

	kind   = NodeKind.DECLARATION
	FIELDS = ("name", "value", "important")

	def __init__( self, name, value, important=False, line=None, filename=None ):
		Node.__init__(self, None, line, filename)
		self.name      = name
		self.value     = value
		self.important = important

	@property
	def invisible( self ):
		return not self.value

	def __repr__( self ):
		return "<PropNode {0}: {1}>".format(self.name, self.value)

class DirectiveNode(Node):
	"""An at-rule such as `@media screen`. Directives without a block
	(`@import "a.css"`) have no children."""

	kind   = NodeKind.DIRECTIVE
	FIELDS = ("value",)

	def __init__( self, value, children=None, line=None, filename=None ):
		Node.__init__(self, children, line, filename)
		self.value = value

	@property
	def hasBlock( self ):
		return self.children is not None

	def __repr__( self ):
		return "<DirectiveNode {0}>".format(self.value)

class Stylesheet(Node):
	"""The root of a stylesheet."""

	def __init__( self, path=None, children=None ):
		Node.__init__(self, [] if children is None else children, None, path)
		self.path = path

	def add( self, node ):
		if isinstance(node, (tuple, list)):
			for _ in node:
				self.add(_)
		else:
			self.children.append(node)
		return self

	def __repr__( self ):
		return "<Stylesheet {0} ({1} nodes)>".format(self.path, len(self.children))

# -----------------------------------------------------------------------------
#
# FACTORY
#
# -----------------------------------------------------------------------------

class Factory(object):
	"""Creates nodes bound to the given source path."""

	def __init__( self, path=None ):
		self.path = path

	def stylesheet( self ):
		return Stylesheet(self.path)

	def rule( self, rule, line=None ):
		return RuleNode(rule, line=line, filename=self.path)

	def property( self, name, value, important=False, line=None ):
		return PropNode(name, value, important, line=line, filename=self.path)

	def directive( self, value, children=None, line=None ):
		return DirectiveNode(value, children, line=line, filename=self.path)

# EOF

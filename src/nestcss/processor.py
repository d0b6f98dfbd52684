# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 18-Oct-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

import re
import tinycss2
from .model import NodeKind, Factory, SyntaxError, SemanticError

__doc__ = """
Creates the node tree of a nested stylesheet from its source, using
`tinycss2` to tokenize it. Also implements the interpolation of `$name`
references in selectors and values.
"""

# Quoted strings are matched first so that they are kept as-is
RE_STRING    = r"\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'"
RE_REFERENCE = re.compile(r"(" + RE_STRING + r")|\$([\w_][\w\d_]*)", re.S)
RE_COMMENT   = re.compile(r"(" + RE_STRING + r")|/\*.*?\*/", re.S)

# -----------------------------------------------------------------------------
#
# INTERPOLATION
#
# -----------------------------------------------------------------------------

class Environment(object):
	"""Holds the values of the variables referenced in a stylesheet."""

	def __init__( self, values=None ):
		self.values = dict(values or {})

	def set( self, name, value ):
		self.values[name] = value
		return self

	def has( self, name ):
		return name in self.values

	def get( self, name ):
		return self.values[name]

	def __repr__( self ):
		return "<Environment {0}>".format(", ".join(sorted(self.values)))

def interpolate( text, environment, line=None, filename=None ):
	"""Replaces the `$name` references in the given text by their value
	in the environment."""
	def replace( match ):
		if match.group(1):
			return match.group(1)
		name = match.group(2)
		if not environment.has(name):
			raise SemanticError("Undefined variable `${0}`".format(name), line, filename)
		return "{0}".format(environment.get(name))
	return RE_REFERENCE.sub(replace, text)

# -----------------------------------------------------------------------------
#
# PROCESSOR
#
# -----------------------------------------------------------------------------

class SourceProcessor(object):
	"""Creates the model of a stylesheet from the component values returned
	by `tinycss2`. Block contents are split into statements on `;` and
	on `{}` blocks: a statement followed by a block is a rule or a
	directive, any other statement is a declaration or a block-less
	directive."""

	def __init__( self, path=None ):
		self.F      = Factory(path)
		self.path   = path
		self.source = ""
		self._lines = [0]

	def parsePath( self, path ):
		with open(path) as f:
			self.path = path
			self.F    = Factory(path)
			return self.process(f.read())

	def process( self, text ):
		# NOTE: tinycss2 normalizes newlines before tokenizing, we need to do the
		# same for the token positions to match the source.
		text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n").replace("\0", "\ufffd")
		self.source = text
		self._lines = [0] + [i + 1 for i, c in enumerate(text) if c == "\n"]
		s = self.F.stylesheet()
		for node in self.onContent(tinycss2.parse_component_value_list(text, skip_comments=True)):
			if node.kind is NodeKind.DECLARATION:
				raise SyntaxError("Properties are only allowed within rules: `{0}` at line {1}".format(node.name, node.line), node.line)
			s.add(node)
		return s

	# =========================================================================
	# BLOCK STRUCTURE
	# =========================================================================

	def onContent( self, tokens ):
		children = []
		pending  = []
		for token in tokens:
			if token.type == "comment":
				continue
			elif token.type == "error":
				raise SyntaxError("{0} at line {1}".format(token.message, token.source_line), token.source_line)
			elif token.type == "literal" and token.value == ";":
				children += self.onStatement(pending, token)
				pending   = []
			elif token.type == "{} block":
				children.append(self.onBlock(pending, token))
				pending = []
			else:
				pending.append(token)
		children += self.onStatement(pending)
		return children

	def onBlock( self, prelude, block ):
		prelude = strip(prelude)
		if not prelude:
			raise SyntaxError("Block without selector at line {0}".format(block.source_line), block.source_line)
		line = prelude[0].source_line
		if prelude[0].type == "at-keyword":
			value = self.onDirectiveValue(prelude, block)
			return self.F.directive(value, self.onContent(block.content), line)
		rule = self.onSelection(self.text(prelude, block), line)
		rule.children = self.onContent(block.content)
		return rule

	def onStatement( self, tokens, end=None ):
		tokens = strip(tokens)
		if not tokens:
			return []
		line = tokens[0].source_line
		if tokens[0].type == "at-keyword":
			return [self.F.directive(self.onDirectiveValue(tokens, end), None, line)]
		decl = tinycss2.parse_one_declaration(tokens, skip_comments=True)
		if decl.type == "error":
			raise SyntaxError("Invalid declaration `{0}` at line {1}: {2}".format(tinycss2.serialize(tokens).strip(), line, decl.message), line)
		return [self.F.property(decl.name, tinycss2.serialize(decl.value).strip(), decl.important, line)]

	def onDirectiveValue( self, tokens, end=None ):
		return " ".join(_.strip() for _ in self.text(tokens, end).split("\n") if _.strip())

	def onSelection( self, text, line ):
		"""Creates the rule for the given selector text. Each line of the
		text becomes a selector line of the rule when the previous one
		ends with a comma, and is otherwise joined to the previous one."""
		lines = [_.strip() for _ in text.split("\n") if _.strip()]
		rule  = self.F.rule(lines[0], line)
		for _ in lines[1:]:
			if rule.continued:
				rule.addRules(self.F.rule(_, line))
			else:
				rule.rules = rule.rules[:-1] + [rule.rules[-1] + " " + _]
		return rule

	# =========================================================================
	# SOURCE TEXT
	# =========================================================================

	def offset( self, token ):
		return self._lines[token.source_line - 1] + token.source_column - 1

	def text( self, tokens, end=None ):
		"""Returns the source text of the given tokens, up to the `end`
		token when given, without comments."""
		if end is None:
			text = tinycss2.serialize(tokens)
		else:
			text = self.source[self.offset(tokens[0]):self.offset(end)]
		return RE_COMMENT.sub(lambda m: m.group(1) or "", text).strip()

def strip( tokens ):
	"""Removes the leading and trailing whitespace tokens."""
	start = 0
	end   = len(tokens)
	while start < end and tokens[start].type == "whitespace":
		start += 1
	while end > start and tokens[end - 1].type == "whitespace":
		end -= 1
	return tokens[start:end]

# EOF

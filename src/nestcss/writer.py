# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 18-Oct-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

import re, os, sys, io
from urllib.parse import quote

from .model import *

__doc__ = """
Writes flattened and resolved stylesheets as CSS, using one of the
`nested`, `expanded`, `compact` or `compressed` styles, optionally
annotating each rule with its source location.
"""

INDENT          = "  "
DEBUG_INFO      = "@media -sass-debug-info"
DEBUG_PROPERTY  = "font-family"
RE_DEBUG_ESCAPE = re.compile(r"[^\w-]", re.A)
RE_DEBUG_LEAD   = re.compile(r"^[\d-]", re.A)
# Reserved URI characters, kept unescaped in file URIs
URI_SAFE        = "/;?:@&=+$,!*'()[]"

# -----------------------------------------------------------------------------
#
# DIAGNOSTICS
#
# -----------------------------------------------------------------------------

def relativize( filename, basePath ):
	"""Returns the filename relative to the base path, or the filename
	as-is when it cannot be made relative."""
	if not basePath:
		return filename
	if os.path.isabs(filename) != os.path.isabs(basePath):
		return filename
	try:
		return os.path.relpath(filename, basePath)
	except ValueError:
		# Different drives on Windows
		return filename

def debugInfo( node ):
	"""Returns the `filename` (as a file URI) and `line` of the node. The
	ones that are not known are empty."""
	return {
		"filename" : "file://" + quote(os.path.abspath(node.filename), safe=URI_SAFE) if node.filename else "",
		"line"     : "" if node.line is None else node.line,
	}

def escapeDebugValue( value ):
	value = RE_DEBUG_ESCAPE.sub(lambda m: "\\" + m.group(), "{0}".format(value))
	return RE_DEBUG_LEAD.sub(lambda m: "\\{0:04x} ".format(ord(m.group())), value)

def debugInfoRule( node ):
	"""Creates the `@media -sass-debug-info` directive that encodes the
	location of the given node, with one rule per key."""
	rules = []
	for k, v in sorted(debugInfo(node).items()):
		rule = RuleNode(children=[PropNode(DEBUG_PROPERTY, escapeDebugValue(v))])
		rule.resolvedRules = ((RE_DEBUG_ESCAPE.sub(lambda m: "\\" + m.group(), k),),)
		rules.append(rule)
	return DirectiveNode(DEBUG_INFO, rules)

# -----------------------------------------------------------------------------
#
# CSS WRITER
#
# -----------------------------------------------------------------------------

class CSSWriter( object ):

	def __init__( self, options=None, output=sys.stdout ):
		self.options = options or Options()
		self.output  = output

	@property
	def style( self ):
		return self.options.style

	def write( self, element ):
		self._write(self.render(element))
		self.output.flush()
		return self

	def _write( self, value ):
		if isinstance(self.output, io.TextIOBase):
			self.output.write(value)
		else:
			self.output.write(value.encode("utf-8"))

	def render( self, element, depth=1 ):
		"""Returns the CSS text for the given element, which can be a
		stylesheet or any node."""
		if isinstance(element, Stylesheet):
			return self.onStylesheet(element)
		else:
			return self.on(element, depth)

	def on( self, element, depth ):
		kind = element.kind
		if kind is NodeKind.RULE:
			return self.onRule(element, depth)
		elif kind is NodeKind.DECLARATION:
			return self.onProperty(element, depth)
		elif kind is NodeKind.DIRECTIVE:
			return self.onDirective(element, depth)
		else:
			raise ImplementationError("CSSWriter: {0} not supported".format(element))

	def onStylesheet( self, element ):
		result = ""
		for _ in element.children:
			if _.invisible: continue
			result += self.on(_, 1) + ("" if self.style is Style.COMPRESSED else "\n")
		result = result.rstrip()
		return result + "\n" if result else ""

	def onRule( self, element, depth ):
		depth          = depth + element.depth
		style          = self.style
		is_multiline   = style in (Style.NESTED, Style.EXPANDED)
		rule_separator = "," if style is Style.COMPRESSED else ", "
		line_separator = ",\n" if is_multiline else rule_separator
		old_spaces     = INDENT * (depth - 1)
		per_rule_indent, total_indent = (old_spaces, "") if is_multiline else ("", old_spaces)
		total_rule = total_indent + line_separator.join(
			per_rule_indent + rule_separator.join(line) for line in element.resolvedRules
		)
		result = ""
		if style is not Style.COMPRESSED:
			result += self.onDebug(element, depth, old_spaces)
		group_end = "\n" if element.groupEnd else ""
		if style is Style.COMPACT:
			properties = " ".join(self.renderChildren(element, 1))
			result += "{0} {{ {1} }}{2}".format(total_rule, properties, group_end)
		elif style is Style.COMPRESSED:
			# Block-less directives carry their own `;`
			properties = ";".join(_.rstrip(";") for _ in self.renderChildren(element, 1))
			result += "{0}{{{1}}}".format(total_rule, properties)
		else:
			properties = "\n".join(self.renderChildren(element, depth + 1))
			end_props  = "\n" + old_spaces if style is Style.EXPANDED else " "
			result += "{0} {{\n{1}{2}}}{3}".format(total_rule, properties, end_props, group_end)
		return result

	def renderChildren( self, element, depth ):
		for _ in element.children:
			if _.invisible: continue
			# Directives end with a newline, which the rule adds itself
			text = self.on(_, depth).rstrip("\n")
			if text: yield text

	def onDebug( self, element, depth, spaces ):
		"""Returns the source location annotation for the given rule,
		if one is requested."""
		debug = self.options.debug
		if debug is DebugMode.STRUCTURED:
			writer = CSSWriter(self.options.copy(style=Style.COMPRESSED, debug=DebugMode.NONE))
			return writer.on(debugInfoRule(element), depth) + "\n"
		elif debug is DebugMode.COMMENT:
			comment = "{0}/* line {1}".format(spaces, element.line)
			if element.filename:
				comment += ", {0}".format(relativize(element.filename, self.options.basePath))
			return comment + " */\n"
		else:
			return ""

	def onProperty( self, element, depth ):
		compressed = self.style is Style.COMPRESSED
		value      = element.value + (" !important" if element.important else "")
		return "{0}{1}:{2}{3}{4}".format(
			INDENT * (depth - 1),
			element.name,
			"" if compressed else " ",
			value,
			"" if compressed else ";",
		)

	def onDirective( self, element, depth ):
		style  = self.style
		spaces = "" if style is Style.COMPRESSED else INDENT * (depth - 1)
		if not element.hasBlock:
			return spaces + element.value + ";"
		if not element.children:
			return spaces + element.value + " {}"
		if style is Style.COMPRESSED:
			result = element.value + "{"
		else:
			result = spaces + element.value + " {" + (" " if style is Style.COMPACT else "\n")
		was_prop = False
		first    = True
		for child in element.children:
			if child.invisible: continue
			is_prop = child.kind is NodeKind.DECLARATION
			if style is Style.COMPACT:
				if is_prop:
					result += self.on(child, 1 if first or was_prop else depth + 1) + " "
				else:
					if was_prop:
						result = result[:-1] + "\n"
					rendered = self.on(child, depth + 1)
					if first: rendered = rendered.lstrip()
					result += rendered.rstrip() + "\n"
			elif style is Style.COMPRESSED:
				result += (";" if was_prop else "") + self.on(child, 1)
			else:
				result += self.on(child, depth + 1) + "\n"
			was_prop = is_prop
			first    = False
		if style is Style.COMPRESSED:
			return result.rstrip() + "}"
		return result.rstrip() + ("\n" + spaces if style is Style.EXPANDED else " ") + "}\n"

# EOF

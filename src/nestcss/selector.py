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
from typing import List,Optional,Tuple
from .model import PARENT, TokenKind, Literal, ParentMarker, QuotedSpan, UnboundParentReference

__doc__ = """
Parses selector lines into alternatives of tokens and resolves the parent
references (`&`) of nested rules against the selectors of their parent.
"""

Alternative  = Tuple[object, ...]
Line         = Tuple[Alternative, ...]
ParsedRule   = Tuple[Line, ...]
ResolvedRule = Tuple[Tuple[str, ...], ...]

RE_LITERAL = re.compile("[^\"',{0}]*".format(re.escape(PARENT)))
RE_SPACES  = re.compile(r"\s*")
RE_QUOTED  = {
	'"' : re.compile(r'(?:[^"\\]|\\.)*', re.S),
	"'" : re.compile(r"(?:[^'\\]|\\.)*", re.S),
}

# -----------------------------------------------------------------------------
#
# PARSING
#
# -----------------------------------------------------------------------------

def parseSelector( text:str ) -> Line:
	"""Parses the given selector line into a tuple of comma-separated
	alternatives, each of them being a tuple of `Literal`, `ParentMarker` and
	`QuotedSpan` tokens. Commas and parent markers within quotes are kept
	as-is. For instance `&.foo, bar` gives

	```
	((ParentMarker(), Literal(".foo")), (Literal("bar"),))
	```
	"""
	alternatives:List[list] = [[]]
	offset = 0
	end    = len(text)
	while offset < end:
		match  = RE_LITERAL.match(text, offset)
		offset = match.end()
		alternatives[-1].append(Literal(match.group()))
		if offset >= end:
			break
		char    = text[offset]
		offset += 1
		if char == PARENT:
			alternatives[-1].append(ParentMarker())
		elif char == ",":
			offset = RE_SPACES.match(text, offset).end()
			if offset < end:
				alternatives.append([])
		else:
			match   = RE_QUOTED[char].match(text, offset)
			offset  = match.end()
			# Unterminated quotes are tolerated, but we still consume the
			# closing quote or a trailing backslash.
			closing = text[offset] if offset < end else ""
			offset += len(closing)
			alternatives[-1].append(QuotedSpan(char, match.group(), closing))
	return tuple(mergeLiterals(_) for _ in alternatives)

def mergeLiterals( tokens ) -> Alternative:
	"""Merges adjacent literals and drops the empty ones."""
	result:list = []
	for token in tokens:
		if token.kind is TokenKind.LITERAL:
			if not token.text:
				continue
			if result and result[-1].kind is TokenKind.LITERAL:
				result[-1] = Literal(result[-1].text + token.text)
				continue
		result.append(token)
	return tuple(result)

def isContinued( text:str ) -> bool:
	"""A selector line ending with a comma expects a continuation line."""
	return text.rstrip().endswith(",")

def hasParent( alternative:Alternative ) -> bool:
	return any(_.kind is TokenKind.PARENT for _ in alternative)

# -----------------------------------------------------------------------------
#
# RESOLUTION
#
# -----------------------------------------------------------------------------

def resolveParentRefs( parsedRules:ParsedRule, ancestor:Optional[ResolvedRule]=None ) -> ResolvedRule:
	"""Resolves the parsed rules against the resolved rules of the parent,
	returning the rules as lines of flat selector strings. Every parent line
	is combined with every line of the rule, and every parent alternative
	with every alternative of the line, parent first. Alternatives without a
	parent reference are combined as descendants of the parent."""
	if ancestor is None:
		for line in parsedRules:
			for alternative in line:
				if hasParent(alternative):
					raise UnboundParentReference("Base-level rules cannot contain the parent-selector-referencing character '{0}'.".format(PARENT))
		return tuple(tuple(expr(_) for _ in line) for line in parsedRules)
	result = []
	for ancestorLine in ancestor:
		for line in parsedRules:
			result.append(tuple(
				substitute(alternative, parent)
				for parent      in ancestorLine
				for alternative in line
			))
	return tuple(result)

def substitute( alternative:Alternative, parent:str ) -> str:
	if not hasParent(alternative):
		return parent + " " + expr(alternative)
	return "".join(parent if _.kind is TokenKind.PARENT else _.expr() for _ in alternative)

def expr( alternative:Alternative ) -> str:
	return "".join(_.expr() for _ in alternative)

# EOF

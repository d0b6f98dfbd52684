"""Tests for the selector parsing and parent reference resolution."""

import pytest

from nestcss.model    import Literal, ParentMarker, QuotedSpan, UnboundParentReference
from nestcss.selector import parseSelector, mergeLiterals, isContinued, resolveParentRefs, expr


def resolve( *lines, ancestor=None ):
	return resolveParentRefs(tuple(parseSelector(_) for _ in lines), ancestor)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseSelector:

	def test_plain_selector(self):
		assert parseSelector("ul.nav > li a") == ((Literal("ul.nav > li a"),),)

	def test_parent_marker(self):
		assert parseSelector("&.foo, bar") == (
			(ParentMarker(), Literal(".foo")),
			(Literal("bar"),),
		)

	def test_several_parent_markers(self):
		assert parseSelector("& + &") == ((ParentMarker(), Literal(" + "), ParentMarker()),)

	def test_whitespace_after_comma_is_skipped(self):
		assert parseSelector("a,   b,c") == ((Literal("a"),), (Literal("b"),), (Literal("c"),))

	def test_trailing_comma_adds_no_alternative(self):
		assert parseSelector("a, b,") == ((Literal("a"),), (Literal("b"),))
		assert parseSelector("a, b, ") == ((Literal("a"),), (Literal("b"),))

	def test_comma_within_double_quotes(self):
		assert parseSelector('a[title="x,y"], b') == (
			(Literal("a[title="), QuotedSpan('"', "x,y", '"'), Literal("]")),
			(Literal("b"),),
		)

	def test_parent_marker_within_single_quotes(self):
		assert parseSelector("a[data-x='&,'] b") == (
			(Literal("a[data-x="), QuotedSpan("'", "&,", "'"), Literal("] b")),
		)

	def test_other_quote_is_literal_within_quotes(self):
		assert parseSelector("""a[title="it's"]""") == (
			(Literal("a[title="), QuotedSpan('"', "it's", '"'), Literal("]")),
		)

	def test_escaped_quote_does_not_end_span(self):
		text = 'a[title="say \\"hi\\", ok"]'
		assert parseSelector(text) == (
			(Literal("a[title="), QuotedSpan('"', 'say \\"hi\\", ok', '"'), Literal("]")),
		)

	def test_unterminated_quote_consumes_the_rest(self):
		assert parseSelector('a[title="x, & y') == (
			(Literal("a[title="), QuotedSpan('"', "x, & y", "")),
		)

	def test_unterminated_quote_keeps_trailing_backslash(self):
		tokens = parseSelector('a["x\\')
		assert tokens == ((Literal("a["), QuotedSpan('"', "x", "\\")),)
		assert expr(tokens[0]) == 'a["x\\'

	def test_empty_literals_are_dropped(self):
		assert parseSelector("&") == ((ParentMarker(),),)

	def test_quote_free_text_round_trips(self):
		text = "div > p + .x ~ &:hover, &-suffix .y, #id[lang|=en]"
		assert ", ".join(expr(_) for _ in parseSelector(text)) == text


class TestMergeLiterals:

	def test_merges_adjacent_and_drops_empty(self):
		tokens = [Literal("a"), Literal(""), Literal("b"), ParentMarker(), Literal("")]
		assert mergeLiterals(tokens) == (Literal("ab"), ParentMarker())

	def test_quoted_spans_are_not_merged(self):
		tokens = [Literal("a"), QuotedSpan('"', "b", '"'), Literal("c")]
		assert mergeLiterals(tokens) == tuple(tokens)


class TestContinued:

	def test_trailing_comma(self):
		assert isContinued("a, b,")
		assert isContinued("a, b,  ")

	def test_no_trailing_comma(self):
		assert not isContinued("a, b")


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TestResolveWithoutAncestor:

	def test_keeps_lines_and_alternatives(self):
		assert resolve("a, b", "c") == (("a", "b"), ("c",))

	def test_quotes_are_kept(self):
		assert resolve('a[title="x,y"], b') == (('a[title="x,y"]', "b"),)

	def test_parent_reference_raises(self):
		with pytest.raises(UnboundParentReference):
			resolve("&.bar")

	def test_parent_reference_on_any_line_raises(self):
		with pytest.raises(UnboundParentReference):
			resolve("a, b", "c, &-d")

	def test_quoted_parent_marker_is_not_a_reference(self):
		assert resolve('a[x="&"]') == (('a[x="&"]',),)


class TestResolveWithAncestor:

	def test_parent_substitution(self):
		assert resolve("&.bar, baz", ancestor=((".foo",),)) == ((".foo.bar", ".foo baz"),)

	def test_every_marker_is_substituted(self):
		assert resolve("& + &", ancestor=(("li",),)) == (("li + li",),)

	def test_quoted_marker_is_not_substituted(self):
		assert resolve('&[x="&"]', ancestor=(("a",),)) == (('a[x="&"]',),)

	def test_cross_product_cardinality(self):
		ancestor = (("a1", "a2"), ("b1", "b2"))
		result   = resolve("x, y, z", "&-p, &-q, r", ancestor=ancestor)
		assert len(result) == 2 * 2
		assert all(len(_) == 2 * 3 for _ in result)

	def test_cross_product_order(self):
		ancestor = (("a1", "a2"), ("b1", "b2"))
		result   = resolve("x, y, z", "&-p, &-q, r", ancestor=ancestor)
		assert result[0] == ("a1 x", "a1 y", "a1 z", "a2 x", "a2 y", "a2 z")
		assert result[1] == ("a1-p", "a1-q", "a1 r", "a2-p", "a2-q", "a2 r")
		assert result[2] == ("b1 x", "b1 y", "b1 z", "b2 x", "b2 y", "b2 z")
		assert result[3] == ("b1-p", "b1-q", "b1 r", "b2-p", "b2-q", "b2 r")

	def test_resolution_is_idempotent(self):
		parsed   = (parseSelector("&:hover, span"), parseSelector("em"))
		ancestor = ((".a", ".b"),)
		assert resolveParentRefs(parsed, ancestor) == resolveParentRefs(parsed, ancestor)
		assert parsed == (parseSelector("&:hover, span"), parseSelector("em"))

import unittest
from unittest import mock
from hypothesis import given, strategies as st

from parsnip import syntax
from parsnip.syntax import Var, Const, Add, Let
from parsnip.lexer import lex
from parsnip.diagnostics import Report
from parsnip.primitive import pure
from parsnip.simple_evaluator import evaluate
from parsnip.algebra import alt
from parsnip.front_end import (
	EXPR, TERM, EXPR_CONT, ATOM, RESERVED, parse_tokens, parse_text, fold_additions,
)

class Silence(Report):
	def __init__(self):
		super().__init__(verbose=False, max_issues=30)
		self.complain_to_console = mock.Mock()
	pass

def full(text):
	return EXPR.full_parses(lex(text))

def the_parse(text):
	report = Silence()
	tree = parse_text(text, report)
	report.assert_no_issues("Ostensibly-good expression failed to parse: %r" % text)
	return tree

# Random well-formed trees, for checking that every rendering parses back exactly one way.
names = st.sampled_from(["x", "y", "abc", "q7"])
trees = st.recursive(
	st.one_of(names.map(Var), st.integers(min_value=0, max_value=999).map(Const)),
	lambda kids: st.one_of(
		st.builds(Add, kids, kids),
		st.builds(Let, names, kids, kids),
	),
	max_leaves=8,
)

class GrammarTests(unittest.TestCase):

	def test_long_chain_of_additions(self):
		trees = full(" + ".join(["1"] * 1000))
		self.assertEqual(1, len(trees))
		depth, tree = 0, trees[0]
		while isinstance(tree, Add):
			self.assertEqual(Const(1), tree.rhs)
			depth, tree = depth + 1, tree.lhs
		self.assertEqual(999, depth)
		self.assertEqual(Const(1), tree)

	def test_long_chain_ending_in_let(self):
		text = " + ".join(["x"] * 500) + " + let x = 1 in x"
		trees = full(text)
		self.assertEqual(1, len(trees))
		self.assertIsInstance(trees[0].rhs, Let)

	def test_leaves(self):
		self.assertEqual([Var("x")], full("x"))
		self.assertEqual([Const(42)], full("42"))

	def test_addition_is_left_associative(self):
		self.assertEqual([Add(Add(Const(1), Const(2)), Const(3))], full("1 + 2 + 3"))

	def test_let_binding(self):
		self.assertEqual([Let("x", Const(1), Add(Var("x"), Const(2)))], full("let x = 1 in x + 2"))

	def test_parentheses_are_transparent(self):
		self.assertEqual(full("1 + 2"), full("(1 + 2)"))
		self.assertEqual(full("1 + 2"), full("((1) + (2))"))

	def test_parentheses_regroup(self):
		self.assertEqual([Add(Const(1), Add(Const(2), Const(3)))], full("1 + (2 + 3)"))

	def test_let_ends_a_chain_of_additions(self):
		self.assertEqual(
			[Add(Const(1), Let("y", Const(2), Add(Var("y"), Const(3))))],
			full("1 + let y = 2 in y + 3"),
		)
		self.assertEqual(
			[Add(Let("x", Const(1), Var("x")), Const(2))],
			full("(let x = 1 in x) + 2"),
		)

	def test_nested_let(self):
		self.assertEqual(
			[Let("a", Let("b", Const(1), Var("b")), Add(Var("a"), Var("a")))],
			full("let a = let b = 1 in b in a + a"),
		)

	def test_rejections(self):
		for text in ["+ 1", "", "1 +", "(1", "1 2", "let x = 1", "let = 1 in 2", "1 - 2", ")"]:
			with self.subTest(text):
				self.assertEqual([], full(text))

	def test_reserved_words_are_not_names(self):
		self.assertEqual({"let", "in"}, RESERVED)
		self.assertEqual([], full("let"))
		self.assertEqual([], full("in + 1"))
		self.assertEqual([], full("let in = 1 in in"))
		self.assertEqual([Var("letter")], full("letter"))

	def test_partial_results_survive(self):
		results = parse_tokens(lex("1 + 2 )"))
		self.assertEqual(
			[(Add(Const(1), Const(2)), lex(")")), (Const(1), lex("+ 2 )"))],
			results,
		)

	def test_malformed_start_has_empty_result_set(self):
		self.assertEqual([], parse_tokens(lex("+ 1")))

	def test_term_alternatives(self):
		self.assertEqual([Let("x", Const(1), Var("x"))], TERM.full_parses(lex("let x = 1 in x")))
		self.assertEqual([Const(3)], TERM.full_parses(lex("(3)")))
		self.assertEqual([], TERM.full_parses(lex("1 + 2")))

	def test_continuation_yields_every_prefix(self):
		values = [v for v, rest in EXPR_CONT.run(lex("+ 1 + x"))]
		self.assertEqual([(Const(1), Var("x")), (Const(1),), ()], values)

	def test_atom_excludes_let(self):
		self.assertEqual([], ATOM.full_parses(lex("let x = 1 in x")))

	def test_fold_additions(self):
		self.assertEqual(Var("a"), fold_additions(Var("a"), ()))
		self.assertEqual(
			Add(Add(Add(Var("a"), Var("b")), Var("c")), Var("d")),
			fold_additions(Var("a"), [Var("b"), Var("c"), Var("d")]),
		)

	@given(trees)
	def test_exactly_one_full_parse(self, tree):
		text = str(tree)
		self.assertEqual([tree], full(text))

	@given(trees)
	def test_redundant_parentheses_change_nothing(self, tree):
		self.assertEqual(full(str(tree)), full("((%s))" % tree))

class OutcomeTests(unittest.TestCase):

	def test_deep_nesting_is_reported_not_raised(self):
		report = Silence()
		self.assertIsNone(parse_text("(" * 5000 + "1" + ")" * 5000, report))
		self.assertEqual(1, len(report.issues))
		self.assertIn("too deeply", report.issues[0].intro)

	def test_long_chain_is_accepted(self):
		tree = the_parse(" + ".join(str(n) for n in range(1000)))
		self.assertEqual(sum(range(1000)), evaluate(tree))
		self.assertTrue(str(tree).startswith("(" * 999 + "0 + 1)"))

	def test_complaints_carry_hints(self):
		report = Silence()
		parse_text("+ 1", report)
		parse_text("1 + 2 )", report)
		self.assertIn("starts with a name", report.issues[0].as_text())
		self.assertIn("missing or out of place", report.issues[1].as_text())

	def test_accept(self):
		self.assertEqual(Add(Var("a"), Const(1)), the_parse("a + 1"))

	def test_rejected_outright(self):
		report = Silence()
		self.assertIsNone(parse_text("+ 1", report))
		self.assertEqual(1, len(report.issues))
		self.assertIn("Nothing", report.issues[0].intro)

	def test_malformed(self):
		report = Silence()
		self.assertIsNone(parse_text("1 + 2 )", report))
		self.assertEqual(1, len(report.issues))
		self.assertIn("3 of 4", report.issues[0].intro)

	def test_ambiguous_takes_first(self):
		report = Silence()
		doubled = alt(EXPR, EXPR)
		self.assertEqual(Const(1), parse_text("1", report, doubled))
		self.assertEqual(1, len(report.issues))
		self.assertIn("2 different ways", report.issues[0].intro)

	def test_other_entry_points(self):
		report = Silence()
		self.assertEqual("yes", parse_text("", report, pure("yes")))
		report.assert_no_issues("Empty input should satisfy the empty word.")

	def test_str_is_reparsable(self):
		tree = the_parse("let x = 1 + 2 in (x + 3) + let y = x in y")
		self.assertEqual(tree, the_parse(str(tree)))
		self.assertIsInstance(tree, syntax.Let)


if __name__ == '__main__':
	unittest.main()

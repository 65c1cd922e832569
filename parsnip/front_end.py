"""
The expression grammar, written in combinators.

Conceptually, with left recursion already gone:

	Expr     -> Term ExprCont
	ExprCont -> '+' Term ExprCont | ε
	Term     -> "let" Ident '=' Expr "in" Expr | Ident | Number | '(' Expr ')'

The naive "Expr -> Expr '+' Term" would recurse forever before consuming a thing.
Instead, one term comes first, then a run of '+'-prefixed terms, and the run gets
folded left onto the first term to give back left-associativity.

One refinement: a "let" term swallows as much body as it can, so it can only come
last in a chain of additions. Otherwise "let x = 1 in x + 2" would also read as
"(let x = 1 in x) + 2" and every such input would have two parses.
"""
from functools import reduce
from typing import Optional, Sequence

from .ontology import Parser
from .primitive import msatisfy, pure, exactly
from .algebra import alt, fmap, choice, lazy, lift, many, keep_left, keep_right
from .lexer import Token, Symbol, Identifier, Number, lex
from .diagnostics import Report
from . import syntax

RESERVED = frozenset(["let", "in"])

def symbol(char:str) -> Parser: return exactly(Symbol(char))
def keyword(word:str) -> Parser:
	assert word in RESERVED, word
	return exactly(Identifier(word))

def _name(token:Token) -> Optional[str]:
	if isinstance(token, Identifier) and token.name not in RESERVED: return token.name
def _number(token:Token) -> Optional[int]:
	if isinstance(token, Number): return token.value

NAME = msatisfy(_name, "name")
NUMBER = msatisfy(_number, "number")

def fold_additions(first:syntax.Expr, rest:Sequence[syntax.Expr]) -> syntax.Expr:
	""" t0, [t1, t2, t3] --> ((t0 + t1) + t2) + t3 """
	return reduce(syntax.Add, rest, first)

EXPR = lazy(lambda: alt(LET, lift(fold_additions, ATOM, EXPR_CONT)), "Expr")

LET = lift(
	syntax.Let,
	keep_right(keyword("let"), NAME),
	keep_right(symbol("="), EXPR),
	keep_right(keyword("in"), EXPR),
)

ATOM = choice([
	fmap(syntax.Var, NAME),
	fmap(syntax.Const, NUMBER),
	keep_left(keep_right(symbol("("), EXPR), symbol(")")),
])

# The Term production whole, as an entry point for parsing a single term.
# EXPR takes it apart because a "let" term may only come last in a chain.
TERM = alt(LET, ATOM)

PLUS = symbol("+")

# '+' Atom, any number of times, then perhaps a final '+' Let.
# The repetition is iterative, so long chains do not run out of stack.
EXPR_CONT = lift(
	lambda atoms, last: atoms + last,
	many(keep_right(PLUS, ATOM)),
	alt(fmap(lambda it: (it,), keep_right(PLUS, LET)), pure(())),
)

#########################

def parse_tokens(tokens:Sequence[Token], entry:Parser=EXPR) -> list:
	""" The whole parse result set: every (expression, leftover-tokens) pair. """
	return entry.results(tokens)

def parse_text(text:str, report:Report, entry:Parser=EXPR) -> Optional[syntax.Expr]:
	"""
	Lex and parse, then sort out the outcome: one full parse is the answer;
	several full parses are reported as ambiguous and the first one wins;
	otherwise the input is rejected and the report says why.
	Nesting deep enough to exhaust the interpreter's stack is reported, not raised.
	"""
	tokens = lex(text)
	report.info("Scanned %d tokens."%len(tokens))
	try: results = parse_tokens(tokens, entry)
	except RecursionError:
		report.too_deep(len(tokens))
		return None
	report.info("Parse result set has %d entries."%len(results))
	complete = [value for value, rest in results if not rest]
	if len(complete) == 1:
		return complete[0]
	elif complete:
		report.ambiguous(text, len(complete))
		return complete[0]
	elif results:
		longest = len(tokens) - min(len(rest) for value, rest in results)
		report.malformed(tokens, longest)
	else:
		report.rejected(text)

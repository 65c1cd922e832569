"""
The combinator algebra: alternation, sequencing, mapping, and bind.

Everything here threads the remaining input explicitly from one stage to the next,
so ambiguity propagates by itself: a stage with several results simply runs
its successor once per result, and a stage with no results stops the show.

Laws (checked in tests/test_algebra.py):
	fmap(identity, p) == p
	fmap(compose(f, g), p) == fmap(f, fmap(g, p))
	bind(pure(x), f) == f(x)
	bind(p, pure) == p
	bind(bind(p, f), g) == bind(p, lambda x: bind(f(x), g))
	alt(p, empty()) == alt(empty(), p) == p
	alt(alt(p, q), r) == alt(p, alt(q, r))
where "==" means the same ordered parse result set for every input.
"""
from functools import reduce
from typing import Any, Callable, Iterable
from .ontology import Parser, Tokens
from .primitive import FAIL, pure

#########################
#  The four operations proper

def alt(a: Parser, b: Parser) -> Parser:
	""" Every result of a, followed by every result of b, on the same input. Duplicates stay. """
	def _alt(tokens: Tokens):
		yield from a.run(tokens)
		yield from b.run(tokens)
	return Parser(_alt)

def apply(fs: Parser, xs: Parser) -> Parser:
	"""
	Sequencing: run a parser of functions, then a parser of arguments on whatever
	each function left over. Outer loop over functions, inner loop over arguments.
	"""
	def _apply(tokens: Tokens):
		for f, middle in fs.run(tokens):
			for x, rest in xs.run(middle):
				yield f(x), rest
	return Parser(_apply)

def fmap(fn: Callable[[Any], Any], p: Parser) -> Parser:
	""" Same consumption, same success and failure, but every value passes through fn. """
	def _fmap(tokens: Tokens):
		for value, rest in p.run(tokens):
			yield fn(value), rest
	return Parser(_fmap, p.label)

def bind(p: Parser, fn: Callable[[Any], Parser]) -> Parser:
	""" Monadic composition: the value of p chooses which parser consumes what p leaves. """
	def _bind(tokens: Tokens):
		for value, middle in p.run(tokens):
			yield from fn(value).run(middle)
	return Parser(_bind, p.label)

#########################
#  Things that follow from the above

def choice(parsers: Iterable[Parser]) -> Parser:
	""" Alternation over any number of parsers. An alternative of none always fails. """
	return reduce(alt, parsers, FAIL)

def lazy(thunk: Callable[[], Parser], label: str = None) -> Parser:
	"""
	A parser whose definition is not yet available, as with mutually recursive productions.
	The thunk is called once, at first use.
	"""
	cell = []
	def _lazy(tokens: Tokens):
		if not cell: cell.append(thunk())
		return cell[0].run(tokens)
	return Parser(_lazy, label)

def pair(a: Parser, b: Parser) -> Parser:
	return apply(fmap(lambda x: lambda y: (x, y), a), b)

def seq(*parsers: Parser) -> Parser:
	""" Run each parser after the previous one, yielding the flat tuple of their values. """
	def snoc(prefix: tuple): return lambda x: prefix + (x,)
	return reduce(lambda acc, p: apply(fmap(snoc, acc), p), parsers, pure(()))

def lift(fn: Callable, *parsers: Parser) -> Parser:
	""" fn applied to the values of all the parsers, in sequence. """
	return fmap(lambda values: fn(*values), seq(*parsers))

def keep_left(a: Parser, b: Parser) -> Parser:
	""" a then b, keeping a's value. For punctuation after the interesting bit. """
	return apply(fmap(lambda x: lambda _: x, a), b)

def keep_right(a: Parser, b: Parser) -> Parser:
	""" a then b, keeping b's value. For punctuation before the interesting bit. """
	return apply(fmap(lambda _: lambda y: y, a), b)

def many(p: Parser) -> Parser:
	"""
	Zero or more in a row, yielding tuples. Longest run first, then each
	shorter one down to the empty run: every prefix is a distinct result.
	p must consume input whenever it succeeds, or this will not terminate.

	Same results, in the same order, as the recursive "many p = (p, many p) | ()",
	but the repetitions live on an explicit stack rather than in nested generators,
	so a long run does not exhaust Python's recursion limit.
	"""
	def _many(tokens: Tokens):
		stack = [((), p.run(tokens), tokens)]
		while stack:
			prefix, options, here = stack[-1]
			step = next(options, None)
			if step is None:
				stack.pop()
				yield prefix, here
			else:
				value, rest = step
				stack.append((prefix + (value,), p.run(rest), rest))
	return Parser(_many, "many(%s)" % p.label)

def some(p: Parser) -> Parser:
	""" One or more in a row, yielding tuples. """
	return apply(fmap(lambda head: lambda tail: (head,) + tail, p), many(p))

def optional(p: Parser, default: Any = None) -> Parser:
	return alt(p, pure(default))

def chain_left(term: Parser, op: Parser) -> Parser:
	"""
	The general fix for a left-recursive production "X -> X op term | term":
	parse one term, then any number of (op, term) continuations, and fold
	them left so that a op b op c means (a op b) op c.
	The op parser yields the binary function to combine with.
	"""
	def fold(first, continuations):
		return reduce(lambda acc, step: step[0](acc, step[1]), continuations, first)
	return lift(fold, term, many(pair(op, term)))

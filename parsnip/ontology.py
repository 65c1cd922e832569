"""
The one fundamental class in the combinator library lives here by itself,
separate from the primitive atoms and the algebra, to avoid circular imports.

A parser is nothing more than a function from a sequence of tokens to the
complete, ordered sequence of (value, remaining-input) pairs: one pair per
way the parser can consume a prefix of that input. No pairs means failure.
This is the so-called "list of successes" model, except that the list is
produced lazily by a generator. Iterating it out to the end gives exactly
what an eager list would, in the same order.
"""
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

Tokens = tuple
Pair = tuple[Any, Tokens]
RUN = Callable[[Tokens], Iterable[Pair]]

class Parser:
	"""
	Parsers are immutable and have no identity beyond their behavior.
	New parsers come from combining old ones; see primitive.py and algebra.py.
	"""
	__slots__ = ('_fn', 'label')

	def __init__(self, fn: RUN, label: Optional[str] = None):
		assert callable(fn), fn
		self._fn = fn
		self.label = label

	def __repr__(self): return "<Parser %s>" % (self.label or getattr(self._fn, '__name__', '?'))

	def run(self, tokens: Sequence) -> Iterator[Pair]:
		"""
		Return a fresh iterator over the parse result set.
		Calling this twice gives two independent iterators over the same pairs.
		"""
		return iter(self._fn(tokens if isinstance(tokens, tuple) else tuple(tokens)))

	def results(self, tokens: Sequence) -> list[Pair]:
		""" The whole parse result set, materialized. """
		return list(self.run(tokens))

	def full_parses(self, tokens: Sequence) -> list:
		""" Values of just those results which consumed the entire input. """
		return [value for value, rest in self.run(tokens) if not rest]

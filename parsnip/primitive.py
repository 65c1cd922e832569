"""
The primitive atoms from which every other parser gets built.
Each one looks at most one token ahead and never more.
"""
from typing import Any, Callable, Optional
from .ontology import Parser, Tokens

def _fail(tokens: Tokens):
	return ()

FAIL = Parser(_fail, "empty")

def empty() -> Parser:
	""" The empty language: matches nothing, ever. Identity for alternation. """
	return FAIL

def pure(value: Any) -> Parser:
	""" The empty word: succeeds once, consuming nothing. Identity for sequencing. """
	def _pure(tokens: Tokens):
		yield value, tokens
	return Parser(_pure, "pure(%r)" % (value,))

def msatisfy(partial: Callable[[Any], Optional[Any]], label: str = None) -> Parser:
	"""
	Consume exactly one token if the partial function is defined on it,
	yielding the image. "Undefined" is spelled None, so the image may not be.
	"""
	def _msatisfy(tokens: Tokens):
		if tokens:
			image = partial(tokens[0])
			if image is not None:
				yield image, tokens[1:]
	return Parser(_msatisfy, label or getattr(partial, '__name__', None))

def satisfy(predicate: Callable[[Any], bool], label: str = None) -> Parser:
	""" Consume exactly one token, and yield it, if it satisfies the predicate. """
	return msatisfy(lambda token: token if predicate(token) else None, label or getattr(predicate, '__name__', None))

def exactly(expected: Any) -> Parser:
	""" Match one token equal to the one given. """
	return satisfy(lambda token: token == expected, repr(expected))

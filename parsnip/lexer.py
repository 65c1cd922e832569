"""
Tokens, and the scanner that makes them.

There are just three kinds of token. Keywords are not among them:
the word "let" comes out as an ordinary identifier, and it is up to
the grammar to treat it specially. The scanner never fails: every
character is whitespace, or part of a word or a number, or else
a symbol in its own right.
"""
import sys
from typing import Sequence
from boozetools.scanning import miniscan
from boozetools.scanning.engine import IterableScanner

class Token:
	""" Tokens compare by kind and content. """
	__slots__ = ()
	text: str
	def key(self): raise NotImplementedError(type(self))
	def __eq__(self, other): return type(self) is type(other) and self.key() == other.key()
	def __hash__(self): return hash((type(self), self.key()))

class Symbol(Token):
	""" Any single character that is neither whitespace, nor letter, nor digit. """
	__slots__ = ('char',)
	def __init__(self, char: str):
		assert isinstance(char, str) and len(char) == 1, char
		self.char = char
	def __repr__(self): return "<Symbol %r>" % self.char
	def key(self): return self.char
	@property
	def text(self): return self.char

class Identifier(Token):
	__slots__ = ('name',)
	def __init__(self, name: str):
		assert isinstance(name, str) and name, name
		self.name = name
	def __repr__(self): return "<Identifier %s>" % self.name
	def key(self): return self.name
	@property
	def text(self): return self.name

class Number(Token):
	__slots__ = ('value',)
	def __init__(self, value: int):
		assert isinstance(value, int) and value >= 0, value
		self.value = value
	def __repr__(self): return "<Number %d>" % self.value
	def key(self): return self.value
	@property
	def text(self): return str(self.value)

#########################

# The scanner's \s covers ASCII whitespace only. These are the rest of what str.isspace() admits,
# apart from the ASCII separators \x1c-\x1f.
UNICODE_SPACE = "\x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"

lexicon = miniscan.Definition()
lexicon.ignore(r"[\s" + UNICODE_SPACE + "]+")

@lexicon.on(r'[A-Za-z][A-Za-z0-9]*')
def scan_word(yy: IterableScanner):
	yy.token("identifier", Identifier(sys.intern(yy.match())))

@lexicon.on(r'[0-9]+')
def scan_integer(yy: IterableScanner):
	yy.token("number", Number(int(yy.match())))

@lexicon.on(r"[^A-Za-z0-9\s" + UNICODE_SPACE + "]")
def scan_symbol(yy: IterableScanner):
	yy.token("symbol", Symbol(yy.match()))

def lex(text: str) -> tuple[Token, ...]:
	""" Maximal munch over words and numbers; one character per symbol. """
	return tuple(token for kind, token in lexicon.scan(text))

def unlex(tokens: Sequence[Token]) -> str:
	""" Text which lexes back to the same tokens, give or take whitespace. """
	return " ".join(t.text for t in tokens)

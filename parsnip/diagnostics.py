import sys, random
from pathlib import Path
from typing import Sequence
from boozetools.support.failureprone import illustration

from .lexer import Token, unlex

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott", 'Jeepers', 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Pic:
	""" One issue, as it will be shown to a person. """
	def __init__(self, intro:str, body:Sequence[str]=(), footer:Sequence[str]=()):
		self.intro, self.body, self.footer = intro, list(body), list(footer)
	def as_text(self):
		return '\n'.join([self.intro, ""] + self.body + self.footer)
	def __repr__(self): return "<Pic %r>" % self.intro

class Report:
	""" Collects whatever goes wrong, so the caller can decide what to do about it. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self): return tuple(self._issues)

	def sick(self): return bool(self._issues)

	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the front-end is likely to call:
	def rejected(self, text:str):
		footer = ["An expression starts with a name, a number, '(' or 'let'."]
		self.issue(Pic("Nothing in this makes sense as an expression:", [text], footer))

	def malformed(self, tokens:Sequence[Token], consumed:int):
		""" The longest partial parse stopped short; point at the token where it did. """
		intro = "The best I can do reads %d of %d tokens."%(consumed, len(tokens))
		if consumed < len(tokens):
			line = unlex(tokens)
			col = len(unlex(tokens[:consumed])) + (1 if consumed else 0)
			width = len(tokens[consumed].text)
			body = [illustration(line, col, width, prefix='     1 |', caption="Got confused here")]
		else:
			body = []
		footer = ["Perhaps a '+', a ')' or an 'in' is missing or out of place nearby."]
		self.issue(Pic(intro, body, footer))

	def ambiguous(self, text:str, count:int):
		intro = "This reads %d different ways. I took the first."%count
		self.issue(Pic(intro, [text]))

	def too_deep(self, size:int):
		intro = "This expression of %d tokens nests too deeply for me to follow."%size
		footer = ["Try fewer levels of parentheses or 'let'."]
		self.issue(Pic(intro, [], footer))

	# Methods the command line is likely to call:
	def no_such_file(self, path:Path):
		self.issue(Pic("I see no file called %s"%path))

	def broken_file(self, path:Path, ex:OSError):
		intro = "Something went pear-shaped while trying to read %s"%path
		self.issue(Pic(intro, [str(ex)]))

	# Methods the evaluator's caller is likely to call:
	def unbound_name(self, name:str):
		self.issue(Pic("I don't see what this refers to: %s"%name))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

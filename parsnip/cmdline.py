"""
This is a front end for a tiny expression language: integers, names, "+", and "let".

{0}

For example:

    parsnip "let x = 1 in x + 2"

will print the tree for that expression, or else try to explain why not.

    parsnip -e "let x = 1 in x + 2"

will also work out its value.

    parsnip -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="parsnip",
	description="Parse (and perhaps evaluate) an expression.",
)
parser.add_argument("source", nargs="?", help='try "let x = 1 in x + 2" for example.')
parser.add_argument('-f', "--file", type=Path, help="Read the expression from this file instead.")
parser.add_argument('-t', "--tokens", action="store_true", help="Print the tokens before parsing.")
parser.add_argument('-a', "--all", action="store_true", help="Print every entry of the parse result set, partial parses included.")
parser.add_argument('-e', "--evaluate", action="store_true", help="Evaluate the expression after parsing it.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what's going on.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .lexer import lex, unlex
	from .front_end import parse_text, parse_tokens
	from .simple_evaluator import evaluate, UnboundName
	report = Report(verbose=args.verbose)
	if args.file is not None:
		try: text = args.file.read_text(encoding="utf-8")
		except FileNotFoundError:
			report.no_such_file(args.file)
			report.complain_to_console()
			return 1
		except OSError as ex:
			report.broken_file(args.file, ex)
			report.complain_to_console()
			return 1
	elif args.source is not None:
		text = args.source
	else:
		parser.error("Give me either an expression or a --file.")
	tokens = lex(text)
	try:
		if args.tokens:
			for token in tokens: print(repr(token))
		if args.all:
			for value, rest in parse_tokens(tokens):
				print("%s\t[%s]" % (value, unlex(rest)))
		tree = parse_text(text, report)
		if tree is None:
			report.complain_to_console()
			return 1
		if report.sick(): report.complain_to_console()
		print(repr(tree))
		if args.evaluate:
			try: print(evaluate(tree))
			except UnboundName as ex:
				report.unbound_name(ex.args[0])
				report.complain_to_console()
				return 1
	except RecursionError:
		report.too_deep(len(tokens))
		report.complain_to_console()
		return 1
	except TooManyIssues:
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))

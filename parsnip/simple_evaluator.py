"""
Direct interpretation of the expression tree.
Environments are plain dictionaries; a "let" makes a fresh one
on top of the old, so inner bindings shadow outer ones.
"""
from typing import Mapping, Optional
from boozetools.support.foundation import Visitor
from . import syntax

class UnboundName(Exception):
	pass

class Evaluator(Visitor):
	def visit_Const(self, expr:syntax.Const, env:Mapping[str, int]): return expr.value

	def visit_Var(self, expr:syntax.Var, env:Mapping[str, int]):
		try: return env[expr.name]
		except KeyError: raise UnboundName(expr.name) from None

	def visit_Add(self, expr:syntax.Add, env:Mapping[str, int]):
		# Down the left spine by loop, so long sums need no deep recursion.
		total = 0
		while isinstance(expr, syntax.Add):
			total += self.visit(expr.rhs, env)
			expr = expr.lhs
		return total + self.visit(expr, env)

	def visit_Let(self, expr:syntax.Let, env:Mapping[str, int]):
		# Not recursive: the bound expression cannot see its own name.
		value = self.visit(expr.bound, env)
		return self.visit(expr.body, {**env, expr.name: value})

def evaluate(expr:syntax.Expr, env:Optional[Mapping[str, int]] = None) -> int:
	return Evaluator().visit(expr, env or {})

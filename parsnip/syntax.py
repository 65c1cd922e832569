"""
The set of expression-nodes.
The grammar calls these constructors with subordinate semantic-values in a bottom-up tree transduction.
Nodes are immutable once built, and compare structurally.
"""
from boozetools.support.foundation import Visitor

class Expr:
	__slots__ = ()
	def key(self) -> tuple: raise NotImplementedError(type(self))
	def __eq__(self, other): return type(self) is type(other) and self.key() == other.key()
	def __hash__(self): return hash((type(self), self.key()))
	def __setattr__(self, name, value): raise AttributeError("%s is immutable" % type(self).__name__)
	def __str__(self): return Render().visit(self)

def _init(node, **fields):
	for name, value in fields.items():
		object.__setattr__(node, name, value)

class Var(Expr):
	__slots__ = ('name',)
	def __init__(self, name: str):
		assert isinstance(name, str), name
		_init(self, name=name)
	def key(self): return (self.name,)
	def __repr__(self): return "Var(%r)" % self.name

class Const(Expr):
	__slots__ = ('value',)
	def __init__(self, value: int):
		assert isinstance(value, int), value
		_init(self, value=value)
	def key(self): return (self.value,)
	def __repr__(self): return "Const(%d)" % self.value

class Add(Expr):
	__slots__ = ('lhs', 'rhs')
	def __init__(self, lhs: Expr, rhs: Expr):
		assert isinstance(lhs, Expr) and isinstance(rhs, Expr), (lhs, rhs)
		_init(self, lhs=lhs, rhs=rhs)
	def key(self): return (self.lhs, self.rhs)
	def __repr__(self):
		spine, text = _left_spine(self)
		text = repr(text)
		for rhs in spine: text = "Add(%s, %r)" % (text, rhs)
		return text

def _left_spine(expr: Expr):
	"""
	Long sums lean left. Walk down the left-hand sides without recursion:
	return the right-hand operands innermost first, and the leftmost operand.
	"""
	spine = []
	while isinstance(expr, Add):
		spine.append(expr.rhs)
		expr = expr.lhs
	spine.reverse()
	return spine, expr

class Let(Expr):
	""" let name = bound in body """
	__slots__ = ('name', 'bound', 'body')
	def __init__(self, name: str, bound: Expr, body: Expr):
		assert isinstance(name, str), name
		assert isinstance(bound, Expr) and isinstance(body, Expr), (bound, body)
		_init(self, name=name, bound=bound, body=body)
	def key(self): return (self.name, self.bound, self.body)
	def __repr__(self): return "Let(%r, %r, %r)" % (self.name, self.bound, self.body)

#########################

class Render(Visitor):
	"""
	Source text for an expression. Additions get parentheses on both sides
	so the structure is plain to see; re-parsing the text gives back the same tree.
	"""
	def visit_Var(self, it: Var): return it.name
	def visit_Const(self, it: Const): return str(it.value)
	def visit_Add(self, it: Add):
		spine, leftmost = _left_spine(it)
		text = self.visit(leftmost)
		for rhs in spine: text = "(%s + %s)" % (text, self.visit(rhs))
		return text
	def visit_Let(self, it: Let):
		return "(let %s = %s in %s)" % (it.name, self.visit(it.bound), self.visit(it.body))

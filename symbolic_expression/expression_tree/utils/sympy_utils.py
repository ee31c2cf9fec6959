import sympy as sp
from ..core.node import Node
from ..core.operators import VARIABLE_SYMBOL


class SymPyConverter:
  """SymPy export and cross-checking for expression trees"""

  def __init__(self):
    self.symbol = sp.Symbol(VARIABLE_SYMBOL)

  def to_sympy(self, node: Node) -> sp.Expr:
    """Structure-preserving SymPy expression (built with evaluate=False)"""
    return node.to_sympy()

  def latex_representation(self, node: Node) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(self.to_sympy(node))

  def sympy_derivative(self, node: Node) -> sp.Expr:
    """Reference derivative computed by SymPy"""
    return sp.diff(self.to_sympy(node), self.symbol)

  def is_equivalent(self, first: Node, second: Node) -> bool:
    """
    Check two trees for symbolic equality.

    Only the SymPy copies are simplified; the trees themselves are untouched.
    """
    return self._is_zero(self.to_sympy(first) - self.to_sympy(second))

  def derivative_matches_sympy(self, node: Node) -> bool:
    """True when the structural derivative agrees with sympy.diff"""
    return self._is_zero(self.to_sympy(node.derivative()) - self.sympy_derivative(node))

  @staticmethod
  def _is_zero(difference: sp.Expr) -> bool:
    # Floats become exact rationals so that cancellation is exact
    exact = sp.nsimplify(difference, rational=True)
    return bool(sp.simplify(exact) == 0)

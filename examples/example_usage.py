import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_expression import (
  Expression, ConstantNode, VariableNode, SumNode, ProductNode,
  SymPyConverter, find_shared_nodes
)


def main():
  x = VariableNode()
  # (x + 0.5) * (x * x + -2)
  expr = Expression(ProductNode(
    SumNode(x, ConstantNode(0.5)),
    SumNode(ProductNode(x, x), ConstantNode(-2))
  ))
  print(f"f(x)   = {expr}")

  xs = np.linspace(-2, 2, 5)
  print(f"f({xs}) = {expr.evaluate(xs)}")

  shared = expr.derivative()
  owned = expr.derivative(copy_subtrees=True)
  print(f"f'(x)  = {shared}")
  print(f"Nodes reused from f: shared={len(find_shared_nodes(expr.root, shared.root))}, "
        f"copied={len(find_shared_nodes(expr.root, owned.root))}")

  converter = SymPyConverter()
  print(f"LaTeX: {converter.latex_representation(expr.root)}")
  print(f"Matches sympy.diff: {converter.derivative_matches_sympy(expr.root)}")

  for order in range(4):
    print(f"order {order}: value at 1.5 = {expr.nth_derivative(order).evaluate(1.5)}")


if __name__ == "__main__":
  main()

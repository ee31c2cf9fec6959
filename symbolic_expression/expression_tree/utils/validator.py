import numpy as np
from typing import Set
from ..core.node import Node, ConstantNode, VariableNode, SumNode, ProductNode

_KNOWN_TYPES = (ConstantNode, VariableNode, SumNode, ProductNode)


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, x=None) -> bool:
    """True for a finite, acyclic tree of known variants; evaluation is tried when x is given"""
    try:
      if not ExpressionValidator._is_structurally_valid(node, set()):
        return False

      if x is not None:
        return ExpressionValidator._test_evaluation(node, x)

      return True

    except RecursionError:
      return False

  @staticmethod
  def _is_structurally_valid(node: Node, ancestors: Set[int]) -> bool:
    if not isinstance(node, _KNOWN_TYPES):
      return False

    if isinstance(node, ConstantNode):
      return isinstance(node.value, float)

    if isinstance(node, VariableNode):
      return True

    # Binary node: a node may be shared by siblings but never be its own ancestor
    if id(node) in ancestors:
      return False
    ancestors.add(id(node))
    try:
      return (ExpressionValidator._is_structurally_valid(node.left, ancestors) and
              ExpressionValidator._is_structurally_valid(node.right, ancestors))
    finally:
      ancestors.discard(id(node))

  @staticmethod
  def _test_evaluation(node: Node, x) -> bool:
    # inf and nan are ordinary results, only the result type is checked
    try:
      result = node.evaluate(x)
    except (TypeError, ValueError, ArithmeticError):
      return False

    if np.ndim(x) == 0:
      return isinstance(result, float)
    return isinstance(result, np.ndarray) and result.shape == np.shape(x)

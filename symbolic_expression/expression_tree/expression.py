import sympy as sp
from typing import Optional
from .core.node import Node
from .core.operators import Number
from ..logging_system import LogLevel, get_logger


class Expression:
  """Handle around an immutable node tree with a cached rendering"""

  __slots__ = ('_root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self._root = root
    self._string_cache: Optional[str] = None

  @property
  def root(self) -> Node:
    return self._root

  def evaluate(self, x) -> Number:
    return self._root.evaluate(x)

  def to_string(self, number_format: Optional[str] = None) -> str:
    if number_format is not None:
      return self._root.to_string(number_format)
    if self._string_cache is None:
      self._string_cache = self._root.to_string()
    return self._string_cache

  def render(self) -> str:
    return self.to_string()

  def derivative(self, copy_subtrees: bool = False) -> 'Expression':
    """
    Structural derivative with respect to x.

    The result is never simplified. With copy_subtrees=False the new tree
    reuses the undifferentiated factors of every product; with
    copy_subtrees=True it owns private copies of them and shares no node
    with this expression.
    """
    result = Expression(self._root.derivative(copy_subtrees))
    logger = get_logger()
    if logger.is_enabled_for(LogLevel.VERBOSE):
      logger.debug(f"d/dx {self.to_string()} = {result.to_string()}")
    return result

  def nth_derivative(self, order: int, copy_subtrees: bool = False) -> 'Expression':
    if order < 0:
      raise ValueError(f"Derivative order must be non-negative, got {order}")
    result = self
    for _ in range(order):
      result = result.derivative(copy_subtrees)
    return result

  def copy(self) -> 'Expression':
    return Expression(self._root.copy())

  def size(self) -> int:
    """Node count"""
    return self._root.size()

  def depth(self) -> int:
    from .utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self._root)

  def to_sympy(self) -> sp.Expr:
    return self._root.to_sympy()

  def __hash__(self) -> int:
    return hash(self._root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self._root == other._root

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

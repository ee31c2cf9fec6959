import math
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from .operators import (
  NodeType, Number, BINARY_OP_SYMBOLS, VARIABLE_SYMBOL, DEFAULT_NUMBER_FORMAT,
  format_number, evaluate_variable, evaluate_constant, evaluate_binary_op
)


class Node(ABC):
  """Immutable expression node with lazily cached hash, size and string"""

  __slots__ = ('_hash_cache', '_size_cache', '_string_cache')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._string_cache: Optional[str] = None

  @abstractmethod
  def evaluate(self, x) -> Number:
    pass

  @abstractmethod
  def to_string(self, number_format: Optional[str] = None) -> str:
    pass

  @abstractmethod
  def derivative(self, copy_subtrees: bool = False) -> 'Node':
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  def render(self) -> str:
    return self.to_string()

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _structurally_equal(self, other: 'Node') -> bool:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    if other.node_type != self.node_type:
      return False
    return self._structurally_equal(other)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}<{self.to_string()}>"


class ConstantNode(Node):
  __slots__ = ('_value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    self._value = float(value)

  @property
  def value(self) -> float:
    return self._value

  def evaluate(self, x) -> Number:
    return evaluate_constant(x, self._value)

  def to_string(self, number_format: Optional[str] = None) -> str:
    if number_format is not None and number_format != DEFAULT_NUMBER_FORMAT:
      return format_number(self._value, number_format)
    if self._string_cache is None:
      self._string_cache = format_number(self._value)
    return self._string_cache

  def derivative(self, copy_subtrees: bool = False) -> 'ConstantNode':
    return ConstantNode(0.0)

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self._value)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def to_sympy(self) -> sp.Expr:
    value = self._value
    if math.isnan(value):
      return sp.nan
    if math.isinf(value):
      return sp.oo if value > 0 else -sp.oo
    if value.is_integer():
      return sp.Integer(int(value))
    return sp.Float(value)

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self._value))

  def _structurally_equal(self, other: 'ConstantNode') -> bool:
    return self._value == other._value


class VariableNode(Node):
  __slots__ = ()

  node_type = NodeType.VARIABLE

  def evaluate(self, x) -> Number:
    return evaluate_variable(x)

  def to_string(self, number_format: Optional[str] = None) -> str:
    return VARIABLE_SYMBOL

  def derivative(self, copy_subtrees: bool = False) -> ConstantNode:
    return ConstantNode(1.0)

  def copy(self) -> 'VariableNode':
    return VariableNode()

  def children(self) -> Tuple[Node, ...]:
    return ()

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(VARIABLE_SYMBOL)

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE,))

  def _structurally_equal(self, other: 'VariableNode') -> bool:
    return True


class BinaryOpNode(Node):
  """Node with exactly two children; subclasses fix the operator"""

  __slots__ = ('_left', '_right')

  def __init__(self, left: Node, right: Node):
    super().__init__()
    self._left = left
    self._right = right

  @property
  def left(self) -> Node:
    return self._left

  @property
  def right(self) -> Node:
    return self._right

  @property
  def operator(self) -> str:
    return BINARY_OP_SYMBOLS[self.node_type]

  def evaluate(self, x) -> Number:
    left_val = self._left.evaluate(x)
    right_val = self._right.evaluate(x)
    return evaluate_binary_op(left_val, right_val, self.node_type)

  def to_string(self, number_format: Optional[str] = None) -> str:
    if number_format is not None and number_format != DEFAULT_NUMBER_FORMAT:
      return self._format(self._left.to_string(number_format), self._right.to_string(number_format))
    if self._string_cache is None:
      self._string_cache = self._format(self._left.to_string(), self._right.to_string())
    return self._string_cache

  def _format(self, left_str: str, right_str: str) -> str:
    return f"({left_str}{self.operator}{right_str})"

  def copy(self) -> 'BinaryOpNode':
    return type(self)(self._left.copy(), self._right.copy())

  def children(self) -> Tuple[Node, ...]:
    return (self._left, self._right)

  def _compute_hash(self) -> int:
    return hash((self.node_type, hash(self._left), hash(self._right)))

  def _structurally_equal(self, other: 'BinaryOpNode') -> bool:
    return self._left == other._left and self._right == other._right


class SumNode(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.SUM

  def derivative(self, copy_subtrees: bool = False) -> 'SumNode':
    # (l + r)' = l' + r'
    return SumNode(self._left.derivative(copy_subtrees), self._right.derivative(copy_subtrees))

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self._left.to_sympy(), self._right.to_sympy(), evaluate=False)


class ProductNode(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.PRODUCT

  def derivative(self, copy_subtrees: bool = False) -> SumNode:
    # (l * r)' = l * r' + l' * r, left unsimplified
    left, right = self._left, self._right
    if copy_subtrees:
      left, right = left.copy(), right.copy()
    return SumNode(
      ProductNode(left, self._right.derivative(copy_subtrees)),
      ProductNode(self._left.derivative(copy_subtrees), right)
    )

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self._left.to_sympy(), self._right.to_sympy(), evaluate=False)

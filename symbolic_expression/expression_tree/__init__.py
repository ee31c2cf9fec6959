"""Expression Tree Module

Immutable expression trees over a single variable x: evaluation,
rendering and structural differentiation.
"""

from .expression import Expression
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    BinaryOpNode,
    SumNode,
    ProductNode
)
from .core.operators import (
    NodeType,
    BINARY_OP_SYMBOLS,
    VARIABLE_SYMBOL,
    DEFAULT_NUMBER_FORMAT,
    format_number,
    evaluate_variable,
    evaluate_constant,
    evaluate_binary_op
)
from .utils import SymPyConverter, ExpressionValidator

__all__ = [
    "Expression",
    "Node", "ConstantNode", "VariableNode", "BinaryOpNode", "SumNode", "ProductNode",
    "NodeType", "BINARY_OP_SYMBOLS", "VARIABLE_SYMBOL", "DEFAULT_NUMBER_FORMAT",
    "format_number", "evaluate_variable", "evaluate_constant", "evaluate_binary_op",
    "SymPyConverter", "ExpressionValidator"
]

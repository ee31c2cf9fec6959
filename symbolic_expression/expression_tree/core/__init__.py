"""Core expression tree components."""

from .node import Node, ConstantNode, VariableNode, BinaryOpNode, SumNode, ProductNode
from .operators import (
    NodeType, BINARY_OP_SYMBOLS, BINARY_OP_KERNELS, VARIABLE_SYMBOL, DEFAULT_NUMBER_FORMAT,
    format_number, evaluate_variable, evaluate_constant, evaluate_binary_op,
    evaluate_sum, evaluate_product
)

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'BinaryOpNode', 'SumNode', 'ProductNode',
    'NodeType', 'BINARY_OP_SYMBOLS', 'BINARY_OP_KERNELS', 'VARIABLE_SYMBOL', 'DEFAULT_NUMBER_FORMAT',
    'format_number', 'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op',
    'evaluate_sum', 'evaluate_product'
]

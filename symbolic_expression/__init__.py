# Python

"""Symbolic Expression Package

Immutable expression trees over one variable with numeric evaluation,
fully parenthesized rendering and structural differentiation.
"""

from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode,
  BinaryOpNode, SumNode, ProductNode, NodeType,
  SymPyConverter, ExpressionValidator
)
from .expression_tree.utils.tree_utils import (
  get_all_nodes, calculate_tree_depth, find_nodes_by_type, count_node_types,
  clone_tree, find_shared_nodes
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "VariableNode",
  "BinaryOpNode", "SumNode", "ProductNode", "NodeType",
  "SymPyConverter", "ExpressionValidator",
  "get_all_nodes", "calculate_tree_depth", "find_nodes_by_type", "count_node_types",
  "clone_tree", "find_shared_nodes",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]

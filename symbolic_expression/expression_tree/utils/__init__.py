"""Utilities for expression trees."""

from .sympy_utils import SymPyConverter
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, count_node_types,
    clone_tree, find_shared_nodes, get_constants, get_variables, get_binary_ops
)

__all__ = [
    'SymPyConverter', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type', 'count_node_types',
    'clone_tree', 'find_shared_nodes', 'get_constants', 'get_variables', 'get_binary_ops'
]

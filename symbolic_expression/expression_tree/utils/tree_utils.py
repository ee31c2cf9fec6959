"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. All helpers are
read-only: trees are immutable, so nothing here rewrites a node in place.
"""

from collections import Counter, deque
from typing import Dict, List, cast

from ..core.node import Node, BinaryOpNode, ConstantNode, VariableNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree. A subtree referenced from two parents
        is listed once per reference.
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """
    Find all nodes of a specific type in the tree.

    Args:
        node: Root node of the tree
        node_type: Type of nodes to find (e.g., ConstantNode, SumNode)

    Returns:
        List of nodes matching the specified type
    """
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def count_node_types(node: Node) -> Dict[str, int]:
    """Count nodes per variant, keyed by NodeType name"""
    counts = Counter(n.node_type.name for n in get_all_nodes(node))
    return dict(counts)


def clone_tree(node: Node) -> Node:
    """
    Create a deep copy of the entire tree.

    Args:
        node: Root node of the tree to clone

    Returns:
        Copy of the tree that shares no node objects with the original
    """
    return node.copy()


def find_shared_nodes(first: Node, second: Node) -> List[Node]:
    """
    Find node objects referenced from both trees.

    Identity, not structural equality, decides: two equal but separately
    built subtrees are not shared.

    Args:
        first: Root of the first tree
        second: Root of the second tree

    Returns:
        Nodes of the second tree that are also part of the first, each listed once
    """
    first_ids = {id(n) for n in get_all_nodes(first)}
    shared = []
    seen = set()
    for n in get_all_nodes(second):
        if id(n) in first_ids and id(n) not in seen:
            seen.add(id(n))
            shared.append(n)
    return shared


# Convenience functions for common operations
def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return cast(List[VariableNode], find_nodes_by_type(node, VariableNode))


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    """Get all sum and product nodes in the tree."""
    return cast(List[BinaryOpNode], find_nodes_by_type(node, BinaryOpNode))

"""
Tests for the Expression wrapper.
"""

import numpy as np
import pytest
import sympy as sp

from symbolic_expression import (
    Expression, ConstantNode, VariableNode, SumNode, ProductNode, find_shared_nodes
)


@pytest.fixture
def example():
    # 4 * (5 + x)
    return Expression(ProductNode(ConstantNode(4), SumNode(ConstantNode(5), VariableNode())))


class TestExpression:
    """End-to-end behaviour of the example expression."""

    def test_end_to_end(self, example):
        assert example.render() == "(4*(5+x))"
        assert example.evaluate(10) == 60.0
        assert example.derivative().render() == "((4*(0+1))+(0*(5+x)))"

    def test_string_is_cached(self, example):
        first = example.to_string()
        assert example.to_string() is first
        assert str(example) == first
        assert repr(example) == "Expression((4*(5+x)))"

    def test_number_format_passthrough(self):
        expr = Expression(SumNode(ConstantNode(0.25), VariableNode()))
        assert expr.to_string(".1f") == "(0.2+x)"
        assert expr.to_string() == "(0.25+x)"

    def test_array_evaluation(self, example):
        result = example.evaluate(np.array([0.0, 1.0, 10.0]))
        np.testing.assert_array_equal(result, [20.0, 24.0, 60.0])

    def test_root_must_be_a_node(self):
        with pytest.raises(TypeError):
            Expression("4*(5+x)")
        with pytest.raises(TypeError):
            Expression(None)

    def test_root_is_read_only(self, example):
        with pytest.raises(AttributeError):
            example.root = VariableNode()

    def test_size_and_depth(self, example):
        assert example.size() == 5
        assert example.depth() == 3
        assert Expression(VariableNode()).depth() == 1

    def test_equality(self, example):
        same = Expression(ProductNode(ConstantNode(4), SumNode(ConstantNode(5), VariableNode())))
        assert example == same
        assert hash(example) == hash(same)
        assert example != Expression(VariableNode())
        assert example != example.root

    def test_copy(self, example):
        clone = example.copy()
        assert clone == example
        assert find_shared_nodes(example.root, clone.root) == []


class TestDerivatives:
    """First and higher-order derivatives."""

    def test_shared_discipline_reuses_factors(self, example):
        d = example.derivative()
        shared = find_shared_nodes(example.root, d.root)
        assert example.root.left in shared
        assert example.root.right in shared

    def test_exclusive_discipline_shares_nothing(self, example):
        d = example.derivative(copy_subtrees=True)
        assert find_shared_nodes(example.root, d.root) == []
        assert d == example.derivative()

    def test_nth_derivative_zero_is_identity(self, example):
        assert example.nth_derivative(0) is example

    def test_nth_derivative_negative_order(self, example):
        with pytest.raises(ValueError):
            example.nth_derivative(-1)

    def test_second_derivative_of_square(self):
        square = Expression(ProductNode(VariableNode(), VariableNode()))
        second = square.nth_derivative(2)
        assert second.render() == "(((x*0)+(1*1))+((1*1)+(0*x)))"
        assert second.evaluate(123.0) == 2.0

    def test_constant_derivatives_stay_zero(self):
        expr = Expression(ConstantNode(3.5))
        for order in range(1, 4):
            assert expr.nth_derivative(order).root == ConstantNode(0)

    def test_third_derivative_of_cube_value(self):
        x = VariableNode()
        cube = Expression(ProductNode(x, ProductNode(x, x)))
        for order, expected in [(1, 12.0), (2, 12.0), (3, 6.0), (4, 0.0)]:
            assert cube.nth_derivative(order).evaluate(2.0) == expected

    def test_to_sympy_keeps_structure(self, example):
        expr = example.to_sympy()
        x = sp.Symbol('x')
        assert expr.subs(x, 10) == 60
        assert sp.expand(expr) == 4 * x + 20

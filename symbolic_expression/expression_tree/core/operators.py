import numpy as np
import numba
from enum import IntEnum
from typing import Dict, Union

Number = Union[float, np.ndarray]


class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  SUM = 2
  PRODUCT = 3


# Rendering configuration
VARIABLE_SYMBOL = 'x'
DEFAULT_NUMBER_FORMAT = 'g'  # same text as a default C++ ostream: 4.0 -> "4"

BINARY_OP_SYMBOLS: Dict[NodeType, str] = {
  NodeType.SUM: '+',
  NodeType.PRODUCT: '*',
}


def format_number(value: float, number_format: str = DEFAULT_NUMBER_FORMAT) -> str:
  if number_format == 'r':
    return repr(float(value))
  return format(float(value), number_format)


def is_scalar(x) -> bool:
  return np.ndim(x) == 0


def evaluate_variable(x) -> Number:
  if is_scalar(x):
    return float(x)
  return np.asarray(x, dtype=np.float64)


def evaluate_constant(x, value: float) -> Number:
  if is_scalar(x):
    return value
  return np.full(np.shape(x), value, dtype=np.float64)


# No fastmath here: inf and nan have to come through unchanged
@numba.njit(cache=True)
def evaluate_sum(left_val, right_val):
  return left_val + right_val


@numba.njit(cache=True)
def evaluate_product(left_val, right_val):
  return left_val * right_val


BINARY_OP_KERNELS = {
  NodeType.SUM: evaluate_sum,
  NodeType.PRODUCT: evaluate_product,
}


def evaluate_binary_op(left_val: Number, right_val: Number, node_type: NodeType) -> Number:
  result = BINARY_OP_KERNELS[node_type](left_val, right_val)
  if isinstance(result, np.ndarray):
    return result.astype(np.float64, copy=False)
  return float(result)

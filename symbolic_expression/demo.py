#!/usr/bin/env python3
"""
Example: 4 * (5 + x)

Builds the example tree bottom-up, prints its rendering together with its
value at x, then prints the rendering of its derivative.
"""
import argparse
from typing import List, Optional

from .expression_tree import Expression, ConstantNode, VariableNode, SumNode, ProductNode
from .expression_tree.core.operators import format_number
from .logging_system import LogLevel, configure_logging, log_milestone, log_info


def build_example_expression() -> Expression:
  # 4 * (5 + x)
  return Expression(ProductNode(
    ConstantNode(4),
    SumNode(
      ConstantNode(5),
      VariableNode()
    )
  ))


def run_demo(x: float = 10.0, order: int = 1, copy_subtrees: bool = False) -> List[str]:
  expr = build_example_expression()
  lines = [f"{expr.to_string()}={format_number(expr.evaluate(x))}"]
  log_milestone(f"Evaluated {expr} at x={format_number(x)}")

  derived = expr
  for n in range(1, order + 1):
    derived = derived.derivative(copy_subtrees)
    log_info(f"Derivative {n} has {derived.size()} nodes", LogLevel.DETAILED)
    lines.append(derived.to_string())
  return lines


def main(argv: Optional[List[str]] = None) -> int:
  parser = argparse.ArgumentParser(description="Evaluate and differentiate 4*(5+x)")
  parser.add_argument("--x", type=float, default=10.0, help="Point at which to evaluate")
  parser.add_argument("--order", type=int, default=1, help="Number of derivatives to print")
  parser.add_argument("--copy-subtrees", action="store_true",
                      help="Give every derivative private copies of reused subtrees")
  parser.add_argument("--log-level", default="SILENT",
                      choices=[level.name for level in LogLevel], help="Logging verbosity")
  args = parser.parse_args(argv)

  if args.order < 0:
    parser.error("--order must be non-negative")

  configure_logging(LogLevel[args.log_level])
  for line in run_demo(args.x, args.order, args.copy_subtrees):
    print(line)
  return 0


if __name__ == "__main__":
  raise SystemExit(main())

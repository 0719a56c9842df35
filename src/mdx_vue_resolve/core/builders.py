"""
ESTree node constructors for the nodes the rewrite introduces.
"""

from typing import Any, Dict

Node = Dict[str, Any]


def identifier(name: str) -> Node:
  return {"type": "Identifier", "name": name}


def import_specifier(imported: str, local: str) -> Node:
  """
  Builds ``imported as local`` for an import declaration's specifier list.

  Args:
      imported: The name exported by the module.
      local: The binding name inside the importing module.

  Returns:
      Node: An ``ImportSpecifier`` node.
  """
  return {
    "type": "ImportSpecifier",
    "imported": identifier(imported),
    "local": identifier(local),
  }


def assignment_expression(left: Node, right: Node, operator: str = "=") -> Node:
  return {
    "type": "AssignmentExpression",
    "operator": operator,
    "left": left,
    "right": right,
  }

"""
Structural Guards for the MDX Compiler Output.

Each guard inspects one node and either returns a typed match result carrying
the sub-nodes the rewrite needs, or ``None``. Guards read defensively: upstream
output that deviates from the expected shape is a no-match, never an error.

Recognized shapes::

    import {...} from "<...>jsx-runtime"

    function MDXContent(props) {
      function _createMdxContent(props) {
        const {Foo} = _components;
        if (!Foo) _missingMdxReference("Foo", true);
        ...
      }
    }
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from mdx_vue_resolve.core.walker import is_node

Node = Dict[str, Any]


@dataclass
class IdentifierCall:
  """
  A call whose callee is a bare identifier, e.g. ``_missingMdxReference("Foo", true)``.

  Attributes:
      call (Node): The ``CallExpression`` node.
      callee (Node): Its ``Identifier`` callee.
      arguments (List[Node]): The call's live argument list.
  """

  call: Node
  callee: Node
  arguments: List[Node]


@dataclass
class MissingReferenceCheck:
  """
  A runtime assertion ``if (!Foo) <expression>;``.

  Attributes:
      statement (Node): The ``IfStatement``.
      identifier (Node): The negated ``Identifier`` (the component binding).
      expression_statement (Node): The ``ExpressionStatement`` holding the
          assertion, either the consequent itself or the sole statement of a
          consequent block.
      expression (Node): The assertion expression.
  """

  statement: Node
  identifier: Node
  expression_statement: Node
  expression: Node


def node_type(node: Any) -> Optional[str]:
  return node["type"] if is_node(node) else None


def function_name(node: Any) -> Optional[str]:
  """
  Returns the declared name of a function node, if it has one.

  Args:
      node: Any value.

  Returns:
      Optional[str]: The ``id.name`` of the function, or None.
  """
  if not is_node(node):
    return None
  func_id = node.get("id")
  if node_type(func_id) != "Identifier":
    return None
  name = func_id.get("name")
  return name if isinstance(name, str) else None


def match_named_function(node: Any, name: str) -> bool:
  return node_type(node) == "FunctionDeclaration" and function_name(node) == name


def function_body_statements(function: Node) -> Optional[List[Node]]:
  """
  Returns the live statement list of a function's block body.

  Args:
      function: A function node.

  Returns:
      Optional[List[Node]]: The ``body.body`` list, or None if absent.
  """
  body = function.get("body")
  if node_type(body) != "BlockStatement":
    return None
  statements = body.get("body")
  return statements if isinstance(statements, list) else None


def find_nested_function(function: Node, name: str) -> Optional[Node]:
  """
  Finds the first function declaration named ``name`` directly in a function body.

  Args:
      function: The enclosing function node.
      name: The nested function's name.

  Returns:
      Optional[Node]: The nested ``FunctionDeclaration``, or None.
  """
  for statement in function_body_statements(function) or []:
    if match_named_function(statement, name):
      return statement
  return None


def import_source(node: Node) -> Optional[str]:
  """
  Returns the module specifier string of an import declaration.

  Args:
      node: An ``ImportDeclaration`` node.

  Returns:
      Optional[str]: The source string, or None if it is not a string literal.
  """
  source = node.get("source")
  if not isinstance(source, dict):
    return None
  value = source.get("value")
  return value if isinstance(value, str) else None


def has_import_specifier(node: Node, local_name: str) -> bool:
  for spec in node.get("specifiers") or []:
    local = spec.get("local") if isinstance(spec, dict) else None
    if node_type(local) == "Identifier" and local.get("name") == local_name:
      return True
  return False


def match_identifier_call(expression: Any) -> Optional[IdentifierCall]:
  """
  Matches a ``CallExpression`` with a bare ``Identifier`` callee.

  Args:
      expression: The candidate expression node.

  Returns:
      Optional[IdentifierCall]: The match, or None.
  """
  if node_type(expression) != "CallExpression":
    return None
  callee = expression.get("callee")
  arguments = expression.get("arguments")
  if node_type(callee) != "Identifier" or not isinstance(arguments, list):
    return None
  return IdentifierCall(call=expression, callee=callee, arguments=arguments)


def _single_expression_statement(consequent: Any) -> Optional[Node]:
  if node_type(consequent) == "ExpressionStatement":
    return consequent
  if node_type(consequent) == "BlockStatement":
    body = consequent.get("body")
    if isinstance(body, list) and len(body) == 1 and node_type(body[0]) == "ExpressionStatement":
      return body[0]
  return None


def match_missing_reference_check(statement: Any) -> Optional[MissingReferenceCheck]:
  """
  Matches ``if (!Identifier) ExpressionStatement``.

  A braced consequent holding exactly one expression statement matches too.
  An ``else`` branch does not affect the match and is never edited.

  Args:
      statement: The candidate statement node.

  Returns:
      Optional[MissingReferenceCheck]: The match, or None.
  """
  if node_type(statement) != "IfStatement":
    return None

  test = statement.get("test")
  if node_type(test) != "UnaryExpression" or test.get("operator") != "!":
    return None
  argument = test.get("argument")
  if node_type(argument) != "Identifier":
    return None

  expression_statement = _single_expression_statement(statement.get("consequent"))
  if expression_statement is None or not is_node(expression_statement.get("expression")):
    return None

  return MissingReferenceCheck(
    statement=statement,
    identifier=argument,
    expression_statement=expression_statement,
    expression=expression_statement["expression"],
  )

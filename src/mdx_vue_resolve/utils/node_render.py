"""
ESTree Node Rendering for Trace Diffs.

Renders ESTree node dicts into a compact JavaScript-like string. Only the node
kinds that the component rewrite inspects or produces are rendered in full;
everything else collapses to a ``<Type>`` placeholder. The output is meant for
trace events and log lines, not for code generation.
"""

import json
from typing import Any, Callable, Dict


def render_node(node: Any) -> str:
  """
  Renders an ESTree node into its JavaScript-like text.

  Args:
      node: The ESTree node dict (or ``None``).

  Returns:
      str: The rendered text. Never raises.
  """
  if node is None:
    return ""
  if not isinstance(node, dict):
    return f"<{type(node).__name__}>"

  node_type = node.get("type")
  renderer = _RENDERERS.get(node_type) if isinstance(node_type, str) else None
  if renderer is None:
    return f"<{node_type or 'Unknown'}>"

  try:
    return renderer(node)
  except (AttributeError, KeyError, TypeError):
    return f"<{node_type}>"


def _identifier(node: Dict[str, Any]) -> str:
  return str(node["name"])


def _literal(node: Dict[str, Any]) -> str:
  if "raw" in node and isinstance(node["raw"], str):
    return node["raw"]
  return json.dumps(node.get("value"))


def _call(node: Dict[str, Any]) -> str:
  args = ", ".join(render_node(arg) for arg in node.get("arguments", []))
  return f"{render_node(node['callee'])}({args})"


def _member(node: Dict[str, Any]) -> str:
  if node.get("computed"):
    return f"{render_node(node['object'])}[{render_node(node['property'])}]"
  return f"{render_node(node['object'])}.{render_node(node['property'])}"


def _unary(node: Dict[str, Any]) -> str:
  operator = node["operator"]
  spacer = " " if operator.isalpha() else ""
  return f"{operator}{spacer}{render_node(node['argument'])}"


def _binary(node: Dict[str, Any]) -> str:
  return f"{render_node(node['left'])} {node['operator']} {render_node(node['right'])}"


def _expression_statement(node: Dict[str, Any]) -> str:
  return f"{render_node(node['expression'])};"


def _block(node: Dict[str, Any]) -> str:
  inner = " ".join(render_node(stmt) for stmt in node.get("body", []))
  return f"{{ {inner} }}" if inner else "{}"


def _if(node: Dict[str, Any]) -> str:
  text = f"if ({render_node(node['test'])}) {render_node(node['consequent'])}"
  if node.get("alternate"):
    text += f" else {render_node(node['alternate'])}"
  return text


def _return(node: Dict[str, Any]) -> str:
  if node.get("argument") is None:
    return "return;"
  return f"return {render_node(node['argument'])};"


def _declarator(node: Dict[str, Any]) -> str:
  if node.get("init") is None:
    return render_node(node["id"])
  return f"{render_node(node['id'])} = {render_node(node['init'])}"


def _variable_declaration(node: Dict[str, Any]) -> str:
  declarations = ", ".join(_declarator(decl) for decl in node.get("declarations", []))
  return f"{node['kind']} {declarations};"


def _object_pattern(node: Dict[str, Any]) -> str:
  return "{" + ", ".join(render_node(prop) for prop in node.get("properties", [])) + "}"


def _property(node: Dict[str, Any]) -> str:
  if node.get("shorthand"):
    return render_node(node["value"])
  return f"{render_node(node['key'])}: {render_node(node['value'])}"


def _import_specifier(node: Dict[str, Any]) -> str:
  imported = render_node(node["imported"])
  local = render_node(node.get("local")) or imported
  return imported if imported == local else f"{imported} as {local}"


def _import_declaration(node: Dict[str, Any]) -> str:
  default_parts = []
  named_parts = []
  for spec in node.get("specifiers", []):
    if spec.get("type") == "ImportDefaultSpecifier":
      default_parts.append(render_node(spec["local"]))
    elif spec.get("type") == "ImportNamespaceSpecifier":
      default_parts.append(f"* as {render_node(spec['local'])}")
    else:
      named_parts.append(render_node(spec))
  clauses = list(default_parts)
  if named_parts:
    clauses.append("{" + ", ".join(named_parts) + "}")
  source = render_node(node["source"])
  if not clauses:
    return f"import {source};"
  return f"import {', '.join(clauses)} from {source};"


def _function(node: Dict[str, Any]) -> str:
  name = render_node(node.get("id"))
  params = ", ".join(render_node(param) for param in node.get("params", []))
  return f"function {name}({params}) {render_node(node['body'])}"


def _program(node: Dict[str, Any]) -> str:
  return "\n".join(render_node(stmt) for stmt in node.get("body", []))


_RENDERERS: Dict[str, Callable[[Dict[str, Any]], str]] = {
  "Identifier": _identifier,
  "Literal": _literal,
  "CallExpression": _call,
  "MemberExpression": _member,
  "UnaryExpression": _unary,
  "AssignmentExpression": _binary,
  "BinaryExpression": _binary,
  "LogicalExpression": _binary,
  "ExpressionStatement": _expression_statement,
  "BlockStatement": _block,
  "IfStatement": _if,
  "ReturnStatement": _return,
  "VariableDeclaration": _variable_declaration,
  "ObjectPattern": _object_pattern,
  "Property": _property,
  "ImportSpecifier": _import_specifier,
  "ImportDeclaration": _import_declaration,
  "FunctionDeclaration": _function,
  "Program": _program,
}

"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- ESTree builders producing the program shape emitted by the MDX compiler.
- Rule registry isolation between tests.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from mdx_vue_resolve.core import hooks  # noqa: E402
from mdx_vue_resolve.utils.console import reset_console  # noqa: E402

Node = Dict[str, Any]


class ESTree:
  """
  Minimal ESTree constructors, matching the JSON emitted by acorn-based compilers.
  """

  @staticmethod
  def ident(name: str) -> Node:
    return {"type": "Identifier", "name": name}

  @staticmethod
  def literal(value: Any) -> Node:
    return {"type": "Literal", "value": value}

  @staticmethod
  def call(callee: str, *args: Node) -> Node:
    return {"type": "CallExpression", "callee": ESTree.ident(callee), "arguments": list(args), "optional": False}

  @staticmethod
  def expr(expression: Node) -> Node:
    return {"type": "ExpressionStatement", "expression": expression}

  @staticmethod
  def block(*statements: Node) -> Node:
    return {"type": "BlockStatement", "body": list(statements)}

  @staticmethod
  def ret(argument: Optional[Node] = None) -> Node:
    return {"type": "ReturnStatement", "argument": argument}

  @staticmethod
  def not_(argument: Node) -> Node:
    return {"type": "UnaryExpression", "operator": "!", "prefix": True, "argument": argument}

  @staticmethod
  def if_(test: Node, consequent: Node, alternate: Optional[Node] = None) -> Node:
    return {"type": "IfStatement", "test": test, "consequent": consequent, "alternate": alternate}

  @staticmethod
  def var(kind: str, *names: str) -> Node:
    return {
      "type": "VariableDeclaration",
      "kind": kind,
      "declarations": [{"type": "VariableDeclarator", "id": ESTree.ident(n), "init": None} for n in names],
    }

  @staticmethod
  def destructure(kind: str, source: str, *names: str) -> Node:
    properties = [
      {
        "type": "Property",
        "key": ESTree.ident(n),
        "value": ESTree.ident(n),
        "kind": "init",
        "method": False,
        "shorthand": True,
        "computed": False,
      }
      for n in names
    ]
    return {
      "type": "VariableDeclaration",
      "kind": kind,
      "declarations": [
        {
          "type": "VariableDeclarator",
          "id": {"type": "ObjectPattern", "properties": properties},
          "init": ESTree.ident(source),
        }
      ],
    }

  @staticmethod
  def missing_check(name: str, *extra_args: Node, braces: bool = False) -> Node:
    """``if (!Name) _missingMdxReference("Name", ...extra_args)``"""
    statement = ESTree.expr(ESTree.call("_missingMdxReference", ESTree.literal(name), *extra_args))
    return ESTree.if_(ESTree.not_(ESTree.ident(name)), ESTree.block(statement) if braces else statement)

  @staticmethod
  def function(name: Optional[str], *body: Node) -> Node:
    return {
      "type": "FunctionDeclaration",
      "id": ESTree.ident(name) if name is not None else None,
      "params": [],
      "body": ESTree.block(*body),
      "generator": False,
      "async": False,
    }

  @staticmethod
  def import_(source: str, *pairs: str) -> Node:
    """``import {a as b, ...} from source`` with pairs given as 'a:b'."""
    specifiers = []
    for pair in pairs:
      imported, _, local = pair.partition(":")
      specifiers.append(
        {"type": "ImportSpecifier", "imported": ESTree.ident(imported), "local": ESTree.ident(local or imported)}
      )
    return {
      "type": "ImportDeclaration",
      "specifiers": specifiers,
      "source": {"type": "Literal", "value": source},
    }

  @staticmethod
  def program(*body: Node) -> Node:
    return {"type": "Program", "sourceType": "module", "body": list(body)}

  @staticmethod
  def mdx_program(render_body: List[Node], runtime: str = "vue/jsx-runtime") -> Node:
    """
    The program shape emitted by the MDX compiler for a document using components.
    """
    return ESTree.program(
      ESTree.import_(runtime, "jsx:_jsx", "jsxs:_jsxs"),
      ESTree.function(
        "MDXContent",
        ESTree.function("_createMdxContent", *render_body),
        ESTree.ret(ESTree.call("_createMdxContent")),
      ),
      ESTree.function(
        "_missingMdxReference",
        {
          "type": "ThrowStatement",
          "argument": {"type": "NewExpression", "callee": ESTree.ident("Error"), "arguments": []},
        },
      ),
    )


@pytest.fixture
def estree():
  """ESTree builder namespace."""
  return ESTree


@pytest.fixture(autouse=True)
def isolate_runtime_state():
  """
  Ensures rules registered by a test do not leak between tests.
  """
  hooks.clear_rules()
  yield
  hooks.clear_rules()
  reset_console()

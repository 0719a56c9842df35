"""
Tests for the structural guards.

Verifies that each guard returns a typed match for the compiler's shape and
None, without raising, for anything else.
"""

import pytest

from mdx_vue_resolve.core.patterns import (
  IdentifierCall,
  MissingReferenceCheck,
  find_nested_function,
  function_name,
  has_import_specifier,
  import_source,
  match_identifier_call,
  match_missing_reference_check,
  match_named_function,
)


def test_missing_check_bare_consequent(estree):
  stmt = estree.missing_check("Foo", estree.literal(True))
  match = match_missing_reference_check(stmt)

  assert isinstance(match, MissingReferenceCheck)
  assert match.statement is stmt
  assert match.identifier["name"] == "Foo"
  assert match.expression_statement is stmt["consequent"]
  assert match.expression["type"] == "CallExpression"


def test_missing_check_braced_consequent(estree):
  stmt = estree.missing_check("Foo", braces=True)
  match = match_missing_reference_check(stmt)

  assert match is not None
  assert match.expression_statement is stmt["consequent"]["body"][0]


def test_missing_check_ignores_else_branch(estree):
  stmt = estree.if_(estree.not_(estree.ident("Foo")), estree.expr(estree.call("f")), estree.expr(estree.call("g")))
  match = match_missing_reference_check(stmt)

  assert match is not None
  assert match.expression_statement is stmt["consequent"]


@pytest.mark.parametrize(
  "build",
  [
    lambda t: t.expr(t.ident("x")),
    lambda t: t.if_(t.ident("Foo"), t.expr(t.call("f"))),
    lambda t: t.if_({"type": "UnaryExpression", "operator": "-", "argument": t.ident("Foo")}, t.expr(t.call("f"))),
    lambda t: t.if_(t.not_(t.call("Foo")), t.expr(t.call("f"))),
    lambda t: t.if_(t.not_(t.ident("Foo")), t.ret()),
    lambda t: t.if_(t.not_(t.ident("Foo")), t.block(t.expr(t.call("f")), t.expr(t.call("g")))),
    lambda t: {"type": "IfStatement"},
    lambda t: None,
  ],
)
def test_missing_check_rejects(estree, build):
  assert match_missing_reference_check(build(estree)) is None


def test_identifier_call(estree):
  call = estree.call("_missingMdxReference", estree.literal("Foo"))
  match = match_identifier_call(call)

  assert isinstance(match, IdentifierCall)
  assert match.callee is call["callee"]
  assert match.arguments is call["arguments"]


def test_identifier_call_rejects_member_callee(estree):
  call = {
    "type": "CallExpression",
    "callee": {"type": "MemberExpression", "object": estree.ident("a"), "property": estree.ident("b")},
    "arguments": [],
  }
  assert match_identifier_call(call) is None
  assert match_identifier_call(estree.ident("f")) is None


def test_function_names(estree):
  named = estree.function("MDXContent")
  anonymous = estree.function(None)

  assert function_name(named) == "MDXContent"
  assert function_name(anonymous) is None
  assert match_named_function(named, "MDXContent")
  assert not match_named_function(anonymous, "MDXContent")
  assert not match_named_function(estree.expr(estree.ident("MDXContent")), "MDXContent")


def test_find_nested_function_first_direct_match(estree):
  first = estree.function("_createMdxContent")
  second = estree.function("_createMdxContent")
  outer = estree.function("MDXContent", estree.expr(estree.ident("x")), first, second)

  assert find_nested_function(outer, "_createMdxContent") is first
  assert find_nested_function(outer, "other") is None


def test_find_nested_function_ignores_deeper_levels(estree):
  deep = estree.function("wrapper", estree.function("_createMdxContent"))
  outer = estree.function("MDXContent", deep)

  assert find_nested_function(outer, "_createMdxContent") is None


def test_import_helpers(estree):
  node = estree.import_("vue/jsx-runtime", "jsx:_jsx")

  assert import_source(node) == "vue/jsx-runtime"
  assert has_import_specifier(node, "_jsx")
  assert not has_import_specifier(node, "jsx")

  node["source"] = {"type": "Literal", "value": 42}
  assert import_source(node) is None
  assert import_source({"type": "ImportDeclaration"}) is None

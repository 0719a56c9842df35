"""
Rules for the compiled render function.

The MDX compiler guards every component that is neither imported nor passed
in through ``props.components`` with a runtime assertion at the top of
``_createMdxContent``::

    function MDXContent(props = {}) {
      function _createMdxContent(props) {
        const {Foo} = _components;
        if (!Foo) _missingMdxReference("Foo", true);
        return _jsx(Foo, {});
      }
      ...
    }
    function _missingMdxReference(id, component) { throw new Error(...); }

After the rewrite the assertions become resolver calls that a build-time
component resolver can replace with a direct import::

    let {Foo} = _components;
    if (!Foo) Foo = _resolveComponent("Foo");

and the assertion helper is removed.
"""

import copy
from typing import Any, Dict, List

from mdx_vue_resolve.core import builders
from mdx_vue_resolve.core.hooks import RuleContext, register_rule
from mdx_vue_resolve.core.patterns import (
  find_nested_function,
  function_body_statements,
  function_name,
  match_identifier_call,
  match_missing_reference_check,
  node_type,
)
from mdx_vue_resolve.core.walker import VisitAction
from mdx_vue_resolve.utils.console import log_warning
from mdx_vue_resolve.utils.node_render import render_node

REASSIGNABLE_KIND = "let"


@register_rule("FunctionDeclaration")
def rewrite_render_function(node: Dict[str, Any], ctx: RuleContext) -> VisitAction:
  """
  Dispatches on the declared function name.

  - The render entry: rewrites the component references of its nested render
    body, then skips the subtree.
  - The missing reference helper: removed.
  - Anything else: skipped.

  Args:
      node: The ``FunctionDeclaration`` node.
      ctx: The rule context.

  Returns:
      VisitAction: ``REMOVE`` for the helper, ``SKIP`` otherwise.
  """
  name = function_name(node)

  if name == ctx.render_entry_name:
    render_body = find_nested_function(node, ctx.render_body_name)
    statements = function_body_statements(render_body) if render_body is not None else None
    if statements is None:
      log_warning(f"'{name}' has no nested '{ctx.render_body_name}' function; left unchanged.")
      ctx.tracer.log_warning(f"Missing '{ctx.render_body_name}' in '{name}'")
      return VisitAction.SKIP

    ctx.tracer.start_phase("Component References", f"Rewriting '{ctx.render_body_name}'")
    try:
      rewrite_component_references(statements, ctx)
    finally:
      ctx.tracer.end_phase()
    return VisitAction.SKIP

  if name == ctx.missing_reference_name:
    ctx.count("helpers_removed")
    ctx.tracer.log_mutation("FunctionDeclaration", f"function {name}(...)", "")
    return VisitAction.REMOVE

  return VisitAction.SKIP


def rewrite_component_references(statements: List[Any], ctx: RuleContext) -> int:
  """
  Converts the missing reference assertions into resolver assignments.

  Scans the statement list from the top. Variable declarations are made
  reassignable, assertions are rewritten, and the first statement of any other
  kind ends the scan: the compiler emits every assertion before the render code.

  Args:
      statements: The render body statements. Mutated in place.
      ctx: The rule context.

  Returns:
      int: Number of assertions rewritten.
  """
  rewritten = 0

  for index, statement in enumerate(statements):
    kind = node_type(statement)

    # The resolver assigns to these bindings.
    if kind == "VariableDeclaration":
      if statement.get("kind") != REASSIGNABLE_KIND:
        before = render_node(statement)
        statement["kind"] = REASSIGNABLE_KIND
        ctx.count("declarations_relaxed")
        ctx.tracer.log_mutation("VariableDeclaration", before, render_node(statement), index=index)
      continue

    check = match_missing_reference_check(statement)
    if check is None:
      break

    call = match_identifier_call(check.expression)
    if call is None:
      ctx.tracer.log_inspection(render_node(statement), "unchanged", "consequent is not an identifier call")
      continue

    before = render_node(statement)
    call.callee["name"] = ctx.resolver_local_name
    # The import source argument blocks static replacement by the resolver plugin.
    if len(call.arguments) > 1:
      del call.arguments[1]
    target = copy.deepcopy(check.identifier)
    check.expression_statement["expression"] = builders.assignment_expression(target, call.call)

    rewritten += 1
    ctx.tracer.log_mutation("IfStatement", before, render_node(statement), index=index)

  ctx.count("checks_rewritten", rewritten)
  return rewritten

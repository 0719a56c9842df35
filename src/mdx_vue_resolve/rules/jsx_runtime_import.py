"""
Rule for the JSX runtime import.

Adds the resolver binding to the import of the JSX runtime so that the rewritten
render body can call it::

    import {jsx as _jsx} from "vue/jsx-runtime"

becomes::

    import {jsx as _jsx, resolveComponent as _resolveComponent} from "vue/jsx-runtime"
"""

from typing import Any, Dict

from mdx_vue_resolve.core import builders
from mdx_vue_resolve.core.hooks import RuleContext, register_rule
from mdx_vue_resolve.core.patterns import has_import_specifier, import_source
from mdx_vue_resolve.core.walker import VisitAction
from mdx_vue_resolve.utils.node_render import render_node


@register_rule("ImportDeclaration")
def augment_runtime_import(node: Dict[str, Any], ctx: RuleContext) -> VisitAction:
  """
  Appends ``resolveComponent as _resolveComponent`` to a JSX runtime import.

  Imports from any other module are left as they are. Import declarations have
  nothing else to rewrite, so the walk never descends into them.

  Args:
      node: The ``ImportDeclaration`` node.
      ctx: The rule context.

  Returns:
      VisitAction: Always ``SKIP``.
  """
  source = import_source(node)
  if source is None or not source.endswith(ctx.runtime_suffix):
    return VisitAction.SKIP

  specifiers = node.get("specifiers")
  if not isinstance(specifiers, list):
    return VisitAction.SKIP

  if has_import_specifier(node, ctx.resolver_local_name):
    ctx.tracer.log_inspection(source, "unchanged", f"'{ctx.resolver_local_name}' already imported")
    return VisitAction.SKIP

  before = render_node(node)
  specifiers.append(builders.import_specifier(ctx.resolver_import_name, ctx.resolver_local_name))
  ctx.count("imports_augmented")
  ctx.tracer.log_mutation("ImportDeclaration", before, render_node(node))
  return VisitAction.SKIP

"""
Component Resolution Rewriter.

Walks a whole MDX program once and applies the registered rules:

- ``Program``: passed through, its statements are visited.
- A node type with a registered rule: the rule decides (see ``mdx_vue_resolve.rules``).
- Any other node: skipped. Only top-level imports and function declarations
  take part in the rewrite.

The tree is mutated in place and returned. Shapes the rules do not recognize
are left untouched; the rewrite never fails because part of the program looks
different from what the compiler usually emits.
"""

from typing import Any, Dict, Optional

from mdx_vue_resolve.config import RuntimeConfig
from mdx_vue_resolve.core.hooks import RuleContext, get_rule
from mdx_vue_resolve.core.tracer import NullTraceLogger, TraceLogger
from mdx_vue_resolve.core.walker import ChildKey, Node, VisitAction, is_node, walk
from mdx_vue_resolve.utils.console import get_logger


class ComponentResolver:
  """
  Rewrites missing component assertions into resolver calls.

  Instances are cheap and reusable. Each ``rewrite`` call gets a fresh
  ``RuleContext`` and, unless a tracer was passed in, a fresh tracer. Both are
  exposed afterwards as ``last_context`` and ``last_context.tracer``; nothing
  else outlives the call.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, tracer: Optional[TraceLogger] = None):
    """
    Initializes the rewriter.

    Args:
        config: Names to recognize. Defaults to the MDX compiler's names.
        tracer: Event recorder shared by every ``rewrite`` call. When omitted,
            each call records into its own logger, or discards events when
            ``config.trace`` is off.
    """
    self.config = config or RuntimeConfig()
    self.tracer = tracer
    self.last_context: Optional[RuleContext] = None

  def rewrite(self, tree: Node) -> Node:
    """
    Applies the rewrite to a program.

    Args:
        tree: An ESTree ``Program`` node. Mutated in place.

    Returns:
        Node: The same ``tree`` object.
    """
    if not is_node(tree):
      return tree

    tracer = self._tracer_for_call()
    ctx = RuleContext(self.config, tracer=tracer)
    self.last_context = ctx

    def enter(node: Dict[str, Any], parent: Optional[Node], key: ChildKey, index: Optional[int]) -> VisitAction:
      kind = node["type"]
      if kind == "Program":
        return VisitAction.CONTINUE
      rule = get_rule(kind)
      if rule is None:
        return VisitAction.SKIP
      return rule(node, ctx) or VisitAction.CONTINUE

    tracer.start_phase("Resolve Components", "Rewriting missing component assertions")
    try:
      walk(tree, enter)
    finally:
      tracer.end_phase()

    get_logger().debug("Rewrite finished: %s", ctx.stats)
    return tree

  def _tracer_for_call(self) -> TraceLogger:
    if self.tracer is not None:
      return self.tracer
    return TraceLogger() if self.config.trace else NullTraceLogger()


def resolve_missing_components(tree: Node, config: Optional[RuntimeConfig] = None) -> Node:
  """
  Rewrites a compiled MDX program for static component resolution.

  Args:
      tree: An ESTree ``Program`` node. Mutated in place.
      config: Optional names to recognize.

  Returns:
      Node: The same ``tree`` object.
  """
  return ComponentResolver(config).rewrite(tree)

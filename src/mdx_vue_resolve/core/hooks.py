"""
Rule Registry and Rule Context.

Rewrite rules are plain functions keyed by the ESTree node type they handle.
The traversal engine looks a rule up for every visited node and follows the
``VisitAction`` the rule returns. Built-in rules live in
``mdx_vue_resolve.rules`` and register themselves on import::

    @register_rule("ImportDeclaration")
    def augment_runtime_import(node, ctx):
        ...
        return VisitAction.SKIP
"""

import importlib
from typing import Any, Callable, Dict, Optional

from mdx_vue_resolve.config import RuntimeConfig
from mdx_vue_resolve.core.tracer import TraceLogger
from mdx_vue_resolve.core.walker import VisitAction


class RuleContext:
  """
  Context object passed to every rule during a rewrite.

  Exposes the configured well-known names, the trace logger, and per-rewrite
  counters that the rules update.
  """

  def __init__(self, config: RuntimeConfig, tracer: Optional[TraceLogger] = None):
    """
    Initializes the rule context.

    Args:
        config: Runtime configuration holding the recognized names.
        tracer: Event recorder. Defaults to a new logger owned by this context.
    """
    self.config = config
    self.tracer = tracer if tracer is not None else TraceLogger()

    self.runtime_suffix = config.runtime_suffix
    self.resolver_import_name = config.resolver_import_name
    self.resolver_local_name = config.resolver_local_name
    self.render_entry_name = config.render_entry_name
    self.render_body_name = config.render_body_name
    self.missing_reference_name = config.missing_reference_name

    self.stats: Dict[str, int] = {
      "imports_augmented": 0,
      "declarations_relaxed": 0,
      "checks_rewritten": 0,
      "helpers_removed": 0,
    }

  def count(self, key: str, amount: int = 1) -> None:
    self.stats[key] = self.stats.get(key, 0) + amount


RuleFunction = Callable[[Dict[str, Any], RuleContext], VisitAction]

_RULES: Dict[str, RuleFunction] = {}
_RULES_LOADED = False

BUILTIN_RULES_PACKAGE = "mdx_vue_resolve.rules"


def register_rule(node_type: str) -> Callable[[RuleFunction], RuleFunction]:
  """
  Decorator registering a function as the rule for an ESTree node type.

  A later registration for the same node type replaces the earlier one.

  Args:
      node_type: The ESTree ``type`` tag, e.g. ``"FunctionDeclaration"``.
  """

  def decorator(func: RuleFunction) -> RuleFunction:
    func.rule_node_type = node_type  # type: ignore[attr-defined]
    _RULES[node_type] = func
    return func

  return decorator


def get_rule(node_type: str) -> Optional[RuleFunction]:
  """
  Retrieves the rule registered for a node type.
  Loads the built-in rules on first use.
  """
  if not _RULES_LOADED:
    load_rules()
  return _RULES.get(node_type)


def load_rules() -> int:
  """
  Imports the built-in rules package so its rules register themselves.

  Returns:
      int: Number of registered rules.
  """
  global _RULES_LOADED
  package = importlib.import_module(BUILTIN_RULES_PACKAGE)
  # Modules cached by an earlier import do not re-run their decorators after clear_rules().
  for module_name in getattr(package, "__all__", []):
    module = importlib.import_module(f"{BUILTIN_RULES_PACKAGE}.{module_name}")
    for value in vars(module).values():
      node_type = getattr(value, "rule_node_type", None)
      if callable(value) and isinstance(node_type, str):
        _RULES.setdefault(node_type, value)
  _RULES_LOADED = True
  return len(_RULES)


def clear_rules() -> None:
  """Resets the rule registry. Primarily for testing."""
  global _RULES_LOADED
  _RULES.clear()
  _RULES_LOADED = False

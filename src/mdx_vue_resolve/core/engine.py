"""
Orchestration Engine for the Component Rewrite.

`RewriteEngine` is the entry point for build tools that hand over the compiled
program as data rather than as a live tree:

1.  **Ingestion**: accepts an ESTree ``Program`` dict, or JSON text holding one.
2.  **Validation**: rejects input whose root is not a ``Program`` node.
3.  **Rewrite**: runs `ComponentResolver` with a fresh tracer.
4.  **Reporting**: packs the tree, statistics, and trace into a `RewriteResult`.

Input problems are reported in the result, never raised.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from mdx_vue_resolve.config import RuntimeConfig
from mdx_vue_resolve.core.conversion_result import RewriteResult
from mdx_vue_resolve.core.rewriter import ComponentResolver
from mdx_vue_resolve.core.tracer import NullTraceLogger, TraceLogger
from mdx_vue_resolve.core.walker import is_node
from mdx_vue_resolve.utils.console import log_error, log_info


class RewriteEngine:
  """
  Runs the component rewrite over one program per call.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): Names to recognize and tracing switch.
    """
    self.config = config or RuntimeConfig()

  def run(self, tree: Any) -> RewriteResult:
    """
    Rewrites an ESTree program.

    Args:
        tree: The ``Program`` node. Mutated in place.

    Returns:
        RewriteResult: The outcome. ``result.tree`` is the input object.
    """
    if not is_node(tree) or tree["type"] != "Program":
      found = tree.get("type") if isinstance(tree, dict) else type(tree).__name__
      msg = f"Expected an ESTree 'Program' node, got '{found}'."
      log_error(msg)
      return RewriteResult(success=False, errors=[msg])

    tracer = TraceLogger() if self.config.trace else NullTraceLogger()
    resolver = ComponentResolver(self.config, tracer=tracer)
    resolver.rewrite(tree)

    stats = dict(resolver.last_context.stats) if resolver.last_context else {}
    log_info(f"Resolved {stats.get('checks_rewritten', 0)} component reference(s).")
    return RewriteResult(tree=tree, stats=stats, trace_events=tracer.export())

  def run_json(self, text: Union[str, bytes]) -> RewriteResult:
    """
    Parses ESTree JSON and rewrites it.

    Args:
        text: JSON text of a ``Program`` node.

    Returns:
        RewriteResult: The outcome, or a failed result if the JSON is invalid.
    """
    try:
      tree = json.loads(text)
    except ValueError as e:
      msg = f"Invalid ESTree JSON: {e}"
      log_error(msg)
      return RewriteResult(success=False, errors=[msg])
    return self.run(tree)

  def run_file(self, path: Path) -> RewriteResult:
    """
    Reads ESTree JSON from a file and rewrites it.

    Args:
        path: The JSON file.

    Returns:
        RewriteResult: The outcome, or a failed result if the file cannot be read.
    """
    try:
      text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
      msg = f"Cannot read {path}: {e}"
      log_error(msg)
      return RewriteResult(success=False, errors=[msg])
    return self.run_json(text)

  @staticmethod
  def to_json(result: RewriteResult, indent: Optional[int] = None) -> str:
    """
    Serializes the rewritten tree to JSON text.

    Args:
        result: A successful rewrite result.
        indent: Optional JSON indentation.

    Returns:
        str: The JSON text of ``result.tree`` (``"null"`` for a failed result).
    """
    return json.dumps(result.tree, indent=indent)

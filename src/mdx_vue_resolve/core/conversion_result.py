"""
Data structures representing the output of a rewrite job.

This module defines the `RewriteResult` Pydantic model, which encapsulates the
rewritten tree, any errors encountered, rewrite statistics, and the trace log.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class RewriteResult(BaseModel):
  """
  Container for the results of a rewrite job.
  """

  tree: Any = Field(default=None, description="The rewritten ESTree program (the input object itself).")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(
    default=True,
    description="True if the input was a program and the rewrite ran.",
  )
  stats: Dict[str, int] = Field(default_factory=dict, description="Counters of the edits applied.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0

  @property
  def rewritten_checks(self) -> int:
    return self.stats.get("checks_rewritten", 0)

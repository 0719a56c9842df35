"""
Rewrite Trace Logger.

Every rewrite can report what it did to the program:

1. Phases: the whole-program walk and, nested in it, the render body scan.
2. Edits: each statement the rewrite changed or removed, with the statement's
   position in its parent list and its text before and after the edit.
3. Inspections: statements a rule matched but left alone, with the reason.

A logger belongs to a single rewrite. Events are kept as dataclasses and
exported as JSON-serializable dictionaries for build tool reports.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  AST_MUTATION = "ast_mutation"
  ANALYSIS_WARNING = "analysis_warning"
  INSPECTION = "inspection"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Collects the events of one rewrite.

  Phases nest. Edits, warnings and inspections belong to the innermost open phase.
  """

  def __init__(self):
    self._events: List[TraceEvent] = []
    self._open_phases: List[str] = []

  def start_phase(self, name: str, description: str = "") -> str:
    """Opens a phase nested in the current one. Returns the phase ID."""
    phase_id = self._record(TraceEventType.PHASE_START, name, {"detail": description})
    self._open_phases.append(phase_id)
    return phase_id

  def end_phase(self):
    """Closes the innermost open phase. Does nothing when no phase is open."""
    if not self._open_phases:
      return
    phase_id = self._open_phases.pop()
    self._record(TraceEventType.PHASE_END, "End Phase", {}, parent_id=phase_id)

  def log_mutation(self, node_type: str, before: str, after: str, index: Optional[int] = None):
    """
    Records an edit of one node.

    Args:
        node_type: ESTree type of the edited node, e.g. ``"IfStatement"``.
        before: Rendered text before the edit.
        after: Rendered text after the edit. Empty for removed nodes.
        index: Position of the node in its statement list, when known.
    """
    action = "Removed" if not after else "Rewrote"
    where = f" #{index}" if index is not None else ""
    self._record(
      TraceEventType.AST_MUTATION,
      f"{action} {node_type}{where}",
      {"node_type": node_type, "index": index, "before": before, "after": after},
    )

  def log_warning(self, message: str):
    self._record(TraceEventType.ANALYSIS_WARNING, message, {"level": "warning"})

  def log_inspection(self, node_str: str, outcome: str, detail: str = ""):
    """Records a node a rule looked at and left unchanged."""
    self._record(TraceEventType.INSPECTION, f"Inspecting '{node_str}'", {"outcome": outcome, "detail": detail})

  def mutations(self) -> List[Dict[str, Any]]:
    """Returns the metadata of every edit, in the order they happened."""
    return [e.metadata for e in self._events if e.type is TraceEventType.AST_MUTATION]

  def _record(
    self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any], parent_id: Optional[str] = None
  ) -> str:
    event_id = str(uuid.uuid4())
    if parent_id is None and self._open_phases:
      parent_id = self._open_phases[-1]
    self._events.append(
      TraceEvent(
        id=event_id,
        type=evt_type,
        timestamp=time.time(),
        description=desc,
        parent_id=parent_id,
        metadata=meta,
      )
    )
    return event_id

  def export(self) -> List[Dict[str, Any]]:
    """Returns list of dicts for JSON serialization."""
    return [asdict(e) for e in self._events]


class NullTraceLogger(TraceLogger):
  """Tracer that discards every event. Used when tracing is disabled."""

  def _record(
    self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any], parent_id: Optional[str] = None
  ) -> str:
    return ""

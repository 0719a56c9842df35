"""
Tests for the Tracing System.
"""

from mdx_vue_resolve.core import tracer as tracer_module
from mdx_vue_resolve.core.tracer import NullTraceLogger, TraceEventType, TraceLogger


def test_phase_nesting():
  logger = TraceLogger()

  p1 = logger.start_phase("Parent")
  logger.start_phase("Child")
  logger.end_phase()
  logger.end_phase()

  events = logger.export()

  assert len(events) == 4
  assert events[0]["type"] == TraceEventType.PHASE_START
  assert events[1]["parent_id"] == p1
  assert events[2]["type"] == TraceEventType.PHASE_END


def test_mutation_attached_to_active_phase():
  logger = TraceLogger()
  phase = logger.start_phase("Resolve")
  logger.log_mutation("IfStatement", "before", "after", index=2)

  event = logger.export()[-1]
  assert event["type"] == TraceEventType.AST_MUTATION
  assert event["parent_id"] == phase
  assert event["description"] == "Rewrote IfStatement #2"
  assert event["metadata"] == {"node_type": "IfStatement", "index": 2, "before": "before", "after": "after"}


def test_removal_description():
  logger = TraceLogger()
  logger.log_mutation("FunctionDeclaration", "function f(...)", "")

  assert logger.export()[-1]["description"] == "Removed FunctionDeclaration"
  assert logger.mutations() == [
    {"node_type": "FunctionDeclaration", "index": None, "before": "function f(...)", "after": ""}
  ]


def test_end_phase_without_start_is_noop():
  logger = TraceLogger()
  logger.end_phase()
  assert logger.export() == []


def test_null_logger_records_nothing():
  logger = NullTraceLogger()
  logger.start_phase("x")
  logger.log_mutation("A", "b", "c")
  logger.log_warning("w")
  logger.log_inspection("n", "unchanged")
  logger.end_phase()

  assert logger.export() == []
  assert logger.mutations() == []


def test_no_module_level_logger():
  assert not [v for v in vars(tracer_module).values() if isinstance(v, TraceLogger)]

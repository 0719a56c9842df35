"""
ESTree Traversal Engine.

Pre-order, depth-first walk over an ESTree program held as plain ``dict`` nodes.
Every visited node is handed to an ``enter`` callback which answers with a
``VisitAction``:

- ``CONTINUE``: descend into the node's children.
- ``SKIP``: do not descend, carry on with the next sibling.
- ``REMOVE``: excise the node from its parent and carry on with the next sibling.

Callbacks never steer the walk through side effects; the returned action is the
only channel, which keeps rule logic independent from traversal bookkeeping.

The tree is mutated in place. Callers must hold exclusive access to it for the
duration of the walk.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

Node = Dict[str, Any]
ChildKey = Optional[str]
Visitor = Callable[[Node, Optional[Node], ChildKey, Optional[int]], Optional["VisitAction"]]


class VisitAction(str, Enum):
  CONTINUE = "continue"
  SKIP = "skip"
  REMOVE = "remove"


def is_node(value: Any) -> bool:
  """
  Checks whether a value is an ESTree node.

  Positional metadata such as ``loc`` or ``position`` is stored in dicts too,
  but those carry no string ``type`` tag.

  Args:
      value: Any field value from a node.

  Returns:
      bool: True if the value is a dict with a string ``type``.
  """
  return isinstance(value, dict) and isinstance(value.get("type"), str)


def iter_child_slots(node: Node) -> Iterator[Tuple[str, Union[Node, List[Any]]]]:
  """
  Yields the node-bearing fields of a node in field order.

  Args:
      node: The parent node.

  Yields:
      Tuple[str, Union[Node, List]]: The field name and either a child node or
      a list that holds child nodes.
  """
  for key, value in list(node.items()):
    if key == "type":
      continue
    if is_node(value):
      yield key, value
    elif isinstance(value, list) and any(is_node(item) for item in value):
      yield key, value


def walk(tree: Node, enter: Visitor, leave: Optional[Visitor] = None) -> Node:
  """
  Walks ``tree`` depth-first, parent before children, siblings in order.

  Args:
      tree: The root node. Mutated in place.
      enter: Called as ``enter(node, parent, key, index)`` before the children
          of ``node`` are visited. Returning ``None`` means ``CONTINUE``.
      leave: Optional callback with the same signature, called after the
          children of ``node``. Not called for removed nodes.

  Returns:
      Node: The same ``tree`` object.
  """
  _visit(tree, None, None, None, enter, leave)
  return tree


def _visit(
  node: Node,
  parent: Optional[Node],
  key: ChildKey,
  index: Optional[int],
  enter: Visitor,
  leave: Optional[Visitor],
) -> VisitAction:
  action = enter(node, parent, key, index) or VisitAction.CONTINUE

  if action is VisitAction.REMOVE:
    if parent is not None:
      return VisitAction.REMOVE
    # The root has no slot to be removed from.
    action = VisitAction.SKIP

  if action is VisitAction.CONTINUE:
    for child_key, value in iter_child_slots(node):
      if isinstance(value, list):
        _visit_list(value, node, child_key, enter, leave)
      elif _visit(value, node, child_key, None, enter, leave) is VisitAction.REMOVE:
        node[child_key] = None

  if leave is not None:
    leave(node, parent, key, index)
  return VisitAction.CONTINUE


def _visit_list(items: List[Any], parent: Node, key: str, enter: Visitor, leave: Optional[Visitor]) -> None:
  i = 0
  while i < len(items):
    item = items[i]
    if is_node(item) and _visit(item, parent, key, i, enter, leave) is VisitAction.REMOVE:
      del items[i]
      continue
    i += 1

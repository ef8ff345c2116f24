"""Depth-first traversal of syntax trees with enter and leave callbacks."""

from typing import Callable, List, Optional, Union

from pymdx.compiler.ast_nodes import Node, node_fields

Visitor = Callable[[Node, Optional[Node], Optional[str]], None]


def walk(
    node: Node,
    enter: Optional[Visitor] = None,
    leave: Optional[Visitor] = None,
) -> Node:
    """Walk ``node`` calling ``enter`` on descent and ``leave`` on ascent.

    Both callbacks receive ``(node, parent, key)``. Fields are read after
    ``enter`` returns, so a callback may replace a child field and the walk
    continues into the replacement. Lists are walked over a snapshot, so
    statements prepended to a list during the walk are not visited.
    """
    _visit(node, None, None, enter, leave)
    return node


def _visit(
    node: Node,
    parent: Optional[Node],
    key: Optional[str],
    enter: Optional[Visitor],
    leave: Optional[Visitor],
) -> None:
    if enter is not None:
        enter(node, parent, key)

    for name in node_fields(type(node)):
        value: Union[Node, List[Optional[Node]], None] = getattr(node, name)
        if isinstance(value, Node):
            _visit(value, node, name, enter, leave)
        elif isinstance(value, list):
            for child in list(value):
                if isinstance(child, Node):
                    _visit(child, node, name, enter, leave)

    if leave is not None:
        leave(node, parent, key)

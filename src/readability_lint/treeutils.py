from __future__ import annotations

from typing import Callable, Iterator, Sequence, Tuple

from .models import Node

# A match together with the chain of nodes above it, outermost first.
Visit = Tuple[Node, Tuple[Node, ...]]
Selector = Callable[[Node, str], Iterator[Visit]]


def select_all(tree: Node, node_type: str) -> Iterator[Visit]:
    """
    Yield every node of ``node_type`` in ``tree`` in document order.

    Matched nodes are not descended into, so a sentence nested inside another
    matched sentence is never reported twice.
    """
    stack: list[tuple[Node, tuple[Node, ...]]] = [(tree, ())]
    while stack:
        node, ancestors = stack.pop()
        if node.type == node_type:
            yield node, ancestors
            continue
        lineage = ancestors + (node,)
        for child in reversed(node.children):
            stack.append((child, lineage))


def to_string(node: Node | Sequence[Node]) -> str:
    """Render a node (or a list of nodes) back to its exact source text."""
    if isinstance(node, Node):
        if node.value is not None:
            return node.value
        return "".join(to_string(child) for child in node.children)
    return "".join(to_string(child) for child in node)

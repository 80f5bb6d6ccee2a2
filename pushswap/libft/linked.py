"""A singly linked list of arbitrary contents.

Functions that may change which node is first return the new head.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One list cell holding ``content`` and a link to the next cell."""

    content: Any = None
    next: Node | None = None

    def __iter__(self) -> Iterator[Node]:
        """Yield this node and every node after it."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.next


def lst_new(content: Any) -> Node:
    """Return a new unlinked node holding ``content``."""
    return Node(content)


def lst_add_front(head: Node | None, node: Node | None) -> Node | None:
    """Put ``node`` before ``head`` and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lst_size(head: Node | None) -> int:
    """Return the number of nodes in the list."""
    return 0 if head is None else sum(1 for _ in head)


def lst_last(head: Node | None) -> Node | None:
    """Return the last node of the list, or None for an empty list."""
    last = None
    if head is not None:
        for last in head:
            pass
    return last


def lst_add_back(head: Node | None, node: Node | None) -> Node | None:
    """Append ``node`` after the last node and return the head."""
    if node is None:
        return head
    last = lst_last(head)
    if last is None:
        return node
    last.next = node
    return head


def lst_delone(node: Node | None, delete: Callable[[Any], None] | None) -> None:
    """Release ``node``, passing its content to ``delete``.

    The node's link is left as it was; nothing happens without both arguments.
    """
    if node is None or delete is None:
        return
    if node.content is not None:
        delete(node.content)
    node.content = None


def lst_clear(
    head: Node | None, delete: Callable[[Any], None] | None
) -> Node | None:
    """Release every node of the list and return the new, empty head.

    Without ``delete`` the list is left untouched and returned as is.
    """
    if delete is None:
        return head
    node = head
    while node is not None:
        following = node.next
        lst_delone(node, delete)
        node.next = None
        node = following
    return None


def lst_iter(head: Node | None, f: Callable[[Any], None] | None) -> None:
    """Call ``f`` on the content of every node."""
    if head is None or f is None:
        return
    for node in head:
        f(node.content)


def lst_map(
    head: Node | None,
    f: Callable[[Any], Any] | None,
    delete: Callable[[Any], None] | None,
) -> Node | None:
    """Return a new list holding ``f`` applied to each content.

    If ``f`` fails part way, the nodes built so far are released with
    ``delete`` and the error propagates.
    """
    if head is None or f is None or delete is None:
        return None
    mapped: Node | None = None
    tail: Node | None = None
    for node in head:
        try:
            content = f(node.content)
        except Exception:
            lst_clear(mapped, delete)
            raise
        cell = Node(content)
        if tail is None:
            mapped = cell
        else:
            tail.next = cell
        tail = cell
    return mapped
"""
Singly linked list that only keeps a head reference.

Every operation walks the chain from head so the node count and the
tail are always derived, never cached. Out of range positions are
treated as no-ops that return None rather than raising. Callers test
the return value to see if anything happened.
"""

import logging
from typing import Any, Optional
from .defs import *
from .node import *

__all__ = ["LinkedList"]

log = logging.getLogger(__name__)

class LinkedList:
    def __init__(self):
        self.head = None

    def nodes(self):
        """Yield each node from head to tail."""
        cur = self.head
        while cur:
            nxt = cur.next
            yield cur
            cur = nxt

    def append(self, value: Any) -> Node:
        """Append value to the end and return its node."""
        node = Node(value)
        if not self.head:
            self.head = node
        else:
            self.tail().next = node

        return node

    def prepend(self, value: Any) -> Node:
        """Add value to start of the linked list and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def size(self) -> int:
        count = 0
        for _ in self.nodes():
            count += 1

        return count

    def tail(self) -> Optional[Node]:
        if not self.head:
            return None

        cur = self.head
        while cur.next:
            cur = cur.next

        return cur

    def at(self, index: int) -> Optional[Node]:
        """Return the node at index or None if index is out of range."""
        index = check_index(index)
        if index < 0:
            return None

        for count, node in enumerate(self.nodes()):
            if count == index:
                return node

        return None

    def pop(self) -> Optional[Node]:
        """Remove the last node. Does nothing on an empty list."""
        if not self.head:
            log.debug("pop: list is empty")
            return None

        # Only one node.
        if not self.head.next:
            node = self.head
            self.head = None
            return node

        # Stop on the node before the tail.
        cur = self.head
        while cur.next.next:
            cur = cur.next

        node = cur.next
        cur.next = None
        return node

    def contains(self, value: Any) -> bool:
        for node in self.nodes():
            if node.value == value:
                return True

        return False

    def find(self, value: Any) -> Optional[int]:
        """Return the index of the first node holding value or None."""
        for index, node in enumerate(self.nodes()):
            if node.value == value:
                return index

        return None

    def to_s(self, settings: Optional[RenderSettings] = None) -> str:
        settings = settings or DEFAULT_RENDER
        out = ""
        for node in self.nodes():
            out += settings.node_fmt.format(node.value)

        return out + settings.chain_end

    def insert_at(self, value: Any, index: int) -> Optional[Node]:
        """
        Insert value so it ends up at index. An index past the end of
        the list (more than size) leaves the list unchanged.
        """
        index = check_index(index)
        if index == 0:
            return self.prepend(value)

        prev = self.at(index - 1)
        if not prev:
            log.debug(f"insert_at: no node before index {index}")
            return None

        node = Node(value, prev.next)
        prev.next = node
        return node

    def remove_at(self, index: int) -> Optional[Node]:
        """Unlink and return the node at index. Out of range is a no-op."""
        index = check_index(index)
        if index == 0:
            node = self.head
            if not node:
                log.debug("remove_at: list is empty")
                return None

            self.head = node.next
            node.next = None
            return node

        prev = self.at(index - 1)
        if not prev or not prev.next:
            log.debug(f"remove_at: no node at index {index}")
            return None

        node = prev.next
        prev.next = node.next
        node.next = None
        return node

    def __iter__(self):
        for node in self.nodes():
            yield node.value

    def __contains__(self, value):
        return self.contains(value)

    def __bool__(self):
        return self.head is not None

    def __len__(self):
        return self.size()

    def __str__(self):
        return self.to_s()

    def __repr__(self):
        return f"LinkedList({list(self)!r})"

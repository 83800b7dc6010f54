__all__ = ["Node"]

class Node:
    __slots__ = ("value", "next")

    def __init__(self, value=None, next=None):
        self.value = value
        self.next = next

    @property
    def next_node(self):
        return self.next

    @next_node.setter
    def next_node(self, node):
        self.next = node

    def __repr__(self):
        return f"Node({self.value!r})"

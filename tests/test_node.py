import unittest
from linked_lists import *

class TestNode(unittest.TestCase):
    def test_defaults_are_empty(self):
        node = Node()
        assert(node.value is None)
        assert(node.next is None)

    def test_fields_are_writable(self):
        a = Node(1)
        b = Node(2, a)
        assert(b.next is a)
        b.value = 3
        b.next = None
        assert(b.value == 3)
        assert(b.next is None)

    def test_next_node_aliases_next(self):
        a = Node("a")
        b = Node("b")
        a.next_node = b
        assert(a.next is b)
        assert(a.next_node is b)

    def test_repr_does_not_follow_chain(self):
        node = Node("x", Node("y"))
        self.assertEqual(repr(node), "Node('x')")

    def test_slots_reject_unknown_fields(self):
        with self.assertRaises(AttributeError):
            Node(1).prev = None

if __name__ == '__main__':
    unittest.main()

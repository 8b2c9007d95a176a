import unittest

from packetgen.datatypes import AmbiguousName, NameNotFound, PacketDefinition
from packetgen.namespace import find_definition, group_identifiers

class GroupIdentifiers(unittest.TestCase):
    def test_tree(self):
        root = group_identifiers("packets", ["foo.bar", "foo.baz", "qux", "a::b::c"])
        self.assertEqual(root.shape(), (
            "packets",
            (
                ("a", (("b", (), ("c",)),), ()),
                ("foo", (), ("bar", "baz")),
            ),
            ("qux",),
        ))

    def test_children_are_reused(self):
        root = group_identifiers("packets", ["foo.bar", "foo.inner.x", "foo.baz"])
        self.assertEqual(list(root.children), ["foo"])
        foo = root.children["foo"]
        self.assertEqual(foo.identifiers, ["bar", "baz"])
        self.assertEqual(list(foo.children), ["inner"])

    def test_children_sorted(self):
        root = group_identifiers("packets", ["z.a", "m.b", "a.c"])
        self.assertEqual([c.name for c in root.sorted_children()], ["a", "m", "z"])

    def test_idempotent(self):
        names = ["battle.tank.move", "battle.chat", "lobby.join", "battle.tank.fire"]
        first = group_identifiers("packets", names)
        second = group_identifiers("packets", names)
        self.assertEqual(first.shape(), second.shape())

    def test_empty_segments_skipped(self):
        root = group_identifiers("packets", [".foo.bar", "foo..baz"])
        self.assertEqual(list(root.children), ["foo"])
        self.assertEqual(root.children["foo"].identifiers, ["bar", "baz"])
        self.assertEqual(root.children["foo"].children, {})

    def test_duplicate_leaves_kept(self):
        root = group_identifiers("packets", ["A.B", "A::B"])
        self.assertEqual(root.children["A"].identifiers, ["B", "B"])

    def test_empty(self):
        root = group_identifiers("packets", [])
        self.assertTrue(root.is_empty())
        self.assertEqual(root.shape(), ("packets", (), ()))

class FindDefinition(unittest.TestCase):
    def setUp(self):
        self.definitions = {
            1: PacketDefinition(1, "foo.bar", 7, {}),
            2: PacketDefinition(2, None, 3, {}),
            3: PacketDefinition(3, "A.B", 0, {}),
            4: PacketDefinition(4, "A::B", 0, {}),
        }

    def test_found(self):
        self.assertEqual(find_definition(self.definitions, ["foo", "bar"]).id, 1)

    def test_not_found(self):
        with self.assertRaises(NameNotFound) as cm:
            find_definition(self.definitions, ["foo", "missing"])
        self.assertEqual(cm.exception.name, "foo.missing")

    def test_ambiguous(self):
        with self.assertRaises(AmbiguousName) as cm:
            find_definition(self.definitions, ["A", "B"])
        self.assertEqual(cm.exception.name, "A.B")
        self.assertEqual(cm.exception.ids, [3, 4])
        self.assertIn("3, 4", str(cm.exception))

if __name__ == '__main__':
    unittest.main()

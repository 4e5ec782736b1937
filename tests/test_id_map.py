"""Tests for IdentifierMap token allocation and lookup."""

from unittest import TestCase, main

from notmuch_view.errors import NotFound
from notmuch_view.thread.id_map import IdentifierMap


class TestIdentifierMap(TestCase):
    """Token allocation is monotonic, unique and reversible."""

    def test_put_get_roundtrip(self):
        id_map = IdentifierMap("msg_")
        ids = ["a@example.com", "b@example.com", "a@example.com", ""]
        tokens = [id_map.put(i) for i in ids]
        self.assertEqual(tokens, ["msg_0", "msg_1", "msg_2", "msg_3"])
        self.assertEqual(len(set(tokens)), len(tokens))
        for token, full_id in zip(tokens, ids):
            self.assertEqual(id_map.get(token), full_id)

    def test_unknown_token_raises_not_found(self):
        id_map = IdentifierMap("msg_")
        id_map.put("a@example.com")
        with self.assertRaises(NotFound) as ctx:
            id_map.get("msg_7")
        self.assertEqual(ctx.exception.key, "msg_7")
        with self.assertRaises(LookupError):
            id_map.get("a@example.com")

    def test_counter_is_monotonic(self):
        id_map = IdentifierMap("m")
        for _ in range(12):
            id_map.put("x")
        self.assertEqual(id_map.counter, 12)
        self.assertEqual(len(id_map), 12)
        self.assertIn("m11", id_map)
        self.assertNotIn("m12", id_map)

    def test_sessions_are_independent(self):
        """Two maps hand out the same tokens for different ids without interfering."""
        first = IdentifierMap("msg_")
        second = IdentifierMap("msg_")
        self.assertEqual(first.put("one@example.com"), "msg_0")
        self.assertEqual(second.put("two@example.com"), "msg_0")
        self.assertEqual(first.get("msg_0"), "one@example.com")
        self.assertEqual(second.get("msg_0"), "two@example.com")

    def test_items_in_allocation_order(self):
        id_map = IdentifierMap("t")
        id_map.put("x")
        id_map.put("y")
        self.assertEqual(id_map.items(), [("t0", "x"), ("t1", "y")])

    def test_default_prefix(self):
        self.assertEqual(IdentifierMap().prefix, "msg_")


if __name__ == "__main__":
    main()

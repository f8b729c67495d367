import unittest
from unittest.mock import Mock

from boxtree.errors import NotFoundError
from boxtree.models.attributes import MISSING, AttributeStore


class TestAttributeStore(unittest.TestCase):
    def test_cached_value_does_not_load(self) -> None:
        loader = Mock(return_value={"name": "remote"})
        store = AttributeStore(loader)
        store.merge({"name": "local"})

        self.assertEqual(store.get("name"), "local")
        loader.assert_not_called()
        self.assertFalse(store.cached)

    def test_missing_key_loads_once(self) -> None:
        loader = Mock(return_value={"name": "n", "size": 3})
        store = AttributeStore(loader)

        self.assertEqual(store.get("size"), 3)
        self.assertEqual(store.get("size"), 3)
        self.assertEqual(store.get("name"), "n")
        self.assertEqual(loader.call_count, 1)
        self.assertTrue(store.cached)

    def test_absent_after_load_is_missing_not_error(self) -> None:
        loader = Mock(return_value={"name": "n"})
        store = AttributeStore(loader)

        self.assertIs(store.get("sha1"), MISSING)
        self.assertIs(store.get("sha1"), MISSING)
        self.assertEqual(store.get("sha1", default=None), None)
        self.assertEqual(loader.call_count, 1)

    def test_refresh_always_loads(self) -> None:
        loader = Mock(side_effect=[{"etag": "1"}, {"etag": "2"}])
        store = AttributeStore(loader)
        store.merge({"etag": "0"})

        self.assertEqual(store.get("etag", refresh=True), "1")
        self.assertEqual(store.get("etag", refresh=True), "2")
        self.assertEqual(loader.call_count, 2)

    def test_failed_load_leaves_store_untouched(self) -> None:
        loader = Mock(side_effect=[NotFoundError("gone"), {"name": "back"}])
        store = AttributeStore(loader)
        store.merge({"id": "1"})

        with self.assertRaises(NotFoundError):
            store.get("name")

        self.assertFalse(store.cached)
        self.assertEqual(store.snapshot(), {"id": "1"})

        self.assertEqual(store.get("name"), "back")
        self.assertTrue(store.cached)

    def test_peek_never_loads(self) -> None:
        loader = Mock(return_value={"name": "n"})
        store = AttributeStore(loader)

        self.assertIs(store.peek("name"), MISSING)
        self.assertIsNone(store.peek("name", None))
        loader.assert_not_called()

    def test_container_protocol(self) -> None:
        store = AttributeStore(dict)
        store.merge({"a": 1, "b": 2})
        store.merge({"c": 3})

        self.assertIn("a", store)
        self.assertNotIn("z", store)
        self.assertEqual(len(store), 3)
        self.assertEqual(sorted(store), ["a", "b", "c"])

    def test_missing_is_falsy_singleton(self) -> None:
        self.assertFalse(MISSING)
        self.assertEqual(repr(MISSING), "MISSING")


if __name__ == "__main__":
    unittest.main()

import re
import unittest
from unittest.mock import Mock

from boxtree.errors import NotFoundError
from boxtree.models import File, Folder
from boxtree.navigation import find_items, matches_criteria, value_matches


class FakeTreeApi:
    """In-memory folder tree; ids listed in ``gone`` answer 404."""

    def __init__(self, nodes, gone=()):
        self.nodes = nodes
        self.gone = set(gone)

    def _info(self, node_id):
        if node_id in self.gone:
            raise NotFoundError("Not Found", details={"id": node_id})
        node = self.nodes[node_id]
        return {k: v for k, v in node.items() if k != "parent"} | {"id": node_id}

    def get_folder_info(self, folder_id):
        return self._info(folder_id)

    def get_file_info(self, file_id):
        return self._info(file_id)

    def get_folder_items(self, folder_id, *, limit=100, offset=0):
        children = [
            {"type": node["type"], "id": node_id, "name": node["name"]}
            for node_id, node in self.nodes.items()
            if node.get("parent") == folder_id
        ]
        return {
            "total_count": len(children),
            "offset": offset,
            "limit": limit,
            "entries": children[offset : offset + limit],
        }


def _nodes():
    return {
        "0": {"type": "folder", "name": "All Files"},
        "D1": {"type": "folder", "name": "dummy", "parent": "0"},
        "O": {"type": "folder", "name": "other", "parent": "0"},
        "F1": {"type": "file", "name": "dummy", "parent": "0", "sha1": "abc"},
        "D2": {"type": "folder", "name": "dummy", "parent": "O"},
        "F2": {"type": "file", "name": "report.pdf", "parent": "O", "sha1": "def"},
        "D3": {"type": "folder", "name": "dummy", "parent": "D1"},
    }


def _ids(items):
    return [item.id for item in items]


class TestFind(unittest.TestCase):
    def setUp(self) -> None:
        self.api = FakeTreeApi(_nodes())
        self.root = Folder(self.api, {"id": "0"})

    def test_direct_children_only(self) -> None:
        found = self.root.find({"type": "folder", "name": "dummy"})
        self.assertEqual(_ids(found), ["D1"])

    def test_recursive_depth_first(self) -> None:
        found = self.root.find({"type": "folder", "name": "dummy"}, recursive=True)
        self.assertEqual(_ids(found), ["D1", "D3", "D2"])

    def test_name_is_case_sensitive(self) -> None:
        self.assertEqual(self.root.find(name="DUMMY"), [])

    def test_keyword_criteria_merge(self) -> None:
        found = self.root.find({"name": "dummy"}, type="file")
        self.assertEqual(found, [File(self.api, {"id": "F1"})])

    def test_regex_criteria(self) -> None:
        found = self.root.find(name=re.compile(r"\.pdf$"), recursive=True)
        self.assertEqual(_ids(found), ["F2"])

    def test_predicate_criteria(self) -> None:
        found = self.root.find(name=lambda n: n.startswith("oth"))
        self.assertEqual(_ids(found), ["O"])

    def test_predicate_on_inapplicable_value_is_not_a_match(self) -> None:
        api = Mock()
        api.get_folder_items.return_value = {
            "total_count": 2,
            "offset": 0,
            "limit": 100,
            "entries": [
                {"type": "file", "id": "1", "name": "private", "shared_link": None},
                {"type": "file", "id": "2", "name": "public", "shared_link": {"access": "open"}},
            ],
        }
        root = Folder(api, {"id": "0"})

        found = root.find(shared_link=lambda link: link["access"] == "open")

        self.assertEqual(_ids(found), ["2"])
        api.get_file_info.assert_not_called()

    def test_recursive_flag_inside_criteria(self) -> None:
        api = Mock()
        api.get_folder_items.return_value = {
            "total_count": 1,
            "offset": 0,
            "limit": 100,
            "entries": [{"type": "file", "id": "1", "name": "a"}],
        }
        root = Folder(api, {"id": "0"})

        self.assertEqual(_ids(root.find({"name": "a", "recursive": False})), ["1"])
        api.get_file_info.assert_not_called()

    def test_recursive_flag_inside_criteria_enables_recursion(self) -> None:
        found = self.root.find({"type": "folder", "name": "dummy", "recursive": True})
        self.assertEqual(_ids(found), ["D1", "D3", "D2"])

    def test_absent_attribute_is_not_a_match(self) -> None:
        found = self.root.find(sha1="abc")
        self.assertEqual(_ids(found), ["F1"])

    def test_empty_criteria_matches_everything(self) -> None:
        self.assertEqual(_ids(self.root.find()), ["D1", "O", "F1"])

    def test_fetch_errors_propagate(self) -> None:
        api = FakeTreeApi(_nodes(), gone={"D1"})
        root = Folder(api, {"id": "0"})
        with self.assertRaises(NotFoundError):
            root.find(sha1="abc")

    def test_fetch_errors_inside_predicate_propagate(self) -> None:
        api = FakeTreeApi(_nodes(), gone={"D1"})
        root = Folder(api, {"id": "0"})
        child = Folder(api, {"id": "D1"})
        with self.assertRaises(NotFoundError):
            root.find(name=lambda n: child.sha1 is None)

    def test_unregistered_entries_are_skipped(self) -> None:
        api = Mock()
        api.get_folder_items.return_value = {
            "total_count": 2,
            "offset": 0,
            "limit": 100,
            "entries": [
                {"type": "web_link", "id": "W1", "name": "dummy"},
                {"type": "file", "id": "F1", "name": "dummy"},
            ],
        }
        folder = Folder(api, {"id": "0"})

        self.assertEqual(_ids(find_items(folder, {"name": "dummy"})), ["F1"])


class TestMatching(unittest.TestCase):
    def test_value_matches(self) -> None:
        self.assertTrue(value_matches("a", "a"))
        self.assertFalse(value_matches("a", "A"))
        self.assertTrue(value_matches(re.compile("^du"), "dummy"))
        self.assertFalse(value_matches(re.compile("^du"), 12))
        self.assertTrue(value_matches(lambda v: v > 3, 5))
        self.assertTrue(value_matches(10, 10))

    def test_type_criterion_uses_item_kind(self) -> None:
        file = File(Mock(), {"id": "F1", "name": "x"})
        self.assertTrue(matches_criteria(file, {"type": "file", "name": "x"}))
        self.assertFalse(matches_criteria(file, {"type": "folder"}))


if __name__ == "__main__":
    unittest.main()

import unittest
from unittest.mock import Mock, patch

from boxtree import BoxClient
from boxtree.auth import AuthInfo
from boxtree.errors import InvalidArgumentError
from boxtree.models import Comment, Discussion, File, Folder


class TestBoxClient(unittest.TestCase):
    def test_root_is_lazy_folder_zero(self) -> None:
        api = Mock()
        root = BoxClient.from_api(api).root()

        self.assertIsInstance(root, Folder)
        self.assertEqual(root.id, "0")
        self.assertFalse(root.cached)
        api.get_folder_info.assert_not_called()

    def test_item_constructors(self) -> None:
        api = Mock()
        client = BoxClient.from_api(api)

        self.assertEqual(client.folder("D1"), Folder(api, {"id": "D1"}))
        self.assertEqual(client.file(123), File(api, {"id": "123"}))
        self.assertIsInstance(client.comment("C1"), Comment)
        self.assertIsInstance(client.discussion("S1"), Discussion)
        self.assertIs(client.api, api)

    def test_blank_id_is_rejected(self) -> None:
        client = BoxClient.from_api(Mock())
        with self.assertRaises(InvalidArgumentError):
            client.file("  ")
        with self.assertRaises(InvalidArgumentError):
            client.folder(None)

    def test_user_info(self) -> None:
        api = Mock()
        api.get_account_info.return_value = {"id": "me", "login": "a@example.com"}
        self.assertEqual(BoxClient.from_api(api).user_info()["login"], "a@example.com")

    def test_at_resolves_from_root(self) -> None:
        api = Mock()
        api.get_folder_items.return_value = {
            "total_count": 1,
            "offset": 0,
            "limit": 100,
            "entries": [{"type": "file", "id": "F1", "name": "readme.md"}],
        }
        client = BoxClient.from_api(api)

        self.assertEqual(client.at("readme.md"), File(api, {"id": "F1"}))
        self.assertIsNone(client.at("missing.md"))

    def test_constructor_builds_api_with_token(self) -> None:
        session = Mock()
        session.headers = {}
        with patch("boxtree.controller.box_api.requests.Session", return_value=session):
            client = BoxClient(AuthInfo.from_token("tok"), timeout=3)

        self.assertEqual(session.headers["Authorization"], "Bearer tok")
        self.assertIs(client.api._session, session)


if __name__ == "__main__":
    unittest.main()

import logging
import unittest

from boxtree.util.logging import get_logger


class TestUtilLogging(unittest.TestCase):
    def test_get_logger_propagates(self) -> None:
        logger = get_logger("boxtree.test")
        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual(logger.name, "boxtree.test")
        self.assertTrue(logger.propagate)

    def test_module_loggers_emit_debug_records(self) -> None:
        with self.assertLogs("boxtree.models.attributes", level="DEBUG") as logs:
            from boxtree.models.attributes import AttributeStore

            store = AttributeStore(lambda: {"name": "n"})
            store.load()

        self.assertTrue(any("name" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()

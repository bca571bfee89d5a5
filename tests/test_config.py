import io
import json
import logging
import unittest
from unittest.mock import patch

from hotel_agent.config import Config, setup_logging


class TestConfig(unittest.TestCase):
    def tearDown(self):
        root = logging.getLogger()
        for h in list(root.handlers):
            root.removeHandler(h)

    def test_validate_reports_missing_credentials(self):
        with patch.object(Config, "AMADEUS_API_KEY", None), patch.object(Config, "AMADEUS_API_SECRET", "s"):
            with patch("builtins.print") as mock_print:
                self.assertFalse(Config.validate())
        self.assertIn("AMADEUS_API_KEY", mock_print.call_args_list[0].args[0])

    def test_validate_ok(self):
        with patch.object(Config, "AMADEUS_API_KEY", "k"), patch.object(Config, "AMADEUS_API_SECRET", "s"):
            self.assertTrue(Config.validate())

    def test_json_logging(self):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        logging.getLogger("hotel_agent.test").warning("hotel_search failed", extra={"tool": "hotel_search"})

        record = json.loads(stream.getvalue().splitlines()[-1])
        self.assertEqual(record["level"], "WARNING")
        self.assertEqual(record["message"], "hotel_search failed")
        self.assertEqual(record["tool"], "hotel_search")


if __name__ == "__main__":
    unittest.main()

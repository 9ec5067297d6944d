import json
import logging

from zbank.logging_config import JsonFormatter, setup_logging


def test_json_formatter_outputs_valid_json():
    record = logging.LogRecord("zbank.test", logging.WARNING, __file__, 1, "Invalid PIN attempt for %s", ("1234567890",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "zbank.test"
    assert payload["message"] == "Invalid PIN attempt for 1234567890"


def test_setup_logging_installs_single_handler():
    setup_logging("DEBUG", "json")
    setup_logging("DEBUG", "json")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert logging.getLogger("zbank").level == logging.DEBUG
    setup_logging("INFO")

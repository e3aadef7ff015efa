import io
import json
import logging

from cssbuilder.document import load_selector
from cssbuilder.logging_config import JsonFormatter, configure_logging


def test_configure_logging_replaces_root_handlers():
    stream = io.StringIO()
    handler = configure_logging(level="debug", stream=stream)
    root = logging.getLogger()
    assert root.handlers == [handler]
    assert root.level == logging.DEBUG

    logging.getLogger("cssbuilder.test").debug("hello %s", "world")
    assert "DEBUG cssbuilder.test hello world" in stream.getvalue()


def test_jsonl_output():
    stream = io.StringIO()
    handler = configure_logging(level="INFO", jsonl=True, stream=stream)
    assert isinstance(handler.formatter, JsonFormatter)

    logging.getLogger("cssbuilder.test").info("built %s", "div")
    record = json.loads(stream.getvalue().strip())
    assert record["level"] == "INFO"
    assert record["logger"] == "cssbuilder.test"
    assert record["message"] == "built div"


def test_jsonl_includes_selector_extra():
    stream = io.StringIO()
    configure_logging(level="DEBUG", jsonl=True, stream=stream)

    load_selector('{"parts": [{"kind": "element", "value": "nav"}, {"kind": "class", "value": "top"}]}')
    records = [json.loads(line) for line in stream.getvalue().splitlines()]
    compiled = [r for r in records if r["logger"] == "cssbuilder.document"]
    assert compiled[0]["selector"] == "nav.top"


def test_jsonl_omits_selector_when_absent():
    stream = io.StringIO()
    configure_logging(level="INFO", jsonl=True, stream=stream)

    logging.getLogger("cssbuilder.test").info("plain")
    assert "selector" not in json.loads(stream.getvalue().strip())

# tests/test_observability.py
import json
import logging

from ourtalks.core.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("ourtalks.test", logging.INFO, __file__, 1, "hello %s", ("ann",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras() -> None:
    line = JSONFormatter().format(_record(connection_id="abc", error_code="USER_EXISTS", other="x"))
    data = json.loads(line)

    assert data["message"] == "hello ann"
    assert data["level"] == "INFO"
    assert data["logger"] == "ourtalks.test"
    assert data["connection_id"] == "abc"
    assert data["error_code"] == "USER_EXISTS"
    assert "other" not in data


def test_setup_logging_does_not_stack_handlers() -> None:
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")

    ours = [h for h in logging.root.handlers if h.get_name() == "ourtalks"]
    assert len(ours) == 1
    assert not isinstance(ours[0].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
    assert len(logging.root.handlers) <= before + 1

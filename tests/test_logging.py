"""Test the structured JSON logger."""

import io
import json

from binopt2d.core.logging import StructuredLogger, get_logger, set_log_level


def test_records_are_json_lines():
    """Test each record is one JSON object with extra fields."""
    buf = io.StringIO()
    logger = StructuredLogger("t", output=buf)

    logger.info("hello", genome_length=16)

    record = json.loads(buf.getvalue())
    assert record["level"] == "INFO"
    assert record["message"] == "hello"
    assert record["logger"] == "t"
    assert record["genome_length"] == 16


def test_min_level_filters():
    """Test records below the minimum level are dropped."""
    buf = io.StringIO()
    logger = StructuredLogger("t", output=buf, min_level="WARNING")

    logger.info("quiet")
    with logger.timer("ga_minimize", level="WARN"):
        pass

    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["level"] == "WARN"


def test_timer_reports_elapsed():
    """Test the timer emits elapsed_ms at the given level."""
    buf = io.StringIO()
    logger = StructuredLogger("t", output=buf, min_level="DEBUG")

    with logger.timer("decode"):
        pass

    record = json.loads(buf.getvalue())
    assert record["message"] == "decode completed"
    assert record["elapsed_ms"] >= 0.0


def test_get_logger_cached_and_level_applies():
    """Test get_logger returns one instance per name and set_log_level reaches it."""
    logger = get_logger("binopt2d.test")
    assert get_logger("binopt2d.test") is logger

    buf = io.StringIO()
    logger.output = buf
    set_log_level("ERROR")
    logger.info("dropped")
    set_log_level("DEBUG")
    logger.debug("kept")

    assert [json.loads(line)["message"] for line in buf.getvalue().splitlines()] == ["kept"]

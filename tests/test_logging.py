import logging

from phonecheck import validate
from phonecheck.core.logging import PIISafeFilter


def test_pii_filter_redacts_phone_numbers(caplog):
    logger = logging.getLogger("test.pii")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.pii"):
        logger.info("Caller +44 20 7946 0958 and (212) 555-0123 rang")

    assert "7946" not in caplog.text
    assert "555-0123" not in caplog.text
    assert "[REDACTED]" in caplog.text


def test_pii_filter_redacts_raw_input_assignment(caplog):
    logger = logging.getLogger("test.raw")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.raw"):
        logger.info("processing raw_input=call-me-maybe for validation")

    assert "call-me-maybe" not in caplog.text
    assert "raw_input=[REDACTED]" in caplog.text


def test_pii_filter_redacts_args(caplog):
    logger = logging.getLogger("test.args")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.args"):
        logger.info("received %s", "+1 555-123-4567")

    assert "555-123-4567" not in caplog.text


def test_pii_filter_keeps_short_identifiers(caplog):
    logger = logging.getLogger("test.short")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.short"):
        logger.info("calling_code=%d region=%s version=%s", 44, "GB", "2026.10")

    assert "calling_code=44" in caplog.text
    assert "region=GB" in caplog.text
    assert "version=2026.10" in caplog.text


def test_validate_never_logs_raw_input(caplog):
    with caplog.at_level(logging.DEBUG, logger="phonecheck"):
        validate("+44 20 7946 0958")
        validate("12345", "US")

    assert "7946" not in caplog.text
    assert "12345" not in caplog.text

"""Unit tests for correlation-id logging helpers."""

import logging

import pytest

from dreamstay.utils.logging import (
    CorrelationIdFilter,
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_booking_operation,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> None:
    clear_correlation_id()


class TestCorrelationId:
    def test_set_generates_id_when_missing(self) -> None:
        cid = set_correlation_id()
        assert cid
        assert get_correlation_id() == cid

    def test_set_keeps_incoming_id(self) -> None:
        assert set_correlation_id("req-123") == "req-123"
        assert get_correlation_id() == "req-123"

    def test_clear(self) -> None:
        set_correlation_id("req-123")
        clear_correlation_id()
        assert get_correlation_id() is None


class TestFormatting:
    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("dreamstay.test", logging.INFO, __file__, 1, "hello", None, None)

    def test_filter_adds_placeholder_without_context(self) -> None:
        record = self._record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "no-correlation-id"

    def test_formatter_prefixes_correlation_id(self) -> None:
        set_correlation_id("req-42")
        output = StructuredFormatter("%(message)s").format(self._record())
        assert output == "[req-42] hello"

    def test_get_logger_installs_filter_once(self) -> None:
        logger = get_logger("dreamstay.test.once")
        get_logger("dreamstay.test.once")
        filters = [f for f in logger.filters if isinstance(f, CorrelationIdFilter)]
        assert len(filters) == 1


class TestLogBookingOperation:
    """Outcome decides the log level."""

    @pytest.mark.parametrize(
        ("result", "error", "level"),
        [
            ("success", None, logging.INFO),
            ("conflict", None, logging.WARNING),
            ("forbidden", None, logging.WARNING),
            ("repair_needed", None, logging.ERROR),
            ("success", "boom", logging.ERROR),
        ],
    )
    def test_levels(
        self,
        caplog: pytest.LogCaptureFixture,
        result: str,
        error: str | None,
        level: int,
    ) -> None:
        logger = get_logger("dreamstay.test.ops")
        with caplog.at_level(logging.DEBUG, logger="dreamstay.test.ops"):
            log_booking_operation(
                logger, "create_booking", room_id="room-101", result=result, error=error
            )

        record = caplog.records[-1]
        assert record.levelno == level
        assert "create_booking" in record.getMessage()
        assert record.room_id == "room-101"

    def test_extra_fields_in_message(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("dreamstay.test.ops")
        with caplog.at_level(logging.INFO, logger="dreamstay.test.ops"):
            log_booking_operation(
                logger, "cancel_booking", booking_id="b-1", result="success", room_released=True
            )

        message = caplog.records[-1].getMessage()
        assert "booking_id=b-1" in message
        assert "room_released=True" in message

"""Tests for request correlation IDs on log records."""

import logging

from salon_scheduler.logging_context import (
    RequestIdFilter,
    get_request_id,
    get_request_logger,
    set_request_id,
)


class TestRequestId:
    def test_explicit_id(self):
        assert set_request_id("REQ-test01") == "REQ-test01"
        assert get_request_id() == "REQ-test01"

    def test_generated_id(self):
        request_id = set_request_id()
        assert request_id.startswith("REQ-")
        assert get_request_id() == request_id

    def test_filter_added_once(self):
        logger = get_request_logger("salon_scheduler.test")
        get_request_logger("salon_scheduler.test")
        assert sum(isinstance(f, RequestIdFilter) for f in logger.filters) == 1

    def test_records_carry_request_id(self, caplog):
        set_request_id("REQ-caplog")
        logger = get_request_logger("salon_scheduler.test.caplog")
        with caplog.at_level(logging.INFO, logger="salon_scheduler.test.caplog"):
            logger.info("Resolving slots")
        assert caplog.records[0].request_id == "REQ-caplog"

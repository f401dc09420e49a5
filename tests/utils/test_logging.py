import logging

import pytest

from gqlserve.exceptions import UnknownOptionError
from gqlserve.utils.logging import ServerLogger


def test_logger_name():
    assert ServerLogger.logger is logging.getLogger("gqlserve")


def test_option_applied(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="gqlserve"):
        ServerLogger.option_applied("debug")

    assert [record.levelno for record in caplog.records] == [logging.DEBUG]
    assert caplog.records[0].getMessage() == "Applied server config option 'debug'"


def test_option_rejected_is_silent_above_debug(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO, logger="gqlserve"):
        ServerLogger.option_rejected("oops", UnknownOptionError("oops"))

    assert caplog.records == []

from __future__ import annotations

import logging

import pytest

from cleo.io.buffered_io import BufferedIO

from rangefmt.console.logging.io_formatter import RANGEFMT_FILTER
from rangefmt.console.logging.io_handler import IOHandler


def _record(name: str, level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


@pytest.fixture
def io() -> BufferedIO:
    return BufferedIO()


def test_info_goes_to_the_output(io: BufferedIO) -> None:
    handler = IOHandler(io)

    handler.emit(_record("rangefmt.config", logging.INFO, "hello"))

    assert io.fetch_output() == "hello\n"
    assert io.fetch_error() == ""


@pytest.mark.parametrize("level", [logging.WARNING, logging.ERROR, logging.CRITICAL])
def test_warnings_and_errors_go_to_the_error_output(
    io: BufferedIO, level: int
) -> None:
    handler = IOHandler(io)

    handler.emit(_record("rangefmt.config", level, "careful"))

    assert io.fetch_output() == ""
    assert io.fetch_error() == "careful\n"


def test_third_party_records_are_prefixed(io: BufferedIO) -> None:
    handler = IOHandler(io)

    handler.emit(_record("cleo", logging.INFO, "loaded"))

    assert io.fetch_output() == "[cleo] loaded\n"
    assert io.fetch_error() == ""


def test_third_party_warnings_are_prefixed_on_the_error_output(
    io: BufferedIO,
) -> None:
    handler = IOHandler(io)

    handler.emit(_record("urllib3.connectionpool", logging.WARNING, "retrying"))

    assert io.fetch_output() == ""
    assert io.fetch_error() == "[urllib3.connectionpool] retrying\n"


def test_filter_drops_third_party_records(io: BufferedIO) -> None:
    handler = IOHandler(io)
    handler.addFilter(RANGEFMT_FILTER)

    handler.handle(_record("cleo", logging.WARNING, "ignored"))
    handler.handle(_record("rangefmt.formatting.formatter", logging.WARNING, "kept"))

    assert io.fetch_output() == ""
    assert io.fetch_error() == "kept\n"


def test_custom_formatter(io: BufferedIO) -> None:
    handler = IOHandler(io, logging.Formatter("%(levelname)s: %(message)s"))

    handler.emit(_record("rangefmt.config", logging.INFO, "hello"))

    assert io.fetch_output() == "INFO: hello\n"

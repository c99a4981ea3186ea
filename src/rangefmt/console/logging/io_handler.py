from __future__ import annotations

import logging

from typing import TYPE_CHECKING

from rangefmt.console.logging.io_formatter import IOFormatter


if TYPE_CHECKING:
    from logging import LogRecord

    from cleo.io.io import IO


class IOHandler(logging.Handler):
    """
    Writes log records to a cleo IO.

    Warnings and anything more severe go to the error output, the rest to
    the regular output.
    """

    def __init__(self, io: IO, formatter: logging.Formatter | None = None) -> None:
        super().__init__()

        self._io = io
        self.setFormatter(formatter or IOFormatter())

    def emit(self, record: LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return

        if record.levelno >= logging.WARNING:
            self._io.write_error_line(message)
        else:
            self._io.write_line(message)

"""Boundary to the operating system's terminal interface."""

from __future__ import annotations

import os
import termios
from collections.abc import Mapping

from sttyl.core.errors import TerminalCommitError, TerminalQueryError, UnknownSpeedError
from sttyl.core.state import AttributeSnapshot, Geometry
from sttyl.logging import get_logger

BAUD_RATES: dict[int, int] = {
    termios.B0: 0,
    termios.B50: 50,
    termios.B75: 75,
    termios.B110: 110,
    termios.B134: 134,
    termios.B150: 150,
    termios.B200: 200,
    termios.B300: 300,
    termios.B600: 600,
    termios.B1200: 1200,
    termios.B1800: 1800,
    termios.B2400: 2400,
    termios.B4800: 4800,
    termios.B9600: 9600,
    termios.B19200: 19200,
    termios.B38400: 38400,
}


def baud_rate(code: int, table: Mapping[int, int] = BAUD_RATES) -> int:
    """Translate a raw ``speed_t`` code into its baud rate."""

    try:
        return table[code]
    except KeyError:
        raise UnknownSpeedError(code) from None


def _strerror(exc: BaseException) -> str:
    if isinstance(exc, termios.error) and len(exc.args) >= 2:
        return str(exc.args[1])
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


class TerminalDevice:
    """Reads, writes and measures one terminal."""

    def __init__(self, fd: int = 0, geometry_fd: int = 1) -> None:
        self.fd = fd
        self.geometry_fd = geometry_fd
        self.logger = get_logger("terminal")

    def load(self) -> AttributeSnapshot:
        try:
            attrs = termios.tcgetattr(self.fd)
        except (termios.error, OSError) as exc:
            raise TerminalQueryError(
                f"cannot get tty info for fd {self.fd}: {_strerror(exc)}"
            ) from exc
        self.logger.debug("Loaded attributes from fd {}", self.fd)
        return AttributeSnapshot.from_termios(attrs)

    def commit(self, snapshot: AttributeSnapshot) -> None:
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, snapshot.as_termios())
        except (termios.error, OSError) as exc:
            raise TerminalCommitError(
                f"cannot set tty attributes: {_strerror(exc)}"
            ) from exc
        self.logger.info("Committed attributes to fd {}", self.fd)

    def window_size(self) -> Geometry:
        try:
            size = os.get_terminal_size(self.geometry_fd)
        except OSError as exc:
            raise TerminalQueryError("could not get window size") from exc
        return Geometry(rows=size.lines, cols=size.columns)

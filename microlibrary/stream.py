"""Output streams, the drivers that move their data, and value formatting."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Union

from microlibrary.assertion import expect
from microlibrary.error import ErrorCode, GenericError, MicrolibraryError, make_error_code

__all__ = [
    "StreamIODriver",
    "FaultReportingStreamIODriver",
    "StreamFault",
    "Stream",
    "OutputStream",
    "FaultReportingOutputStream",
    "Formatted",
    "default_formatter",
]

Formatter = Callable[[Any, Any], int]
BlockData = Union[bytes, bytearray, memoryview, Iterable[int]]


class StreamFault(MicrolibraryError):
    """Raised by a fault reporting driver when a transfer fails."""

    def __init__(self, error: Any) -> None:
        super().__init__(error)


class StreamIODriver(abc.ABC):
    """Driver that moves a stream's data; its operations cannot fail."""

    @abc.abstractmethod
    def put_char(self, character: str) -> None:
        """Write a single character."""

    def put_string(self, string: str) -> None:
        """Write a string, one character at a time."""
        for character in string:
            self.put_char(character)

    @abc.abstractmethod
    def put_data(self, data: int) -> None:
        """Write a single byte."""

    def put_block(self, data: BlockData) -> None:
        """Write a block of bytes, one byte at a time."""
        for value in bytes(data):
            self.put_data(value)

    @abc.abstractmethod
    def flush(self) -> None:
        """Write any buffered data."""


class FaultReportingStreamIODriver(abc.ABC):
    """Driver that moves a stream's data and raises :class:`StreamFault` on failure.

    The default string and block writes stop at the first fault.
    """

    @abc.abstractmethod
    def put_char(self, character: str) -> None:
        """Write a single character, raising :class:`StreamFault` on failure."""

    def put_string(self, string: str) -> None:
        """Write a string, one character at a time, stopping at the first fault."""
        for character in string:
            self.put_char(character)

    @abc.abstractmethod
    def put_data(self, data: int) -> None:
        """Write a single byte, raising :class:`StreamFault` on failure."""

    def put_block(self, data: BlockData) -> None:
        """Write a block of bytes, one byte at a time, stopping at the first fault."""
        for value in bytes(data):
            self.put_data(value)

    @abc.abstractmethod
    def flush(self) -> None:
        """Write any buffered data, raising :class:`StreamFault` on failure."""


class Stream:
    """State shared by all streams: the end-of-file, I/O error and fatal error reports."""

    def __init__(self) -> None:
        self.clear_error_reports()

    def is_nominal(self) -> bool:
        """Return True if no end-of-file, I/O error or fatal error has been reported."""
        return not (self._end_of_file or self._io_error or self._fatal_error)

    def end_of_file_reached(self) -> bool:
        """Return True if end-of-file has been reported."""
        return self._end_of_file

    def io_error_reported(self) -> bool:
        """Return True if an I/O error has been reported."""
        return self._io_error

    def fatal_error_reported(self) -> bool:
        """Return True if a fatal error has been reported."""
        return self._fatal_error

    def report_end_of_file(self) -> None:
        """Report that end-of-file has been reached."""
        self._end_of_file = True

    def report_io_error(self) -> None:
        """Report that an I/O error has occurred."""
        self._io_error = True

    def report_fatal_error(self) -> None:
        """Report that a fatal error has occurred."""
        self._fatal_error = True

    def clear_error_reports(self) -> None:
        """Clear all reports, returning the stream to the nominal state."""
        self._end_of_file = False
        self._io_error = False
        self._fatal_error = False


def _check_character(character: Any) -> str:
    if not isinstance(character, str):
        raise TypeError(f"character must be a str, not {type(character).__name__}")
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {len(character)} characters")
    return character


def _check_string(string: Any) -> str:
    if not isinstance(string, str):
        raise TypeError(f"string must be a str, not {type(string).__name__}")
    return string


def _check_byte(data: Any) -> int:
    if isinstance(data, bool) or not isinstance(data, int):
        raise TypeError(f"data must be an integer, not {type(data).__name__}")
    if not 0 <= data <= 0xFF:
        raise ValueError(f"data must fit in a byte, got {data}")
    return int(data)


@dataclass(frozen=True)
class Formatted:
    """A value to print together with the formatter to print it with.

    The formatter is called as ``formatter(stream, value)`` and returns the
    number of characters it wrote.
    """

    value: Any
    formatter: Formatter


def _format_text(stream: Any, text: str) -> int:
    if len(text) == 1:
        stream.put_char(text)
    else:
        stream.put_string(text)
    return len(text)


def _format_error(stream: Any, error: Any) -> int:
    code = make_error_code(error)
    return stream.print(code.category.name(), "::", code.description())


def _is_error(value: Any) -> bool:
    if isinstance(value, ErrorCode):
        return True
    try:
        make_error_code(value)
    except TypeError:
        return False
    return True


def default_formatter(value: Any) -> Formatter:
    """Return the formatter used for ``value`` when none is given.

    Strings are written as they are; error codes and registered error code
    enum members are written as ``<category name>::<description>``.
    """
    if isinstance(value, str):
        return _format_text
    if _is_error(value):
        return _format_error
    raise TypeError(f"no formatter for values of type {type(value).__name__}")


class _OutputStreamBase(Stream):
    """Writes through a driver once the stream is found nominal."""

    def __init__(self, driver: Any) -> None:
        super().__init__()
        self._driver = driver

    @property
    def driver(self) -> Any:
        """The stream's I/O driver."""
        return self._driver

    def _write(self, operation: Callable[[Any], None]) -> None:
        expect(self.is_nominal(), GenericError.IO_STREAM_DEGRADED)
        operation(self._driver)

    def _print(self, args: tuple) -> int:
        total = 0
        for arg in args:
            if isinstance(arg, Formatted):
                total += arg.formatter(self, arg.value)
            else:
                total += default_formatter(arg)(self, arg)
        return total


class OutputStream(_OutputStreamBase):
    """Output stream whose driver cannot fail."""

    def __init__(self, driver: StreamIODriver) -> None:
        super().__init__(driver)

    def put_char(self, character: str) -> None:
        """Write a single character."""
        self._write(lambda driver: driver.put_char(_check_character(character)))

    def put_string(self, string: str) -> None:
        """Write a string."""
        self._write(lambda driver: driver.put_string(_check_string(string)))

    def put_data(self, data: int) -> None:
        """Write a single byte."""
        self._write(lambda driver: driver.put_data(_check_byte(data)))

    def put_block(self, data: BlockData) -> None:
        """Write a block of bytes."""
        self._write(lambda driver: driver.put_block(bytes(data)))

    def flush(self) -> None:
        """Write any buffered data."""
        self._write(lambda driver: driver.flush())

    def print(self, *args: Any) -> int:
        """Format and write each value in turn; return the number of characters written.

        A value wrapped in :class:`Formatted` is written with its own
        formatter, any other with :func:`default_formatter`.
        """
        return self._print(args)


class FaultReportingOutputStream(_OutputStreamBase):
    """Output stream whose driver may fail.

    A driver fault reports a fatal error on the stream and is raised again
    as :class:`StreamFault`; printing stops at the first fault.
    """

    def __init__(self, driver: FaultReportingStreamIODriver) -> None:
        super().__init__(driver)

    def _write(self, operation: Callable[[Any], None]) -> None:
        expect(self.is_nominal(), GenericError.IO_STREAM_DEGRADED)
        try:
            operation(self._driver)
        except StreamFault:
            self.report_fatal_error()
            raise

    def put_char(self, character: str) -> None:
        """Write a single character; a driver fault is reported and raised."""
        self._write(lambda driver: driver.put_char(_check_character(character)))

    def put_string(self, string: str) -> None:
        """Write a string; a driver fault is reported and raised."""
        self._write(lambda driver: driver.put_string(_check_string(string)))

    def put_data(self, data: int) -> None:
        """Write a single byte; a driver fault is reported and raised."""
        self._write(lambda driver: driver.put_data(_check_byte(data)))

    def put_block(self, data: BlockData) -> None:
        """Write a block of bytes; a driver fault is reported and raised."""
        self._write(lambda driver: driver.put_block(bytes(data)))

    def flush(self) -> None:
        """Write any buffered data; a driver fault is reported and raised."""
        self._write(lambda driver: driver.flush())

    def print(self, *args: Any) -> int:
        """Format and write each value in turn; return the number of characters written.

        Printing stops at the first :class:`StreamFault`, which is raised.
        """
        return self._print(args)
# microlibrary

This package gives you building blocks for embedded-style code:

- error categories and error codes,
- precondition and postcondition checks,
- output streams that write characters and bytes through an I/O driver you supply.

## Installation

```
pip install microlibrary
```

## Error codes (`microlibrary.error`)

An `ErrorCode` pairs an `ErrorCategory` with a non-negative integer ID. A category provides a name through `name()`. It also describes each ID through `error_description(error_id)`. Two error codes are equal only when they have the same ID and refer to the very same category object.

```python
from microlibrary.error import ErrorCode, GenericError, make_error_code

error = make_error_code(GenericError.OUT_OF_RANGE)
print(error)                # ::microlibrary::Generic_Error::OUT_OF_RANGE
print(error.description())  # OUT_OF_RANGE
print(error == GenericError.OUT_OF_RANGE)  # True

default = ErrorCode()
print(default)              # ::microlibrary::Default_Error::UNKNOWN
```

The constructor takes three forms:

- `ErrorCode()` gives the default error: ID 0 of `DEFAULT_ERROR_CATEGORY`.
- `ErrorCode(category, error_id)` names an error explicitly.
- `ErrorCode(member)` converts a registered enum member.

`GenericError` has these members:

- `INVALID_ARGUMENT`
- `LOGIC_ERROR`
- `OUT_OF_RANGE`
- `RUNTIME_ERROR`
- `IO_STREAM_DEGRADED`

It is already registered with `GENERIC_ERROR_CATEGORY`. For that category, an ID outside the enum is described as `UNKNOWN`.

Your own enums can become error codes too. Register them with `register_error_code_enum(enum_type, category)`, then convert members with `make_error_code`.

`MicrolibraryError` is an exception that carries an `ErrorCode` in its `error` attribute.

## Assertions (`microlibrary.assertion`)

Two functions check conditions:

- `expect(condition, error)` checks a precondition.
- `ensure(condition, error)` checks a postcondition.

When the condition is false, `handle_assertion_failure` raises `AssertionFailure`, a `MicrolibraryError`. Its `file` and `line` attributes record the caller's file and line. Its message has the form `file:line: <error>`.

## Output streams (`microlibrary.stream`)

The module offers two kinds of output stream:

- An `OutputStream` writes through a `StreamIODriver`, whose operations cannot fail.
- A `FaultReportingOutputStream` writes through a `FaultReportingStreamIODriver`, which raises `StreamFault` when a transfer fails.

A driver must implement `put_char`, `put_data` and `flush`. It inherits `put_string` and `put_block`, which write one item at a time. In a fault-reporting driver, they stop at the first fault.

Every stream tracks three reports:

- end of file (`report_end_of_file`, `end_of_file_reached`),
- I/O error (`report_io_error`, `io_error_reported`),
- fatal error (`report_fatal_error`, `fatal_error_reported`).

`is_nominal()` is true while none of them has been reported. `clear_error_reports()` resets all three.

Each write first checks that the stream is nominal. If it is not, the write raises `AssertionFailure` with `GenericError.IO_STREAM_DEGRADED`.

A `FaultReportingOutputStream` handles a driver's `StreamFault` in two steps:

1. It reports a fatal error on the stream.
2. It raises the fault again.

```python
from microlibrary.stream import OutputStream, StreamIODriver

class ListDriver(StreamIODriver):
    def __init__(self):
        self.written = []

    def put_char(self, character):
        self.written.append(character)

    def put_data(self, data):
        self.written.append(chr(data))

    def flush(self):
        pass

driver = ListDriver()
stream = OutputStream(driver)
count = stream.print("value: ", "x")
print("".join(driver.written), count)  # value: x 8
```

`print(*args)` writes each value in turn and returns the total number of characters written. What it writes depends on the value:

- A string is written as it is.
- An error code, or a registered enum member, is written as `<category name>::<description>`.
- A value wrapped in `Formatted(value, formatter)` is written by calling `formatter(stream, value)`. That call must return the number of characters it wrote.

`default_formatter(value)` returns the built-in formatter for a value. It raises `TypeError` when no built-in formatter fits.

## What is not included

The package ships no concrete I/O drivers: nothing writes to a serial port, a file or a string buffer out of the box. You provide the driver, as in the example above. There are no input streams and no command-line tool.
"""Error identification: error categories, error codes and the generic errors."""

from __future__ import annotations

import enum
from typing import Any, Dict, Optional, Type

__all__ = [
    "ErrorCategory",
    "DefaultErrorCategory",
    "GenericError",
    "GenericErrorCategory",
    "ErrorCode",
    "register_error_code_enum",
    "make_error_code",
    "MicrolibraryError",
    "DEFAULT_ERROR_CATEGORY",
    "GENERIC_ERROR_CATEGORY",
]

_UNKNOWN = "UNKNOWN"


class ErrorCategory:
    """A family of errors that names itself and describes its error IDs.

    Categories are compared by identity: two error codes are equal only when
    they refer to the very same category object.
    """

    def name(self) -> str:
        """Return the category's name."""
        return ""

    def error_description(self, error_id: int) -> str:
        """Return the description of the error identified by ``error_id``."""
        return ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name()!r}>"


class DefaultErrorCategory(ErrorCategory):
    """Category of a default constructed error code."""

    def name(self) -> str:
        return "::microlibrary::Default_Error"

    def error_description(self, error_id: int) -> str:
        return _UNKNOWN


class GenericError(enum.IntEnum):
    """Errors that are not specific to any one facility."""

    INVALID_ARGUMENT = 1
    LOGIC_ERROR = 2
    OUT_OF_RANGE = 3
    RUNTIME_ERROR = 4
    IO_STREAM_DEGRADED = 5


class GenericErrorCategory(ErrorCategory):
    """Category of the generic errors."""

    def name(self) -> str:
        return "::microlibrary::Generic_Error"

    def error_description(self, error_id: int) -> str:
        try:
            return GenericError(error_id).name
        except ValueError:
            return _UNKNOWN


DEFAULT_ERROR_CATEGORY = DefaultErrorCategory()
GENERIC_ERROR_CATEGORY = GenericErrorCategory()

_ERROR_CODE_ENUMS: Dict[type, ErrorCategory] = {}


def register_error_code_enum(enum_type: Type[enum.Enum], category: ErrorCategory) -> Type[enum.Enum]:
    """Register an enum whose members convert to error codes of ``category``."""
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise TypeError(f"{enum_type!r} is not an enum type")
    if not isinstance(category, ErrorCategory):
        raise TypeError(f"{category!r} is not an error category")
    _ERROR_CODE_ENUMS[enum_type] = category
    return enum_type


def make_error_code(error: Any) -> "ErrorCode":
    """Convert a registered error code enum member (or an error code) to an error code."""
    if isinstance(error, ErrorCode):
        return error
    category = _ERROR_CODE_ENUMS.get(type(error))
    if category is None:
        raise TypeError(f"{error!r} is not a registered error code enum member")
    return ErrorCode(category, int(error.value))


def _validate_id(error_id: Any) -> int:
    if isinstance(error_id, bool) or not isinstance(error_id, int):
        raise TypeError(f"error ID must be an integer, not {type(error_id).__name__}")
    if error_id < 0:
        raise ValueError(f"error ID must not be negative, got {error_id}")
    return int(error_id)


class ErrorCode:
    """An error: the category it belongs to and its ID within that category.

    ``ErrorCode()`` is the default error (ID 0 of the default category);
    ``ErrorCode(category, error_id)`` names an error explicitly and
    ``ErrorCode(member)`` converts a registered error code enum member.
    """

    __slots__ = ("_category", "_id")

    def __init__(self, category: Any = None, error_id: Optional[int] = None) -> None:
        if category is None:
            self._category: ErrorCategory = DEFAULT_ERROR_CATEGORY
            self._id = 0 if error_id is None else _validate_id(error_id)
        elif isinstance(category, ErrorCategory):
            self._category = category
            self._id = 0 if error_id is None else _validate_id(error_id)
        else:
            if error_id is not None:
                raise TypeError("an error ID may only accompany an error category")
            code = make_error_code(category)
            self._category = code._category
            self._id = code._id

    @property
    def category(self) -> ErrorCategory:
        """The category the error belongs to."""
        return self._category

    @property
    def id(self) -> int:
        """The error's ID within its category."""
        return self._id

    def description(self) -> str:
        """Return the error's description as given by its category."""
        return self._category.error_description(self._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            if type(other) in _ERROR_CODE_ENUMS:
                other = make_error_code(other)
            else:
                return NotImplemented
        return self._category is other._category and self._id == other._id

    def __hash__(self) -> int:
        return hash((id(self._category), self._id))

    def __str__(self) -> str:
        return f"{self._category.name()}::{self.description()}"

    def __repr__(self) -> str:
        return f"ErrorCode({self._category!r}, {self._id})"


register_error_code_enum(GenericError, GENERIC_ERROR_CATEGORY)


class MicrolibraryError(Exception):
    """Exception that carries an error code."""

    def __init__(self, error: Any) -> None:
        self.error = make_error_code(error)
        super().__init__(str(self.error))
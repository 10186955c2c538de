import enum

import pytest

from microlibrary.error import (
    DEFAULT_ERROR_CATEGORY,
    GENERIC_ERROR_CATEGORY,
    DefaultErrorCategory,
    ErrorCategory,
    ErrorCode,
    GenericError,
    GenericErrorCategory,
    MicrolibraryError,
    make_error_code,
    register_error_code_enum,
)


class TableCategory(ErrorCategory):
    def __init__(self, category_name="mock", descriptions=None):
        self._name = category_name
        self._descriptions = dict(descriptions or {})
        self.requested = []

    def name(self):
        return self._name

    def error_description(self, error_id):
        self.requested.append(error_id)
        return self._descriptions.get(error_id, "UNKNOWN")


MOCK_CATEGORY = TableCategory("mock", {49: "qMiNrCStx5Ch"})


class MockError(enum.IntEnum):
    E49 = 49
    E63 = 63


register_error_code_enum(MockError, MOCK_CATEGORY)


class Unregistered(enum.Enum):
    X = 1


def test_default_constructor():
    error = ErrorCode()
    assert error.category is DEFAULT_ERROR_CATEGORY
    assert error.category.name() == "::microlibrary::Default_Error"
    assert error.id == 0
    assert error.description() == "UNKNOWN"


def test_default_category_describes_everything_as_unknown():
    assert DefaultErrorCategory().error_description(17) == "UNKNOWN"


def test_constructor_category_id():
    category = TableCategory(descriptions={195: "aGE931YlH5YAdR"})
    error = ErrorCode(category, 195)
    assert error.category is category
    assert error.id == 195
    assert error.description() == "aGE931YlH5YAdR"
    assert category.requested == [195]


def test_constructor_error_code_enum():
    error = ErrorCode(MockError.E49)
    assert error.category is MOCK_CATEGORY
    assert error.id == 49
    assert error.description() == "qMiNrCStx5Ch"


@pytest.mark.parametrize(
    "same_category, lhs_id, rhs_id, equal",
    [
        (True, 204, 204, True),
        (True, 204, 200, False),
        (False, 204, 204, False),
        (False, 204, 200, False),
    ],
)
def test_equality_and_inequality(same_category, lhs_id, rhs_id, equal):
    lhs_category = TableCategory()
    rhs_category = lhs_category if same_category else TableCategory()
    lhs = ErrorCode(lhs_category, lhs_id)
    rhs = ErrorCode(rhs_category, rhs_id)
    assert (lhs == rhs) is equal
    assert (lhs != rhs) is (not equal)


def test_equal_codes_hash_equal():
    category = TableCategory()
    assert hash(ErrorCode(category, 7)) == hash(ErrorCode(category, 7))
    assert len({ErrorCode(category, 7), ErrorCode(category, 7)}) == 1


def test_error_code_compares_with_enum_member():
    assert ErrorCode(MOCK_CATEGORY, 63) == MockError.E63
    assert MockError.E63 == ErrorCode(MOCK_CATEGORY, 63)
    assert ErrorCode(MOCK_CATEGORY, 49) != MockError.E63


def test_make_error_code_generic_error():
    error = make_error_code(GenericError.OUT_OF_RANGE)
    assert error.category is GENERIC_ERROR_CATEGORY
    assert error.id == GenericError.OUT_OF_RANGE.value


def test_error_code_from_generic_error():
    error = ErrorCode(GenericError.RUNTIME_ERROR)
    assert error == ErrorCode(GENERIC_ERROR_CATEGORY, int(GenericError.RUNTIME_ERROR))


def test_make_error_code_passes_error_code_through():
    code = ErrorCode(MOCK_CATEGORY, 3)
    assert make_error_code(code) is code


def test_make_error_code_rejects_unregistered():
    with pytest.raises(TypeError):
        make_error_code(Unregistered.X)


def test_register_rejects_non_enum():
    with pytest.raises(TypeError):
        register_error_code_enum(int, MOCK_CATEGORY)


def test_id_must_be_integer():
    with pytest.raises(TypeError):
        ErrorCode(MOCK_CATEGORY, "3")
    with pytest.raises(ValueError):
        ErrorCode(MOCK_CATEGORY, -1)


def test_generic_category_name():
    assert GenericErrorCategory().name() == "::microlibrary::Generic_Error"
    assert GENERIC_ERROR_CATEGORY.name() == "::microlibrary::Generic_Error"


@pytest.mark.parametrize(
    "error_id, description",
    [
        (int(GenericError.INVALID_ARGUMENT), "INVALID_ARGUMENT"),
        (int(GenericError.LOGIC_ERROR), "LOGIC_ERROR"),
        (int(GenericError.OUT_OF_RANGE), "OUT_OF_RANGE"),
        (int(GenericError.RUNTIME_ERROR), "RUNTIME_ERROR"),
        (int(GenericError.IO_STREAM_DEGRADED), "IO_STREAM_DEGRADED"),
        (int(GenericError.IO_STREAM_DEGRADED) + 1, "UNKNOWN"),
    ],
)
def test_generic_error_description(error_id, description):
    assert GENERIC_ERROR_CATEGORY.error_description(error_id) == description


def test_str_joins_name_and_description():
    category = TableCategory("CjPf5bhQgbshej", {120: "4snpgrnA4"})
    assert str(ErrorCode(category, 120)) == "CjPf5bhQgbshej::4snpgrnA4"


def test_microlibrary_error_carries_code():
    exc = MicrolibraryError(GenericError.LOGIC_ERROR)
    assert exc.error == ErrorCode(GenericError.LOGIC_ERROR)
    assert str(exc) == "::microlibrary::Generic_Error::LOGIC_ERROR"
import pytest

from xlwgen.cells import CellMatrix, XlwError
from xlwgen.double_or_nothing import DoubleOrNothing


def _single(value):
    cells = CellMatrix(1, 1)
    cells[0, 0] = value
    return cells


def test_empty_cell_gives_default():
    result = DoubleOrNothing(CellMatrix(1, 1), "x")
    assert result.is_empty is True
    assert result.value_or_default(2.5) == 2.5
    assert result.value == 0.0


def test_number_cell_gives_number():
    result = DoubleOrNothing(_single(3.0), "x")
    assert result.is_empty is False
    assert result.value_or_default(7.0) == 3.0


def test_more_than_one_cell_rejected():
    with pytest.raises(XlwError, match="Multiple values"):
        DoubleOrNothing(CellMatrix(2, 1), "x")


def test_zero_cells_rejected():
    with pytest.raises(XlwError, match="Multiple values"):
        DoubleOrNothing(CellMatrix(0, 0), "x")


def test_string_cell_rejected_with_identifier():
    with pytest.raises(XlwError, match="myarg"):
        DoubleOrNothing(_single("text"), "myarg")


def test_boolean_cell_rejected():
    with pytest.raises(XlwError, match="double or nothing"):
        DoubleOrNothing(_single(True), "x")
"""Cells and rectangular matrices of cells as passed to and from Excel."""

from __future__ import annotations

import enum
from typing import Union


class XlwError(Exception):
    """Raised when cell data is used in a way it does not support."""


class CellType(enum.Enum):
    """Kinds of value a cell can hold."""

    EMPTY = "empty"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ERROR = "error"


CellInput = Union["CellValue", str, float, int, bool, None]


class CellValue:
    """A single cell: empty, a number, a string, a boolean or an error code."""

    __slots__ = ("_type", "_value")

    def __init__(self, value: CellInput = None) -> None:
        if isinstance(value, CellValue):
            self._type, self._value = value._type, value._value
        elif value is None:
            self._type, self._value = CellType.EMPTY, None
        elif isinstance(value, bool):
            self._type, self._value = CellType.BOOLEAN, value
        elif isinstance(value, (int, float)):
            self._type, self._value = CellType.NUMBER, float(value)
        elif isinstance(value, str):
            self._type, self._value = CellType.STRING, value
        else:
            raise TypeError(f"unsupported cell value: {value!r}")

    @classmethod
    def error(cls, code: int) -> CellValue:
        """A cell holding an error code."""
        cell = cls()
        cell._type = CellType.ERROR
        cell._value = int(code)
        return cell

    @property
    def type(self) -> CellType:
        return self._type

    @property
    def is_string(self) -> bool:
        return self._type is CellType.STRING

    @property
    def is_number(self) -> bool:
        return self._type is CellType.NUMBER

    @property
    def is_boolean(self) -> bool:
        return self._type is CellType.BOOLEAN

    @property
    def is_error(self) -> bool:
        return self._type is CellType.ERROR

    @property
    def is_empty(self) -> bool:
        return self._type is CellType.EMPTY

    def string_value(self) -> str:
        if self._type is not CellType.STRING:
            raise XlwError("non string cell asked to be a string")
        return self._value

    def numeric_value(self) -> float:
        if self._type is not CellType.NUMBER:
            raise XlwError("non number cell asked to be a number")
        return self._value

    def boolean_value(self) -> bool:
        if self._type is not CellType.BOOLEAN:
            raise XlwError("non boolean cell asked to be a bool")
        return self._value

    def error_value(self) -> int:
        if self._type is not CellType.ERROR:
            raise XlwError("non error cell asked to be an error")
        return self._value

    def clear(self) -> None:
        """Make the cell empty."""
        self._type, self._value = CellType.EMPTY, None

    def __float__(self) -> float:
        return self.numeric_value()

    def __int__(self) -> int:
        return int(self.numeric_value())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellValue):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    def __repr__(self) -> str:
        if self._type is CellType.EMPTY:
            return "CellValue()"
        if self._type is CellType.ERROR:
            return f"CellValue.error({self._value})"
        return f"CellValue({self._value!r})"


class CellMatrix:
    """A rectangular grid of cells, all empty when created."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self._columns = columns
        self._cells = [[CellValue() for _ in range(columns)] for _ in range(rows)]

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def columns(self) -> int:
        return self._columns

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        row, column = key
        if not (0 <= row < self.rows and 0 <= column < self._columns):
            raise IndexError(f"cell ({row}, {column}) out of range")
        return row, column

    def __getitem__(self, key: tuple[int, int]) -> CellValue:
        row, column = self._check(key)
        return self._cells[row][column]

    def __setitem__(self, key: tuple[int, int], value: CellInput) -> None:
        row, column = self._check(key)
        self._cells[row][column] = CellValue(value)

    def push_bottom(self, other: CellMatrix) -> None:
        """Append copies of another matrix's rows, widening to the wider of the two."""
        added = [list(row) for row in other._cells]
        columns = max(self._columns, other._columns)
        for row in self._cells:
            row.extend(CellValue() for _ in range(columns - len(row)))
        for row in added:
            copied = [CellValue(cell) for cell in row]
            copied.extend(CellValue() for _ in range(columns - len(copied)))
            self._cells.append(copied)
        self._columns = columns

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellMatrix):
            return NotImplemented
        return self._columns == other._columns and self._cells == other._cells

    def __repr__(self) -> str:
        return f"CellMatrix({self.rows}, {self._columns})"
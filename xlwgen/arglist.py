"""Named arguments laid out in a block of cells, and back again."""

from __future__ import annotations

import enum
from typing import Any, Union

from xlwgen.cells import CellMatrix, XlwError

_BLOCK_KINDS = frozenset({"list", "matrix", "cells"})
_ARRAY_KINDS = frozenset({"array", "vector"})


class ArgumentType(enum.Enum):
    """Kinds of argument an argument list can hold."""

    STRING = "string"
    NUMBER = "number"
    VECTOR = "vector"
    MATRIX = "matrix"
    BOOLEAN = "boolean"
    LIST = "list"
    CELLS = "cells"


def _copy_matrix(matrix: CellMatrix) -> CellMatrix:
    copy = CellMatrix(matrix.rows, matrix.columns)
    for i in range(matrix.rows):
        for j in range(matrix.columns):
            copy[i, j] = matrix[i, j]
    return copy


def _extract_cells(
    cells: CellMatrix, row: int, column: int, error_id: str, name: str
) -> tuple[CellMatrix, bool]:
    """Cut out a block whose size is given at (row, column) and (row, column + 1).

    Returns the block and whether it holds anything other than numbers; the
    cells taken are cleared.
    """
    expected = f"{error_id} {name} rows and columns expected."
    if row >= cells.rows or not cells[row, column].is_number:
        raise XlwError(expected)
    if cells.columns <= column + 1:
        raise XlwError(expected)
    if not cells[row, column + 1].is_number:
        raise XlwError(expected)

    number_rows = int(cells[row, column])
    number_columns = int(cells[row, column + 1])
    cells[row, column].clear()
    cells[row, column + 1].clear()

    if number_rows < 0 or number_rows + row + 1 > cells.rows:
        raise XlwError(f"{error_id} {name} insufficient rows in structure")
    if number_columns < 0 or number_columns + column > cells.columns:
        raise XlwError(f"{error_id} {name} insufficient columns in structure")

    result = CellMatrix(number_rows, number_columns)
    non_numeric = False
    for i in range(number_rows):
        for j in range(number_columns):
            source = cells[row + 1 + i, column + j]
            result[i, j] = source
            source.clear()
            if not result[i, j].is_number:
                non_numeric = True
    return result, non_numeric


ArgumentValue = Union[str, float, int, bool, CellMatrix, "ArgumentList"]


class ArgumentList:
    """A named structure of named arguments of several kinds.

    Names read from cells are lower-cased, and lookups lower-case the name asked for.
    """

    def __init__(self, name: str = "") -> None:
        self.structure_name = name
        self._values: dict[ArgumentType, dict[str, Any]] = {kind: {} for kind in ArgumentType}
        self._names: list[tuple[str, ArgumentType]] = []
        self._types: dict[str, ArgumentType] = {}
        self._used: dict[str, bool] = {}

    @property
    def argument_names_and_types(self) -> list[tuple[str, ArgumentType]]:
        """Names and kinds of the arguments, in the order they were added."""
        return list(self._names)

    def _fail_at(self, message: str, row: int, column: int) -> XlwError:
        return XlwError(f"{self.structure_name} {message} row:{row}; column:{column}")

    @classmethod
    def from_cells(cls, cells: CellMatrix, error_id: str) -> ArgumentList:
        """Read an argument list laid out in cells; the given matrix is left untouched."""
        cells = _copy_matrix(cells)
        rows = cells.rows
        columns = cells.columns

        if rows == 0:
            raise XlwError(f"Argument List requires non empty cell matix {error_id}")
        if not cells[0, 0].is_string:
            raise XlwError(
                f"a structure name must be specified for argument list class {error_id}"
            )

        result = cls(cells[0, 0].string_value().lower())
        cells[0, 0].clear()

        for j in range(1, columns):
            if not cells[0, j].is_empty:
                raise XlwError(
                    "An argument list should only have the structure name on the first line: "
                    f"{result.structure_name} {error_id}"
                )

        error_id += " " + result.structure_name

        for i in range(1, rows):
            for j in range(columns):
                if cells[i, j].is_error:
                    raise result._fail_at("Error Cell passed in ", i, j)

        row = 1
        while row < rows:
            rows_down = 1
            column = 0
            while column < columns:
                if cells[row, column].is_empty:
                    for j in range(column, columns):
                        if not cells[row, j].is_empty:
                            raise result._fail_at("data or value where unexpected.", row, j)
                    column = columns
                    continue

                if not cells[row, column].is_string:
                    raise result._fail_at("data  where name expected.", row, column)
                name = cells[row, column].string_value().lower()
                if not name:
                    raise result._fail_at("empty name not permissible.", row, column)
                if rows == row + 1:
                    raise result._fail_at("No space where data expected below name", row, column)
                cells[row, column].clear()

                below = cells[row + 1, column]
                if below.is_empty:
                    raise result._fail_at("Data expected below name", row, column)

                if below.is_number:
                    result.add(name, below.numeric_value())
                    column += 1
                    below.clear()
                elif below.is_boolean:
                    result.add(name, below.boolean_value())
                    column += 1
                    below.clear()
                else:
                    kind = below.string_value().lower()
                    if kind in _BLOCK_KINDS:
                        extracted, non_numeric = _extract_cells(
                            cells, row + 2, column, error_id, name
                        )
                        if kind == "list":
                            cls.from_cells(extracted, f"{error_id}:{name}")
                            result.add_list(name, extracted)
                        elif kind == "cells":
                            result.add(name, extracted)
                        else:
                            if non_numeric:
                                raise XlwError(
                                    f"Non numerical value in matrix argument :{name} {error_id}"
                                )
                            result.add_matrix(name, extracted)
                        below.clear()
                        rows_down = max(rows_down, extracted.rows + 2)
                        column += extracted.columns
                    elif kind in _ARRAY_KINDS:
                        below.clear()
                        if row + 2 >= rows:
                            raise XlwError(f"{error_id} data expected below array {name}")
                        size = int(cells[row + 2, column])
                        cells[row + 2, column].clear()
                        if size < 0 or row + 2 + size >= rows:
                            raise XlwError(f"{error_id} more data expected below array {name}")
                        array = CellMatrix(size, 1)
                        for i in range(size):
                            value = cells[row + 3 + i, column]
                            if not value.is_number:
                                raise XlwError(
                                    f"Non numerical value in array argument :{name} {error_id}"
                                )
                            array[i, 0] = value
                            value.clear()
                        result.add_array(name, array)
                        rows_down = max(rows_down, size + 2)
                        column += 1
                    else:
                        result.add(name, kind)
                        column += 1
                        below.clear()
            row += rows_down + 1

        for i in range(rows):
            for j in range(columns):
                if not cells[i, j].is_empty:
                    raise result._fail_at(f"extraneous data {error_id}", i, j)
        return result

    def _register_name(self, name: str, kind: ArgumentType) -> None:
        if name in self._types:
            raise XlwError(f"Same argument name used twice {name}")
        self._names.append((name, kind))
        self._types[name] = kind
        self._used.setdefault(name, False)

    def _add(self, name: str, value: Any, kind: ArgumentType) -> None:
        self._register_name(name, kind)
        self._values[kind].setdefault(name, value)

    def add(self, name: str, value: ArgumentValue) -> None:
        """Add a string, number, boolean, block of cells or nested argument list."""
        if isinstance(value, bool):
            self._add(name, value, ArgumentType.BOOLEAN)
        elif isinstance(value, (int, float)):
            self._add(name, float(value), ArgumentType.NUMBER)
        elif isinstance(value, str):
            self._add(name, value, ArgumentType.STRING)
        elif isinstance(value, CellMatrix):
            self._add(name, _copy_matrix(value), ArgumentType.CELLS)
        elif isinstance(value, ArgumentList):
            self._add(name, value.all_data(), ArgumentType.LIST)
        else:
            raise TypeError(f"unsupported argument value: {value!r}")

    def add_list(self, name: str, values: CellMatrix) -> None:
        """Add a nested argument list given in its cell layout."""
        self._add(name, _copy_matrix(values), ArgumentType.LIST)

    def add_array(self, name: str, values: CellMatrix) -> None:
        """Add a column of numbers."""
        self._add(name, _copy_matrix(values), ArgumentType.VECTOR)

    def add_matrix(self, name: str, values: CellMatrix) -> None:
        """Add a matrix of numbers."""
        self._add(name, _copy_matrix(values), ArgumentType.MATRIX)

    def _get(self, name: str, kind: ArgumentType) -> Any:
        name = name.lower()
        values = self._values[kind]
        if name not in values:
            raise XlwError(f"{self.structure_name} unknown string argument asked for :{name}")
        if name in self._used:
            self._used[name] = True
        return values[name]

    def get_string(self, name: str) -> str:
        return self._get(name, ArgumentType.STRING)

    def get_ul(self, name: str) -> int:
        """A number argument truncated to a whole number."""
        return int(self._get(name, ArgumentType.NUMBER))

    def get_double(self, name: str) -> float:
        return self._get(name, ArgumentType.NUMBER)

    def get_bool(self, name: str) -> bool:
        return self._get(name, ArgumentType.BOOLEAN)

    def get_array(self, name: str) -> CellMatrix:
        return _copy_matrix(self._get(name, ArgumentType.VECTOR))

    def get_matrix(self, name: str) -> CellMatrix:
        return _copy_matrix(self._get(name, ArgumentType.MATRIX))

    def get_argument_list(self, name: str) -> ArgumentList:
        return ArgumentList.from_cells(self._get(name, ArgumentType.LIST), name)

    def get_cells(self, name: str) -> CellMatrix:
        return _copy_matrix(self._get(name, ArgumentType.CELLS))

    def is_present(self, name: str) -> bool:
        return name.lower() in self._types

    def check_all_used(self, error_id: str) -> None:
        """Raise if any argument has not been asked for."""
        unused = "".join(f"{name}, " for name in sorted(self._used) if not self._used[name])
        if unused:
            raise XlwError(f"Unused arguments in {error_id} {self.structure_name} {unused}")

    @staticmethod
    def _block(name: str, kind: str, matrix: CellMatrix) -> CellMatrix:
        block = CellMatrix(3 + matrix.rows, max(2, matrix.columns))
        block[0, 0] = name
        block[1, 0] = kind
        block[2, 0] = float(matrix.rows)
        block[2, 1] = float(matrix.columns)
        for i in range(matrix.rows):
            for j in range(matrix.columns):
                block[i + 3, j] = matrix[i, j]
        return block

    @staticmethod
    def _pair(name: str, value: Any) -> CellMatrix:
        block = CellMatrix(2, 1)
        block[0, 0] = name
        block[1, 0] = value
        return block

    def all_data(self) -> CellMatrix:
        """Lay the arguments out in cells, in the form ``from_cells`` reads."""
        result = CellMatrix(1, 1)
        result[0, 0] = self.structure_name

        for name, value in sorted(self._values[ArgumentType.NUMBER].items()):
            result.push_bottom(self._pair(name, value))

        for name, array in sorted(self._values[ArgumentType.VECTOR].items()):
            block = CellMatrix(3 + array.rows, 1)
            block[0, 0] = name
            block[1, 0] = "array"
            block[2, 0] = float(array.rows)
            for i in range(array.rows):
                block[i + 3, 0] = array[i, 0]
            result.push_bottom(block)

        for name, matrix in sorted(self._values[ArgumentType.MATRIX].items()):
            result.push_bottom(self._block(name, "matrix", matrix))

        for name, value in sorted(self._values[ArgumentType.STRING].items()):
            result.push_bottom(self._pair(name, value))

        for name, value in sorted(self._values[ArgumentType.BOOLEAN].items()):
            result.push_bottom(self._pair(name, value))

        for name, matrix in sorted(self._values[ArgumentType.CELLS].items()):
            result.push_bottom(self._block(name, "cells", matrix))

        for name, matrix in sorted(self._values[ArgumentType.LIST].items()):
            result.push_bottom(self._block(name, "list", matrix))

        return result
"""An optional number read from a single cell."""

from __future__ import annotations

from xlwgen.cells import CellMatrix, XlwError


class DoubleOrNothing:
    """A single cell that holds either a number or nothing at all."""

    def __init__(self, cells: CellMatrix, identifier: str = "") -> None:
        if cells.columns != 1 or cells.rows != 1:
            raise XlwError(
                f"Multiple values given where one expected for DoubleOrNothing {identifier}"
            )
        cell = cells[0, 0]
        if not cell.is_empty and not cell.is_number:
            raise XlwError(f"expected a double or nothing, got something else {identifier}")
        self._empty = cell.is_empty
        self._value = 0.0 if self._empty else cell.numeric_value()

    @property
    def is_empty(self) -> bool:
        return self._empty

    @property
    def value(self) -> float:
        """The number held, or 0.0 when the cell is empty."""
        return self._value

    def value_or_default(self, default: float) -> float:
        """The number held, or ``default`` when the cell is empty."""
        return default if self._empty else self._value
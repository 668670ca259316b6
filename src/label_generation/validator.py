"""
Column and row validation for label batches.
Checks column-length consistency and required-field presence.
"""

from src.label_generation.errors import (
    ColumnLengthMismatchError,
    EmptyInputError,
    MissingFieldError,
)
from src.label_generation.label_row import ColumnSet, LabelRow
from src.logger import get_logger

logger = get_logger(__name__)


class ColumnValidator:
    """Validates column sets before any label is composed."""

    def validate_columns(self, columns: ColumnSet) -> int:
        """
        Validate column lengths against the box id column.

        Args:
            columns: Column set from the request

        Returns:
            Row count

        Raises:
            EmptyInputError: If the box id column is empty
            ColumnLengthMismatchError: First required column whose length differs
                from the row count, or first optional column that is neither
                empty nor full length
        """
        row_count = columns.row_count
        if row_count == 0:
            raise EmptyInputError()

        for name, col in columns.required_columns():
            if len(col) != row_count:
                raise ColumnLengthMismatchError(name, row_count, len(col), required=True)

        for name, col in columns.optional_columns():
            if len(col) not in (0, row_count):
                raise ColumnLengthMismatchError(name, row_count, len(col), required=False)

        logger.debug("Columns validated", extra={"row_count": row_count})

        return row_count

    def validate_row(self, row: LabelRow, index: int) -> None:
        """
        Check required fields of one row.

        Args:
            row: Row to check
            index: 0-based row index

        Raises:
            MissingFieldError: If box id, P/N, QTY or MPN is blank after trimming
        """
        missing = row.missing_required()
        if missing:
            raise MissingFieldError(index + 1, missing)

"""
Errors raised while validating and composing labels.
"""


class LabelError(Exception):
    """Base error for label rendering."""

    error_code = "LABEL_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(LabelError):
    """Column or row input failed validation."""

    error_code = "INVALID_REQUEST"


class EmptyInputError(ValidationError):
    """No rows were supplied (box id column is empty)."""

    error_code = "EMPTY_INPUT"

    def __init__(self, message: str = "At least one BOX ID is required"):
        super().__init__(message)


class ColumnLengthMismatchError(ValidationError):
    """A column's length disagrees with the box id column."""

    error_code = "COLUMN_LENGTH_MISMATCH"

    def __init__(self, column: str, expected: int, actual: int, required: bool = True):
        self.column = column
        if required:
            message = f"Required column row count must match BOX ID: {column}"
        else:
            message = f"Optional column, if filled, must match BOX ID row count: {column}"
        super().__init__(message, details={
            "column": column,
            "expected_rows": expected,
            "actual_rows": actual,
            "required": required
        })


class MissingFieldError(ValidationError):
    """A required field is blank in a specific row."""

    error_code = "MISSING_FIELD"

    def __init__(self, row: int, fields: list[str]):
        self.row = row
        self.fields = fields
        super().__init__(
            f"Row {row} is missing required fields: {', '.join(fields)}",
            details={"row": row, "fields": fields}
        )


class CompositionError(LabelError):
    """An encoder or the rasterizer rejected a row."""

    error_code = "COMPOSITION_FAILED"

    def __init__(self, row: int, message: str):
        self.row = row
        super().__init__(f"Row {row}: {message}", details={"row": row})

"""
Tests for the label row model and column validation.
"""

import pytest

from src.label_generation.errors import (
    ColumnLengthMismatchError,
    EmptyInputError,
    MissingFieldError,
    ValidationError,
)
from src.label_generation.label_row import (
    ColumnSet,
    LabelFields,
    LabelRow,
    SUMMARY_SEPARATOR,
    derive_vendor_code,
    label_filename,
)
from src.label_generation.validator import ColumnValidator


def _columns(rows: int, **lengths) -> ColumnSet:
    """Column set with `rows` box ids; other column lengths overridable."""
    def col(name, default):
        return [f"{name}{i}" for i in range(lengths.get(name, default))]

    return ColumnSet(
        box_ids=col("box", rows),
        part_numbers=col("pn", rows),
        quantities=col("qty", rows),
        mpns=col("mpn", rows),
        makers=col("maker", 0),
        four_ls=col("four_l", 0),
        descriptions=col("desc", 0),
    )


class TestVendorCode:
    """Tests for VD derivation."""

    def test_first_six_digits(self):
        assert derive_vendor_code("LOT123456-A") == "123456"

    def test_digits_scattered(self):
        assert derive_vendor_code("A1B2C3D4E5F6G7") == "123456"

    def test_no_digits_uses_raw_prefix(self):
        assert derive_vendor_code("ABCDEFGH") == "ABCDEF"

    def test_fewer_than_six_digits_uses_raw_prefix(self):
        assert derive_vendor_code("AB12") == "AB12"

    def test_empty(self):
        assert derive_vendor_code("") == ""

    def test_override_wins(self):
        row = LabelRow(box_id="LOT123456-A", part_number="P", quantity="1", mpn="M")

        assert LabelFields.from_row(row, "  VEND01 ").vendor_code == "VEND01"

    def test_blank_override_derives(self):
        row = LabelRow(box_id="LOT123456-A", part_number="P", quantity="1", mpn="M")

        assert LabelFields.from_row(row, "   ").vendor_code == "123456"


class TestLabelFields:
    """Tests for normalization and field codes."""

    def test_summary_without_four_l(self):
        row = LabelRow(box_id="B1", part_number="P1", quantity="5", mpn="M1")

        fields = LabelFields.from_row(row)

        assert fields.summary == "BBB1||PP1||Q5||1PM1||N/A"
        assert fields.qr_payload == "BBB1||PP1||Q5||1PM1"
        assert fields.coo_text == "N/A"
        assert fields.maker_name == "MAKER"

    def test_summary_with_four_l(self):
        row = LabelRow(box_id=" B1 ", part_number="P1 ", quantity=" 5", mpn="M1", four_l=" cn ")

        fields = LabelFields.from_row(row)

        assert fields.summary.split(SUMMARY_SEPARATOR) == ["BBB1", "PP1", "Q5", "1PM1", "4LCN"]
        assert fields.qr_payload == "BBB1||PP1||Q5||1PM1||4LCN"
        assert fields.coo_text == "CN"

    @pytest.mark.parametrize("four_l,expected", [
        ("", ["BBX", "PY", "Q1", "1PZ", "N/A"]),
        ("   ", ["BBX", "PY", "Q1", "1PZ", "N/A"]),
        ("tw", ["BBX", "PY", "Q1", "1PZ", "4LTW"]),
    ])
    def test_four_l_present_iff_non_empty(self, four_l, expected):
        row = LabelRow(box_id="X", part_number="Y", quantity="1", mpn="Z", four_l=four_l)

        assert LabelFields.from_row(row).summary.split(SUMMARY_SEPARATOR) == expected

    def test_maker_kept(self):
        row = LabelRow(box_id="X", part_number="Y", quantity="1", mpn="Z", maker=" Kohler ")

        assert LabelFields.from_row(row).maker_name == "Kohler"

    def test_box_caption_strips_one_b(self):
        row = LabelRow(box_id="123", part_number="Y", quantity="1", mpn="Z")

        fields = LabelFields.from_row(row)

        assert fields.box_code == "BB123"
        assert fields.box_caption == "B123"

    def test_filename(self):
        assert label_filename(" P1 ", 1) == "P1.png"
        assert label_filename("  ", 4) == "label-4.png"


class TestColumnSet:
    """Tests for slicing columns into rows."""

    def test_missing_trailing_columns(self):
        columns = ColumnSet.from_columns([["B1"], ["P1"], ["5"], ["M1"]])

        assert columns.row_count == 1
        assert columns.makers == []
        assert columns.row(0) == LabelRow(box_id="B1", part_number="P1", quantity="5", mpn="M1")

    def test_none_cells_are_blank(self):
        columns = ColumnSet.from_columns([["B1", None], ["P1", "P2"], ["5", "6"], ["M1", "M2"], [None, "Kohler"]])

        assert columns.box_ids == ["B1", ""]
        assert columns.makers == ["", "Kohler"]
        assert columns.row(1).box_id == ""

    def test_rows(self, sample_column_set):
        rows = sample_column_set.rows()

        assert len(rows) == 3
        assert rows[2].box_id == "ABCDEFGH"
        assert rows[2].maker == "Kohler"


class TestColumnValidator:
    """Tests for column-length validation."""

    def test_valid(self, sample_column_set):
        assert ColumnValidator().validate_columns(sample_column_set) == 3

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            ColumnValidator().validate_columns(ColumnSet())

    def test_empty_input_is_validation_error(self):
        with pytest.raises(ValidationError):
            ColumnValidator().validate_columns(ColumnSet())

    @pytest.mark.parametrize("rows", [1, 2, 5])
    @pytest.mark.parametrize("column,field", [("P/N", "pn"), ("QTY", "qty"), ("MPN", "mpn")])
    def test_required_mismatch_names_column(self, rows, column, field):
        for length in {0, rows - 1, rows + 1, rows + 3}:
            columns = _columns(rows, **{field: length})

            with pytest.raises(ColumnLengthMismatchError) as exc_info:
                ColumnValidator().validate_columns(columns)

            assert exc_info.value.column == column
            assert column in exc_info.value.message

    def test_first_required_mismatch_reported(self):
        columns = _columns(3, qty=1, mpn=2)

        with pytest.raises(ColumnLengthMismatchError) as exc_info:
            ColumnValidator().validate_columns(columns)

        assert exc_info.value.column == "QTY"

    @pytest.mark.parametrize("rows", [1, 2, 7])
    @pytest.mark.parametrize("field", ["maker", "four_l", "desc"])
    def test_empty_optional_never_mismatches(self, rows, field):
        columns = _columns(rows, **{field: 0})

        assert ColumnValidator().validate_columns(columns) == rows

    @pytest.mark.parametrize("field", ["maker", "four_l", "desc"])
    def test_full_optional_accepted(self, field):
        columns = _columns(4, **{field: 4})

        assert ColumnValidator().validate_columns(columns) == 4

    @pytest.mark.parametrize("column,field", [("Maker", "maker"), ("4L", "four_l"), ("Desc", "desc")])
    def test_partial_optional_mismatches(self, column, field):
        rows = 4
        for length in [1, 2, 3, 5, 9]:
            columns = _columns(rows, **{field: length})

            with pytest.raises(ColumnLengthMismatchError) as exc_info:
                ColumnValidator().validate_columns(columns)

            assert exc_info.value.column == column
            assert exc_info.value.details["required"] is False

    def test_required_checked_before_optional(self):
        columns = _columns(3, maker=1, mpn=1)

        with pytest.raises(ColumnLengthMismatchError) as exc_info:
            ColumnValidator().validate_columns(columns)

        assert exc_info.value.column == "MPN"


class TestRowValidation:
    """Tests for per-row required fields."""

    def test_valid_row(self, sample_row):
        ColumnValidator().validate_row(sample_row, 0)

    @pytest.mark.parametrize("field", ["box_id", "part_number", "quantity", "mpn"])
    def test_blank_required_field(self, field):
        values = {"box_id": "B", "part_number": "P", "quantity": "1", "mpn": "M"}
        values[field] = "   "

        with pytest.raises(MissingFieldError) as exc_info:
            ColumnValidator().validate_row(LabelRow(**values), 4)

        assert exc_info.value.row == 5
        assert "Row 5" in exc_info.value.message

    def test_blank_optional_fields_allowed(self):
        row = LabelRow(box_id="B", part_number="P", quantity="1", mpn="M", maker=" ", four_l="", description="")

        ColumnValidator().validate_row(row, 0)

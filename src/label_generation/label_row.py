"""
Row model for box labels.

A request arrives as columns (one list of strings per field). The column set
slices them into rows; each row is normalized into the field codes printed on
the label and embedded in its QR code.
"""

from dataclasses import dataclass, field

# Field code prefixes
BOX_PREFIX = "BB"
PART_NUMBER_PREFIX = "P"
QUANTITY_PREFIX = "Q"
MPN_PREFIX = "1P"
FOUR_L_PREFIX = "4L"

SUMMARY_SEPARATOR = "||"

DEFAULT_MAKER = "MAKER"
NOT_AVAILABLE = "N/A"
VENDOR_CODE_LENGTH = 6
IMAGE_EXTENSION = ".png"

# Column names in request order, as reported in validation errors
BOX_COLUMN = "BOX ID"
REQUIRED_COLUMNS = ("P/N", "QTY", "MPN")
OPTIONAL_COLUMNS = ("Maker", "4L", "Desc")
COLUMN_COUNT = 1 + len(REQUIRED_COLUMNS) + len(OPTIONAL_COLUMNS)

LABEL_HINTS = [
    "BOX ID",
    "P/N",
    "QTY",
    "MPN (QVL)",
    "Maker",
    "4L",
    "MITAC P/N description",
]


def _trim(value: str | None) -> str:
    return (value or "").strip()


def derive_vendor_code(box_id: str) -> str:
    """
    Derive the VD value from a box id.

    Takes the first six digits of the box id. When fewer than six digits are
    present, the first six raw characters are used instead.

    Example:
        >>> derive_vendor_code("LOT123456-A")
        '123456'
        >>> derive_vendor_code("ABCDEFGH")
        'ABCDEF'
    """
    digits = "".join(ch for ch in box_id if ch.isdigit())
    if len(digits) >= VENDOR_CODE_LENGTH:
        return digits[:VENDOR_CODE_LENGTH]
    return box_id[:VENDOR_CODE_LENGTH]


@dataclass(frozen=True)
class LabelRow:
    """One label's worth of raw field values."""

    box_id: str
    part_number: str
    quantity: str
    mpn: str
    maker: str = ""
    four_l: str = ""
    description: str = ""

    def normalized(self) -> "LabelRow":
        """Return a copy with every field trimmed and the 4L value uppercased."""
        return LabelRow(
            box_id=_trim(self.box_id),
            part_number=_trim(self.part_number),
            quantity=_trim(self.quantity),
            mpn=_trim(self.mpn),
            maker=_trim(self.maker),
            four_l=_trim(self.four_l).upper(),
            description=_trim(self.description),
        )

    def missing_required(self) -> list[str]:
        """Names of required fields that are blank after trimming."""
        required = {
            BOX_COLUMN: self.box_id,
            "P/N": self.part_number,
            "QTY": self.quantity,
            "MPN": self.mpn,
        }
        return [name for name, value in required.items() if not _trim(value)]


@dataclass(frozen=True)
class LabelFields:
    """Normalized values and field codes for a single label."""

    box_code: str
    part_number_code: str
    quantity_code: str
    mpn_code: str
    four_l_code: str
    part_number: str
    quantity: str
    mpn: str
    maker_name: str
    coo_text: str
    vendor_code: str

    @classmethod
    def from_row(cls, row: LabelRow, vendor_code: str | None = None) -> "LabelFields":
        row = row.normalized()
        four_l_code = f"{FOUR_L_PREFIX}{row.four_l}" if row.four_l else ""

        return cls(
            box_code=f"{BOX_PREFIX}{row.box_id}",
            part_number_code=f"{PART_NUMBER_PREFIX}{row.part_number}",
            quantity_code=f"{QUANTITY_PREFIX}{row.quantity}",
            mpn_code=f"{MPN_PREFIX}{row.mpn}",
            four_l_code=four_l_code,
            part_number=row.part_number,
            quantity=row.quantity,
            mpn=row.mpn,
            maker_name=row.maker or DEFAULT_MAKER,
            coo_text=row.four_l or NOT_AVAILABLE,
            vendor_code=_trim(vendor_code) or derive_vendor_code(row.box_id),
        )

    @property
    def box_caption(self) -> str:
        # Caption shows a single B; the barcode keeps the BB prefix
        return self.box_code.replace(BOX_PREFIX, "B", 1)

    @property
    def qr_payload(self) -> str:
        codes = [self.box_code, self.part_number_code, self.quantity_code, self.mpn_code, self.four_l_code]
        return SUMMARY_SEPARATOR.join(code for code in codes if code)

    @property
    def summary(self) -> str:
        return SUMMARY_SEPARATOR.join([
            self.box_code,
            self.part_number_code,
            self.quantity_code,
            self.mpn_code,
            self.four_l_code or NOT_AVAILABLE,
        ])


@dataclass
class ColumnSet:
    """Seven ordered columns of text, one per label field."""

    box_ids: list[str] = field(default_factory=list)
    part_numbers: list[str] = field(default_factory=list)
    quantities: list[str] = field(default_factory=list)
    mpns: list[str] = field(default_factory=list)
    makers: list[str] = field(default_factory=list)
    four_ls: list[str] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)

    @classmethod
    def from_columns(cls, columns: list[list[str | None]]) -> "ColumnSet":
        """
        Build a column set from positional columns.

        Trailing columns may be omitted; they are treated as empty.
        Extra columns beyond the seventh are ignored. None cells become blank.
        """
        padded = [["" if cell is None else cell for cell in col] for col in columns[:COLUMN_COUNT]]
        padded += [[] for _ in range(COLUMN_COUNT - len(padded))]
        return cls(*padded)

    @property
    def row_count(self) -> int:
        return len(self.box_ids)

    def required_columns(self) -> list[tuple[str, list[str]]]:
        return list(zip(REQUIRED_COLUMNS, [self.part_numbers, self.quantities, self.mpns]))

    def optional_columns(self) -> list[tuple[str, list[str]]]:
        return list(zip(OPTIONAL_COLUMNS, [self.makers, self.four_ls, self.descriptions]))

    def row(self, index: int) -> LabelRow:
        """Row at a 0-based index; unset optional columns yield blanks."""

        def _at(col: list[str]) -> str:
            return col[index] if index < len(col) else ""

        return LabelRow(
            box_id=_at(self.box_ids),
            part_number=_at(self.part_numbers),
            quantity=_at(self.quantities),
            mpn=_at(self.mpns),
            maker=_at(self.makers),
            four_l=_at(self.four_ls),
            description=_at(self.descriptions),
        )

    def rows(self) -> list[LabelRow]:
        """All rows in order."""
        return [self.row(i) for i in range(self.row_count)]


def label_filename(part_number: str, row_number: int) -> str:
    """Suggested image filename: trimmed part number, or a positional fallback."""
    base = _trim(part_number) or f"label-{row_number}"
    return f"{base}{IMAGE_EXTENSION}"

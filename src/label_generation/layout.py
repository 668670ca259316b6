"""
Fixed label layout.

Regions are defined in a virtual unit space (233.93 x 278.11) and scaled
linearly onto the printable area of a 1700 x 2368 px canvas.

Label layout:
+--------------------------------------+
| |||||||||||||||||||||||||  (BOX ID)  |
| [B]BOX ID:B...                       |
|--------------------------------------|
| |||||||||||||||||||  (P/N)    VD:... |
| [P]P/N:...                           |
|--------------------------------------|
| [Q]QTY:...                           |
| |||||||||  (QTY)                     |
|--------------------------------------|
| [1P]MPN(QVL):...                     |
| |||||||||||||||||||  (MPN)           |
|--------------------------------------|
| MAKER NAME: ...              +-----+ |
| (4L)CoO: ...                 | QR  | |
+--------------------------------------+
"""

import math
from dataclasses import dataclass

VIEW_W = 233.93
VIEW_H = 278.11

CANVAS_WIDTH = 1700
CANVAS_HEIGHT = 2368
MARGIN = 90
INNER_WIDTH = CANVAS_WIDTH - MARGIN * 2
INNER_HEIGHT = CANVAS_HEIGHT - MARGIN * 2

SCALE_X = INNER_WIDTH / VIEW_W
SCALE_Y = INNER_HEIGHT / VIEW_H

INK_COLOR = "#231815"
BACKGROUND_COLOR = "white"
FONT_FAMILY = "Arial"

CAPTION_FONT_UNITS = 12
SMALL_FONT_UNITS = 10.5

# Extra pixels added to the scaled QR side
QR_PADDING_PX = 60


def _round(value: float) -> int:
    """Round half up."""
    return int(math.floor(value + 0.5))


def px_x(v: float) -> int:
    return _round(v * SCALE_X)


def px_y(v: float) -> int:
    return _round(v * SCALE_Y)


# Widths and heights scale the same way as positions
px_w = px_x
px_h = px_y


def font_px(units: float) -> float:
    """Font size in pixels for a size given in virtual units."""
    return units * SCALE_Y


@dataclass(frozen=True)
class Rect:
    """Rectangle in virtual units."""

    x: float
    y: float
    w: float
    h: float

    def to_pixels(self) -> tuple[int, int, int, int]:
        """(x, y, width, height) in pixels, relative to the printable area."""
        return px_x(self.x), px_y(self.y), px_w(self.w), px_h(self.h)


@dataclass(frozen=True)
class Anchor:
    """Caption baseline start point in virtual units."""

    x: float
    y: float

    def to_pixels(self) -> tuple[int, int]:
        return px_x(self.x), px_y(self.y)


# Horizontal divider rules (y, thickness)
RULES = [
    (46.12, 1.3),
    (105.65, 1.3),
    (165.18, 1.3),
    (224.71, 1.3),
]

BOX_BARCODE = Rect(3.58, 0, 168 - 3.58, 22.68)
PART_NUMBER_BARCODE = Rect(3.58, 56.49, 144.31 - 3.58, 22.68)
QUANTITY_BARCODE = Rect(3.58, 137.48, 82.95 - 3.58, 22.68)
MPN_BARCODE = Rect(3.58, 197.01, 144.31 - 3.58, 22.68)

BOX_TEXT = Anchor(1.41, 38.9)
PART_NUMBER_TEXT = Anchor(1.88, 95.59)
QUANTITY_TEXT = Anchor(1.9, 126.77)
MPN_TEXT = Anchor(1.9, 185.3)
MAKER_TEXT = Anchor(2.29, 249.98)
COO_TEXT = Anchor(0.45, 271.34)
VENDOR_CODE_TEXT = Anchor(166.71, 66.71)

QR_ORIGIN = Anchor(168.12, 233.9)
QR_SIZE = 43.2


def qr_side_px() -> int:
    """Side of the square QR image in pixels."""
    return _round(min(px_w(QR_SIZE), px_h(QR_SIZE))) + QR_PADDING_PX


def rule_rects() -> list[tuple[int, int, int, int]]:
    """Divider rules as pixel rectangles spanning the full virtual width."""
    return [(px_x(0), px_y(y), px_w(VIEW_W), px_h(h)) for y, h in RULES]

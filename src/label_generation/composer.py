"""
Box label composition.
Encodes a row's barcodes and QR code and lays them out on the label canvas.
"""

import asyncio
from dataclasses import dataclass

from src.label_generation import layout
from src.label_generation.barcode_generator import BarcodeGenerator
from src.label_generation.errors import CompositionError
from src.label_generation.label_canvas import LabelCanvas
from src.label_generation.label_row import LabelFields, LabelRow, label_filename
from src.label_generation.qr_generator import QRGenerator
from src.logger import get_logger

logger = get_logger(__name__)

# Quantity prints smaller, so its barcode is rendered at higher magnification
QUANTITY_BARCODE_SCALE = 36


@dataclass(frozen=True)
class LabelImages:
    """Encoded rasters for one label."""

    box: bytes
    part_number: bytes
    quantity: bytes
    mpn: bytes
    qr: bytes


@dataclass(frozen=True)
class ComposedLabel:
    """Rendered label and its copyable summary."""

    summary: str
    image: bytes
    filename: str


class LabelComposer:
    """Composes one validated row into a label image."""

    def __init__(
        self,
        barcode_generator: BarcodeGenerator | None = None,
        qr_generator: QRGenerator | None = None
    ):
        self.barcode_generator = barcode_generator or BarcodeGenerator()
        self.qr_generator = qr_generator or QRGenerator()

    async def compose(
        self,
        row: LabelRow,
        index: int,
        vendor_code: str | None = None
    ) -> ComposedLabel:
        """
        Compose a label for a validated row.

        Args:
            row: Row with all required fields present
            index: 0-based row index (reported 1-based in errors)
            vendor_code: Shared VD override; derived from the box id when blank

        Returns:
            ComposedLabel with PNG bytes, summary and filename

        Raises:
            CompositionError: If an encoder or the rasterizer fails
        """
        fields = LabelFields.from_row(row, vendor_code)
        canvas = await self._build_canvas(fields, index)

        try:
            png = await asyncio.to_thread(canvas.rasterize)
        except Exception as e:
            raise CompositionError(index + 1, str(e)) from e

        return ComposedLabel(
            summary=fields.summary,
            image=png,
            filename=label_filename(fields.part_number, index + 1),
        )

    async def render_svg(
        self,
        row: LabelRow,
        index: int,
        vendor_code: str | None = None
    ) -> str:
        """Compose a row and return the label's SVG markup instead of a raster."""
        fields = LabelFields.from_row(row, vendor_code)
        canvas = await self._build_canvas(fields, index)
        return canvas.to_svg()

    async def encode(self, fields: LabelFields, index: int) -> LabelImages:
        """
        Generate the four barcodes and the QR code concurrently.

        Raises:
            CompositionError: If any encoder rejects its value
        """
        try:
            box, part_number, quantity, mpn, qr = await asyncio.gather(
                asyncio.to_thread(self.barcode_generator.generate, fields.box_code),
                asyncio.to_thread(self.barcode_generator.generate, fields.part_number_code),
                asyncio.to_thread(self.barcode_generator.generate, fields.quantity_code, QUANTITY_BARCODE_SCALE),
                asyncio.to_thread(self.barcode_generator.generate, fields.mpn_code),
                asyncio.to_thread(self.qr_generator.generate, fields.qr_payload),
            )
        except Exception as e:
            logger.warning("Label encoding failed", extra={
                "row": index + 1,
                "error": str(e)
            })
            raise CompositionError(index + 1, str(e)) from e

        return LabelImages(box=box, part_number=part_number, quantity=quantity, mpn=mpn, qr=qr)

    async def _build_canvas(self, fields: LabelFields, index: int) -> LabelCanvas:
        images = await self.encode(fields, index)
        canvas = LabelCanvas()

        for rect in layout.rule_rects():
            canvas.add_rule(*rect)

        caption_px = layout.font_px(layout.CAPTION_FONT_UNITS)
        small_px = layout.font_px(layout.SMALL_FONT_UNITS)

        canvas.add_picture(images.box, *layout.BOX_BARCODE.to_pixels())
        canvas.add_caption(f"[B]BOX ID:{fields.box_caption}", *layout.BOX_TEXT.to_pixels(), caption_px)

        canvas.add_picture(images.part_number, *layout.PART_NUMBER_BARCODE.to_pixels())
        canvas.add_caption(f"[P]P/N:{fields.part_number}", *layout.PART_NUMBER_TEXT.to_pixels(), caption_px)
        canvas.add_caption(f"VD:{fields.vendor_code}", *layout.VENDOR_CODE_TEXT.to_pixels(), small_px)

        canvas.add_picture(images.quantity, *layout.QUANTITY_BARCODE.to_pixels())
        canvas.add_caption(f"[Q]QTY:{fields.quantity}", *layout.QUANTITY_TEXT.to_pixels(), caption_px)

        canvas.add_picture(images.mpn, *layout.MPN_BARCODE.to_pixels())
        canvas.add_caption(f"[1P]MPN(QVL):{fields.mpn}", *layout.MPN_TEXT.to_pixels(), caption_px)

        canvas.add_caption(f"MAKER NAME: {fields.maker_name}", *layout.MAKER_TEXT.to_pixels(), small_px)
        canvas.add_caption(f"(4L)CoO: {fields.coo_text}", *layout.COO_TEXT.to_pixels(), small_px)

        qr_side = layout.qr_side_px()
        canvas.add_picture(images.qr, *layout.QR_ORIGIN.to_pixels(), qr_side, qr_side)

        return canvas

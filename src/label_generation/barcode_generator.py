"""
Code 128 barcode generation for box labels.
"""

import io

import barcode
from barcode.writer import ImageWriter

from src.logger import get_logger

logger = get_logger(__name__)

MM_PER_INCH = 25.4


class BarcodeGenerator:
    """Renders Code 128 barcodes as PNG bytes."""

    SYMBOLOGY = "code128"
    DPI = 300
    DEFAULT_SCALE = 24  # pixels per module
    DEFAULT_HEIGHT = 28  # bar height in mm
    MAX_LENGTH = 64  # characters, prefix included

    def __init__(self):
        self.barcode_class = barcode.get_barcode_class(self.SYMBOLOGY)

    def generate(
        self,
        text: str,
        scale: int = DEFAULT_SCALE,
        height: float = DEFAULT_HEIGHT
    ) -> bytes:
        """
        Generate a barcode image.

        Args:
            text: Value to encode
            scale: Magnification in pixels per module
            height: Bar height in mm

        Returns:
            PNG image bytes

        Raises:
            ValueError: If the value is longer than MAX_LENGTH
            barcode.errors.BarcodeError: If the value cannot be encoded
        """
        if len(text) > self.MAX_LENGTH:
            raise ValueError(
                f"Barcode value too long: {len(text)} characters (max {self.MAX_LENGTH})"
            )

        options = {
            "module_width": scale * MM_PER_INCH / self.DPI,
            "module_height": height,
            "quiet_zone": 0,
            "dpi": self.DPI,
            "write_text": False,
            "background": "white",
            "foreground": "black",
        }

        code = self.barcode_class(text, writer=ImageWriter(format="PNG", mode="RGB"))

        buffer = io.BytesIO()
        code.write(buffer, options)

        logger.debug("Barcode generated", extra={
            "symbology": self.SYMBOLOGY,
            "data_length": len(text),
            "scale": scale
        })

        return buffer.getvalue()

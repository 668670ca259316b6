"""
QR code generation for box labels.
"""

import io
import qrcode
from qrcode.image.pil import PilImage
from PIL import Image

from src.logger import get_logger

logger = get_logger(__name__)


class QRGenerator:
    """Generates QR codes summarizing a label row."""

    DEFAULT_SIZE = 1240
    DEFAULT_BORDER = 1

    def generate(
        self,
        data: str,
        size: int = DEFAULT_SIZE,
        border: int = DEFAULT_BORDER
    ) -> bytes:
        """
        Generate QR code from data string.

        Args:
            data: Data to encode (the label's QR payload)
            size: QR code size in pixels
            border: Border size in QR modules

        Returns:
            PNG image bytes
        """
        qr = qrcode.QRCode(
            version=None,  # Auto-determine version
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=border
        )

        qr.add_data(data)
        qr.make(fit=True)

        img: PilImage = qr.make_image(fill_color="black", back_color="white")

        # Nearest keeps module edges crisp
        img = img.resize((size, size), Image.Resampling.NEAREST).convert("RGB")

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")

        logger.debug("QR code generated", extra={
            "data_length": len(data),
            "version": qr.version,
            "size": size
        })

        return buffer.getvalue()

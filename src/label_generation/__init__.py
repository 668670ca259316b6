"""
Label generation package - box labels with Code 128 barcodes and a QR summary.
"""

from src.label_generation.barcode_generator import BarcodeGenerator
from src.label_generation.qr_generator import QRGenerator
from src.label_generation.composer import ComposedLabel, LabelComposer
from src.label_generation.validator import ColumnValidator

__all__ = ["BarcodeGenerator", "QRGenerator", "ComposedLabel", "LabelComposer", "ColumnValidator"]

"""
Vector description of a label and its rasterization.

A LabelCanvas collects rules, images and captions in pixel coordinates
relative to the printable area. It can be serialized as SVG markup or
rasterized directly with Pillow into an opaque PNG.
"""

import base64
import io
from dataclasses import dataclass, field
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from src.label_generation import layout
from src.security.sanitization import OutputSanitizer

FONT_CANDIDATES = [
    "arial.ttf",
    "Arial.ttf",
    "LiberationSans-Regular.ttf",
    "DejaVuSans.ttf",
]


def png_data_uri(png_bytes: bytes) -> str:
    return f"data:image/png;base64,{base64.b64encode(png_bytes).decode('ascii')}"


@lru_cache(maxsize=None)
def _load_font(size: float) -> ImageFont.FreeTypeFont:
    size = max(1, int(round(size)))
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


@dataclass(frozen=True)
class Rule:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Picture:
    png: bytes
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Caption:
    text: str
    x: int
    y: int
    font_size: float


@dataclass
class LabelCanvas:
    """Fixed-size label drawing."""

    width: int = layout.CANVAS_WIDTH
    height: int = layout.CANVAS_HEIGHT
    margin: int = layout.MARGIN
    rules: list[Rule] = field(default_factory=list)
    pictures: list[Picture] = field(default_factory=list)
    captions: list[Caption] = field(default_factory=list)

    def add_rule(self, x: int, y: int, width: int, height: int) -> None:
        self.rules.append(Rule(x, y, width, height))

    def add_picture(self, png: bytes, x: int, y: int, width: int, height: int) -> None:
        self.pictures.append(Picture(png, x, y, width, height))

    def add_caption(self, text: str, x: int, y: int, font_size: float) -> None:
        self.captions.append(Caption(text, x, y, font_size))

    @property
    def inner_width(self) -> int:
        return self.width - self.margin * 2

    @property
    def inner_height(self) -> int:
        return self.height - self.margin * 2

    def to_svg(self) -> str:
        """Serialize as SVG markup with images embedded as data URIs."""
        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" '
            f'viewBox="0 0 {self.width} {self.height}" shape-rendering="crispEdges">',
            f'  <rect width="100%" height="100%" fill="{layout.BACKGROUND_COLOR}" />',
            f'  <g transform="translate({self.margin},{self.margin})">',
            f'    <rect width="{self.inner_width}" height="{self.inner_height}" fill="{layout.BACKGROUND_COLOR}" />',
        ]

        for rule in self.rules:
            parts.append(
                f'    <rect x="{rule.x}" y="{rule.y}" width="{rule.width}" height="{rule.height}" '
                f'fill="{layout.INK_COLOR}" />'
            )

        for picture in self.pictures:
            parts.append(
                f'    <image href="{png_data_uri(picture.png)}" x="{picture.x}" y="{picture.y}" '
                f'width="{picture.width}" height="{picture.height}" preserveAspectRatio="none" />'
            )

        for caption in self.captions:
            parts.append(
                f'    <text x="{caption.x}" y="{caption.y}" fill="{layout.INK_COLOR}" '
                f'font-family="{layout.FONT_FAMILY}" font-size="{caption.font_size}">'
                f'{OutputSanitizer.escape_xml(caption.text)}</text>'
            )

        parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def rasterize(self) -> bytes:
        """
        Render to an opaque RGB PNG at the canvas' pixel size.

        Images are stretched to their rectangles; captions are drawn with
        their baseline at the anchor point.
        """
        image = Image.new("RGB", (self.width, self.height), layout.BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)
        ox, oy = self.margin, self.margin

        for rule in self.rules:
            draw.rectangle(
                [ox + rule.x, oy + rule.y, ox + rule.x + rule.width - 1, oy + rule.y + rule.height - 1],
                fill=layout.INK_COLOR
            )

        for picture in self.pictures:
            with Image.open(io.BytesIO(picture.png)) as source:
                tile = source.convert("RGB").resize((picture.width, picture.height), Image.Resampling.NEAREST)
            image.paste(tile, (ox + picture.x, oy + picture.y))

        for caption in self.captions:
            font = _load_font(caption.font_size)
            draw.text((ox + caption.x, oy + caption.y), caption.text, fill=layout.INK_COLOR, font=font, anchor="ls")

        buffer = io.BytesIO()
        image.save(buffer, format="PNG", optimize=False, compress_level=9)
        return buffer.getvalue()

"""
Label render handler.
Validates a column set once, then composes each row in order.
"""

import json
from typing import AsyncIterator

from src.label_generation import ColumnValidator, ComposedLabel, LabelComposer
from src.label_generation.errors import LabelError
from src.label_generation.label_canvas import png_data_uri
from src.label_generation.label_row import ColumnSet, LabelRow
from src.logger import get_logger

logger = get_logger(__name__)


def serialize_label(label: ComposedLabel) -> dict:
    """Wire form of a composed label."""
    return {
        "summary": label.summary,
        "image": png_data_uri(label.image),
        "filename": label.filename
    }


class LabelRenderHandler:
    """Handles label batch rendering requests."""

    def __init__(self, composer: LabelComposer | None = None):
        self.validator = ColumnValidator()
        self.composer = composer or LabelComposer()

    async def render_batch(
        self,
        columns: ColumnSet,
        vendor_code: str | None = None
    ) -> list[ComposedLabel]:
        """
        Render one label per row.

        Args:
            columns: Column set from the request
            vendor_code: Shared VD value applied to every row

        Returns:
            Composed labels in row order

        Raises:
            ValidationError: If columns or any row fail validation
            CompositionError: If any row fails to render

        Example:
            labels = await handler.render_batch(
                ColumnSet.from_columns([["B1"], ["P1"], ["5"], ["M1"]])
            )
            labels[0].summary  # "BBB1||PP1||Q5||1PM1||N/A"
        """
        row_count = self.validator.validate_columns(columns)

        logger.info("Rendering label batch", extra={
            "row_count": row_count,
            "vendor_code_override": bool((vendor_code or "").strip())
        })

        results = []
        for index, row in enumerate(columns.rows()):
            results.append(await self._render_row(row, index, vendor_code))

        logger.info("Label batch rendered", extra={"row_count": row_count})

        return results

    async def stream_batch(
        self,
        columns: ColumnSet,
        vendor_code: str | None = None
    ) -> AsyncIterator[str]:
        """
        Render rows as newline-delimited JSON records.

        Column validation runs before the first record is produced, so its
        failures raise to the caller. After the meta record, a failing row
        yields a single error record and ends the stream.

        Returns:
            Async iterator of NDJSON lines:
            {"type": "meta", "total": n}
            {"type": "result", "index": i, "data": {...}}  (one per row)
            {"type": "error", "error": "..."}  (on failure)
        """
        row_count = self.validator.validate_columns(columns)
        return self._stream_rows(columns, row_count, vendor_code)

    async def _stream_rows(
        self,
        columns: ColumnSet,
        row_count: int,
        vendor_code: str | None
    ) -> AsyncIterator[str]:
        yield _ndjson({"type": "meta", "total": row_count})

        for index, row in enumerate(columns.rows()):
            try:
                label = await self._render_row(row, index, vendor_code)
            except LabelError as e:
                yield _ndjson({"type": "error", "error": e.message, "error_code": e.error_code})
                return
            except Exception as e:
                logger.error("Streamed label render failed", extra={
                    "row": index + 1,
                    "error": str(e)
                }, exc_info=True)
                yield _ndjson({"type": "error", "error": str(e) or "Label render failed"})
                return

            yield _ndjson({"type": "result", "index": index, "data": serialize_label(label)})

        logger.info("Label stream complete", extra={"row_count": row_count})

    async def render_svg(
        self,
        columns: ColumnSet,
        row_number: int,
        vendor_code: str | None = None
    ) -> str:
        """
        Render the SVG description of a single row.

        Args:
            columns: Column set from the request
            row_number: 1-based row to render
            vendor_code: Shared VD value

        Raises:
            ValueError: If row_number is out of range
        """
        row_count = self.validator.validate_columns(columns)
        if not 1 <= row_number <= row_count:
            raise ValueError(f"Row {row_number} out of range (1-{row_count})")

        index = row_number - 1
        row = columns.row(index)
        self.validator.validate_row(row, index)
        return await self.composer.render_svg(row, index, vendor_code)

    async def _render_row(
        self,
        row: LabelRow,
        index: int,
        vendor_code: str | None
    ) -> ComposedLabel:
        try:
            self.validator.validate_row(row, index)
            return await self.composer.compose(row, index, vendor_code)
        except LabelError as e:
            logger.warning("Label row failed", extra={
                "row": index + 1,
                "error_code": e.error_code,
                "error": e.message
            })
            raise


def _ndjson(record: dict) -> str:
    return json.dumps(record, ensure_ascii=False) + "\n"

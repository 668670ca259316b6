"""
Label render routes.
Turns columns of box data into printable label images.
"""

from fastapi import APIRouter, Query, Response, status
from fastapi.responses import JSONResponse, StreamingResponse

from src.config import settings
from src.handlers.label_render_handler import LabelRenderHandler, serialize_label
from src.label_generation.errors import CompositionError, LabelError, ValidationError
from src.label_generation.label_row import (
    IMAGE_EXTENSION,
    LABEL_HINTS,
    REQUIRED_COLUMNS,
    ColumnSet,
    label_filename,
)
from src.models.common import ErrorResponse
from src.models.label import LabelHintsResponse, RenderLabelsRequest, RenderLabelsResponse
from src.security.sanitization import OutputSanitizer
from src.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

MIN_COLUMNS = 1 + len(REQUIRED_COLUMNS)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid columns or missing fields"},
    422: {"model": ErrorResponse, "description": "A value could not be encoded"},
    500: {"model": ErrorResponse, "description": "Render failed"}
}


def _error_response(status_code: int, error_code: str, message: str, details: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error_code=error_code,
            message=message,
            details=details
        ).model_dump(mode="json")
    )


def _label_error_response(exc: LabelError) -> JSONResponse:
    if isinstance(exc, CompositionError):
        status_code = 422
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return _error_response(status_code, exc.error_code, exc.message, exc.details)


def _column_set(request: RenderLabelsRequest) -> ColumnSet:
    """
    Build the column set, enforcing request-level limits.

    Raises:
        ValidationError: Too few columns or too many rows
    """
    if len(request.columns) < MIN_COLUMNS:
        raise ValidationError(
            f"At least {MIN_COLUMNS} columns are required (BOX ID, P/N, QTY, MPN)",
            details={"columns": len(request.columns)}
        )

    columns = ColumnSet.from_columns(request.columns)
    if columns.row_count > settings.max_rows_per_request:
        raise ValidationError(
            f"Too many rows: {columns.row_count} exceeds maximum {settings.max_rows_per_request}",
            details={"rows": columns.row_count, "max_rows": settings.max_rows_per_request}
        )

    return columns


@router.post(
    "/labels/render",
    response_model=RenderLabelsResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Render box labels",
    description="""
    Render one label image per row.

    Each label carries Code 128 barcodes for BOX ID, P/N, QTY and MPN plus a
    QR code joining the field codes with "||". Rows are validated before any
    label is rendered; a failing row fails the whole batch.
    """
)
async def render_labels(request: RenderLabelsRequest):
    """
    Render labels for every row.

    Args:
        request: Columns and optional shared vendor code

    Returns:
        Rendered labels in row order plus column hints
    """
    handler = LabelRenderHandler()

    try:
        columns = _column_set(request)
        labels = await handler.render_batch(columns, request.vd)

    except LabelError as e:
        logger.warning("Label render rejected", extra={
            "error_code": e.error_code,
            "error": e.message
        })
        return _label_error_response(e)

    except Exception as e:
        logger.error("Label render failed", extra={
            "error": str(e)
        }, exc_info=True)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "RENDER_FAILED",
            str(e) or "Failed to render labels"
        )

    return RenderLabelsResponse(
        results=[serialize_label(label) for label in labels],
        label_hints=LABEL_HINTS
    )


@router.post(
    "/labels/render/stream",
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Render box labels as a stream",
    description="""
    Render labels as newline-delimited JSON.

    The first record is {"type": "meta", "total": n}; each row then produces
    {"type": "result", "index": i, "data": {...}}. A failing row produces one
    {"type": "error", "error": "..."} record and ends the stream.
    """
)
async def render_labels_stream(request: RenderLabelsRequest):
    """Stream rendered labels in row order."""
    handler = LabelRenderHandler()

    try:
        columns = _column_set(request)
        records = await handler.stream_batch(columns, request.vd)

    except LabelError as e:
        return _label_error_response(e)

    return StreamingResponse(records, media_type="application/x-ndjson")


@router.post(
    "/labels/render/svg",
    response_class=Response,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Render one label as SVG",
    description="""
    Return the vector description of a single row as SVG, with barcode and QR
    images embedded as data URIs. Useful for previewing a layout.
    """
)
async def render_label_svg(
    request: RenderLabelsRequest,
    row: int = Query(1, ge=1, description="1-based row to render")
):
    """Render the SVG of one row."""
    handler = LabelRenderHandler()

    try:
        columns = _column_set(request)
        svg = await handler.render_svg(columns, row, request.vd)

    except LabelError as e:
        return _label_error_response(e)

    except ValueError as e:
        return _error_response(status.HTTP_400_BAD_REQUEST, "ROW_OUT_OF_RANGE", str(e))

    part_number = columns.row(row - 1).part_number
    filename = OutputSanitizer.sanitize_filename(
        label_filename(part_number, row).removesuffix(IMAGE_EXTENSION) + ".svg"
    )
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": f'inline; filename="{filename}"'}
    )


@router.get(
    "/labels/hints",
    response_model=LabelHintsResponse,
    summary="Column hints",
    description="Human-readable names of the seven input columns, in order."
)
async def get_label_hints():
    """Return the column hints."""
    return LabelHintsResponse(label_hints=LABEL_HINTS)

"""
Request and response models for label rendering.
"""

from pydantic import BaseModel, Field


class RenderLabelsRequest(BaseModel):
    """Columns of label data, one list per field."""

    columns: list[list[str | None]] = Field(
        ...,
        description="BOX ID, P/N, QTY, MPN, Maker, 4L, Desc columns; trailing optional columns may be omitted; null cells are blank"
    )
    vd: str | None = Field(None, max_length=100, description="Shared vendor code applied to every row")


class LabelResult(BaseModel):
    """One rendered label."""

    summary: str = Field(..., description="Pipe-pair-joined field codes")
    image: str = Field(..., description="PNG as a base64 data URI")
    filename: str


class RenderLabelsResponse(BaseModel):
    """Rendered labels in row order."""

    results: list[LabelResult]
    label_hints: list[str]


class LabelHintsResponse(BaseModel):
    """Human-readable column hints."""

    label_hints: list[str]

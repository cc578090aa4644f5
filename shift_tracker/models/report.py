"""Report models derived from the shift collection."""

from pydantic import BaseModel, Field


class ShiftSummary(BaseModel):
    """
    Headline figures over every recorded shift.

    The tax figure is a rough illustration, not a compliance number.
    """

    shift_count: int = Field(
        ...,
        ge=0,
        description="Number of recorded shifts"
    )
    gross_total: float = Field(
        ...,
        description="Total pay before tax"
    )
    estimated_tax: float = Field(
        ...,
        description="Tax on gross_total, scaled through a yearly estimate"
    )
    high_pay_threshold: float = Field(
        ...,
        description="Pay at or above which a shift counts as high-pay"
    )
    high_pay_count: int = Field(
        ...,
        ge=0,
        description="Number of shifts paying at least high_pay_threshold"
    )

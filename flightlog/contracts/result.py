"""Structured outcomes of bucket consistency checks."""

from pydantic import BaseModel, Field


class SumCheck(BaseModel):
    """Primary buckets reconciled against the entered flight time."""

    is_valid: bool
    calculated_total: float = Field(..., description="Rounded total from the primary buckets")
    difference: float = Field(..., ge=0, description="Absolute gap, full precision")


class XCSubsetCheck(BaseModel):
    """Cross-country time must fit inside PIC + dual time."""

    is_valid: bool
    message: str | None = None

"""Request and result models for weight equalization.

This module defines the interface of the equalization engine: the request
carrying caller weights and the target sum, and the result carrying the
final weights plus a trace of every intermediate quantity.
"""
import math
from collections.abc import Hashable
from datetime import UTC, datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

WeightKey = Union[str, int]


class EqualizationRequest(BaseModel):
    """Request to equalize a labeled weight set.

    Attributes:
        weights: Ordered key -> weight mapping (at least one entry)
        target_sum: Total the equalized weights must sum to
    """

    weights: dict[WeightKey, float] = Field(..., min_length=1)
    target_sum: float = Field(..., allow_inf_nan=False)

    @field_validator("weights")
    @classmethod
    def validate_weights(cls, value: dict[WeightKey, float]) -> dict[WeightKey, float]:
        """Validate all weights are finite numbers."""
        for key, weight in value.items():
            if not math.isfinite(weight):
                raise ValueError(f"Weight must be finite for key {key!r}")
        return value


class EqualizationTrace(BaseModel):
    """Intermediate quantities recorded while equalizing.

    Attributes:
        floor_shift: Amount added to every weight by floor correction
        omega: Minimum weight after floor correction
        alpha: Maximum weight before ceiling correction
        beta: Second-highest weight before ceiling correction (ties count)
        ceiling_key: Key capped by ceiling correction, if any
        median: Median of the corrected weights
        scale_factor: target_sum / corrected sum
        residual: Rounding drift absorbed during reconciliation
        residual_key: Key that absorbed the residual, if any
    """

    floor_shift: float = Field(default=0.0, ge=0.0)
    omega: Optional[float] = None
    alpha: Optional[float] = None
    beta: Optional[float] = None
    ceiling_key: Optional[Hashable] = None
    median: Optional[float] = None
    scale_factor: Optional[float] = None
    residual: float = 0.0
    residual_key: Optional[Hashable] = None


class EqualizationResult(BaseModel):
    """Equalized weights with the trace that produced them.

    Attributes:
        weights: Final key -> weight mapping (same keys and order as request)
        target_sum: Requested total
        trace: Intermediate stage quantities
        timestamp: Equalization computation timestamp
    """

    weights: dict[WeightKey, float]
    target_sum: float
    trace: EqualizationTrace = Field(default_factory=EqualizationTrace)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def total(self) -> float:
        """Sum of the final weights."""
        return sum(self.weights.values())

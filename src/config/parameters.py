"""
Equalizer parameter configuration using Pydantic.

This module provides type-safe parameter validation for the weight
equalization engine and the command line interface.
"""

from pydantic import BaseModel, ConfigDict, Field


class EqualizerParameters(BaseModel):
    """
    Configuration parameters for weight equalization.

    Parameters are validated at initialization to ensure values are within
    acceptable ranges.

    Attributes:
        rounding_dp: Decimal places used when rescaling and reconciling (default: 1).
        default_target_sum: Target sum used when none is given (default: 100.0).

    Examples:
        >>> params = EqualizerParameters()
        >>> params.rounding_dp
        1
        >>> EqualizerParameters(rounding_dp=2).rounding_dp
        2
    """

    rounding_dp: int = Field(default=1, ge=0, le=6)
    default_target_sum: float = Field(default=100.0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)


DEFAULT_PARAMETERS = EqualizerParameters()

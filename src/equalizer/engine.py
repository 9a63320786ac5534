"""Weight equalization engine.

This module runs the equalization pipeline over a labeled weight set:
floor correction, ceiling correction, median computation, then proportional
rescaling with a single residual correction so the result sums exactly to
the target.

Rounding drift is absorbed by one maximum-holding weight (first key wins on
ties). The iterative 0.1-step redistribution variant is not supported.
"""
import logging
import math
from collections.abc import Hashable, Mapping
from typing import Optional

from src.config.parameters import DEFAULT_PARAMETERS, EqualizerParameters
from src.equalizer.errors import InvalidWeightError
from src.equalizer.stages import (
    WeightSet,
    compute_median,
    correct_ceiling,
    correct_floor,
    reconcile,
    rescale,
    round_half_up,
)
from src.models.weights import (
    EqualizationRequest,
    EqualizationResult,
    EqualizationTrace,
)

logger = logging.getLogger(__name__)


class WeightEqualizer:
    """Equalizes labeled weight sets to a target sum.

    Attributes:
        parameters: Engine configuration (rounding precision, defaults)
    """

    def __init__(self, parameters: Optional[EqualizerParameters] = None):
        """Initialize equalization engine.

        Args:
            parameters: Optional configuration; defaults to DEFAULT_PARAMETERS
        """
        self.parameters = parameters or DEFAULT_PARAMETERS

    @property
    def rounding_dp(self) -> int:
        return self.parameters.rounding_dp

    def equalize(self, request: EqualizationRequest) -> EqualizationResult:
        """Equalize the request weights to the request target sum.

        Args:
            request: EqualizationRequest with weights and target_sum

        Returns:
            EqualizationResult with final weights and stage trace

        Raises:
            ZeroSumError: If more than one weight remains and they sum to zero
        """
        weights, trace = self._run(request.weights, request.target_sum)
        return EqualizationResult(
            weights=weights,
            target_sum=request.target_sum,
            trace=trace,
        )

    def equalize_mapping(
        self, weights: Mapping[Hashable, float], target_sum: float
    ) -> WeightSet:
        """Equalize an arbitrary mapping without building pydantic models.

        Keys may be any hashable value. The caller's mapping is not modified.

        Args:
            weights: Ordered key -> weight mapping
            target_sum: Desired total

        Returns:
            New dict with the same keys, equalized

        Raises:
            InvalidWeightError: If weights is empty or holds non-finite values
            ZeroSumError: If more than one weight remains and they sum to zero
        """
        self._validate_mapping(weights, target_sum)
        equalized, _ = self._run(weights, target_sum)
        return equalized

    def _validate_mapping(
        self, weights: Mapping[Hashable, float], target_sum: float
    ) -> None:
        if not weights:
            raise InvalidWeightError("Cannot equalize an empty weight set")

        if not math.isfinite(target_sum):
            raise InvalidWeightError(
                "Target sum must be finite", context={"target_sum": target_sum}
            )

        for key, value in weights.items():
            if not math.isfinite(value):
                raise InvalidWeightError(
                    "Weight must be finite", context={"key": key, "value": value}
                )

    def _run(
        self, weights: Mapping[Hashable, float], target_sum: float
    ) -> tuple[WeightSet, EqualizationTrace]:
        """Run all stages and collect the trace."""
        current = {key: float(value) for key, value in weights.items()}

        if len(current) == 1:
            # No runner-up and nothing to divide against: the lone weight is the target
            key = next(iter(current))
            logger.info("Single weight %s set directly to target %.4f", key, target_sum)
            return {key: round_half_up(target_sum, self.rounding_dp)}, EqualizationTrace()

        current, shift = correct_floor(current)

        ceiling = correct_ceiling(current)
        current = ceiling.weights

        median = compute_median(current.values())
        logger.debug("Median of corrected weights: %.4f", median)

        current, factor = rescale(current, target_sum, self.rounding_dp)
        current, residual_key, residual = reconcile(
            current, target_sum, self.rounding_dp
        )

        logger.info(
            "Equalized %d weights to target %.4f (scale: %.4f, residual: %+.4f)",
            len(current),
            target_sum,
            factor,
            residual,
        )

        trace = EqualizationTrace(
            floor_shift=shift,
            omega=ceiling.omega,
            alpha=ceiling.alpha,
            beta=ceiling.beta,
            ceiling_key=ceiling.capped_key,
            median=median,
            scale_factor=factor,
            residual=residual,
            residual_key=residual_key,
        )
        return current, trace


def equalize(weights: Mapping[Hashable, float], target_sum: float) -> WeightSet:
    """Equalize weights to target_sum with the default engine.

    Convenience wrapper that validates input through EqualizationRequest.

    Args:
        weights: Ordered key -> weight mapping (str or int keys)
        target_sum: Desired total

    Returns:
        New dict with the same keys, values rounded to one decimal place

    Raises:
        pydantic.ValidationError: If weights is empty or holds non-finite values
        ZeroSumError: If more than one weight remains and they sum to zero

    Examples:
        >>> equalize({"a": 1, "b": 2, "c": -3}, 10)
        {'a': 5.0, 'b': 5.0, 'c': 0.0}
    """
    request = EqualizationRequest(weights=dict(weights), target_sum=target_sum)
    return WeightEqualizer().equalize(request).weights

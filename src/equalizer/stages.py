"""Equalization pipeline stages.

Each stage is a pure function over an ordered weight mapping. Stages never
mutate their input; they return a new dict with the same keys in the same
order, plus whatever scalar the stage derived along the way.

Stage order matters:
1. correct_floor: lift non-positive weights so the minimum becomes zero
2. correct_ceiling: cap a single dominant maximum at beta + omega
3. compute_median: reference value reported alongside the result
4. rescale + reconcile: scale to the target sum, then absorb rounding drift
   into one maximum-holding weight

All rounding is half away from zero on the exact binary value of the float
(0.25 -> 0.3, -0.25 -> -0.3, 0.35 -> 0.3 since 0.35 is stored just below).
"""
import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import numpy as np

from src.equalizer.errors import ZeroSumError

logger = logging.getLogger(__name__)

WeightSet = dict[Hashable, float]


def round_half_up(value: float, rounding_dp: int = 1) -> float:
    """Round to rounding_dp decimals, ties away from zero.

    Examples:
        >>> round_half_up(0.25)
        0.3
        >>> round_half_up(-0.25)
        -0.3
        >>> round(0.25, 1)
        0.2
    """
    quantum = Decimal(1).scaleb(-rounding_dp)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def correct_floor(weights: Mapping[Hashable, float]) -> tuple[WeightSet, float]:
    """Shift every weight up by |omega| when the minimum is non-positive.

    Args:
        weights: Ordered key -> weight mapping (non-empty)

    Returns:
        Tuple of (corrected weights, shift applied). Shift is 0.0 when the
        minimum was already positive.
    """
    omega = min(weights.values())
    if omega > 0:
        return dict(weights), 0.0

    shift = abs(omega)
    corrected = {key: value + shift for key, value in weights.items()}
    logger.debug("Floor correction: omega=%.4f, shifted all weights by %.4f", omega, shift)
    return corrected, shift


def second_largest(values: Iterable[float]) -> float:
    """Return the second-highest value, counting ties (so [5, 5, 1] -> 5)."""
    ordered = sorted(values, reverse=True)
    if len(ordered) < 2:
        raise ValueError("second_largest requires at least two values")
    return ordered[1]


@dataclass(frozen=True)
class CeilingCorrection:
    """Outcome of ceiling correction.

    alpha, beta and omega are the values the cap decision was made on; they
    stay None for sets with fewer than two weights.
    """

    weights: WeightSet
    capped_key: Optional[Hashable] = None
    alpha: Optional[float] = None
    beta: Optional[float] = None
    omega: Optional[float] = None


def correct_ceiling(weights: Mapping[Hashable, float]) -> CeilingCorrection:
    """Cap the maximum weight when it exceeds the runner-up by more than omega.

    If alpha - beta > omega, the first key (in iteration order) holding alpha
    is set to beta + omega. Only one occurrence is ever corrected. Sets with
    fewer than two weights have no runner-up and are returned unchanged.

    Args:
        weights: Ordered key -> weight mapping, already floor-corrected

    Returns:
        CeilingCorrection with the new weights, the capped key (or None) and
        the alpha/beta/omega that drove the decision
    """
    corrected = dict(weights)
    if len(corrected) < 2:
        return CeilingCorrection(weights=corrected)

    alpha = max(corrected.values())
    beta = second_largest(corrected.values())
    omega = min(corrected.values())

    if alpha - beta <= omega:
        return CeilingCorrection(corrected, None, alpha, beta, omega)

    capped_key = next(key for key, value in corrected.items() if value == alpha)
    corrected[capped_key] = beta + omega
    logger.debug(
        "Ceiling correction: %s capped from %.4f to %.4f (beta=%.4f, omega=%.4f)",
        capped_key,
        alpha,
        beta + omega,
        beta,
        omega,
    )
    return CeilingCorrection(corrected, capped_key, alpha, beta, omega)


def compute_median(values: Iterable[float]) -> float:
    """Median of the values; mean of the two middle values for even counts."""
    array = np.asarray(list(values), dtype=float)
    if array.size == 0:
        raise ValueError("compute_median requires at least one value")
    return float(np.median(array))


def rescale(
    weights: Mapping[Hashable, float],
    target_sum: float,
    rounding_dp: int = 1,
) -> tuple[WeightSet, float]:
    """Scale weights proportionally so they sum to approximately target_sum.

    Each weight becomes round_half_up(target_sum / total * weight, rounding_dp).

    Args:
        weights: Ordered key -> weight mapping
        target_sum: Desired total
        rounding_dp: Decimal places for rounding (default 1)

    Returns:
        Tuple of (rescaled weights, scale factor)

    Raises:
        ZeroSumError: If the weights sum to zero
    """
    total = sum(weights.values())
    if total == 0:
        raise ZeroSumError(
            "Cannot rescale weights that sum to zero",
            context={"count": len(weights), "target_sum": target_sum},
        )

    factor = target_sum / total
    rescaled = {
        key: round_half_up(factor * value, rounding_dp)
        for key, value in weights.items()
    }
    return rescaled, factor


def reconcile(
    weights: Mapping[Hashable, float],
    target_sum: float,
    rounding_dp: int = 1,
) -> tuple[WeightSet, Hashable | None, float]:
    """Absorb residual rounding drift into a single maximum-holding weight.

    The residual round_half_up(target_sum - sum, rounding_dp) is added to the first
    key holding the maximum value. A positive residual raises that weight, a
    negative one lowers it. Nothing else is re-rounded.

    Args:
        weights: Ordered key -> weight mapping, already rescaled
        target_sum: Desired total
        rounding_dp: Decimal places for rounding (default 1)

    Returns:
        Tuple of (reconciled weights, adjusted key or None, residual applied)
    """
    reconciled = dict(weights)
    residual = round_half_up(target_sum - sum(reconciled.values()), rounding_dp)
    if residual == 0:
        return reconciled, None, 0.0

    max_key = max(reconciled, key=reconciled.__getitem__)
    reconciled[max_key] = round_half_up(reconciled[max_key] + residual, rounding_dp)

    logger.debug(
        "Applied residual correction: %s adjusted by %+.4f",
        max_key,
        residual,
    )
    return reconciled, max_key, residual

"""Pandas adapter for weight equalization.

Index labels are treated as weight keys, so any hashable label (strings,
integers, timestamps, tuples from a MultiIndex) is supported.
"""
import logging
from typing import Optional

import pandas as pd

from src.config.parameters import EqualizerParameters
from src.equalizer.engine import WeightEqualizer
from src.equalizer.errors import InvalidWeightError

logger = logging.getLogger(__name__)


def equalize_series(
    series: pd.Series,
    target_sum: float,
    parameters: Optional[EqualizerParameters] = None,
) -> pd.Series:
    """
    Equalize a labeled Series to target_sum.

    Args:
        series: Numeric Series whose index labels are the weight keys.
        target_sum: Desired total.
        parameters: Optional engine configuration.

    Returns:
        New float Series with the same index and name.

    Raises:
        InvalidWeightError: If the series is empty, has duplicate labels,
            or holds NaN values.
        ZeroSumError: If more than one weight remains and they sum to zero.

    Examples:
        >>> s = pd.Series({"x": 1, "y": 1, "z": 1})
        >>> equalize_series(s, 10).tolist()
        [3.4, 3.3, 3.3]
    """
    if series.empty:
        raise InvalidWeightError("Cannot equalize an empty series")
    if series.isna().any():
        raise InvalidWeightError(
            "Series contains NaN weights",
            context={"nan_count": int(series.isna().sum())},
        )
    if not series.index.is_unique:
        raise InvalidWeightError("Series index labels must be unique")

    engine = WeightEqualizer(parameters)
    weights = {label: float(value) for label, value in series.items()}
    equalized = engine.equalize_mapping(weights, target_sum)

    logger.debug("Equalized series %r with %d labels", series.name, len(equalized))
    return pd.Series(
        [equalized[label] for label in series.index],
        index=series.index.copy(),
        name=series.name,
        dtype=float,
    )

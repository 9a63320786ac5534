"""Weight equalization: outlier correction and exact renormalization."""

from src.equalizer.engine import WeightEqualizer, equalize
from src.equalizer.errors import EqualizerError, InvalidWeightError, ZeroSumError
from src.equalizer.series import equalize_series

__all__ = [
    "WeightEqualizer",
    "equalize",
    "equalize_series",
    "EqualizerError",
    "InvalidWeightError",
    "ZeroSumError",
]

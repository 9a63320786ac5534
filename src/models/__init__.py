"""Data models and entities."""

from src.models.weights import (
    EqualizationRequest,
    EqualizationResult,
    EqualizationTrace,
)

__all__ = [
    "EqualizationRequest",
    "EqualizationResult",
    "EqualizationTrace",
]

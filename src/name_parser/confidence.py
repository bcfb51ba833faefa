"""Confidence scoring for parsed names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConfidenceFactors:
    """Structural signals observed while parsing."""

    has_comma_format: bool = False
    has_prefix: bool = False
    has_suffix: bool = False
    token_count: int = 0


def calculate_confidence(
    first_name: Optional[str],
    last_name: Optional[str],
    factors: ConfidenceFactors,
) -> float:
    """Return a score in ``[0, 1]`` describing how reliable the parse looks."""

    if not first_name and not last_name:
        return 0.1

    confidence = 1.0
    if not first_name or not last_name:
        confidence -= 0.3

    # Each bonus is capped as soon as it is applied.
    if factors.has_comma_format:
        confidence = min(confidence + 0.1, 1.0)
    if factors.has_prefix:
        confidence = min(confidence + 0.05, 1.0)
    if factors.has_suffix:
        confidence = min(confidence + 0.05, 1.0)

    if factors.token_count == 1:
        confidence -= 0.2
    if factors.token_count > 5:
        confidence -= 0.1

    # All adjustments are multiples of 0.05; rounding removes float drift.
    return round(max(0.0, min(1.0, confidence)), 2)

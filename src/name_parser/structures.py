"""Basic data structures."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import AbstractSet, Dict, List, NamedTuple, Optional, Union

from .constants import DEFAULT_PARTICLES, DEFAULT_PREFIXES, DEFAULT_SUFFIXES


_COMPONENTS = ("prefix", "first_name", "middle_name", "last_name", "suffix")


class Extraction(NamedTuple):
    """A prefix or suffix pulled off a token sequence."""

    value: Optional[str]
    remaining: List[str]


class NameParts(NamedTuple):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass(frozen=True)
class ParsedName:
    """Structured result of parsing a personal name.

    Components that were not found are ``None``, never an empty string.
    ``confidence`` is a heuristic in ``[0, 1]``; values at or below 0.1 mean
    the parse should be checked by hand.
    """

    confidence: float
    prefix: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    suffix: Optional[str] = None

    def __post_init__(self) -> None:
        if math.isnan(self.confidence) or not 0.0 <= self.confidence <= 1.0:
            raise ValueError("confidence must be within [0, 1]")
        for name in _COMPONENTS:
            if getattr(self, name) == "":
                raise ValueError(f"{name} must be None or a non-empty string")

    def as_dict(self) -> Dict[str, Union[str, float]]:
        """Return the present components plus ``confidence``."""

        result: Dict[str, Union[str, float]] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is not None:
                result[item.name] = value
        return result


@dataclass(frozen=True)
class ParseOptions:
    """Per-call configuration for :func:`name_parser.parse_name`.

    A supplied word set replaces the default set entirely. Entries must be in
    canonical form: lowercase with periods removed.
    """

    prefixes: Optional[AbstractSet[str]] = None
    suffixes: Optional[AbstractSet[str]] = None
    particles: Optional[AbstractSet[str]] = None
    fix_text: bool = False
    fold_accents: bool = False

    @property
    def prefix_set(self) -> AbstractSet[str]:
        return DEFAULT_PREFIXES if self.prefixes is None else self.prefixes

    @property
    def suffix_set(self) -> AbstractSet[str]:
        return DEFAULT_SUFFIXES if self.suffixes is None else self.suffixes

    @property
    def particle_set(self) -> AbstractSet[str]:
        return DEFAULT_PARTICLES if self.particles is None else self.particles

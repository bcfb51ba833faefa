"""Prefix and suffix extraction."""

from __future__ import annotations

from typing import AbstractSet, Sequence

from .constants import DEFAULT_PREFIXES, DEFAULT_SUFFIXES
from .normalization import canonical
from .structures import Extraction


def _without_trailing_comma(token: str) -> str:
    return token[:-1] if token.endswith(",") else token


def extract_prefix(
    tokens: Sequence[str],
    prefixes: AbstractSet[str] = DEFAULT_PREFIXES,
    fold_accents: bool = False,
) -> Extraction:
    """Remove a leading honorific from `tokens` when the first token is one.

    Matching ignores case and periods; the returned prefix keeps the token's
    original spelling.
    """

    remaining = list(tokens)
    if remaining and canonical(remaining[0], fold_accents) in prefixes:
        return Extraction(remaining[0], remaining[1:])
    return Extraction(None, remaining)


def extract_suffix(
    tokens: Sequence[str],
    suffixes: AbstractSet[str] = DEFAULT_SUFFIXES,
    fold_accents: bool = False,
) -> Extraction:
    """Remove the run of trailing suffix tokens, e.g. ``Jr., PhD``.

    A trailing comma on a token is ignored for matching but kept in the
    returned suffix text.
    """

    remaining = list(tokens)
    index = len(remaining)
    while index > 0 and canonical(_without_trailing_comma(remaining[index - 1]), fold_accents) in suffixes:
        index -= 1

    if index == len(remaining):
        return Extraction(None, remaining)
    return Extraction(" ".join(remaining[index:]), remaining[:index])

"""Initials detection and grouping."""

from __future__ import annotations

import string
from typing import List, Sequence


def is_initial(token: str) -> bool:
    """Return True for a single ASCII letter, optionally with periods (``J.``)."""

    letters = token.replace(".", "")
    return len(letters) == 1 and letters in string.ascii_letters


def group_initials(tokens: Sequence[str]) -> List[str]:
    """Collapse each run of consecutive initials into one token.

    ``["J.", "R.", "R.", "Tolkien"]`` becomes ``["J. R. R.", "Tolkien"]``.
    """

    if len(tokens) <= 1:
        return list(tokens)

    grouped: List[str] = []
    run: List[str] = []
    for token in tokens:
        if is_initial(token):
            run.append(token)
            continue
        if run:
            grouped.append(" ".join(run))
            run = []
        grouped.append(token)

    if run:
        grouped.append(" ".join(run))
    return grouped

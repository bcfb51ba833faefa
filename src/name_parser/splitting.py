"""Assignment of leftover tokens to first, middle and last name."""

from __future__ import annotations

from typing import AbstractSet, Sequence

from .constants import DEFAULT_PARTICLES
from .initials import group_initials
from .normalization import canonical
from .structures import NameParts


def split_name_tokens(
    tokens: Sequence[str],
    particles: AbstractSet[str] = DEFAULT_PARTICLES,
    fold_accents: bool = False,
) -> NameParts:
    """Split `tokens` into first, middle and last name.

    Particles directly before the final token (``van``, ``de la`` ...) are
    folded into the last name. The first token is always the first name, even
    when it looks like a particle.
    """

    if not tokens:
        return NameParts()
    if len(tokens) == 1:
        return NameParts(first_name=tokens[0])
    if len(tokens) == 2:
        return NameParts(first_name=tokens[0], last_name=tokens[1])

    grouped = group_initials(tokens)
    last_start = len(grouped) - 1
    for index in range(len(grouped) - 2, 0, -1):
        if canonical(grouped[index], fold_accents) not in particles:
            break
        last_start = index

    middle_name = " ".join(grouped[1:last_start]) if last_start > 1 else None
    return NameParts(
        first_name=grouped[0],
        middle_name=middle_name,
        last_name=" ".join(grouped[last_start:]),
    )

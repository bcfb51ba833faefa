"""Text normalization helpers: tokenizing, nickname removal and canonical forms."""

from __future__ import annotations

import re
from typing import List

import ftfy
from unidecode import unidecode


_SINGLE_QUOTED_PATTERN = re.compile(r"'[^']*'")
_DOUBLE_QUOTED_PATTERN = re.compile(r'"[^"]*"')
_PARENTHESIZED_PATTERN = re.compile(r"\([^)]*\)")
_MULTI_SPACE_PATTERN = re.compile(r"\s+")


def repair_text(text: str) -> str:
    """Fix mojibake and Unicode oddities in `text` with ftfy."""

    return ftfy.fix_text(text)


def tokenize(text: str) -> List[str]:
    """Split `text` on whitespace, keeping each token's exact characters."""

    return [part for part in _MULTI_SPACE_PATTERN.split(text) if part]


def strip_nicknames(text: str) -> str:
    """Remove quoted and parenthesized asides such as ``William 'Bill' Gates``.

    Each bracket style is removed independently; nesting is not handled.
    """

    stripped = _SINGLE_QUOTED_PATTERN.sub("", text)
    stripped = _DOUBLE_QUOTED_PATTERN.sub("", stripped)
    stripped = _PARENTHESIZED_PATTERN.sub("", stripped)
    return _MULTI_SPACE_PATTERN.sub(" ", stripped).strip()


def canonical(token: str, fold_accents: bool = False) -> str:
    """Return the lookup form of `token`: lowercase with periods removed."""

    if fold_accents:
        token = unidecode(token)
    return token.lower().replace(".", "")

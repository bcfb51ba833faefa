"""Entry point that turns a free-form name string into a :class:`ParsedName`."""

from __future__ import annotations

import logging
from typing import Optional

from .confidence import ConfidenceFactors, calculate_confidence
from .extraction import extract_prefix, extract_suffix
from .initials import group_initials
from .normalization import repair_text, strip_nicknames, tokenize
from .splitting import split_name_tokens
from .structures import ParsedName, ParseOptions


logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = ParseOptions()


def parse_name(full_name: object, options: Optional[ParseOptions] = None) -> ParsedName:
    """Parse `full_name` into prefix, first, middle, last name and suffix.

    Both ``"First Middle Last"`` and ``"Last, First Middle"`` orders are
    understood. The function never raises: anything that is not a non-empty
    string comes back with a confidence of 0.
    """

    options = options or _DEFAULT_OPTIONS
    if not isinstance(full_name, str):
        return ParsedName(confidence=0.0)

    working = repair_text(full_name) if options.fix_text else full_name
    working = working.strip()
    if not working:
        return ParsedName(confidence=0.0)

    comma_index = working.find(",")
    if 0 < comma_index < len(working) - 1:
        logger.debug("Parsing %r as 'Last, First' format", working)
        return _parse_comma_format(working, options)

    tokens = tokenize(strip_nicknames(working))
    if not tokens:
        logger.debug("Nothing left of %r after removing nicknames", working)
        return ParsedName(confidence=0.0)

    token_count = len(tokens)
    prefix, tokens = extract_prefix(tokens, options.prefix_set, options.fold_accents)
    suffix, tokens = extract_suffix(tokens, options.suffix_set, options.fold_accents)
    parts = split_name_tokens(tokens, options.particle_set, options.fold_accents)

    factors = ConfidenceFactors(
        has_prefix=prefix is not None,
        has_suffix=suffix is not None,
        token_count=token_count,
    )
    return ParsedName(
        confidence=calculate_confidence(parts.first_name, parts.last_name, factors),
        prefix=prefix,
        first_name=parts.first_name,
        middle_name=parts.middle_name,
        last_name=parts.last_name,
        suffix=suffix,
    )


def _parse_comma_format(name: str, options: ParseOptions) -> ParsedName:
    token_count = len(name.split())

    pieces = [piece.strip() for piece in name.split(",")]
    if len(pieces) != 2:
        logger.debug("Expected exactly one comma in %r, found %d", name, len(pieces) - 1)
        factors = ConfidenceFactors(has_comma_format=True, token_count=token_count)
        return ParsedName(confidence=calculate_confidence(None, None, factors))

    last_part, first_part = pieces
    suffix, last_tokens = extract_suffix(tokenize(last_part), options.suffix_set, options.fold_accents)

    prefix, first_tokens = extract_prefix(tokenize(first_part), options.prefix_set, options.fold_accents)
    first_suffix, first_tokens = extract_suffix(first_tokens, options.suffix_set, options.fold_accents)
    if first_suffix is not None:
        suffix = f"{suffix} {first_suffix}" if suffix else first_suffix

    grouped = group_initials(first_tokens)
    first_name = grouped[0] if grouped else None
    middle_name = " ".join(grouped[1:]) if len(grouped) > 1 else None
    last_name = " ".join(last_tokens) or None

    factors = ConfidenceFactors(
        has_comma_format=True,
        has_prefix=prefix is not None,
        has_suffix=suffix is not None,
        token_count=token_count,
    )
    return ParsedName(
        confidence=calculate_confidence(first_name, last_name, factors),
        prefix=prefix,
        first_name=first_name,
        middle_name=middle_name,
        last_name=last_name,
        suffix=suffix,
    )

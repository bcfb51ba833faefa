"""Name Parser library initialization."""

from .confidence import ConfidenceFactors, calculate_confidence
from .constants import DEFAULT_PARTICLES, DEFAULT_PREFIXES, DEFAULT_SUFFIXES
from .extraction import extract_prefix, extract_suffix
from .initials import group_initials, is_initial
from .normalization import canonical, strip_nicknames, tokenize
from .parser import parse_name
from .splitting import split_name_tokens
from .structures import ParsedName, ParseOptions

__all__ = [
    "parse_name",
    "ParsedName",
    "ParseOptions",
    "ConfidenceFactors",
    "calculate_confidence",
    "DEFAULT_PREFIXES",
    "DEFAULT_SUFFIXES",
    "DEFAULT_PARTICLES",
    "extract_prefix",
    "extract_suffix",
    "group_initials",
    "is_initial",
    "canonical",
    "strip_nicknames",
    "tokenize",
    "split_name_tokens",
]

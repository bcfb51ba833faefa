"""Default word lists used to recognize prefixes, suffixes and particles.

Entries are canonical forms: lowercase with every period removed, which is how
tokens are normalized before lookup.
"""

from __future__ import annotations

from typing import FrozenSet


DEFAULT_PREFIXES: FrozenSet[str] = frozenset(
    {
        # courtesy titles
        "mr",
        "mrs",
        "ms",
        "miss",
        "mx",
        "master",
        "madam",
        "madame",
        "mister",
        "dame",
        "sir",
        "lord",
        "lady",
        # academic and professional
        "dr",
        "doctor",
        "prof",
        "professor",
        "hon",
        "honorable",
        "honourable",
        "judge",
        "justice",
        "atty",
        "attorney",
        # military
        "capt",
        "captain",
        "cpt",
        "col",
        "colonel",
        "gen",
        "general",
        "lt",
        "lieutenant",
        "maj",
        "major",
        "sgt",
        "sergeant",
        "cpl",
        "corporal",
        "pvt",
        "private",
        "adm",
        "admiral",
        "cmdr",
        "commander",
        "ens",
        "ensign",
        "brig",
        "brigadier",
        # religious
        "rev",
        "reverend",
        "fr",
        "father",
        "pastor",
        "rabbi",
        "imam",
        "bishop",
        "archbishop",
        "cardinal",
        "deacon",
        "sr",
        "sister",
        "br",
        "brother",
        "msgr",
        "monsignor",
        # political
        "pres",
        "president",
        "gov",
        "governor",
        "sen",
        "senator",
        "rep",
        "representative",
        "amb",
        "ambassador",
        "mayor",
    }
)

# Single-letter numerals ("v", "x") are left out so they keep reading as initials.
DEFAULT_SUFFIXES: FrozenSet[str] = frozenset(
    {
        # generational
        "jr",
        "sr",
        "ii",
        "iii",
        "iv",
        "vi",
        "vii",
        "viii",
        "ix",
        "2nd",
        "3rd",
        "4th",
        # academic
        "phd",
        "md",
        "dds",
        "dmd",
        "dvm",
        "edd",
        "jd",
        "llm",
        "mba",
        "ms",
        "msc",
        "bs",
        "bsc",
        # professional
        "esq",
        "esquire",
        "cpa",
        "cfa",
        "rn",
        "ret",
        "obe",
        "mbe",
        "cbe",
        "kbe",
        "qc",
        "kc",
    }
)

DEFAULT_PARTICLES: FrozenSet[str] = frozenset(
    {
        "van",
        "von",
        "vom",
        "zu",
        "zum",
        "zur",
        "der",
        "den",
        "ter",
        "ten",
        "het",
        "da",
        "das",
        "de",
        "del",
        "della",
        "dei",
        "degli",
        "dos",
        "du",
        "des",
        "di",
        "la",
        "le",
        "bin",
        "ibn",
        "abu",
        "st",
        "ste",
        "san",
    }
)

"""
Region codes of the Russian Federation (ISO 3166-2:RU).
"""

import re
from typing import Optional

from .exceptions import InvalidRegionError

_REGION_RE = re.compile(r"\w{2,3}")
_PREFIX_RE = re.compile(r"^RU-", re.IGNORECASE)

KNOWN_REGIONS = frozenset({
    # Republics
    "AD", "AL", "BA", "BU", "CE", "CU", "DA", "IN", "KB", "KC", "KK",
    "KL", "KO", "KR", "ME", "MO", "SA", "SE", "TA", "TY", "UD",
    # Krais
    "ALT", "KAM", "KHA", "KDA", "KYA", "PER", "PRI", "STA", "ZAB",
    # Oblasts
    "AMU", "ARK", "AST", "BEL", "BRY", "CHE", "IRK", "IVA", "KGD", "KLU",
    "KEM", "KIR", "KOS", "KGN", "KRS", "LEN", "LIP", "MAG", "MOS", "MUR",
    "NIZ", "NGR", "NVS", "OMS", "ORE", "ORL", "PNZ", "PSK", "ROS", "RYA",
    "SAK", "SAM", "SAR", "SMO", "SVE", "TAM", "TOM", "TUL", "TVE", "TYU",
    "ULY", "VLA", "VGG", "VLG", "VOR", "YAR",
    # Federal cities
    "MOW", "SPE",
    # Autonomous oblast and okrugs
    "YEV", "CHU", "KHM", "NEN", "YAN",
})


def normalize_region(region: Optional[str], strict: bool = False) -> str:
    """Returns the bare upper-case region code, or "" for the whole country.

    Accepts an optional "RU-" prefix. Codes of the right shape that are not
    in KNOWN_REGIONS are accepted unless strict is set.
    """
    if not region:
        return ""

    code = _PREFIX_RE.sub("", region)
    if not _REGION_RE.fullmatch(code):
        raise InvalidRegionError(f"Unknown RU region: <{region}>")

    code = code.upper()
    if strict and code not in KNOWN_REGIONS:
        raise InvalidRegionError(f"Unknown RU region: <{region}>")
    return code

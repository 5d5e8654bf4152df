from __future__ import annotations

import math
from typing import Tuple

from .config import BASES, MIN_VARIANT_COUNT


def derive_variant_bases(
    a: int,
    c: int,
    g: int,
    t: int,
    ref_base: str,
    *,
    min_count: int = MIN_VARIANT_COUNT,
) -> Tuple[Tuple[str, ...], int]:
    """Return (qualifying bases, max qualifying count) for one locus.

    A base qualifies when its read count is at least ``min_count`` and it is not
    the reference base (compared case-insensitively). Bases are always reported
    in A, C, G, T order regardless of their counts. The max count is -1 when no
    base qualifies.
    """
    ref = ref_base.upper()
    bases = []
    max_count = -1
    for base, count in zip(BASES, (a, c, g, t)):
        if count >= min_count and base != ref:
            bases.append(base)
            if count > max_count:
                max_count = count
    return tuple(bases), max_count


def snp_label(bases: Tuple[str, ...]) -> str:
    return "/".join(bases)


def _ieee_divide(num: float, denom: float) -> float:
    # float division by zero follows IEEE 754 rather than raising
    if denom == 0:
        if num > 0:
            return math.inf
        if num < 0:
            return -math.inf
        return math.nan
    return num / denom


def percent_reads(
    n_bases: int,
    max_variant_count: int,
    variant_count: int,
    qualified_reads: int,
) -> float:
    """Percentage of qualified reads supporting the variant call.

    With two or more qualifying bases the strongest single base is used,
    otherwise the caller's total variant count.
    """
    numerator = max_variant_count if n_bases > 1 else variant_count
    return _ieee_divide(100.0 * numerator, float(qualified_reads))

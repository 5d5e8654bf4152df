from __future__ import annotations

from typing import Iterable, Iterator, List

from .config import MIN_PERCENT_READS, MIN_VARIANT_COUNT
from .models import VariantRecord

OUTPUT_COLUMNS = [
    "chrom",
    "start",
    "end",
    "snp",
    "ref_base",
    "a",
    "c",
    "g",
    "t",
    "qual_reads",
    "variants",
    "percent_reads",
    "sample",
]


def passes_filter(
    rec: VariantRecord,
    *,
    min_variant_count: int = MIN_VARIANT_COUNT,
    min_percent: float = MIN_PERCENT_READS,
) -> bool:
    """True if a record should be reported.

    Needs at least ``min_variant_count`` qualifying bases, a percentage of at
    least ``min_percent`` and a non-empty SNP label. NaN percentages never pass.
    """
    return (
        len(rec.variant_bases) >= min_variant_count
        and rec.percent_reads >= min_percent
        and len(rec.snp) > 0
    )


def filter_records(
    records: Iterable[VariantRecord],
    *,
    min_variant_count: int = MIN_VARIANT_COUNT,
    min_percent: float = MIN_PERCENT_READS,
) -> Iterator[VariantRecord]:
    for rec in records:
        if passes_filter(rec, min_variant_count=min_variant_count, min_percent=min_percent):
            yield rec


def format_percent(value: float) -> str:
    # shortest round-trip repr, no fixed rounding
    return repr(float(value))


def format_row(rec: VariantRecord, sample: str) -> str:
    """Render one kept record as a tab-separated output line (no newline)."""
    cols: List[str] = [
        rec.chrom,
        str(rec.start),
        str(rec.end),
        rec.snp,
        rec.ref_base,
        str(rec.a),
        str(rec.c),
        str(rec.g),
        str(rec.t),
        str(rec.qual_reads),
        str(rec.variants),
        format_percent(rec.percent_reads),
        sample,
    ]
    return "\t".join(cols)

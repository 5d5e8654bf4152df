from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from pathlib import Path
from typing import Tuple

from .config import MIN_VARIANT_COUNT
from .variants import derive_variant_bases, snp_label
from .variants import percent_reads as compute_percent_reads


@dataclass(frozen=True)
class VariantRecord:
    """One row of a LASTZ ``.interval`` table plus its derived variant call.

    The derived attributes are computed once, when the record is created.

    Attributes
    ----------
    chrom:
        Contig name as present in the input.
    start, end:
        Genomic coordinates, copied verbatim.
    ref_base:
        Reference base; original case is kept for output.
    reads:
        Total read depth at the locus.
    a, c, g, t:
        Reads supporting each base.
    qual_reads:
        Reads passing quality filtering; denominator of ``percent_reads``.
    variants:
        Non-reference reads reported by the upstream caller.
    variant_bases:
        Non-reference bases with at least ``min_variant_count`` reads, A/C/G/T order.
    snp:
        ``variant_bases`` joined with ``/`` (``""`` when empty).
    max_variants:
        Highest read count among ``variant_bases`` (-1 when empty).
    percent_reads:
        Allelic percentage; see :func:`lastzfilter.variants.percent_reads`.
    """

    chrom: str
    start: int
    end: int
    ref_base: str
    reads: int
    a: int
    c: int
    g: int
    t: int
    qual_reads: int
    variants: int
    min_variant_count: InitVar[int] = MIN_VARIANT_COUNT

    variant_bases: Tuple[str, ...] = field(init=False)
    snp: str = field(init=False)
    max_variants: int = field(init=False)
    percent_reads: float = field(init=False)

    def __post_init__(self, min_variant_count: int) -> None:
        bases, max_count = derive_variant_bases(
            self.a, self.c, self.g, self.t, self.ref_base, min_count=min_variant_count
        )
        object.__setattr__(self, "variant_bases", bases)
        object.__setattr__(self, "snp", snp_label(bases))
        object.__setattr__(self, "max_variants", max_count)
        object.__setattr__(
            self,
            "percent_reads",
            compute_percent_reads(len(bases), max_count, self.variants, self.qual_reads),
        )


@dataclass(frozen=True)
class FileResult:
    """Per-file outcome of one filtering pass."""

    path: Path
    stem: str
    lines: int
    parsed: int
    skipped: int
    kept: int
    kept_percent_reads: Tuple[float, ...] = ()

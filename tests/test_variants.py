import math

import pytest

from lastzfilter.models import VariantRecord
from lastzfilter.variants import derive_variant_bases, percent_reads, snp_label


def make_record(ref="G", a=0, c=0, g=0, t=0, qual=30, variants=0, **kw) -> VariantRecord:
    return VariantRecord(
        chrom="chr1",
        start=100,
        end=200,
        ref_base=ref,
        reads=qual,
        a=a,
        c=c,
        g=g,
        t=t,
        qual_reads=qual,
        variants=variants,
        **kw,
    )


def test_bases_exclude_reference_and_low_counts():
    bases, max_count = derive_variant_bases(2, 1, 26, 3, "G")
    assert bases == ("A", "T")
    assert max_count == 3


def test_bases_keep_acgt_order_regardless_of_counts():
    bases, max_count = derive_variant_bases(2, 0, 9, 7, "C")
    assert bases == ("A", "G", "T")
    assert max_count == 9


def test_reference_comparison_is_case_insensitive():
    bases, _ = derive_variant_bases(5, 0, 20, 5, "g")
    assert bases == ("A", "T")


def test_no_qualifying_bases():
    bases, max_count = derive_variant_bases(1, 1, 30, 0, "G")
    assert bases == ()
    assert max_count == -1
    assert snp_label(bases) == ""


def test_snp_label_joins_with_slash():
    assert snp_label(("A", "C")) == "A/C"
    assert snp_label(("T",)) == "T"


def test_percent_uses_max_count_for_multiple_bases():
    assert percent_reads(2, 8, 14, 40) == pytest.approx(20.0)


def test_percent_uses_variant_count_for_single_base():
    assert percent_reads(1, 4, 4, 30) == 100.0 * 4 / 30
    assert percent_reads(0, -1, 3, 30) == 100.0 * 3 / 30


def test_percent_zero_denominator():
    assert percent_reads(1, 4, 4, 0) == math.inf
    assert math.isnan(percent_reads(0, -1, 0, 0))


def test_record_derives_fields_once():
    rec = make_record(a=2, c=2, g=26, t=0, variants=4)
    assert rec.variant_bases == ("A", "C")
    assert rec.snp == "A/C"
    assert rec.max_variants == 2
    assert rec.percent_reads == 100.0 * 2 / 30
    with pytest.raises(AttributeError):
        rec.snp = "G"  # type: ignore[misc]


def test_record_single_base_percent():
    rec = make_record(a=0, c=0, g=26, t=4, variants=4)
    assert rec.snp == "T"
    assert rec.percent_reads == 100.0 * 4 / 30


def test_record_custom_min_variant_count():
    rec = make_record(a=2, c=3, g=20, t=0, variants=5, min_variant_count=3)
    assert rec.variant_bases == ("C",)

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

MIN_VARIANT_COUNT = 2
MIN_PERCENT_READS = 10.0
FILE_EXTENSION = ".interval"

# Bases are always evaluated in this order; it fixes the SNP label order.
BASES = ("A", "C", "G", "T")


@dataclass(frozen=True)
class FilterSettings:
    """Thresholds and input conventions for one filtering run.

    Attributes
    ----------
    min_variant_count:
        A base qualifies as a variant call when its read count reaches this value.
        The same value is the minimum number of qualifying bases a record needs
        to be reported.
    min_percent:
        Minimum percentage of qualified reads supporting the variant call.
    extension:
        File extension selected in directory mode and stripped from the
        filename to form the sample tag.
    skip_malformed:
        Skip lines with the wrong column count instead of rejecting the file.
    """

    min_variant_count: int = MIN_VARIANT_COUNT
    min_percent: float = MIN_PERCENT_READS
    extension: str = FILE_EXTENSION
    skip_malformed: bool = False

    def validate(self) -> List[str]:
        errors: List[str] = []
        if self.min_variant_count < 1:
            errors.append(f"min_variant_count must be >= 1: {self.min_variant_count}")
        if math.isnan(self.min_percent) or self.min_percent < 0:
            errors.append(f"min_percent must be >= 0: {self.min_percent}")
        if not self.extension:
            errors.append("extension must not be empty")
        return errors

    def check(self) -> None:
        """Raise ValueError listing every invalid setting."""
        errors = self.validate()
        if errors:
            raise ValueError("Invalid filter settings: " + "; ".join(errors))

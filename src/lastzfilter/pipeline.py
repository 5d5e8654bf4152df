from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, TextIO

import numpy as np
from tqdm import tqdm

from .config import FilterSettings
from .filtering import filter_records, format_row
from .models import FileResult
from .reader import read_interval_file, resolve_inputs
from .utils import file_stem

logger = logging.getLogger(__name__)

_PERCENT_BINS = np.linspace(0.0, 100.0, 21)


def process_file(path: str | Path, settings: FilterSettings, out: TextIO) -> FileResult:
    """Parse, filter and write one interval file.

    Rows are written only after the whole file parsed cleanly, so a rejected
    file contributes no output.
    """
    path = Path(path)
    stem = file_stem(path.name, settings.extension)
    parsed = read_interval_file(path, settings)

    kept_pct: List[float] = []
    for rec in filter_records(
        parsed.records,
        min_variant_count=settings.min_variant_count,
        min_percent=settings.min_percent,
    ):
        out.write(format_row(rec, stem) + "\n")
        kept_pct.append(rec.percent_reads)
    out.flush()

    logger.info("%s: kept %d of %d records", path.name, len(kept_pct), parsed.parsed)
    return FileResult(
        path=path,
        stem=stem,
        lines=parsed.lines,
        parsed=parsed.parsed,
        skipped=parsed.skipped,
        kept=len(kept_pct),
        kept_percent_reads=tuple(kept_pct),
    )


def run(
    path: str | Path,
    settings: Optional[FilterSettings] = None,
    *,
    out: TextIO,
    progress: bool = False,
) -> List[FileResult]:
    """Process a file, or every matching file in a directory, in name order.

    The first error aborts the run; output of files already processed stays
    written.
    """
    settings = settings or FilterSettings()
    settings.check()

    files = resolve_inputs(path, extension=settings.extension)
    if not files:
        logger.warning("No %s files found in %s", settings.extension, path)

    it: Iterable[Path] = files
    if progress and len(files) > 1:
        it = tqdm(files, unit="file", desc="Filtering")

    results: List[FileResult] = []
    for f in it:
        results.append(process_file(f, settings, out))
    return results


def percent_histogram(values: Sequence[float]) -> Dict[str, List[float]]:
    """Histogram of kept percentReads over fixed 0-100 bins.

    Values above 100 go into the last bin; non-finite values are dropped.
    """
    finite = [v for v in values if math.isfinite(v)]
    clipped = np.clip(np.asarray(finite, dtype=float), 0.0, 100.0)
    counts, _ = np.histogram(clipped, bins=_PERCENT_BINS)
    return {"bin_edges": _PERCENT_BINS.tolist(), "counts": counts.tolist()}


def summarise_results(
    results: Sequence[FileResult],
    settings: FilterSettings,
    *,
    input_path: str | Path,
    runtime_seconds: Optional[float] = None,
) -> Dict[str, Any]:
    all_pct = [v for r in results for v in r.kept_percent_reads]
    totals = {
        "files": len(results),
        "lines": sum(r.lines for r in results),
        "parsed": sum(r.parsed for r in results),
        "skipped": sum(r.skipped for r in results),
        "kept": sum(r.kept for r in results),
    }
    return {
        "input_path": str(input_path),
        "settings": {
            "min_variant_count": int(settings.min_variant_count),
            "min_percent": float(settings.min_percent),
            "extension": settings.extension,
            "skip_malformed": bool(settings.skip_malformed),
        },
        "files": [
            {
                "path": str(r.path),
                "sample": r.stem,
                "lines": r.lines,
                "parsed": r.parsed,
                "skipped": r.skipped,
                "kept": r.kept,
            }
            for r in results
        ],
        "totals": totals,
        "percent_reads_hist": percent_histogram(all_pct),
        "runtime_seconds": runtime_seconds,
    }

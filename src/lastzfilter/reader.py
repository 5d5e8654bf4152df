"""Input resolution and parsing of LASTZ ``.interval`` tables.

Interval format (tab-separated, no header, 11 columns):
chrom  start  end  ref  reads  A  C  G  T  qual_reads  variants
chr1   100    200  G    30     2  2  26 0  30          4
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from .config import FILE_EXTENSION, FilterSettings
from .errors import FileAccessError, FormatMismatchError, NumericParseError
from .models import VariantRecord
from .utils import open_textmaybe_gzip

logger = logging.getLogger(__name__)

N_COLUMNS = 11

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)


@dataclass
class ParsedFile:
    """Records of one file plus the counters behind the consistency check."""

    path: Path
    records: List[VariantRecord] = field(default_factory=list)
    lines: int = 0
    parsed: int = 0
    skipped: int = 0


def resolve_inputs(path: str | Path, *, extension: str = FILE_EXTENSION) -> List[Path]:
    """Return the files to process for a user-supplied path.

    A regular file is returned as-is. For a directory, every regular file whose
    name ends with ``extension`` is returned, sorted by name; subdirectories are
    not descended into.
    """
    p = Path(path)
    if p.is_file():
        return [p]
    if p.is_dir():
        try:
            children = sorted(p.iterdir(), key=lambda c: c.name)
        except OSError as e:
            raise FileAccessError(f"Cannot list directory {p}: {e}", path=p) from e
        files = [c for c in children if c.name.endswith(extension) and c.is_file()]
        logger.info("Found %d %s file(s) in %s", len(files), extension, p)
        return files
    raise FileAccessError(f"Path does not exist or is not accessible: {p}", path=p)


def parse_int(value: str, *, name: str, bits: int = 32) -> int:
    """Parse a base-10 integer and check it fits a signed ``bits``-wide integer."""
    if not _INT_RE.fullmatch(value):
        raise NumericParseError(field=name, value=value)
    n = int(value)
    lo, hi = _INT64 if bits == 64 else _INT32
    if not lo <= n <= hi:
        raise NumericParseError(field=name, value=value)
    return n


def split_fields(line: str) -> List[str]:
    """Split a line on tabs, dropping trailing empty fields."""
    fields = line.split("\t")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def record_from_fields(fields: Sequence[str], *, min_variant_count: int) -> VariantRecord:
    if len(fields) != N_COLUMNS:
        raise ValueError(f"Expected {N_COLUMNS} fields, got {len(fields)}")
    return VariantRecord(
        chrom=fields[0],
        start=parse_int(fields[1], name="start", bits=64),
        end=parse_int(fields[2], name="end", bits=64),
        ref_base=fields[3],
        reads=parse_int(fields[4], name="reads"),
        a=parse_int(fields[5], name="a"),
        c=parse_int(fields[6], name="c"),
        g=parse_int(fields[7], name="g"),
        t=parse_int(fields[8], name="t"),
        qual_reads=parse_int(fields[9], name="qual_reads"),
        variants=parse_int(fields[10], name="variants"),
        min_variant_count=min_variant_count,
    )


def read_interval_file(path: str | Path, settings: FilterSettings | None = None) -> ParsedFile:
    """Parse one interval file into records.

    Every non-empty line must split into exactly 11 columns. Unless
    ``settings.skip_malformed`` is set, a single mismatching line rejects the
    whole file with :class:`FormatMismatchError`. Integer errors always abort.
    """
    settings = settings or FilterSettings()
    out = ParsedFile(path=Path(path))

    try:
        fh = open_textmaybe_gzip(path, "rt")
    except OSError as e:
        raise FileAccessError(f"Cannot open {path}: {e}", path=path) from e

    with fh:
        try:
            for line_no, raw in enumerate(fh, start=1):
                line = raw.rstrip("\n")
                if not line:
                    continue
                out.lines += 1
                fields = split_fields(line)
                if len(fields) != N_COLUMNS:
                    if settings.skip_malformed:
                        out.skipped += 1
                        logger.warning(
                            "%s line %d: expected %d columns, found %d; skipping",
                            path,
                            line_no,
                            N_COLUMNS,
                            len(fields),
                        )
                    else:
                        logger.debug("%s line %d: %d columns", path, line_no, len(fields))
                    continue
                try:
                    rec = record_from_fields(fields, min_variant_count=settings.min_variant_count)
                except NumericParseError as e:
                    raise NumericParseError(
                        field=e.field, value=e.value, path=path, line_no=line_no
                    ) from e
                out.records.append(rec)
                out.parsed += 1
        except UnicodeDecodeError as e:
            raise FileAccessError(f"Cannot decode {path} as text: {e}", path=path) from e
        except OSError as e:
            raise FileAccessError(f"Error while reading {path}: {e}", path=path) from e

    if out.lines != out.parsed + out.skipped:
        raise FormatMismatchError(path=path, lines=out.lines, parsed=out.parsed)

    logger.info("%s: %d lines, %d records parsed, %d skipped", path, out.lines, out.parsed, out.skipped)
    return out

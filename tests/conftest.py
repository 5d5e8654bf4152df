from pathlib import Path
from typing import Iterable

import pytest

# chrom start end ref reads A C G T qual variants
KEPT_LINE = "chr2\t500\t501\tA\t40\t20\t8\t6\t0\t40\t14"
LOW_PERCENT_LINE = "chr1\t100\t200\tG\t30\t2\t2\t26\t0\t30\t4"
SINGLE_BASE_LINE = "chr1\t100\t200\tG\t30\t0\t0\t26\t4\t30\t4"


def write_interval(path: Path, lines: Iterable[str], *, newline: str = "\n") -> Path:
    path.write_text("".join(line + newline for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def interval_dir(tmp_path: Path) -> Path:
    d = tmp_path / "intervals"
    d.mkdir()
    write_interval(d / "b.interval", [KEPT_LINE.replace("chr2", "chrB")])
    write_interval(d / "a.interval", [LOW_PERCENT_LINE, KEPT_LINE])
    write_interval(d / "c.txt", [KEPT_LINE.replace("chr2", "chrC")])
    return d

from __future__ import annotations

import gzip
import json
import logging
from pathlib import Path
from typing import Any, TextIO

logger = logging.getLogger(__name__)


def ensure_outdir(path: str | Path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def open_textmaybe_gzip(path: str | Path, mode: str = "rt", *, encoding: str = "utf-8") -> TextIO:
    p = str(path)
    if p.endswith(".gz"):
        return gzip.open(p, mode, encoding=encoding)  # type: ignore[return-value]
    return open(p, mode, encoding=encoding)


def write_json(path: str | Path, obj: Any) -> None:
    with open(path, "wt", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, sort_keys=True)


def file_stem(name: str, extension: str) -> str:
    """Sample tag for an input file: its name with the extension removed.

    Every occurrence is removed, so ``a.interval.interval`` becomes ``a``.
    """
    return name.replace(extension, "")

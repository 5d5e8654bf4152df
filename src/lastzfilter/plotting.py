from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def plot_percent_hist(
    *,
    bin_edges: List[float],
    counts: List[int],
    out_png: str | Path,
    title: str = "Allelic percentage of reported variants",
) -> None:
    out_png = Path(out_png)
    out_png.parent.mkdir(parents=True, exist_ok=True)

    widths = [bin_edges[i + 1] - bin_edges[i] for i in range(len(counts))]
    centers = [bin_edges[i] + widths[i] / 2.0 for i in range(len(counts))]

    plt.figure()
    plt.bar(centers, counts, width=widths, align="center")
    plt.xlabel("% of qualified reads")
    plt.ylabel("Variant count")
    plt.title(title)
    plt.tight_layout()
    plt.savefig(out_png, dpi=160)
    plt.close()


def plot_kept_per_file(
    *,
    kept_by_sample: Dict[str, int],
    out_png: str | Path,
    title: str = "Reported variants per sample",
) -> None:
    out_png = Path(out_png)
    out_png.parent.mkdir(parents=True, exist_ok=True)

    labels = list(kept_by_sample.keys())
    values = [int(kept_by_sample[k]) for k in labels]

    plt.figure(figsize=(max(6.4, 0.4 * len(labels)), 4.8))
    plt.bar(range(len(labels)), values)
    plt.ylabel("Variant count")
    plt.title(title)
    plt.xticks(range(len(labels)), labels, rotation=45, ha="right")
    plt.tight_layout()
    plt.savefig(out_png, dpi=160)
    plt.close()
    logger.debug("Wrote %s", out_png)

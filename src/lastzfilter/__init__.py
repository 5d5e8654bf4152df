"""lastzfilter: filter and annotate LASTZ ``.interval`` variant-call tables.

Public API is intentionally small; most users should use the CLI:

    lastzfilter path/to/sample.interval
    lastzfilter path/to/interval_dir/ > all_samples.tsv

"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"

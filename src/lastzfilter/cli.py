from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, TextIO

from . import __version__
from .config import FILE_EXTENSION, MIN_PERCENT_READS, MIN_VARIANT_COUNT, FilterSettings
from .errors import VariantFilterError
from .pipeline import run, summarise_results
from .plotting import plot_kept_per_file, plot_percent_hist
from .report import render_report
from .utils import ensure_outdir, open_textmaybe_gzip, write_json

_DESCRIPTION = (
    "LASTZ Variant Filter: reads a tab-delimited .interval table, calls the variant "
    "base(s) at each locus, keeps well-supported variants and prints them with the "
    "percentage of qualified reads and the originating sample name."
)

_EPILOG = (
    "If PATH is a directory then all *.interval files within that directory will be "
    "processed and the name of the originating file attached to the end of each row."
)


def _setup_logging(verbosity: int, *, logfile: Optional[Path] = None) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    log_fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(level=level, format=log_fmt, stream=sys.stderr)

    if logfile is not None:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(logfile)
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(log_fmt))
        logging.getLogger().addHandler(fh)


def _handle_error(err: Exception, *, log_path: Optional[Path] = None) -> int:
    sys.stderr.write(f"{err.__class__.__name__}: {err}\n")
    if log_path is not None:
        sys.stderr.write(f"See log: {log_path}\n")
    return 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lastzfilter",
        description=_DESCRIPTION,
        epilog=_EPILOG,
    )
    p.add_argument("--version", action="version", version=f"lastzfilter {__version__}")
    p.add_argument(
        "path",
        nargs="?",
        help="An .interval file, or a directory of .interval files.",
    )
    p.add_argument(
        "--min-variant-count",
        type=int,
        default=MIN_VARIANT_COUNT,
        help="Minimum reads for a non-reference base to count as a variant call; "
        "also the minimum number of variant bases to report a locus.",
    )
    p.add_argument(
        "--min-percent",
        type=float,
        default=MIN_PERCENT_READS,
        help="Minimum %% of qualified reads supporting the variant.",
    )
    p.add_argument(
        "--extension",
        default=FILE_EXTENSION,
        help="File extension selected in directory mode and stripped from sample names.",
    )
    p.add_argument(
        "--skip-malformed",
        action="store_true",
        help="Skip lines without 11 columns instead of rejecting the whole file.",
    )
    p.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the filtered table here instead of stdout (.gz compresses).",
    )
    p.add_argument("--summary-json", default=None, help="Write a JSON run summary to this path.")
    p.add_argument(
        "--report-dir",
        default=None,
        help="Write summary.json, plots and report.html into this directory.",
    )
    p.add_argument("--progress", action="store_true", help="Show a progress bar in directory mode.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v/-vv).")
    return p


def _write_report(report_dir: Path, summary: dict, output: str) -> Path:
    outdir = ensure_outdir(report_dir)
    write_json(outdir / "summary.json", summary)

    plots_dir = outdir / "plots"
    percent_png = plots_dir / "percent_reads_hist.png"
    kept_png = plots_dir / "kept_per_file.png"

    plot_percent_hist(
        bin_edges=summary["percent_reads_hist"]["bin_edges"],
        counts=summary["percent_reads_hist"]["counts"],
        out_png=percent_png,
    )
    plot_kept_per_file(
        kept_by_sample={f["sample"]: f["kept"] for f in summary["files"]},
        out_png=kept_png,
    )

    plots_rel = {
        "percent_hist": str(Path("plots") / percent_png.name),
        "kept_per_file": str(Path("plots") / kept_png.name),
    }
    return render_report(
        outdir=outdir,
        version=__version__,
        summary=summary,
        plots=plots_rel,
        output=output,
    )


def cmd_filter(args: argparse.Namespace) -> int:
    report_dir = Path(args.report_dir).expanduser().resolve() if args.report_dir else None
    log_path = report_dir / "logs" / "lastzfilter.log" if report_dir is not None else None
    _setup_logging(args.verbose, logfile=log_path)

    logger = logging.getLogger("lastzfilter")
    logger.info("lastzfilter %s", __version__)

    settings = FilterSettings(
        min_variant_count=int(args.min_variant_count),
        min_percent=float(args.min_percent),
        extension=str(args.extension),
        skip_malformed=bool(args.skip_malformed),
    )

    out: TextIO = sys.stdout
    try:
        if args.output is not None:
            out = open_textmaybe_gzip(args.output, "wt")

        t0 = time.time()
        results = run(args.path, settings, out=out, progress=bool(args.progress))
        dt = time.time() - t0

        if args.summary_json is not None or report_dir is not None:
            summary = summarise_results(
                results, settings, input_path=args.path, runtime_seconds=float(dt)
            )
            if args.summary_json is not None:
                write_json(args.summary_json, summary)
            if report_dir is not None:
                _write_report(report_dir, summary, args.output or "stdout")
        return 0
    except (VariantFilterError, OSError, ValueError) as e:
        return _handle_error(e, log_path=log_path)
    finally:
        if out is not sys.stdout:
            out.close()


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help(sys.stdout)
        return 0

    args = parser.parse_args(argv)
    if args.path is None:
        parser.print_help(sys.stdout)
        return 0
    return cmd_filter(args)


if __name__ == "__main__":
    raise SystemExit(main())

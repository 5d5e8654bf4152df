import gzip
import json
import subprocess
import sys
from pathlib import Path

from lastzfilter.cli import main

from conftest import KEPT_LINE, write_interval


def _run_cli(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "lastzfilter"] + args,
        check=False,
        capture_output=True,
        text=True,
    )


def test_directory_output(interval_dir: Path) -> None:
    cp = _run_cli([str(interval_dir)])
    assert cp.returncode == 0
    rows = cp.stdout.splitlines()
    assert [r.split("\t")[-1] for r in rows] == ["a", "b"]
    assert all(len(r.split("\t")) == 13 for r in rows)


def test_format_mismatch_exit_code(tmp_path: Path) -> None:
    p = write_interval(tmp_path / "bad.interval", ["\t".join(["x"] * 10)])
    cp = _run_cli([str(p)])
    assert cp.returncode != 0
    assert "FormatMismatchError" in cp.stderr
    assert "found 1 lines but could only process 0" in cp.stderr
    assert cp.stdout == ""


def test_missing_path_exit_code(tmp_path: Path) -> None:
    cp = _run_cli([str(tmp_path / "nope.interval")])
    assert cp.returncode != 0
    assert "FileAccessError" in cp.stderr


def test_thresholds_from_flags(tmp_path: Path, capsys) -> None:
    p = write_interval(tmp_path / "s.interval", [KEPT_LINE])
    assert main([str(p), "--min-percent", "25"]) == 0
    assert capsys.readouterr().out == ""
    assert main([str(p), "--min-percent", "20"]) == 0
    assert capsys.readouterr().out.rstrip("\n").endswith("\t20.0\ts")


def test_skip_malformed_flag(tmp_path: Path, capsys) -> None:
    p = write_interval(tmp_path / "s.interval", ["junk", KEPT_LINE])
    assert main([str(p)]) == 2
    capsys.readouterr()
    assert main([str(p), "--skip-malformed"]) == 0
    assert capsys.readouterr().out.count("\n") == 1


def test_gzip_output_and_summary(interval_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "all.tsv.gz"
    summary = tmp_path / "summary.json"
    rc = main([str(interval_dir), "-o", str(out), "--summary-json", str(summary)])
    assert rc == 0
    with gzip.open(out, "rt") as fh:
        assert len(fh.read().splitlines()) == 2
    data = json.loads(summary.read_text(encoding="utf-8"))
    assert data["totals"]["kept"] == 2
    assert data["settings"]["extension"] == ".interval"


def test_report_dir(interval_dir: Path, tmp_path: Path) -> None:
    report_dir = tmp_path / "report"
    assert main([str(interval_dir), "--report-dir", str(report_dir)]) == 0
    assert (report_dir / "report.html").exists()
    assert (report_dir / "summary.json").exists()
    assert (report_dir / "plots" / "percent_reads_hist.png").exists()
    assert (report_dir / "plots" / "kept_per_file.png").exists()
    html = (report_dir / "report.html").read_text(encoding="utf-8")
    assert "<code>a</code>" in html


def test_nan_min_percent_is_rejected(tmp_path: Path, capsys) -> None:
    p = write_interval(tmp_path / "s.interval", [KEPT_LINE])
    assert main([str(p), "--min-percent", "nan"]) == 2
    assert "min_percent" in capsys.readouterr().err

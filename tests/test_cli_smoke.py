import subprocess
import sys


def test_cli_help() -> None:
    cp = subprocess.run(
        [sys.executable, "-m", "lastzfilter", "--help"],
        check=True,
        capture_output=True,
        text=True,
    )
    assert "LASTZ Variant Filter" in cp.stdout
    assert ".interval" in cp.stdout


def test_cli_no_arguments_prints_usage() -> None:
    cp = subprocess.run(
        [sys.executable, "-m", "lastzfilter"],
        check=True,
        capture_output=True,
        text=True,
    )
    assert "usage:" in cp.stdout

from __future__ import annotations

import datetime as _dt
import logging
from pathlib import Path
from typing import Any, Dict

from jinja2 import Template

logger = logging.getLogger(__name__)


_REPORT_TEMPLATE = Template(
    """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>LASTZ Variant Filter Report</title>
  <style>
    body { font-family: Arial, Helvetica, sans-serif; margin: 24px; }
    code, pre { background: #f6f8fa; padding: 2px 4px; border-radius: 4px; }
    h1, h2, h3 { margin-top: 1.2em; }
    table { border-collapse: collapse; margin-top: 0.6em; }
    th, td { border: 1px solid #ddd; padding: 8px; }
    th { background: #f2f2f2; text-align: left; }
    .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
    .card { border: 1px solid #ddd; border-radius: 8px; padding: 12px; }
    .small { color: #666; font-size: 0.9em; }
    img { max-width: 100%; height: auto; border: 1px solid #eee; border-radius: 6px; }
  </style>
</head>
<body>

<h1>LASTZ Variant Filter Report</h1>
<p class="small">Generated: {{ generated_at }}</p>

<h2>Run summary</h2>
<div class="grid">
  <div class="card">
    <h3>Input</h3>
    <table>
      <tr><th>Path</th><td><code>{{ input_path }}</code></td></tr>
      <tr><th>Files processed</th><td>{{ totals.files }}</td></tr>
      <tr><th>Records parsed</th><td>{{ totals.parsed }}</td></tr>
      <tr><th>Lines skipped</th><td>{{ totals.skipped }}</td></tr>
      <tr><th>Variants reported</th><td>{{ totals.kept }}</td></tr>
    </table>
  </div>
  <div class="card">
    <h3>Filters</h3>
    <table>
      <tr><th>Min reads per variant base</th><td>{{ settings.min_variant_count }}</td></tr>
      <tr><th>Min % of qualified reads</th><td>{{ settings.min_percent }}</td></tr>
      <tr><th>File extension</th><td><code>{{ settings.extension }}</code></td></tr>
      <tr><th>Skip malformed lines</th><td>{{ settings.skip_malformed }}</td></tr>
    </table>
  </div>
</div>

<h2>Per-file counts</h2>
<table>
  <tr><th>Sample</th><th>Lines</th><th>Parsed</th><th>Skipped</th><th>Reported</th></tr>
  {% for f in files %}
  <tr><td><code>{{ f.sample }}</code></td><td>{{ f.lines }}</td><td>{{ f.parsed }}</td><td>{{ f.skipped }}</td><td>{{ f.kept }}</td></tr>
  {% endfor %}
</table>

<h2>Plots</h2>
<div class="grid">
  <div class="card">
    <h3>Allelic percentage</h3>
    <img src="{{ plots.percent_hist }}" alt="percent reads histogram">
  </div>
  <div class="card">
    <h3>Variants per sample</h3>
    <img src="{{ plots.kept_per_file }}" alt="variants per sample">
  </div>
</div>

<h2>Outputs</h2>
<ul>
  <li><code>{{ output }}</code> (filtered variant table)</li>
  <li><code>summary.json</code> (machine-readable summary)</li>
</ul>

<hr>
<p class="small">lastzfilter {{ version }}</p>
</body>
</html>"""
)


def render_report(
    *,
    outdir: str | Path,
    version: str,
    summary: Dict[str, Any],
    plots: Dict[str, str],
    output: str = "stdout",
) -> Path:
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    html = _REPORT_TEMPLATE.render(
        generated_at=_dt.datetime.now().isoformat(timespec="seconds"),
        version=version,
        input_path=summary.get("input_path"),
        settings=summary.get("settings", {}),
        totals=summary.get("totals", {}),
        files=summary.get("files", []),
        plots=plots,
        output=output,
    )

    out_path = outdir / "report.html"
    out_path.write_text(html, encoding="utf-8")
    logger.info("Report written: %s", out_path)
    return out_path

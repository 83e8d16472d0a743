#!/usr/bin/env python3
"""
Fetch the source data, build the steak and religions reports, and save every
figure as PNG under the configured output directory.

Usage:
  PYTHONPATH=. python scripts/run_reports.py
  PYTHONPATH=. python scripts/run_reports.py --report steak
  PYTHONPATH=. python scripts/run_reports.py --religions-source data/raw/religions.csv --out outputs/tmp
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import matplotlib

matplotlib.use("Agg")

from catsum.config import get_report_config, project_root
from catsum.eda import apply_style, save_figure
from catsum.exceptions import CatsumError
from catsum.ingestion import load_religions, load_steak_survey
from catsum.logging_config import setup_logging, get_logger
from catsum.reports import build_religions_report, build_steak_report
from catsum.summarize import DEFAULT_OTHER_LABEL

logger = get_logger(__name__)


def _save(report: dict, name: str, out_dir: Path) -> None:
    for key, fig in report["figures"].items():
        path = save_figure(fig, out_dir / name / f"{key}.png")
        logger.info("figure_saved", report=name, figure=key, path=str(path))
    for key, table in report["tables"].items():
        logger.info("table_ready", report=name, table=key, rows=len(table))


def main():
    parser = argparse.ArgumentParser(description="Build steak survey and world religions reports")
    parser.add_argument("--report", choices=["steak", "religions", "all"], default="all")
    parser.add_argument("--steak-source", type=str, default=None, help="CSV url or path (default: config)")
    parser.add_argument("--religions-source", type=str, default=None, help="CSV url or path (default: config)")
    parser.add_argument("--out", type=str, default=None, help="Output directory (default: config outputs.dir)")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    args = parser.parse_args()

    setup_logging(args.log_level, json_output=args.json_logs)
    cfg = get_report_config()
    out_dir = Path(args.out or cfg.get("outputs", {}).get("dir") or project_root() / "outputs" / "reports")
    other_label = cfg.get("other_label", DEFAULT_OTHER_LABEL)

    apply_style()

    try:
        if args.report in ("steak", "all"):
            steak = build_steak_report(load_steak_survey(args.steak_source), cfg.get("steak"))
            _save(steak, "steak", out_dir)
        if args.report in ("religions", "all"):
            religions = build_religions_report(
                load_religions(args.religions_source), cfg.get("religions"), other_label=other_label
            )
            _save(religions, "religions", out_dir)
    except CatsumError as e:
        logger.error("report_failed", error_type=type(e).__name__, error=str(e))
        sys.exit(1)
    logger.info("reports_complete", out_dir=str(out_dir))


if __name__ == "__main__":
    main()

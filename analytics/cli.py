# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Check-in Insights CLI: run the analytics engine over an exported snapshot.

Usage:
    checkin-insights report                      JSON report for checkins.json
    checkin-insights report FILE --window 30d    Report for a given file/window
    checkin-insights report --output out.json    Write the report to a file
    checkin-insights report --save               Write to reports/latest.json
    checkin-insights report --catalog coping     Use the short-form strategies
    checkin-insights insights                    Plain-text insights + strategies
    checkin-insights insights --now 2026-03-01T09:00:00
    checkin-insights --data-dir PATH             Override data directory
    checkin-insights --verbose                   Debug logging to stderr
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from analytics.catalog import CATALOGS, DEFAULT_CATALOG, DEFAULT_WINDOW, WINDOW_DAYS, window_label
from analytics.engine import analyze
from analytics.numbers import format_number
from analytics.schemas import AnalyticsError, AnalyticsReport, EmotionSuggestion, load_check_ins, save_validated

logger = logging.getLogger("checkin.cli")

EXIT_BAD_INPUT = 2


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _parse_now(raw: Optional[str]) -> datetime:
    if not raw:
        return datetime.now().astimezone()
    return datetime.fromisoformat(raw)


def _build_report(args, paths) -> AnalyticsReport:
    source = args.file or paths.checkins_file
    logger.debug("Reading check-ins from %s", source)
    check_ins = load_check_ins(source)
    return analyze(check_ins, now=_parse_now(args.now), window=args.window, catalog=args.catalog)


def _report(args, paths) -> None:
    report = _build_report(args, paths)
    target = args.output
    if target is None and args.save:
        paths.ensure_dirs()
        target = paths.latest_report
    if target is not None:
        save_validated(target, report)
        print(f"Report written to {target}")
    else:
        print(report.model_dump_json(indent=2))


def render_text(report: AnalyticsReport) -> List[str]:
    """Plain-text rendering of insights and suggestion blocks."""
    lines: List[str] = []
    if not report.has_history:
        lines.append("Complete a few check-ins to see your emotional patterns!")
        return lines
    if report.filtered_check_ins == 0:
        lines.append("No check-ins in the selected time range.")
        return lines

    lines.append(f"{report.filtered_check_ins} check-ins in the last {window_label(report.window)}")
    lines.append("")
    for insight in report.insights:
        lines.append(f"[{insight.type}] {insight.text}")

    lines.append("")
    if report.needs_more_data:
        lines.append(
            "Complete more check-ins to receive personalized strategy suggestions "
            "based on your patterns."
        )
        return lines

    for suggestion in report.suggestions:
        if isinstance(suggestion, EmotionSuggestion):
            lines.append(f"For your frequent emotion: {suggestion.emotion} ({suggestion.frequency} times)")
            lines.append("  Immediate:")
            lines.extend(f"    - {s}" for s in suggestion.immediate)
            lines.append("  Long-term:")
            lines.extend(f"    - {s}" for s in suggestion.long_term)
        else:
            lines.append(f"For your common trigger: {suggestion.trigger} ({suggestion.frequency} mentions)")
            lines.extend(f"    - {s}" for s in suggestion.strategies)
    if report.progress is not None:
        p = report.progress
        lines.append("")
        lines.append(
            f"Granularity {format_number(p.granularity_score)} | "
            f"consistency {format_number(p.consistency_score)} | "
            f"enhanced {p.enhanced_usage_percent}%"
        )
    return lines


def _insights(args, paths) -> None:
    report = _build_report(args, paths)
    print("\n".join(render_text(report)))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="checkin-insights",
        description="Emotional analytics over exported check-ins",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Override data directory (default: $CHECKIN_DATA_DIR or ~/.checkin-insights/)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    sub = parser.add_subparsers(dest="command")

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument("file", nargs="?", type=Path, default=None,
                       help="Check-in snapshot (default: <data-dir>/checkins.json)")
        p.add_argument("--window", choices=list(WINDOW_DAYS), default=None,
                       help="Trailing window (default: $CHECKIN_WINDOW or 7d)")
        p.add_argument("--now", default=None,
                       help="Reference instant, ISO 8601 (default: current time)")
        p.add_argument("--catalog", choices=list(CATALOGS), default=None,
                       help="Strategy catalog (default: $CHECKIN_CATALOG or soothing)")

    report_parser = sub.add_parser("report", help="Full analytics report as JSON")
    _common(report_parser)
    report_parser.add_argument("--output", "-o", type=Path, default=None, help="Write report to PATH")
    report_parser.add_argument("--save", action="store_true", help="Write report to reports/latest.json")

    insights_parser = sub.add_parser("insights", help="Insights and strategies as text")
    _common(insights_parser)

    args = parser.parse_args(argv)

    if args.version:
        try:
            from importlib.metadata import version
            print(f"checkin-insights {version('checkin-insights')}")
        except Exception:
            print("checkin-insights (version unknown, not installed via pip)")
        sys.exit(0)

    _setup_logging(args.verbose)

    from core.paths import configure, get_paths
    paths = configure(args.data_dir.expanduser().resolve()) if args.data_dir else get_paths()

    if args.command not in ("report", "insights"):
        parser.print_help()
        sys.exit(1)

    # Resolve window and catalog: CLI arg → env var → default
    args.window = args.window or os.environ.get("CHECKIN_WINDOW", DEFAULT_WINDOW)
    args.catalog = args.catalog or os.environ.get("CHECKIN_CATALOG", DEFAULT_CATALOG)

    try:
        if args.command == "report":
            _report(args, paths)
        else:
            _insights(args, paths)
    except FileNotFoundError as e:
        print(f"Error: no check-in snapshot at {e.filename}", file=sys.stderr)
        sys.exit(EXIT_BAD_INPUT)
    except (AnalyticsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_BAD_INPUT)


if __name__ == "__main__":
    main()

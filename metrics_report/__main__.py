"""CLI entry point for the HTML metrics report.

Usage:
    metrics-report [options] METRICS_JSON
    python -m metrics_report [options] METRICS_JSON

Options:
    METRICS_JSON          Measurement set produced by the analysis engine
    --config PATH         Path to metrics-report.yaml config file
    --report-html DIR     Output directory of the HTML report
    --group NAME=REGEX    Add a group (repeatable)
    --template-dir DIR    Override the template tree
    --quiet / -q          Suppress output
    --help / -h           Show this help
"""

from __future__ import annotations

import argparse
import os
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="metrics-report",
        description="Render the HTML dashboard of a computed metrics set",
    )
    parser.add_argument(
        "metrics",
        help="Path to the JSON measurement set",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to metrics-report.yaml configuration file",
    )
    parser.add_argument(
        "--report-html",
        type=str,
        default=None,
        help="Output directory for the HTML report",
    )
    parser.add_argument(
        "--group",
        action="append",
        default=[],
        metavar="NAME=REGEX",
        help="Render a sub-report for units whose name matches REGEX",
    )
    parser.add_argument(
        "--template-dir",
        type=str,
        default=None,
        help="Directory holding page templates and static bundles",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Suppress output",
    )

    args = parser.parse_args(argv)

    from .config import load_config, parse_group_option
    from .errors import MetricsReportError
    from .loader import load_metrics
    from .reporter import generate_report

    try:
        config = load_config(config_path=args.config, repo_root=os.getcwd())

        # Apply CLI overrides
        if args.report_html:
            config.report_html = os.path.abspath(args.report_html)
        if args.template_dir:
            config.template_dir = os.path.abspath(args.template_dir)
        if args.group:
            config.groups.extend(parse_group_option(g) for g in args.group)
            config.build_groups()
        config.verbose = not args.quiet

        metrics = load_metrics(args.metrics)
        generate_report(metrics, config)
    except MetricsReportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

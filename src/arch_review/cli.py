from __future__ import annotations

import argparse
import logging

from arch_review.config import apply_overrides, load_config, parse_assignment
from arch_review.files import display_path, iter_candidate_files, read_source
from arch_review.models import RuleConfig
from arch_review.reporting import render_json, render_text, should_fail
from arch_review.scanners import RULE_TYPES, Scanner, build_rules


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arch-review",
        description="Line-based convention checks for React/TypeScript sources",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser("scan", parents=[common], help="Scan files or folders")
    scan_parser.add_argument("paths", nargs="+", help="Files or folders to scan")
    scan_parser.add_argument("--config", default=None, help="JSON file with thresholds")
    scan_parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override one threshold, e.g. max_file_lines=250",
    )
    scan_parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="RULE",
        help="Rule name to skip (see the 'rules' command)",
    )
    scan_parser.add_argument("--format", choices=["text", "json"], default="text")
    scan_parser.add_argument("--fail-on", choices=["none", "warn", "error"], default="none")

    subparsers.add_parser("rules", parents=[common], help="List registered rules")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "rules":
        for rule_type in RULE_TYPES:
            print(f"{rule_type.name}: {', '.join(rule_type.categories)}")
        return 0

    if args.command == "scan":
        try:
            config = load_config(args.config) if args.config else RuleConfig()
            overrides = dict(parse_assignment(item) for item in args.overrides)
            config = apply_overrides(config, overrides)
            rules = build_rules(config, disabled=args.disable)
        except ValueError as exc:
            parser.error(str(exc))
            return 2

        scanner = Scanner(rules)
        reports = []
        for path in iter_candidate_files(args.paths):
            content = read_source(path)
            if content is None:
                continue
            shown = display_path(path)
            findings = scanner.scan(shown, content)
            logger.debug("Scanned %s: %d finding(s)", shown, len(findings))
            reports.append((shown, findings))

        if args.format == "json":
            print(render_json(reports))
        else:
            print(render_text(reports))
        return 1 if should_fail(reports, args.fail_on) else 0

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())

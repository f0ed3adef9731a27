from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _parse_pairs(pairs: list[str] | None) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise SystemExit(f"Expected KEY=VALUE, got {pair!r}.")
        parsed[key.strip()] = value
    return parsed


def _render_markdown(report) -> str:
    lines = [
        f"# Accessibility check {report.check_id}",
        "",
        f"Generated: {report.generated_at.isoformat()}",
        f"Complete: {'yes' if report.complete else 'no'}",
        "",
        "## Totals",
        "",
    ]
    for result_type, count in sorted(report.totals.items(), key=lambda item: item[0].value):
        lines.append(f"- {result_type.value}: {count}")
    lines.append("")
    for result in report.results:
        lines.append(f"## {result.test_title} ({result.type.value})")
        lines.append("")
        for message in result.messages:
            prefix = f"Line {message.line}: " if message.line else ""
            lines.append(f"- {prefix}{message.message}")
            if message.code:
                lines.append(f"  `{message.code}`")
        lines.append("")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create and step through screen-reader accessibility checks.")
    parser.add_argument(
        "--store",
        default=".a11y_checks",
        help="Directory holding checks and domains as JSON files (default: .a11y_checks).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a check from a URL or an HTML file.")
    source = create.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="URL of the page to check.")
    source.add_argument("--html-file", help="Path to an HTML file to check.")
    create.add_argument(
        "--option",
        action="append",
        metavar="KEY=VALUE",
        help="Global option, e.g. iconfont='fa- dashicons-' (repeatable).",
    )

    nxt = sub.add_parser("next", help="Run the next pending test of a check.")
    nxt.add_argument("check_id")
    nxt.add_argument(
        "--answer",
        action="append",
        metavar="KEY=VALUE",
        help="Answer to a question asked by the previous call (repeatable).",
    )
    nxt.add_argument("--no-validator", action="store_true", help="Do not call the W3C validator.")

    report = sub.add_parser("report", help="Summarize the stored results of a check.")
    report.add_argument("check_id")
    report.add_argument("--format", choices=("json", "md"), default="json")

    delete = sub.add_parser("delete", help="Delete a check.")
    delete.add_argument("check_id")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    _ensure_backend_on_path()
    from common.a11y_engine import RulesRunner
    from common.a11y_engine.errors import CheckError
    from pipelines.checks import CheckService
    from pipelines.storage import JsonFileStorage

    storage = JsonFileStorage(Path(args.store).resolve())
    service = CheckService(storage)

    try:
        if args.command == "create":
            html = Path(args.html_file).read_text() if args.html_file else None
            check = service.create_check(url=args.url, html=html, options=_parse_pairs(args.option))
            print(json.dumps({"id": check.id, "title": check.title}, indent=2))
        elif args.command == "next":
            validator = None
            if not args.no_validator:
                from connectors.w3c.client import W3CValidatorClient

                validator = W3CValidatorClient()
            runner = RulesRunner(storage, validator=validator)
            result = runner.run_next_test(args.check_id, _parse_pairs(args.answer))
            print(json.dumps(result.model_dump(mode="json"), indent=2))
        elif args.command == "report":
            summary = RulesRunner(storage).summarize(args.check_id)
            if args.format == "md":
                print(_render_markdown(summary))
            else:
                print(json.dumps(summary.model_dump(mode="json"), indent=2))
        elif args.command == "delete":
            service.delete_check(args.check_id)
            print(f"Deleted {args.check_id}")
    except CheckError as exc:
        print(json.dumps({"code": exc.code, "message": str(exc)}), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

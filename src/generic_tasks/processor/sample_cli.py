from __future__ import annotations

import argparse
from typing import List, Optional
from logging import getLogger, basicConfig

from generic_tasks.processor.processor import TaskProcessor
from generic_tasks.tasks import TaskKind, default_registry


logger = getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="generic-tasks")

    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level",
    )

    sub = parser.add_subparsers(dest="kind", required=True)

    email = sub.add_parser(TaskKind.Email, help="simulate sending an email")
    email.add_argument("--message", required=True)
    email.add_argument("--recipient", required=True)

    report = sub.add_parser(TaskKind.Report, help="simulate generating a report")
    report.add_argument("--name", required=True, help="report name")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    basicConfig(level=args.log_level)

    registry = default_registry()
    if args.kind == TaskKind.Email:
        task = registry.create(
            args.kind, message=args.message, recipient=args.recipient
        )
    else:
        task = registry.create(args.kind, report_name=args.name)

    logger.info("running task kind=%s", args.kind)
    processor = TaskProcessor(task)
    print(processor.execute())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from rachaconta.config import get_settings
from rachaconta.logging import configure_logging, get_logger
from rachaconta.services.report import format_report, to_dot
from rachaconta.services.settlement import optimize
from rachaconta.services.split import build_debt_graph
from rachaconta.services.strategy import Strategy
from rachaconta.utils.parse import InputError, build_persons, parse_payment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rachaconta",
        description="Split a bill fairly: work out who pays whom after a series of shared expenses.",
    )
    parser.add_argument(
        "-p",
        "--people",
        type=int,
        metavar="NUMBER",
        dest="total_persons",
        help="total number of people splitting the bill, including those who paid nothing",
    )
    parser.add_argument(
        "-g",
        "--graphviz",
        action="store_true",
        help="print the settlement as a Graphviz DOT graph instead of the text report",
    )
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in Strategy],
        help="how to reduce the number of payments",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="fail instead of falling back when the optimized settlement does not balance",
    )
    parser.add_argument(
        "payments",
        nargs="+",
        metavar="NAME=VALUE",
        help='individual contributions, e.g. Rafael=50.00 Maria=30.50 "Ana Clara"=100',
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        for error in exc.errors():
            setting = ".".join(str(part) for part in error["loc"])
            print(f"error: invalid setting {setting}: {error['msg']}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)
    log = get_logger(__name__)

    try:
        payments = [parse_payment(token) for token in args.payments]
        persons = build_persons(payments, args.total_persons)
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"hint: {exc.hint}", file=sys.stderr)
        return 1

    log.info("cli.start", participants=len(persons))
    graph = build_debt_graph(persons)
    optimize(graph, args.strategy, strict=args.strict)

    if args.graphviz:
        print(to_dot(graph))
    else:
        print(format_report(graph))
    return 0


if __name__ == "__main__":
    sys.exit(main())

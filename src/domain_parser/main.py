from __future__ import annotations

import argparse
import sys

import structlog

from .config import settings
from .exceptions import ConfigurationError
from .grouping import group_by_registrable_domain
from .logging_config import setup_logging
from .output import JsonHandler, OutputHandler, StdoutHandler
from .parser import DomainParser

log = structlog.get_logger()


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="domain-parser",
        description="Split hostnames into public suffix, registrable domain and subdomains.",
    )
    p.add_argument("hosts", nargs="+", metavar="HOST")
    p.add_argument(
        "--lazy",
        action="store_true",
        help="scan the suffix list per lookup instead of loading it up front",
    )
    p.add_argument(
        "--suffix",
        action="append",
        default=[],
        metavar="RULE",
        help="extra suffix rule to seed (repeatable)",
    )
    p.add_argument(
        "--no-refresh",
        action="store_true",
        help="use the processed suffix file as is, never download",
    )
    p.add_argument("--json", action="store_true", help="emit one JSON document per line")
    p.add_argument(
        "--group",
        action="store_true",
        help="group hosts by registrable domain instead of printing each result",
    )
    return p


def run(args: argparse.Namespace) -> int:
    handler: OutputHandler = JsonHandler() if args.json else StdoutHandler()
    memory_cache = settings.memory_cache and not args.lazy

    try:
        parser = DomainParser(
            memory_cache=memory_cache,
            suffix_set=args.suffix,
            settings=settings,
            refresh=not args.no_refresh,
        )
        if args.group:
            groups = group_by_registrable_domain(
                args.hosts, parser.decomposer, keep_unmatched=True
            )
            handler.emit_groups(groups)
        else:
            for host in args.hosts:
                handler.emit_result(parser.parse(host))
    except ConfigurationError as e:
        log.error("configuration_error", error=str(e))
        print(f"domain-parser: {e}", file=sys.stderr)
        return 1

    log.info("run_complete", hosts=len(args.hosts), mode=parser.mode)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    setup_logging(settings.log_level, settings.log_json)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

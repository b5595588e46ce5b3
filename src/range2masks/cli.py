#!/usr/bin/env python3

# Print the TCAM entries that match start <= x <= end.
#
#   range2masks 10.0.0.5 10.0.1.200
#   range2masks 100 200 --optimize --format p4 -o s1-commands.txt

import argparse
import logging
import sys

from .coverage import verify
from .errors import Range2MasksError
from .numerals import parse_endpoint
from .render import format_selection
from .selector import Direct, select
from .split_range import convert
from .table_entries import (DEFAULT_ACTION, DEFAULT_DENY_ACTION, DEFAULT_TABLE,
                            TableWriter)

log = logging.getLogger("range2masks")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="range2masks",
        description="Convert an address range into ternary (pattern, mask) entries.")
    parser.add_argument("start", help="first address: decimal, 0x hex or dotted IPv4")
    parser.add_argument("end", help="last address: decimal, 0x hex or dotted IPv4")
    parser.add_argument("-O", "--optimize", action="store_true",
                        help="use reject 0-(start-1) + accept 0-end when it needs fewer entries")
    parser.add_argument("--format", choices=["text", "p4"], default="text",
                        help="plain entries or runtime_CLI table_add commands")
    parser.add_argument("--table", default=DEFAULT_TABLE, help="table name for p4 output")
    parser.add_argument("--action", default=DEFAULT_ACTION, help="accept action for p4 output")
    parser.add_argument("--deny-action", default=DEFAULT_DENY_ACTION, help="reject action for p4 output")
    parser.add_argument("--params", default="", help="action parameters for p4 output")
    parser.add_argument("--priority", type=int, default=1, help="priority of the first p4 entry")
    parser.add_argument("--check", action="store_true", help="verify every rule set covers its range")
    parser.add_argument("-o", default="-", help="path to the output file, - for stdout")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def setup_logging(verbose):
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=level,
        datefmt="%Y-%m-%d %H:%M:%S")


def run(args):
    start, start_ipv4 = parse_endpoint(args.start)
    end, end_ipv4 = parse_endpoint(args.end)
    if start > end:
        raise Range2MasksError(f"start {args.start} is above end {args.end}")

    if args.optimize:
        selection = select(start, end)
    else:
        selection = Direct(convert(start, end))
    log.info("%s with %d entries", type(selection).__name__, selection.count)

    if args.check:
        for action, rule_set in selection.rule_sets:
            verify(rule_set, rule_set.st, rule_set.end)
            log.info("%s %d - %d verified", action, rule_set.st, rule_set.end)

    if args.format == "p4":
        writer = TableWriter(args.table, args.action, args.deny_action, args.params, args.priority)
        return "\n".join(writer.commands(selection))
    return format_selection(selection, ipv4=start_ipv4 or end_ipv4)


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        text = run(args)
    except Range2MasksError as e:
        log.error("%s", e)
        return 1

    if args.o == "-":
        print(text)
    else:
        print("write output to", args.o, file=sys.stderr)
        with open(args.o, "w") as f:
            f.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

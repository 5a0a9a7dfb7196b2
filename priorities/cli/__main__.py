# SPDX-License-Identifier: AGPL-3.0-or-later
import argparse
import logging
import os
import sys

from priorities.cli import init_logging, run

# Defaults
PROG = 'priorities'
LOG_LEVEL = os.getenv('PRIORITIES_LOG_LEVEL', 'WARNING')


def opt_args(argv=None):
    parser = argparse.ArgumentParser(prog=PROG, description='Resolve candidate values against an HTTP priority header')
    parser.add_argument("header", help="header value, e.g. 'gzip;q=0.8, br'")
    parser.add_argument("candidates", nargs='*', metavar="CANDIDATE",
                        help="values to rank against the header")
    parser.add_argument("--all", dest='show_all', action='store_true', default=False,
                        help="also print candidates which are not accepted")
    parser.add_argument("--map", dest='show_map', action='store_true', default=False,
                        help="print the parsed header instead of ranking candidates")
    parser.add_argument("--log-level", dest='log_level', type=is_log_level, default=LOG_LEVEL,
                        help="log level (default: {})".format(LOG_LEVEL))

    return parser.parse_args(argv)


def is_log_level(level):
    if not isinstance(getattr(logging, level.upper(), None), int):
        raise argparse.ArgumentTypeError("is_log_level:{} is not a valid log level".format(level))
    return level


def main(args=None):
    """The main routine."""
    if args is None:
        args = opt_args()

    init_logging(args.log_level, log_timestamp=False)
    return run(args)


if __name__ == '__main__':
    sys.exit(main())

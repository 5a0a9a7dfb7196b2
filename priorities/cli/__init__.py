# SPDX-License-Identifier: AGPL-3.0-or-later
import logging
import sys

from priorities import parse_header, parse_priorities_for, priorities_for

try:
    import colorlog
    COLORLOG = True
except ImportError:
    COLORLOG = False


def init_logging(log_level, log_timestamp=True):
    """Send log records of the command line tool to stderr.

    Raises:
        ValueError: when log_level is not a logging level name.
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError('Invalid log level: %s' % log_level)

    fmt = '%(levelname)-8s %(message)s'
    if log_timestamp:
        fmt = '%(asctime)s ' + fmt

    if COLORLOG:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter('%(log_color)s' + fmt))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.addHandler(handler)

    # Send all warnings to logging.
    logging.captureWarnings(True)


def resolve(args):
    """Return the (token, quality) pairs to print for the parsed arguments."""
    if args.show_map:
        return list(parse_header(args.header).items())
    if args.show_all:
        return priorities_for(parse_header(args.header), args.candidates)
    return parse_priorities_for(args.header, args.candidates)


def run(args, out=None):
    out = out or sys.stdout

    result = resolve(args)
    logging.debug('resolved %d entries from header %r', len(result), args.header)
    for token, quality in result:
        out.write('{}\t{}\n'.format(token, quality))

    if args.candidates and not args.show_map and not any(quality > 0.0 for _, quality in result):
        logging.info('none of the candidates is accepted')
        return 1
    return 0

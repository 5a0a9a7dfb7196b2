# SPDX-License-Identifier: AGPL-3.0-or-later
import logging

from .grammar import (DEFAULT_QUALITY, INVALID_QUALITY, QUALITY_PARAM, QUALITY_VALUE,
                      VALID_HEADER_ITEM, WHITESPACE)


def parse_header(header):
    '''Parses a weighted preference header such as Accept-Encoding

       https://tools.ietf.org/html/rfc7231#section-5.3.1

       Items not matching the grammar are dropped. When a token is repeated,
       its last occurrence wins.

       Returns a dict mapping each token to its quality
    '''

    priorities = {}
    for header_item in header.strip(WHITESPACE).split(','):
        parsed = parse_header_item(header_item)
        if parsed is None:
            continue
        token, quality = parsed
        priorities[token] = quality

    return priorities


def parse_header_item(header_item):
    '''Parses a single comma-separated header item, e.g. "gzip;q=0.8"

       Returns a (token, quality) tuple or None when the item is invalid
    '''

    match = VALID_HEADER_ITEM.match(header_item)
    if not match:
        logging.debug("discarding invalid header item '%s'", header_item)
        return None

    token = match.group(1)
    params = match.group(2) or ''

    for param in params.split(';'):
        key, _, value = param.strip(WHITESPACE).partition('=')
        if key.strip(WHITESPACE) != QUALITY_PARAM:
            continue

        # First q wins, others are ignored.
        value = value.strip(WHITESPACE)
        if not QUALITY_VALUE.fullmatch(value):
            logging.debug("invalid quality value '%s' for token '%s'", value, token)
            return token, INVALID_QUALITY
        return token, float(value)

    return token, DEFAULT_QUALITY

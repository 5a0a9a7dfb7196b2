# SPDX-License-Identifier: AGPL-3.0-or-later
"""Parser for HTTP priority headers such as Accept-Encoding."""
from .match import priorities_for
from .parse import parse_header, parse_header_item

__all__ = (
    "parse_header",
    "parse_header_item",
    "parse_priorities_for",
    "priorities_for",
)


def parse_priorities_for(header, candidates):
    """Return the candidates accepted by header, with their quality.

    Candidates absent from the header, with a malformed quality or with
    q=0 are left out.
    """
    priorities = parse_header(header)
    return [(candidate, quality) for candidate, quality in priorities_for(priorities, candidates) if quality > 0.0]

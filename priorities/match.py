# SPDX-License-Identifier: AGPL-3.0-or-later
from .grammar import INVALID_QUALITY


def priorities_for(priorities, candidates):
    """Resolve the quality of each candidate.

    Lookup is by exact string equality, "*" is an ordinary token. Candidates
    missing from the map get the invalid quality instead of being omitted.

    Args:
        priorities (dict): token to quality mapping, see `parse_header`.
        candidates (iterable): values to rank, order and duplicates are kept.

    Returns:
        list: (candidate, quality) tuples in candidate order.
    """
    return [(candidate, priorities.get(candidate, INVALID_QUALITY)) for candidate in candidates]

# SPDX-License-Identifier: AGPL-3.0-or-later
"""Header item grammar and quality constants."""
import re

# token, optional ";"-prefixed parameter tail (only q is interpreted)
VALID_HEADER_ITEM = re.compile(r'^\s*([A-Za-z0-9/*-]+)\s*(?:;(.*))?\Z')

WHITESPACE = ' \t\n'

QUALITY_PARAM = 'q'

DEFAULT_QUALITY = 1.0

# Malformed q value, or candidate not mentioned in the header.
INVALID_QUALITY = -1.0

# ASCII decimal literal, inf or nan; no digit separators.
QUALITY_VALUE = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
    re.IGNORECASE,
)

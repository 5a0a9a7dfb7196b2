# SPDX-License-Identifier: AGPL-3.0-or-later
"""Falcon middleware resolving a priority header against known values."""
import logging

import falcon

from . import parse_priorities_for


class PriorityHeader:
    """Add the accepted values of a priority header to the request's context.

    Args:
        name (str): header name, e.g. Accept-Encoding.
        candidates (list): values the application can provide.
        required (bool): reject requests accepting none of the candidates.
            Defaults to False.
        attribute (str): context attribute to store the result in. Defaults
            to the lower-cased header name, e.g. accept_encoding.
    """

    def __init__(self, name, candidates, required=False, attribute=None):
        self.name = name
        self.candidates = list(candidates)
        self.required = required
        self.attribute = attribute or name.lower().replace('-', '_')

    def process_request(self, req, resp):
        """Built-in Falcon middleware method.

        Raises:
            HTTPNotAcceptable
        """
        header = req.get_header(self.name)
        accepted = parse_priorities_for(header, self.candidates) if header else []
        setattr(req.context, self.attribute, accepted)

        if self.required and not accepted:
            logging.debug("no acceptable value for %s header '%s'", self.name, header)
            raise falcon.HTTPNotAcceptable(
                description="{} must accept one of: {}".format(self.name, ', '.join(self.candidates))
            )

    def process_response(self, req, resp, resource, req_succeeded):
        """Built-in Falcon middleware method."""
        resp.append_header('Vary', self.name)

    def best(self, req):
        """Return the accepted candidate with the highest quality or None.

        The first candidate wins when qualities are equal.
        """
        best, best_quality = None, 0.0
        for candidate, quality in getattr(req.context, self.attribute, []):
            if quality > best_quality:
                best, best_quality = candidate, quality
        return best

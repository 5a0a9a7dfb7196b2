# SPDX-License-Identifier: AGPL-3.0-or-later

import falcon
import pytest
from falcon import testing

from priorities.middleware import PriorityHeader

ENCODINGS = ['gzip', 'br', 'identity']


class EncodingResource:
    def __init__(self, negotiation):
        self.negotiation = negotiation

    def on_get(self, req, resp):
        resp.media = {
            'accepted': [[value, quality] for value, quality in req.context.accept_encoding],
            'best': self.negotiation.best(req),
        }


def create_app(required=False):
    negotiation = PriorityHeader('Accept-Encoding', ENCODINGS, required=required)
    app = falcon.App(middleware=[negotiation])
    app.add_route('/encoding', EncodingResource(negotiation))
    return app


# https://falcon.readthedocs.io/en/stable/api/testing.html
@pytest.fixture(scope='module')
def client():
    return testing.TestClient(create_app())


@pytest.fixture(scope='module')
def strict_client():
    return testing.TestClient(create_app(required=True))

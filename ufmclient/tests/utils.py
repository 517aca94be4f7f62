#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import fixtures
import testtools


class BaseTestCase(testtools.TestCase):

    def setUp(self):
        super(BaseTestCase, self).setUp()
        self.useFixture(fixtures.FakeLogger())


class FakeAPI(object):
    """A REST transport replaying canned responses.

    fixtures maps a path to a dict of method -> response, where a
    response that is an exception instance is raised instead of returned.
    """

    def __init__(self, fixtures):
        self.fixtures = fixtures
        self.calls = []

    def _request(self, method, path, body=None):
        self.calls.append((method, path, body))
        response = self.fixtures[path][method]
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, path):
        return self._request('GET', path)

    def post(self, path, body):
        self._request('POST', path, body)

    def delete(self, path):
        self._request('DELETE', path)

#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""Base utilities to build API operation managers."""

from ufmclient import exc


class Manager(object):
    """Managers interact with a particular type of API resource.

    The manager holds nothing but the REST transport it was created
    with; every call builds fresh objects from the latest response.
    """

    def __init__(self, api):
        self.api = api

    def _get(self, path):
        try:
            return self.api.get(path)
        except exc.RestError as e:
            raise exc.from_rest_error(e)

    def _create(self, path, body):
        try:
            self.api.post(path, body)
        except exc.RestError as e:
            raise exc.from_rest_error(e)

    def _delete(self, path):
        try:
            self.api.delete(path)
        except exc.RestError as e:
            raise exc.from_rest_error(e)

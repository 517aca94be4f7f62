#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from ufmclient.common import base
from ufmclient import exc


class VersionManager(base.Manager):

    @staticmethod
    def _path():
        return '/ufmRest/app/ufm_version'

    def get(self):
        """Retrieve the release version of the fabric manager."""
        data = self._get(self._path())
        try:
            return data['ufm_release_version']
        except (KeyError, TypeError):
            raise exc.InvalidConfig(reason='invalid response')

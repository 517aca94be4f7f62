#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import collections

from ufmclient.common import base
from ufmclient.common import constants
from ufmclient import exc


Port = collections.namedtuple(
    'Port', ['guid', 'name', 'system_id', 'lid', 'dname', 'system_name',
             'physical_state', 'logical_state'])

# Port fields as named by the fabric manager
_WIRE_FIELDS = {'system_id': 'systemID'}


class Filter(object):
    """Select ports by GUID.

    A filter without GUIDs accepts every port.
    """

    def __init__(self, guids=None):
        self._guids = frozenset(guids) if guids is not None else None

    @property
    def guids(self):
        return self._guids

    @classmethod
    def from_bindings(cls, bindings):
        """Build a filter accepting only the ports of a partition."""
        return cls(b.guid for b in bindings)

    def valid(self, port):
        if self._guids is None:
            return True
        return port.guid in self._guids

    def __repr__(self):
        return "<Filter %s>" % (sorted(self._guids)
                                if self._guids is not None else 'any')


def _to_port(data):
    try:
        values = dict((f, data[_WIRE_FIELDS.get(f, f)])
                      for f in Port._fields)
        values['lid'] = int(values['lid'])
        return Port(**values)
    except (KeyError, TypeError, ValueError):
        raise exc.InvalidConfig(reason='invalid response')


class PortManager(base.Manager):

    @staticmethod
    def _path(sys_type=constants.SYS_TYPE_COMPUTER):
        return '/ufmRest/resources/ports?sys_type=%s' % sys_type

    def list(self, filter=None):
        """Retrieve the ports of all hosts.

        The fabric manager cannot list the ports of one partition, so
        all host ports are fetched and filter is applied locally.

        :param filter: optional Filter, all ports are returned without it
        """
        data = self._get(self._path())
        if not isinstance(data, list):
            raise exc.InvalidConfig(reason='invalid response')

        if filter is None:
            filter = Filter()
        return [port for port in (_to_port(d) for d in data)
                if filter.valid(port)]

#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import collections
import logging

from ufmclient.common import base
from ufmclient.common import constants
from ufmclient.common import pkey as pkey_utils
from ufmclient import exc

_logger = logging.getLogger(__name__)


QoS = collections.namedtuple(
    'QoS', ['mtu_limit', 'service_level', 'rate_limit'],
    defaults=(2048, 0, 100.0))


PortBinding = collections.namedtuple(
    'PortBinding', ['guid', 'index0', 'membership'],
    defaults=(False, constants.MEMBERSHIP_FULL))


class Partition(collections.namedtuple(
        'Partition', ['name', 'pkey', 'ipoib', 'qos', 'guids'])):
    """An InfiniBand partition and the ports bound to it.

    name is assigned by the fabric manager and is empty for a partition
    that has not been created yet; guids is a tuple of PortBinding.
    """
    __slots__ = ()

    def __new__(cls, name='', pkey=0, ipoib=False, qos=None, guids=()):
        return super(Partition, cls).__new__(
            cls, name, pkey, ipoib, qos if qos is not None else QoS(),
            tuple(guids))


def _invalid_response():
    return exc.InvalidConfig(reason='invalid response')


def _to_membership(value):
    membership = str(value).lower()
    if membership not in constants.MEMBERSHIPS:
        raise ValueError('unknown membership %s' % value)
    return membership


def _to_qos(data):
    return QoS(mtu_limit=int(data['mtu_limit']),
               service_level=int(data['service_level']),
               rate_limit=float(data['rate_limit']))


def _to_binding(data):
    return PortBinding(
        guid=data['guid'],
        index0=bool(data.get('index0', False)),
        membership=_to_membership(
            data.get('membership', constants.MEMBERSHIP_FULL)))


def _to_partition(pkey, data, guids):
    if not isinstance(data, dict) or not isinstance(guids, list):
        raise _invalid_response()
    try:
        return Partition(name=data['partition'],
                         pkey=pkey,
                         ipoib=bool(data['ip_over_ib']),
                         qos=_to_qos(data['qos_conf']),
                         guids=[_to_binding(g) for g in guids])
    except (KeyError, TypeError, ValueError):
        raise _invalid_response()


class PartitionManager(base.Manager):

    @staticmethod
    def _path(pkey=None):
        if pkey is not None:
            return '/ufmRest/resources/pkeys/%s' % pkey
        return '/ufmRest/resources/pkeys'

    @staticmethod
    def _binding_request(pkey, ipoib, bindings):
        try:
            pkey = pkey_utils.build_pkey(pkey)
            membership = constants.MEMBERSHIP_FULL
            index0 = True
            guids = []
            for binding in bindings:
                membership = _to_membership(binding.membership)
                index0 = bool(binding.index0)
                guids.append(str(binding.guid))
        except (AttributeError, ValueError):
            raise exc.InvalidConfig(reason='invalid partition')

        return {'pkey': pkey,
                'ip_over_ib': bool(ipoib),
                'membership': membership,
                'index0': index0,
                'guids': guids}

    def create(self, partition):
        """Create a partition and bind its ports.

        The request carries a single membership/index0 pair for all of
        the GUIDs. It is taken from the last binding in partition.guids,
        so per-binding values of the other bindings are not sent.

        :param partition: the Partition to create, its name is ignored
        """
        body = self._binding_request(partition.pkey, partition.ipoib,
                                     partition.guids)
        self._create(self._path(), body)

    def bind_ports(self, partition, bindings):
        """Add ports to an existing partition.

        As with create(), membership and index0 come from the last binding.
        """
        body = self._binding_request(partition.pkey, partition.ipoib,
                                     bindings)
        self._create(self._path(), body)

    def unbind_ports(self, pkey, guids):
        """Remove ports from a partition.

        :param pkey: the partition key as an integer
        :param guids: list of port GUIDs
        """
        try:
            body = {'pkey': pkey_utils.build_pkey(pkey),
                    'guids': [str(g) for g in guids]}
        except ValueError:
            raise exc.InvalidConfig(reason='invalid partition')
        self._create('/ufmRest/actions/remove_guids_from_pkey', body)

    def get(self, pkey):
        """Retrieve a partition with its QoS and port bindings.

        :param pkey: the partition key text, e.g. '0x7fff'
        """
        value = pkey_utils.parse_pkey(pkey)

        data = self._get(self._path(pkey) + '?guids_data=true&qos_conf=true')
        if not data:
            raise exc.NotFound(reason=pkey)
        if not isinstance(data, dict):
            raise _invalid_response()

        return _to_partition(value, data, data.get('guids') or [])

    def list(self):
        """Retrieve all partitions.

        QoS and port bindings are fetched by two separate requests, the
        result is not a consistent snapshot. Partitions missing from the
        QoS data are not listed.
        """
        qos_map = self._get(self._path() + '?qos_conf=true')
        guid_map = self._get(self._path() + '?guids_data=true')
        if not isinstance(qos_map, dict) or not isinstance(guid_map, dict):
            raise _invalid_response()

        partitions = []
        for key, data in qos_map.items():
            entry = guid_map.get(key) or {}
            if not isinstance(entry, dict):
                raise _invalid_response()
            partitions.append(_to_partition(pkey_utils.parse_pkey(key), data,
                                            entry.get('guids') or []))

        for key in guid_map:
            if key not in qos_map:
                _logger.debug("Partition %s has no QoS data, skipped", key)

        return partitions

    def delete(self, pkey):
        """Delete a partition.

        :param pkey: the partition key text, e.g. '0xa'
        """
        pkey_utils.parse_pkey(pkey)

        self._delete(self._path(pkey))

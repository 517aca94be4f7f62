#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import argparse
from collections import OrderedDict

from ufmclient.common import constants
from ufmclient.common import pkey as pkey_utils
from ufmclient.common import utils
from ufmclient.resources import partition as partition_utils
from ufmclient.resources import port as port_utils

FORMATS = ['table', 'yaml', 'value']


def _pkey_formatter(obj):
    return pkey_utils.build_pkey(obj.pkey)


def _print_partition_list(partitions, output_format=None):
    fields = ['name', 'pkey', 'ipoib', 'mtu_limit', 'rate_limit',
              'service_level', 'guids']
    labels = ['Name', 'Pkey', 'IPoIB', 'MTU', 'Rate', 'Level', 'GUIDs#']
    formatters = {'pkey': _pkey_formatter,
                  'mtu_limit': lambda p: p.qos.mtu_limit,
                  'rate_limit': lambda p: p.qos.rate_limit,
                  'service_level': lambda p: p.qos.service_level,
                  'guids': lambda p: len(p.guids)}
    utils.print_list(partitions, fields, labels, formatters=formatters,
                     sortby=None, output_format=output_format)


def _print_partition_show(partition, output_format=None):
    data = OrderedDict([('Name', partition.name),
                        ('Pkey', pkey_utils.build_pkey(partition.pkey)),
                        ('IPoIB', partition.ipoib),
                        ('MTU', partition.qos.mtu_limit),
                        ('Rate Limit', partition.qos.rate_limit),
                        ('Service Level', partition.qos.service_level)])
    if output_format == 'yaml':
        data = dict(data)
    utils.print_dict_with_format(data, output_format=output_format)


def _print_port_list(ports, output_format=None):
    fields = ['name', 'guid', 'system_id', 'system_name', 'dname', 'lid',
              'logical_state', 'physical_state']
    labels = ['Name', 'GUID', 'SystemID', 'SystemName', 'DName', 'LID',
              'LogState', 'PhyState']
    utils.print_list(ports, fields, labels, sortby=None,
                     output_format=output_format)


def _service_level(arg):
    try:
        level = int(arg)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid service level: %s' % arg)
    if level < 0 or level > constants.SERVICE_LEVEL_MAX:
        raise argparse.ArgumentTypeError('invalid service level: %s' % arg)
    return level


def _bindings(args):
    return [partition_utils.PortBinding(guid=g, index0=args.index0,
                                        membership=args.membership)
            for g in args.guids]


@utils.arg('-p', '--pkey', metavar='<pkey>', required=True,
           help="The pkey for the new partition, e.g. 0xa")
@utils.arg('--ipoib', metavar='<true/false>', type=utils.string_to_bool,
           default=True,
           help="Enable IP over InfiniBand (default: %(default)s)")
@utils.arg('--index0', metavar='<true/false>', type=utils.string_to_bool,
           default=True,
           help="Store the pkey at index 0 of the pkey table of the GUIDs "
                "(default: %(default)s)")
@utils.arg('-m', '--membership', choices=constants.MEMBERSHIPS,
           default=constants.MEMBERSHIP_FULL,
           help="Membership of the GUIDs (default: %(default)s)")
@utils.arg('-g', '--guids', metavar='<guid>', nargs='*', default=[],
           help="The GUIDs of the ports of the new partition")
@utils.arg('--mtu', type=int, choices=constants.MTU_LIMITS, default=2048,
           help="The MTU of the new partition (default: %(default)s)")
@utils.arg('--service-level', metavar='<level>', type=_service_level,
           default=0,
           help="The service level of the new partition, 0 to %d "
                "(default: %%(default)s)" % constants.SERVICE_LEVEL_MAX)
@utils.arg('--rate-limit', metavar='<rate>', type=float, default=100.0,
           help="The rate limit of the new partition "
                "(default: %(default)s)")
def do_create(cc, args):
    """Create a partition."""
    partition = partition_utils.Partition(
        pkey=pkey_utils.parse_pkey(args.pkey),
        ipoib=args.ipoib,
        qos=partition_utils.QoS(mtu_limit=args.mtu,
                                service_level=args.service_level,
                                rate_limit=args.rate_limit),
        guids=_bindings(args))
    cc.partition.create(partition)


@utils.arg('-p', '--pkey', metavar='<pkey>', required=True,
           help="The pkey of the partition to delete")
def do_delete(cc, args):
    """Delete a partition."""
    cc.partition.delete(args.pkey)


@utils.arg('--format', choices=FORMATS, default='table',
           help="Output format (default: %(default)s)")
def do_list(cc, args):
    """List all partitions."""
    partitions = cc.partition.list()
    _print_partition_list(partitions, output_format=args.format)


@utils.arg('-p', '--pkey', metavar='<pkey>', required=True,
           help="The pkey of the partition to view")
@utils.arg('--format', choices=FORMATS, default='table',
           help="Output format (default: %(default)s)")
def do_view(cc, args):
    """Show a partition and its ports."""
    partition = cc.partition.get(args.pkey)

    # The default partition holds every host, no need to filter
    if pkey_utils.is_default_pkey(partition.pkey):
        ports = cc.port.list()
    else:
        ports = cc.port.list(port_utils.Filter.from_bindings(partition.guids))

    _print_partition_show(partition, output_format=args.format)
    _print_port_list(ports, output_format=args.format)


@utils.arg('-p', '--pkey', metavar='<pkey>', required=True,
           help="The pkey of the partition")
@utils.arg('--ipoib', metavar='<true/false>', type=utils.string_to_bool,
           default=True,
           help="Enable IP over InfiniBand (default: %(default)s)")
@utils.arg('--index0', metavar='<true/false>', type=utils.string_to_bool,
           default=False,
           help="Store the pkey at index 0 of the pkey table of the GUIDs "
                "(default: %(default)s)")
@utils.arg('-m', '--membership', choices=constants.MEMBERSHIPS,
           default=constants.MEMBERSHIP_FULL,
           help="Membership of the GUIDs (default: %(default)s)")
@utils.arg('-g', '--guids', metavar='<guid>', nargs='+', required=True,
           help="The GUIDs of the ports to add")
def do_bind(cc, args):
    """Add ports to a partition."""
    partition = partition_utils.Partition(
        pkey=pkey_utils.parse_pkey(args.pkey), ipoib=args.ipoib)
    cc.partition.bind_ports(partition, _bindings(args))


@utils.arg('-p', '--pkey', metavar='<pkey>', required=True,
           help="The pkey of the partition")
@utils.arg('-g', '--guids', metavar='<guid>', nargs='+', required=True,
           help="The GUIDs of the ports to remove")
def do_unbind(cc, args):
    """Remove ports from a partition."""
    cc.partition.unbind_ports(pkey_utils.parse_pkey(args.pkey), args.guids)

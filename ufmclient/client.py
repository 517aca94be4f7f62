#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import collections

from ufmclient import exc
from ufmclient.resources import client as ufm_client


UFMConfig = collections.namedtuple(
    'UFMConfig',
    ['address', 'username', 'password', 'token', 'insecure', 'timeout',
     'ca_file'],
    defaults=(None, None, None, False, None, None))


def get_client(config):
    """Get a client for the fabric manager described by config.

    :param config: a UFMConfig; it is read once, here, and nothing in the
                   client looks anything up from the environment afterwards
    :raises exc.InvalidConfig: if the address or credentials are unusable
    """
    try:
        return ufm_client.Client(config.address,
                                 username=config.username,
                                 password=config.password,
                                 token=config.token,
                                 insecure=config.insecure,
                                 timeout=config.timeout,
                                 ca_file=config.ca_file)
    except exc.RestError as e:
        raise exc.from_rest_error(e)

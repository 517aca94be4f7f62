#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from ufmclient.common import http
from ufmclient.resources import partition
from ufmclient.resources import port
from ufmclient.resources import version


class Client(object):
    """Client for the UFM REST API.

    :param string endpoint: The UFM address, e.g. https://ufm.example.com
    :param string username: User for HTTP Basic authentication.
    :param string password: Password of the user.
    :param string token: Access token, used when no username is given.
    :param integer timeout: Allows customization of the timeout for client
                            http requests. (optional)
    """

    def __init__(self, *args, **kwargs):
        """Initialize a new client for the UFM REST API."""
        super(Client, self).__init__()
        self.http_client = http.construct_http_client(*args, **kwargs)

        self.partition = partition.PartitionManager(self.http_client)
        self.port = port.PortManager(self.http_client)
        self.version = version.VersionManager(self.http_client)

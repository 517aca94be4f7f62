#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import base64
import copy
import json
import logging
import socket
import ssl
from urllib.parse import urlparse

import httplib2
from oslo_utils import encodeutils
from oslo_utils import strutils

from ufmclient.common import constants
from ufmclient import exc as exceptions

_logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 600

# httplib2 retries requests on socket.timeout which
# is not idempotent and can lead to orphan objects.
httplib2.RETRIES = 1


class HTTPClient(httplib2.Http):
    """Handles the REST calls and responses, include authn.

    The client is configured once at construction and keeps no state
    between requests other than the underlying connections.
    """

    #################
    # INIT
    #################
    def __init__(self, endpoint, username=None, password=None, token=None,
                 timeout=None, insecure=False, ca_file=None, **kwargs):
        timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        super(HTTPClient, self).__init__(
            timeout=timeout, ca_certs=ca_file,
            disable_ssl_certificate_validation=bool(insecure))

        self.endpoint = endpoint
        self.base_url = self.get_base_url(endpoint)
        self.content_type = 'application/json'
        self.use_token = not username and bool(token)
        self.auth_header = self.get_auth_header(username, password, token)

    @staticmethod
    def get_base_url(endpoint):
        """Return 'scheme://host[:port]' for the configured address."""
        try:
            parts = urlparse(endpoint or '')
            hostname = parts.hostname
            port = parts.port
        except (TypeError, ValueError):
            raise exceptions.RestError(exceptions.REST_INVALID_CONFIG,
                                       'invalid UFM url')

        if not hostname:
            raise exceptions.RestError(exceptions.REST_INVALID_CONFIG,
                                       'invalid UFM host')

        # Only https is treated specially, any other scheme talks http
        scheme = 'https' if parts.scheme.lower() == 'https' else 'http'
        if ':' in hostname:
            hostname = '[%s]' % hostname
        if port:
            return '%s://%s:%s' % (scheme, hostname, port)
        return '%s://%s' % (scheme, hostname)

    @staticmethod
    def get_auth_header(username=None, password=None, token=None):
        if username:
            credentials = '%s:%s' % (username, password or '')
            encoded = base64.b64encode(credentials.encode('utf-8'))
            return 'Basic %s' % encoded.decode('ascii')
        if token:
            return 'Basic %s' % token
        raise exceptions.RestError(exceptions.REST_INVALID_CONFIG,
                                   'no UFM credentials')

    #################
    # REQUEST
    #################

    def http_log_req(self, method, url, headers, body=None):
        if not _logger.isEnabledFor(logging.DEBUG):
            return

        headers = copy.copy(headers)
        headers['Authorization'] = '***'
        string_parts = ['curl -i', '-X %s' % method, url]
        for (key, value) in sorted(headers.items()):
            string_parts.append('-H "%s: %s"' % (key, value))
        if body:
            string_parts.append("-d '%s'" % strutils.mask_password(body))
        _logger.debug("REQ: %s", ' '.join(string_parts))

    @staticmethod
    def http_log_resp(resp, body=None):
        if not _logger.isEnabledFor(logging.DEBUG):
            return

        _logger.debug("RESP:%(code)s %(headers)s %(body)s",
                      {'code': resp.status,
                       'headers': dict(resp.items()),
                       'body': body})

    def _cs_request(self, url, method, body=None):
        headers = {'Content-Type': self.content_type,
                   'Accept': self.content_type,
                   'Authorization': self.auth_header}

        self.http_log_req(method, url, headers, body)
        try:
            resp, content = self.request(url, method, body=body,
                                         headers=headers)
        except httplib2.ServerNotFoundError as e:
            raise exceptions.RestError(exceptions.REST_INVALID_CONFIG,
                                       str(e))
        except ssl.SSLError as e:
            raise exceptions.RestError(exceptions.REST_AUTH_FAILURE, str(e))
        except (socket.error, httplib2.HttpLib2Error) as e:
            # Wrap the low-level connection error (socket timeout, redirect
            # limit, decompression error, etc)
            _logger.debug("throwing RestError: %s", e)
            raise exceptions.RestError(exceptions.REST_UNKNOWN, str(e))

        body_str = encodeutils.safe_decode(content or b'', errors='replace')
        self.http_log_resp(resp, body_str)

        if resp.status >= 400:
            _logger.warning("Request %s %s returned failure status %s.",
                            method, url, resp.status)
            raise exceptions.from_response(
                resp, self._extract_error_message(body_str), method, url)

        return resp, body_str

    def _get_connection_url(self, path):
        # Token authenticated requests live in their own resource tree
        if self.use_token and path.startswith(constants.REST_ROOT):
            path = constants.REST_TOKEN_ROOT + path[len(constants.REST_ROOT):]
        return self.base_url + '/' + path.lstrip('/')

    def json_request(self, method, path, body=None):
        if body is not None:
            try:
                body = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise exceptions.RestError(exceptions.REST_INVALID_CONFIG,
                                           'invalid request body: %s' % e)

        return self._cs_request(self._get_connection_url(path), method,
                                body=body)

    def get(self, path):
        """Issue a GET and return the decoded JSON body."""
        resp, body = self.json_request('GET', path)
        try:
            return json.loads(body)
        except ValueError:
            _logger.error('Could not decode response body as JSON')
            raise exceptions.RestError(exceptions.REST_INVALID_CONFIG,
                                       'invalid response')

    def post(self, path, body):
        self.json_request('POST', path, body=body)

    def delete(self, path):
        self.json_request('DELETE', path)

    #################
    # UTILS
    #################
    @staticmethod
    def _extract_error_message(body):
        if not body:
            return ''
        try:
            body_json = json.loads(body)
        except ValueError:
            return body.strip()

        if isinstance(body_json, dict):
            for key in ('error', 'message', 'faultstring'):
                if body_json.get(key):
                    return str(body_json[key])
        return body.strip()


def construct_http_client(endpoint, **kwargs):
    return HTTPClient(endpoint, **kwargs)

#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import base64
import json
import logging
import socket
import ssl

import fixtures
import httplib2
import mock

from ufmclient.common import http
from ufmclient import exc
from ufmclient.tests import utils


def _response(status, body=b''):
    return (httplib2.Response({'status': str(status),
                               'content-type': 'application/json'}),
            body)


class HttpClientConfigTest(utils.BaseTestCase):

    def test_base_url(self):
        self.assertEqual('https://ufm.example.com',
                         http.HTTPClient.get_base_url(
                             'https://ufm.example.com'))
        self.assertEqual('http://10.0.0.1:8080',
                         http.HTTPClient.get_base_url('http://10.0.0.1:8080/'))
        self.assertEqual('https://[fd00::1]:443',
                         http.HTTPClient.get_base_url('HTTPS://[fd00::1]:443'))

    def test_base_url_unknown_scheme_is_http(self):
        self.assertEqual('http://ufm',
                         http.HTTPClient.get_base_url('ftp://ufm'))

    def test_base_url_invalid(self):
        for endpoint in ['', None, 'ufm.example.com', 'https://',
                         'https://ufm:port']:
            e = self.assertRaises(exc.RestError,
                                  http.HTTPClient.get_base_url, endpoint)
            self.assertEqual(exc.REST_INVALID_CONFIG, e.kind)

    def test_basic_auth_header(self):
        client = http.HTTPClient('https://ufm', username='admin',
                                 password='123456')
        expected = base64.b64encode(b'admin:123456').decode('ascii')
        self.assertEqual('Basic %s' % expected, client.auth_header)
        self.assertFalse(client.use_token)

    def test_token_auth_header(self):
        client = http.HTTPClient('https://ufm', token='abcdef')
        self.assertEqual('Basic abcdef', client.auth_header)
        self.assertTrue(client.use_token)
        self.assertEqual('https://ufm/ufmRestV3/resources/pkeys',
                         client._get_connection_url('/ufmRest/resources/pkeys'))

    def test_no_credentials(self):
        e = self.assertRaises(exc.RestError, http.HTTPClient, 'https://ufm')
        self.assertEqual(exc.REST_INVALID_CONFIG, e.kind)

    def test_connection_url(self):
        client = http.HTTPClient('https://ufm:443', username='admin',
                                 password='pw')
        self.assertEqual('https://ufm:443/ufmRest/resources/ports',
                         client._get_connection_url('/ufmRest/resources/ports'))


@mock.patch.object(httplib2.Http, 'request')
class HttpClientRequestTest(utils.BaseTestCase):

    def setUp(self):
        super(HttpClientRequestTest, self).setUp()
        self.client = http.HTTPClient('https://ufm.example.com',
                                      username='admin', password='123456')

    def test_get(self, mock_request):
        mock_request.return_value = _response(
            200, b'{"ufm_release_version": "6.10"}')
        body = self.client.get('/ufmRest/app/ufm_version')
        self.assertEqual({'ufm_release_version': '6.10'}, body)
        args, kwargs = mock_request.call_args
        self.assertEqual(('https://ufm.example.com/ufmRest/app/ufm_version',
                          'GET'), args)
        self.assertIsNone(kwargs['body'])
        self.assertEqual(self.client.auth_header,
                         kwargs['headers']['Authorization'])
        self.assertEqual('application/json',
                         kwargs['headers']['Content-Type'])

    def test_get_invalid_json(self, mock_request):
        mock_request.return_value = _response(200, b'<html></html>')
        e = self.assertRaises(exc.RestError, self.client.get, '/ufmRest/x')
        self.assertEqual(exc.REST_INVALID_CONFIG, e.kind)

    def test_post(self, mock_request):
        mock_request.return_value = _response(200)
        self.client.post('/ufmRest/resources/pkeys', {'pkey': '0xa'})
        args, kwargs = mock_request.call_args
        self.assertEqual('POST', args[1])
        self.assertEqual({'pkey': '0xa'}, json.loads(kwargs['body']))

    def test_post_unencodable_body(self, mock_request):
        e = self.assertRaises(exc.RestError, self.client.post,
                              '/ufmRest/resources/pkeys', {'pkey': object()})
        self.assertEqual(exc.REST_INVALID_CONFIG, e.kind)
        self.assertFalse(mock_request.called)

    def test_delete(self, mock_request):
        mock_request.return_value = _response(200)
        self.client.delete('/ufmRest/resources/pkeys/0xa')
        args, kwargs = mock_request.call_args
        self.assertEqual(
            ('https://ufm.example.com/ufmRest/resources/pkeys/0xa', 'DELETE'),
            args)

    def test_not_found(self, mock_request):
        mock_request.return_value = _response(404)
        e = self.assertRaises(exc.RestError, self.client.delete,
                              '/ufmRest/resources/pkeys/0xa')
        self.assertEqual(exc.REST_NOT_FOUND, e.kind)

    def test_unauthorized(self, mock_request):
        for status in (401, 403):
            mock_request.return_value = _response(status)
            e = self.assertRaises(exc.RestError, self.client.get,
                                  '/ufmRest/resources/pkeys')
            self.assertEqual(exc.REST_AUTH_FAILURE, e.kind)

    def test_server_error_message(self, mock_request):
        mock_request.return_value = _response(
            500, b'{"error": "pkey table is full"}')
        e = self.assertRaises(exc.RestError, self.client.post,
                              '/ufmRest/resources/pkeys', {})
        self.assertEqual(exc.REST_UNKNOWN, e.kind)
        self.assertEqual('pkey table is full', e.message)

    def test_server_not_found(self, mock_request):
        mock_request.side_effect = httplib2.ServerNotFoundError('no host')
        e = self.assertRaises(exc.RestError, self.client.get, '/ufmRest/x')
        self.assertEqual(exc.REST_INVALID_CONFIG, e.kind)

    def test_ssl_error(self, mock_request):
        mock_request.side_effect = ssl.SSLError('certificate verify failed')
        e = self.assertRaises(exc.RestError, self.client.get, '/ufmRest/x')
        self.assertEqual(exc.REST_AUTH_FAILURE, e.kind)

    def test_connection_error(self, mock_request):
        mock_request.side_effect = socket.timeout('timed out')
        e = self.assertRaises(exc.RestError, self.client.get, '/ufmRest/x')
        self.assertEqual(exc.REST_UNKNOWN, e.kind)

    def test_credentials_not_logged(self, mock_request):
        logger = self.useFixture(fixtures.FakeLogger(level=logging.DEBUG))
        mock_request.return_value = _response(200, b'{}')
        self.client.get('/ufmRest/resources/pkeys')
        self.assertNotIn(self.client.auth_header.split()[1], logger.output)
        self.assertIn('/ufmRest/resources/pkeys', logger.output)

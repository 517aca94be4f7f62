#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from ufmclient._i18n import _


class BaseException(Exception):
    """An error occurred."""
    def __init__(self, message=None):
        super(BaseException, self).__init__(message)
        self.message = message

    def __str__(self):
        return str(self.message or self.__class__.__doc__)


class CommandError(BaseException):
    """Invalid usage of CLI."""


# Failure kinds reported by the REST transport.
REST_UNKNOWN = 'Unknown'
REST_NOT_FOUND = 'NotFound'
REST_AUTH_FAILURE = 'AuthFailure'
REST_INVALID_CONFIG = 'InvalidConfig'

REST_ERROR_KINDS = (REST_UNKNOWN, REST_NOT_FOUND, REST_AUTH_FAILURE,
                    REST_INVALID_CONFIG)


class RestError(Exception):
    """A failure raised by the REST transport.

    The transport only classifies failures; callers of the library never
    see a RestError, managers translate it with from_rest_error().
    """

    _templates = {
        REST_UNKNOWN: '%s',
        REST_NOT_FOUND: "'%s' not found",
        REST_AUTH_FAILURE: "failed to auth '%s'",
        REST_INVALID_CONFIG: "invalid configuration '%s'",
    }

    def __init__(self, kind, message=''):
        if kind not in REST_ERROR_KINDS:
            raise ValueError('Unknown REST error kind: %s' % kind)
        super(RestError, self).__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return self._templates[self.kind] % self.message


# Map HTTP status codes to transport failure kinds, anything else at or
# above 400 is REST_UNKNOWN.
_status_map = {
    401: REST_AUTH_FAILURE,
    403: REST_AUTH_FAILURE,
    404: REST_NOT_FOUND,
}


def from_response(response, message=None, method=None, url=None):
    """Return a RestError based on an httplib2 response."""
    kind = _status_map.get(response.status, REST_UNKNOWN)
    if not message:
        if kind == REST_NOT_FOUND and url:
            message = url
        else:
            message = '%s %s (HTTP %s)' % (method or '', url or '',
                                            response.status)
    return RestError(kind, message.strip())


class UFMError(Exception):
    """Base UFM Client Exception

    To correctly use this class, inherit from it and define
    a 'message' property. That message will get printf'd
    with the keyword arguments provided to the constructor.

    """
    message = _("An unknown exception occurred.")

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs

        if not message:
            try:
                message = self.message % kwargs
            except KeyError:
                # kwargs doesn't match a variable in the message
                # at least get the core message out
                message = self.message

        super(UFMError, self).__init__(message)


class Unknown(UFMError):
    message = "%(reason)s"


class NotFound(UFMError):
    message = _("'%(reason)s' not found")


class InvalidPKey(UFMError):
    message = _("invalid pkey '%(pkey)s'")

    def __init__(self, pkey, message=None):
        super(InvalidPKey, self).__init__(message, pkey=pkey)
        self.pkey = pkey


class InvalidConfig(UFMError):
    message = _("invalid configuration '%(reason)s'")


# Every transport failure kind has exactly one domain exception.
# Credentials are a client configuration concern, so AuthFailure
# collapses into InvalidConfig.
_kind_map = {
    REST_UNKNOWN: Unknown,
    REST_NOT_FOUND: NotFound,
    REST_AUTH_FAILURE: InvalidConfig,
    REST_INVALID_CONFIG: InvalidConfig,
}


def from_rest_error(error):
    """Translate a RestError into the matching UFMError."""
    cls = _kind_map[error.kind]
    return cls(reason=error.message)

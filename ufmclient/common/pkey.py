#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""Partition key conversions.

A pkey travels as text, lower-case hex prefixed with ``0x`` (``0x7fff``),
and is handled by the library as an integer.
"""

import re

from ufmclient.common import constants
from ufmclient import exc

PKEY_MAX = 0x7fffffff

_HEX_RE = re.compile(r'[0-9a-fA-F]+\Z')


def build_pkey(pkey):
    """Build the canonical text form of a pkey, e.g. 10 -> '0xa'.

    :param pkey: the pkey as a non-negative 32-bit integer
    :raises ValueError: if pkey is not representable
    """
    if isinstance(pkey, bool) or not isinstance(pkey, int):
        raise ValueError('pkey must be an integer: %r' % (pkey,))
    if pkey < 0 or pkey > PKEY_MAX:
        raise ValueError('pkey out of range: %r' % pkey)
    return '0x%x' % pkey


def parse_pkey(pkey):
    """Parse the text form of a pkey.

    The ``0x`` prefix is optional and hex digits are case-insensitive,
    so '0x7fff', '0X7FFF' and '7fff' all give 0x7fff.

    :raises exc.InvalidPKey: if pkey is not a 32-bit hex number
    """
    if not isinstance(pkey, str):
        raise exc.InvalidPKey(pkey)

    digits = pkey
    if digits[:2] in ('0x', '0X'):
        digits = digits[2:]

    if not _HEX_RE.match(digits):
        raise exc.InvalidPKey(pkey)

    value = int(digits, 16)
    if value > PKEY_MAX:
        raise exc.InvalidPKey(pkey)
    return value


def is_default_pkey(pkey):
    return pkey == constants.DEFAULT_PKEY

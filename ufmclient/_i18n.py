#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""oslo.i18n integration module.

See https://docs.openstack.org/oslo.i18n/latest/user/usage.html

"""

import oslo_i18n

DOMAIN = 'python-ufmclient'

_translators = oslo_i18n.TranslatorFactory(domain=DOMAIN)

# The primary translation function using the well-known name "_"
_ = _translators.primary


def get_available_languages():
    return oslo_i18n.get_available_languages(DOMAIN)

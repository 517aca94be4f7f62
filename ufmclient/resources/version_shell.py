#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#


def do_version(cc, args):
    """Show the version of UFM."""
    print(cc.version.get())

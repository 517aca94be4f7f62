#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

# The default (management) partition, it implicitly contains all hosts
DEFAULT_PKEY = 0x7fff

# Port membership
MEMBERSHIP_FULL = 'full'
MEMBERSHIP_LIMITED = 'limited'
MEMBERSHIPS = [MEMBERSHIP_FULL, MEMBERSHIP_LIMITED]

# Partition QoS
MTU_LIMITS = [2048, 4096]
SERVICE_LEVEL_MAX = 15

# Ports of hosts, as opposed to switches and gateways
SYS_TYPE_COMPUTER = 'Computer'

# REST resource trees
REST_ROOT = '/ufmRest/'
REST_TOKEN_ROOT = '/ufmRestV3/'

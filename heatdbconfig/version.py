#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

HEATDBCONFIG_VERSION = '1.0.0'


def version_string():
    return HEATDBCONFIG_VERSION

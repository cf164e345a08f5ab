#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from heatdbconfig.common import constants
from heatdbconfig.resolver import base


class HeatDbResolver(base.BaseDbResolver):
    """Class to encapsulate the database configuration of heat"""

    SERVICE_NAME = constants.SERVICE_NAME_HEAT

    DEFAULTS = {
        'database_connection': constants.HEAT_DATABASE_CONNECTION,
        'database_idle_timeout': constants.HEAT_DATABASE_IDLE_TIMEOUT,
        'database_min_pool_size': constants.HEAT_DATABASE_MIN_POOL_SIZE,
        'database_max_retries': constants.HEAT_DATABASE_MAX_RETRIES,
        'database_retry_interval': constants.HEAT_DATABASE_RETRY_INTERVAL,
        'sync_db': constants.HEAT_SYNC_DB,
    }

#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

# Services
SERVICE_NAME_HEAT = 'heat'

# Configuration file sections
DATABASE_SECTION = 'database'

# Database parameter names, as emitted under the database section
DATABASE_PARAM_CONNECTION = 'connection'
DATABASE_PARAM_IDLE_TIMEOUT = 'idle_timeout'
DATABASE_PARAM_MIN_POOL_SIZE = 'min_pool_size'
DATABASE_PARAM_MAX_RETRIES = 'max_retries'
DATABASE_PARAM_RETRY_INTERVAL = 'retry_interval'

DATABASE_PARAMS = [
    DATABASE_PARAM_CONNECTION,
    DATABASE_PARAM_IDLE_TIMEOUT,
    DATABASE_PARAM_MIN_POOL_SIZE,
    DATABASE_PARAM_MAX_RETRIES,
    DATABASE_PARAM_RETRY_INTERVAL,
]

DATABASE_SECRET_PARAMS = [
    DATABASE_PARAM_CONNECTION,
]

# Accepted database backends: sqlite, mysql, mysql+pymysql, postgresql
DATABASE_CONNECTION_PATTERN = \
    r'^(sqlite|mysql(\+pymysql)?|postgresql):\/\/(\S+:\S+@\S+\/\S+)?'

# Heat database defaults
HEAT_DATABASE_CONNECTION = 'sqlite:////var/lib/heat/heat.sqlite'
HEAT_DATABASE_IDLE_TIMEOUT = '3600'
HEAT_DATABASE_MIN_POOL_SIZE = '1'
HEAT_DATABASE_MAX_RETRIES = '10'
HEAT_DATABASE_RETRY_INTERVAL = '10'
HEAT_SYNC_DB = True

HEAT_CONFIG_FILE = '/etc/heat/heat.conf'
HEAT_MANAGE_COMMAND = 'heat-manage'
HEAT_USER = 'heat'

HIERADATA_PERMDIR = '/tmp/hieradata'

# Secret value redaction
SECRET_VALUE_MASK = '****'

# OS families
OS_RELEASE_FILE = '/etc/os-release'
OS_FAMILY_DEBIAN = 'Debian'
OS_FAMILY_REDHAT = 'RedHat'

SUPPORTED_OS_FAMILIES = [OS_FAMILY_DEBIAN, OS_FAMILY_REDHAT]

OS_FAMILY_IDS = {
    'debian': OS_FAMILY_DEBIAN,
    'ubuntu': OS_FAMILY_DEBIAN,
    'rhel': OS_FAMILY_REDHAT,
    'centos': OS_FAMILY_REDHAT,
    'fedora': OS_FAMILY_REDHAT,
    'rocky': OS_FAMILY_REDHAT,
    'almalinux': OS_FAMILY_REDHAT,
}

#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from oslo_config import cfg

from heatdbconfig.common import constants
from heatdbconfig.common import exception
from heatdbconfig import version

heat_db_group = cfg.OptGroup('heat_db',
                             title='Heat database options',
                             help="""
Parameters of the heat database section. The values are written verbatim
to the [database] section of the heat configuration file.
""")

heat_db_opts = [
    cfg.StrOpt('database_connection',
               default=constants.HEAT_DATABASE_CONNECTION,
               secret=True,
               help='SQLAlchemy connection string used to connect to the '
                    'heat database. Must use one of the sqlite, mysql, '
                    'mysql+pymysql or postgresql schemes.'),
    cfg.StrOpt('database_idle_timeout',
               default=constants.HEAT_DATABASE_IDLE_TIMEOUT,
               help='Timeout before idle SQL connections are reaped.'),
    cfg.StrOpt('database_min_pool_size',
               default=constants.HEAT_DATABASE_MIN_POOL_SIZE,
               help='Minimum number of SQL connections to keep open in a '
                    'pool.'),
    cfg.StrOpt('database_max_retries',
               default=constants.HEAT_DATABASE_MAX_RETRIES,
               help='Maximum number of database connection retries during '
                    'startup.'),
    cfg.StrOpt('database_retry_interval',
               default=constants.HEAT_DATABASE_RETRY_INTERVAL,
               help='Interval between retries of opening a database '
                    'connection.'),
    cfg.BoolOpt('sync_db',
                default=constants.HEAT_SYNC_DB,
                help='Run the heat database sync after configuring.'),
]

heat_opts = [
    cfg.StrOpt('heat_config_file',
               default=constants.HEAT_CONFIG_FILE,
               help='Path of the heat configuration file to update.'),
    cfg.StrOpt('heat_manage_command',
               default=constants.HEAT_MANAGE_COMMAND,
               help='Command used to run the heat database sync.'),
    cfg.StrOpt('heat_user',
               default=constants.HEAT_USER,
               help='System user the heat database sync runs as. An empty '
                    'value runs the sync as the current user.'),
    cfg.StrOpt('hieradata_dir',
               default=constants.HIERADATA_PERMDIR,
               help='Directory the hieradata files are written to.'),
]

CONF = cfg.CONF
CONF.register_group(heat_db_group)
CONF.register_opts(heat_db_opts, group=heat_db_group)
CONF.register_opts(heat_opts)


def parse_args(argv, default_config_files=None):
    cfg.CONF(argv[1:],
             project='heatdbconfig',
             version=version.version_string(),
             default_config_files=default_config_files)


def list_opts():
    return [
        (heat_db_group, heat_db_opts),
        (None, heat_opts + exception.exc_log_opts),
    ]

#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import getpass

from oslo_log import log as logging

from heatdbconfig.common import constants
from heatdbconfig.common import exception
from heatdbconfig.common import utils

LOG = logging.getLogger(__name__)


class DbSync(object):
    """Run the heat database schema synchronization"""

    def __init__(self, config_file=constants.HEAT_CONFIG_FILE,
                 user=constants.HEAT_USER,
                 command=constants.HEAT_MANAGE_COMMAND,
                 service=constants.SERVICE_NAME_HEAT):
        self.config_file = config_file
        self.user = user
        self.command = command
        self.service = service

    def get_command(self):
        cmd = [self.command, '--config-file', self.config_file, 'db_sync']
        if self.user and self.user != getpass.getuser():
            cmd = ['sudo', '-u', self.user] + cmd
        return cmd

    def run(self):
        cmd = self.get_command()
        LOG.info("Running %s database sync: %s", self.service, ' '.join(cmd))
        try:
            utils.execute(*cmd, check_exit_code=0)
        except (exception.ProcessExecutionError, OSError) as e:
            # command output is only logged on failure
            LOG.error("%s database sync failed: %s",
                      self.service, utils.mask_output(str(e)))
            raise exception.DbSyncFailed(service=self.service,
                                         reason=utils.mask_output(str(e)))
        LOG.info("%s database sync completed", self.service)

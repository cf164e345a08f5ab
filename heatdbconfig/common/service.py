#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from oslo_config import cfg
from oslo_log import log as logging

from heatdbconfig.common import config


def prepare_service(argv=None, default_config_files=None):
    if argv is None:
        argv = []
    logging.register_options(cfg.CONF)
    config.parse_args(argv, default_config_files=default_config_files)
    logging.setup(cfg.CONF, 'heatdbconfig')

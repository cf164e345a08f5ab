#!/usr/bin/env python
#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#


"""
Heat Database Configuration Utility.
"""

import sys

from oslo_config import cfg
from oslo_log import log as logging

from heatdbconfig.common import exception
from heatdbconfig.common import service
from heatdbconfig.common import utils
from heatdbconfig import hiera
from heatdbconfig.resolver import base
from heatdbconfig.resolver import heat
from heatdbconfig import sync
from heatdbconfig import writer

CONF = cfg.CONF
LOG = logging.getLogger(__name__)


def _resolve():
    resolver = heat.HeatDbResolver()
    params = base.ConfigParameters.from_conf(CONF)
    return resolver, resolver.resolve(params)


def resolve_action():
    _, output = _resolve()
    for entry in output:
        print("%s = %s" % (entry.key, entry.display_value))
    print("sync_db = %s" % output.should_sync)


def apply_action(path=None):
    os_family = utils.get_os_family()
    LOG.info("Applying %s database configuration on %s platform",
             heat.HeatDbResolver.SERVICE_NAME, os_family)

    path = path or CONF.heat_config_file
    resolver, output = _resolve()
    writer.HeatConfigWriter(path).write(output)

    if output.should_sync:
        sync.DbSync(config_file=path,
                    user=CONF.heat_user,
                    command=CONF.heat_manage_command).run()
    else:
        LOG.info("Skipping %s database sync", resolver.SERVICE_NAME)


def hieradata_action(path=None):
    resolver, output = _resolve()
    hiera.HieraWriter(path or CONF.hieradata_dir).write(resolver, output)


def add_action_parsers(subparsers):
    parser = subparsers.add_parser('resolve')
    parser.set_defaults(func=resolve_action)

    parser = subparsers.add_parser('apply')
    parser.set_defaults(func=apply_action)
    parser.add_argument('path', nargs='?')

    parser = subparsers.add_parser('hieradata')
    parser.set_defaults(func=hieradata_action)
    parser.add_argument('path', nargs='?')


CONF.register_cli_opt(
    cfg.SubCommandOpt('action',
                      title='actions',
                      help='Perform the heat database configuration '
                           'operation',
                      handler=add_action_parsers))


def main(argv=None):
    if argv is None:
        argv = sys.argv
    service.prepare_service(argv)
    CONF.log_opt_values(LOG, logging.DEBUG)

    try:
        if CONF.action.name == 'resolve':
            CONF.action.func()
        else:
            CONF.action.func(CONF.action.path)
    except exception.HeatDbConfigException as e:
        LOG.error("%s failed: %s", CONF.action.name, e.format_message())
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

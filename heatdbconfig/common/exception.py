#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""heatdbconfig base exception handling.

Every exception raised on purpose by this package derives from
HeatDbConfigException and carries a printf-style ``message`` template
that is formatted with the keyword arguments given to the constructor.

"""

from oslo_config import cfg
from oslo_log import log as logging
from heatdbconfig._i18n import _

LOG = logging.getLogger(__name__)

exc_log_opts = [
    cfg.BoolOpt('fatal_exception_format_errors',
                default=False,
                help='make exception message format errors fatal'),
]

CONF = cfg.CONF
CONF.register_opts(exc_log_opts)


class ProcessExecutionError(IOError):
    def __init__(self, stdout=None, stderr=None, exit_code=None, cmd=None,
                 description=None):
        self.exit_code = exit_code
        self.stderr = stderr
        self.stdout = stdout
        self.cmd = cmd
        self.description = description

        if description is None:
            description = _('Unexpected error while running command.')
        if exit_code is None:
            exit_code = '-'
        message = (_('%(description)s\nCommand: %(cmd)s\n'
                     'Exit code: %(exit_code)s\nStdout: %(stdout)r\n'
                     'Stderr: %(stderr)r') %
                   {'description': description, 'cmd': cmd,
                    'exit_code': exit_code, 'stdout': stdout,
                    'stderr': stderr})
        IOError.__init__(self, message)


class HeatDbConfigException(Exception):
    """Base heatdbconfig Exception

    To correctly use this class, inherit from it and define
    a 'message' property. That message will get printf'd
    with the keyword arguments provided to the constructor.

    """
    message = _("An unknown exception occurred.")
    code = 500

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs

        if 'code' not in self.kwargs:
            self.kwargs['code'] = self.code

        if not message:
            try:
                message = self.message % kwargs

            except Exception:
                # kwargs doesn't match a variable in the message
                # log the issue and the kwargs
                LOG.exception(_('Exception in string format operation'))
                for name, value in kwargs.items():
                    LOG.error("%s: %s" % (name, value))

                if CONF.fatal_exception_format_errors:
                    raise
                else:
                    # at least get the core message out if something happened
                    message = self.message

        super(HeatDbConfigException, self).__init__(message)

    def format_message(self):
        return str(self)


class Invalid(HeatDbConfigException):
    message = _("Unacceptable parameters.")
    code = 400


class InvalidConnectionString(Invalid):
    message = _("Invalid database_connection '%(connection)s': "
                "value does not match validate_re pattern %(pattern)s")


class InvalidParameterValue(Invalid):
    message = _("Invalid value for %(name)s: '%(value)s'")


class UnsupportedOsFamily(Invalid):
    message = _("Unsupported OS family %(os_family)s, expected one of: "
                "%(supported)s")


class DbSyncFailed(HeatDbConfigException):
    message = _("Database sync for %(service)s failed: %(reason)s")

#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import abc
import collections

from oslo_log import log as logging
from oslo_utils import strutils

from heatdbconfig.common import constants
from heatdbconfig.common import exception
from heatdbconfig.common import utils

LOG = logging.getLogger(__name__)

PARAMETER_FIELDS = [
    'database_connection',
    'database_idle_timeout',
    'database_min_pool_size',
    'database_max_retries',
    'database_retry_interval',
    'sync_db',
]


class ConfigParameters(collections.namedtuple('ConfigParameters',
                                              PARAMETER_FIELDS)):
    """Database parameters of a service.

    Fields left as None take the defaults of the resolver they are
    given to.
    """
    __slots__ = ()

    def __new__(cls, database_connection=None, database_idle_timeout=None,
                database_min_pool_size=None, database_max_retries=None,
                database_retry_interval=None, sync_db=None):
        return super(ConfigParameters, cls).__new__(
            cls, database_connection, database_idle_timeout,
            database_min_pool_size, database_max_retries,
            database_retry_interval, sync_db)

    @classmethod
    def from_conf(cls, conf, group='heat_db'):
        """Build the parameters from an oslo.config option group"""
        section = getattr(conf, group)
        return cls(**dict((field, getattr(section, field))
                          for field in PARAMETER_FIELDS))


class ConfigEntry(collections.namedtuple('ConfigEntry',
                                         ['key', 'value', 'secret'])):
    """A single 'section/name' configuration assignment"""
    __slots__ = ()

    @property
    def section(self):
        return self.key.split('/', 1)[0]

    @property
    def name(self):
        return self.key.split('/', 1)[1]

    @property
    def display_value(self):
        if self.secret:
            return constants.SECRET_VALUE_MASK
        return self.value


class ConfigOutput(object):
    """Ordered configuration entries and the database sync decision"""

    __slots__ = ('_entries', '_should_sync')

    def __init__(self, entries, should_sync):
        self._entries = tuple(entries)
        self._should_sync = bool(should_sync)

    @property
    def entries(self):
        return self._entries

    @property
    def should_sync(self):
        return self._should_sync

    def __eq__(self, other):
        if not isinstance(other, ConfigOutput):
            return NotImplemented
        return (self.entries, self.should_sync) == \
            (other.entries, other.should_sync)

    def __hash__(self):
        return hash((self.entries, self.should_sync))

    def __repr__(self):
        return 'ConfigOutput(entries=%r, should_sync=%r)' % (
            self.entries, self.should_sync)

    def __iter__(self):
        return iter(self.entries)

    def get(self, key, default=None):
        for entry in self.entries:
            if entry.key == key:
                return entry
        return default

    def secret_keys(self):
        return [entry.key for entry in self.entries if entry.secret]


class BaseDbResolver(object, metaclass=abc.ABCMeta):
    """Base class to resolve the database section of a service"""

    SERVICE_NAME = None
    SECTION = constants.DATABASE_SECTION
    CONNECTION_PATTERN = constants.DATABASE_CONNECTION_PATTERN

    @property
    @abc.abstractmethod
    def DEFAULTS(self):
        """Mapping of every ConfigParameters field to its default"""

    def resolve(self, params=None):
        """Resolve the parameters into the service configuration entries.

        :param params: ConfigParameters, a dict of its fields, or None
                       for the service defaults
        :raises exception.InvalidConnectionString: if the connection
                string does not use an accepted database backend
        :returns: ConfigOutput
        """
        params = self.get_parameters(params)
        self._validate_connection(params.database_connection)

        entries = tuple(
            self._format_entry(name, getattr(params, 'database_%s' % name))
            for name in constants.DATABASE_PARAMS)
        output = ConfigOutput(entries, params.sync_db)

        LOG.debug("Resolved %s %s configuration: %s (sync_db=%s)",
                  self.SERVICE_NAME, self.SECTION,
                  ', '.join('%s=%s' % (e.key, e.display_value)
                            for e in entries),
                  output.should_sync)
        return output

    def get_parameters(self, params=None):
        """Return the parameters with the unset fields defaulted"""
        if params is None:
            params = ConfigParameters()
        elif isinstance(params, dict):
            params = ConfigParameters(**params)

        values = {}
        for field in PARAMETER_FIELDS:
            value = getattr(params, field)
            if value is None:
                value = self.DEFAULTS[field]
            values[field] = value

        sync_db = values['sync_db']
        if not isinstance(sync_db, bool):
            try:
                values['sync_db'] = strutils.bool_from_string(sync_db,
                                                              strict=True)
            except ValueError:
                raise exception.InvalidParameterValue(name='sync_db',
                                                      value=sync_db)
        return ConfigParameters(**values)

    def get_hiera_config(self, output):
        """Return the (config, secure_config) hieradata of an output"""
        config = {}
        secure_config = {}
        for entry in output:
            key = '%s::db::database_%s' % (self.SERVICE_NAME, entry.name)
            if entry.secret:
                secure_config[key] = entry.value
            else:
                config[key] = entry.value
        config['%s::db::sync_db' % self.SERVICE_NAME] = output.should_sync
        return config, secure_config

    def _validate_connection(self, connection):
        if not utils.validate_re(connection, self.CONNECTION_PATTERN):
            raise exception.InvalidConnectionString(
                connection=utils.mask_connection(connection),
                pattern=self.CONNECTION_PATTERN)

    def _format_entry(self, name, value):
        return ConfigEntry('%s/%s' % (self.SECTION, name),
                           str(value),
                           name in constants.DATABASE_SECRET_PARAMS)

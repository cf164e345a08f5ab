#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import os

from oslo_log import log as logging
import yaml

LOG = logging.getLogger(__name__)


class quoted_str(str):
    pass


# force strings to be single-quoted to avoid interpretation as numeric values
def quoted_presenter(dumper, data):
    return dumper.represent_scalar(u'tag:yaml.org,2002:str', data, style="'")


yaml.add_representer(quoted_str, quoted_presenter)


class HieraWriter(object):
    """Persist resolved configuration entries as puppet hieradata

    Secret keys are written to a separate '<name>_secure.yaml' file that
    is only readable by its owner.
    """

    SECURE_FILE_MODE = 0o600

    def __init__(self, path):
        self.path = path

    def write(self, resolver, output):
        config, secure_config = resolver.get_hiera_config(output)
        name = resolver.SERVICE_NAME

        if not os.path.isdir(self.path):
            os.makedirs(self.path)

        self._write_config(name, config)
        self._write_config(name + '_secure', secure_config,
                           mode=self.SECURE_FILE_MODE)

    def _write_config(self, name, config, mode=None):
        filename = name + '.yaml'
        filepath = os.path.join(self.path, filename)
        data = dict((key, self._quote(value))
                    for key, value in config.items())
        try:
            fd = os.open(filepath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                         mode or 0o644)
            if mode is not None:
                # O_CREAT leaves the mode of an existing file untouched
                os.fchmod(fd, mode)
            with os.fdopen(fd, 'w') as f:
                yaml.dump(data, f, default_flow_style=False)
        except Exception:
            LOG.exception("failed to write config file: %s" % filepath)
            raise
        LOG.info("Wrote hieradata %s (%d keys)", filepath, len(data))

    @staticmethod
    def _quote(value):
        if isinstance(value, str):
            return quoted_str(value)
        return value

#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

from oslo_log import log as logging

from heatdbconfig.common import utils

LOG = logging.getLogger(__name__)


class HeatConfigWriter(object):
    """Persist resolved configuration entries into an ini file

    Each entry is written as 'name = value' under its section; comments
    and unrelated keys of the file are kept as they are.
    """

    def __init__(self, path):
        self.path = path

    def write(self, output):
        """Apply the entries of a ConfigOutput to the file.

        :returns: True if the file content changed
        """
        values_to_update = []
        for entry in output:
            LOG.info("Setting %s in %s to %s",
                     entry.key, self.path, entry.display_value)
            values_to_update.append({'section': entry.section,
                                     'key': entry.name,
                                     'value': entry.value})

        changed = utils.update_config_file(self.path, values_to_update)
        if changed:
            LOG.info("Updated %s", self.path)
        else:
            LOG.info("%s already up to date", self.path)
        return changed

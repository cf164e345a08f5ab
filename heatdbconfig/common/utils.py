#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""Utilities and helper functions."""

import os
import random
import re
import signal
import subprocess
import time

from oslo_log import log as logging
from oslo_utils import strutils

from heatdbconfig._i18n import _
from heatdbconfig.common import constants
from heatdbconfig.common import exception

LOG = logging.getLogger(__name__)

# The password runs up to the last '@' before the host.
_CONNECTION_CREDENTIALS_RE = re.compile(r'(://[^:/@\s]+:)(\S+)(@)')


def _subprocess_setup():
    # Python installs a SIGPIPE handler by default. This is usually not what
    # non-Python subprocesses expect.
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)


def execute(*cmd, **kwargs):
    """Helper method to execute command with optional retry.

    :param cmd:                Passed to subprocess.Popen.
    :param process_input:      Send to opened process.
    :param check_exit_code:    Single bool, int, or list of allowed exit
                               codes.  Defaults to [0].  Raise
                               exception.ProcessExecutionError unless
                               program exits with one of these code.
    :param delay_on_retry:     True | False. Defaults to True. If set to
                               True, wait a short amount of time
                               before retrying.
    :param attempts:           How many times to retry cmd.
    :param timeout             Passed to subprocess.communicate.
                               timeout in seconds (integer value)
                               Defaults to None

    :raises exception.HeatDbConfigException: on receiving unknown arguments
    :raises exception.ProcessExecutionError:

    :returns: a tuple, (stdout, stderr) from the spawned process.
    """
    process_input = kwargs.pop('process_input', None)
    check_exit_code = kwargs.pop('check_exit_code', [0])
    ignore_exit_code = False
    if isinstance(check_exit_code, bool):
        ignore_exit_code = not check_exit_code
        check_exit_code = [0]
    elif isinstance(check_exit_code, int):
        check_exit_code = [check_exit_code]
    delay_on_retry = kwargs.pop('delay_on_retry', True)
    attempts = kwargs.pop('attempts', 1)
    timeout = kwargs.pop('timeout', None)
    if timeout:
        try:
            timeout = int(timeout)
        except ValueError:
            raise exception.HeatDbConfigException(
                _("Invalid value for timeout: [%s]. "
                  "Please use a valid integer.") % timeout)

    if len(kwargs):
        raise exception.HeatDbConfigException(_('Got unknown keyword args '
                                                'to utils.execute: %r')
                                              % kwargs)

    cmd = [str(c) for c in cmd]

    while attempts > 0:
        attempts -= 1
        try:
            LOG.debug('Running cmd (subprocess): %s', ' '.join(cmd))
            obj = subprocess.Popen(cmd,
                                   stdin=subprocess.PIPE,
                                   stdout=subprocess.PIPE,
                                   stderr=subprocess.PIPE,
                                   close_fds=True,
                                   preexec_fn=_subprocess_setup)
            stdout, stderr = obj.communicate(process_input, timeout=timeout)
            LOG.debug('Result was %s', obj.returncode)
            stdout = os.fsdecode(stdout)
            stderr = os.fsdecode(stderr)
            if not ignore_exit_code and obj.returncode not in check_exit_code:
                raise exception.ProcessExecutionError(
                    exit_code=obj.returncode,
                    stdout=stdout,
                    stderr=stderr,
                    cmd=' '.join(cmd))
            return stdout, stderr
        except (exception.ProcessExecutionError, OSError,
                subprocess.TimeoutExpired):
            if not attempts:
                raise
            LOG.debug('%r failed. Retrying.', cmd)
            if delay_on_retry:
                time.sleep(random.randint(20, 200) / 100.0)


def mask_connection(connection):
    """Replace the password of a database connection URL with a mask.

    sqlite paths and URLs without credentials are returned unchanged.
    """
    if not connection:
        return connection
    return _CONNECTION_CREDENTIALS_RE.sub(
        r'\g<1>%s\g<3>' % constants.SECRET_VALUE_MASK, str(connection))


def mask_output(output):
    """Mask passwords in free-form command output before logging it."""
    return mask_connection(strutils.mask_password(output))


def validate_re(value, pattern):
    """Return True if the value matches the pattern from its start."""
    if value is None:
        return False
    return re.match(pattern, str(value)) is not None


def _get_key_from_file(file_contents, key):
    """Return the value of a KEY=value line, quotes stripped, or ''."""
    r = re.compile(r'^{}=[\'"]*([^\'"\n]*)'.format(key), re.MULTILINE)
    match = r.search(file_contents)
    if match:
        return match.group(1)
    return ''


def get_os_family(release_file=constants.OS_RELEASE_FILE):
    """Return the OS family of the host from its os-release file.

    The ID entry is looked up first, then every entry of ID_LIKE.

    :param release_file: file to read from
    :raises exception.HeatDbConfigException: if the file can't be read
    :raises exception.UnsupportedOsFamily: if the family is not supported
    :return: one of constants.SUPPORTED_OS_FAMILIES
    """
    try:
        with open(release_file, 'r') as f:
            data = f.read()
    except (IOError, OSError) as e:
        raise exception.HeatDbConfigException(_(
            "Failed to open %(file)s : %(error)s") %
            {'file': release_file, 'error': str(e)})

    os_id = _get_key_from_file(data, 'ID').lower()
    if not os_id:
        raise exception.HeatDbConfigException(_(
            "Could not determine os type from %s") % release_file)

    candidates = [os_id] + _get_key_from_file(data, 'ID_LIKE').lower().split()
    for candidate in candidates:
        family = constants.OS_FAMILY_IDS.get(candidate)
        if family is not None:
            return family

    raise exception.UnsupportedOsFamily(
        os_family=os_id,
        supported=', '.join(constants.SUPPORTED_OS_FAMILIES))


def update_config_file(config_filepath, values_to_update):
    """Update a config file with the desired information

    :param config_filepath: Path of the config file, created when missing
    :param values_to_update: List of dicts with the following format
        values_to_update = [
            {'section': '<section-name1>', 'key': '<key1>', 'value': 'value1'},
            {'section': '<section-name2>', 'key': '<key2>', 'value': 'value2'},
        ]
    :returns: True if the file content was changed
    Note: configparser from the std library doesn't preserve comments
          when writing to a file, so the lines are edited in place.
    """
    if os.path.exists(config_filepath):
        with open(config_filepath, 'r') as f:
            original = f.readlines()
    else:
        original = []
    lines = list(original)

    for value_to_update in values_to_update:
        section = value_to_update['section']
        key = value_to_update['key']
        value = value_to_update['value']

        if not (section and key) or value is None:
            raise exception.HeatDbConfigException(_(
                "Invalid config to update: neither section, key or value "
                "can be blank. Provided section=%(section)s, key=%(key)s") %
                {'section': section, 'key': key})

        key_value = "%s = %s\n" % (key, value)
        current_section = None
        sections_list = []
        line_index_to_update = None
        line_index_to_insert = None
        section_end = None

        for list_index, line in enumerate(lines):
            stripped = line.strip()
            if stripped.startswith('['):
                if current_section == section:
                    # Leaving the desired section
                    section_end = list_index
                    break
                current_section = stripped.strip('[]')
                sections_list.append(current_section)
                continue
            if current_section != section:
                continue
            if stripped.startswith('#'):
                if '=' not in stripped:
                    continue
                # Commented example value, e.g. "#connection = <None>"
                current_key = stripped.lstrip('# ').split('=')[0].strip()
                if current_key == key and line_index_to_insert is None:
                    line_index_to_insert = list_index + 1
            elif stripped:
                current_key = stripped.split('=')[0].strip()
                if current_key == key:
                    line_index_to_update = list_index
                    break

        if line_index_to_update is not None:
            lines[line_index_to_update] = key_value
        elif line_index_to_insert is not None:
            lines.insert(line_index_to_insert, key_value)
        elif section in sections_list:
            if section_end is None:
                section_end = len(lines)
            # Append after the last non-blank line of the section
            while section_end > 0 and not lines[section_end - 1].strip():
                section_end -= 1
            if section_end and not lines[section_end - 1].endswith('\n'):
                lines[section_end - 1] += '\n'
            lines.insert(section_end, key_value)
        else:
            # Desired section does not exist, create it at the end of the file
            if lines and not lines[-1].endswith('\n'):
                lines[-1] += '\n'
            lines.append('[%s]\n' % section)
            lines.append(key_value)

    if lines == original:
        return False

    directory = os.path.dirname(config_filepath)
    if directory and not os.path.isdir(directory):
        os.makedirs(directory)
    with open(config_filepath, 'w') as f:
        f.writelines(lines)
    return True

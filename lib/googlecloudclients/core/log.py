# -*- coding: utf-8 -*- #
# Copyright 2013 Google Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Module with logging related functionality for the client libraries.

Log records go through the googlecloudclients logger of the standard logging
module to a stderr handler whose level is the active verbosity. The root logger
is never touched, so host applications keep their own logging configuration.
User facing output goes through the out, err and status writers, which can be
turned off with SetUserOutputEnabled().
"""

import logging
import sys

from googlecloudclients.core import properties

DEFAULT_VERBOSITY = logging.WARNING
DEFAULT_VERBOSITY_STRING = 'warning'
DEFAULT_USER_OUTPUT_ENABLED = True

_VERBOSITY_LEVELS = [
    ('debug', logging.DEBUG),
    ('info', logging.INFO),
    ('warning', logging.WARNING),
    ('error', logging.ERROR),
    ('critical', logging.CRITICAL),
    ('none', logging.CRITICAL + 10)]
VALID_VERBOSITY_STRINGS = dict(_VERBOSITY_LEVELS)


def _PropertyOrDefault(getter, default):
  """Returns getter(), or default if it is unset or cannot be read.

  Logging setup runs at import time, so an unreadable properties file must not
  stop the package from loading. The error still surfaces on the next explicit
  property Get().

  Args:
    getter: func(), Reads the property value.
    default: The value to use instead.

  Returns:
    The property value or default.
  """
  try:
    value = getter()
  except properties.Error:
    return default
  return default if value is None else value


class _ConsoleWriter(object):
  """A minimal file-like object for user output.

  Writes go to the wrapped stream only while user output is enabled. They are
  always recorded at INFO level on the file only logger.
  """

  def __init__(self, manager, stream_name):
    """Creates a new _ConsoleWriter.

    Args:
      manager: _LogManager, The manager holding the streams and settings.
      stream_name: str, 'stdout' or 'stderr'.
    """
    self._manager = manager
    self._stream_name = stream_name

  @property
  def stream(self):
    return getattr(self._manager, self._stream_name)

  @property
  def encoding(self):
    return getattr(self.stream, 'encoding', None)

  def Print(self, *msg):
    """Writes the given message and a newline, like the print builtin.

    Args:
      *msg: The objects to print, separated by spaces.
    """
    self.write(' '.join(str(x) for x in msg) + '\n')

  # pylint: disable=g-bad-name, This must match file-like objects
  def write(self, msg):
    self._manager.file_only_logger.info(msg)
    if self._manager.user_output_enabled:
      self.stream.write(msg)

  # pylint: disable=g-bad-name, This must match file-like objects
  def flush(self):
    if self._manager.user_output_enabled:
      self.stream.flush()

  def isatty(self):
    isatty = getattr(self.stream, 'isatty', None)
    return bool(isatty and isatty())


class _ConsoleFormatter(logging.Formatter):
  """Formats records as LEVEL: message, with colored levels on terminals."""

  LEVEL = '%(levelname)s:'
  MESSAGE = ' %(message)s'
  DEFAULT_FORMAT = LEVEL + MESSAGE

  RED = '\033[1;31m'
  YELLOW = '\033[1;33m'
  END = '\033[0m'

  COLOR_FORMATS = {
      logging.WARNING: YELLOW + LEVEL + END + MESSAGE,
      logging.ERROR: RED + LEVEL + END + MESSAGE,
      logging.CRITICAL: RED + LEVEL + MESSAGE + END,
  }

  def __init__(self, out_stream):
    super(_ConsoleFormatter, self).__init__(_ConsoleFormatter.DEFAULT_FORMAT)
    isatty = getattr(out_stream, 'isatty', None)
    self._use_color = (
        bool(isatty and isatty()) and
        not sys.platform.startswith('win') and
        not _PropertyOrDefault(properties.VALUES.core.disable_color.GetBool,
                               False))

  def format(self, record):
    fmt = _ConsoleFormatter.DEFAULT_FORMAT
    if self._use_color:
      fmt = _ConsoleFormatter.COLOR_FORMATS.get(record.levelno, fmt)
    self._style = logging.PercentStyle(fmt)
    self._fmt = fmt
    return super(_ConsoleFormatter, self).format(record)


class _LogManager(object):
  """Owns the package logger, its console handler and user output settings."""

  LOGGER_NAME = 'googlecloudclients'
  FILE_ONLY_LOGGER_NAME = LOGGER_NAME + '.___FILE_ONLY___'

  def __init__(self):
    # The console handler writes the records, so they do not also reach the
    # handlers of the host application's root logger.
    self.logger = logging.getLogger(_LogManager.LOGGER_NAME)
    self.logger.propagate = False

    self.file_only_logger = logging.getLogger(
        _LogManager.FILE_ONLY_LOGGER_NAME)
    self.file_only_logger.setLevel(logging.DEBUG)
    self.file_only_logger.propagate = False

    self.stdout = None
    self.stderr = None
    self.stdout_writer = _ConsoleWriter(self, 'stdout')
    self.stderr_writer = _ConsoleWriter(self, 'stderr')

    self.verbosity = None
    self.user_output_enabled = None
    self.stderr_handler = None
    self.Reset(sys.stdout, sys.stderr)

  def Reset(self, stdout, stderr):
    """Points output at the given streams and reloads the settings."""
    if self.stderr_handler in self.logger.handlers:
      self.logger.removeHandler(self.stderr_handler)

    self.stdout = stdout
    self.stderr = stderr

    self.stderr_handler = logging.StreamHandler(stderr)
    self.stderr_handler.setFormatter(_ConsoleFormatter(stderr))
    self.logger.addHandler(self.stderr_handler)

    self.file_only_logger.handlers[:] = [logging.NullHandler()]

    self.verbosity = None
    self.SetVerbosity(None)
    self.SetUserOutputEnabled(None)

  def SetVerbosity(self, verbosity):
    """Sets the level of the package logger and its console handler.

    Args:
      verbosity: int, A logging level. If None, core/verbosity or the default
        is used.

    Returns:
      int, The previous verbosity.
    """
    if verbosity is None:
      verbosity_string = _PropertyOrDefault(
          properties.VALUES.core.verbosity.Get, '')
      verbosity = VALID_VERBOSITY_STRINGS.get(verbosity_string.lower())
    if verbosity is None:
      verbosity = DEFAULT_VERBOSITY

    old_verbosity = self.verbosity
    self.verbosity = verbosity
    self.logger.setLevel(verbosity)
    self.stderr_handler.setLevel(verbosity)
    return old_verbosity

  def SetUserOutputEnabled(self, enabled):
    """Turns user output on or off.

    Args:
      enabled: bool, If None, core/user_output_enabled or the default is used.

    Returns:
      bool, The previous setting.
    """
    if enabled is None:
      enabled = _PropertyOrDefault(
          properties.VALUES.core.user_output_enabled.GetBool,
          DEFAULT_USER_OUTPUT_ENABLED)

    old_enabled = self.user_output_enabled
    self.user_output_enabled = enabled
    return old_enabled


_log_manager = _LogManager()

# Writes to stdout while user output is enabled.
out = _log_manager.stdout_writer

# Writes to stderr while user output is enabled.
err = _log_manager.stderr_writer

# For progress and resource change messages.
status = err

# A logger that never writes to the console.
file_only_logger = _log_manager.file_only_logger


def Print(*msg):
  """Writes the given message to the output stream, and adds a newline."""
  out.Print(*msg)


def Reset(stdout=None, stderr=None):
  """Reinitializes the logging system, mainly for use between tests.

  Verbosity and user output settings are reloaded from properties.

  Args:
    stdout: The file-like object to use for stdout. Defaults to sys.stdout.
    stderr: The file-like object to use for stderr. Defaults to sys.stderr.
  """
  _log_manager.Reset(stdout or sys.stdout, stderr or sys.stderr)


def SetVerbosity(verbosity):
  """Sets the console verbosity and returns the previous one.

  Args:
    verbosity: int, A logging level. If None, core/verbosity or the default
      is used.

  Returns:
    int, The previous verbosity.
  """
  return _log_manager.SetVerbosity(verbosity)


def GetVerbosity():
  return _log_manager.verbosity


def GetVerbosityName(verbosity=None):
  """Returns the name of verbosity, or of the current verbosity if None."""
  if verbosity is None:
    verbosity = GetVerbosity()
  for name, num in _VERBOSITY_LEVELS:
    if verbosity == num:
      return name
  return None


def OrderedVerbosityNames():
  """Gets all the valid verbosity names from most verbose to least verbose."""
  return [name for name, _ in _VERBOSITY_LEVELS]


def SetUserOutputEnabled(enabled):
  """Turns user output on or off and returns the previous setting."""
  return _log_manager.SetUserOutputEnabled(enabled)


def IsUserOutputEnabled():
  return _log_manager.user_output_enabled


def _PrintResourceChange(operation, resource, kind, is_async, details, failed,
                         operation_past_tense=None):
  """Prints a status message for operation on resource.

  Success messages go to the status writer and are hidden when user output
  is disabled. Failure messages are logged as errors.

  Args:
    operation: str, The operation verb, e.g. create.
    resource: str, The resource name.
    kind: str, The resource kind (topic, subscription, entity, etc.).
    is_async: bool, True if the operation is still in progress.
    details: str, Extra details appended to the message.
    failed: str, The failure message, if the operation failed.
    operation_past_tense: str, The past tense of operation. Defaults to
      operation + 'd'.
  """
  if failed:
    msg = ['Failed to', operation]
  elif is_async:
    msg = [operation.capitalize(), 'in progress for']
  else:
    msg = [(operation_past_tense or operation + 'd').capitalize()]

  if kind:
    msg.append(kind)
  msg.append('[{0}]'.format(resource))
  if details:
    msg.append(details)
  if failed:
    msg[-1] += ':'
    msg.append(failed)
  period = '' if msg[-1].endswith('.') else '.'
  writer = error if failed else status.Print
  writer(' '.join(msg) + period)


def CreatedResource(resource, kind=None, is_async=False, details=None,
                    failed=None):
  """Prints a status message indicating that a resource was created."""
  _PrintResourceChange('create', resource, kind, is_async, details, failed)


def DeletedResource(resource, kind=None, is_async=False, details=None,
                    failed=None):
  """Prints a status message indicating that a resource was deleted."""
  _PrintResourceChange('delete', resource, kind, is_async, details, failed)


def UpdatedResource(resource, kind=None, is_async=False, details=None,
                    failed=None):
  """Prints a status message indicating that a resource was updated."""
  _PrintResourceChange('update', resource, kind, is_async, details, failed)


# pylint: disable=invalid-name
# There are simple redirects to the package logger as a convenience.
logger = _log_manager.logger
debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception

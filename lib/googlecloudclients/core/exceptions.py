# -*- coding: utf-8 -*- #
# Copyright 2025 Google LLC. All Rights Reserved.
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
"""Base exceptions for the Cloud client libraries."""

import sys


class _Error(Exception):
  """A base exception for all user recoverable errors.

  Any exception that extends this class will not be printed with a stack trace
  when surfaced to an end user. Instead, only the message of the exception
  will be shown.
  """

  def __init__(self, *args, **kwargs):
    super(_Error, self).__init__(*args)
    self.exit_code = kwargs.get('exit_code', 1)


class Error(_Error):
  """A base exception for all errors raised by this package."""


def reraise(exc_value, tb=None):
  """Re-raises exc_value with the traceback of the exception being handled.

  Args:
    exc_value: Exception, The exception to raise.
    tb: traceback, The traceback to attach. Defaults to the traceback of the
      exception currently being handled.

  Raises:
    exc_value: always.
  """
  if tb is None:
    tb = sys.exc_info()[2]
  raise exc_value.with_traceback(tb)

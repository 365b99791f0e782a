# -*- coding: utf-8 -*- #
# Copyright 2016 Google Inc. All Rights Reserved.
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
"""Base classes for all tests."""

import io
import os
import shutil
import tempfile
import unittest

from googlecloudclients.core import log
from googlecloudclients.core import properties


class Base(unittest.TestCase):
  """Base class for all tests.

  Every test gets an empty configuration directory, an environment without
  CLOUDSDK_* variables and logging captured into in-memory streams. Subclasses
  override SetUp() and TearDown() instead of setUp() and tearDown().
  """

  def setUp(self):
    self.temp_path = tempfile.mkdtemp()
    self.addCleanup(shutil.rmtree, self.temp_path, True)

    self._original_environ = dict(os.environ)
    self.addCleanup(self._RestoreEnviron)
    for name in list(os.environ):
      if name.startswith('CLOUDSDK_'):
        del os.environ[name]
    os.environ[properties.CONFIG_DIR_ENV_VAR] = self.temp_path
    properties.ActivePropertiesFile.Invalidate()
    self.addCleanup(properties.ActivePropertiesFile.Invalidate)

    invocation_depth = len(properties.VALUES.GetInvocationStack())
    self.addCleanup(self._RestoreInvocationStack, invocation_depth)

    self.stdout = io.StringIO()
    self.stderr = io.StringIO()
    log.Reset(self.stdout, self.stderr)
    self.addCleanup(log.Reset)

    self.PreSetUp()
    self.SetUp()

  def tearDown(self):
    self.TearDown()

  def PreSetUp(self):
    """Runs after the environment is isolated and before SetUp()."""

  def SetUp(self):
    pass

  def TearDown(self):
    pass

  def _RestoreEnviron(self):
    os.environ.clear()
    os.environ.update(self._original_environ)

  def _RestoreInvocationStack(self, depth):
    stack = properties.VALUES.GetInvocationStack()
    while len(stack) > depth:
      properties.VALUES.PopInvocationValues()
    stack[-1].clear()

  def WriteProperties(self, contents):
    """Writes contents to the properties file of this test."""
    with open(properties.PropertiesFilePath(), 'w') as f:
      f.write(contents)
    properties.ActivePropertiesFile.Invalidate()

  def GetOutput(self):
    return self.stdout.getvalue()

  def GetErr(self):
    return self.stderr.getvalue()

  def AssertOutputEquals(self, expected):
    self.assertEqual(expected, self.GetOutput())

  def AssertErrEquals(self, expected):
    self.assertEqual(expected, self.GetErr())

  def AssertErrContains(self, expected):
    self.assertIn(expected, self.GetErr())

  def AssertErrNotContains(self, expected):
    self.assertNotIn(expected, self.GetErr())


class WithProject(Base):
  """A test that has core/project set to a known value."""

  PROJECT = 'fake-project'

  def PreSetUp(self):
    properties.VALUES.core.project.Set(self.PROJECT)


main = unittest.main

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
"""Tests for Datastore entity keys."""

from googlecloudclients.api_lib.datastore import key as key_lib
from googlecloudclients.api_lib.datastore import util
from tests.lib import test_case


class KeyTest(test_case.Base):

  def SetUp(self):
    self.messages = util.GetMessages()

  def testIdAndName(self):
    by_id = key_lib.Key('Task', 42)
    self.assertEqual(42, by_id.id)
    self.assertIsNone(by_id.name)
    by_name = key_lib.Key('Task', 'sample')
    self.assertEqual('sample', by_name.name)
    self.assertIsNone(by_name.id)
    self.assertEqual('sample', by_name.id_or_name)

  def testIncomplete(self):
    key = key_lib.Key('Task')
    self.assertFalse(key.is_complete)
    self.assertIsNone(key.id_or_name)
    self.assertTrue(key_lib.Key('Task', 0).is_complete)

  def testInvalidKeys(self):
    with self.assertRaises(key_lib.InvalidKeyError):
      key_lib.Key('')
    with self.assertRaises(key_lib.InvalidKeyError):
      key_lib.Key('Task', True)
    with self.assertRaises(key_lib.InvalidKeyError):
      key_lib.Key('Task', 1.5)
    with self.assertRaises(key_lib.InvalidKeyError):
      key_lib.Key('Task', 1, parent='TaskList')

  def testParentPathAndPartition(self):
    parent = key_lib.Key('TaskList', 'default', project='p', namespace='ns')
    key = key_lib.Key('Task', 7, parent=parent)
    self.assertEqual([('TaskList', 'default'), ('Task', 7)], key.path)
    self.assertEqual('p', key.project)
    self.assertEqual('ns', key.namespace)

  def testToMessage(self):
    parent = key_lib.Key('TaskList', 'default', project='p')
    key = key_lib.Key('Task', 7, parent=parent)
    self.assertEqual(
        self.messages.Key(
            partitionId=self.messages.PartitionId(projectId='p'),
            path=[self.messages.PathElement(kind='TaskList', name='default'),
                  self.messages.PathElement(kind='Task', id=7)]),
        key.ToMessage(self.messages))

  def testToMessageWithoutPartition(self):
    msg = key_lib.Key('Task', 'a').ToMessage(self.messages)
    self.assertIsNone(msg.partitionId)

  def testFromMessage(self):
    msg = self.messages.Key(
        partitionId=self.messages.PartitionId(projectId='p', namespaceId='ns'),
        path=[self.messages.PathElement(kind='TaskList', name='default'),
              self.messages.PathElement(kind='Task', id=7)])
    key = key_lib.Key.FromMessage(msg)
    self.assertEqual(
        key_lib.Key('Task', 7,
                    parent=key_lib.Key('TaskList', 'default', project='p',
                                       namespace='ns')),
        key)
    self.assertIsNone(key_lib.Key.FromMessage(self.messages.Key()))

  def testEqualityAndHash(self):
    a = key_lib.Key('Task', 1, project='p')
    b = key_lib.Key('Task', 1, project='p')
    c = key_lib.Key('Task', 1, project='q')
    self.assertEqual(a, b)
    self.assertEqual(hash(a), hash(b))
    self.assertNotEqual(a, c)
    self.assertEqual(1, len({a, b}))

  def testRepr(self):
    self.assertEqual("Key('User', 'username', project='p')",
                     repr(key_lib.Key('User', 'username', project='p')))


if __name__ == '__main__':
  test_case.main()

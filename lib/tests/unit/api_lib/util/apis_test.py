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
"""Tests for the API client lookup helpers."""

from googlecloudclients.api_lib.util import apis
from googlecloudclients.core import properties
from googlecloudclients.third_party.apis import apis_map
from googlecloudclients.third_party.apis.datastore.v1 import datastore_v1_client
from googlecloudclients.third_party.apis.pubsub.v1 import pubsub_v1_client
from googlecloudclients.third_party.apis.pubsub.v1 import pubsub_v1_messages
from tests.lib import test_case


class ApisTest(test_case.Base):

  def testGetClientClass(self):
    self.assertIs(pubsub_v1_client.PubsubV1,
                  apis.GetClientClass('pubsub', 'v1'))
    self.assertIs(datastore_v1_client.DatastoreV1,
                  apis.GetClientClass('datastore', 'v1'))

  def testGetMessagesModule(self):
    self.assertIs(pubsub_v1_messages, apis.GetMessagesModule('pubsub', 'v1'))

  def testUnknownApi(self):
    with self.assertRaisesRegex(apis.UnknownAPIError, r'\[bigtable\]'):
      apis.GetClientClass('bigtable', 'v1')

  def testUnknownVersion(self):
    with self.assertRaisesRegex(apis.UnknownVersionError,
                                r'\[pubsub\] API does not have version '
                                r'\[v1beta2\]'):
      apis.GetMessagesModule('pubsub', 'v1beta2')

  def testVersions(self):
    self.assertEqual(['v1'], apis.GetVersions('datastore'))
    self.assertEqual('v1', apis.ResolveVersion('pubsub'))
    self.assertEqual('v2', apis.ResolveVersion('pubsub', 'v2'))

  def testGetApiDef(self):
    api_def = apis.GetApiDef('pubsub', 'v1')
    self.assertEqual(apis_map.MAP['pubsub']['v1'], api_def)
    self.assertNotEqual(apis_map.MAP['datastore']['v1'], api_def)
    self.assertEqual('googlecloudclients.third_party.apis.pubsub.v1.'
                     'pubsub_v1_client.PubsubV1', api_def.client_full_classpath)
    self.assertIn('pubsub_v1_messages', repr(api_def))

  def testDefaultEndpoint(self):
    self.assertEqual('https://pubsub.googleapis.com/',
                     apis.GetEffectiveApiEndpoint('pubsub', 'v1'))
    client = apis.GetClientInstance('pubsub', 'v1', no_http=True)
    self.assertEqual('https://pubsub.googleapis.com/', client.url)

  def testEndpointOverride(self):
    properties.VALUES.api_endpoint_overrides.pubsub.Set(
        'http://localhost:8085/')
    self.assertEqual('http://localhost:8085/',
                     apis.GetEffectiveApiEndpoint('pubsub', 'v1'))
    self.assertEqual('https://datastore.googleapis.com/',
                     apis.GetEffectiveApiEndpoint('datastore', 'v1'))
    client = apis.GetClientInstance('pubsub', 'v1', no_http=True)
    self.assertEqual('http://localhost:8085/', client.url)

  def testEndpointOverrideFromPropertiesFile(self):
    self.WriteProperties(
        '[api_endpoint_overrides]\ndatastore = http://localhost:8081/\n')
    self.assertEqual('http://localhost:8081/',
                     apis.GetEffectiveApiEndpoint('datastore', 'v1'))

  def testInvalidEndpointOverride(self):
    with self.assertRaises(properties.InvalidValueError):
      properties.VALUES.api_endpoint_overrides.pubsub.Set('localhost:8085')


if __name__ == '__main__':
  test_case.main()

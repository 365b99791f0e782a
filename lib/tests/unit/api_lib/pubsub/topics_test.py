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
"""Tests for the Cloud Pub/Sub topics client."""

from apitools.base.py.testing import mock
from googlecloudclients.api_lib.pubsub import topics
from googlecloudclients.api_lib.util import apis
from googlecloudclients.api_lib.util import exceptions as api_exceptions
from tests.lib import test_case
from tests.lib.apitools import http_error


class TopicsClientTest(test_case.WithProject):

  def SetUp(self):
    self.mock_client = mock.Client(
        apis.GetClientClass('pubsub', 'v1'),
        real_client=apis.GetClientInstance('pubsub', 'v1', no_http=True))
    self.mock_client.Mock()
    self.addCleanup(self.mock_client.Unmock)
    self.msgs = self.mock_client.MESSAGES_MODULE
    self.topics_client = topics.TopicsClient(self.mock_client, self.msgs)
    self.topic_path = 'projects/fake-project/topics/topic1'

  def testGet(self):
    topic = self.msgs.Topic(name=self.topic_path)
    self.mock_client.projects_topics.Get.Expect(
        request=self.msgs.PubsubProjectsTopicsGetRequest(
            topic=self.topic_path),
        response=topic)
    self.assertEqual(topic, self.topics_client.Get('topic1'))

  def testGetNotFound(self):
    self.mock_client.projects_topics.Get.Expect(
        request=self.msgs.PubsubProjectsTopicsGetRequest(
            topic=self.topic_path),
        exception=http_error.MakeHttpError(
            404, 'Resource not found (resource=topic1).', reason='NOT_FOUND',
            url='https://pubsub.googleapis.com/v1/' + self.topic_path))
    with self.assertRaises(api_exceptions.HttpException) as ctx:
      self.topics_client.Get('topic1')
    self.assertEqual('Topic [topic1] not found: '
                     'Resource not found (resource=topic1).',
                     str(ctx.exception))
    self.assertEqual(404, ctx.exception.payload.status_code)

  def testList(self):
    response = self.msgs.ListTopicsResponse(
        topics=[self.msgs.Topic(name=self.topic_path)],
        nextPageToken='next')
    self.mock_client.projects_topics.List.Expect(
        request=self.msgs.PubsubProjectsTopicsListRequest(
            project='projects/other', pageSize=10, pageToken='token'),
        response=response)
    self.assertEqual(response, self.topics_client.List(
        project='other', page_size=10, page_token='token'))

  def testCreate(self):
    topic = self.msgs.Topic(name=self.topic_path)
    self.mock_client.projects_topics.Create.Expect(
        request=topic, response=topic)
    self.assertEqual(topic, self.topics_client.Create('topic1'))
    self.AssertErrEquals(
        'Created topic [projects/fake-project/topics/topic1].\n')

  def testCreateAlreadyExists(self):
    topic = self.msgs.Topic(name=self.topic_path)
    self.mock_client.projects_topics.Create.Expect(
        request=topic,
        exception=http_error.MakeHttpError(
            409, 'Resource already exists in the project (resource=topic1).',
            reason='ALREADY_EXISTS',
            url='https://pubsub.googleapis.com/v1/' + self.topic_path))
    with self.assertRaisesRegex(api_exceptions.HttpException,
                                r'Topic \[topic1\] is the subject of a '
                                r'conflict'):
      self.topics_client.Create('topic1')
    self.AssertErrNotContains('Created topic')

  def testDelete(self):
    self.mock_client.projects_topics.Delete.Expect(
        request=self.msgs.PubsubProjectsTopicsDeleteRequest(
            topic='projects/p/topics/topic1'),
        response=self.msgs.Empty())
    self.assertEqual(self.msgs.Empty(),
                     self.topics_client.Delete('topic1', project='p'))
    self.AssertErrEquals('Deleted topic [projects/p/topics/topic1].\n')

  def testPublish(self):
    self.mock_client.projects_topics.Publish.Expect(
        request=self.msgs.PubsubProjectsTopicsPublishRequest(
            publishRequest=self.msgs.PublishRequest(messages=[
                self.msgs.PubsubMessage(
                    data=b'hello',
                    attributes=self.msgs.PubsubMessage.AttributesValue(
                        additionalProperties=[
                            self.msgs.PubsubMessage.AttributesValue
                            .AdditionalProperty(key='a', value='1'),
                            self.msgs.PubsubMessage.AttributesValue
                            .AdditionalProperty(key='b', value='x'),
                        ])),
                self.msgs.PubsubMessage(data='café'.encode('utf-8')),
            ]),
            topic=self.topic_path),
        response=self.msgs.PublishResponse(messageIds=['1', '2']))
    result = self.topics_client.Publish(
        'topic1', [(b'hello', {'b': 'x', 'a': 1}), ('café', None)])
    self.assertEqual(['1', '2'], result.messageIds)

  def testListSubscriptions(self):
    response = self.msgs.ListTopicSubscriptionsResponse(
        subscriptions=['projects/fake-project/subscriptions/s1'])
    self.mock_client.projects_topics_subscriptions.List.Expect(
        request=self.msgs.PubsubProjectsTopicsSubscriptionsListRequest(
            topic=self.topic_path, pageSize=1),
        response=response)
    self.assertEqual(
        response, self.topics_client.ListSubscriptions('topic1', page_size=1))


if __name__ == '__main__':
  test_case.main()

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
"""Tests for the Cloud Pub/Sub subscriptions client."""

from apitools.base.py.testing import mock
from googlecloudclients.api_lib.pubsub import subscriptions
from googlecloudclients.api_lib.util import apis
from googlecloudclients.api_lib.util import exceptions as api_exceptions
from tests.lib import test_case
from tests.lib.apitools import http_error


class SubscriptionsClientTest(test_case.WithProject):

  def SetUp(self):
    self.mock_client = mock.Client(
        apis.GetClientClass('pubsub', 'v1'),
        real_client=apis.GetClientInstance('pubsub', 'v1', no_http=True))
    self.mock_client.Mock()
    self.addCleanup(self.mock_client.Unmock)
    self.msgs = self.mock_client.MESSAGES_MODULE
    self.subscriptions_client = subscriptions.SubscriptionsClient(
        self.mock_client, self.msgs)
    self.sub_path = 'projects/fake-project/subscriptions/sub1'
    self.topic_path = 'projects/fake-project/topics/topic1'

  def _PushConfig(self, endpoint, attributes=None):
    push_config = self.msgs.PushConfig(pushEndpoint=endpoint)
    if attributes:
      attributes_class = self.msgs.PushConfig.AttributesValue
      push_config.attributes = attributes_class(additionalProperties=[
          attributes_class.AdditionalProperty(key=k, value=v)
          for k, v in attributes])
    return push_config

  def testGet(self):
    sub = self.msgs.Subscription(name=self.sub_path, topic=self.topic_path)
    self.mock_client.projects_subscriptions.Get.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsGetRequest(
            subscription=self.sub_path),
        response=sub)
    self.assertEqual(sub, self.subscriptions_client.Get('sub1'))

  def testList(self):
    response = self.msgs.ListSubscriptionsResponse(
        subscriptions=[self.msgs.Subscription(name=self.sub_path)])
    self.mock_client.projects_subscriptions.List.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsListRequest(
            project='projects/fake-project', pageSize=20),
        response=response)
    self.assertEqual(response,
                     self.subscriptions_client.List(page_size=20))

  def testCreatePull(self):
    sub = self.msgs.Subscription(name=self.sub_path, topic=self.topic_path,
                                 ackDeadlineSeconds=30)
    self.mock_client.projects_subscriptions.Create.Expect(
        request=sub, response=sub)
    self.assertEqual(sub, self.subscriptions_client.Create(
        'topic1', 'sub1', ack_deadline=30))
    self.AssertErrEquals(
        'Created subscription [projects/fake-project/subscriptions/sub1].\n')

  def testCreatePush(self):
    sub = self.msgs.Subscription(
        name='projects/other/subscriptions/sub1',
        topic=self.topic_path,
        pushConfig=self._PushConfig('https://example.com/push',
                                    [('x-goog-version', 'v1')]))
    self.mock_client.projects_subscriptions.Create.Expect(
        request=sub, response=sub)
    self.subscriptions_client.Create(
        'topic1', 'sub1', project='other',
        push_endpoint='https://example.com/push',
        push_attributes={'x-goog-version': 'v1'})

  def testCreateTopicInOtherProject(self):
    sub = self.msgs.Subscription(name=self.sub_path,
                                 topic='projects/other/topics/topic1')
    self.mock_client.projects_subscriptions.Create.Expect(
        request=sub, response=sub)
    self.subscriptions_client.Create('projects/other/topics/topic1', 'sub1')

  def testCreateTopicNotFound(self):
    sub = self.msgs.Subscription(name=self.sub_path, topic=self.topic_path)
    self.mock_client.projects_subscriptions.Create.Expect(
        request=sub,
        exception=http_error.MakeHttpError(
            404, 'Resource not found (resource=topic1).', reason='NOT_FOUND',
            url='https://pubsub.googleapis.com/v1/' + self.sub_path))
    with self.assertRaisesRegex(api_exceptions.HttpException,
                                r'Subscription \[sub1\] not found'):
      self.subscriptions_client.Create('topic1', 'sub1')
    self.AssertErrEquals('')

  def testDelete(self):
    self.mock_client.projects_subscriptions.Delete.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsDeleteRequest(
            subscription=self.sub_path),
        response=self.msgs.Empty())
    self.subscriptions_client.Delete('sub1')
    self.AssertErrEquals(
        'Deleted subscription [projects/fake-project/subscriptions/sub1].\n')

  def testPull(self):
    response = self.msgs.PullResponse(receivedMessages=[
        self.msgs.ReceivedMessage(
            ackId='ack1',
            message=self.msgs.PubsubMessage(data=b'hello', messageId='1'))])
    self.mock_client.projects_subscriptions.Pull.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsPullRequest(
            pullRequest=self.msgs.PullRequest(maxMessages=100,
                                              returnImmediately=True),
            subscription=self.sub_path),
        response=response)
    self.assertEqual(response, self.subscriptions_client.Pull('sub1'))

  def testPullWaits(self):
    self.mock_client.projects_subscriptions.Pull.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsPullRequest(
            pullRequest=self.msgs.PullRequest(maxMessages=5,
                                              returnImmediately=False),
            subscription=self.sub_path),
        response=self.msgs.PullResponse())
    self.subscriptions_client.Pull('sub1', max_messages=5,
                                   return_immediately=False)

  def testAckSingleId(self):
    self.mock_client.projects_subscriptions.Acknowledge.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsAcknowledgeRequest(
            acknowledgeRequest=self.msgs.AcknowledgeRequest(ackIds=['ack1']),
            subscription=self.sub_path),
        response=self.msgs.Empty())
    self.subscriptions_client.Ack('sub1', 'ack1')

  def testAckManyIds(self):
    self.mock_client.projects_subscriptions.Acknowledge.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsAcknowledgeRequest(
            acknowledgeRequest=self.msgs.AcknowledgeRequest(
                ackIds=['ack1', 'ack2']),
            subscription=self.sub_path),
        response=self.msgs.Empty())
    self.subscriptions_client.Ack('sub1', ('ack1', 'ack2'))

  def testModifyPushConfig(self):
    self.mock_client.projects_subscriptions.ModifyPushConfig.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsModifyPushConfigRequest(
            modifyPushConfigRequest=self.msgs.ModifyPushConfigRequest(
                pushConfig=self._PushConfig('https://example.com/push',
                                            [('a', '1')])),
            subscription=self.sub_path),
        response=self.msgs.Empty())
    self.subscriptions_client.ModifyPushConfig(
        'sub1', 'https://example.com/push', push_attributes={'a': 1})
    self.AssertErrEquals(
        'Updated subscription [projects/fake-project/subscriptions/sub1].\n')

  def testModifyPushConfigToPull(self):
    self.mock_client.projects_subscriptions.ModifyPushConfig.Expect(
        request=self.msgs.PubsubProjectsSubscriptionsModifyPushConfigRequest(
            modifyPushConfigRequest=self.msgs.ModifyPushConfigRequest(
                pushConfig=self.msgs.PushConfig(pushEndpoint=None)),
            subscription=self.sub_path),
        response=self.msgs.Empty())
    self.subscriptions_client.ModifyPushConfig('sub1', None)

  def testModifyAckDeadline(self):
    self.mock_client.projects_subscriptions.ModifyAckDeadline.Expect(
        request=(self.msgs
                 .PubsubProjectsSubscriptionsModifyAckDeadlineRequest(
                     modifyAckDeadlineRequest=(
                         self.msgs.ModifyAckDeadlineRequest(
                             ackDeadlineSeconds=60, ackIds=['ack1'])),
                     subscription=self.sub_path)),
        response=self.msgs.Empty())
    self.subscriptions_client.ModifyAckDeadline('sub1', 'ack1', 60)

  def testModifyAckDeadlineForbidden(self):
    self.mock_client.projects_subscriptions.ModifyAckDeadline.Expect(
        request=(self.msgs
                 .PubsubProjectsSubscriptionsModifyAckDeadlineRequest(
                     modifyAckDeadlineRequest=(
                         self.msgs.ModifyAckDeadlineRequest(
                             ackDeadlineSeconds=60, ackIds=['ack1'])),
                     subscription=self.sub_path)),
        exception=http_error.MakeHttpError(
            403, 'User not authorized to perform this action.',
            reason='PERMISSION_DENIED',
            url=('https://pubsub.googleapis.com/v1/{0}:modifyAckDeadline'
                 .format(self.sub_path))))
    with self.assertRaisesRegex(
        api_exceptions.HttpException,
        r'You do not have permission to access subscription \[sub1\]'):
      self.subscriptions_client.ModifyAckDeadline('sub1', 'ack1', 60)


if __name__ == '__main__':
  test_case.main()

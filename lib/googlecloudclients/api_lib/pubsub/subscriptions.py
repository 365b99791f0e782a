# -*- coding: utf-8 -*- #
# Copyright 2017 Google Inc. All Rights Reserved.
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
"""Utilities for Cloud Pub/Sub Subscriptions API."""

from googlecloudclients.api_lib.pubsub import util
from googlecloudclients.api_lib.util import exceptions as api_exceptions
from googlecloudclients.core import log


DEFAULT_MAX_MESSAGES = 100


def _AsList(ack_ids):
  if isinstance(ack_ids, str):
    return [ack_ids]
  return list(ack_ids)


class SubscriptionsClient(object):
  """Client for subscriptions service in the Cloud Pub/Sub API."""

  def __init__(self, client=None, messages=None):
    self.client = client or util.GetClientInstance()
    self.messages = messages or util.GetMessagesModule(self.client)
    self._service = self.client.projects_subscriptions

  def _PushConfig(self, push_endpoint, push_attributes):
    push_config = self.messages.PushConfig(pushEndpoint=push_endpoint)
    attribute_pairs = util.StringifyAttributes(push_attributes)
    if attribute_pairs:
      attributes_class = self.messages.PushConfig.AttributesValue
      push_config.attributes = attributes_class(additionalProperties=[
          attributes_class.AdditionalProperty(key=key, value=value)
          for key, value in attribute_pairs])
    return push_config

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Get(self, subscription_name, project=None):
    """Gets a Subscription.

    Args:
      subscription_name (str): Name or full path of the subscription.
      project (str): Project of the subscription. Defaults to core/project.
    Returns:
      Subscription: the subscription.
    """
    get_req = self.messages.PubsubProjectsSubscriptionsGetRequest(
        subscription=util.SubscriptionPath(subscription_name, project))
    log.debug('Getting subscription [%s]', get_req.subscription)
    return self._service.Get(get_req)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def List(self, project=None, page_size=None, page_token=None):
    """Lists one page of Subscriptions for a given project.

    Args:
      project (str): Project to list subscriptions from. Defaults to
        core/project.
      page_size (int): Maximum number of subscriptions in the page.
      page_token (str): Token of the page to fetch, from a previous
        response's nextPageToken.
    Returns:
      ListSubscriptionsResponse: the page of subscriptions.
    """
    list_req = self.messages.PubsubProjectsSubscriptionsListRequest(
        project=util.ProjectPath(project),
        pageSize=page_size,
        pageToken=page_token)
    log.debug('Listing subscriptions in [%s]', list_req.project)
    return self._service.List(list_req)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Create(self, topic_name, subscription_name, project=None,
             push_endpoint=None, push_attributes=None, ack_deadline=None):
    """Creates a Subscription.

    Args:
      topic_name (str): Name or full path of the topic to subscribe to. A bare
        name is resolved in the default project, not in project.
      subscription_name (str): Name or full path of the subscription to
        create.
      project (str): Project of the subscription. Defaults to core/project.
      push_endpoint (str): URL to push messages to. A pull subscription is
        created if not given.
      push_attributes (dict): Push endpoint attributes. Only used together
        with push_endpoint.
      ack_deadline (int): Number of seconds the system will wait for a
        subscriber to ack a message.
    Returns:
      Subscription: the created subscription
    """
    push_config = None
    if push_endpoint:
      push_config = self._PushConfig(push_endpoint, push_attributes)
    subscription = self.messages.Subscription(
        name=util.SubscriptionPath(subscription_name, project),
        topic=util.TopicPath(topic_name),
        ackDeadlineSeconds=ack_deadline,
        pushConfig=push_config)
    log.debug('Creating subscription [%s] on [%s]', subscription.name,
              subscription.topic)
    result = self._service.Create(subscription)
    log.CreatedResource(subscription.name, kind='subscription')
    return result

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Delete(self, subscription_name, project=None):
    """Deletes a Subscription.

    Args:
      subscription_name (str): Name or full path of the subscription to
        delete.
      project (str): Project of the subscription. Defaults to core/project.
    Returns:
      Empty: the (empty) server response.
    """
    delete_req = self.messages.PubsubProjectsSubscriptionsDeleteRequest(
        subscription=util.SubscriptionPath(subscription_name, project))
    log.debug('Deleting subscription [%s]', delete_req.subscription)
    result = self._service.Delete(delete_req)
    log.DeletedResource(delete_req.subscription, kind='subscription')
    return result

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Pull(self, subscription_name, max_messages=DEFAULT_MAX_MESSAGES,
           return_immediately=True, project=None):
    """Pulls one or more messages from a Subscription.

    Args:
      subscription_name (str): Name or full path of the subscription to pull
        from.
      max_messages (int): The maximum number of messages to retrieve.
      return_immediately (bool): Whether the server should respond right away
        when no messages are available.
      project (str): Project of the subscription. Defaults to core/project.
    Returns:
      PullResponse: proto containing the received messages.
    """
    pull_req = self.messages.PubsubProjectsSubscriptionsPullRequest(
        pullRequest=self.messages.PullRequest(
            maxMessages=int(max_messages),
            returnImmediately=bool(return_immediately)),
        subscription=util.SubscriptionPath(subscription_name, project))
    log.debug('Pulling up to %d message(s) from [%s]',
              pull_req.pullRequest.maxMessages, pull_req.subscription)
    return self._service.Pull(pull_req)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Ack(self, subscription_name, ack_ids, project=None):
    """Acknowledges one or messages for a Subscription.

    Args:
      subscription_name (str): Name or full path of the subscription.
      ack_ids (str|list[str]): Ack id or ids for the messages being ack'd.
      project (str): Project of the subscription. Defaults to core/project.
    Returns:
      Empty: the (empty) server response.
    """
    ack_req = self.messages.PubsubProjectsSubscriptionsAcknowledgeRequest(
        acknowledgeRequest=self.messages.AcknowledgeRequest(
            ackIds=_AsList(ack_ids)),
        subscription=util.SubscriptionPath(subscription_name, project))
    log.debug('Acknowledging %d message(s) on [%s]',
              len(ack_req.acknowledgeRequest.ackIds), ack_req.subscription)
    return self._service.Acknowledge(ack_req)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def ModifyPushConfig(self, subscription_name, push_endpoint,
                       push_attributes=None, project=None):
    """Modifies the push endpoint for a Subscription.

    Args:
      subscription_name (str): Name or full path of the subscription.
      push_endpoint (str): The new push endpoint. None or empty turns the
        subscription into a pull subscription.
      push_attributes (dict): Push endpoint attributes. Keys and values are
        converted to strings.
      project (str): Project of the subscription. Defaults to core/project.
    Returns:
      Empty: the (empty) server response.
    """
    mod_req = self.messages.PubsubProjectsSubscriptionsModifyPushConfigRequest(
        modifyPushConfigRequest=self.messages.ModifyPushConfigRequest(
            pushConfig=self._PushConfig(push_endpoint, push_attributes)),
        subscription=util.SubscriptionPath(subscription_name, project))
    log.debug('Modifying push config of [%s]', mod_req.subscription)
    result = self._service.ModifyPushConfig(mod_req)
    log.UpdatedResource(mod_req.subscription, kind='subscription')
    return result

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def ModifyAckDeadline(self, subscription_name, ack_ids, ack_deadline,
                        project=None):
    """Modifies the ack deadline for messages for a Subscription.

    Args:
      subscription_name (str): Name or full path of the subscription.
      ack_ids (str|list[str]): Ack id or ids to modify.
      ack_deadline (int): The new ack deadline for the messages, in seconds.
      project (str): Project of the subscription. Defaults to core/project.
    Returns:
      Empty: the (empty) server response.
    """
    mod_req = self.messages.PubsubProjectsSubscriptionsModifyAckDeadlineRequest(
        modifyAckDeadlineRequest=self.messages.ModifyAckDeadlineRequest(
            ackDeadlineSeconds=ack_deadline,
            ackIds=_AsList(ack_ids)),
        subscription=util.SubscriptionPath(subscription_name, project))
    log.debug('Modifying ack deadline of %d message(s) on [%s]',
              len(mod_req.modifyAckDeadlineRequest.ackIds),
              mod_req.subscription)
    return self._service.ModifyAckDeadline(mod_req)

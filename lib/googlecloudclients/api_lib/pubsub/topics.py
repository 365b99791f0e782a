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
"""Utilities for Cloud Pub/Sub Topics API."""

from googlecloudclients.api_lib.pubsub import util
from googlecloudclients.api_lib.util import exceptions as api_exceptions
from googlecloudclients.core import log


class TopicsClient(object):
  """Client for topics service in the Cloud Pub/Sub API."""

  def __init__(self, client=None, messages=None):
    self.client = client or util.GetClientInstance()
    self.messages = messages or util.GetMessagesModule(self.client)
    self._service = self.client.projects_topics
    self._subscriptions_service = self.client.projects_topics_subscriptions

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Get(self, topic_name, project=None):
    """Gets a Topic.

    Args:
      topic_name (str): Name or full path of the topic.
      project (str): Project of the topic. Defaults to core/project.
    Returns:
      Topic: the topic.
    """
    get_req = self.messages.PubsubProjectsTopicsGetRequest(
        topic=util.TopicPath(topic_name, project))
    log.debug('Getting topic [%s]', get_req.topic)
    return self._service.Get(get_req)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def List(self, project=None, page_size=None, page_token=None):
    """Lists one page of Topics for a given project.

    Args:
      project (str): Project to list topics from. Defaults to core/project.
      page_size (int): Maximum number of topics in the page.
      page_token (str): Token of the page to fetch, from a previous
        response's nextPageToken.
    Returns:
      ListTopicsResponse: the page of topics.
    """
    list_req = self.messages.PubsubProjectsTopicsListRequest(
        project=util.ProjectPath(project),
        pageSize=page_size,
        pageToken=page_token)
    log.debug('Listing topics in [%s]', list_req.project)
    return self._service.List(list_req)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Create(self, topic_name, project=None):
    """Creates a Topic.

    Args:
      topic_name (str): Name or full path of the topic to create.
      project (str): Project of the topic. Defaults to core/project.
    Returns:
      Topic: the created topic.
    """
    topic = self.messages.Topic(name=util.TopicPath(topic_name, project))
    log.debug('Creating topic [%s]', topic.name)
    result = self._service.Create(topic)
    log.CreatedResource(topic.name, kind='topic')
    return result

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Delete(self, topic_name, project=None):
    """Deletes a Topic.

    Args:
      topic_name (str): Name or full path of the topic to delete.
      project (str): Project of the topic. Defaults to core/project.
    Returns:
      Empty: the (empty) server response.
    """
    delete_req = self.messages.PubsubProjectsTopicsDeleteRequest(
        topic=util.TopicPath(topic_name, project))
    log.debug('Deleting topic [%s]', delete_req.topic)
    result = self._service.Delete(delete_req)
    log.DeletedResource(delete_req.topic, kind='topic')
    return result

  def _BuildMessage(self, data, attributes):
    if isinstance(data, str):
      data = data.encode('utf-8')
    message = self.messages.PubsubMessage(data=data)
    attribute_pairs = util.StringifyAttributes(attributes)
    if attribute_pairs:
      attributes_class = self.messages.PubsubMessage.AttributesValue
      message.attributes = attributes_class(additionalProperties=[
          attributes_class.AdditionalProperty(key=key, value=value)
          for key, value in attribute_pairs])
    return message

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Publish(self, topic_name, message_batch, project=None):
    """Publishes a batch of messages to a Topic.

    Args:
      topic_name (str): Name or full path of the topic to publish to.
      message_batch (list[(bytes|str, dict)]): (data, attributes) pairs. Text
        data is encoded as UTF-8. Attribute keys and values are converted to
        strings.
      project (str): Project of the topic. Defaults to core/project.
    Returns:
      PublishResponse: the ids of the published messages, in batch order.
    """
    publish_req = self.messages.PubsubProjectsTopicsPublishRequest(
        publishRequest=self.messages.PublishRequest(
            messages=[self._BuildMessage(data, attributes)
                      for data, attributes in message_batch]),
        topic=util.TopicPath(topic_name, project))
    log.debug('Publishing %d message(s) to [%s]',
              len(publish_req.publishRequest.messages), publish_req.topic)
    return self._service.Publish(publish_req)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def ListSubscriptions(self, topic_name, project=None, page_size=None,
                        page_token=None):
    """Lists one page of the subscription names attached to a Topic.

    Args:
      topic_name (str): Name or full path of the topic.
      project (str): Project of the topic. Defaults to core/project.
      page_size (int): Maximum number of subscription names in the page.
      page_token (str): Token of the page to fetch, from a previous
        response's nextPageToken.
    Returns:
      ListTopicSubscriptionsResponse: the page of subscription names.
    """
    list_req = self.messages.PubsubProjectsTopicsSubscriptionsListRequest(
        topic=util.TopicPath(topic_name, project),
        pageSize=page_size,
        pageToken=page_token)
    log.debug('Listing subscriptions of [%s]', list_req.topic)
    return self._subscriptions_service.List(list_req)

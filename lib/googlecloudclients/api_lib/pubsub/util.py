# -*- coding: utf-8 -*- #
# Copyright 2015 Google Inc. All Rights Reserved.
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
"""Resource path helpers for the Cloud Pub/Sub API."""

import abc
import re

from googlecloudclients.api_lib.util import apis
from googlecloudclients.core import exceptions
from googlecloudclients.core import properties

PUBSUB_API_NAME = 'pubsub'
PUBSUB_API_VERSION = 'v1'

# Regular expression to match full paths for Cloud Pub/Sub resource identifiers.
PROJECT_PATH_RE = re.compile(r'^projects/(?P<Project>[^/]+)$')
SUBSCRIPTIONS_PATH_RE = re.compile(
    r'^projects/(?P<Project>[^/]+)/subscriptions/(?P<Resource>[^/]+)$')
TOPICS_PATH_RE = re.compile(
    r'^projects/(?P<Project>[^/]+)/topics/(?P<Resource>[^/]+)$')


class InvalidResourcePathError(exceptions.Error):
  """Raised when a full resource path does not have the expected shape."""


def GetClientInstance(no_http=False):
  return apis.GetClientInstance(PUBSUB_API_NAME, PUBSUB_API_VERSION,
                                no_http=no_http)


def GetMessagesModule(client=None):
  client = client or GetClientInstance()
  return client.MESSAGES_MODULE


def StringifyAttributes(attributes):
  """Returns attributes as a list of (str, str) pairs, sorted by key.

  Args:
    attributes: dict, The attributes to convert. None is treated as empty.

  Returns:
    [(str, str)], The stringified key/value pairs.
  """
  if not attributes:
    return []
  return sorted((str(k), str(v)) for k, v in attributes.items())


class ResourceIdentifier(object, metaclass=abc.ABCMeta):
  """Base class to build resource identifiers."""

  @abc.abstractmethod
  def _RegexMatch(self, resource_path):
    """Return a match object from applying a regexp to this resource identifier.

    This function needs to be overriden in subclasses to use the appropriate
    regular expression for a resource identifier type (subscriptions, topics).

    Args:
      resource_path: (string) Full (ie. projects/my-proj/topics/my-topic)
                     or partial (my-topic) project or resource path.
    """
    pass

  @abc.abstractmethod
  def _ResourceType(self):
    """Returns the valid resource identifier type for this instance.

    This function needs to be overriden in subclasses to return a valid
    resource identifier type (subscriptions, topics).
    """
    pass

  def __init__(self, *args, **kwargs):
    self.Parse(*args, **kwargs)

  def Parse(self, resource_path, project_path=None):
    """Initializes a new ResourceIdentifier.

    Args:
      resource_path: (string) Full (ie. projects/my-proj/topics/my-topic)
                     or partial (my-topic) resource path.
      project_path: (string) Full (projects/my-project) or
                    partial (my-project) project path.
                    If empty, the core/project property will be used. It is
                    ignored when resource_path is a full path.

    Raises:
      InvalidResourcePathError: if the provided resource path is not a valid
        resource path/name.
    """
    if '/' in resource_path:
      match = self._RegexMatch(resource_path)
      if match is None:
        raise InvalidResourcePathError(
            'Invalid {0} path [{1}]. Expected [projects/PROJECT/{2}/NAME].'
            .format(self._ResourceType()[:-1].capitalize(), resource_path,
                    self._ResourceType()))

      self.project = ProjectIdentifier(match.group('Project'))
      self.resource_name = match.group('Resource')
      return

    self.project = ProjectIdentifier(project_path)
    self.resource_name = resource_path

  def GetFullPath(self):
    return '{0}/{1}/{2}'.format(self.project.GetFullPath(),
                                self._ResourceType(),
                                self.resource_name)


class ProjectIdentifier(ResourceIdentifier):
  """Represents a Cloud project identifier."""

  def Parse(self, project_path=None):
    """Initializes a new ProjectIdentifier.

    Args:
      project_path: (string) Full (projects/my-proj) or partial (my-proj)
                    project path.
                    If empty, the core/project property will be used.

    Raises:
      InvalidResourcePathError: if the provided project path is not a valid
        project path/name.
      properties.RequiredPropertyError: if no project was given and
        core/project is not set.
    """
    if not project_path:
      self.project_name = properties.VALUES.core.project.Get(required=True)
      return

    if '/' in project_path:
      match = self._RegexMatch(project_path)
      if match is None:
        raise InvalidResourcePathError(
            'Invalid project path [{0}]. Expected [projects/PROJECT].'
            .format(project_path))

      self.project_name = match.group('Project')
      return

    self.project_name = project_path

  def _ResourceType(self):
    return 'projects'

  def _RegexMatch(self, resource_path):
    return PROJECT_PATH_RE.match(resource_path)

  def GetFullPath(self):
    """Returns a valid full project path."""
    return '{0}/{1}'.format(self._ResourceType(), self.project_name)


class SubscriptionIdentifier(ResourceIdentifier):
  """Represents a Cloud Pub/Sub subscription identifier."""

  def _RegexMatch(self, resource_path):
    return SUBSCRIPTIONS_PATH_RE.match(resource_path)

  def _ResourceType(self):
    return 'subscriptions'


class TopicIdentifier(ResourceIdentifier):
  """Represents a Cloud Pub/Sub topic identifier."""

  def _RegexMatch(self, resource_path):
    return TOPICS_PATH_RE.match(resource_path)

  def _ResourceType(self):
    return 'topics'


def ProjectPath(project=None):
  """Formats a project as a project path.

  Args:
    project: (string) Name or path of the project. If not given, then the
             project defaults to the core/project property.

  Returns:
    A project path of the form projects/foo.
  """
  return ProjectIdentifier(project).GetFullPath()


def TopicPath(topic_name, project=None):
  """Formats a topic name as a fully qualified topic path.

  Args:
    topic_name: (string) Name or full path of the topic to convert.
    project: (string) Name of the project the given topic belongs to.
             If not given, then the project defaults to the core/project
             property.

  Returns:
    Returns a fully qualified topic path of the
    form projects/foo/topics/topic_name.
  """
  return TopicIdentifier(topic_name, project).GetFullPath()


def SubscriptionPath(subscription_name, project=None):
  """Formats a subscription name as a fully qualified subscription path.

  Args:
    subscription_name: (string) Name or full path of the subscription to
                       convert.
    project: (string) Name of the project the given subscription belongs
             to. If not given, then the project defaults to the core/project
             property.

  Returns:
    Returns a fully qualified subscription path of the
    form projects/foo/subscriptions/subscription_name.
  """
  return SubscriptionIdentifier(subscription_name, project).GetFullPath()

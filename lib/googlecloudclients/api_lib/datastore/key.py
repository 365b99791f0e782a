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
"""Cloud Datastore entity keys."""

from googlecloudclients.core import exceptions


class InvalidKeyError(exceptions.Error):
  """Raised when a key is built from an invalid kind, id or parent."""


class Key(object):
  """A Cloud Datastore entity key.

  A key is a path of (kind, id or name) pairs from a root entity down to the
  entity itself, scoped to a partition (project and namespace).

  Attributes:
    kind: str, The kind of the entity.
    id: int, The numeric id of the entity, or None.
    name: str, The string name of the entity, or None.
    parent: Key, The key of the parent entity, or None for a root entity.
    project: str, The project of the partition, or None.
    namespace: str, The namespace of the partition, or None.
  """

  def __init__(self, kind, id_or_name=None, parent=None, project=None,
               namespace=None):
    """Creates a new Key.

    Args:
      kind: str, The kind of the entity.
      id_or_name: int|str, An integer id or a string name. None makes the key
        incomplete.
      parent: Key, The parent key. The partition is inherited from it unless
        project or namespace is given.
      project: str, The project of the partition.
      namespace: str, The namespace of the partition.

    Raises:
      InvalidKeyError: if kind is empty, id_or_name has an unsupported type
        or parent is not a Key.
    """
    if not kind or not isinstance(kind, str):
      raise InvalidKeyError('Key kind must be a non-empty string, got [{0!r}].'
                            .format(kind))
    if parent is not None and not isinstance(parent, Key):
      raise InvalidKeyError('Key parent must be a Key, got [{0!r}].'
                            .format(parent))
    self.kind = kind
    self.id = None
    self.name = None
    if isinstance(id_or_name, bool):
      raise InvalidKeyError('Key id or name must be an int or a string, got '
                            '[{0!r}].'.format(id_or_name))
    elif isinstance(id_or_name, int):
      self.id = id_or_name
    elif isinstance(id_or_name, str):
      self.name = id_or_name
    elif id_or_name is not None:
      raise InvalidKeyError('Key id or name must be an int or a string, got '
                            '[{0!r}].'.format(id_or_name))
    self.parent = parent
    if parent is not None:
      project = project or parent.project
      namespace = namespace or parent.namespace
    self.project = project
    self.namespace = namespace

  @property
  def id_or_name(self):
    return self.id if self.id is not None else self.name

  @property
  def is_complete(self):
    return self.id_or_name is not None

  def _Chain(self):
    chain = []
    key = self
    while key is not None:
      chain.append(key)
      key = key.parent
    return list(reversed(chain))

  @property
  def path(self):
    """[(str, int|str)], The (kind, id or name) pairs from the root key."""
    return [(key.kind, key.id_or_name) for key in self._Chain()]

  def ToMessage(self, messages):
    """Returns the Key message for this key.

    Args:
      messages: The datastore messages module.

    Returns:
      messages.Key, The key message.
    """
    path = [messages.PathElement(kind=key.kind, id=key.id, name=key.name)
            for key in self._Chain()]
    partition_id = None
    if self.project or self.namespace:
      partition_id = messages.PartitionId(projectId=self.project,
                                          namespaceId=self.namespace)
    return messages.Key(partitionId=partition_id, path=path)

  @classmethod
  def FromMessage(cls, key_message):
    """Builds a Key from a Key message.

    Args:
      key_message: messages.Key, The message to convert.

    Returns:
      Key, The key, or None if the message has an empty path.
    """
    project = None
    namespace = None
    if key_message.partitionId is not None:
      project = key_message.partitionId.projectId
      namespace = key_message.partitionId.namespaceId
    key = None
    for element in key_message.path:
      id_or_name = element.id if element.id is not None else element.name
      key = cls(element.kind, id_or_name, parent=key, project=project,
                namespace=namespace)
    return key

  def __eq__(self, other):
    if not isinstance(other, Key):
      return NotImplemented
    return ((self.path, self.project, self.namespace) ==
            (other.path, other.project, other.namespace))

  def __ne__(self, other):
    result = self.__eq__(other)
    if result is NotImplemented:
      return result
    return not result

  def __hash__(self):
    return hash((tuple(self.path), self.project, self.namespace))

  def __repr__(self):
    args = [repr(self.kind)]
    if self.id_or_name is not None:
      args.append(repr(self.id_or_name))
    if self.parent is not None:
      args.append('parent={0!r}'.format(self.parent))
    if self.project:
      args.append('project={0!r}'.format(self.project))
    if self.namespace:
      args.append('namespace={0!r}'.format(self.namespace))
    return 'Key({0})'.format(', '.join(args))

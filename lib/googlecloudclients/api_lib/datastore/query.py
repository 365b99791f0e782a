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
"""A fluent builder for Cloud Datastore queries.

Example:

  q = (query.Query()
       .Kind('Task')
       .Where('completed', '=', False)
       .Order('due', 'desc')
       .Limit(10))
  q.ToMessage()
"""

import base64
import binascii

from googlecloudclients.api_lib.datastore import util
from googlecloudclients.api_lib.datastore import values
from googlecloudclients.core import exceptions

KEY_PROPERTY = '__key__'
ANCESTOR_OPERATOR = '~'

# Filter operator tokens, mapped to PropertyFilter.OpValueValuesEnum names.
OPERATORS = {
    '=': 'EQUAL',
    '<': 'LESS_THAN',
    '>': 'GREATER_THAN',
    '<=': 'LESS_THAN_OR_EQUAL',
    '>=': 'GREATER_THAN_OR_EQUAL',
    ANCESTOR_OPERATOR: 'HAS_ANCESTOR',
}

ASCENDING = 'ASCENDING'
DESCENDING = 'DESCENDING'


class InvalidOperatorError(exceptions.Error):
  """Raised when a filter operator is not one of the known tokens."""

  def __init__(self, operator):
    super(InvalidOperatorError, self).__init__(
        'Invalid filter operator [{0}]. Valid operators are: [{1}].'.format(
            operator, ', '.join(sorted(OPERATORS))))
    self.operator = operator


class InvalidCursorError(exceptions.Error):
  """Raised when a cursor is not valid standard base64."""

  def __init__(self, cursor, reason):
    super(InvalidCursorError, self).__init__(
        'Invalid cursor [{0}]: {1}'.format(cursor, reason))
    self.cursor = cursor


def _Direction(direction):
  """Anything that starts with d or D is descending, the rest ascending."""
  if str(direction).lower().startswith('d'):
    return DESCENDING
  return ASCENDING


class Query(object):
  """Accumulates query criteria and builds a datastore v1 Query message.

  Every mutator returns the query itself so calls can be chained. The builder
  is never modified by ToMessage().
  """

  def __init__(self, messages=None):
    self._messages = messages
    self.kinds = []
    self.filters = []
    self.orders = []
    self.projections = []
    self.distinct_on = []
    self.limit = None
    self.offset = 0
    self.start_cursor = None

  @property
  def messages(self):
    if self._messages is None:
      self._messages = util.GetMessages()
    return self._messages

  def Kind(self, *names):
    """Adds kinds to query."""
    self.kinds.extend(names)
    return self

  def Filter(self, name, operator, value):
    """Adds a property filter.

    Args:
      name: str, The property to filter on. Use __key__ with the ~ operator to
        filter on ancestors.
      operator: str, One of =, <, >, <=, >= or ~.
      value: The value to compare to. A Key for ancestor filters.

    Raises:
      InvalidOperatorError: if operator is not recognized.

    Returns:
      Query, self.
    """
    operator = str(operator)
    if operator not in OPERATORS:
      raise InvalidOperatorError(operator)
    self.filters.append((name, operator, value))
    return self

  Where = Filter

  def Ancestor(self, parent):
    """Restricts the results to descendants of the parent key."""
    return self.Filter(KEY_PROPERTY, ANCESTOR_OPERATOR, parent)

  def Order(self, name, direction='asc'):
    """Adds a sort order. Directions starting with 'd' sort descending."""
    self.orders.append((name, _Direction(direction)))
    return self

  def Select(self, *names):
    """Adds properties to the projection."""
    self.projections.extend(names)
    return self

  Projection = Select

  def GroupBy(self, *names):
    """Adds properties to make the results distinct on."""
    self.distinct_on.extend(names)
    return self

  DistinctOn = GroupBy

  def Limit(self, num):
    self.limit = num
    return self

  def Offset(self, num):
    self.offset = num
    return self

  def Cursor(self, cursor):
    """Sets the start cursor from its standard base64 encoding.

    Args:
      cursor: str, The base64 encoded cursor, e.g. from a previous result
        batch.

    Raises:
      InvalidCursorError: if cursor has characters outside the standard
        base64 alphabet or bad padding.

    Returns:
      Query, self.
    """
    try:
      self.start_cursor = base64.b64decode(cursor, validate=True)
    except (binascii.Error, ValueError) as e:
      raise InvalidCursorError(cursor, e)
    return self

  def _PropertyFilter(self, name, operator, value):
    messages = self.messages
    return messages.Filter(propertyFilter=messages.PropertyFilter(
        property=messages.PropertyReference(name=name),
        op=messages.PropertyFilter.OpValueValuesEnum(OPERATORS[operator]),
        value=values.ToValue(messages, value)))

  def _FilterMessage(self):
    if not self.filters:
      return None
    filters = [self._PropertyFilter(*f) for f in self.filters]
    if len(filters) == 1:
      return filters[0]
    messages = self.messages
    return messages.Filter(compositeFilter=messages.CompositeFilter(
        op=messages.CompositeFilter.OpValueValuesEnum.AND,
        filters=filters))

  def ToMessage(self):
    """Returns a new datastore v1 Query message for the current state.

    Raises:
      values.UnsupportedValueError: if a filter value cannot be represented.

    Returns:
      messages.Query, The query message.
    """
    messages = self.messages
    direction_enum = messages.PropertyOrder.DirectionValueValuesEnum
    return messages.Query(
        kind=[messages.KindExpression(name=name) for name in self.kinds],
        filter=self._FilterMessage(),
        order=[messages.PropertyOrder(
            property=messages.PropertyReference(name=name),
            direction=direction_enum(direction))
               for name, direction in self.orders],
        projection=[messages.Projection(
            property=messages.PropertyReference(name=name))
                    for name in self.projections],
        distinctOn=[messages.PropertyReference(name=name)
                    for name in self.distinct_on],
        limit=self.limit,
        offset=self.offset,
        startCursor=self.start_cursor)

  def _State(self):
    return (self.kinds, self.filters, self.orders, self.projections,
            self.distinct_on, self.limit, self.offset, self.start_cursor)

  def __eq__(self, other):
    if not isinstance(other, Query):
      return NotImplemented
    return self._State() == other._State()

  def __ne__(self, other):
    result = self.__eq__(other)
    if result is NotImplemented:
      return result
    return not result

  __hash__ = None

  def __repr__(self):
    return ('Query(kinds={0!r}, filters={1!r}, orders={2!r}, '
            'projections={3!r}, distinct_on={4!r}, limit={5!r}, '
            'offset={6!r}, start_cursor={7!r})'.format(*self._State()))

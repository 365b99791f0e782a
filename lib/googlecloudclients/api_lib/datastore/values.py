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
"""Conversion between Python values and Cloud Datastore Value messages.

Supported Python types and the Value field they map to:

  None              nullValue
  bool              booleanValue
  int               integerValue (64 bit)
  float             doubleValue
  str               stringValue
  bytes             blobValue
  datetime          timestampValue (RFC 3339, UTC; naive datetimes are UTC)
  Key               keyValue
  GeoPoint          geoPointValue
  list, tuple       arrayValue
  dict              entityValue (without a key)
"""

import collections
import datetime

from dateutil import parser
from dateutil import tz
from googlecloudclients.api_lib.datastore import key as key_lib
from googlecloudclients.core import exceptions

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

UTC = tz.tzutc()


class UnsupportedValueError(exceptions.Error):
  """Raised when a value cannot be represented as a Datastore Value."""


GeoPoint = collections.namedtuple('GeoPoint', ['latitude', 'longitude'])


def FormatTimestamp(dt):
  """Returns dt as an RFC 3339 UTC timestamp string.

  Args:
    dt: datetime.datetime, The time to format. Naive values are taken as UTC.

  Returns:
    str, e.g. 2014-01-01T00:00:00Z or 2014-01-01T00:00:00.250000Z.
  """
  if dt.tzinfo is None:
    dt = dt.replace(tzinfo=UTC)
  dt = dt.astimezone(UTC)
  if dt.microsecond:
    return dt.strftime('%Y-%m-%dT%H:%M:%S.%fZ')
  return dt.strftime('%Y-%m-%dT%H:%M:%SZ')


def ParseTimestamp(value):
  """Parses an RFC 3339 timestamp into an aware UTC datetime.

  Fractions beyond microseconds are truncated. A timestamp without a zone is
  taken as UTC.

  Args:
    value: str, The timestamp to parse.

  Raises:
    UnsupportedValueError: if value is not an RFC 3339 timestamp.

  Returns:
    datetime.datetime, The timestamp in UTC.
  """
  try:
    dt = parser.isoparse(value)
  except (ValueError, OverflowError) as e:
    raise UnsupportedValueError(
        'Invalid timestamp value [{0}]: {1}'.format(value, e))
  if dt.tzinfo is None:
    return dt.replace(tzinfo=UTC)
  return dt.astimezone(UTC)


def DictToEntity(messages, properties, key=None):
  """Builds an Entity message.

  Args:
    messages: The datastore messages module.
    properties: {str: value}, The entity properties.
    key: key_lib.Key, The entity key, or None.

  Returns:
    messages.Entity, The entity message.
  """
  props_class = messages.Entity.PropertiesValue
  return messages.Entity(
      key=key.ToMessage(messages) if key is not None else None,
      properties=props_class(additionalProperties=[
          props_class.AdditionalProperty(key=name,
                                         value=ToValue(messages, value))
          for name, value in properties.items()]))


def ToValue(messages, value):
  """Converts a Python value into a Value message.

  Args:
    messages: The datastore messages module.
    value: The value to convert.

  Raises:
    UnsupportedValueError: if the value's type cannot be represented.

  Returns:
    messages.Value, The converted value.
  """
  if value is None:
    return messages.Value(
        nullValue=messages.Value.NullValueValueValuesEnum.NULL_VALUE)
  # bool is a subclass of int, so it has to be checked first.
  if isinstance(value, bool):
    return messages.Value(booleanValue=value)
  if isinstance(value, int):
    if not _INT64_MIN <= value <= _INT64_MAX:
      raise UnsupportedValueError(
          'Integer value [{0}] does not fit in 64 bits.'.format(value))
    return messages.Value(integerValue=value)
  if isinstance(value, float):
    return messages.Value(doubleValue=value)
  if isinstance(value, str):
    return messages.Value(stringValue=value)
  if isinstance(value, (bytes, bytearray)):
    return messages.Value(blobValue=bytes(value))
  if isinstance(value, datetime.datetime):
    return messages.Value(timestampValue=FormatTimestamp(value))
  if isinstance(value, key_lib.Key):
    return messages.Value(keyValue=value.ToMessage(messages))
  # GeoPoint is a tuple, so it has to be checked before sequences.
  if isinstance(value, GeoPoint):
    return messages.Value(geoPointValue=messages.LatLng(
        latitude=float(value.latitude), longitude=float(value.longitude)))
  if isinstance(value, (list, tuple)):
    return messages.Value(arrayValue=messages.ArrayValue(
        values=[ToValue(messages, v) for v in value]))
  if isinstance(value, dict):
    return messages.Value(entityValue=DictToEntity(messages, value))
  raise UnsupportedValueError(
      'Values of type [{0}] are not supported.'.format(type(value).__name__))


def FromValue(value):
  """Converts a Value message into a Python value.

  Args:
    value: messages.Value, The message to convert.

  Returns:
    The Python value, see the module docstring for the mapping. A Value with
    no field set converts to None.
  """
  if value.nullValue is not None:
    return None
  if value.booleanValue is not None:
    return value.booleanValue
  if value.integerValue is not None:
    return value.integerValue
  if value.doubleValue is not None:
    return value.doubleValue
  if value.stringValue is not None:
    return value.stringValue
  if value.blobValue is not None:
    return value.blobValue
  if value.timestampValue is not None:
    return ParseTimestamp(value.timestampValue)
  if value.keyValue is not None:
    return key_lib.Key.FromMessage(value.keyValue)
  if value.geoPointValue is not None:
    return GeoPoint(value.geoPointValue.latitude,
                    value.geoPointValue.longitude)
  if value.arrayValue is not None:
    return [FromValue(v) for v in value.arrayValue.values]
  if value.entityValue is not None:
    return EntityToDict(value.entityValue)[1]
  return None


def EntityToDict(entity):
  """Converts an Entity message into its key and a property dict.

  Args:
    entity: messages.Entity, The entity to convert.

  Returns:
    (key_lib.Key, {str: value}), The entity key (None if the entity has no
    key) and its properties.
  """
  key = None
  if entity.key is not None and entity.key.path:
    key = key_lib.Key.FromMessage(entity.key)
  properties = {}
  if entity.properties is not None:
    for prop in entity.properties.additionalProperties:
      properties[prop.key] = FromValue(prop.value)
  return key, properties

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

"""A module for dealing with unknown string and environment encodings."""

import sys


def Decode(data, encoding=None):
  """Returns data decoded to text.

  UTF-8, the suggested encoding, and the usual suspects will be attempted in
  order. Text is returned unchanged.

  Args:
    data: A bytes or str object, or any object with a str() method.
    encoding: The suggested encoding if known.

  Returns:
    str, The data decoded to text.
  """
  if data is None:
    return None
  if isinstance(data, str):
    return data
  if not isinstance(data, (bytes, bytearray)):
    return str(data)

  encodings = [encoding, 'ascii', 'utf-8', sys.getfilesystemencoding(),
               sys.getdefaultencoding()]
  for candidate in encodings:
    if not candidate:
      continue
    try:
      return data.decode(candidate)
    except (UnicodeError, LookupError):
      pass

  # Latin-1 maps every byte to a code point, so this cannot fail.
  return data.decode('iso-8859-1')


def GetEncodedValue(env, name, default=None):
  """Returns the decoded value of the env var name.

  Args:
    env: {str: str}, The env dict.
    name: str, The env var name.
    default: The value to return if name is not in env.

  Returns:
    The decoded value of the env var name.
  """
  value = env.get(name)
  if value is None:
    return default
  return Decode(value)


def SetEncodedValue(env, name, value):
  """Sets the value of name in env to value.

  Args:
    env: {str: str}, The env dict.
    name: str, The env var name.
    value: str or None, The value for name. If None then name is removed from
      env.
  """
  if value is None:
    env.pop(name, None)
    return
  env[name] = Decode(value)

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

"""A module that converts API exceptions to core exceptions."""

import functools
import json
import logging
import re
import string
import sys

from apitools.base.py import exceptions as apitools_exceptions
from googlecloudclients.core import exceptions as core_exceptions
from googlecloudclients.core import log
from googlecloudclients.core.util import encoding
import yaml


_VERSION_RE = re.compile(r'^v\d+(?:(?:alpha|beta)\d*)?$')


class _JsonSortedDict(dict):
  """A dict with a sorted JSON string representation."""

  def __str__(self):
    return json.dumps(self, sort_keys=True)


def _SplitEndpointUrl(url):
  """Returns api_name, api_version, resource_path for a googleapis url.

  Supports http(s)://api.googleapis.com/version/resource-path,
  http(s)://somehost/version/resource-path as served by emulators, and
  http(s)://somehost/api/version/resource-path.

  Args:
    url: str, The resource url.

  Returns:
    (str, str, str): The API name, version and resource path, or None if url is
      not an http(s) url.
  """
  if not (url.startswith('https://') or url.startswith('http://')):
    return None
  tokens = url[url.index(':') + 1:].strip('/').split('?')[0].split('/')
  domain = tokens[0]
  if 'googleapis' in domain and not domain.startswith('www'):
    api_name = domain.split('.')[0]
    rest = tokens[1:]
  elif len(tokens) > 1 and _VERSION_RE.match(tokens[1]):
    api_name = None
    rest = tokens[1:]
  else:
    api_name = tokens[1] if len(tokens) > 1 else None
    rest = tokens[2:]
  version = rest[0] if rest else None
  return api_name, version, '/'.join(rest[1:])


def _GetDotted(content, name):
  """Returns the value of the dotted name a.b.c in content, '' if undefined."""
  value = content
  for part in name.split('.'):
    if isinstance(value, dict):
      value = value.get(part, '')
    elif isinstance(value, list) and part.isdigit() and int(part) < len(value):
      value = value[int(part)]
    else:
      return ''
  return value


class HttpErrorPayload(string.Formatter):
  r"""Converts apitools HttpError payload to an object.

  Attributes:
    api_name: The url api name.
    api_version: The url version.
    content: The dumped JSON content.
    details: A list of {'@type': TYPE, 'detail': STRING} typed details.
    error_info: content['error'].
    instance_name: The url instance name.
    message: The human readable error message.
    resource_item: The singular form of resource_name.
    resource_name: The url resource collection name.
    status_code: The HTTP status code number.
    status_description: The status_code description.
    status_message: Context specific status message.
    url: The HTTP url.
    .<a>.<b>...: The <a>.<b>... attribute in the JSON content (synthesized in
      get_field()).

  Examples:
    error_format values and resulting output:

    'Error: [{status_code}] {status_message}{url?\n{?}}{.debugInfo?\n{?}}'

      Error: [404] Not found
      https://pubsub.googleapis.com/v1/projects/p/topics/t
      <content.debugInfo in yaml print format>

    'Error: {status_code} {details?\n\ndetails:\n{?}}'

      Error: 404

      details:
      - foo
      - bar
  """

  def __init__(self, http_error):
    self._value = '{?}'
    self.api_name = ''
    self.api_version = ''
    self.content = {}
    self.details = []
    self.error_info = None
    self.instance_name = ''
    self.resource_item = ''
    self.resource_name = ''
    self.status_code = 0
    self.status_description = ''
    self.status_message = ''
    self.url = ''
    if isinstance(http_error, str):
      self.message = http_error
    else:
      self._ExtractResponseAndJsonContent(http_error)
      self._ExtractUrlResourceAndInstanceNames(http_error)
      self.message = self._MakeGenericMessage()

  def parse(self, format_string):
    """Splits format_string into (literal, field_name, spec, conversion).

    string.Formatter.parse() stops a field name at the first : or ! and does
    not allow { inside it. Here a field runs to its balanced closing }, so
    {name?FORMAT} sub-formats and literal colons survive intact.

    Args:
      format_string: str, The HttpErrorPayload format string.

    Raises:
      ValueError: if format_string has unbalanced braces.

    Yields:
      (str, str, str, None) tuples, as string.Formatter.parse() does.
    """
    literal = []
    i = 0
    end = len(format_string)
    while i < end:
      c = format_string[i]
      if c in '{}' and format_string[i + 1:i + 2] == c:
        literal.append(c)
        i += 2
      elif c == '}':
        raise ValueError("Single '}' encountered in format string")
      elif c != '{':
        literal.append(c)
        i += 1
      else:
        depth = 1
        j = i + 1
        while j < end and depth:
          if format_string[j] == '{':
            depth += 1
          elif format_string[j] == '}':
            depth -= 1
          j += 1
        if depth:
          raise ValueError("Single '{' encountered in format string")
        yield ''.join(literal), format_string[i + 1:j - 1], '', None
        literal = []
        i = j
    if literal:
      yield ''.join(literal), None, None, None

  def get_field(self, field_name, unused_args, unused_kwargs):
    r"""Returns the value of field_name for string.Formatter.format().

    Args:
      field_name: The format string field name to get in the form
        name - the value of name in the payload, '' if undefined
        name?FORMAT - if name is non-empty then re-formats with FORMAT, where
          {?} is the value of name. For example, if name=NAME then
          {name?\nname is "{?}".} expands to '\nname is "NAME".'.
        .a.b.c - the value of a.b.c in the JSON decoded payload contents.
          For example, '{.error.status?[{?}]}' expands to [STATUS] if
          .error.status is defined.
      unused_args: Ignored.
      unused_kwargs: Ignored.

    Returns:
      The value of field_name for string.Formatter.format().
    """
    if field_name == '?':
      return self._value, field_name
    parts = field_name.split('?', 1)
    name = parts.pop(0)
    recursive_format = parts.pop(0) if parts else None
    if '.' in name:
      if name.startswith('.'):
        # Only check self.content.
        value = _GetDotted(self.content, name[1:])
      else:
        # Check the payload attributes first, then self.content.
        head = name.split('.', 1)[0]
        content = self.content
        if self.__dict__.get(head, None):
          content = {head: self.__dict__[head]}
        value = _GetDotted(content, name)
    elif name:
      value = self.__dict__.get(name, '')
    else:
      value = ''
    if not value and not isinstance(value, (int, float)):
      return '', name
    if not isinstance(value, (str, int, float)):
      value = yaml.safe_dump(
          json.loads(json.dumps(value)), default_flow_style=False).strip()
    if recursive_format:
      self._value = value
      value = self.format(recursive_format)
    return value, name

  def _ExtractResponseAndJsonContent(self, http_error):
    """Extracts the response and JSON content from the HttpError."""
    response = getattr(http_error, 'response', None)
    if response:
      self.status_code = int(response.get('status', 0))
      self.status_description = encoding.Decode(response.get('reason', ''))
    content = encoding.Decode(http_error.content)
    try:
      # X-GOOG-API-FORMAT-VERSION: 2
      self.content = _JsonSortedDict(json.loads(content))
      self.error_info = _JsonSortedDict(self.content['error'])
      if not self.status_code:  # Could have been set above.
        self.status_code = int(self.error_info.get('code', 0))
      if not self.status_description:  # Could have been set above.
        self.status_description = self.error_info.get('status', '')
      self.status_message = self.error_info.get('message', '')
      self.details = self.error_info.get('details', [])
    except (KeyError, TypeError, ValueError):
      self.status_message = content
    except AttributeError:
      pass

  def _ExtractUrlResourceAndInstanceNames(self, http_error):
    """Extracts the url resource type and instance names from the HttpError.

    The last collection/instance pair of the resource path is used, so
    .../projects/p/topics/t yields resource_name topics and instance_name t.

    Args:
      http_error: apitools_exceptions.HttpError, The error to inspect.
    """
    self.url = http_error.url
    if not self.url:
      return

    split = _SplitEndpointUrl(self.url)
    if split is None:
      return
    name, version, resource_path = split

    if name:
      self.api_name = name
    if version:
      self.api_version = version

    resource_parts = [p for p in resource_path.split('/') if p]
    if len(resource_parts) < 2:
      return
    if len(resource_parts) % 2:
      # Collection listing, e.g. projects/p/topics.
      return
    self.resource_name = resource_parts[-2]
    # Custom methods are addressed as instance:verb.
    self.instance_name = resource_parts[-1].split(':')[0]

    if self.resource_name.endswith('s'):
      # Singular form for formatting message text. This will result in:
      #   Topic [foo] not found.
      # instead of
      #   Topics [foo] not found.
      self.resource_item = self.resource_name[:-1]
    else:
      self.resource_item = self.resource_name

  def _MakeGenericMessage(self):
    """Makes a generic human readable message from the HttpError."""
    description = self._MakeDescription()
    if self.status_message:
      return '{0}: {1}'.format(description, self.status_message)
    return description

  def _MakeDescription(self):
    """Makes description for error by checking which fields are filled in."""
    if self.status_code and self.resource_item and self.instance_name:
      if self.status_code == 403:
        return ('You do not have permission to access {0} [{1}] (or it may '
                'not exist)').format(
                    self.resource_item, self.instance_name)
      if self.status_code == 404:
        return '{0} [{1}] not found'.format(
            self.resource_item.capitalize(), self.instance_name)
      if self.status_code == 409:
        if self.resource_item == 'project':
          return ('Resource in project [{0}] '
                  'is the subject of a conflict').format(self.instance_name)
        else:
          return '{0} [{1}] is the subject of a conflict'.format(
              self.resource_item.capitalize(), self.instance_name)

    description = self.status_description
    if description:
      if description.endswith('.'):
        description = description[:-1]
      return description
    # Example: 'HTTPError 403'
    return 'HTTPError {0}'.format(self.status_code)


class HttpException(core_exceptions.Error):
  """Transforms apitools HttpError to api_lib HttpException.

  Attributes:
    error: The original HttpError.
    error_format: An HttpErrorPayload format string.
    payload: The HttpErrorPayload object.
  """

  def __init__(self, error, error_format=None):
    super(HttpException, self).__init__('')
    self.error = error
    self.error_format = error_format
    self.payload = HttpErrorPayload(error)

  def __str__(self):
    error_format = self.error_format
    if error_format is None:
      error_format = '{message}{details?\n{?}}'
      if log.GetVerbosity() <= logging.DEBUG:
        error_format += '{.debugInfo?\n{?}}'
    return self.payload.format(str(error_format))

  @property
  def message(self):
    return str(self)

  def __eq__(self, other):
    if isinstance(other, HttpException):
      return self.message == other.message
    return False

  def __hash__(self):
    return hash(self.message)


def CatchHTTPErrorRaiseHTTPException(format_str=None):
  """Decorator that catches an HttpError and returns a custom error message.

  It catches the raw Http Error and runs it through the given format string to
  get the desired message.

  Args:
    format_str: An HttpErrorPayload format string. Note that any properties that
    are accessed here are on the HTTPErrorPayload object, and not the raw
    object returned from the server. None uses the HttpException default.

  Returns:
    A custom error message.

  Example:
    @CatchHTTPErrorRaiseHTTPException('Error [{status_code}]')
    def some_func_that_might_throw_an_error():
      ...
  """

  def CatchHTTPErrorRaiseHTTPExceptionDecorator(run_func):
    # Need to define a secondary wrapper to get an argument to the outer
    # decorator.
    @functools.wraps(run_func)
    def Wrapper(*args, **kwargs):
      try:
        return run_func(*args, **kwargs)
      except apitools_exceptions.HttpError as error:
        exc = HttpException(error, format_str)
        core_exceptions.reraise(exc, sys.exc_info()[2])

    return Wrapper

  return CatchHTTPErrorRaiseHTTPExceptionDecorator

# -*- coding: utf-8 -*- #
# Copyright 2014 Google Inc. All Rights Reserved.
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

"""Read and write properties for the Cloud client libraries.

Properties are addressed as VALUES.<section>.<name>, for example
VALUES.core.project. A value is looked up, in order, in:

  1. the invocation values pushed with VALUES.PushInvocationValues(),
  2. the CLOUDSDK_<SECTION>_<NAME> environment variable,
  3. the [<section>] of the properties file ($CLOUDSDK_CONFIG/properties),
  4. the property callbacks,
  5. the property default.
"""

import configparser
import functools
import os
import re

from googlecloudclients.core import exceptions
from googlecloudclients.core.util import encoding


CONFIG_DIR_ENV_VAR = 'CLOUDSDK_CONFIG'
PROPERTIES_FILE_NAME = 'properties'

_TRUE_STRINGS = ('true', '1', 'on', 'yes', 'y')
_FALSE_STRINGS = ('false', '0', 'off', 'no', 'n', '', 'none')

_SET_PROJECT_HELP = """\
To set your project, export:

  CLOUDSDK_CORE_PROJECT=PROJECT_ID

or add it to the [core] section of your properties file."""

# An optional domain prefix ending in a colon (google.com:) followed by a
# lower case identifier. Project numbers are rejected.
_VALID_PROJECT_REGEX = re.compile(
    r'^'
    r'(?:(?:[-a-z0-9]{1,63}\.)*(?:[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?):)?'
    r'(?:(?:[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?))'
    r'$'
)

# http(s)://host[:port]/ where host is a domain name, localhost or an IP
# address. The trailing slash is required.
_VALID_ENDPOINT_OVERRIDE_REGEX = re.compile(
    r'^'
    r'(?:https?)://'
    r'(?:'
    r'(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+'
    r'(?:[A-Z]{2,6}|[A-Z0-9-]{2,})|'
    r'localhost|'
    r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}|'
    r'\[?[A-F0-9]*:[A-F0-9:]+\]?'
    r')'
    r'(?::\d+)?'
    r'(?:/|[/?]\S+/)'
    r'$', re.IGNORECASE)


class Error(exceptions.Error):
  """Exceptions for the properties module."""


class PropertiesParseError(Error):
  """An exception to be raised when a properties file is invalid."""


class NoSuchPropertyError(Error):
  """An exception to be raised when the desired property does not exist."""


class InvalidValueError(Error):
  """An exception to be raised when the set value of a property is invalid."""


class InvalidProjectError(InvalidValueError):
  """An exception for bad project names, with a little user help."""

  def __init__(self, given):
    super(InvalidProjectError, self).__init__(
        given + '\n' + _SET_PROJECT_HELP)


class RequiredPropertyError(Error):
  """Generic exception for when a required property was not set."""

  def __init__(self, prop):
    section = ('' if prop.section == VALUES.default_section.name
               else prop.section + '/')
    super(RequiredPropertyError, self).__init__(
        'The required property [{section}{name}] is not currently set.\n'
        'It can be set in the [{raw_section}] section of [{path}]\n'
        'or temporarily by the environment variable [{env_var}]'.format(
            section=section,
            name=prop.name,
            raw_section=prop.section,
            path=PropertiesFilePath(),
            env_var=prop.EnvironmentName()))
    self.property = prop


def Stringize(value):
  if isinstance(value, str):
    return value
  return str(value)


def _ValidateBool(property_name, value):
  """Raises InvalidValueError if value cannot be read as a boolean."""
  if value is None or Stringize(value).lower() in _TRUE_STRINGS + _FALSE_STRINGS:
    return
  raise InvalidValueError(
      'The [{0}] value [{1}] is not valid. Possible values: [{2}].'.format(
          property_name, value,
          ', '.join(s or "''" for s in _TRUE_STRINGS + _FALSE_STRINGS)))


def _ValidateProject(project):
  """Raises InvalidProjectError if project is not a valid project id."""
  if project is None:
    return
  if not isinstance(project, str):
    raise InvalidValueError('project must be a string')
  if _VALID_PROJECT_REGEX.match(project):
    return
  if not project:
    raise InvalidProjectError('The project property is set to the '
                              'empty string, which is invalid.')
  if project.isdigit():
    raise InvalidProjectError(
        'The project property must be set to a valid project ID, not the '
        'project number [{0}]'.format(project))
  if re.match(r'[-0-9A-Z]', project) or any(c in project for c in ' !"\''):
    raise InvalidProjectError(
        'The project property must be set to a valid project ID, not the '
        'project name [{0}]'.format(project))
  raise InvalidProjectError(
      'The project property must be set to a valid project ID, '
      '[{0}] is not a valid project ID.'.format(project))


def _ValidateEndpointOverride(value):
  """Raises InvalidValueError unless value is an absolute http(s) URI."""
  if value is None:
    return
  if not _VALID_ENDPOINT_OVERRIDE_REGEX.match(value):
    raise InvalidValueError(
        'The endpoint_overrides property must be an absolute URI beginning '
        'with http:// or https:// and ending with a trailing \'/\'. '
        '[{0}] is not a valid endpoint override.'.format(value))


def PropertiesFilePath():
  """Returns the path of the user properties file.

  The directory comes from the CLOUDSDK_CONFIG environment variable and falls
  back to ~/.config/googlecloudclients.

  Returns:
    str, The properties file path.
  """
  config_dir = encoding.GetEncodedValue(os.environ, CONFIG_DIR_ENV_VAR)
  if not config_dir:
    config_dir = os.path.join(
        os.path.expanduser('~'), '.config', 'googlecloudclients')
  return os.path.join(config_dir, PROPERTIES_FILE_NAME)


class PropertiesFile(object):
  """A loaded INI properties file."""

  def __init__(self, paths):
    """Creates a new PropertiesFile and loads the given files.

    Args:
      paths: [str], The properties files to load, in order. Later files
        override earlier ones. Missing files are skipped.
    """
    self._properties = {}
    for path in paths:
      self._Load(path)

  def _Load(self, path):
    parsed_config = configparser.ConfigParser(interpolation=None)
    try:
      parsed_config.read(path)
    except configparser.Error as e:
      raise PropertiesParseError(
          'Unable to parse properties file [{0}]: {1}'.format(path, e))
    for section in parsed_config.sections():
      self._properties.setdefault(section, {}).update(
          parsed_config.items(section))

  def Get(self, section, name):
    """Returns the value of section/name, or None if it is not set."""
    return self._properties.get(section, {}).get(name)


class ActivePropertiesFile(object):
  """Caches the loaded properties file until it is invalidated."""

  _PROPERTIES = None

  @staticmethod
  def Load():
    if ActivePropertiesFile._PROPERTIES is None:
      ActivePropertiesFile._PROPERTIES = PropertiesFile([PropertiesFilePath()])
    return ActivePropertiesFile._PROPERTIES

  @staticmethod
  def Invalidate():
    ActivePropertiesFile._PROPERTIES = None


class _Property(object):
  """An individual property.

  Attributes:
    section: str, The name of the section the property appears in.
    name: str, The name of the property.
    is_hidden: bool, True to leave this property out of listings when unset.
    callbacks: [func], Functions called in order if no value is found
      elsewhere. The first one that returns a value other than None wins.
    default: A final value to use if no value is found after the callbacks.
  """

  def __init__(self, section, name, default=None, validator=None,
               hidden=False, callbacks=None):
    self.section = section
    self.name = name
    self.default = default
    self.is_hidden = hidden
    self.callbacks = list(callbacks or [])
    self._validator = validator

  def __eq__(self, other):
    return (isinstance(other, _Property) and
            (self.section, self.name) == (other.section, other.name))

  def __hash__(self):
    return hash((self.section, self.name))

  def __str__(self):
    return '{0}/{1}'.format(self.section, self.name)

  def Get(self, required=False, validate=True):
    """Gets the value for this property.

    Args:
      required: bool, True to raise an exception if the property is not set.
      validate: bool, Whether to run the value through the validator.

    Raises:
      RequiredPropertyError: if required and the property is not set.
      InvalidValueError: if validate and the value is rejected.

    Returns:
      str, The value for this property, or None if it is not set.
    """
    value = _GetProperty(self, ActivePropertiesFile.Load(), required)
    if validate:
      self.Validate(value)
    return value

  def GetBool(self, required=False):
    """Gets the boolean value for this property.

    Args:
      required: bool, True to raise an exception if the property is not set.

    Returns:
      bool, The boolean value for this property, or None if it is not set.
    """
    value = _GetProperty(self, ActivePropertiesFile.Load(), required)
    if value is None or value.lower() == 'none':
      return None
    return value.lower() in _TRUE_STRINGS

  def Validate(self, value):
    if self._validator:
      self._validator(value)

  def Set(self, value):
    """Sets the value for this property as an environment variable.

    Args:
      value: str|bool, The new value. None removes it from the environment.

    Raises:
      InvalidValueError: if the value is rejected by the validator.
    """
    self.Validate(value)
    if value is not None:
      value = Stringize(value)
    encoding.SetEncodedValue(os.environ, self.EnvironmentName(), value)

  def AddCallback(self, callback):
    self.callbacks.append(callback)

  def RemoveCallback(self, callback):
    self.callbacks.remove(callback)

  def EnvironmentName(self):
    return 'CLOUDSDK_{0}_{1}'.format(self.section.upper(), self.name.upper())


class _Section(object):
  """A group of related properties.

  Attributes:
    name: str, The name of the section.
    is_hidden: bool, True if the section is left out of listings.
  """

  def __init__(self, name, hidden=False):
    self.name = name
    self.is_hidden = hidden
    self._properties = {}

  def __iter__(self):
    return iter(self._properties.values())

  def _Add(self, name, default=None, validator=None, hidden=False,
           callbacks=None):
    prop = _Property(self.name, name, default=default, validator=validator,
                     hidden=self.is_hidden or hidden, callbacks=callbacks)
    self._properties[name] = prop
    return prop

  def _AddBool(self, name, default=None, hidden=False):
    return self._Add(name, default=default,
                     validator=functools.partial(_ValidateBool, name),
                     hidden=hidden)

  def Property(self, property_name):
    """Returns the named property of this section.

    Args:
      property_name: str, The name of the property.

    Raises:
      NoSuchPropertyError: if the section has no such property.

    Returns:
      _Property, The property.
    """
    try:
      return self._properties[property_name]
    except KeyError:
      raise NoSuchPropertyError(
          'Section [{0}] has no property [{1}].'.format(
              self.name, property_name))

  def AllValues(self):
    """Returns {name: value} for the properties of this section that are set.

    Defaults are not included.
    """
    properties_file = ActivePropertiesFile.Load()
    result = {}
    for prop in self:
      value = _GetPropertyWithoutDefault(prop, properties_file)
      if value is not None:
        result[prop.name] = value
    return result


class _SectionApiEndpointOverrides(_Section):
  """Endpoints to use instead of the default ones, e.g. a local emulator."""

  def __init__(self):
    super(_SectionApiEndpointOverrides, self).__init__(
        'api_endpoint_overrides', hidden=True)
    self.datastore = self._Add('datastore',
                               validator=_ValidateEndpointOverride)
    self.pubsub = self._Add('pubsub', validator=_ValidateEndpointOverride)


class _SectionCore(_Section):
  """Contains the properties for the 'core' section."""

  def __init__(self):
    super(_SectionCore, self).__init__('core')
    # If True, color is not used for log levels printed to the terminal.
    self.disable_color = self._AddBool('disable_color')
    # One of debug, info, warning, error, critical or none.
    self.verbosity = self._Add('verbosity')
    # If False, status messages on stdout and stderr are suppressed.
    self.user_output_enabled = self._AddBool('user_output_enabled',
                                             default=True)
    # The project used when no project is given for a request.
    self.project = self._Add('project', validator=_ValidateProject)


class _Sections(object):
  """The available property sections.

  Attributes:
    api_endpoint_overrides: Section, API endpoint overrides.
    core: Section, The core properties.
    default_section: Section, The section used for property names without a
      section (core).
  """

  def __init__(self):
    self.api_endpoint_overrides = _SectionApiEndpointOverrides()
    self.core = _SectionCore()
    self._sections = dict(
        (section.name, section)
        for section in [self.api_endpoint_overrides, self.core])
    self._invocation_stack = [{}]

  @property
  def default_section(self):
    return self.core

  def __iter__(self):
    return iter(self._sections.values())

  def PushInvocationValues(self):
    self._invocation_stack.append({})

  def PopInvocationValues(self):
    self._invocation_stack.pop()

  def SetInvocationValue(self, prop, value):
    """Sets the value of prop until the current invocation values are popped.

    Args:
      prop: _Property, The property to set.
      value: str, The value. None unsets it for this invocation.

    Raises:
      InvalidValueError: if the value is rejected by the validator.
    """
    if value is not None:
      prop.Validate(value)
    self._invocation_stack[-1][prop] = value

  def GetInvocationStack(self):
    return self._invocation_stack

  def Section(self, section):
    """Returns the named section.

    Args:
      section: str, The name of the section.

    Raises:
      NoSuchPropertyError: if the section is not known.

    Returns:
      _Section, The section.
    """
    try:
      return self._sections[section]
    except KeyError:
      raise NoSuchPropertyError(
          'Section "{0}" does not exist.'.format(section))

  def AllSections(self, include_hidden=False):
    return [name for name, section in self._sections.items()
            if include_hidden or not section.is_hidden]

  def AllValues(self):
    """Returns {section: {name: value}} for every property that is set."""
    result = {}
    for section in self:
      values = section.AllValues()
      if values:
        result[section.name] = values
    return result


VALUES = _Sections()


def ParsePropertyString(property_string):
  """Parses section/name into a (section, name) pair.

  Args:
    property_string: str, section/name, or just name for the default section.

  Returns:
    (str, str), The section and name. Both are None for an empty string and
    the name is None if the string ends with a slash.
  """
  if not property_string:
    return None, None
  section, _, name = property_string.rpartition('/')
  return section or VALUES.default_section.name, name or None


def FromString(property_string):
  """Returns the property named by section/name, None if name is missing."""
  section, name = ParsePropertyString(property_string)
  if not name:
    return None
  return VALUES.Section(section).Property(name)


def _GetPropertyWithoutDefault(prop, properties_file):
  """Returns the value of prop, ignoring its default, or None."""
  for invocation_values in reversed(VALUES.GetInvocationStack()):
    value = invocation_values.get(prop)
    if value is not None:
      return Stringize(value)

  value = encoding.GetEncodedValue(os.environ, prop.EnvironmentName())
  if value is not None:
    return value

  value = properties_file.Get(prop.section, prop.name)
  if value is not None:
    return value

  for callback in prop.callbacks:
    value = callback()
    if value is not None:
      return Stringize(value)
  return None


def _GetProperty(prop, properties_file, required):
  """Returns the value of prop, its default, or None.

  Args:
    prop: _Property, The property to get.
    properties_file: PropertiesFile, The loaded properties file.
    required: bool, True to raise an exception if the property is not set.

  Raises:
    RequiredPropertyError: if required and the property is not set.

  Returns:
    str, The value.
  """
  value = _GetPropertyWithoutDefault(prop, properties_file)
  if value is None and prop.default is not None:
    value = Stringize(prop.default)
  if value is None and required:
    raise RequiredPropertyError(prop)
  return value

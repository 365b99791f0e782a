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

"""Library for obtaining API clients and messages."""

from urllib.parse import urljoin
from urllib.parse import urlparse

from googlecloudclients.core import exceptions
from googlecloudclients.core import log
from googlecloudclients.core import properties
from googlecloudclients.third_party.apis import apis_map


class Error(exceptions.Error):
  """A base class for apis helper errors."""


class UnknownAPIError(Error):
  """Unable to find API in APIs map."""

  def __init__(self, api_name):
    super(UnknownAPIError, self).__init__(
        'API named [{0}] does not exist in the APIs map'.format(api_name))


class UnknownVersionError(Error):
  """Unable to find API version in APIs map."""

  def __init__(self, api_name, api_version):
    super(UnknownVersionError, self).__init__(
        'The [{0}] API does not have version [{1}] in the APIs map'.format(
            api_name, api_version))


def _GetDefaultVersion(api_name):
  for ver, api_def in apis_map.MAP.get(api_name, {}).items():
    if api_def.default_version:
      return ver
  return None


def GetVersions(api_name):
  """Return available versions for given api.

  Args:
    api_name: str, The API name.

  Raises:
    UnknownAPIError: If api_name does not exist in the APIs map.

  Returns:
    list, of version names.
  """
  version_map = apis_map.MAP.get(api_name, None)
  if version_map is None:
    raise UnknownAPIError(api_name)
  return list(version_map.keys())


def ResolveVersion(api_name, default_override=None):
  """Resolves the version for an API based on the APIs map.

  Args:
    api_name: str, The API name.
    default_override: str, The override for the default version.

  Raises:
    UnknownAPIError: If api_name does not exist in the APIs map.

  Returns:
    str, The resolved version.
  """
  if api_name not in apis_map.MAP:
    raise UnknownAPIError(api_name)
  return default_override or _GetDefaultVersion(api_name)


def GetApiDef(api_name, api_version):
  """Returns the APIDef for the specified API and version.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Raises:
    UnknownAPIError: If api_name does not exist in the APIs map.
    UnknownVersionError: If api_version does not exist for given api_name in
      the APIs map.

  Returns:
    APIDef, The APIDef for the specified API and version.
  """
  if api_name not in apis_map.MAP:
    raise UnknownAPIError(api_name)

  api_versions = apis_map.MAP[api_name]
  if api_version is None or api_version not in api_versions:
    raise UnknownVersionError(api_name, api_version)
  return api_versions[api_version]


def GetClientClass(api_name, api_version):
  """Returns the client class for the API specified in the args.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Returns:
    base_api.BaseApiClient, Client class for the specified API.
  """
  api_def = GetApiDef(api_name, api_version)
  module_path, client_class_name = api_def.client_full_classpath.rsplit('.', 1)
  module_obj = __import__(module_path, fromlist=[client_class_name])
  return getattr(module_obj, client_class_name)


def _BuildEndpointOverride(endpoint_override, base_url):
  """Constructs a normalized endpoint URI depending on the client base_url."""
  url_base = urlparse(base_url)
  url_endpoint_override = urlparse(endpoint_override)
  if url_base.path == '/' or url_endpoint_override.path != '/':
    return endpoint_override
  return urljoin(
      '{}://{}'.format(url_endpoint_override.scheme,
                       url_endpoint_override.netloc), url_base.path)


def GetEffectiveApiEndpoint(api_name, api_version, client_class=None):
  """Returns effective endpoint for given api.

  An api_endpoint_overrides/<api_name> property replaces the scheme and host of
  the generated client's base URL, keeping its version path.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.
    client_class: base_api.BaseApiClient, The client class to take the base
      URL from. Looked up from the APIs map if not given.

  Returns:
    str, The endpoint URL.
  """
  try:
    endpoint_override = properties.VALUES.api_endpoint_overrides.Property(
        api_name).Get()
  except properties.NoSuchPropertyError:
    endpoint_override = None

  client_class = client_class or GetClientClass(api_name, api_version)
  if endpoint_override:
    return _BuildEndpointOverride(endpoint_override, client_class.BASE_URL)
  return client_class.BASE_URL


def GetClientInstance(api_name, api_version, no_http=False, http_client=None):
  """Returns an instance of the API client specified in the args.

  Credentials are never looked up here. Callers that need authorized requests
  pass an already authorized http_client.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.
    no_http: bool, True to not hand an http object to this client. It is only
      useful for tests and for building requests offline.
    http_client: bring your own http client to use. Incompatible with
      no_http=True.

  Returns:
    base_api.BaseApiClient, An instance of the specified API client.
  """
  if no_http:
    assert http_client is None

  client_class = GetClientClass(api_name, api_version)
  endpoint = GetEffectiveApiEndpoint(api_name, api_version, client_class)
  log.debug('Creating %s %s client for [%s]', api_name, api_version, endpoint)
  return client_class(
      url=endpoint,
      get_credentials=False,
      http=http_client)


def GetMessagesModule(api_name, api_version):
  """Returns the messages module for the API specified in the args.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Returns:
    Module containing the definitions of messages for the specified API.
  """
  api_def = GetApiDef(api_name, api_version)
  # fromlist below must not be empty, see:
  # http://stackoverflow.com/questions/2724260/why-does-pythons-import-require-fromlist.
  return __import__(api_def.messages_full_modulepath, fromlist=['something'])

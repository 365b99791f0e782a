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
"""Common utility functions for the Cloud Datastore API."""

from googlecloudclients.api_lib.util import apis

DATASTORE_API_NAME = 'datastore'
DATASTORE_API_VERSION = 'v1'


def GetMessages():
  """Import and return the appropriate datastore messages module."""
  return apis.GetMessagesModule(DATASTORE_API_NAME, DATASTORE_API_VERSION)


def GetClient(no_http=False):
  """Returns the Cloud Datastore client for the appropriate release track."""
  return apis.GetClientInstance(DATASTORE_API_NAME, DATASTORE_API_VERSION,
                                no_http=no_http)


def GetService(client=None):
  """Returns the service for interacting with the Datastore service."""
  return (client or GetClient()).projects

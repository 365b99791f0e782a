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
"""Read access to the entities of a Cloud Datastore project."""

from googlecloudclients.api_lib.datastore import util
from googlecloudclients.api_lib.util import exceptions as api_exceptions
from googlecloudclients.core import log
from googlecloudclients.core import properties


def _Project(project):
  return project or properties.VALUES.core.project.Get(required=True)


class DatasetClient(object):
  """Client for running queries and lookups in the Cloud Datastore API."""

  def __init__(self, client=None, messages=None):
    self.client = client or util.GetClient()
    self.messages = messages or self.client.MESSAGES_MODULE
    self._service = util.GetService(self.client)

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def RunQuery(self, query, namespace=None, project=None):
    """Runs a query and returns the first batch of results.

    Args:
      query (query.Query): The query to run.
      namespace (str): Namespace to run the query in. The default namespace
        is used if not given.
      project (str): Project to query. Defaults to core/project.
    Returns:
      QueryResultBatch: the batch of results.
    """
    partition_id = None
    if namespace:
      partition_id = self.messages.PartitionId(projectId=_Project(project),
                                               namespaceId=namespace)
    run_req = self.messages.DatastoreProjectsRunQueryRequest(
        projectId=_Project(project),
        runQueryRequest=self.messages.RunQueryRequest(
            partitionId=partition_id,
            query=query.ToMessage()))
    log.debug('Running query in project [%s]', run_req.projectId)
    return self._service.RunQuery(run_req).batch

  @api_exceptions.CatchHTTPErrorRaiseHTTPException()
  def Lookup(self, keys, project=None):
    """Looks up entities by key.

    Args:
      keys (list[key.Key]): The keys of the entities to look up.
      project (str): Project of the entities. Defaults to core/project.
    Returns:
      LookupResponse: the found, missing and deferred entities.
    """
    lookup_req = self.messages.DatastoreProjectsLookupRequest(
        projectId=_Project(project),
        lookupRequest=self.messages.LookupRequest(
            keys=[k.ToMessage(self.messages) for k in keys]))
    log.debug('Looking up %d key(s) in project [%s]',
              len(lookup_req.lookupRequest.keys), lookup_req.projectId)
    return self._service.Lookup(lookup_req)

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
"""Tests for the HTTP error translation helpers."""

import logging

from apitools.base.py import exceptions as apitools_exceptions
from googlecloudclients.api_lib.util import exceptions as api_exceptions
from googlecloudclients.core import exceptions as core_exceptions
from googlecloudclients.core import log
from tests.lib import test_case
from tests.lib.apitools import http_error

_TOPIC_URL = 'https://pubsub.googleapis.com/v1/projects/p/topics/t?alt=json'


class HttpErrorPayloadTest(test_case.Base):

  def testUrlParts(self):
    payload = api_exceptions.HttpErrorPayload(http_error.MakeHttpError(
        404, 'Resource not found.', reason='NOT_FOUND', url=_TOPIC_URL))
    self.assertEqual('pubsub', payload.api_name)
    self.assertEqual('v1', payload.api_version)
    self.assertEqual('topics', payload.resource_name)
    self.assertEqual('topic', payload.resource_item)
    self.assertEqual('t', payload.instance_name)
    self.assertEqual(404, payload.status_code)
    self.assertEqual('NOT_FOUND', payload.status_description)
    self.assertEqual('Resource not found.', payload.status_message)

  def testEmulatorUrl(self):
    payload = api_exceptions.HttpErrorPayload(http_error.MakeHttpError(
        404, 'Not found.',
        url='http://localhost:8085/v1/projects/p/subscriptions/s:pull'))
    self.assertEqual('v1', payload.api_version)
    self.assertEqual('subscription', payload.resource_item)
    self.assertEqual('s', payload.instance_name)

  def testCollectionUrlHasNoInstance(self):
    payload = api_exceptions.HttpErrorPayload(http_error.MakeHttpError(
        500, 'Internal error.',
        url='https://pubsub.googleapis.com/v1/projects/p/topics'))
    self.assertEqual('', payload.instance_name)
    self.assertEqual('HTTPError 500: Internal error.', payload.message)

  def testStatusFromContent(self):
    error = apitools_exceptions.HttpError(
        {}, '{"error": {"code": 409, "message": "Exists.", '
            '"status": "ALREADY_EXISTS"}}', None)
    payload = api_exceptions.HttpErrorPayload(error)
    self.assertEqual(409, payload.status_code)
    self.assertEqual('ALREADY_EXISTS: Exists.', payload.message)

  def testNonJsonContent(self):
    error = apitools_exceptions.HttpError(
        {'status': 502, 'reason': 'Bad Gateway'}, 'upstream failure', None)
    payload = api_exceptions.HttpErrorPayload(error)
    self.assertEqual('Bad Gateway: upstream failure', payload.message)

  def testParseKeepsSubFormatsInFieldName(self):
    payload = api_exceptions.HttpErrorPayload('msg')
    self.assertEqual(
        [('', 'message', '', None), ('', 'details?\n{?}', '', None)],
        list(payload.parse('{message}{details?\n{?}}')))

  def testParseLiteralsAndEscapedBraces(self):
    payload = api_exceptions.HttpErrorPayload('msg')
    self.assertEqual(
        [('Error: {', 'status_code', '', None), ('} done', None, None, None)],
        list(payload.parse('Error: {{{status_code}}} done')))

  def testParseUnbalancedBraces(self):
    payload = api_exceptions.HttpErrorPayload('msg')
    with self.assertRaises(ValueError):
      list(payload.parse('{message'))
    with self.assertRaises(ValueError):
      list(payload.parse('message}'))


class HttpExceptionTest(test_case.Base):

  def testDefaultFormat(self):
    exc = api_exceptions.HttpException(http_error.MakeHttpError(
        404, 'Resource not found (resource=t).', reason='NOT_FOUND',
        url=_TOPIC_URL))
    self.assertEqual('Topic [t] not found: Resource not found (resource=t).',
                     str(exc))
    self.assertEqual(str(exc), exc.message)
    self.assertIsInstance(exc, core_exceptions.Error)

  def testPermissionDenied(self):
    exc = api_exceptions.HttpException(http_error.MakeHttpError(
        403, 'Denied.', url=_TOPIC_URL))
    self.assertEqual('You do not have permission to access topic [t] (or it '
                     'may not exist): Denied.', str(exc))

  def testDetails(self):
    exc = api_exceptions.HttpException(http_error.MakeHttpError(
        400, 'Invalid.', url=_TOPIC_URL,
        details=[{'@type': 'type.googleapis.com/google.rpc.BadRequest',
                  'detail': 'bad field'}]))
    lines = str(exc).split('\n')
    self.assertEqual('HTTPError 400: Invalid.', lines[0])
    self.assertIn('  detail: bad field', lines)

  def testCustomFormat(self):
    exc = api_exceptions.HttpException(
        http_error.MakeHttpError(404, 'Gone.', url=_TOPIC_URL),
        'Error: [{status_code}] {status_message}{url?\n{?}}')
    self.assertEqual('Error: [404] Gone.\n' + _TOPIC_URL, str(exc))

  def testNotFoundMessageFormats(self):
    exc = api_exceptions.HttpException(http_error.MakeHttpError(
        404, 'Resource not found.',
        url='https://pubsub.googleapis.com/v1/projects/p/topics/t'))
    self.assertEqual('Topic [t] not found: Resource not found.', str(exc))

  def testLiteralColonAndBracesInFormat(self):
    exc = api_exceptions.HttpException(
        http_error.MakeHttpError(404, 'Gone.', url=_TOPIC_URL),
        'code: {status_code} {{raw}}{status_message?: {?}}')
    self.assertEqual('code: 404 {raw}: Gone.', str(exc))

  def testDottedContentField(self):
    exc = api_exceptions.HttpException(
        http_error.MakeHttpError(
            content={'error': {'code': 400, 'message': 'Bad.',
                               'status': 'INVALID_ARGUMENT'}}),
        '{.error.status?[{?}]}')
    self.assertEqual('[INVALID_ARGUMENT]', str(exc))

  def testDebugInfoAtDebugVerbosity(self):
    error = http_error.MakeHttpError(
        500, content={'error': {'code': 500, 'message': 'Oops.'},
                      'debugInfo': 'stack trace'})
    self.assertNotIn('stack trace', str(api_exceptions.HttpException(error)))
    log.SetVerbosity(logging.DEBUG)
    self.assertEqual('HTTPError 500: Oops.\nstack trace',
                     str(api_exceptions.HttpException(error)))

  def testEquality(self):
    first = api_exceptions.HttpException(
        http_error.MakeHttpError(404, 'Gone.', url=_TOPIC_URL))
    second = api_exceptions.HttpException(
        http_error.MakeHttpError(404, 'Gone.', url=_TOPIC_URL))
    self.assertEqual(first, second)
    self.assertEqual(hash(first), hash(second))


class CatchHTTPErrorRaiseHTTPExceptionTest(test_case.Base):

  def testTranslatesHttpError(self):

    @api_exceptions.CatchHTTPErrorRaiseHTTPException()
    def Fail():
      raise http_error.MakeHttpError(404, 'Gone.', url=_TOPIC_URL)

    with self.assertRaises(api_exceptions.HttpException) as ctx:
      Fail()
    self.assertEqual('Topic [t] not found: Gone.', str(ctx.exception))
    self.assertIsInstance(ctx.exception.error, apitools_exceptions.HttpError)
    self.assertIsNotNone(ctx.exception.__traceback__)

  def testFormatString(self):

    @api_exceptions.CatchHTTPErrorRaiseHTTPException('{status_code}')
    def Fail():
      raise http_error.MakeHttpError(409, 'Exists.', url=_TOPIC_URL)

    with self.assertRaisesRegex(api_exceptions.HttpException, '^409$'):
      Fail()

  def testOtherErrorsPassThrough(self):

    @api_exceptions.CatchHTTPErrorRaiseHTTPException()
    def Fail():
      raise ValueError('not http')

    with self.assertRaises(ValueError):
      Fail()

  def testKeepsFunctionName(self):

    @api_exceptions.CatchHTTPErrorRaiseHTTPException()
    def Succeed(value):
      return value

    self.assertEqual('Succeed', Succeed.__name__)
    self.assertEqual(3, Succeed(3))


if __name__ == '__main__':
  test_case.main()

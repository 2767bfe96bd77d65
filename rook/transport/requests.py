"""
rook.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from rook.conf import defaults
from rook.exceptions import APIError, RateLimited
from rook.transport.http import HTTPTransport, parse_retry_after

try:
    import requests
    has_requests = True
except ImportError:
    has_requests = False


class RequestsHTTPTransport(HTTPTransport):

    def __init__(self, timeout=defaults.TIMEOUT, verify_ssl=True, ca_certs=None):
        if not has_requests:
            raise ImportError('RequestsHTTPTransport requires requests.')

        super(RequestsHTTPTransport, self).__init__(timeout=timeout,
                                                    verify_ssl=verify_ssl,
                                                    ca_certs=ca_certs)
        self.session = requests.Session()

    def post(self, url, data, headers):
        verify = self.verify_ssl
        if verify and self.ca_certs:
            # If SSL verification is enabled use the provided CA bundle to
            # perform the verification.
            verify = self.ca_certs

        response = self.session.post(url, data=data, headers=headers,
                                     verify=verify, timeout=self.timeout)
        if response.status_code == 429:
            raise RateLimited(
                'Rate limited by the server',
                parse_retry_after(response.headers.get('Retry-After')))
        if response.status_code >= 400:
            raise APIError(
                response.headers.get('X-Sentry-Error') or response.reason,
                response.status_code)
        return response.content

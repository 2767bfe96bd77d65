"""
rook.transport.http
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import ssl
import time
from urllib.error import HTTPError
from urllib.request import Request, urlopen

import rook
from rook.conf import defaults
from rook.conf.remote import Dsn
from rook.exceptions import APIError, RateLimited
from rook.transport.base import Transport
from rook.utils import get_auth_header, json

logger = logging.getLogger('rook.transport')


def parse_retry_after(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class HTTPTransport(Transport):
    """
    Posts events as JSON to the store endpoint of the configured DSN.

    Without a DSN the transport stays usable but drops every event.
    Options may also be given through the DSN query string, e.g.
    ``https://public@sentry.local/1?timeout=5``.
    """

    def __init__(self, timeout=defaults.TIMEOUT, verify_ssl=True, ca_certs=None):
        self.dsn = None
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.ca_certs = ca_certs

    def configure(self, options):
        self.dsn = Dsn.from_string(options.dsn)
        if self.dsn is None:
            return

        dsn_options = self.dsn.options
        if 'timeout' in dsn_options:
            self.timeout = int(dsn_options['timeout'])
        if 'verify_ssl' in dsn_options:
            self.verify_ssl = bool(int(dsn_options['verify_ssl']))
        if 'ca_certs' in dsn_options:
            self.ca_certs = dsn_options['ca_certs']

    def get_headers(self):
        client_string = 'rook-python/%s' % (rook.VERSION,)
        return {
            'User-Agent': client_string,
            'Content-Type': 'application/json',
            'X-Sentry-Auth': get_auth_header(
                protocol=defaults.PROTOCOL_VERSION,
                timestamp=time.time(),
                client=client_string,
                api_key=self.dsn.public_key,
                api_secret=self.dsn.secret_key,
            ),
        }

    def encode(self, event):
        return json.dumps(event.to_dict()).encode('utf-8')

    def send_event(self, event):
        if self.dsn is None:
            logger.debug('No DSN configured, dropping event %s', event.event_id)
            return None

        url = self.dsn.store_url
        data = self.encode(event)
        logger.debug('Sending event of length %d to %s', len(data), url)
        return self.post(url, data, self.get_headers())

    def get_ssl_context(self):
        if not self.verify_ssl:
            return ssl._create_unverified_context()
        return ssl.create_default_context(cafile=self.ca_certs)

    def post(self, url, data, headers):
        """
        Sends a request to a remote webserver using HTTP POST.
        """
        req = Request(url, data=data, headers=headers)
        kwargs = {'timeout': self.timeout}
        if url.startswith('https'):
            kwargs['context'] = self.get_ssl_context()

        try:
            with urlopen(req, **kwargs) as response:
                return response.read()
        except HTTPError as e:
            if e.code == 429:
                raise RateLimited(
                    'Rate limited by the server',
                    parse_retry_after(e.headers.get('Retry-After')))
            raise APIError(e.headers.get('X-Sentry-Error') or e.reason, e.code)

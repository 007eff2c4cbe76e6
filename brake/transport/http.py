"""
brake.transport.http
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import ssl
from contextlib import closing
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from brake.conf import defaults
from brake.transport.base import Transport
from brake.utils.encoding import to_unicode


class HTTPTransport(Transport):

    scheme = ['sync+http', 'sync+https']

    def __init__(self, parsed_url, timeout=defaults.TIMEOUT, verify_ssl=True):
        super(HTTPTransport, self).__init__(parsed_url, timeout=timeout)

        if isinstance(verify_ssl, str):
            verify_ssl = bool(int(verify_ssl))

        self.verify_ssl = verify_ssl

    def get_ssl_context(self):
        if self.verify_ssl:
            return ssl.create_default_context()
        return ssl._create_unverified_context()

    def send(self, request):
        """
        Sends a request to a remote webserver using HTTP POST.
        """
        req = Request(self._url, data=request.body, headers=request.headers,
                      method=request.method)

        try:
            response = urlopen(req, timeout=self.timeout,
                               context=self.get_ssl_context())
        except HTTPError as e:
            # error statuses still come with a readable response
            response = e

        with closing(response):
            body = response.read()
        return response, to_unicode(body)

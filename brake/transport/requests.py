"""
brake.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import requests

from brake.conf import defaults
from brake.transport.http import HTTPTransport


class RequestsHTTPTransport(HTTPTransport):

    scheme = ['requests+http', 'requests+https']

    def __init__(self, parsed_url, timeout=defaults.TIMEOUT, verify_ssl=True):
        super(RequestsHTTPTransport, self).__init__(parsed_url,
                                                    timeout=timeout,
                                                    verify_ssl=verify_ssl)

    def send(self, request):
        response = requests.request(
            request.method, self._url, data=request.body,
            headers=request.headers, verify=self.verify_ssl,
            timeout=self.timeout)
        return response, response.text

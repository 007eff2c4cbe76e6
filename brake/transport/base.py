"""
brake.transport.base
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from urllib.parse import urlunparse

from brake.conf import defaults
from brake.transport.exceptions import InvalidScheme


class Request(object):
    """
    An outbound notice. The body is written once, before the request is
    handed to a transport.
    """

    def __init__(self, url, method='POST', headers=None):
        self.url = url
        self.method = method
        self.headers = dict(headers or {})
        self.body = b''

    def __repr__(self):
        return '<%s: %s %s>' % (type(self).__name__, self.method, self.url)

    def write(self, payload):
        self.body = payload
        self.headers['Content-Length'] = str(len(payload))


def get_status(response):
    """
    Returns the HTTP status code of a transport's response object, or
    ``None``.
    """
    for attr in ('status_code', 'status', 'code'):
        value = getattr(response, attr, None)
        if isinstance(value, int):
            return value
    return None


class Transport(object):
    """
    All transport implementations need to subclass this class

    You must implement a send method (or an async_send method if
    sub-classing AsyncTransport).
    """

    is_async = False
    scheme = []

    def __init__(self, parsed_url, timeout=defaults.TIMEOUT):
        self.check_scheme(parsed_url)

        if isinstance(timeout, str):
            timeout = float(timeout)

        self._parsed_url = parsed_url
        # drop the transport prefix (e.g. threaded+) and the options
        self._url = urlunparse(parsed_url._replace(
            scheme=parsed_url.scheme.rsplit('+', 1)[-1], query=''))
        self.timeout = timeout

    def check_scheme(self, url):
        if url.scheme not in self.scheme:
            raise InvalidScheme()

    def send(self, request):
        """
        You need to override this to do something with the actual
        data. Usually - this is sending to a server.

        Returns a ``(response, body)`` tuple; error statuses are returned,
        not raised.
        """
        raise NotImplementedError


class AsyncTransport(Transport):
    """
    All asynchronous transport implementations should subclass this
    class.

    You must implement a async_send method.
    """

    is_async = True

    def async_send(self, request, callback):
        """
        Override this method for asynchronous transports. Call
        ``callback(request, response=..., body=...)`` once the exchange is
        over, or ``callback(request, response=..., error=exc)`` if it failed.
        """
        raise NotImplementedError

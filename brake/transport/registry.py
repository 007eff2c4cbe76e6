"""
brake.transport.registry
~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from urllib.parse import parse_qsl

from brake.transport.exceptions import DuplicateScheme, InvalidScheme
from brake.transport.http import HTTPTransport
from brake.transport.requests import RequestsHTTPTransport
from brake.transport.threaded import (
    ThreadedHTTPTransport, ThreadedRequestsHTTPTransport)


class TransportRegistry(object):
    def __init__(self, transports=None):
        # setup a default list of senders
        self._schemes = {}
        self._transports = {}

        if transports:
            for transport in transports:
                self.register_transport(transport)

    def register_transport(self, transport):
        if not hasattr(transport, 'scheme') or not hasattr(transport.scheme, '__iter__'):
            raise AttributeError('Transport %s must have a scheme list' % (transport.__name__,))

        for scheme in transport.scheme:
            self.register_scheme(scheme, transport)

    def register_scheme(self, scheme, cls):
        """
        It is possible to inject new schemes at runtime
        """
        if scheme in self._schemes:
            raise DuplicateScheme()

        self._schemes[scheme] = cls

    def copy(self):
        """
        Returns a registry with the same schemes and no cached transports.
        """
        registry = type(self)()
        registry._schemes = dict(self._schemes)
        return registry

    def supported_scheme(self, scheme):
        return scheme in self._schemes

    def get_transport(self, parsed_url, **options):
        """
        Returns the transport for ``parsed_url``, one instance per URL and
        options. Options in the query string (e.g. ``?timeout=30``) take
        precedence over ``options``.
        """
        if not self.supported_scheme(parsed_url.scheme):
            raise InvalidScheme('Unsupported scheme: %r' % (parsed_url.scheme,))

        options.update(parse_qsl(parsed_url.query))
        key = (parsed_url.geturl(), tuple(sorted(options.items())))
        if key not in self._transports:
            self._transports[key] = self._schemes[parsed_url.scheme](
                parsed_url, **options)
        return self._transports[key]


default_transports = [
    HTTPTransport,
    ThreadedHTTPTransport,
    RequestsHTTPTransport,
    ThreadedRequestsHTTPTransport,
]

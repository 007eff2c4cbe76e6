"""
brake.transport
~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from brake.transport.base import Request, Transport, AsyncTransport  # NOQA
from brake.transport.exceptions import InvalidScheme, DuplicateScheme  # NOQA
from brake.transport.http import HTTPTransport  # NOQA
from brake.transport.requests import RequestsHTTPTransport  # NOQA
from brake.transport.threaded import ThreadedHTTPTransport, ThreadedRequestsHTTPTransport  # NOQA
from brake.transport.registry import TransportRegistry, default_transports  # NOQA

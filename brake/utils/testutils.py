"""
brake.utils.testutils
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from unittest import TestCase as BaseTestCase

import brake
from brake.transport.base import Transport


class TestCase(BaseTestCase):
    pass


class InMemoryClient(brake.Client):
    """
    Records notices instead of sending them.
    """

    def __init__(self, *args, **kwargs):
        self.notices = []
        super(InMemoryClient, self).__init__(*args, **kwargs)

    def send_notice(self, notice):
        self.notices.append(notice)


class InMemoryTransport(Transport):
    """
    Synchronous transport keeping every request it was given. Answers with
    ``self.response`` and ``self.body``, or raises ``self.error``.
    """

    scheme = ['memory+http', 'memory+https']

    def __init__(self, parsed_url, **options):
        super(InMemoryTransport, self).__init__(
            parsed_url, timeout=options.get('timeout', 1))
        self.requests = []
        self.response = None
        self.body = ''
        self.error = None

    def send(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response, self.body

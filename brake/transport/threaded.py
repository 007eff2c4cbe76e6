"""
brake.transport.threaded
~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import threading
import time

from brake.transport.base import AsyncTransport
from brake.transport.http import HTTPTransport
from brake.transport.requests import RequestsHTTPTransport

logger = logging.getLogger('brake.errors')


class ThreadedTransport(AsyncTransport):
    """
    Runs each exchange on its own daemon thread and reports back through the
    callback, on that thread.
    """

    def __init__(self, *args, **kwargs):
        super(ThreadedTransport, self).__init__(*args, **kwargs)
        self._threads = []

    def send_sync(self, request, callback):
        try:
            response, body = self.send(request)
        except Exception as e:
            # some errors still carry the response they failed on
            response = getattr(e, 'response', None)
            try:
                callback(request, response=response, error=e)
            except Exception:
                logger.error('Failed processing job', exc_info=True)
        else:
            try:
                callback(request, response=response, body=body)
            except Exception:
                logger.error('Failed processing job', exc_info=True)

    def async_send(self, request, callback):
        thread = threading.Thread(
            target=self.send_sync, args=(request, callback),
            name='brake-%s' % (self._parsed_url.hostname,))
        thread.daemon = True
        thread.start()

        self._threads = [t for t in self._threads if t.is_alive()]
        self._threads.append(thread)
        return thread

    def wait(self, timeout=None):
        """
        Blocks until every exchange started so far is over, or ``timeout``
        seconds have passed. Returns ``True`` if nothing is left running.
        """
        deadline = None if timeout is None else time.time() + timeout
        for thread in list(self._threads):
            if deadline is None:
                thread.join()
            else:
                thread.join(max(0, deadline - time.time()))
        self._threads = [t for t in self._threads if t.is_alive()]
        return not self._threads


class ThreadedHTTPTransport(ThreadedTransport, HTTPTransport):

    scheme = ['http', 'https', 'threaded+http', 'threaded+https']


class ThreadedRequestsHTTPTransport(ThreadedTransport, RequestsHTTPTransport):

    scheme = ['threaded+requests+http', 'threaded+requests+https']

"""
brake.base
~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import sys
from urllib.parse import urlparse

from blinker import Signal

import brake
from brake.builder import NoticeBuilder
from brake.conf import Configuration
from brake.exceptions import InvalidConfiguration
from brake.serializer import from_xml, parse_response, to_xml
from brake.transport.base import Request, get_status
from brake.transport.registry import TransportRegistry, default_transports

__all__ = ('Client', 'notify')

CONTENT_TYPE = 'text/xml'


class Client(object):
    """
    Sends notices to the error service without ever raising to the caller.

    Will read default configuration from ``BRAKE_*`` environment variables
    when no configuration is given.

    >>> from brake import Client, Configuration

    >>> # Read configuration from ``os.environ``
    >>> client = Client()

    >>> # Specify a configuration explicitly
    >>> client = Client(Configuration(api_key='abc123'))

    >>> # Report an exception
    >>> try:
    >>>     1/0
    >>> except ZeroDivisionError:
    >>>     client.capture_exception()

    Every exchange, successful or not, ends with the ``request_ended``
    signal, sent from the transport's thread:

    >>> @client.request_ended.connect
    >>> def on_request_ended(client, request, response, body):
    >>>     print(response, body)
    """
    logger = logging.getLogger('brake')

    _registry = TransportRegistry(transports=default_transports)

    def __init__(self, configuration=None, builder=None,
                 transport_registry=None):
        self.configure_logging()

        # configure loggers first
        cls = self.__class__
        self.logger = logging.getLogger(
            '%s.%s' % (cls.__module__, cls.__name__))
        self.error_logger = logging.getLogger('brake.errors')

        if configuration is None:
            self.logger.debug('Configuring Brake from environment variables')
            try:
                configuration = Configuration.from_environ()
            except InvalidConfiguration as e:
                self.error_logger.error(
                    'Ignoring invalid environment configuration: %s', e)
                configuration = Configuration()

        self.configuration = configuration
        self.builder = builder or NoticeBuilder(configuration)
        # transports are cached per client
        if transport_registry is None:
            transport_registry = self._registry.copy()
        self._registry = transport_registry
        self.request_ended = Signal(doc='Sent when a notice exchange is over.')

        if not configuration.api_key:
            self.logger.info(
                'Brake has no API key configured; notices without one will'
                ' not be sent.')

    @classmethod
    def register_scheme(cls, scheme, transport_class):
        cls._registry.register_scheme(scheme, transport_class)

    def configure_logging(self):
        logger = logging.getLogger('brake')
        if logger.handlers:
            return
        logger.addHandler(logging.StreamHandler())
        logger.setLevel(logging.INFO)

    def get_transport(self):
        parsed = urlparse(self.configuration.server_uri)
        return self._registry.get_transport(
            parsed, timeout=self.configuration.timeout)

    def encode(self, notice):
        """
        Serializes ``notice`` into UTF-8 bytes.
        """
        return to_xml(notice).encode('utf-8')

    def decode(self, data):
        """
        Unserializes ``data`` into a notice.
        """
        return from_xml(data)

    def build_request(self):
        return Request(self.configuration.server_uri, method='POST', headers={
            'User-Agent': 'brake-python/%s' % (brake.VERSION,),
            'Content-Type': CONTENT_TYPE,
            'Accept': CONTENT_TYPE,
            'Connection': 'close',
        })

    def set_request_body(self, request, notice):
        payload = self.encode(notice)
        self.logger.debug('Sending the following to %r:\n%s',
                          request.url, payload)
        request.write(payload)

    def send(self, exception):
        """
        Builds a notice for ``exception`` and sends it.
        """
        try:
            notice = self.builder.build_notice(exception)
        except Exception:
            self.error_logger.critical(
                'An error occurred while building the notice', exc_info=True)
            return
        self.send_notice(notice)

    def capture_exception(self, exc_info=None, cgi_data=None,
                          session_data=None):
        """
        Sends a notice for an exception.

        >>> try:
        >>>     exc_info = sys.exc_info()
        >>>     client.capture_exception(exc_info)
        >>> finally:
        >>>     del exc_info

        If exc_info is not provided, or is set to True, then this method will
        perform the ``exc_info = sys.exc_info()`` and the requisite clean-up
        for you. An exception instance is accepted as well.
        """
        if exc_info is None or exc_info is True:
            exc_info = sys.exc_info()

        try:
            if isinstance(exc_info, tuple):
                exception = exc_info[1]
            else:
                exception = exc_info

            if exception is None:
                self.logger.warning('No exception found to capture')
                return

            notice = self.builder.build_notice(
                exception, cgi_data=cgi_data, session_data=session_data)
            self.send_notice(notice)
        except Exception:
            self.error_logger.critical(
                'An error occurred while capturing the exception',
                exc_info=True)
        finally:
            del exc_info

    def send_notice(self, notice):
        """
        Sends ``notice`` to the configured service and returns as soon as the
        request has been handed to the transport. Never raises.
        """
        self.logger.debug('%s.send_notice(%r)', type(self).__name__, notice)

        try:
            self._send_notice(notice)
        except Exception:
            self.error_logger.critical(
                'An error occurred while trying to send the notice',
                exc_info=True)

    def _send_notice(self, notice):
        if not notice.api_key:
            # raising here is pointless, the caller is already handling one
            if not self.configuration.api_key:
                self.logger.critical(
                    'No API key found. Set BRAKE_API_KEY or pass api_key to'
                    ' Configuration.')
                return
            notice.api_key = self.configuration.api_key

        if not notice.errors:
            self.logger.critical('Not sending a notice without any error')
            return

        environment_name = notice.server_environment.environment_name
        if self.configuration.is_development(environment_name):
            self.logger.warning(
                'Not sending notice since [%s] is configured as a development'
                ' environment', environment_name)
            return

        try:
            transport = self.get_transport()
        except ValueError as e:
            self.logger.critical("Couldn't create a request to %r: %s",
                                 self.configuration.server_uri, e)
            return

        request = self.build_request()
        self.set_request_body(request, notice)

        if transport.is_async:
            transport.async_send(request, self._request_callback)
            return

        try:
            response, body = transport.send(request)
        except Exception as e:
            self._request_callback(
                request, response=getattr(e, 'response', None), error=e)
        else:
            self._request_callback(request, response=response, body=body)

    def _request_callback(self, request, response=None, body='', error=None):
        self.logger.debug('%s._request_callback(%r)',
                          type(self).__name__, request)

        if error is not None:
            self.error_logger.error(
                'An error occurred while retrieving the response from %s: %s',
                request.url, error, exc_info=error)

        if response is None:
            self.error_logger.critical('No response received!')
        else:
            self.process_response(request, response, body)

        self.on_request_end(request, response, body or '')

    def process_response(self, request, response, body):
        self.logger.debug('Received from %s.\n%s', request.url, body)

        status = get_status(response)
        if status is not None and not 200 <= status < 300:
            self.error_logger.error(
                'Unable to submit notice to %s: HTTP %s (body: %s)',
                request.url, status, (body or '')[:200])
            return

        info = parse_response(body)
        if info.get('id'):
            self.logger.info('Notice %s recorded at %s',
                             info['id'], info.get('url', request.url))

    def on_request_end(self, request, response, body):
        try:
            self.request_ended.send(
                self, request=request, response=response, body=body)
        except Exception:
            self.error_logger.error('A request_ended receiver failed',
                                    exc_info=True)

    def wait(self, timeout=None):
        """
        Blocks until notices already handed to the transport have been sent,
        or ``timeout`` seconds have passed.
        """
        try:
            transport = self.get_transport()
        except ValueError:
            return True
        if not hasattr(transport, 'wait'):
            return True
        return transport.wait(timeout)


def notify(exception, cgi_data=None, client=None, session_data=None):
    """
    Reports ``exception`` with optional CGI and session data through
    ``client``, or a client configured from the environment.

    >>> try:
    >>>     charge(order)
    >>> except PaymentError as exc:
    >>>     brake.notify(exc, {'order': order.id})
    """
    if client is None:
        client = Client()
    try:
        notice = client.builder.build_notice(
            exception, cgi_data=cgi_data, session_data=session_data)
    except Exception:
        client.error_logger.critical(
            'An error occurred while building the notice', exc_info=True)
        return
    client.send_notice(notice)

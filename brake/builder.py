"""
brake.builder
~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging

import brake
from brake.conf import Configuration, defaults
from brake.models import (
    IP_ADDRESS_KEY, ErrorEntry, KeyValuePair, Notice, Notifier,
    RequestContext, ServerEnvironment, to_pairs)
from brake.utils.encoding import to_unicode
from brake.utils.net import get_host_address
from brake.utils.stacks import (
    get_backtrace, get_culprit, get_exception_message, get_exception_name,
    iter_exception_chain, iter_stack_frames, iter_traceback_frames)

__all__ = ('NoticeBuilder',)


class NoticeBuilder(object):
    """
    Turns exceptions into :class:`~brake.models.Notice` instances.

    None of the ``build_*`` methods raise: whatever goes wrong while
    inspecting the exception or the host is logged and the notice is built
    from what could be gathered.

    >>> builder = NoticeBuilder(Configuration(api_key='abc123'))
    >>> try:
    >>>     1/0
    >>> except ZeroDivisionError as exc:
    >>>     notice = builder.build_notice(exc, cgi_data={'HTTP_HOST': 'example.com'})
    """

    def __init__(self, configuration=None, resolve_address=None):
        if configuration is None:
            configuration = Configuration()
        self.configuration = configuration
        self.resolve_address = resolve_address or get_host_address
        self.logger = logging.getLogger(__name__)

    def get_notifier(self):
        return Notifier(
            name=defaults.NOTIFIER_NAME,
            version=brake.VERSION,
            url=defaults.NOTIFIER_URL,
        )

    def get_server_environment(self):
        c = self.configuration
        return ServerEnvironment(
            project_root=c.project_root,
            environment_name=c.environment_name,
            app_version=c.app_version,
            hostname=c.hostname,
        )

    def get_error(self, exc):
        tb = getattr(exc, '__traceback__', None)
        return ErrorEntry(
            type=get_exception_name(exc),
            message=get_exception_message(exc),
            backtrace=get_backtrace(iter_traceback_frames(tb)),
        )

    def get_errors(self, exception):
        return [self.get_error(exc) for exc in iter_exception_chain(exception)]

    def get_cgi_data(self, cgi_data=None):
        pairs = to_pairs(cgi_data)
        if any(pair.key == IP_ADDRESS_KEY for pair in pairs):
            return pairs

        try:
            address = self.resolve_address()
        except Exception:
            self.logger.warning('Unable to resolve the host address',
                                exc_info=True)
            address = None

        if address:
            pairs.append(KeyValuePair(IP_ADDRESS_KEY, to_unicode(address)))
        return pairs

    def _build(self, errors, cgi_data, session_data, params, url,
               component='', action=''):
        try:
            cgi_data = self.get_cgi_data(cgi_data)
        except Exception:
            self.logger.exception('Unable to read CGI data')
            cgi_data = self.get_cgi_data(None)

        try:
            session_data = to_pairs(session_data)
        except Exception:
            self.logger.exception('Unable to read session data')
            session_data = []

        try:
            params = to_pairs(params)
        except Exception:
            self.logger.exception('Unable to read request params')
            params = []

        return Notice(
            api_key=self.configuration.api_key,
            notifier=self.get_notifier(),
            errors=errors,
            request=RequestContext(
                url=to_unicode(url),
                component=component,
                action=action,
                params=params,
                session=session_data,
                cgi_data=cgi_data,
            ),
            server_environment=self.get_server_environment(),
        )

    def build_notice(self, exception, cgi_data=None, session_data=None,
                     params=None, url=None):
        """
        Builds a notice for ``exception`` and every exception in its cause
        chain, outermost first.

        ``cgi_data``, ``session_data`` and ``params`` may be mappings or
        iterables of ``(key, value)`` pairs; their order is kept. Unless
        ``cgi_data`` already has an ``Environment.IpAddress`` entry, one is
        appended with this host's address.
        """
        try:
            errors = self.get_errors(exception)
        except Exception:
            self.logger.exception('Unable to inspect %r', type(exception))
            errors = [ErrorEntry(
                type=to_unicode(type(exception).__name__),
                message=to_unicode(exception),
            )]

        try:
            component, action = get_culprit(
                getattr(exception, '__traceback__', None))
        except Exception:
            self.logger.exception('Unable to find the raising frame')
            component, action = '', ''

        return self._build(errors, cgi_data, session_data, params, url,
                           component=component, action=action)

    def build_notice_from_message(self, error_class, message, cgi_data=None,
                                  session_data=None, backtrace=None,
                                  component='', action=''):
        """
        Builds a notice for an error that has no exception object. The
        backtrace defaults to the caller's stack.
        """
        if backtrace is None:
            try:
                backtrace = get_backtrace(iter_stack_frames())
            except Exception:
                self.logger.exception('Unable to walk the current stack')
                backtrace = []

        error = ErrorEntry(
            type=to_unicode(error_class),
            message=to_unicode(message),
            backtrace=backtrace,
        )
        return self._build([error], cgi_data, session_data, None, None,
                           component=to_unicode(component),
                           action=to_unicode(action))

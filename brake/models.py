"""
brake.models
~~~~~~~~~~~~

In-memory representation of a notice.

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from collections import namedtuple
from collections.abc import Mapping

from brake.utils.encoding import to_unicode

__all__ = ('KeyValuePair', 'BacktraceLine', 'ErrorEntry', 'RequestContext',
           'ServerEnvironment', 'Notifier', 'Notice', 'to_pairs',
           'IP_ADDRESS_KEY')

# Reserved CGI data key holding the reporting host's address
IP_ADDRESS_KEY = 'Environment.IpAddress'

KeyValuePair = namedtuple('KeyValuePair', ('key', 'value'))

BacktraceLine = namedtuple('BacktraceLine', ('file', 'number', 'method'))


def to_pairs(data):
    """
    Coerces a mapping, or an iterable of ``(key, value)`` pairs, into a list
    of :class:`KeyValuePair` keeping the caller's order.

    >>> to_pairs({'key1': 'value1'})
    [KeyValuePair(key='key1', value='value1')]
    """
    if not data:
        return []
    if isinstance(data, Mapping):
        data = data.items()
    return [KeyValuePair(to_unicode(k), to_unicode(v)) for k, v in data]


class Model(object):
    fields = ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self.fields)

    __hash__ = None

    def __repr__(self):
        return '<%s: %s>' % (type(self).__name__, ', '.join(
            '%s=%r' % (f, getattr(self, f)) for f in self.fields))


class ErrorEntry(Model):
    """
    One link of an exception chain.

    - type: 'module.ClassName'
    - message: 'ClassName: my exception value'
    - backtrace: a list of :class:`BacktraceLine`, oldest call first
    """
    fields = ('type', 'message', 'backtrace')

    def __init__(self, type='', message='', backtrace=None):
        self.type = type
        self.message = message
        self.backtrace = list(backtrace or ())


class RequestContext(Model):
    fields = ('url', 'component', 'action', 'params', 'session', 'cgi_data')

    def __init__(self, url='', component='', action='', params=None,
                 session=None, cgi_data=None):
        self.url = url
        self.component = component
        self.action = action
        self.params = to_pairs(params)
        self.session = to_pairs(session)
        self.cgi_data = to_pairs(cgi_data)


class ServerEnvironment(Model):
    fields = ('project_root', 'environment_name', 'app_version', 'hostname')

    def __init__(self, project_root='', environment_name='', app_version='',
                 hostname=''):
        self.project_root = project_root
        self.environment_name = environment_name
        self.app_version = app_version
        self.hostname = hostname


class Notifier(Model):
    fields = ('name', 'version', 'url')

    def __init__(self, name='', version='', url=''):
        self.name = name
        self.version = version
        self.url = url


class Notice(Model):
    """
    A single error report. Built per send attempt and discarded once the
    exchange with the remote service is over; the client only ever fills in
    ``api_key``.
    """
    fields = ('api_key', 'notifier', 'errors', 'request', 'server_environment')

    def __init__(self, api_key='', notifier=None, errors=None, request=None,
                 server_environment=None):
        self.api_key = api_key
        self.notifier = notifier or Notifier()
        self.errors = list(errors or ())
        self.request = request or RequestContext()
        self.server_environment = server_environment or ServerEnvironment()

    def __repr__(self):
        if self.errors:
            return '<%s: %s>' % (type(self).__name__, self.errors[0].message)
        return '<%s>' % (type(self).__name__,)

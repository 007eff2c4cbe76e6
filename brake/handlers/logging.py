"""
brake.handlers.logging
~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import sys
import traceback

from brake.base import Client
from brake.conf import Configuration
from brake.models import BacktraceLine
from brake.utils.encoding import to_string


class BrakeHandler(logging.Handler, object):
    """
    Reports log records through a :class:`~brake.base.Client`. Records with
    ``exc_info`` are reported with their exception chain, others as a
    message notice whose backtrace is the logging call site.

    CGI data may be attached with ``extra={'cgi_data': {...}}``.
    """

    def __init__(self, client=None, level=logging.NOTSET):
        if client is None:
            client = Client()
        elif isinstance(client, Configuration):
            client = Client(client)
        elif not isinstance(client, Client):
            raise ValueError(
                'The first argument to %s must be either a Client or a'
                ' Configuration instance, got %r instead.' % (
                    self.__class__.__name__, client))
        self.client = client

        logging.Handler.__init__(self, level=level)

    def can_record(self, record):
        return not (
            record.name == 'brake' or record.name.startswith('brake.')
        )

    def emit(self, record):
        try:
            self.format(record)

            # Avoid typical config issues by overriding loggers behavior
            if not self.can_record(record):
                print(to_string(record.message), file=sys.stderr)
                return

            return self._emit(record)
        except Exception:
            print('Top level Brake exception caught - failed creating log'
                  ' record', file=sys.stderr)
            print(to_string(record.msg), file=sys.stderr)
            print(to_string(traceback.format_exc()), file=sys.stderr)

    def _emit(self, record):
        builder = self.client.builder
        cgi_data = getattr(record, 'cgi_data', None)

        if record.exc_info and record.exc_info[1] is not None:
            notice = builder.build_notice(record.exc_info[1],
                                          cgi_data=cgi_data)
        else:
            notice = builder.build_notice_from_message(
                record.levelname,
                record.getMessage(),
                cgi_data=cgi_data,
                backtrace=[BacktraceLine(
                    record.pathname, str(record.lineno), record.funcName)],
                component=record.name,
                action=record.funcName,
            )

        self.client.send_notice(notice)

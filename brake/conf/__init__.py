"""
brake.conf
~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import os

from brake.conf import defaults
from brake.exceptions import InvalidConfiguration

__all__ = ('Configuration', 'setup_logging')

EXCLUDE_LOGGER_DEFAULTS = (
    'brake',
    'brake.errors',
)


class Configuration(object):
    """
    Settings shared by the notice builder and the client.

    >>> from brake import Configuration

    >>> # Read configuration from ``BRAKE_*`` environment variables
    >>> configuration = Configuration.from_environ()

    >>> # Or explicitly
    >>> configuration = Configuration(api_key='abc123', environment_name='staging')
    """

    def __init__(self, api_key=None, server_uri=None, environment_name=None,
                 app_version=None, development_environments=None,
                 project_root=None, hostname=None, timeout=None):
        self.api_key = api_key or ''
        self.server_uri = server_uri or defaults.SERVER_URI
        self.environment_name = environment_name or defaults.ENVIRONMENT_NAME
        self.app_version = app_version or ''
        if development_environments is None:
            development_environments = defaults.DEVELOPMENT_ENVIRONMENTS
        self.development_environments = frozenset(
            e for e in development_environments if e)
        self.project_root = project_root or ''
        self.hostname = hostname or defaults.NAME or ''
        self.timeout = timeout or defaults.TIMEOUT

    def __repr__(self):
        return '<%s: %s (%s)>' % (
            type(self).__name__, self.server_uri, self.environment_name)

    def is_development(self, environment_name):
        """
        Returns ``True`` when notices from ``environment_name`` should not be
        sent.
        """
        if not environment_name:
            return False
        environment_name = environment_name.lower()
        return any(e.lower() == environment_name
                   for e in self.development_environments)

    @classmethod
    def from_environ(cls, environ=None):
        """
        Builds a configuration from ``BRAKE_*`` variables in ``environ``
        (defaults to ``os.environ``).
        """
        if environ is None:
            environ = os.environ

        timeout = environ.get('BRAKE_TIMEOUT')
        if timeout:
            try:
                timeout = float(timeout)
            except ValueError:
                raise InvalidConfiguration(
                    'Invalid BRAKE_TIMEOUT: %r' % (timeout,))
            if timeout <= 0:
                raise InvalidConfiguration(
                    'BRAKE_TIMEOUT must be positive, got %r' % (timeout,))

        development_environments = environ.get('BRAKE_DEVELOPMENT_ENVIRONMENTS')
        if development_environments is not None:
            development_environments = [
                e.strip() for e in development_environments.split(',')]

        return cls(
            api_key=environ.get('BRAKE_API_KEY'),
            server_uri=environ.get('BRAKE_SERVER_URI'),
            environment_name=environ.get('BRAKE_ENVIRONMENT'),
            app_version=environ.get('BRAKE_APP_VERSION'),
            development_environments=development_environments,
            project_root=environ.get('BRAKE_PROJECT_ROOT'),
            hostname=environ.get('BRAKE_HOSTNAME'),
            timeout=timeout or None,
        )


def setup_logging(handler, exclude=EXCLUDE_LOGGER_DEFAULTS):
    """
    Configures logging to pipe to the error service.

    - ``exclude`` is a list of loggers that shouldn't be reported.

    >>> from brake.handlers.logging import BrakeHandler
    >>> client = Client(...)
    >>> setup_logging(BrakeHandler(client))

    Returns a boolean based on if logging was configured or not.
    """
    logger = logging.getLogger()
    if handler.__class__ in map(type, logger.handlers):
        return False

    logger.addHandler(handler)

    # Add StreamHandler to brake's default so you can catch missed exceptions
    for logger_name in exclude:
        logger = logging.getLogger(logger_name)
        logger.propagate = False
        logger.addHandler(logging.StreamHandler())

    return True

"""
brake.utils.net
~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import socket

logger = logging.getLogger('brake.errors')


def get_host_address(hostname=None):
    """
    Returns the first IPv4 address ``hostname`` (defaults to this host)
    resolves to, falling back to the first IPv6 one. Returns ``None`` when
    the name cannot be resolved.
    """
    try:
        if hostname is None:
            hostname = socket.gethostname()
        addresses = socket.getaddrinfo(hostname, None)
    except (OSError, UnicodeError) as e:
        logger.debug('Unable to resolve %r: %s', hostname, e)
        return None

    for family in (socket.AF_INET, getattr(socket, 'AF_INET6', None)):
        for info in addresses:
            if family is not None and info[0] == family:
                return info[4][0]
    return None

"""
brake
~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'Configuration', 'NoticeBuilder', 'notify')

VERSION = '1.0.0'

from brake.base import *  # NOQA
from brake.builder import NoticeBuilder  # NOQA
from brake.conf import *  # NOQA

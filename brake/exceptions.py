"""
brake.exceptions
~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class InvalidConfiguration(ValueError):
    """
    Raised when a configuration value read from the environment cannot be
    parsed.
    """

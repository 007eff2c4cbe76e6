"""
brake.conf.defaults
~~~~~~~~~~~~~~~~~~~

Represents the default values for all Brake settings.

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import socket

# This should be the full URL to the notices endpoint
SERVER_URI = 'https://api.airbrake.io/notifier_api/v2/notices'

# Seconds to wait on the remote service before giving up on a notice
TIMEOUT = 10

# Not all environments have access to socket module, for example Google App Engine
# Need to check to see if the socket module has ``gethostname``, if it doesn't we
# will set it to None and require it passed in to ``Configuration``.
NAME = socket.gethostname() if hasattr(socket, 'gethostname') else None

ENVIRONMENT_NAME = 'production'

# Environment names (compared case-insensitively) whose notices are never sent
DEVELOPMENT_ENVIRONMENTS = ()

# Identity of this library, reported in the <notifier> block of every notice
NOTIFIER_NAME = 'brake-python'
NOTIFIER_URL = 'https://pypi.org/project/brake/'

# Version of the notice document schema
NOTICE_VERSION = '2.3'

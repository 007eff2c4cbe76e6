import logging

import pytest

from brake.conf import Configuration, defaults, setup_logging
from brake.exceptions import InvalidConfiguration
from brake.handlers.logging import BrakeHandler
from brake.utils.testutils import InMemoryClient, TestCase


class ConfigurationTest(TestCase):
    def test_defaults(self):
        configuration = Configuration()
        assert configuration.api_key == ''
        assert configuration.server_uri == defaults.SERVER_URI
        assert configuration.environment_name == defaults.ENVIRONMENT_NAME
        assert configuration.timeout == defaults.TIMEOUT
        assert configuration.development_environments == frozenset()

    def test_development_environments_ignore_case(self):
        configuration = Configuration(development_environments=['Development', 'test'])
        assert configuration.is_development('development')
        assert configuration.is_development('TEST')
        assert not configuration.is_development('production')

    def test_blank_environment_is_never_development(self):
        configuration = Configuration(development_environments=['', 'test'])
        assert not configuration.is_development('')
        assert not configuration.is_development(None)


class FromEnvironTest(TestCase):
    def test_reads_variables(self):
        configuration = Configuration.from_environ({
            'BRAKE_API_KEY': 'abc123',
            'BRAKE_SERVER_URI': 'https://errors.example.com/notifier_api/v2/notices',
            'BRAKE_ENVIRONMENT': 'staging',
            'BRAKE_APP_VERSION': '1.2.3',
            'BRAKE_PROJECT_ROOT': '/srv/app',
            'BRAKE_HOSTNAME': 'web-1',
            'BRAKE_DEVELOPMENT_ENVIRONMENTS': 'development, test,',
            'BRAKE_TIMEOUT': '2.5',
        })
        assert configuration.api_key == 'abc123'
        assert configuration.server_uri == 'https://errors.example.com/notifier_api/v2/notices'
        assert configuration.environment_name == 'staging'
        assert configuration.app_version == '1.2.3'
        assert configuration.project_root == '/srv/app'
        assert configuration.hostname == 'web-1'
        assert configuration.development_environments == frozenset(['development', 'test'])
        assert configuration.timeout == 2.5

    def test_empty_environ_gives_defaults(self):
        configuration = Configuration.from_environ({})
        assert configuration.api_key == ''
        assert configuration.server_uri == defaults.SERVER_URI
        assert configuration.timeout == defaults.TIMEOUT

    def test_invalid_timeout(self):
        with pytest.raises(InvalidConfiguration):
            Configuration.from_environ({'BRAKE_TIMEOUT': 'soon'})

    def test_negative_timeout(self):
        with pytest.raises(InvalidConfiguration):
            Configuration.from_environ({'BRAKE_TIMEOUT': '-1'})


class SetupLoggingTest(TestCase):
    def test_adds_handler_once(self):
        handler = BrakeHandler(InMemoryClient(Configuration()))
        root = logging.getLogger()
        excluded = logging.getLogger('tests.conf.excluded')
        try:
            assert setup_logging(handler, exclude=('tests.conf.excluded',))
            assert handler in root.handlers
            assert excluded.propagate is False
            assert not setup_logging(handler, exclude=())
        finally:
            root.removeHandler(handler)
            excluded.propagate = True
            excluded.handlers = []

import logging

import pytest


@pytest.fixture(autouse=True)
def propagate_brake_logs():
    # let caplog see brake's records even once a client added its handler
    logger = logging.getLogger('brake')
    propagate = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = propagate

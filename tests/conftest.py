"""Shared fixtures for logger tests"""

import pytest

from leveled_logger.core.dispatcher import Dispatcher


@pytest.fixture
def dispatcher():
    """Private dispatcher so tests do not share a worker queue."""
    d = Dispatcher(name="test-dispatch")
    yield d
    d.shutdown()

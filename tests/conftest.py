"""Test configuration for pytest."""

import logging
import os
import pytest
from hypothesis import HealthCheck, settings

from ouroboros.guards import (
    GuardRegistry,
    OutermostRecursionDetector,
    PairRecursionDetector,
    SimpleGuard,
    current_store,
)

# Guard state is per thread and restored after every call, so reusing
# function-scoped fixtures across generated examples is safe.
settings.register_profile("ouroboros", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("ouroboros")


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['OUROBOROS_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['ouroboros.guards.pair', 'ouroboros.guards.outermost']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)


@pytest.fixture(autouse=True)
def default_store_left_clean():
    """Every test must leave the shared guard store of this thread untouched."""
    yield
    assert current_store().is_clean()


@pytest.fixture
def registry():
    return GuardRegistry()


@pytest.fixture
def pair_detector(registry):
    return PairRecursionDetector(registry)


@pytest.fixture
def outermost_detector(pair_detector):
    return OutermostRecursionDetector(pair_detector)


@pytest.fixture
def simple_guard(registry):
    return SimpleGuard(registry)

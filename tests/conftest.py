import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep logging configuration from leaking between tests"""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
